# -*- coding: utf-8 -*-
"""
backend/app/modules/audit/schemas/bitacora_schemas.py

Esquema de salida de la vista de bitácora.

Autor: Ixchel Beristain
Fecha: 22/09/2026
"""

from datetime import datetime
from typing import Optional

from app.shared.utils.base_models import UTF8SafeModel


class AuditEntryOut(UTF8SafeModel):
    id_bitacora: int
    fecha_hora: datetime
    id_login: Optional[int] = None
    nombre_usuario: str
    modulo_afectado: str
    accion_realizada: str
    descripcion_detallada: Optional[str] = None
    registro_afectado_id: Optional[str] = None


__all__ = ["AuditEntryOut"]
