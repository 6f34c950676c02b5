# -*- coding: utf-8 -*-
"""
backend/app/modules/audit/models/bitacora_models.py

Modelo ORM de la bitácora (tabla `bitacora`): registro inmutable de
acciones administrativas. La aplicación solo inserta y lee; nunca
actualiza ni borra filas.

Autor: Ixchel Beristain
Fecha: 20/09/2026
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.shared.database.base import Base


class AuditEntry(Base):
    __tablename__ = "bitacora"

    id_bitacora: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    fecha_hora: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, index=True)
    # Sin FK: las acciones anónimas guardan NULL y los logins pueden desaparecer
    id_login: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    nombre_usuario: Mapped[str] = mapped_column(String(255), nullable=False)
    modulo_afectado: Mapped[str] = mapped_column(String(100), nullable=False)
    accion_realizada: Mapped[str] = mapped_column(String(150), nullable=False)
    descripcion_detallada: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    registro_afectado_id: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)

    def __repr__(self) -> str:
        return (
            f"<AuditEntry id={self.id_bitacora} modulo={self.modulo_afectado!r} "
            f"accion={self.accion_realizada!r}>"
        )


__all__ = ["AuditEntry"]
# Fin del archivo backend/app/modules/audit/models/bitacora_models.py
