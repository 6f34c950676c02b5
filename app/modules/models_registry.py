# -*- coding: utf-8 -*-
"""
backend/app/modules/models_registry.py

Importa todos los modelos ORM para que queden registrados en
Base.metadata (create_all en tests, resolución de relaciones por nombre).

Autor: Ixchel Beristain
Fecha: 03/10/2026
"""

from app.shared.database.base import Base

from app.modules.auth.models import Login, RecoveryCode  # noqa: F401
from app.modules.audit.models import AuditEntry  # noqa: F401
from app.modules.administrators.models import Administrator  # noqa: F401
from app.modules.academics.models import Carrera, Empresa, Estudiante, Periodo, Tutor  # noqa: F401
from app.modules.projects.models import (  # noqa: F401
    Integrante,
    Pasantia,
    ProyectoInvestigacion,
    ServicioComunitario,
    TrabajoGrado,
)

metadata = Base.metadata

__all__ = ["Base", "metadata"]
# Fin del archivo backend/app/modules/models_registry.py
