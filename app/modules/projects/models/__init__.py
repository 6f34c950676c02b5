# -*- coding: utf-8 -*-
"""
backend/app/modules/projects/models/__init__.py
"""

from .project_models import (
    Integrante,
    ServicioComunitario,
    TrabajoGrado,
    ProyectoInvestigacion,
    Pasantia,
)

__all__ = [
    "Integrante",
    "ServicioComunitario",
    "TrabajoGrado",
    "ProyectoInvestigacion",
    "Pasantia",
]
