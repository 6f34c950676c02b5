# -*- coding: utf-8 -*-
"""
backend/app/modules/academics/models/__init__.py
"""

from .catalog_models import Carrera, Periodo, Empresa
from .people_models import Estudiante, Tutor

__all__ = ["Carrera", "Periodo", "Empresa", "Estudiante", "Tutor"]
