# -*- coding: utf-8 -*-
"""
backend/app/modules/academics/schemas/__init__.py
"""

from .academic_schemas import (
    CarreraOut,
    EmpresaOut,
    PeriodoOut,
    ProjectRefOut,
    StudentListItem,
    StudentOut,
    StudentRequest,
    TutorOut,
    TutorRequest,
)

__all__ = [
    "StudentRequest",
    "TutorRequest",
    "StudentOut",
    "StudentListItem",
    "TutorOut",
    "CarreraOut",
    "PeriodoOut",
    "EmpresaOut",
    "ProjectRefOut",
]
