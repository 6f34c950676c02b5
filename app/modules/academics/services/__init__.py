# -*- coding: utf-8 -*-
"""
backend/app/modules/academics/services/__init__.py
"""

from .catalog_service import CatalogService, get_catalog_service
from .people_service import (
    PersonService,
    StudentService,
    TutorService,
    get_student_service,
    get_tutor_service,
)

__all__ = [
    "CatalogService",
    "get_catalog_service",
    "PersonService",
    "StudentService",
    "TutorService",
    "get_student_service",
    "get_tutor_service",
]
