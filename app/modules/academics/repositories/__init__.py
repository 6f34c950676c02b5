# -*- coding: utf-8 -*-
"""
backend/app/modules/academics/repositories/__init__.py
"""

from .catalog_repository import CatalogRepository
from .people_repository import PersonRepository, StudentRepository, TutorRepository
from .project_search_repository import ProjectSearchRepository

__all__ = [
    "CatalogRepository",
    "PersonRepository",
    "StudentRepository",
    "TutorRepository",
    "ProjectSearchRepository",
]
