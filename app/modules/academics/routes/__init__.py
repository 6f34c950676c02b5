# -*- coding: utf-8 -*-
"""
backend/app/modules/academics/routes/__init__.py
"""

from fastapi import APIRouter

from .catalog_routes import router as catalog_router
from .student_routes import router as student_router
from .tutor_routes import router as tutor_router


def get_academic_routers() -> list[APIRouter]:
    return [student_router, tutor_router, catalog_router]
