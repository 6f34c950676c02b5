# -*- coding: utf-8 -*-
"""
backend/app/modules/projects/routes/__init__.py
"""

from fastapi import APIRouter

from .dashboard_routes import router as dashboard_router
from .deleted_routes import detailed_router as deleted_detail_router
from .deleted_routes import router as deleted_router
from .project_routes import build_project_router, project_routers
from .public_routes import router as public_router


def get_project_routers() -> list[APIRouter]:
    return [
        *project_routers,
        deleted_router,
        deleted_detail_router,
        public_router,
        dashboard_router,
    ]


__all__ = ["build_project_router", "get_project_routers"]
