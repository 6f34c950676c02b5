# -*- coding: utf-8 -*-
"""
backend/app/routes/__init__.py

Ensamblador principal de ruteadores.

Responsabilidades:
- Incluir el router de health (/health) sin prefijo.
- Montar bajo /api los routers de cada módulo de dominio.

Autor: Ixchel Beristain
Fecha: 03/10/2026
"""

from fastapi import APIRouter

from app.modules.academics.routes import get_academic_routers
from app.modules.administrators.routes import get_administrator_routers
from app.modules.audit.routes import get_audit_routers
from app.modules.auth.routes import get_auth_routers
from app.modules.projects.routes import get_project_routers

from .health_routes import router as health_router

API_PREFIX = "/api"

api = APIRouter(prefix=API_PREFIX)

for _module_routers in (
    get_auth_routers(),
    get_audit_routers(),
    get_administrator_routers(),
    get_academic_routers(),
    get_project_routers(),
):
    for _router in _module_routers:
        api.include_router(_router)

router = APIRouter()

# Health check sin prefijo adicional
router.include_router(health_router)
router.include_router(api)

__all__ = ["router", "api", "API_PREFIX"]

# Fin del archivo backend/app/routes/__init__.py
