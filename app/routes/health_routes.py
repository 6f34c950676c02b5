# -*- coding: utf-8 -*-
"""
backend/app/routes/health_routes.py

Endpoint básico de health check.

Autor: Ixchel Beristain
Fecha: 03/10/2026
"""

from fastapi import APIRouter

from app.shared.config import settings
from app.shared.database import check_database_health
from app.shared.utils.time_utils import local_now

router = APIRouter()


@router.get(
    "/health",
    summary="Health check del backend",
    description="Estado básico del backend y verificación simple de conectividad a la base de datos.",
)
async def health_check() -> dict:
    db_ok = await check_database_health(timeout_s=2.0)

    return {
        "status": "ok" if db_ok else "degraded",
        "timestamp": local_now().isoformat(),
        "environment": settings.python_env,
        "database": {
            "reachable": db_ok,
        },
        "service": {
            "name": settings.app_name,
            "version": settings.app_version,
        },
    }

# Fin del archivo backend/app/routes/health_routes.py
