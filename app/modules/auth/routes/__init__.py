# -*- coding: utf-8 -*-
"""
backend/app/modules/auth/routes/__init__.py

Ensambla los routers de sesión y recuperación de contraseña.
"""

from fastapi import APIRouter

from .session_routes import router as session_router
from .recovery_routes import router as recovery_router


def get_auth_routers() -> list[APIRouter]:
    """Devuelve todos los routers listos para montar."""
    return [session_router, recovery_router]

# Fin del archivo backend/app/modules/auth/routes/__init__.py
