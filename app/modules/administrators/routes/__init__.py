# -*- coding: utf-8 -*-
"""
backend/app/modules/administrators/routes/__init__.py
"""

from fastapi import APIRouter

from .administrator_routes import router as administrator_router
from .profile_routes import router as profile_router


def get_administrator_routers() -> list[APIRouter]:
    return [administrator_router, profile_router]
