# -*- coding: utf-8 -*-
"""
backend/app/modules/audit/routes/__init__.py
"""

from fastapi import APIRouter

from .bitacora_routes import router as bitacora_router


def get_audit_routers() -> list[APIRouter]:
    return [bitacora_router]
