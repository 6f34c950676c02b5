# -*- coding: utf-8 -*-
"""
backend/app/modules/administrators/services/__init__.py
"""

from .administrator_service import AdministratorService, get_administrator_service
from .profile_service import ProfileService, get_profile_service

__all__ = [
    "AdministratorService",
    "get_administrator_service",
    "ProfileService",
    "get_profile_service",
]
