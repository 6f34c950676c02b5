# -*- coding: utf-8 -*-
"""
backend/app/modules/administrators/schemas/__init__.py
"""

from .administrator_schemas import (
    AdministratorCreateRequest,
    AdministratorDeleteRequest,
    AdministratorOut,
    AdministratorUpdateRequest,
    ProfileOut,
    ProfileUpdateRequest,
)

__all__ = [
    "AdministratorCreateRequest",
    "AdministratorUpdateRequest",
    "AdministratorDeleteRequest",
    "ProfileUpdateRequest",
    "AdministratorOut",
    "ProfileOut",
]
