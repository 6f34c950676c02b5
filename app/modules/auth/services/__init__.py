# -*- coding: utf-8 -*-
"""
backend/app/modules/auth/services/__init__.py
"""

from .auth_service import AuthService, get_auth_service
from .recovery_service import (
    RecoveryService,
    get_recovery_service,
    generate_recovery_code,
    GENERIC_RECOVERY_MESSAGE,
)

__all__ = [
    "AuthService",
    "get_auth_service",
    "RecoveryService",
    "get_recovery_service",
    "generate_recovery_code",
    "GENERIC_RECOVERY_MESSAGE",
]
