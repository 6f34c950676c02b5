# -*- coding: utf-8 -*-
"""
backend/app/modules/auth/repositories/__init__.py
"""

from .login_repository import LoginRepository
from .recovery_code_repository import RecoveryCodeRepository

__all__ = ["LoginRepository", "RecoveryCodeRepository"]
