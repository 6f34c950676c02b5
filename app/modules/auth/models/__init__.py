# -*- coding: utf-8 -*-
"""
backend/app/modules/auth/models/__init__.py
"""

from .login_models import Login
from .recovery_code_models import RecoveryCode

__all__ = ["Login", "RecoveryCode"]
