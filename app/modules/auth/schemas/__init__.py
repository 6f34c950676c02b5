# -*- coding: utf-8 -*-
"""
backend/app/modules/auth/schemas/__init__.py
"""

from .auth_schemas import *  # noqa: F401,F403
from .auth_schemas import __all__  # noqa: F401
