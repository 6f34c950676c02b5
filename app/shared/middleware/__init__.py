# -*- coding: utf-8 -*-
"""
backend/app/shared/middleware/__init__.py

Módulo de middlewares compartidos.
"""

from .exception_handler import JSONExceptionMiddleware, get_request_id
from .request_logging import RequestLoggingMiddleware
from .current_user import CurrentUserMiddleware, get_current_user_id, SESSION_USER_KEY

__all__ = [
    "JSONExceptionMiddleware",
    "get_request_id",
    "RequestLoggingMiddleware",
    "CurrentUserMiddleware",
    "get_current_user_id",
    "SESSION_USER_KEY",
]
