# -*- coding: utf-8 -*-
"""
backend/app/modules/audit/services/__init__.py
"""

from .audit_recorder import (
    AuditEvent,
    AuditRecorder,
    get_audit_recorder,
    ANONYMOUS_USER_NAME,
    UNKNOWN_USER_NAME,
)
from .bitacora_query_service import BitacoraQueryService, get_bitacora_query_service

__all__ = [
    "AuditEvent",
    "AuditRecorder",
    "get_audit_recorder",
    "ANONYMOUS_USER_NAME",
    "UNKNOWN_USER_NAME",
    "BitacoraQueryService",
    "get_bitacora_query_service",
]
