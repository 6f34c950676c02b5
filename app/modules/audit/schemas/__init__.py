# -*- coding: utf-8 -*-
"""
backend/app/modules/audit/schemas/__init__.py
"""

from .bitacora_schemas import AuditEntryOut

__all__ = ["AuditEntryOut"]
