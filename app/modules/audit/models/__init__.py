# -*- coding: utf-8 -*-
"""
backend/app/modules/audit/models/__init__.py
"""

from .bitacora_models import AuditEntry

__all__ = ["AuditEntry"]
