# -*- coding: utf-8 -*-
"""
backend/app/modules/audit/repositories/__init__.py
"""

from .audit_repository import AuditRepository

__all__ = ["AuditRepository"]
