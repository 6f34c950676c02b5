# -*- coding: utf-8 -*-
"""
backend/app/modules/administrators/models/__init__.py
"""

from .administrator_models import Administrator

__all__ = ["Administrator"]
