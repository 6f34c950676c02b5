# -*- coding: utf-8 -*-
"""
backend/app/modules/administrators/repositories/__init__.py
"""

from .administrator_repository import AdministratorRepository

__all__ = ["AdministratorRepository"]
