# -*- coding: utf-8 -*-
"""
backend/app/modules/projects/repositories/__init__.py
"""

from .project_repository import ProjectRepository

__all__ = ["ProjectRepository"]
