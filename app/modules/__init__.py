# -*- coding: utf-8 -*-
"""
backend/app/modules/__init__.py

Módulos de dominio: auth, audit (bitácora), administrators,
academics (estudiantes, tutores, catálogos) y projects.
"""
