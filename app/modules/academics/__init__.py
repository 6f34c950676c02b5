# -*- coding: utf-8 -*-
"""
backend/app/modules/academics/__init__.py

Estudiantes, tutores, catálogos académicos y búsqueda de proyectos.
"""
