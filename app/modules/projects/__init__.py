# -*- coding: utf-8 -*-
"""
backend/app/modules/projects/__init__.py

Proyectos de servicio comunitario, trabajos de grado, proyectos de
investigación y pasantías: CRUD con baja lógica, eliminados, datos
públicos para PDF y conteos del dashboard.
"""
