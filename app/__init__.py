# -*- coding: utf-8 -*-
"""
backend/app/__init__.py

Paquete principal del backend del Sistema de Gestión de Proyectos
(servicio comunitario, trabajos de grado, proyectos de investigación
y pasantías).

Autor: Ixchel Beristain
Fecha: 14/09/2026
"""

# Fin del archivo backend/app/__init__.py
