# -*- coding: utf-8 -*-
"""
backend/app/shared/__init__.py

Infraestructura compartida: configuración, base de datos, middlewares,
integraciones (correo) y utilidades.
"""
# Fin del archivo backend/app/shared/__init__.py
