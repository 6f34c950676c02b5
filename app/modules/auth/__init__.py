# -*- coding: utf-8 -*-
"""
backend/app/modules/auth/__init__.py

Credenciales (`login`), sesión y recuperación de contraseña.
"""
