# -*- coding: utf-8 -*-
"""
backend/app/modules/administrators/__init__.py

Módulo de administradores y perfil del usuario conectado.
"""
