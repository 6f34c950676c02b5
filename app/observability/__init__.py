# -*- coding: utf-8 -*-
"""
backend/app/observability/__init__.py

Métricas Prometheus de la aplicación.
"""
