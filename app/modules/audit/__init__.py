# -*- coding: utf-8 -*-
"""
backend/app/modules/audit/__init__.py

Bitácora de acciones administrativas (registro y consulta).
"""
