# -*- coding: utf-8 -*-
"""
backend/app/shared/utils/__init__.py

Exportación de utilidades comunes.

Autor: Ixchel Beristain
Fecha: 17/09/2026
"""

from .base_models import UTF8SafeModel, RequestModel, Field, is_blank, any_blank
from .http_exceptions import (
    ApiException,
    BadRequestException,
    UnauthorizedException,
    NotFoundException,
    ConflictException,
    InternalServerException,
)
from .json_response import UTF8JSONResponse, json_response_utf8, error_response

__all__ = [
    # Base models
    "UTF8SafeModel",
    "RequestModel",
    "Field",
    "is_blank",
    "any_blank",

    # HTTP Exceptions
    "ApiException",
    "BadRequestException",
    "UnauthorizedException",
    "NotFoundException",
    "ConflictException",
    "InternalServerException",

    # Respuestas
    "UTF8JSONResponse",
    "json_response_utf8",
    "error_response",
]
