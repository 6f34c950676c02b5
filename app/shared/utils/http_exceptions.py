# -*- coding: utf-8 -*-
"""
backend/app/shared/utils/http_exceptions.py

Excepciones HTTP de la API del Sistema de Gestión de Proyectos.
El handler global de main.py las serializa como {"error": <mensaje>}.

Autor: Ixchel Beristain
Fecha: 15/09/2026
"""

from fastapi import HTTPException, status
from typing import Any, Dict, Optional


class ApiException(HTTPException):
    """Base común: cada subclase fija su código HTTP y un mensaje por defecto."""

    status_code_default: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail: str = "Error interno del servidor."

    def __init__(
        self,
        detail: Optional[str] = None,
        headers: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            status_code=self.status_code_default,
            detail=detail or self.default_detail,
            headers=headers,
        )


class BadRequestException(ApiException):
    """400 - Faltan campos o los datos no son válidos"""
    status_code_default = status.HTTP_400_BAD_REQUEST
    default_detail = "Solicitud inválida."


class UnauthorizedException(ApiException):
    """401 - Credenciales inválidas"""
    status_code_default = status.HTTP_401_UNAUTHORIZED
    default_detail = "Credenciales inválidas."


class NotFoundException(ApiException):
    """404 - Recurso no encontrado"""
    status_code_default = status.HTTP_404_NOT_FOUND
    default_detail = "Recurso no encontrado."


class ConflictException(ApiException):
    """409 - El recurso ya existe"""
    status_code_default = status.HTTP_409_CONFLICT
    default_detail = "El recurso ya existe."


class InternalServerException(ApiException):
    """500 - Error interno del servidor"""


__all__ = [
    "ApiException",
    "BadRequestException",
    "UnauthorizedException",
    "NotFoundException",
    "ConflictException",
    "InternalServerException",
]
# Fin del archivo backend/app/shared/utils/http_exceptions.py
