# -*- coding: utf-8 -*-
"""
backend/app/modules/administrators/schemas/administrator_schemas.py

Schemas de administradores y del perfil del usuario conectado.

Autor: Ixchel Beristain
Fecha: 26/09/2026
"""

from typing import Optional

from pydantic import AliasChoices, Field

from app.shared.utils.base_models import RequestModel, UTF8SafeModel


# ========== REQUESTS ==========

class AdministratorCreateRequest(RequestModel):
    cedula: Optional[str] = None
    nombre_completo: Optional[str] = None
    correo: Optional[str] = None
    password: Optional[str] = Field(
        None, validation_alias=AliasChoices("password", "contraseña", "contrasena")
    )


class AdministratorUpdateRequest(RequestModel):
    cedula: Optional[str] = None
    nombre_completo: Optional[str] = None
    correo: Optional[str] = None


class AdministratorDeleteRequest(RequestModel):
    """Motivo opcional de la baja; solo se usa en la bitácora."""
    mensaje_eliminacion: Optional[str] = Field(
        None, validation_alias=AliasChoices("mensajeEliminacion", "mensaje_eliminacion")
    )


class ProfileUpdateRequest(RequestModel):
    nombre_completo: Optional[str] = None
    correo: Optional[str] = None
    cedula: Optional[str] = None
    contrasena: Optional[str] = Field(
        None, validation_alias=AliasChoices("contraseña", "contrasena", "password")
    )
    nombre_usuario: Optional[str] = None


# ========== RESPONSES ==========

class AdministratorOut(UTF8SafeModel):
    id_administrador: int
    cedula: str
    nombre_completo: str
    correo: str
    id_login: Optional[int] = None
    activo: bool


class ProfileOut(UTF8SafeModel):
    """Datos del perfil; la contraseña nunca sale del servidor."""
    id_login: Optional[int] = None
    nombre_completo: str
    correo: str
    cedula: str
    nombre_usuario: Optional[str] = None


__all__ = [
    "AdministratorCreateRequest",
    "AdministratorUpdateRequest",
    "AdministratorDeleteRequest",
    "ProfileUpdateRequest",
    "AdministratorOut",
    "ProfileOut",
]
# Fin del archivo backend/app/modules/administrators/schemas/administrator_schemas.py
