# -*- coding: utf-8 -*-
"""
backend/app/modules/auth/schemas/auth_schemas.py

Schemas Pydantic de autenticación y recuperación de contraseña.

Los campos llegan opcionales: los servicios validan los obligatorios
para responder con el mensaje exacto que espera el panel.

Autor: Ixchel Beristain
Fecha: 23/09/2026
"""

from typing import Optional

from pydantic import AliasChoices, Field

from app.shared.utils.base_models import RequestModel, UTF8SafeModel


# ========== REQUESTS ==========

class RegisterRequest(RequestModel):
    """Petición de registro de credenciales"""
    correo: Optional[str] = None
    contrasena: Optional[str] = Field(
        None, validation_alias=AliasChoices("contraseña", "contrasena", "password")
    )
    rol: Optional[str] = None


class LoginRequest(RequestModel):
    """Petición de inicio de sesión"""
    correo: Optional[str] = None
    contrasena: Optional[str] = Field(
        None, validation_alias=AliasChoices("contraseña", "contrasena", "password")
    )


class RecoveryRequest(RequestModel):
    """Solicitud de código de recuperación / correo de activación"""
    correo: Optional[str] = None


class VerifyCodeRequest(RequestModel):
    correo: Optional[str] = None
    codigo: Optional[str] = None


class ResetPasswordRequest(RequestModel):
    correo: Optional[str] = None
    password: Optional[str] = Field(
        None, validation_alias=AliasChoices("password", "contraseña", "contrasena")
    )
    reset_token: Optional[str] = Field(
        None, validation_alias=AliasChoices("reset_token", "resetToken", "token")
    )


# ========== RESPONSES ==========

class LoginUserOut(UTF8SafeModel):
    id_login: int
    correo: str
    rol: Optional[str] = None


class RegisteredUserOut(LoginUserOut):
    estado_login: Optional[str] = None


__all__ = [
    "RegisterRequest",
    "LoginRequest",
    "RecoveryRequest",
    "VerifyCodeRequest",
    "ResetPasswordRequest",
    "LoginUserOut",
    "RegisteredUserOut",
]
# Fin del archivo backend/app/modules/auth/schemas/auth_schemas.py
