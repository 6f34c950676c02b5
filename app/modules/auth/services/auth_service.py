# -*- coding: utf-8 -*-
"""
backend/app/modules/auth/services/auth_service.py

Registro de credenciales e inicio de sesión.

La sesión (cookie firmada) la escribe la ruta; este servicio solo
valida credenciales y devuelve los datos públicos del usuario. La
contraseña se guarda siempre como hash bcrypt y nunca se devuelve.

Autor: Ixchel Beristain
Fecha: 24/09/2026
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import Depends
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.audit.services import AuditRecorder, get_audit_recorder
from app.modules.auth.repositories import LoginRepository
from app.modules.auth.schemas import LoginRequest, LoginUserOut, RegisteredUserOut, RegisterRequest
from app.observability.prom import LOGIN_ATTEMPTS
from app.shared.database.database import get_async_session
from app.shared.utils.base_models import any_blank
from app.shared.utils.http_exceptions import (
    ApiException,
    BadRequestException,
    ConflictException,
    InternalServerException,
    UnauthorizedException,
)
from app.shared.utils.security import hash_password, verify_password

logger = logging.getLogger(__name__)

AUDIT_MODULE = "Autenticación"
GENERIC_ERROR = "Error interno del servidor."


class AuthService:
    def __init__(self, db: AsyncSession, audit: AuditRecorder) -> None:
        self._db = db
        self._logins = LoginRepository(db)
        self._audit = audit

    async def register(self, payload: RegisterRequest, *, actor_id: Optional[int] = None) -> dict:
        if any_blank(payload.correo, payload.contrasena, payload.rol):
            raise BadRequestException("Faltan campos obligatorios: correo, contraseña, rol.")

        correo = payload.correo.strip()
        try:
            if await self._logins.exists_correo(correo):
                await self._db.rollback()
                await self._audit(
                    AUDIT_MODULE, "Intento de Registro Fallido",
                    f"El correo {correo} ya está registrado.", id_login=actor_id,
                )
                raise ConflictException("El correo ya está registrado.")

            login = await self._logins.create(
                correo=correo,
                password_hash=hash_password(payload.contrasena),
                rol=payload.rol,
            )
            await self._db.commit()
        except ApiException:
            raise
        except IntegrityError:
            await self._db.rollback()
            await self._audit(
                AUDIT_MODULE, "Intento de Registro Fallido",
                f"El correo {correo} ya está registrado.", id_login=actor_id,
            )
            raise ConflictException("El correo ya está registrado.")
        except SQLAlchemyError:
            await self._db.rollback()
            logger.exception("register_failed correo=%s", correo)
            await self._audit(
                AUDIT_MODULE, "Error al Registrar Usuario",
                f"No se pudo registrar el correo {correo}.", id_login=actor_id,
            )
            raise InternalServerException("Error interno del servidor al registrar usuario.")
        except Exception as exc:
            await self._db.rollback()
            logger.exception("register_exception correo=%s", correo)
            await self._audit(
                AUDIT_MODULE, "Error de Excepción al Registrar Usuario",
                f"Excepción al registrar el correo {correo}. Mensaje: {exc}.", id_login=actor_id,
            )
            raise InternalServerException(GENERIC_ERROR) from exc

        await self._audit(
            AUDIT_MODULE, "Registro de Usuario",
            f"Se registró el usuario {login.correo} con rol {login.rol}.",
            registro_afectado_id=login.id_login, id_login=actor_id,
        )
        return {
            "message": "Usuario registrado exitosamente.",
            "user": RegisteredUserOut.model_validate(login).model_dump(),
        }

    async def login(self, payload: LoginRequest) -> dict:
        if any_blank(payload.correo, payload.contrasena):
            raise BadRequestException("Faltan campos: correo y contraseña.")

        correo = payload.correo.strip()
        try:
            login = await self._logins.get_by_correo(correo)
        except SQLAlchemyError:
            logger.exception("login_lookup_failed")
            raise InternalServerException("Error interno del servidor.")

        if login is None or not verify_password(payload.contrasena, login.contrasena):
            LOGIN_ATTEMPTS.labels("failed").inc()
            await self._audit(
                AUDIT_MODULE, "Intento de Inicio de Sesión Fallido",
                f"Credenciales inválidas para {correo}.",
                id_login=login.id_login if login else None,
            )
            raise UnauthorizedException("Credenciales inválidas.")

        LOGIN_ATTEMPTS.labels("success").inc()
        await self._audit(
            AUDIT_MODULE, "Inicio de Sesión",
            f"El usuario {login.correo} inició sesión.",
            registro_afectado_id=login.id_login, id_login=login.id_login,
        )
        return {
            "message": "Inicio de sesión exitoso.",
            "user": LoginUserOut.model_validate(login).model_dump(),
        }

    async def logout(self, id_login: Optional[int]) -> None:
        await self._audit(
            AUDIT_MODULE, "Cierre de Sesión",
            "El usuario cerró sesión.", registro_afectado_id=id_login, id_login=id_login,
        )


def get_auth_service(
    db: AsyncSession = Depends(get_async_session),
    audit: AuditRecorder = Depends(get_audit_recorder),
) -> AuthService:
    return AuthService(db, audit)


__all__ = ["AuthService", "get_auth_service"]
# Fin del archivo backend/app/modules/auth/services/auth_service.py
