# -*- coding: utf-8 -*-
"""
backend/app/modules/administrators/services/profile_service.py

Perfil del usuario conectado (administrador identificado por id_login).

La contraseña llega en texto plano y se hashea aquí; nunca se devuelve.

Autor: Ixchel Beristain
Fecha: 26/09/2026
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.administrators.repositories import AdministratorRepository
from app.modules.administrators.schemas import ProfileOut, ProfileUpdateRequest
from app.modules.audit.services import AuditRecorder, get_audit_recorder
from app.modules.auth.repositories import LoginRepository
from app.shared.database.database import get_async_session
from app.shared.utils.base_models import any_blank, is_blank
from app.shared.utils.http_exceptions import (
    ApiException,
    BadRequestException,
    ConflictException,
    InternalServerException,
    NotFoundException,
)
from app.shared.utils.security import hash_password

logger = logging.getLogger(__name__)

AUDIT_MODULE = "Perfil de Usuario"
GENERIC_ERROR = "Error interno del servidor."


class ProfileService:
    def __init__(self, db: AsyncSession, audit: AuditRecorder) -> None:
        self._db = db
        self._admins = AdministratorRepository(db)
        self._logins = LoginRepository(db)
        self._audit = audit

    async def get_profile(self, id_login: int) -> dict:
        try:
            admin = await self._admins.get_by_id_login(id_login, only_active=True)
            login = await self._logins.get_by_id(id_login) if admin else None
        except SQLAlchemyError:
            logger.exception("profile_get_failed id_login=%s", id_login)
            raise InternalServerException("Error interno del servidor al obtener los datos.")
        if admin is None:
            raise NotFoundException("Administrador no encontrado.")

        return ProfileOut(
            id_login=admin.id_login,
            nombre_completo=admin.nombre_completo,
            correo=admin.correo,
            cedula=admin.cedula,
            nombre_usuario=login.nombre_usuario if login else None,
        ).model_dump()

    async def get_display_name(self, id_login: int) -> dict:
        try:
            admin = await self._admins.get_by_id_login(id_login)
        except SQLAlchemyError:
            logger.exception("user_profile_failed id_login=%s", id_login)
            raise InternalServerException(
                "Error interno del servidor al obtener el perfil del usuario."
            )
        if admin is None:
            raise NotFoundException(
                "Información de usuario no encontrada o el administrador no existe."
            )
        return {"nombre_completo": admin.nombre_completo}

    async def update_profile(
        self,
        id_login: int,
        payload: ProfileUpdateRequest,
        *,
        actor_id: Optional[int] = None,
    ) -> dict:
        actor = actor_id or id_login
        if any_blank(payload.nombre_completo, payload.correo, payload.cedula):
            await self._audit(
                AUDIT_MODULE, "Intento de Actualización Fallido",
                f"Faltan campos obligatorios en el perfil con ID de login {id_login}.",
                registro_afectado_id=id_login, id_login=actor,
            )
            raise BadRequestException("Todos los campos son obligatorios.")

        correo = payload.correo.strip()
        try:
            admin = await self._admins.get_by_id_login(id_login)
            if admin is None:
                await self._db.rollback()
                await self._audit(
                    AUDIT_MODULE, "Intento de Actualización Fallido",
                    f"No existe un administrador con ID de login {id_login}.",
                    registro_afectado_id=id_login, id_login=actor,
                )
                raise NotFoundException("Administrador no encontrado.")

            if await self._logins.exists_correo(correo, exclude_id=id_login):
                await self._db.rollback()
                await self._audit(
                    AUDIT_MODULE, "Intento de Actualización Fallido",
                    f"El correo {correo} ya pertenece a otro usuario.",
                    registro_afectado_id=id_login, id_login=actor,
                )
                raise ConflictException("El correo ya está registrado.")

            await self._admins.update_by_id_login(
                id_login,
                nombre_completo=payload.nombre_completo.strip(),
                correo=correo,
                cedula=payload.cedula.strip(),
            )
            login_values: dict = {"correo": correo}
            if not is_blank(payload.contrasena):
                login_values["contrasena"] = hash_password(payload.contrasena)
            if not is_blank(payload.nombre_usuario):
                login_values["nombre_usuario"] = payload.nombre_usuario.strip()
            await self._logins.update_fields(id_login, **login_values)
            await self._db.commit()
        except ApiException:
            raise
        except SQLAlchemyError:
            await self._db.rollback()
            logger.exception("profile_update_failed id_login=%s", id_login)
            await self._audit(
                AUDIT_MODULE, "Error de Actualización",
                f"No se pudo actualizar el perfil con ID de login {id_login}.",
                registro_afectado_id=id_login, id_login=actor,
            )
            raise InternalServerException("Error al actualizar el perfil.")
        except Exception as exc:
            await self._db.rollback()
            logger.exception("profile_update_exception id_login=%s", id_login)
            await self._audit(
                AUDIT_MODULE, "Error de Excepción al Actualizar Perfil",
                f"Excepción al actualizar el perfil con ID de login {id_login}. Mensaje: {exc}.",
                registro_afectado_id=id_login, id_login=actor,
            )
            raise InternalServerException(GENERIC_ERROR) from exc

        await self._audit(
            AUDIT_MODULE, "Actualización",
            f"Se actualizó el perfil del usuario con ID de login {id_login}.",
            registro_afectado_id=id_login, id_login=actor,
        )
        return {"message": "Perfil actualizado exitosamente."}


def get_profile_service(
    db: AsyncSession = Depends(get_async_session),
    audit: AuditRecorder = Depends(get_audit_recorder),
) -> ProfileService:
    return ProfileService(db, audit)


__all__ = ["ProfileService", "get_profile_service"]
# Fin del archivo backend/app/modules/administrators/services/profile_service.py
