# -*- coding: utf-8 -*-
"""
backend/app/modules/administrators/services/administrator_service.py

Gestión de administradores.

- Alta: crea la fila de `login` (rol Administrador) y la de
  `administrador` en UNA transacción; si falla cualquiera no queda nada.
- Modificación: actualiza el administrador y sincroniza `login.correo`.
- Baja/restauración lógica: un único UPDATE sobre `activo`.

Cada operación deja un registro en la bitácora (módulo "Administradores"),
también cuando falla.

Autor: Ixchel Beristain
Fecha: 26/09/2026
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import Depends
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.administrators.repositories import AdministratorRepository
from app.modules.administrators.schemas import (
    AdministratorCreateRequest,
    AdministratorDeleteRequest,
    AdministratorOut,
    AdministratorUpdateRequest,
)
from app.modules.audit.services import AuditRecorder, get_audit_recorder
from app.modules.auth.repositories import LoginRepository
from app.shared.database.database import get_async_session
from app.shared.utils.base_models import any_blank
from app.shared.utils.http_exceptions import (
    ApiException,
    BadRequestException,
    ConflictException,
    InternalServerException,
    NotFoundException,
)
from app.shared.utils.security import hash_password

logger = logging.getLogger(__name__)

AUDIT_MODULE = "Administradores"
ADMIN_ROLE = "Administrador"
ACTIVE_LOGIN_STATE = "Activo"

MISSING_FIELDS = "Todos los campos son obligatorios."
GENERIC_ERROR = "Error interno del servidor."
NOT_FOUND = "Administrador no encontrado."
NOT_FOUND_OR_INACTIVE = "Administrador no encontrado o inactivo."


def _serialize(admin) -> dict:
    return AdministratorOut.model_validate(admin).model_dump()


class AdministratorService:
    def __init__(self, db: AsyncSession, audit: AuditRecorder) -> None:
        self._db = db
        self._admins = AdministratorRepository(db)
        self._logins = LoginRepository(db)
        self._audit = audit

    # ------------------------------------------------------------------
    # Lecturas
    # ------------------------------------------------------------------
    async def list_active(self) -> list[dict]:
        try:
            admins = await self._admins.list_by_status(True)
        except SQLAlchemyError:
            logger.exception("admin_list_failed")
            raise InternalServerException("Error interno del servidor al obtener administradores.")
        return [_serialize(a) for a in admins]

    async def list_deleted(self) -> list[dict]:
        try:
            admins = await self._admins.list_by_status(False)
        except SQLAlchemyError:
            logger.exception("admin_list_deleted_failed")
            raise InternalServerException("Error interno del servidor al obtener administradores.")
        return [_serialize(a) for a in admins]

    async def get_active(self, id_administrador: int) -> dict:
        try:
            admin = await self._admins.get_active_by_id(id_administrador)
        except SQLAlchemyError:
            logger.exception("admin_get_failed id=%s", id_administrador)
            raise InternalServerException("Error interno del servidor al obtener el administrador.")
        if admin is None:
            raise NotFoundException(NOT_FOUND_OR_INACTIVE)
        return _serialize(admin)

    # ------------------------------------------------------------------
    # Alta
    # ------------------------------------------------------------------
    async def create(
        self, payload: AdministratorCreateRequest, *, actor_id: Optional[int] = None
    ) -> dict:
        if any_blank(payload.cedula, payload.nombre_completo, payload.correo, payload.password):
            await self._audit(
                AUDIT_MODULE, "Intento de Creación Fallido",
                "Faltan campos obligatorios para crear el administrador.", id_login=actor_id,
            )
            raise BadRequestException(MISSING_FIELDS)

        correo = payload.correo.strip()
        try:
            if await self._logins.exists_correo(correo):
                await self._db.rollback()
                await self._audit(
                    AUDIT_MODULE, "Intento de Creación Fallido",
                    f"El correo {correo} ya está registrado.", id_login=actor_id,
                )
                raise ConflictException("El correo ya está registrado.")

            login = await self._logins.create(
                correo=correo,
                password_hash=hash_password(payload.password),
                rol=ADMIN_ROLE,
                estado_login=ACTIVE_LOGIN_STATE,
            )
            admin = await self._admins.create(
                cedula=payload.cedula.strip(),
                nombre_completo=payload.nombre_completo.strip(),
                correo=correo,
                id_login=login.id_login,
            )
            await self._db.commit()
        except ApiException:
            raise
        except IntegrityError:
            await self._db.rollback()
            await self._audit(
                AUDIT_MODULE, "Intento de Creación Fallido",
                f"El correo {correo} ya está registrado.", id_login=actor_id,
            )
            raise ConflictException("El correo ya está registrado.")
        except SQLAlchemyError:
            await self._db.rollback()
            logger.exception("admin_create_failed correo=%s", correo)
            await self._audit(
                AUDIT_MODULE, "Error de Creación",
                f"No se pudo crear el administrador {correo}.", id_login=actor_id,
            )
            raise InternalServerException("Error al registrar el administrador.")
        except Exception as exc:
            await self._db.rollback()
            logger.exception("admin_create_exception correo=%s", correo)
            await self._audit(
                AUDIT_MODULE, "Error de Excepción al Crear Administrador",
                f"Excepción al crear el administrador {correo}. Mensaje: {exc}.", id_login=actor_id,
            )
            raise InternalServerException(GENERIC_ERROR) from exc

        await self._audit(
            AUDIT_MODULE, "Creación",
            f"Se creó el administrador {admin.nombre_completo} ({admin.correo}).",
            registro_afectado_id=admin.id_administrador, id_login=actor_id,
        )
        return {"message": "Administrador creado exitosamente.", "admin": _serialize(admin)}

    # ------------------------------------------------------------------
    # Modificación
    # ------------------------------------------------------------------
    async def update(
        self,
        id_administrador: int,
        payload: AdministratorUpdateRequest,
        *,
        actor_id: Optional[int] = None,
    ) -> dict:
        if any_blank(payload.cedula, payload.nombre_completo, payload.correo):
            await self._audit(
                AUDIT_MODULE, "Intento de Actualización Fallido",
                f"Faltan campos obligatorios para actualizar el administrador con ID {id_administrador}.",
                registro_afectado_id=id_administrador, id_login=actor_id,
            )
            raise BadRequestException(MISSING_FIELDS)

        correo = payload.correo.strip()
        try:
            admin = await self._admins.get_by_id(id_administrador)
            if admin is None:
                await self._db.rollback()
                await self._audit(
                    AUDIT_MODULE, "Intento de Actualización Fallido",
                    f"No existe el administrador con ID {id_administrador}.",
                    registro_afectado_id=id_administrador, id_login=actor_id,
                )
                raise NotFoundException(NOT_FOUND)

            if admin.id_login is not None and await self._logins.exists_correo(
                correo, exclude_id=admin.id_login
            ):
                await self._db.rollback()
                await self._audit(
                    AUDIT_MODULE, "Intento de Actualización Fallido",
                    f"El correo {correo} ya pertenece a otro usuario.",
                    registro_afectado_id=id_administrador, id_login=actor_id,
                )
                raise ConflictException("El correo ya está registrado.")

            await self._admins.update_fields(
                id_administrador,
                cedula=payload.cedula.strip(),
                nombre_completo=payload.nombre_completo.strip(),
                correo=correo,
            )
            if admin.id_login is not None:
                await self._logins.update_fields(admin.id_login, correo=correo)
            await self._db.commit()
        except ApiException:
            raise
        except SQLAlchemyError:
            await self._db.rollback()
            logger.exception("admin_update_failed id=%s", id_administrador)
            await self._audit(
                AUDIT_MODULE, "Error de Actualización",
                f"No se pudo actualizar el administrador con ID {id_administrador}.",
                registro_afectado_id=id_administrador, id_login=actor_id,
            )
            raise InternalServerException("Error al actualizar el administrador.")
        except Exception as exc:
            await self._db.rollback()
            logger.exception("admin_update_exception id=%s", id_administrador)
            await self._audit(
                AUDIT_MODULE, "Error de Excepción al Actualizar Administrador",
                f"Excepción al actualizar el administrador con ID {id_administrador}. Mensaje: {exc}.",
                registro_afectado_id=id_administrador, id_login=actor_id,
            )
            raise InternalServerException(GENERIC_ERROR) from exc

        await self._audit(
            AUDIT_MODULE, "Actualización",
            f"Se actualizó el administrador con ID {id_administrador}.",
            registro_afectado_id=id_administrador, id_login=actor_id,
        )
        return {"message": "Administrador actualizado exitosamente."}

    # ------------------------------------------------------------------
    # Baja y restauración lógica
    # ------------------------------------------------------------------
    async def soft_delete(
        self,
        id_administrador: int,
        payload: Optional[AdministratorDeleteRequest] = None,
        *,
        actor_id: Optional[int] = None,
    ) -> dict:
        motivo = (payload.mensaje_eliminacion if payload else None) or "No especificado"
        try:
            changed = await self._admins.set_active(id_administrador, False)
            if not changed:
                await self._db.rollback()
                await self._audit(
                    AUDIT_MODULE, "Intento de Eliminación Lógica Fallido",
                    f"No existe el administrador con ID {id_administrador}.",
                    registro_afectado_id=id_administrador, id_login=actor_id,
                )
                raise NotFoundException(NOT_FOUND)
            await self._db.commit()
        except ApiException:
            raise
        except SQLAlchemyError:
            await self._db.rollback()
            logger.exception("admin_soft_delete_failed id=%s", id_administrador)
            await self._audit(
                AUDIT_MODULE, "Error de Eliminación Lógica",
                f"No se pudo eliminar lógicamente al administrador con ID {id_administrador}.",
                registro_afectado_id=id_administrador, id_login=actor_id,
            )
            raise InternalServerException(
                "Error al realizar la eliminación lógica del administrador."
            )
        except Exception as exc:
            await self._db.rollback()
            logger.exception("admin_soft_delete_exception id=%s", id_administrador)
            await self._audit(
                AUDIT_MODULE, "Error de Excepción al Eliminar Administrador",
                f"Excepción al eliminar lógicamente al administrador con ID {id_administrador}. Mensaje: {exc}.",
                registro_afectado_id=id_administrador, id_login=actor_id,
            )
            raise InternalServerException(GENERIC_ERROR) from exc

        await self._audit(
            AUDIT_MODULE, "Eliminación Lógica",
            f"Se eliminó lógicamente al administrador con ID {id_administrador}. Motivo: {motivo}.",
            registro_afectado_id=id_administrador, id_login=actor_id,
        )
        return {"message": "Administrador eliminado lógicamente exitosamente."}

    async def restore(self, id_administrador: int, *, actor_id: Optional[int] = None) -> dict:
        try:
            changed = await self._admins.set_active(id_administrador, True)
            if not changed:
                await self._db.rollback()
                await self._audit(
                    AUDIT_MODULE, "Intento de Restauración Fallido",
                    f"No existe el administrador con ID {id_administrador}.",
                    registro_afectado_id=id_administrador, id_login=actor_id,
                )
                raise NotFoundException(NOT_FOUND)
            await self._db.commit()
        except ApiException:
            raise
        except SQLAlchemyError:
            await self._db.rollback()
            logger.exception("admin_restore_failed id=%s", id_administrador)
            await self._audit(
                AUDIT_MODULE, "Error de Restauración",
                f"No se pudo restaurar al administrador con ID {id_administrador}.",
                registro_afectado_id=id_administrador, id_login=actor_id,
            )
            raise InternalServerException("Error al restaurar el administrador.")
        except Exception as exc:
            await self._db.rollback()
            logger.exception("admin_restore_exception id=%s", id_administrador)
            await self._audit(
                AUDIT_MODULE, "Error de Excepción al Restaurar Administrador",
                f"Excepción al restaurar al administrador con ID {id_administrador}. Mensaje: {exc}.",
                registro_afectado_id=id_administrador, id_login=actor_id,
            )
            raise InternalServerException(GENERIC_ERROR) from exc

        await self._audit(
            AUDIT_MODULE, "Restauración",
            f"Se restauró al administrador con ID {id_administrador}.",
            registro_afectado_id=id_administrador, id_login=actor_id,
        )
        return {"message": "Administrador restaurado exitosamente."}


def get_administrator_service(
    db: AsyncSession = Depends(get_async_session),
    audit: AuditRecorder = Depends(get_audit_recorder),
) -> AdministratorService:
    return AdministratorService(db, audit)


__all__ = ["AdministratorService", "get_administrator_service"]
# Fin del archivo backend/app/modules/administrators/services/administrator_service.py
