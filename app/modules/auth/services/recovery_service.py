# -*- coding: utf-8 -*-
"""
backend/app/modules/auth/services/recovery_service.py

Ciclo de vida de los códigos de recuperación de contraseña.

Flujo:
  1. request_code: si el correo existe, invalida sus códigos vigentes,
     crea uno nuevo de 6 dígitos (expira en 15 min) y lo envía por correo.
     Respuesta idéntica exista o no el correo (anti-enumeración).
  2. verify_code: consume el código (usado=True) si coincide; si ya
     expiró también lo consume pero responde con el error de expiración.
     Un código válido devuelve un reset_token de corta duración.
  3. reset_password: exige ese reset_token, emitido para el mismo correo
     y ligado al hash de contraseña vigente; tras el primer cambio el
     token ya no sirve.

Los correos se normalizan a minúsculas al entrar.

Autor: Ixchel Beristain
Fecha: 24/09/2026
"""

from __future__ import annotations

import logging
import secrets
from datetime import timedelta
from typing import Optional

from fastapi import Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.audit.services import AuditRecorder, get_audit_recorder
from app.modules.auth.repositories import LoginRepository, RecoveryCodeRepository
from app.modules.auth.schemas import (
    RecoveryRequest,
    ResetPasswordRequest,
    VerifyCodeRequest,
)
from app.observability.prom import RECOVERY_CODES_ISSUED
from app.shared.config import settings
from app.shared.database.database import get_async_session
from app.shared.integrations.email_sender import IEmailSender, get_email_sender
from app.shared.utils.base_models import any_blank, is_blank
from app.shared.utils.http_exceptions import (
    ApiException,
    BadRequestException,
    InternalServerException,
    NotFoundException,
)
from app.shared.utils.security import create_reset_token, hash_password, verify_reset_token
from app.shared.utils.time_utils import as_utc, now_utc

logger = logging.getLogger(__name__)

AUDIT_MODULE = "Recuperación de Contraseña"

GENERIC_ERROR = "Error interno del servidor."
GENERIC_RECOVERY_MESSAGE = (
    "Si el correo electrónico está registrado, se enviará un código de recuperación."
)
CODE_MIN = 100000
CODE_MAX = 999999


def normalize_email(correo: str) -> str:
    return correo.strip().lower()


def generate_recovery_code() -> str:
    """Código uniforme en [100000, 999999]; siempre 6 dígitos."""
    return str(CODE_MIN + secrets.randbelow(CODE_MAX - CODE_MIN + 1))


class RecoveryService:
    def __init__(
        self,
        db: AsyncSession,
        email_sender: IEmailSender,
        audit: AuditRecorder,
    ) -> None:
        self._db = db
        self._logins = LoginRepository(db)
        self._codes = RecoveryCodeRepository(db)
        self._email = email_sender
        self._audit = audit

    async def _login_exists(self, correo: str) -> bool:
        try:
            return await self._logins.exists_correo(correo)
        except SQLAlchemyError:
            logger.exception("recovery_lookup_failed")
            raise InternalServerException("Error interno del servidor.")

    # ------------------------------------------------------------------
    # 1. Solicitud de código
    # ------------------------------------------------------------------
    async def request_code(self, payload: RecoveryRequest) -> dict:
        if is_blank(payload.correo):
            raise BadRequestException("El campo de correo electrónico es obligatorio.")
        correo = normalize_email(payload.correo)

        if not await self._login_exists(correo):
            await self._audit(
                AUDIT_MODULE, "Solicitud de Código de Recuperación",
                "Solicitud para un correo no registrado; no se generó código.",
            )
            return {"message": GENERIC_RECOVERY_MESSAGE}

        ttl = settings.recovery_code_ttl_minutes
        codigo = generate_recovery_code()
        try:
            await self._codes.invalidate_unused(correo)
            code = await self._codes.create(
                correo=correo,
                codigo=codigo,
                expiracion=now_utc() + timedelta(minutes=ttl),
            )
            await self._db.commit()
        except SQLAlchemyError:
            await self._db.rollback()
            logger.exception("recovery_code_persist_failed")
            await self._audit(
                AUDIT_MODULE, "Error al Solicitar Código de Recuperación",
                f"No se pudo guardar el código para {correo}.",
            )
            raise InternalServerException("Error interno del servidor al guardar el código.")
        except Exception as exc:
            await self._db.rollback()
            logger.exception("recovery_code_persist_exception")
            await self._audit(
                AUDIT_MODULE, "Error de Excepción al Solicitar Código de Recuperación",
                f"Excepción al guardar el código para {correo}. Mensaje: {exc}.",
            )
            raise InternalServerException(GENERIC_ERROR) from exc

        RECOVERY_CODES_ISSUED.inc()

        try:
            await self._email.send_recovery_code_email(correo, codigo, ttl)
        except Exception:
            logger.exception("recovery_code_email_failed")
            await self._audit(
                AUDIT_MODULE, "Error al Enviar Código de Recuperación",
                f"El código se guardó pero no se pudo enviar a {correo}.",
                registro_afectado_id=code.id,
            )
            raise InternalServerException("Error interno del servidor.")

        await self._audit(
            AUDIT_MODULE, "Solicitud de Código de Recuperación",
            f"Se envió un código de recuperación a {correo}.",
            registro_afectado_id=code.id,
        )
        return {"message": GENERIC_RECOVERY_MESSAGE}

    # ------------------------------------------------------------------
    # 2. Verificación
    # ------------------------------------------------------------------
    async def verify_code(self, payload: VerifyCodeRequest) -> dict:
        if any_blank(payload.correo, payload.codigo):
            raise BadRequestException("Correo y código son obligatorios.")
        correo = normalize_email(payload.correo)
        codigo = str(payload.codigo).strip()

        try:
            code = await self._codes.find_unused(correo, codigo)
            if code is None:
                await self._audit(
                    AUDIT_MODULE, "Intento de Verificación de Código Fallido",
                    f"Código incorrecto o ya utilizado para {correo}.",
                )
                raise BadRequestException("Código incorrecto o expirado.")

            expired = as_utc(code.expiracion) < now_utc()
            consumed = await self._codes.mark_used(code.id)
            login = await self._logins.get_by_correo(correo)
            await self._db.commit()
        except ApiException:
            raise
        except SQLAlchemyError:
            await self._db.rollback()
            logger.exception("recovery_code_verify_failed")
            await self._audit(
                AUDIT_MODULE, "Error al Verificar Código",
                f"Error al procesar la verificación para {correo}.",
            )
            raise InternalServerException("Error al procesar la solicitud.")
        except Exception as exc:
            await self._db.rollback()
            logger.exception("recovery_code_verify_exception")
            await self._audit(
                AUDIT_MODULE, "Error de Excepción al Verificar Código",
                f"Excepción al verificar el código de {correo}. Mensaje: {exc}.",
            )
            raise InternalServerException(GENERIC_ERROR) from exc

        if not consumed:
            # Otra verificación concurrente lo consumió primero
            await self._audit(
                AUDIT_MODULE, "Intento de Verificación de Código Fallido",
                f"Código ya utilizado para {correo}.", registro_afectado_id=code.id,
            )
            raise BadRequestException("Código incorrecto o expirado.")

        if expired:
            await self._audit(
                AUDIT_MODULE, "Código de Recuperación Expirado",
                f"Se intentó usar un código expirado para {correo}.",
                registro_afectado_id=code.id,
            )
            raise BadRequestException("El código ha expirado. Por favor, solicita uno nuevo.")

        await self._audit(
            AUDIT_MODULE, "Verificación de Código",
            f"Código verificado para {correo}.", registro_afectado_id=code.id,
        )
        return {
            "message": "Código verificado correctamente.",
            "reset_token": create_reset_token(
                correo, login.contrasena if login is not None else None
            ),
        }

    # ------------------------------------------------------------------
    # 3. Restablecimiento
    # ------------------------------------------------------------------
    async def reset_password(self, payload: ResetPasswordRequest) -> dict:
        if any_blank(payload.correo, payload.password, payload.reset_token):
            raise BadRequestException("Todos los campos son obligatorios.")
        correo = normalize_email(payload.correo)

        if not verify_reset_token(payload.reset_token, correo):
            await self._audit(
                AUDIT_MODULE, "Intento de Restablecer Contraseña Fallido",
                f"Autorización inválida o expirada para {correo}.",
            )
            raise BadRequestException("Autorización de restablecimiento inválida o expirada.")

        try:
            login = await self._logins.get_by_correo(correo)
            if login is None:
                await self._db.rollback()
                await self._audit(
                    AUDIT_MODULE, "Intento de Restablecer Contraseña Fallido",
                    f"No existe un usuario con el correo {correo}.",
                )
                raise NotFoundException("Usuario no encontrado.")

            # La contraseña ya cambió desde que se emitió el token
            if not verify_reset_token(payload.reset_token, correo, login.contrasena):
                await self._db.rollback()
                await self._audit(
                    AUDIT_MODULE, "Intento de Restablecer Contraseña Fallido",
                    f"Autorización ya utilizada para {correo}.",
                    registro_afectado_id=login.id_login,
                )
                raise BadRequestException(
                    "Autorización de restablecimiento inválida o expirada."
                )

            await self._logins.update_fields(
                login.id_login, contrasena=hash_password(payload.password)
            )
            await self._db.commit()
        except ApiException:
            raise
        except SQLAlchemyError:
            await self._db.rollback()
            logger.exception("password_reset_failed")
            await self._audit(
                AUDIT_MODULE, "Error al Restablecer Contraseña",
                f"No se pudo actualizar la contraseña de {correo}.",
            )
            raise InternalServerException("Error al actualizar la contraseña.")
        except Exception as exc:
            await self._db.rollback()
            logger.exception("password_reset_exception")
            await self._audit(
                AUDIT_MODULE, "Error de Excepción al Restablecer Contraseña",
                f"Excepción al actualizar la contraseña de {correo}. Mensaje: {exc}.",
            )
            raise InternalServerException(GENERIC_ERROR) from exc

        await self._audit(
            AUDIT_MODULE, "Restablecer Contraseña",
            f"Se restableció la contraseña de {correo}.",
            registro_afectado_id=login.id_login,
        )
        return {"message": "Contraseña actualizada exitosamente."}

    # ------------------------------------------------------------------
    # Aviso de cuenta activada
    # ------------------------------------------------------------------
    async def send_activation_email(
        self, payload: RecoveryRequest, *, actor_id: Optional[int] = None
    ) -> dict:
        if is_blank(payload.correo):
            raise BadRequestException("El campo de correo electrónico es obligatorio.")
        correo = normalize_email(payload.correo)

        if not await self._login_exists(correo):
            await self._audit(
                AUDIT_MODULE, "Envío de Correo de Activación",
                "Solicitud para un correo no registrado; no se envió correo.",
                id_login=actor_id,
            )
            return {"message": GENERIC_RECOVERY_MESSAGE}

        try:
            await self._email.send_account_activated_email(correo)
        except Exception:
            logger.exception("activation_email_failed")
            await self._audit(
                AUDIT_MODULE, "Error al Enviar Correo de Activación",
                f"No se pudo enviar el correo de activación a {correo}.",
                id_login=actor_id,
            )
            raise InternalServerException("Error interno del servidor.")

        await self._audit(
            AUDIT_MODULE, "Envío de Correo de Activación",
            f"Se envió el correo de activación a {correo}.", id_login=actor_id,
        )
        return {"message": "Correo de activación enviado exitosamente."}


def get_recovery_service(
    db: AsyncSession = Depends(get_async_session),
    email_sender: IEmailSender = Depends(get_email_sender),
    audit: AuditRecorder = Depends(get_audit_recorder),
) -> RecoveryService:
    return RecoveryService(db, email_sender, audit)


__all__ = [
    "RecoveryService",
    "get_recovery_service",
    "generate_recovery_code",
    "GENERIC_RECOVERY_MESSAGE",
]
# Fin del archivo backend/app/modules/auth/services/recovery_service.py
