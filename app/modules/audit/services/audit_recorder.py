# -*- coding: utf-8 -*-
"""
backend/app/modules/audit/services/audit_recorder.py

Registro de la bitácora de acciones administrativas.

Reglas:
- Cada acción que cambia estado (crear, modificar, eliminar, restaurar,
  descargar) deja exactamente un registro, también cuando falla
  ("Intento de ... Fallido", "Error al ...").
- El registro es best-effort: usa su propia sesión y NUNCA lanza; un
  fallo al escribir la bitácora no afecta la respuesta de la acción.
- El llamador debe cerrar (commit/rollback) su propia transacción
  antes de registrar.

Autor: Ixchel Beristain
Fecha: 22/09/2026
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.audit.repositories import AuditRepository
from app.observability.prom import AUDIT_WRITE_FAILURES
from app.shared.database.database import SessionLocal
from app.shared.utils.time_utils import local_now

logger = logging.getLogger(__name__)

ANONYMOUS_USER_NAME = "Usuario Desconocido / No Registrado"
UNKNOWN_USER_NAME = "Desconocido"


@dataclass(frozen=True)
class AuditEvent:
    """Datos de una acción a registrar en la bitácora."""
    modulo_afectado: str
    accion_realizada: str
    descripcion_detallada: Optional[str] = None
    registro_afectado_id: Any = None
    id_login: Optional[int] = None


class AuditRecorder:
    """
    Escribe registros en la bitácora con una sesión independiente.

    Args:
        session_factory: fábrica de AsyncSession (por defecto SessionLocal)
    """

    def __init__(self, session_factory: Callable[[], AsyncSession] = SessionLocal) -> None:
        self._session_factory = session_factory

    async def _resolve_user_name(self, repo: AuditRepository, id_login: Optional[int]) -> str:
        if not id_login:
            return ANONYMOUS_USER_NAME
        name = await repo.get_actor_name(id_login)
        return name or UNKNOWN_USER_NAME

    async def record(self, event: AuditEvent) -> bool:
        """
        Inserta un registro. Devuelve True si se guardó.

        Sin modulo_afectado o accion_realizada no se escribe nada.
        """
        if not event.modulo_afectado or not event.accion_realizada:
            logger.error(
                "bitacora_invalid_entry modulo=%r accion=%r",
                event.modulo_afectado,
                event.accion_realizada,
            )
            return False

        registro_id = None if event.registro_afectado_id is None else str(event.registro_afectado_id)

        try:
            async with self._session_factory() as session:
                repo = AuditRepository(session)
                nombre_usuario = await self._resolve_user_name(repo, event.id_login)
                await repo.insert(
                    fecha_hora=local_now(),
                    id_login=event.id_login or None,
                    nombre_usuario=nombre_usuario,
                    modulo_afectado=event.modulo_afectado,
                    accion_realizada=event.accion_realizada,
                    descripcion_detallada=event.descripcion_detallada,
                    registro_afectado_id=registro_id,
                )
        except Exception as exc:  # best-effort: la bitácora nunca rompe la acción
            AUDIT_WRITE_FAILURES.labels(event.modulo_afectado).inc()
            logger.error(
                "bitacora_write_failed modulo=%s accion=%s registro=%s error=%r",
                event.modulo_afectado,
                event.accion_realizada,
                registro_id,
                exc,
            )
            return False

        logger.debug(
            "bitacora_recorded modulo=%s accion=%s registro=%s",
            event.modulo_afectado,
            event.accion_realizada,
            registro_id,
        )
        return True

    async def __call__(
        self,
        modulo_afectado: str,
        accion_realizada: str,
        descripcion_detallada: Optional[str] = None,
        registro_afectado_id: Any = None,
        id_login: Optional[int] = None,
    ) -> bool:
        return await self.record(
            AuditEvent(
                modulo_afectado=modulo_afectado,
                accion_realizada=accion_realizada,
                descripcion_detallada=descripcion_detallada,
                registro_afectado_id=registro_afectado_id,
                id_login=id_login,
            )
        )


def get_audit_recorder() -> AuditRecorder:
    """Dependencia FastAPI."""
    return AuditRecorder()


__all__ = [
    "AuditEvent",
    "AuditRecorder",
    "get_audit_recorder",
    "ANONYMOUS_USER_NAME",
    "UNKNOWN_USER_NAME",
]
# Fin del archivo backend/app/modules/audit/services/audit_recorder.py
