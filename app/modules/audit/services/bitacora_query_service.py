# -*- coding: utf-8 -*-
"""
backend/app/modules/audit/services/bitacora_query_service.py

Lectura de la bitácora para la vista de auditoría del panel.

Autor: Ixchel Beristain
Fecha: 22/09/2026
"""

from __future__ import annotations

import logging

from fastapi import Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.audit.repositories import AuditRepository
from app.modules.audit.schemas import AuditEntryOut
from app.shared.database.database import get_async_session
from app.shared.utils.http_exceptions import InternalServerException

logger = logging.getLogger(__name__)


class BitacoraQueryService:
    def __init__(self, db: AsyncSession) -> None:
        self._repo = AuditRepository(db)

    async def list_entries(self) -> list[dict]:
        try:
            rows = await self._repo.list_all()
        except SQLAlchemyError:
            logger.exception("bitacora_list_failed")
            raise InternalServerException(
                "Error interno del servidor al obtener registros de auditoría."
            )
        return [AuditEntryOut.model_validate(row).model_dump(mode="json") for row in rows]


def get_bitacora_query_service(
    db: AsyncSession = Depends(get_async_session),
) -> BitacoraQueryService:
    return BitacoraQueryService(db)


__all__ = ["BitacoraQueryService", "get_bitacora_query_service"]
