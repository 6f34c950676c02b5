# -*- coding: utf-8 -*-
"""
backend/app/modules/auth/repositories/recovery_code_repository.py

Repositorio de `codigos_recuperacion`.

Autor: Ixchel Beristain
Fecha: 23/09/2026
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.auth.models import RecoveryCode


class RecoveryCodeRepository:
    """Repositorio de RecoveryCode."""

    def __init__(self, db: AsyncSession) -> None:
        self._db = db

    async def invalidate_unused(self, correo: str) -> int:
        """Marca como usados todos los códigos vigentes del correo."""
        result = await self._db.execute(
            update(RecoveryCode)
            .where(RecoveryCode.correo == correo, RecoveryCode.usado.is_(False))
            .values(usado=True)
        )
        return result.rowcount or 0

    async def create(self, *, correo: str, codigo: str, expiracion: datetime) -> RecoveryCode:
        code = RecoveryCode(correo=correo, codigo=codigo, expiracion=expiracion, usado=False)
        self._db.add(code)
        await self._db.flush()
        return code

    async def find_unused(self, correo: str, codigo: str) -> Optional[RecoveryCode]:
        """Código sin usar que coincide con (correo, código); el más reciente."""
        stmt = (
            select(RecoveryCode)
            .where(
                RecoveryCode.correo == correo,
                RecoveryCode.codigo == codigo,
                RecoveryCode.usado.is_(False),
            )
            .order_by(RecoveryCode.id.desc())
            .limit(1)
        )
        result = await self._db.execute(stmt)
        return result.scalar_one_or_none()

    async def mark_used(self, code_id: int) -> int:
        # Condición usado=False: la transición ocurre una sola vez
        result = await self._db.execute(
            update(RecoveryCode)
            .where(RecoveryCode.id == code_id, RecoveryCode.usado.is_(False))
            .values(usado=True)
        )
        return result.rowcount or 0

    async def count_unused(self, correo: str) -> int:
        result = await self._db.execute(
            select(func.count())
            .select_from(RecoveryCode)
            .where(RecoveryCode.correo == correo, RecoveryCode.usado.is_(False))
        )
        return int(result.scalar_one())


__all__ = ["RecoveryCodeRepository"]
# Fin del archivo backend/app/modules/auth/repositories/recovery_code_repository.py
