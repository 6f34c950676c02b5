# -*- coding: utf-8 -*-
"""
backend/app/modules/administrators/repositories/administrator_repository.py

Repositorio de la tabla `administrador`.

Igual que LoginRepository: flush sin commit. La baja y la
restauración son un único UPDATE sobre `activo`.

Autor: Ixchel Beristain
Fecha: 26/09/2026
"""

from __future__ import annotations

from typing import Optional, Sequence

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.administrators.models import Administrator


class AdministratorRepository:
    def __init__(self, db: AsyncSession) -> None:
        self._db = db

    async def list_by_status(self, activo: bool) -> Sequence[Administrator]:
        result = await self._db.execute(
            select(Administrator)
            .where(Administrator.activo.is_(activo))
            .order_by(Administrator.id_administrador)
        )
        return result.scalars().all()

    async def get_by_id(self, id_administrador: int) -> Optional[Administrator]:
        return await self._db.get(Administrator, id_administrador)

    async def get_active_by_id(self, id_administrador: int) -> Optional[Administrator]:
        result = await self._db.execute(
            select(Administrator).where(
                Administrator.id_administrador == id_administrador,
                Administrator.activo.is_(True),
            )
        )
        return result.scalar_one_or_none()

    async def get_by_id_login(self, id_login: int, *, only_active: bool = False) -> Optional[Administrator]:
        stmt = select(Administrator).where(Administrator.id_login == id_login)
        if only_active:
            stmt = stmt.where(Administrator.activo.is_(True))
        result = await self._db.execute(stmt.order_by(Administrator.id_administrador).limit(1))
        return result.scalar_one_or_none()

    async def create(
        self,
        *,
        cedula: str,
        nombre_completo: str,
        correo: str,
        id_login: Optional[int],
    ) -> Administrator:
        admin = Administrator(
            cedula=cedula,
            nombre_completo=nombre_completo,
            correo=correo,
            id_login=id_login,
            activo=True,
        )
        self._db.add(admin)
        await self._db.flush()
        return admin

    async def update_fields(self, id_administrador: int, **values) -> int:
        if not values:
            return 0
        result = await self._db.execute(
            update(Administrator)
            .where(Administrator.id_administrador == id_administrador)
            .values(**values)
        )
        return result.rowcount or 0

    async def update_by_id_login(self, id_login: int, **values) -> int:
        if not values:
            return 0
        result = await self._db.execute(
            update(Administrator).where(Administrator.id_login == id_login).values(**values)
        )
        return result.rowcount or 0

    async def set_active(self, id_administrador: int, activo: bool) -> int:
        return await self.update_fields(id_administrador, activo=activo)


__all__ = ["AdministratorRepository"]
# Fin del archivo backend/app/modules/administrators/repositories/administrator_repository.py
