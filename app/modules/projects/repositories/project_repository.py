# -*- coding: utf-8 -*-
"""
backend/app/modules/projects/repositories/project_repository.py

Repositorio genérico de proyectos, parametrizado por ProjectKind.

Baja y restauración lógica son UNA sentencia UPDATE cada una: la
bandera y el mensaje cambian juntos, nunca por separado.

Autor: Ixchel Beristain
Fecha: 02/10/2026
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional, Sequence

from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

if TYPE_CHECKING:
    from app.modules.projects.services.project_kinds import ProjectKind


class ProjectRepository:
    def __init__(self, db: AsyncSession, kind: "ProjectKind") -> None:
        self._db = db
        self.kind = kind

    # ------------------------------------------------------------------
    # Lecturas
    # ------------------------------------------------------------------
    async def list_by_deleted(self, deleted: bool) -> Sequence[Any]:
        k = self.kind
        result = await self._db.execute(
            select(k.model).where(k.flag_column.is_(deleted)).order_by(k.pk)
        )
        return result.scalars().all()

    async def get_by_id(self, project_id: int) -> Optional[Any]:
        return await self._db.get(self.kind.model, project_id)

    async def get_name(self, project_id: int) -> Optional[str]:
        k = self.kind
        result = await self._db.execute(select(k.name_column).where(k.pk == project_id))
        return result.scalar_one_or_none()

    async def count_active(self) -> int:
        k = self.kind
        result = await self._db.execute(
            select(func.count()).select_from(k.model).where(k.flag_column.is_(False))
        )
        return int(result.scalar_one())

    # ------------------------------------------------------------------
    # Escrituras
    # ------------------------------------------------------------------
    async def add(self, entity: Any) -> Any:
        self._db.add(entity)
        await self._db.flush()
        return entity

    async def soft_delete(self, project_id: int, mensaje: Optional[str]) -> int:
        k = self.kind
        result = await self._db.execute(
            update(k.model)
            .where(k.pk == project_id)
            .values({k.flag_column: True, k.message_column: mensaje})
        )
        return result.rowcount or 0

    async def restore(self, project_id: int, mensaje_restauracion: Optional[str] = None) -> int:
        k = self.kind
        values = {k.flag_column: False, k.message_column: None}
        if k.restore_message_column is not None:
            values[k.restore_message_column] = mensaje_restauracion
        result = await self._db.execute(
            update(k.model).where(k.pk == project_id).values(values)
        )
        return result.rowcount or 0


__all__ = ["ProjectRepository"]
# Fin del archivo backend/app/modules/projects/repositories/project_repository.py
