# -*- coding: utf-8 -*-
"""
backend/app/modules/academics/repositories/people_repository.py

Repositorios de estudiantes y tutores.

Ambos comparten forma (nombre, cédula, baja lógica con `eliminados`),
así que la lógica vive en PersonRepository y cada subclase fija el
modelo. `upsert_by_cedula` es lo que usan los formularios de proyectos:
busca por cédula, corrige el nombre si cambió y si no existe lo crea.

Autor: Ixchel Beristain
Fecha: 28/09/2026
"""

from __future__ import annotations

from typing import Any, Generic, Optional, Sequence, Type, TypeVar

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.academics.models import Estudiante, Tutor

PersonT = TypeVar("PersonT", Estudiante, Tutor)


class PersonRepository(Generic[PersonT]):
    model: Type[PersonT]
    pk_name: str

    def __init__(self, db: AsyncSession) -> None:
        self._db = db

    @property
    def _pk(self):
        return getattr(self.model, self.pk_name)

    async def list_active(self) -> Sequence[PersonT]:
        result = await self._db.execute(
            select(self.model).where(self.model.eliminados.is_(False)).order_by(self._pk)
        )
        return result.scalars().all()

    async def get_by_id(self, entity_id: int) -> Optional[PersonT]:
        entity = await self._db.get(self.model, entity_id)
        if entity is None or entity.eliminados:
            return None
        return entity

    async def get_by_cedula(self, cedula: str) -> Optional[PersonT]:
        result = await self._db.execute(
            select(self.model).where(self.model.cedula == cedula).order_by(self._pk).limit(1)
        )
        return result.scalar_one_or_none()

    async def create(self, **values: Any) -> PersonT:
        entity = self.model(**values)
        self._db.add(entity)
        await self._db.flush()
        return entity

    async def soft_delete(self, entity_id: int) -> int:
        result = await self._db.execute(
            update(self.model).where(self._pk == entity_id).values(eliminados=True)
        )
        return result.rowcount or 0

    async def upsert_by_cedula(self, cedula: str, nombre_completo: str, **create_values: Any) -> PersonT:
        """
        Devuelve la persona con esa cédula, creándola si no existe.

        `create_values` solo se aplica al crear (p. ej. id_carrera del
        proyecto para estudiantes nuevos).
        """
        cedula = cedula.strip()
        nombre_completo = nombre_completo.strip()
        entity = await self.get_by_cedula(cedula)
        if entity is None:
            return await self.create(cedula=cedula, nombre_completo=nombre_completo, **create_values)
        if entity.nombre_completo != nombre_completo:
            entity.nombre_completo = nombre_completo
            await self._db.flush()
        return entity


class StudentRepository(PersonRepository[Estudiante]):
    model = Estudiante
    pk_name = "id_estudiante"


class TutorRepository(PersonRepository[Tutor]):
    model = Tutor
    pk_name = "id_tutor"


__all__ = ["PersonRepository", "StudentRepository", "TutorRepository"]
# Fin del archivo backend/app/modules/academics/repositories/people_repository.py
