# -*- coding: utf-8 -*-
"""
backend/app/modules/academics/repositories/project_search_repository.py

Proyectos (no eliminados) en los que participa un estudiante o un tutor.
Devuelve filas (id, proyecto, periodo) listas para serializar.

Autor: Ixchel Beristain
Fecha: 28/09/2026
"""

from __future__ import annotations

from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.academics.models import Periodo
from app.modules.projects.models import (
    Integrante,
    Pasantia,
    ProyectoInvestigacion,
    ServicioComunitario,
    TrabajoGrado,
)


class ProjectSearchRepository:
    def __init__(self, db: AsyncSession) -> None:
        self._db = db

    async def _rows(self, stmt) -> list[dict[str, Any]]:
        result = await self._db.execute(stmt)
        return [
            {"id": row.id, "proyecto": row.proyecto, "periodo": row.periodo}
            for row in result.all()
        ]

    @staticmethod
    def _base(model, pk, name_col, flag_col):
        return (
            select(pk.label("id"), name_col.label("proyecto"), Periodo.periodo.label("periodo"))
            .select_from(model)
            .outerjoin(Periodo, Periodo.id_periodo == model.id_periodo)
            .where(flag_col.is_(False))
            .order_by(pk)
        )

    # ------------------------------------------------------------------
    # Por estudiante
    # ------------------------------------------------------------------
    async def community_by_student(self, id_estudiante: int) -> list[dict[str, Any]]:
        stmt = (
            self._base(
                ServicioComunitario,
                ServicioComunitario.id_servicio,
                ServicioComunitario.proyecto,
                ServicioComunitario.eliminados,
            )
            .join(Integrante, Integrante.id_servicio == ServicioComunitario.id_servicio)
            .where(Integrante.id_estudiante == id_estudiante)
            .distinct()
        )
        return await self._rows(stmt)

    async def thesis_by_student(self, id_estudiante: int) -> list[dict[str, Any]]:
        stmt = self._base(
            TrabajoGrado, TrabajoGrado.id_trabajo_grado, TrabajoGrado.proyecto, TrabajoGrado.eliminados
        ).where(TrabajoGrado.id_estudiante == id_estudiante)
        return await self._rows(stmt)

    async def research_by_student(self, id_estudiante: int) -> list[dict[str, Any]]:
        stmt = self._base(
            ProyectoInvestigacion,
            ProyectoInvestigacion.id_proyecto_investigacion,
            ProyectoInvestigacion.proyecto,
            ProyectoInvestigacion.eliminados,
        ).where(ProyectoInvestigacion.id_estudiante == id_estudiante)
        return await self._rows(stmt)

    async def internships_by_student(self, id_estudiante: int) -> list[dict[str, Any]]:
        stmt = self._base(
            Pasantia, Pasantia.id_pasantia, Pasantia.titulo, Pasantia.eliminado
        ).where(Pasantia.id_estudiante == id_estudiante)
        return await self._rows(stmt)

    # ------------------------------------------------------------------
    # Por tutor (investigación no tiene tutor)
    # ------------------------------------------------------------------
    async def community_by_tutor(self, id_tutor: int) -> list[dict[str, Any]]:
        stmt = self._base(
            ServicioComunitario,
            ServicioComunitario.id_servicio,
            ServicioComunitario.proyecto,
            ServicioComunitario.eliminados,
        ).where(ServicioComunitario.id_tutor == id_tutor)
        return await self._rows(stmt)

    async def thesis_by_tutor(self, id_tutor: int) -> list[dict[str, Any]]:
        stmt = self._base(
            TrabajoGrado, TrabajoGrado.id_trabajo_grado, TrabajoGrado.proyecto, TrabajoGrado.eliminados
        ).where(TrabajoGrado.id_tutor == id_tutor)
        return await self._rows(stmt)

    async def internships_by_tutor(self, id_tutor: int) -> list[dict[str, Any]]:
        stmt = self._base(
            Pasantia, Pasantia.id_pasantia, Pasantia.titulo, Pasantia.eliminado
        ).where(Pasantia.id_tutor == id_tutor)
        return await self._rows(stmt)


__all__ = ["ProjectSearchRepository"]
# Fin del archivo backend/app/modules/academics/repositories/project_search_repository.py
