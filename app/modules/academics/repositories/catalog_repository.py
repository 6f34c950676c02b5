# -*- coding: utf-8 -*-
"""
backend/app/modules/academics/repositories/catalog_repository.py

Lectura de catálogos (carreras, periodos, empresas).

Autor: Ixchel Beristain
Fecha: 28/09/2026
"""

from __future__ import annotations

from typing import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.academics.models import Carrera, Empresa, Periodo


class CatalogRepository:
    def __init__(self, db: AsyncSession) -> None:
        self._db = db

    async def list_carreras(self) -> Sequence[Carrera]:
        result = await self._db.execute(select(Carrera).order_by(Carrera.id_carrera))
        return result.scalars().all()

    async def list_periodos(self) -> Sequence[Periodo]:
        result = await self._db.execute(select(Periodo).order_by(Periodo.id_periodo))
        return result.scalars().all()

    async def list_empresas(self) -> Sequence[Empresa]:
        result = await self._db.execute(select(Empresa).order_by(Empresa.id_empresa))
        return result.scalars().all()


__all__ = ["CatalogRepository"]
# Fin del archivo backend/app/modules/academics/repositories/catalog_repository.py
