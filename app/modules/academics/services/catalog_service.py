# -*- coding: utf-8 -*-
"""
backend/app/modules/academics/services/catalog_service.py

Catálogos para los selects del panel, búsquedas por cédula y búsqueda
de proyectos por estudiante o tutor. Solo lectura, sin bitácora.

Autor: Ixchel Beristain
Fecha: 29/09/2026
"""

from __future__ import annotations

import logging

from fastapi import Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.academics.repositories import (
    CatalogRepository,
    ProjectSearchRepository,
    StudentRepository,
    TutorRepository,
)
from app.modules.academics.schemas import CarreraOut, EmpresaOut, PeriodoOut
from app.shared.database.database import get_async_session
from app.shared.utils.http_exceptions import InternalServerException, NotFoundException

logger = logging.getLogger(__name__)

GENERIC_ERROR = "Error interno del servidor."


class CatalogService:
    def __init__(self, db: AsyncSession) -> None:
        self._catalogs = CatalogRepository(db)
        self._students = StudentRepository(db)
        self._tutors = TutorRepository(db)
        self._search = ProjectSearchRepository(db)

    async def list_carreras(self) -> list[dict]:
        try:
            rows = await self._catalogs.list_carreras()
        except SQLAlchemyError:
            logger.exception("carreras_list_failed")
            raise InternalServerException(GENERIC_ERROR)
        return [CarreraOut.model_validate(r).model_dump() for r in rows]

    async def list_periodos(self) -> list[dict]:
        try:
            rows = await self._catalogs.list_periodos()
        except SQLAlchemyError:
            logger.exception("periodos_list_failed")
            raise InternalServerException(GENERIC_ERROR)
        return [PeriodoOut.model_validate(r).model_dump() for r in rows]

    async def list_empresas(self) -> list[dict]:
        try:
            rows = await self._catalogs.list_empresas()
        except SQLAlchemyError:
            logger.exception("empresas_list_failed")
            raise InternalServerException(GENERIC_ERROR)
        return [EmpresaOut.model_validate(r).model_dump() for r in rows]

    async def student_by_cedula(self, cedula: str) -> dict:
        try:
            student = await self._students.get_by_cedula(cedula.strip())
        except SQLAlchemyError:
            logger.exception("student_by_cedula_failed")
            raise InternalServerException(GENERIC_ERROR)
        if student is None:
            raise NotFoundException("Estudiante no encontrado.")
        return {
            "id_estudiante": student.id_estudiante,
            "cedula": student.cedula,
            "nombre_completo": student.nombre_completo,
        }

    async def tutor_by_cedula(self, cedula: str) -> dict:
        try:
            tutor = await self._tutors.get_by_cedula(cedula.strip())
        except SQLAlchemyError:
            logger.exception("tutor_by_cedula_failed")
            raise InternalServerException(GENERIC_ERROR)
        if tutor is None:
            raise NotFoundException("Tutor no encontrado.")
        return {
            "id_tutor": tutor.id_tutor,
            "cedula": tutor.cedula,
            "nombre_completo": tutor.nombre_completo,
        }

    async def projects_of_student(self, id_estudiante: int) -> dict:
        try:
            return {
                "servicioComunitario": await self._search.community_by_student(id_estudiante),
                "trabajosGrado": await self._search.thesis_by_student(id_estudiante),
                "proyectosInvestigacion": await self._search.research_by_student(id_estudiante),
                "pasantias": await self._search.internships_by_student(id_estudiante),
            }
        except SQLAlchemyError:
            logger.exception("student_project_search_failed id=%s", id_estudiante)
            raise InternalServerException(GENERIC_ERROR)

    async def projects_of_tutor(self, id_tutor: int) -> dict:
        try:
            return {
                "servicioComunitario": await self._search.community_by_tutor(id_tutor),
                "trabajosGrado": await self._search.thesis_by_tutor(id_tutor),
                "pasantias": await self._search.internships_by_tutor(id_tutor),
            }
        except SQLAlchemyError:
            logger.exception("tutor_project_search_failed id=%s", id_tutor)
            raise InternalServerException(GENERIC_ERROR)


def get_catalog_service(db: AsyncSession = Depends(get_async_session)) -> CatalogService:
    return CatalogService(db)


__all__ = ["CatalogService", "get_catalog_service"]
# Fin del archivo backend/app/modules/academics/services/catalog_service.py
