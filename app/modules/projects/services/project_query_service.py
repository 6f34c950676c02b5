# -*- coding: utf-8 -*-
"""
backend/app/modules/projects/services/project_query_service.py

Consultas transversales a los cuatro tipos de proyecto:

- DeletedProjectService: listado unificado de proyectos eliminados
- PublicProjectService:  datos públicos para el PDF de un proyecto
- DashboardService:      conteo de proyectos activos por tipo

Autor: Ixchel Beristain
Fecha: 03/10/2026
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.audit.services import AuditRecorder, get_audit_recorder
from app.modules.projects.repositories import ProjectRepository
from app.shared.database.database import get_async_session
from app.shared.utils.http_exceptions import (
    ApiException,
    InternalServerException,
    NotFoundException,
)

from .project_kinds import PROJECT_KINDS, get_kind, get_kind_by_collection

logger = logging.getLogger(__name__)


class DeletedProjectService:
    def __init__(self, db: AsyncSession) -> None:
        self._db = db

    async def list_all(self) -> list[dict]:
        """Eliminados de todos los tipos, agrupados en el orden de PROJECT_KINDS."""
        items: list[dict] = []
        try:
            for kind in PROJECT_KINDS:
                entities = await ProjectRepository(self._db, kind).list_by_deleted(True)
                items.extend(kind.to_deleted(e) for e in entities)
        except SQLAlchemyError:
            logger.exception("deleted_projects_list_failed")
            raise InternalServerException("Error al obtener proyectos eliminados.")
        return items

    async def list_kind(self, key: str) -> list[dict]:
        kind = get_kind(key)
        try:
            entities = await ProjectRepository(self._db, kind).list_by_deleted(True)
        except SQLAlchemyError:
            logger.exception("deleted_projects_list_failed kind=%s", key)
            raise InternalServerException("Error al obtener proyectos eliminados.")
        return [kind.to_deleted(e) for e in entities]

    async def list_kind_detailed(self, key: str) -> list[dict]:
        """Eliminados de un tipo con la misma forma que su listado de activos."""
        kind = get_kind(key)
        try:
            entities = await ProjectRepository(self._db, kind).list_by_deleted(True)
        except SQLAlchemyError:
            logger.exception("deleted_projects_detail_failed kind=%s", key)
            raise InternalServerException("Error al obtener proyectos eliminados.")
        return [kind.to_detail(e) for e in entities]


class PublicProjectService:
    def __init__(self, db: AsyncSession, audit: AuditRecorder) -> None:
        self._db = db
        self._audit = audit

    async def pdf_data(
        self,
        collection: str,
        project_id: int,
        *,
        actor_id: Optional[int] = None,
    ) -> dict:
        kind = get_kind_by_collection(collection)
        try:
            entity = await ProjectRepository(self._db, kind).get_by_id(project_id)
            if entity is None:
                await self._audit(
                    kind.audit_module, "Intento de Descarga PDF Fallido",
                    f"{kind.label} ID {project_id} no encontrado para PDF.",
                    registro_afectado_id=project_id, id_login=actor_id,
                )
                raise NotFoundException(kind.messages.not_found)
            data = kind.to_pdf(entity)
        except ApiException:
            raise
        except SQLAlchemyError:
            logger.exception("pdf_data_failed kind=%s id=%s", kind.key, project_id)
            await self._audit(
                kind.audit_module, "Error al Descargar PDF",
                f"Error de base de datos al obtener {kind.label} ID {project_id} para PDF.",
                registro_afectado_id=project_id, id_login=actor_id,
            )
            raise InternalServerException("Error interno del servidor al obtener datos para PDF.")
        except Exception as exc:
            logger.exception("pdf_data_exception kind=%s id=%s", kind.key, project_id)
            await self._audit(
                kind.audit_module, "Error de Excepción al Descargar PDF",
                f"Excepción al obtener {kind.label} ID {project_id} para PDF. Mensaje: {exc}.",
                registro_afectado_id=project_id, id_login=actor_id,
            )
            raise InternalServerException(
                "Error interno del servidor al obtener datos para PDF."
            ) from exc

        await self._audit(
            kind.audit_module, "Descargar PDF (Datos)",
            f"Se obtuvieron los datos de {kind.label} ID {project_id} para PDF.",
            registro_afectado_id=project_id, id_login=actor_id,
        )
        return data


class DashboardService:
    def __init__(self, db: AsyncSession) -> None:
        self._db = db

    async def count(self, key: str) -> dict:
        kind = get_kind(key)
        try:
            total = await ProjectRepository(self._db, kind).count_active()
        except SQLAlchemyError:
            logger.exception("dashboard_count_failed kind=%s", key)
            raise InternalServerException("Error al obtener el conteo de proyectos.")
        return {"count": total}


def get_deleted_project_service(
    db: AsyncSession = Depends(get_async_session),
) -> DeletedProjectService:
    return DeletedProjectService(db)


def get_public_project_service(
    db: AsyncSession = Depends(get_async_session),
    audit: AuditRecorder = Depends(get_audit_recorder),
) -> PublicProjectService:
    return PublicProjectService(db, audit)


def get_dashboard_service(
    db: AsyncSession = Depends(get_async_session),
) -> DashboardService:
    return DashboardService(db)


__all__ = [
    "DeletedProjectService",
    "PublicProjectService",
    "DashboardService",
    "get_deleted_project_service",
    "get_public_project_service",
    "get_dashboard_service",
]
# Fin del archivo backend/app/modules/projects/services/project_query_service.py
