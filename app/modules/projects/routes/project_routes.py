# -*- coding: utf-8 -*-
"""
backend/app/modules/projects/routes/project_routes.py

Rutas CRUD por tipo de proyecto. Las cuatro familias comparten forma,
así que se generan desde su ProjectKind:

    GET  /{collection}
    GET  /{collection}/{id}
    POST /{create_path}
    PUT  /{collection}/eliminar-logico/{id}
    PUT  /{collection}/restaurar/{id}
    PUT  /{collection}/{id}

Las rutas estáticas se registran antes que /{collection}/{id}.

Autor: Ixchel Beristain
Fecha: 03/10/2026
"""

from typing import Optional

from fastapi import APIRouter, Body, Depends, status

from app.modules.projects.schemas import ProjectPayload, RestoreRequest, SoftDeleteRequest
from app.modules.projects.services import (
    PROJECT_KINDS,
    ProjectKind,
    ProjectService,
    project_service_provider,
)
from app.shared.middleware.current_user import get_current_user_id


def build_project_router(kind: ProjectKind) -> APIRouter:
    router = APIRouter(tags=[kind.collection])
    get_service = project_service_provider(kind)
    base = f"/{kind.collection}"

    @router.get(base, summary=f"{kind.label}: activos")
    async def list_projects(service: ProjectService = Depends(get_service)):
        return await service.list_active()

    @router.post(
        f"/{kind.create_path}",
        status_code=status.HTTP_201_CREATED,
        summary=f"{kind.label}: agregar",
    )
    async def create_project(
        payload: ProjectPayload,
        actor_id: Optional[int] = Depends(get_current_user_id),
        service: ProjectService = Depends(get_service),
    ):
        return await service.create(payload, actor_id=actor_id)

    @router.put(base + "/eliminar-logico/{project_id}", summary=f"{kind.label}: baja lógica")
    async def soft_delete_project(
        project_id: int,
        payload: Optional[SoftDeleteRequest] = Body(None),
        actor_id: Optional[int] = Depends(get_current_user_id),
        service: ProjectService = Depends(get_service),
    ):
        return await service.soft_delete(project_id, payload, actor_id=actor_id)

    @router.put(base + "/restaurar/{project_id}", summary=f"{kind.label}: restaurar")
    async def restore_project(
        project_id: int,
        payload: Optional[RestoreRequest] = Body(None),
        actor_id: Optional[int] = Depends(get_current_user_id),
        service: ProjectService = Depends(get_service),
    ):
        return await service.restore(project_id, payload, actor_id=actor_id)

    @router.get(base + "/{project_id}", summary=f"{kind.label}: por ID")
    async def get_project(
        project_id: int,
        service: ProjectService = Depends(get_service),
    ):
        return await service.get(project_id)

    @router.put(base + "/{project_id}", summary=f"{kind.label}: actualizar")
    async def update_project(
        project_id: int,
        payload: ProjectPayload,
        actor_id: Optional[int] = Depends(get_current_user_id),
        service: ProjectService = Depends(get_service),
    ):
        return await service.update(project_id, payload, actor_id=actor_id)

    return router


project_routers = [build_project_router(kind) for kind in PROJECT_KINDS]

# Fin del archivo backend/app/modules/projects/routes/project_routes.py
