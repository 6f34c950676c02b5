# -*- coding: utf-8 -*-
"""
backend/app/modules/projects/routes/deleted_routes.py

Listado de proyectos eliminados, todos o por tipo. La restauración
vive en las rutas de cada tipo (PUT /{collection}/restaurar/{id}).

Servicio comunitario y trabajo de grado conservan además sus rutas
propias (/proyectos-comunitarios-eliminados, /trabajos-de-grado-eliminados)
con la forma detallada de cada tipo.

Autor: Ixchel Beristain
Fecha: 03/10/2026
"""

from fastapi import APIRouter, Depends

from app.modules.projects.services import DeletedProjectService, get_deleted_project_service
from app.modules.projects.services.project_kinds import COMMUNITY_SERVICE, THESIS

router = APIRouter(prefix="/proyectos-eliminados", tags=["proyectos-eliminados"])
detailed_router = APIRouter(tags=["proyectos-eliminados"])


@router.get("", summary="Proyectos eliminados de todos los tipos")
async def list_deleted_projects(
    service: DeletedProjectService = Depends(get_deleted_project_service),
):
    return await service.list_all()


@router.get("/{tipo}", summary="Proyectos eliminados por tipo")
async def list_deleted_projects_by_kind(
    tipo: str,
    service: DeletedProjectService = Depends(get_deleted_project_service),
):
    return await service.list_kind(tipo)


@detailed_router.get(
    "/proyectos-comunitarios-eliminados",
    summary="Proyectos de servicio comunitario eliminados (detalle)",
)
async def list_deleted_community_projects(
    service: DeletedProjectService = Depends(get_deleted_project_service),
):
    return await service.list_kind_detailed(COMMUNITY_SERVICE.key)


@detailed_router.get(
    "/trabajos-de-grado-eliminados",
    summary="Trabajos de grado eliminados (detalle)",
)
async def list_deleted_theses(
    service: DeletedProjectService = Depends(get_deleted_project_service),
):
    return await service.list_kind_detailed(THESIS.key)

# Fin del archivo backend/app/modules/projects/routes/deleted_routes.py
