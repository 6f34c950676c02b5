# -*- coding: utf-8 -*-
"""
backend/app/modules/administrators/routes/administrator_routes.py

Rutas de administradores:
- GET  /api/administradores
- GET  /api/administradores/eliminados
- GET  /api/administradores/{id}
- POST /api/administradores
- PUT  /api/administradores/{id}
- PUT  /api/administradores/eliminar-logico/{id}
- PUT  /api/administradores/restaurar/{id}

Autor: Ixchel Beristain
Fecha: 27/09/2026
"""

from typing import Optional

from fastapi import APIRouter, Body, Depends, status

from app.modules.administrators.schemas import (
    AdministratorCreateRequest,
    AdministratorDeleteRequest,
    AdministratorUpdateRequest,
)
from app.modules.administrators.services import AdministratorService, get_administrator_service
from app.shared.middleware.current_user import get_current_user_id

router = APIRouter(prefix="/administradores", tags=["administradores"])


@router.get("", summary="Administradores activos")
async def list_administrators(
    service: AdministratorService = Depends(get_administrator_service),
):
    return await service.list_active()


# Rutas estáticas antes de /{id_administrador}
@router.get("/eliminados", summary="Administradores dados de baja")
async def list_deleted_administrators(
    service: AdministratorService = Depends(get_administrator_service),
):
    return await service.list_deleted()


@router.get("/{id_administrador}", summary="Administrador activo por ID")
async def get_administrator(
    id_administrador: int,
    service: AdministratorService = Depends(get_administrator_service),
):
    return await service.get_active(id_administrador)


@router.post("", status_code=status.HTTP_201_CREATED, summary="Crear administrador")
async def create_administrator(
    payload: AdministratorCreateRequest,
    actor_id: Optional[int] = Depends(get_current_user_id),
    service: AdministratorService = Depends(get_administrator_service),
):
    return await service.create(payload, actor_id=actor_id)


@router.put("/eliminar-logico/{id_administrador}", summary="Baja lógica de administrador")
async def soft_delete_administrator(
    id_administrador: int,
    payload: Optional[AdministratorDeleteRequest] = Body(None),
    actor_id: Optional[int] = Depends(get_current_user_id),
    service: AdministratorService = Depends(get_administrator_service),
):
    return await service.soft_delete(id_administrador, payload, actor_id=actor_id)


@router.put("/restaurar/{id_administrador}", summary="Restaurar administrador")
async def restore_administrator(
    id_administrador: int,
    actor_id: Optional[int] = Depends(get_current_user_id),
    service: AdministratorService = Depends(get_administrator_service),
):
    return await service.restore(id_administrador, actor_id=actor_id)


@router.put("/{id_administrador}", summary="Actualizar administrador")
async def update_administrator(
    id_administrador: int,
    payload: AdministratorUpdateRequest,
    actor_id: Optional[int] = Depends(get_current_user_id),
    service: AdministratorService = Depends(get_administrator_service),
):
    return await service.update(id_administrador, payload, actor_id=actor_id)

# Fin del archivo backend/app/modules/administrators/routes/administrator_routes.py
