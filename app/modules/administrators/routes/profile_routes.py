# -*- coding: utf-8 -*-
"""
backend/app/modules/administrators/routes/profile_routes.py

Perfil del usuario conectado:
- GET /api/administrador/{id_login}
- PUT /api/administrador/{id_login}
- GET /api/user-profile/{id_login}   (nombre para la cabecera del panel)

Autor: Ixchel Beristain
Fecha: 27/09/2026
"""

from typing import Optional

from fastapi import APIRouter, Depends

from app.modules.administrators.schemas import ProfileUpdateRequest
from app.modules.administrators.services import ProfileService, get_profile_service
from app.shared.middleware.current_user import get_current_user_id

router = APIRouter(tags=["perfil"])


@router.get("/administrador/{id_login}", summary="Perfil del administrador")
async def get_profile(
    id_login: int,
    service: ProfileService = Depends(get_profile_service),
):
    return await service.get_profile(id_login)


@router.put("/administrador/{id_login}", summary="Actualizar perfil")
async def update_profile(
    id_login: int,
    payload: ProfileUpdateRequest,
    actor_id: Optional[int] = Depends(get_current_user_id),
    service: ProfileService = Depends(get_profile_service),
):
    return await service.update_profile(id_login, payload, actor_id=actor_id)


@router.get("/user-profile/{id_login}", summary="Nombre del usuario conectado")
async def get_user_profile(
    id_login: int,
    service: ProfileService = Depends(get_profile_service),
):
    return await service.get_display_name(id_login)

# Fin del archivo backend/app/modules/administrators/routes/profile_routes.py
