# -*- coding: utf-8 -*-
"""
backend/app/modules/academics/routes/tutor_routes.py

Rutas de tutores (mismo contrato que estudiantes).

Autor: Ixchel Beristain
Fecha: 30/09/2026
"""

from typing import Optional

from fastapi import APIRouter, Depends, status

from app.modules.academics.schemas import TutorRequest
from app.modules.academics.services import TutorService, get_tutor_service
from app.shared.middleware.current_user import get_current_user_id

router = APIRouter(prefix="/tutores", tags=["tutores"])


@router.get("", summary="Tutores activos")
async def list_tutors(service: TutorService = Depends(get_tutor_service)):
    return await service.list_active()


@router.get("/{id_tutor}", summary="Tutor por ID")
async def get_tutor(id_tutor: int, service: TutorService = Depends(get_tutor_service)):
    return await service.get(id_tutor)


@router.post("", status_code=status.HTTP_201_CREATED, summary="Crear tutor")
async def create_tutor(
    payload: TutorRequest,
    actor_id: Optional[int] = Depends(get_current_user_id),
    service: TutorService = Depends(get_tutor_service),
):
    return await service.create(payload, actor_id=actor_id)


@router.put("/eliminar-logico/{id_tutor}", summary="Baja lógica de tutor")
async def soft_delete_tutor(
    id_tutor: int,
    actor_id: Optional[int] = Depends(get_current_user_id),
    service: TutorService = Depends(get_tutor_service),
):
    return await service.soft_delete(id_tutor, actor_id=actor_id)


@router.put("/{id_tutor}", summary="Actualizar tutor")
async def update_tutor(
    id_tutor: int,
    payload: TutorRequest,
    actor_id: Optional[int] = Depends(get_current_user_id),
    service: TutorService = Depends(get_tutor_service),
):
    return await service.update(id_tutor, payload, actor_id=actor_id)


@router.delete("/{id_tutor}", summary="Baja lógica de tutor")
async def delete_tutor(
    id_tutor: int,
    actor_id: Optional[int] = Depends(get_current_user_id),
    service: TutorService = Depends(get_tutor_service),
):
    return await service.soft_delete(id_tutor, actor_id=actor_id)

# Fin del archivo backend/app/modules/academics/routes/tutor_routes.py
