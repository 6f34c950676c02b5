# -*- coding: utf-8 -*-
"""
backend/app/modules/academics/routes/student_routes.py

Rutas de estudiantes. DELETE /estudiantes/{id} es también una baja
lógica (alias de PUT /estudiantes/eliminar-logico/{id}).

Autor: Ixchel Beristain
Fecha: 30/09/2026
"""

from typing import Optional

from fastapi import APIRouter, Depends, status

from app.modules.academics.schemas import StudentRequest
from app.modules.academics.services import StudentService, get_student_service
from app.shared.middleware.current_user import get_current_user_id

router = APIRouter(prefix="/estudiantes", tags=["estudiantes"])


@router.get("", summary="Estudiantes activos")
async def list_students(service: StudentService = Depends(get_student_service)):
    return await service.list_active()


@router.get("/{id_estudiante}", summary="Estudiante por ID")
async def get_student(
    id_estudiante: int,
    service: StudentService = Depends(get_student_service),
):
    return await service.get(id_estudiante)


@router.post("", status_code=status.HTTP_201_CREATED, summary="Crear estudiante")
async def create_student(
    payload: StudentRequest,
    actor_id: Optional[int] = Depends(get_current_user_id),
    service: StudentService = Depends(get_student_service),
):
    return await service.create(payload, actor_id=actor_id)


@router.put("/eliminar-logico/{id_estudiante}", summary="Baja lógica de estudiante")
async def soft_delete_student(
    id_estudiante: int,
    actor_id: Optional[int] = Depends(get_current_user_id),
    service: StudentService = Depends(get_student_service),
):
    return await service.soft_delete(id_estudiante, actor_id=actor_id)


@router.put("/{id_estudiante}", summary="Actualizar estudiante")
async def update_student(
    id_estudiante: int,
    payload: StudentRequest,
    actor_id: Optional[int] = Depends(get_current_user_id),
    service: StudentService = Depends(get_student_service),
):
    return await service.update(id_estudiante, payload, actor_id=actor_id)


@router.delete("/{id_estudiante}", summary="Baja lógica de estudiante")
async def delete_student(
    id_estudiante: int,
    actor_id: Optional[int] = Depends(get_current_user_id),
    service: StudentService = Depends(get_student_service),
):
    return await service.soft_delete(id_estudiante, actor_id=actor_id)

# Fin del archivo backend/app/modules/academics/routes/student_routes.py
