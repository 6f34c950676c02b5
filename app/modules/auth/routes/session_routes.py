# -*- coding: utf-8 -*-
"""
backend/app/modules/auth/routes/session_routes.py

Rutas de sesión:
- POST /api/register
- POST /api/login        (guarda id_login, correo y rol en la sesión)
- POST /api/logout
- GET  /api/current-user-id

Autor: Ixchel Beristain
Fecha: 25/09/2026
"""

# Note: NOT using 'from __future__ import annotations' to ensure FastAPI
# can properly resolve Request type annotation for dependency injection

from typing import Optional

from fastapi import APIRouter, Depends, Request, status

from app.modules.auth.schemas import LoginRequest, RegisterRequest
from app.modules.auth.services import AuthService, get_auth_service
from app.shared.middleware.current_user import SESSION_USER_KEY, get_current_user_id
from app.shared.utils.http_exceptions import NotFoundException

router = APIRouter(tags=["auth-session"])


@router.post("/register", status_code=status.HTTP_201_CREATED, summary="Registro de usuario")
async def register(
    payload: RegisterRequest,
    actor_id: Optional[int] = Depends(get_current_user_id),
    service: AuthService = Depends(get_auth_service),
):
    return await service.register(payload, actor_id=actor_id)


@router.post("/login", summary="Inicio de sesión")
async def login(
    payload: LoginRequest,
    request: Request,
    service: AuthService = Depends(get_auth_service),
):
    result = await service.login(payload)
    user = result["user"]
    request.session[SESSION_USER_KEY] = user["id_login"]
    request.session["correo"] = user["correo"]
    request.session["rol"] = user["rol"]
    return result


@router.post("/logout", summary="Cierre de sesión")
async def logout(
    request: Request,
    actor_id: Optional[int] = Depends(get_current_user_id),
    service: AuthService = Depends(get_auth_service),
):
    request.session.clear()
    await service.logout(actor_id)
    return {"message": "Sesión cerrada exitosamente."}


@router.get("/current-user-id", summary="ID de login de la sesión actual")
async def current_user_id(actor_id: Optional[int] = Depends(get_current_user_id)):
    if actor_id is None:
        raise NotFoundException("ID de usuario no encontrado en la sesión.")
    return {"id_login": actor_id}

# Fin del archivo backend/app/modules/auth/routes/session_routes.py
