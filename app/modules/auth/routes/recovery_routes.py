# -*- coding: utf-8 -*-
"""
backend/app/modules/auth/routes/recovery_routes.py

Recuperación de contraseña y aviso de activación de cuenta:
- POST /api/recuperar-password
- POST /api/verificar-codigo
- POST /api/resetear-password
- POST /api/enviar-correo-activacion

Autor: Ixchel Beristain
Fecha: 25/09/2026
"""

from typing import Optional

from fastapi import APIRouter, Depends

from app.modules.auth.schemas import RecoveryRequest, ResetPasswordRequest, VerifyCodeRequest
from app.modules.auth.services import RecoveryService, get_recovery_service
from app.shared.middleware.current_user import get_current_user_id

router = APIRouter(tags=["auth-recovery"])


@router.post("/recuperar-password", summary="Solicitar código de recuperación")
async def request_recovery_code(
    payload: RecoveryRequest,
    service: RecoveryService = Depends(get_recovery_service),
):
    return await service.request_code(payload)


@router.post("/verificar-codigo", summary="Verificar código de recuperación")
async def verify_recovery_code(
    payload: VerifyCodeRequest,
    service: RecoveryService = Depends(get_recovery_service),
):
    return await service.verify_code(payload)


@router.post("/resetear-password", summary="Restablecer contraseña")
async def reset_password(
    payload: ResetPasswordRequest,
    service: RecoveryService = Depends(get_recovery_service),
):
    return await service.reset_password(payload)


@router.post("/enviar-correo-activacion", summary="Enviar aviso de cuenta activada")
async def send_activation_email(
    payload: RecoveryRequest,
    actor_id: Optional[int] = Depends(get_current_user_id),
    service: RecoveryService = Depends(get_recovery_service),
):
    return await service.send_activation_email(payload, actor_id=actor_id)

# Fin del archivo backend/app/modules/auth/routes/recovery_routes.py
