# -*- coding: utf-8 -*-
"""
backend/app/modules/audit/routes/bitacora_routes.py

GET /api/bitacora: registros de auditoría, del más reciente al más antiguo.

Autor: Ixchel Beristain
Fecha: 22/09/2026
"""

from fastapi import APIRouter, Depends

from app.modules.audit.services import BitacoraQueryService, get_bitacora_query_service

router = APIRouter(tags=["bitacora"])


@router.get("/bitacora", summary="Listar registros de la bitácora")
async def list_bitacora(
    service: BitacoraQueryService = Depends(get_bitacora_query_service),
):
    return await service.list_entries()

# Fin del archivo backend/app/modules/audit/routes/bitacora_routes.py
