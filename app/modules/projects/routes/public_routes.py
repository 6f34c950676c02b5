# -*- coding: utf-8 -*-
"""
backend/app/modules/projects/routes/public_routes.py

Datos públicos de un proyecto para generar su PDF en el cliente.

Autor: Ixchel Beristain
Fecha: 03/10/2026
"""

from typing import Optional

from fastapi import APIRouter, Depends

from app.modules.projects.services import PublicProjectService, get_public_project_service
from app.shared.middleware.current_user import get_current_user_id

router = APIRouter(prefix="/publicas", tags=["publicas"])


@router.get("/{collection}/{project_id}/datos-pdf", summary="Datos de proyecto para PDF")
async def get_pdf_data(
    collection: str,
    project_id: int,
    actor_id: Optional[int] = Depends(get_current_user_id),
    service: PublicProjectService = Depends(get_public_project_service),
):
    return await service.pdf_data(collection, project_id, actor_id=actor_id)

# Fin del archivo backend/app/modules/projects/routes/public_routes.py
