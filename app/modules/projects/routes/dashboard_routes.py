# -*- coding: utf-8 -*-
"""
backend/app/modules/projects/routes/dashboard_routes.py
"""

from fastapi import APIRouter, Depends

from app.modules.projects.services import DashboardService, get_dashboard_service

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("/count/{tipo}", summary="Proyectos activos por tipo")
async def count_projects(
    tipo: str,
    service: DashboardService = Depends(get_dashboard_service),
):
    return await service.count(tipo)
