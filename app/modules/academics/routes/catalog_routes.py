# -*- coding: utf-8 -*-
"""
backend/app/modules/academics/routes/catalog_routes.py

Catálogos y búsquedas:
- GET /api/carreras, /api/periodos, /api/empresas
- GET /api/estudiante-por-cedula/{cedula}, /api/tutor-por-cedula/{cedula}
- GET /api/buscar-proyectos/{id_estudiante}
- GET /api/buscar-proyectos/tutor/{id_tutor}

Autor: Ixchel Beristain
Fecha: 30/09/2026
"""

from fastapi import APIRouter, Depends

from app.modules.academics.services import CatalogService, get_catalog_service

router = APIRouter(tags=["catalogos"])


@router.get("/carreras", summary="Catálogo de carreras")
async def list_carreras(service: CatalogService = Depends(get_catalog_service)):
    return await service.list_carreras()


@router.get("/periodos", summary="Catálogo de periodos")
async def list_periodos(service: CatalogService = Depends(get_catalog_service)):
    return await service.list_periodos()


@router.get("/empresas", summary="Catálogo de empresas")
async def list_empresas(service: CatalogService = Depends(get_catalog_service)):
    return await service.list_empresas()


@router.get("/estudiante-por-cedula/{cedula}", summary="Estudiante por cédula")
async def student_by_cedula(cedula: str, service: CatalogService = Depends(get_catalog_service)):
    return await service.student_by_cedula(cedula)


@router.get("/tutor-por-cedula/{cedula}", summary="Tutor por cédula")
async def tutor_by_cedula(cedula: str, service: CatalogService = Depends(get_catalog_service)):
    return await service.tutor_by_cedula(cedula)


@router.get("/buscar-proyectos/tutor/{id_tutor}", summary="Proyectos de un tutor")
async def projects_of_tutor(id_tutor: int, service: CatalogService = Depends(get_catalog_service)):
    return await service.projects_of_tutor(id_tutor)


@router.get("/buscar-proyectos/{id_estudiante}", summary="Proyectos de un estudiante")
async def projects_of_student(
    id_estudiante: int,
    service: CatalogService = Depends(get_catalog_service),
):
    return await service.projects_of_student(id_estudiante)

# Fin del archivo backend/app/modules/academics/routes/catalog_routes.py
