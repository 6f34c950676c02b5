# -*- coding: utf-8 -*-
"""
Tests de catálogos, búsqueda por cédula y búsqueda de proyectos.
"""

import pytest

from tests.modules.projects.payloads import research, thesis

pytestmark = pytest.mark.anyio


async def test_catalogs_are_listed(client, catalogs):
    carreras = (await client.get("/api/carreras")).json()
    periodos = (await client.get("/api/periodos")).json()
    empresas = (await client.get("/api/empresas")).json()

    assert carreras == [{"id_carrera": catalogs["id_carrera"], "carrera": "Ingeniería de Sistemas"}]
    assert periodos == [{"id_periodo": catalogs["id_periodo"], "periodo": "2026-I"}]
    assert empresas == [{"id_empresa": catalogs["id_empresa"], "nombre_empresa": "CANTV"}]


async def test_lookup_by_cedula(logged_client):
    await logged_client.post("/api/estudiantes", json={"nombre_completo": "Ana Torres", "cedula": "V-1"})

    found = await logged_client.get("/api/estudiante-por-cedula/V-1")
    missing = await logged_client.get("/api/tutor-por-cedula/V-404")

    assert found.status_code == 200
    assert found.json()["nombre_completo"] == "Ana Torres"
    assert missing.status_code == 404
    assert missing.json() == {"error": "Tutor no encontrado."}


async def test_project_search_by_student_and_tutor(logged_client, catalogs):
    await logged_client.post("/api/agregar-trabajo-de-grado", json=thesis(catalogs))
    research_id = (
        await logged_client.post("/api/agregar-proyecto-investigacion", json=research(catalogs))
    ).json()["id_proyecto_investigacion"]
    await logged_client.put(f"/api/proyectos-investigacion/eliminar-logico/{research_id}")

    student = (await logged_client.get("/api/estudiante-por-cedula/V-27000111")).json()
    tutor = (await logged_client.get("/api/tutor-por-cedula/V-10200300")).json()

    by_student = (await logged_client.get(f"/api/buscar-proyectos/{student['id_estudiante']}")).json()
    by_tutor = (await logged_client.get(f"/api/buscar-proyectos/tutor/{tutor['id_tutor']}")).json()

    assert [p["proyecto"] for p in by_student["trabajosGrado"]] == ["Sistema de inventario con FastAPI"]
    assert by_student["trabajosGrado"][0]["periodo"] == "2026-I"
    # Los proyectos eliminados no aparecen en la búsqueda
    assert by_student["proyectosInvestigacion"] == []
    assert by_student["servicioComunitario"] == []
    assert by_student["pasantias"] == []
    assert set(by_tutor) == {"servicioComunitario", "trabajosGrado", "pasantias"}
    assert len(by_tutor["trabajosGrado"]) == 1
