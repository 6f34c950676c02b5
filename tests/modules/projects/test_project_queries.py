# -*- coding: utf-8 -*-
"""
Tests de las consultas transversales de proyectos: eliminados de todos
los tipos, datos públicos para PDF y contadores del dashboard.
"""

import pytest

from tests.modules.projects.payloads import community, internship, research, thesis
from tests.support import audit_actions

pytestmark = pytest.mark.anyio


async def _create(client, path: str, payload: dict, pk: str) -> int:
    response = await client.post(f"/api/{path}", json=payload)
    assert response.status_code == 201, response.text
    return response.json()[pk]


async def test_deleted_projects_share_one_shape(logged_client, catalogs):
    research_id = await _create(
        logged_client, "agregar-proyecto-investigacion", research(catalogs), "id_proyecto_investigacion"
    )
    internship_id = await _create(logged_client, "agregar-pasantia", internship(catalogs), "id_pasantia")
    await _create(logged_client, "agregar-trabajo-de-grado", thesis(catalogs), "id_trabajo_grado")

    await logged_client.put(
        f"/api/proyectos-investigacion/eliminar-logico/{research_id}",
        json={"mensajeEliminacion": "Sin financiamiento"},
    )
    await logged_client.put(
        f"/api/pasantias/eliminar-logico/{internship_id}",
        json={"mensajeEliminacion": "Empresa cerró"},
    )

    response = await logged_client.get("/api/proyectos-eliminados")

    assert response.status_code == 200
    research_item, internship_item = response.json()
    assert research_item == {
        "id": research_id,
        "tipo_proyecto": "Proyecto de Investigación",
        "periodo": "2026-I",
        "nombre_proyecto": "Energía solar en zonas rurales",
        "carrera": "Ingeniería de Sistemas",
        "tutor": None,
        "estudiantes": [{"cedula": "V-27000111", "nombre_completo": "Ana Torres"}],
        "mensaje_eliminacion": "Sin financiamiento",
    }
    assert internship_item["id"] == internship_id
    assert internship_item["tipo_proyecto"] == "Pasantía"
    assert internship_item["nombre_proyecto"] == "Soporte de redes"
    assert internship_item["tutor"] == {"cedula": "V-10200300", "nombre_completo": "Carmen Villalobos"}
    assert internship_item["mensaje_eliminacion"] == "Empresa cerró"


async def test_deleted_projects_by_kind(logged_client, catalogs):
    project_id = await _create(
        logged_client, "agregar-proyecto-comunitario", community(catalogs), "id_servicio"
    )
    await logged_client.put(f"/api/proyectos-comunitarios/eliminar-logico/{project_id}")

    by_kind = (await logged_client.get("/api/proyectos-eliminados/servicio-comunitario")).json()
    other = (await logged_client.get("/api/proyectos-eliminados/pasantias")).json()

    assert [p["id"] for p in by_kind] == [project_id]
    assert [s["cedula"] for s in by_kind[0]["estudiantes"]] == ["V-27000111", "V-27000222"]
    assert by_kind[0]["mensaje_eliminacion"] is None
    assert other == []


async def test_restore_clears_deletion_message(logged_client, catalogs):
    project_id = await _create(logged_client, "agregar-pasantia", internship(catalogs), "id_pasantia")
    await logged_client.put(
        f"/api/pasantias/eliminar-logico/{project_id}", json={"mensajeEliminacion": "Error"}
    )
    await logged_client.put(f"/api/pasantias/restaurar/{project_id}")

    detail = (await logged_client.get(f"/api/pasantias/{project_id}")).json()

    assert detail["eliminado"] is False
    assert detail["mensaje_eliminado"] is None
    assert (await logged_client.get("/api/proyectos-eliminados")).json() == []


async def test_unknown_kind_is_404(client, db_schema):
    deleted = await client.get("/api/proyectos-eliminados/otros")
    counted = await client.get("/api/dashboard/count/otros")
    pdf = await client.get("/api/publicas/otros/1/datos-pdf")

    for response in (deleted, counted, pdf):
        assert response.status_code == 404
        assert response.json() == {"error": "Tipo de proyecto no válido."}


async def test_pdf_data_is_public_and_audited(logged_client, client, catalogs):
    project_id = await _create(logged_client, "agregar-trabajo-de-grado", thesis(catalogs), "id_trabajo_grado")
    await logged_client.post("/api/logout")

    response = await client.get(f"/api/publicas/trabajos-de-grado/{project_id}/datos-pdf")

    assert response.status_code == 200
    assert response.json() == {
        "nombreProyecto": "Sistema de inventario con FastAPI",
        "estado": "Aprobado",
        "fecha": "2026-07-15",
        "carrera": "Ingeniería de Sistemas",
        "periodo": "2026-I",
        "tutorCedula": "V-10200300",
        "tutorNombre": "Carmen Villalobos",
        "estudiante": {
            "cedula": "V-27000111",
            "nombreCompleto": "Ana Torres",
            "carreraEstudiante": "Ingeniería de Sistemas",
        },
    }
    assert await audit_actions("Trabajo de Grado") == [
        "Agregar Trabajo de Grado",
        "Descargar PDF (Datos)",
    ]


async def test_pdf_data_for_community_lists_members(client, catalogs, logged_client):
    project_id = await _create(
        logged_client, "agregar-proyecto-comunitario", community(catalogs), "id_servicio"
    )

    body = (await client.get(f"/api/publicas/proyectos-comunitarios/{project_id}/datos-pdf")).json()

    assert body["comunidad"] == "Catia"
    assert body["fechaInicio"] == "2026-02-01"
    assert [m["nombreCompleto"] for m in body["integrantes"]] == ["Ana Torres", "Luis Mora"]


async def test_pdf_data_for_missing_project_is_404_and_audited(client, db_schema):
    response = await client.get("/api/publicas/pasantias/999/datos-pdf")

    assert response.status_code == 404
    assert response.json() == {"error": "Pasantía no encontrada."}
    assert await audit_actions("Pasantías") == ["Intento de Descarga PDF Fallido"]


async def test_dashboard_counts_active_projects(logged_client, catalogs):
    first = await _create(logged_client, "agregar-pasantia", internship(catalogs), "id_pasantia")
    await _create(logged_client, "agregar-pasantia", internship(catalogs, titulo="Otra"), "id_pasantia")

    assert (await logged_client.get("/api/dashboard/count/pasantias")).json() == {"count": 2}

    await logged_client.put(f"/api/pasantias/eliminar-logico/{first}")

    assert (await logged_client.get("/api/dashboard/count/pasantias")).json() == {"count": 1}
    assert (await logged_client.get("/api/dashboard/count/trabajo-de-grado")).json() == {"count": 0}


async def test_deleted_community_and_thesis_keep_their_detailed_lists(logged_client, catalogs):
    community_id = await _create(
        logged_client, "agregar-proyecto-comunitario", community(catalogs), "id_servicio"
    )
    thesis_id = await _create(
        logged_client, "agregar-trabajo-de-grado", thesis(catalogs), "id_trabajo_grado"
    )
    await logged_client.put(
        f"/api/proyectos-comunitarios/eliminar-logico/{community_id}",
        json={"mensajeEliminacion": "Comunidad reubicada"},
    )

    communities = await logged_client.get("/api/proyectos-comunitarios-eliminados")
    theses = (await logged_client.get("/api/trabajos-de-grado-eliminados")).json()

    assert communities.status_code == 200
    (item,) = communities.json()
    assert item["id_servicio"] == community_id
    assert item["id_periodo"] == catalogs["id_periodo"]
    assert item["id_carrera"] == catalogs["id_carrera"]
    assert item["comunidad"] == "Catia"
    assert item["eliminados"] is True
    assert item["mensaje_eliminacion"] == "Comunidad reubicada"
    assert [m["cedula"] for m in item["integrantes"]] == ["V-27000111", "V-27000222"]
    assert theses == []

    await logged_client.put(f"/api/trabajos-de-grado/eliminar-logico/{thesis_id}")
    (deleted_thesis,) = (await logged_client.get("/api/trabajos-de-grado-eliminados")).json()
    assert deleted_thesis["id_trabajo_grado"] == thesis_id
    assert deleted_thesis["estado"] == "Aprobado"
    assert deleted_thesis["fecha"] == "2026-07-15"
