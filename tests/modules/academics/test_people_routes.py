# -*- coding: utf-8 -*-
"""
Tests de estudiantes y tutores: alta, consulta, modificación y baja lógica.
"""

import pytest

from app.modules.academics.repositories import PersonRepository, StudentRepository

from tests.support import audit_actions, audit_rows

pytestmark = pytest.mark.anyio


async def test_student_crud_with_soft_delete(logged_client, admin, catalogs):
    created = await logged_client.post(
        "/api/estudiantes",
        json={"nombre_completo": "Ana Torres", "cedula": "V-28111222", "id_carrera": catalogs["id_carrera"]},
    )
    assert created.status_code == 201
    body = created.json()
    assert body["message"] == "Estudiante creado con éxito"
    student_id = body["data"]["id_estudiante"]

    listed = (await logged_client.get("/api/estudiantes")).json()
    assert listed == [
        {
            "id_estudiante": student_id,
            "nombre_completo": "Ana Torres",
            "cedula": "V-28111222",
            "id_carrera": catalogs["id_carrera"],
            "carrera": "Ingeniería de Sistemas",
        }
    ]

    updated = await logged_client.put(
        f"/api/estudiantes/{student_id}",
        json={"nombre_completo": "Ana María Torres", "cedula": "V-28111222", "id_carrera": catalogs["id_carrera"]},
    )
    assert updated.status_code == 200
    assert updated.json()["data"]["nombre_completo"] == "Ana María Torres"

    deleted = await logged_client.put(f"/api/estudiantes/eliminar-logico/{student_id}")
    assert deleted.status_code == 200
    assert (await logged_client.get("/api/estudiantes")).json() == []

    missing = await logged_client.get(f"/api/estudiantes/{student_id}")
    assert missing.status_code == 404
    assert missing.json() == {"error": "Estudiante no encontrado"}

    rows = await audit_rows("Estudiantes")
    assert [r.accion_realizada for r in rows] == ["Creación", "Actualización", "Eliminación Lógica"]
    assert all(r.id_login == admin["id_login"] for r in rows)


async def test_student_without_career_shows_placeholder(logged_client):
    created = await logged_client.post(
        "/api/estudiantes", json={"nombre_completo": "Luis Mora", "cedula": "V-1", "id_carrera": ""}
    )
    student_id = created.json()["data"]["id_estudiante"]

    fetched = (await logged_client.get(f"/api/estudiantes/{student_id}")).json()

    assert fetched["id_carrera"] is None
    assert fetched["carrera"] == "N/A"


async def test_student_requires_name_and_cedula(logged_client):
    response = await logged_client.post("/api/estudiantes", json={"cedula": "V-1"})

    assert response.status_code == 400
    assert response.json() == {"error": "Nombre completo y cédula son obligatorios."}
    assert await audit_actions("Estudiantes") == ["Intento de Creación Fallido"]


async def test_delete_verb_is_a_soft_delete(logged_client):
    created = await logged_client.post(
        "/api/tutores", json={"nombre_completo": "Carlos Díaz", "cedula": "V-9"}
    )
    tutor_id = created.json()["data"]["id_tutor"]

    response = await logged_client.delete(f"/api/tutores/{tutor_id}")

    assert response.status_code == 200
    assert response.json() == {"message": "Tutor eliminado lógicamente con éxito"}
    assert (await logged_client.get(f"/api/tutores/{tutor_id}")).status_code == 404
    # La fila sigue existiendo: la cédula se encuentra
    by_cedula = await logged_client.get("/api/tutor-por-cedula/V-9")
    assert by_cedula.status_code == 200


async def test_unknown_tutor_operations_are_404(logged_client):
    updated = await logged_client.put(
        "/api/tutores/999", json={"nombre_completo": "Nadie", "cedula": "V-0"}
    )
    deleted = await logged_client.put("/api/tutores/eliminar-logico/999")

    assert updated.status_code == 404
    assert deleted.status_code == 404
    assert updated.json() == {"error": "Tutor no encontrado"}
    assert await audit_actions("Tutores") == [
        "Intento de Actualización Fallido",
        "Intento de Eliminación Lógica Fallido",
    ]


async def test_unexpected_error_on_tutor_delete_is_audited(logged_client, monkeypatch):
    created = await logged_client.post(
        "/api/tutores", json={"nombre_completo": "Carlos Díaz", "cedula": "V-9"}
    )
    tutor_id = created.json()["data"]["id_tutor"]

    async def _boom(self, entity_id):
        raise RuntimeError("fallo inesperado")

    monkeypatch.setattr(PersonRepository, "soft_delete", _boom)

    response = await logged_client.put(f"/api/tutores/eliminar-logico/{tutor_id}")

    assert response.status_code == 500
    assert response.json() == {"error": "Error interno del servidor."}
    assert (await logged_client.get(f"/api/tutores/{tutor_id}")).status_code == 200
    assert await audit_actions("Tutores") == [
        "Creación",
        "Error de Excepción al Eliminar Tutor",
    ]


async def test_unexpected_error_on_student_create_is_audited(logged_client, monkeypatch):
    async def _boom(self, **values):
        raise RuntimeError("fallo inesperado")

    monkeypatch.setattr(StudentRepository, "create", _boom)

    response = await logged_client.post(
        "/api/estudiantes", json={"nombre_completo": "Ana Torres", "cedula": "V-1"}
    )

    assert response.status_code == 500
    assert (await logged_client.get("/api/estudiantes")).json() == []
    rows = await audit_rows("Estudiantes")
    assert [r.accion_realizada for r in rows] == ["Error de Excepción al Crear Estudiante"]
    assert rows[0].registro_afectado_id is None
