# -*- coding: utf-8 -*-
"""
Tests del health check y del manejo global de errores.
"""

import pytest

pytestmark = pytest.mark.anyio


async def test_health_reports_database(client):
    response = await client.get("/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "ok"
    assert body["database"] == {"reachable": True}
    assert body["environment"] == "test"


async def test_unknown_route_uses_error_body(client):
    response = await client.get("/api/no-existe")

    assert response.status_code == 404
    assert set(response.json()) == {"error"}


async def test_non_numeric_id_is_bad_request(client):
    response = await client.get("/api/estudiantes/abc")

    assert response.status_code == 400
    assert response.json() == {"error": "Datos de entrada inválidos."}
