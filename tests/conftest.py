# backend/tests/conftest.py
# -*- coding: utf-8 -*-
"""
Config global de tests del Sistema de Gestión de Proyectos.

- PYTHON_ENV=test y DB_URL=sqlite+aiosqlite:// ANTES de importar la app:
  la configuración y el engine se resuelven al primer import.
- Esquema creado y destruido por test (SQLite en memoria con StaticPool,
  así que todas las sesiones ven la misma base).
- Cliente httpx sobre ASGITransport con ciclo de vida vía asgi-lifespan.
- Los correos se capturan con un sender en memoria inyectado por
  dependency_overrides.
"""

import os

os.environ["PYTHON_ENV"] = "test"
os.environ["DB_URL"] = "sqlite+aiosqlite://"
os.environ["EMAIL_MODE"] = "console"
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-for-recovery-suite-please-change")

from collections.abc import AsyncIterator

import pytest
from asgi_lifespan import LifespanManager
from httpx import ASGITransport, AsyncClient

from app.main import app as fastapi_app
from app.modules.models_registry import Base
from app.modules.academics.models import Carrera, Empresa, Periodo
from app.shared.database import SessionLocal, engine
from app.shared.integrations.email_sender import get_email_sender

from tests.support import ADMIN_EMAIL, ADMIN_PASSWORD, CapturingEmailSender, create_admin


@pytest.fixture
def anyio_backend():
    # Permite usar @pytest.mark.anyio en tests async
    return "asyncio"


@pytest.fixture
def email_sender() -> CapturingEmailSender:
    return CapturingEmailSender()


@pytest.fixture
async def db_schema() -> AsyncIterator[None]:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


@pytest.fixture
async def client(db_schema, email_sender) -> AsyncIterator[AsyncClient]:
    """
    Cliente HTTP asíncrono contra la app con ASGITransport y gestión de
    startup/shutdown mediante asgi-lifespan.
    """
    fastapi_app.dependency_overrides[get_email_sender] = lambda: email_sender
    try:
        async with LifespanManager(fastapi_app):
            transport = ASGITransport(app=fastapi_app)
            async with AsyncClient(transport=transport, base_url="http://testserver") as ac:
                yield ac
    finally:
        fastapi_app.dependency_overrides.clear()


@pytest.fixture
async def catalogs(db_schema) -> dict:
    """Una carrera, un periodo y una empresa."""
    async with SessionLocal() as session:
        carrera = Carrera(carrera="Ingeniería de Sistemas")
        periodo = Periodo(periodo="2026-I")
        empresa = Empresa(nombre_empresa="CANTV")
        session.add_all([carrera, periodo, empresa])
        await session.commit()
        return {
            "id_carrera": carrera.id_carrera,
            "id_periodo": periodo.id_periodo,
            "id_empresa": empresa.id_empresa,
        }


@pytest.fixture
async def admin(db_schema) -> dict:
    return await create_admin()


@pytest.fixture
async def logged_client(client, admin) -> AsyncClient:
    """Cliente con sesión iniciada como el administrador de prueba."""
    response = await client.post(
        "/api/login", json={"correo": ADMIN_EMAIL, "contraseña": ADMIN_PASSWORD}
    )
    assert response.status_code == 200, response.text
    return client
