from __future__ import annotations

from collections.abc import Generator
from typing import Any
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from src.productos.api.http.app import create_app
from src.productos.api.http.app_data import ApplicationDependencies
from src.productos.core.services import (
    DbSessionService,
    ProductoService,
    SqlProductoRepository,
)
from src.productos.runtime.config.config_data import DatabaseConfig


@pytest.fixture
def valid_payload() -> dict[str, Any]:
    return {
        "tipoPaquete": "Caja",
        "tipoCliente": "Regular",
        "costoPaquete": 15.5,
        "metodoEnvio": "Terrestre",
    }


@pytest.fixture
def db_service() -> Generator[DbSessionService]:
    """Fresh in-memory SQLite database for each test."""
    service = DbSessionService(DatabaseConfig(url="sqlite:///:memory:"), "test")
    try:
        yield service
    finally:
        service.close()


@pytest.fixture
def sql_repository(db_service: DbSessionService) -> SqlProductoRepository:
    return SqlProductoRepository(db_service)


@pytest.fixture
def producto_service(sql_repository: SqlProductoRepository) -> ProductoService:
    return ProductoService(sql_repository)


@pytest.fixture
def app_dependencies(
    db_service: DbSessionService,
    sql_repository: SqlProductoRepository,
    producto_service: ProductoService,
) -> ApplicationDependencies:
    return ApplicationDependencies(
        storage_service=db_service,
        producto_repository=sql_repository,
        producto_service=producto_service,
    )


@pytest.fixture
def client(app_dependencies: ApplicationDependencies) -> Generator[TestClient]:
    """Test client over the real app, backed by the in-memory SQL repository."""
    # Context manager runs the lifespan so app.state is wired
    with TestClient(create_app(app_dependencies)) as test_client:
        yield test_client


@pytest.fixture
def firestore_client() -> MagicMock:
    """Stand-in for google.cloud.firestore.Client."""
    return MagicMock(name="firestore_client")
