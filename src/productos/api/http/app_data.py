from dataclasses import dataclass

from loguru import logger

from src.productos.core.services import (
    DbSessionService,
    FirestoreProductoRepository,
    FirestoreSessionService,
    ProductoService,
    SqlProductoRepository,
)
from src.productos.entities.producto import ProductoRepository
from src.productos.runtime.config.config_data import ConfigData


@dataclass
class ApplicationDependencies:
    storage_service: DbSessionService | FirestoreSessionService
    producto_repository: ProductoRepository
    producto_service: ProductoService


def build_application_dependencies(config: ConfigData) -> ApplicationDependencies:
    """Open the configured storage backend and wire repository and service on top."""
    storage = config.storage
    logger.info("Wiring product service on the '{}' storage backend", storage.backend)

    storage_service: DbSessionService | FirestoreSessionService
    repository: ProductoRepository
    if storage.backend == "sql":
        storage_service = DbSessionService(storage.database, config.app.environment)
        repository = SqlProductoRepository(storage_service)
    else:
        storage_service = FirestoreSessionService(storage.firestore)
        repository = FirestoreProductoRepository(
            storage_service.client, storage_service.collection_name
        )

    return ApplicationDependencies(
        storage_service=storage_service,
        producto_repository=repository,
        producto_service=ProductoService(repository),
    )
