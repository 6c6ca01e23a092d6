"""Application service for the product use cases."""

from loguru import logger

from src.productos.core.models import (
    ProductoActualizarRequest,
    ProductoCrearRequest,
    ProductoResponse,
)
from src.productos.entities.producto import Producto, ProductoRepository


class ProductoService:
    """Orchestrates request DTOs against the repository port.

    Field validation belongs to the `Producto` entity; this service only
    builds, loads, persists and maps. "Not found" is reported as `None`
    (or `False` for deletes), never as an exception.
    """

    def __init__(self, repository: ProductoRepository) -> None:
        self._repository = repository

    def create(self, request: ProductoCrearRequest) -> ProductoResponse:
        producto = Producto.crear(
            request.tipo_paquete,
            request.tipo_cliente,
            request.costo_paquete,
            request.metodo_envio,
        )
        guardado = self._repository.save(producto)
        logger.info("Created product {}", guardado.id)
        return ProductoResponse.from_entity(guardado)

    def get_by_id(self, producto_id: str) -> ProductoResponse | None:
        producto = self._repository.find_by_id(producto_id)
        if producto is None:
            return None
        return ProductoResponse.from_entity(producto)

    def list_all(self) -> list[ProductoResponse]:
        return [
            ProductoResponse.from_entity(producto)
            for producto in self._repository.find_all()
        ]

    def update(
        self, producto_id: str, request: ProductoActualizarRequest
    ) -> ProductoResponse | None:
        existente = self._repository.find_by_id(producto_id)
        if existente is None:
            return None

        existente.update(
            request.tipo_paquete,
            request.tipo_cliente,
            request.costo_paquete,
            request.metodo_envio,
        )
        actualizado = self._repository.update(existente)
        logger.info("Updated product {}", producto_id)
        return ProductoResponse.from_entity(actualizado)

    def delete(self, producto_id: str) -> bool:
        # Lookup and delete are separate storage calls.
        if self._repository.find_by_id(producto_id) is None:
            return False

        self._repository.delete_by_id(producto_id)
        logger.info("Deleted product {}", producto_id)
        return True
