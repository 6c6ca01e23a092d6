"""Firestore implementation of the product repository."""

from collections.abc import Iterator
from contextlib import contextmanager
from datetime import UTC, datetime
from typing import Any

from google.api_core.exceptions import GoogleAPIError
from google.cloud.firestore import Client, DocumentSnapshot
from loguru import logger

from src.productos.core.errors import InvalidArgumentError, StorageError
from src.productos.entities.producto import Producto, ProductoRepository


def to_firestore_timestamp(value: datetime | None) -> datetime | None:
    """Naive UTC domain time -> timezone-aware datetime stored as a Firestore timestamp."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def from_firestore_timestamp(value: datetime | None) -> datetime | None:
    """Firestore timestamp -> naive UTC domain time."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value
    return value.astimezone(UTC).replace(tzinfo=None)


def producto_to_document(producto: Producto) -> dict[str, Any]:
    return {
        "tipoPaquete": producto.tipo_paquete,
        "tipoCliente": producto.tipo_cliente,
        "costoPaquete": producto.costo_paquete,
        "metodoEnvio": producto.metodo_envio,
        "fechaCreacion": to_firestore_timestamp(producto.fecha_creacion),
        "fechaActualizacion": to_firestore_timestamp(producto.fecha_actualizacion),
    }


def document_to_producto(snapshot: DocumentSnapshot) -> Producto | None:
    if snapshot is None or not snapshot.exists:
        return None

    data = snapshot.to_dict() or {}
    costo = data.get("costoPaquete")
    return Producto.reconstruir(
        id=snapshot.id,
        tipo_paquete=data.get("tipoPaquete"),
        tipo_cliente=data.get("tipoCliente"),
        costo_paquete=float(costo) if costo is not None else None,
        metodo_envio=data.get("metodoEnvio"),
        fecha_creacion=from_firestore_timestamp(data.get("fechaCreacion")),
        fecha_actualizacion=from_firestore_timestamp(data.get("fechaActualizacion")),
    )


@contextmanager
def _firestore_call(operacion: str) -> Iterator[None]:
    """Turn any Firestore/transport failure into a StorageError."""
    try:
        yield
    except GoogleAPIError as e:
        logger.bind(error_type=type(e).__name__).error(
            "Firestore call failed while trying to {} a product: {}", operacion, e
        )
        raise StorageError(f"Error al {operacion} producto en Firebase: {e}") from e


class FirestoreProductoRepository(ProductoRepository):
    """Stores each product as one document of the products collection.

    The Firestore client calls block until the RPC completes, so every method
    returns only once the write or read has been acknowledged.
    """

    def __init__(self, client: Client, collection_name: str = "productos") -> None:
        self._collection = client.collection(collection_name)

    def save(self, producto: Producto) -> Producto:
        # A product that already has an id is written through the update path.
        if producto.id:
            return self.update(producto)

        with _firestore_call("guardar"):
            doc_ref = self._collection.document()
            doc_ref.set(producto_to_document(producto))

        logger.info("Product saved with id {}", doc_ref.id)
        return producto.model_copy(update={"id": doc_ref.id})

    def find_by_id(self, producto_id: str) -> Producto | None:
        with _firestore_call("buscar"):
            snapshot = self._collection.document(producto_id).get()

        producto = document_to_producto(snapshot)
        if producto is None:
            logger.info("Product {} not found", producto_id)
        return producto

    def find_all(self) -> list[Producto]:
        with _firestore_call("listar"):
            productos = [
                producto
                for producto in map(document_to_producto, self._collection.stream())
                if producto is not None
            ]

        logger.info("Found {} products", len(productos))
        return productos

    def update(self, producto: Producto) -> Producto:
        if not producto.id:
            raise InvalidArgumentError(
                "El ID del producto es necesario para la actualización."
            )

        with _firestore_call("actualizar"):
            # set() replaces the whole document
            self._collection.document(producto.id).set(producto_to_document(producto))

        logger.info("Product {} updated", producto.id)
        return producto

    def delete_by_id(self, producto_id: str) -> None:
        with _firestore_call("eliminar"):
            self._collection.document(producto_id).delete()

        logger.info("Product {} deleted", producto_id)
