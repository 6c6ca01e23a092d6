"""Persistence port for products."""

from abc import ABC, abstractmethod

from src.productos.entities.producto.entity import Producto


class ProductoRepository(ABC):
    """Storage contract required by the application service.

    Implementations must:
    - assign and return an id from `save` for new products;
    - return `None` from `find_by_id` when the product does not exist;
    - raise `InvalidArgumentError` from `update` when the product has no id;
    - make `delete_by_id` idempotent, without checking existence.
    """

    @abstractmethod
    def save(self, producto: Producto) -> Producto:
        """Persist a new product and return it with its assigned id."""

    @abstractmethod
    def find_by_id(self, producto_id: str) -> Producto | None:
        """Return the product with the given id, or None."""

    @abstractmethod
    def find_all(self) -> list[Producto]:
        """Return every stored product, in storage order."""

    @abstractmethod
    def update(self, producto: Producto) -> Producto:
        """Replace the stored product carrying the same id."""

    @abstractmethod
    def delete_by_id(self, producto_id: str) -> None:
        """Remove the product with the given id if it exists."""
