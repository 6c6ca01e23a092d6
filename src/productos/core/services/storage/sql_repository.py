"""SQLModel implementation of the product repository."""

from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import select

from src.productos.core.errors import InvalidArgumentError, StorageError
from src.productos.core.services.database.db_session import DbSessionService
from src.productos.entities.producto import Producto, ProductoRepository, ProductoTable


def _row_to_producto(row: ProductoTable) -> Producto:
    return Producto.reconstruir(
        id=row.id,
        tipo_paquete=row.tipo_paquete,
        tipo_cliente=row.tipo_cliente,
        costo_paquete=row.costo_paquete,
        metodo_envio=row.metodo_envio,
        fecha_creacion=row.fecha_creacion,
        fecha_actualizacion=row.fecha_actualizacion,
    )


def _copy_into_row(producto: Producto, row: ProductoTable) -> None:
    row.tipo_paquete = producto.tipo_paquete
    row.tipo_cliente = producto.tipo_cliente
    row.costo_paquete = producto.costo_paquete
    row.metodo_envio = producto.metodo_envio
    row.fecha_creacion = producto.fecha_creacion
    row.fecha_actualizacion = producto.fecha_actualizacion


class SqlProductoRepository(ProductoRepository):
    """Data-access layer for products stored in the `productos` table."""

    def __init__(self, db_service: DbSessionService) -> None:
        self._db = db_service

    def save(self, producto: Producto) -> Producto:
        # A product that already has an id is written through the update path.
        if producto.id:
            return self.update(producto)

        row = ProductoTable(
            tipo_paquete=producto.tipo_paquete,
            tipo_cliente=producto.tipo_cliente,
            costo_paquete=producto.costo_paquete,
            metodo_envio=producto.metodo_envio,
            fecha_creacion=producto.fecha_creacion,
            fecha_actualizacion=producto.fecha_actualizacion,
        )
        try:
            with self._db.session_scope() as session:
                session.add(row)
        except SQLAlchemyError as e:
            raise StorageError(f"Error al guardar producto en la base de datos: {e}") from e

        logger.info("Product saved with id {}", row.id)
        return producto.model_copy(update={"id": row.id})

    def find_by_id(self, producto_id: str) -> Producto | None:
        try:
            with self._db.session_scope() as session:
                row = session.get(ProductoTable, producto_id)
                producto = _row_to_producto(row) if row is not None else None
        except SQLAlchemyError as e:
            raise StorageError(f"Error al buscar producto en la base de datos: {e}") from e

        if producto is None:
            logger.info("Product {} not found", producto_id)
        return producto

    def find_all(self) -> list[Producto]:
        try:
            with self._db.session_scope() as session:
                rows = session.exec(select(ProductoTable)).all()
                productos = [_row_to_producto(row) for row in rows]
        except SQLAlchemyError as e:
            raise StorageError(f"Error al listar productos en la base de datos: {e}") from e

        logger.info("Found {} products", len(productos))
        return productos

    def update(self, producto: Producto) -> Producto:
        if not producto.id:
            raise InvalidArgumentError(
                "El ID del producto es necesario para la actualización."
            )

        try:
            with self._db.session_scope() as session:
                row = session.get(ProductoTable, producto.id)
                if row is None:
                    # Upsert, like a Firestore set().
                    row = ProductoTable(id=producto.id)
                _copy_into_row(producto, row)
                session.add(row)
        except SQLAlchemyError as e:
            raise StorageError(f"Error al actualizar producto en la base de datos: {e}") from e

        logger.info("Product {} updated", producto.id)
        return producto

    def delete_by_id(self, producto_id: str) -> None:
        try:
            with self._db.session_scope() as session:
                row = session.get(ProductoTable, producto_id)
                if row is not None:
                    session.delete(row)
        except SQLAlchemyError as e:
            raise StorageError(f"Error al eliminar producto en la base de datos: {e}") from e

        logger.info("Product {} deleted", producto_id)
