"""Producto database table model."""

import uuid

from pydantic import NaiveDatetime
from sqlmodel import Field, SQLModel


class ProductoTable(SQLModel, table=True):
    """Database persistence model for products.

    This represents how the Producto entity is stored in a SQL database.
    It's separate from the domain entity so the entity keeps its own
    construction rules.
    """

    __tablename__ = "productos"

    id: str = Field(
        primary_key=True,
        default_factory=lambda: str(uuid.uuid4()),
        description="Storage-generated identifier",
    )
    tipo_paquete: str
    tipo_cliente: str
    costo_paquete: float
    metodo_envio: str
    # Naive UTC, as held by the entity
    fecha_creacion: NaiveDatetime | None = None
    fecha_actualizacion: NaiveDatetime | None = None
