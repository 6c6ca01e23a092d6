"""Request and response shapes of the product HTTP API."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_serializer
from pydantic.alias_generators import to_camel

from src.productos.entities.producto import Producto


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ProductoCrearRequest(_CamelModel):
    """Body of POST /api/productos.

    Every field is optional at this level so that missing values reach the
    entity and are reported with its own messages.
    """

    tipo_paquete: str | None = None
    tipo_cliente: str | None = None
    costo_paquete: float | None = None
    metodo_envio: str | None = None


class ProductoActualizarRequest(ProductoCrearRequest):
    """Body of PUT /api/productos/{id}; same shape as creation."""


class ProductoResponse(_CamelModel):
    """Product as returned by every endpoint."""

    id: str | None = None
    tipo_paquete: str | None = None
    tipo_cliente: str | None = None
    costo_paquete: float | None = None
    metodo_envio: str | None = None
    fecha_creacion: datetime | None = Field(default=None)
    fecha_actualizacion: datetime | None = Field(default=None)

    @field_serializer("fecha_creacion", "fecha_actualizacion")
    def _iso_local(self, value: datetime | None) -> str | None:
        # ISO-8601 local date-time, no offset
        if value is None:
            return None
        return value.replace(tzinfo=None).isoformat()

    @classmethod
    def from_entity(cls, producto: Producto) -> "ProductoResponse":
        return cls(
            id=producto.id,
            tipo_paquete=producto.tipo_paquete,
            tipo_cliente=producto.tipo_cliente,
            costo_paquete=producto.costo_paquete,
            metodo_envio=producto.metodo_envio,
            fecha_creacion=producto.fecha_creacion,
            fecha_actualizacion=producto.fecha_actualizacion,
        )


class ErrorResponse(BaseModel):
    """Body of every error response."""

    message: str
