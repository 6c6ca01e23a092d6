"""Entity: Producto."""

import math
from datetime import UTC, datetime, timedelta
from typing import Any

from pydantic import BaseModel, Field

from src.productos.core.errors import InvalidArgumentError


def utc_now() -> datetime:
    """Current UTC wall-clock time as a naive datetime."""
    return datetime.now(UTC).replace(tzinfo=None)


def _requerido(valor: str | None, mensaje: str) -> None:
    if valor is None or not valor.strip():
        raise InvalidArgumentError(mensaje)


def validar_campos(
    tipo_paquete: str | None,
    tipo_cliente: str | None,
    costo_paquete: float | None,
    metodo_envio: str | None,
) -> None:
    """Raise InvalidArgumentError for the first field that breaks a domain rule."""
    _requerido(tipo_paquete, "El tipo de paquete no puede ser nulo o vacío.")
    _requerido(tipo_cliente, "El tipo de cliente no puede ser nulo o vacío.")
    if costo_paquete is None or not math.isfinite(costo_paquete) or costo_paquete <= 0:
        raise InvalidArgumentError("El costo del paquete debe ser un valor positivo.")
    _requerido(metodo_envio, "El método de envío no puede ser nulo o vacío.")


class Producto(BaseModel):
    """Product record with identity and validated descriptive fields.

    New products are built with `Producto.crear`, which enforces the domain
    rules and stamps both timestamps. Products loaded from storage are rebuilt
    with `Producto.reconstruir`, which trusts the stored values as they are.
    The id stays `None` until the storage layer assigns one.
    """

    id: str | None = Field(default=None, description="Storage-assigned identifier")
    tipo_paquete: str = Field(description="Package type")
    tipo_cliente: str = Field(description="Customer type")
    costo_paquete: float = Field(description="Package cost, strictly positive")
    metodo_envio: str = Field(description="Shipping method")
    fecha_creacion: datetime | None = Field(default=None, description="Creation time")
    fecha_actualizacion: datetime | None = Field(
        default=None, description="Last modification time"
    )

    @classmethod
    def crear(
        cls,
        tipo_paquete: str | None,
        tipo_cliente: str | None,
        costo_paquete: float | None,
        metodo_envio: str | None,
    ) -> "Producto":
        """Build a new, not yet persisted product."""
        validar_campos(tipo_paquete, tipo_cliente, costo_paquete, metodo_envio)
        ahora = utc_now()
        return cls(
            tipo_paquete=tipo_paquete,
            tipo_cliente=tipo_cliente,
            costo_paquete=costo_paquete,
            metodo_envio=metodo_envio,
            fecha_creacion=ahora,
            fecha_actualizacion=ahora,
        )

    @classmethod
    def reconstruir(
        cls,
        id: str | None,
        tipo_paquete: str | None,
        tipo_cliente: str | None,
        costo_paquete: float | None,
        metodo_envio: str | None,
        fecha_creacion: datetime | None,
        fecha_actualizacion: datetime | None,
    ) -> "Producto":
        """Rehydrate a stored product without running any validation."""
        return cls.model_construct(
            id=id,
            tipo_paquete=tipo_paquete,
            tipo_cliente=tipo_cliente,
            costo_paquete=costo_paquete,
            metodo_envio=metodo_envio,
            fecha_creacion=fecha_creacion,
            fecha_actualizacion=fecha_actualizacion,
        )

    def update(
        self,
        tipo_paquete: str | None,
        tipo_cliente: str | None,
        costo_paquete: float | None,
        metodo_envio: str | None,
    ) -> None:
        """Replace the descriptive fields and refresh the modification time.

        Nothing changes when validation fails.
        """
        validar_campos(tipo_paquete, tipo_cliente, costo_paquete, metodo_envio)

        ahora = utc_now()
        if self.fecha_actualizacion is not None and ahora <= self.fecha_actualizacion:
            # Clock did not move (or moved back); keep the modification time monotonic.
            ahora = self.fecha_actualizacion + timedelta(microseconds=1)

        self.tipo_paquete = tipo_paquete
        self.tipo_cliente = tipo_cliente
        self.costo_paquete = float(costo_paquete)
        self.metodo_envio = metodo_envio
        self.fecha_actualizacion = ahora

    def __eq__(self, other: Any) -> bool:
        """Products are the same product when their ids match."""
        if not isinstance(other, Producto):
            return False

        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
