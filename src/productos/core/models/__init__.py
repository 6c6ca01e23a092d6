from .producto_dto import (
    ErrorResponse,
    ProductoActualizarRequest,
    ProductoCrearRequest,
    ProductoResponse,
)

__all__ = [
    "ErrorResponse",
    "ProductoActualizarRequest",
    "ProductoCrearRequest",
    "ProductoResponse",
]
