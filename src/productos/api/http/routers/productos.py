"""Product API router with CRUD operations."""

from fastapi import APIRouter, Depends, Response, status

from src.productos.api.http.deps import get_producto_service
from src.productos.core.errors import ProductoNotFoundError
from src.productos.core.models import (
    ErrorResponse,
    ProductoActualizarRequest,
    ProductoCrearRequest,
    ProductoResponse,
)
from src.productos.core.services import ProductoService

router = APIRouter(
    prefix="/api/productos",
    tags=["productos"],
    responses={
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)


@router.post("", response_model=ProductoResponse, status_code=status.HTTP_201_CREATED)
def create_producto(
    request: ProductoCrearRequest,
    service: ProductoService = Depends(get_producto_service),
) -> ProductoResponse:
    """Create a new product."""
    return service.create(request)


@router.get("", response_model=list[ProductoResponse])
def list_productos(
    service: ProductoService = Depends(get_producto_service),
) -> list[ProductoResponse]:
    """List all products."""
    return service.list_all()


@router.get(
    "/{producto_id}",
    response_model=ProductoResponse,
    responses={404: {"model": ErrorResponse}},
)
def get_producto(
    producto_id: str,
    service: ProductoService = Depends(get_producto_service),
) -> ProductoResponse:
    """Get a product by ID."""
    producto = service.get_by_id(producto_id)
    if producto is None:
        raise ProductoNotFoundError(f"Producto con ID {producto_id} no encontrado.")
    return producto


@router.put(
    "/{producto_id}",
    response_model=ProductoResponse,
    responses={404: {"model": ErrorResponse}},
)
def update_producto(
    producto_id: str,
    request: ProductoActualizarRequest,
    service: ProductoService = Depends(get_producto_service),
) -> ProductoResponse:
    """Update a product."""
    producto = service.update(producto_id, request)
    if producto is None:
        raise ProductoNotFoundError(
            f"Producto con ID {producto_id} no encontrado para actualizar."
        )
    return producto


@router.delete(
    "/{producto_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={404: {"model": ErrorResponse}},
)
def delete_producto(
    producto_id: str,
    service: ProductoService = Depends(get_producto_service),
) -> Response:
    """Delete a product."""
    if not service.delete(producto_id):
        raise ProductoNotFoundError(
            f"Producto con ID {producto_id} no encontrado para eliminar."
        )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
