"""FastAPI dependency implementations."""

from __future__ import annotations

from fastapi import Request

from src.productos.api.http.app_data import ApplicationDependencies
from src.productos.core.services import ProductoService


def get_app_dependencies(request: Request) -> ApplicationDependencies:
    """Get the dependencies wired at startup."""
    return request.app.state.app_dependencies


def get_producto_service(request: Request) -> ProductoService:
    """Get the product application service instance."""
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    return app_deps.producto_service
