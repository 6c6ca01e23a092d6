"""Producto entity module.

This module contains all Producto-related classes organized by responsibility:
- Producto: Domain entity with its validation rules
- ProductoRepository: Persistence port implemented by the storage adapters
- ProductoTable: SQL persistence model

This structure keeps all Producto-related code together while maintaining
separation of concerns within the module.
"""

from .entity import Producto
from .repository import ProductoRepository
from .table import ProductoTable

__all__ = ["Producto", "ProductoRepository", "ProductoTable"]
