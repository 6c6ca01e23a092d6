"""Entities module with an entity-centric structure.

Each entity has its own package containing:
- entity.py: Domain model with business rules
- repository.py: Persistence port
- table.py: SQL persistence model
"""

from .producto import Producto, ProductoRepository, ProductoTable

__all__ = [
    "Producto",
    "ProductoRepository",
    "ProductoTable",
]
