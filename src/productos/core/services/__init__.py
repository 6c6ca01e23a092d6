from .database.db_session import DbSessionService
from .firestore.firestore_session import FirestoreSessionService
from .producto_service import ProductoService
from .storage.firestore_repository import FirestoreProductoRepository
from .storage.sql_repository import SqlProductoRepository

__all__ = [
    "DbSessionService",
    "FirestoreProductoRepository",
    "FirestoreSessionService",
    "ProductoService",
    "SqlProductoRepository",
]
