"""Database engine and session factory for the SQL storage backend."""

from collections.abc import Iterator
from contextlib import contextmanager

from loguru import logger
from sqlalchemy import StaticPool, text
from sqlmodel import Session, SQLModel, create_engine

from src.productos.runtime.config.config_data import DatabaseConfig


class DbSessionService:
    backend = "sql"

    def __init__(self, db_config: DatabaseConfig, environment: str = "development"):
        """Create the shared engine and make sure the product table exists."""

        logger.info("Setting up database engine and session factory")

        engine_kwargs: dict = {
            "echo": False,
            "echo_pool": False,
            "connect_args": self._get_connect_args(db_config),
        }

        if db_config.is_sqlite:
            if environment == "production":
                logger.warning(
                    "SQLite is not recommended for production use. "
                    "Consider the Firestore backend instead."
                )
            if ":memory:" in db_config.url:
                # Every session must see the same in-memory database.
                engine_kwargs["poolclass"] = StaticPool
        else:
            engine_kwargs.update(
                {
                    "pool_size": db_config.pool_size,
                    "max_overflow": db_config.max_overflow,
                    "pool_timeout": db_config.pool_timeout,
                    "pool_recycle": db_config.pool_recycle,
                    "pool_pre_ping": True,
                }
            )

        self._engine = create_engine(db_config.url, **engine_kwargs)

        # Register the table with the metadata before creating it
        from src.productos.entities.producto.table import ProductoTable  # noqa: F401

        SQLModel.metadata.create_all(self._engine)
        logger.info("Database engine initialized for {}", self._engine.url.render_as_string())

    def _get_connect_args(self, db_config: DatabaseConfig) -> dict:
        """Get database-specific connection arguments."""
        connect_args = {}

        if db_config.is_sqlite:
            connect_args.update(
                {
                    "check_same_thread": False,  # requests run in a threadpool
                    "timeout": 20,  # lock timeout
                }
            )

        return connect_args

    def get_session(self) -> Session:
        """Return a new SQLModel session bound to the shared engine."""
        return Session(
            self._engine,
            expire_on_commit=False,
            autoflush=True,
        )

    @contextmanager
    def session_scope(self) -> Iterator[Session]:
        """Transactional scope: commit on success, roll back and re-raise on error."""
        db = self.get_session()
        try:
            yield db
            db.commit()
        except Exception as e:
            db.rollback()
            logger.bind(error_type=type(e).__name__).error(
                "Database transaction failed: {}", e
            )
            raise
        finally:
            db.close()

    def health_check(self) -> bool:
        """Perform a health check on the database connection."""
        try:
            with self._engine.connect() as connection:
                connection.execute(text("SELECT 1"))
                return True
        except Exception as e:
            logger.bind(error_type=type(e).__name__).error(
                "Database health check failed: {}", e
            )
            return False

    def close(self) -> None:
        """Release every pooled connection."""
        logger.info("Disposing database engine")
        self._engine.dispose()
