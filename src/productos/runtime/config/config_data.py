"""Pydantic models for parsing the config.yaml configuration file.

This module contains Pydantic models that correspond to the structure of config.yaml.
These models handle validation and type conversion of the YAML configuration data.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, computed_field


class CORSConfig(BaseModel):
    """CORS configuration for the application."""

    origins: list[str] = Field(
        default=["http://localhost:3000", "http://localhost:3001"]
    )
    allow_credentials: bool = True
    allow_methods: list[str] = Field(
        default=["GET", "POST", "PUT", "DELETE", "OPTIONS"]
    )
    allow_headers: list[str] = Field(default=["*"])


class LoggingConfig(BaseModel):
    """Logging configuration model."""

    level: str = Field(default="INFO", description="Logging level")
    format: Literal["json", "plain"] = Field(default="plain", description="Log format")
    file: str | None = Field(
        default=None, description="Log file path (no file sink when empty)"
    )
    max_size_mb: int = Field(default=10, description="Maximum log file size in MB")
    backup_count: int = Field(
        default=5, description="Number of backup log files to keep"
    )


class FirestoreConfig(BaseModel):
    """Firebase / Firestore connection settings."""

    credentials_file: str | None = Field(
        default=None,
        description="Path to the service account JSON; application default credentials when empty",
    )
    project_id: str | None = Field(
        default=None, description="Google Cloud project id (taken from credentials when empty)"
    )
    app_name: str = Field(
        default="productos", description="Name of the firebase_admin app instance"
    )
    collection: str = Field(
        default="productos", description="Firestore collection holding the products"
    )


class DatabaseConfig(BaseModel):
    """SQL database configuration model."""

    url: str = Field(
        default="sqlite:///./productos.db",
        description="Database connection URL",
    )
    pool_size: int = Field(default=20, description="Connection pool size")
    max_overflow: int = Field(default=10, description="Maximum pool overflow")
    pool_timeout: int = Field(default=30, description="Pool timeout in seconds")
    pool_recycle: int = Field(default=1800, description="Pool recycle time in seconds")

    @computed_field
    @property
    def is_sqlite(self) -> bool:
        """Check if the database is SQLite."""
        return self.url.startswith("sqlite")


class StorageConfig(BaseModel):
    """Which storage backend holds the products, and how to reach it."""

    backend: Literal["firestore", "sql"] = Field(
        default="firestore", description="Storage backend"
    )
    firestore: FirestoreConfig = Field(default_factory=FirestoreConfig)
    database: DatabaseConfig = Field(default_factory=DatabaseConfig)


class AppConfig(BaseModel):
    """Application configuration model."""

    environment: Literal["development", "production", "test"] = Field(
        default="development", description="Application environment"
    )
    host: str = Field(default="0.0.0.0", description="Application host")
    port: int = Field(default=8080, description="Application port")
    cors: CORSConfig = Field(
        default_factory=CORSConfig, description="CORS configuration"
    )


class ConfigData(BaseModel):
    """Root of the `config` section in config.yaml."""

    app: AppConfig = Field(default_factory=AppConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    storage: StorageConfig = Field(default_factory=StorageConfig)
