"""Tests for the application context and configuration overrides."""

import pytest

from src.productos.runtime.config.config_data import (
    AppConfig,
    ConfigData,
    DatabaseConfig,
    StorageConfig,
)
from src.productos.runtime.context import get_config, with_context


def test_with_context_overrides_only_explicit_fields():
    original = get_config()
    override = ConfigData(
        storage=StorageConfig(database=DatabaseConfig(url="sqlite:///:memory:"))
    )

    with with_context(override):
        config = get_config()
        assert config.storage.database.url == "sqlite:///:memory:"
        # Inherited from the parent context
        assert config.storage.backend == original.storage.backend
        assert config.storage.firestore == original.storage.firestore
        assert config.app == original.app

    assert get_config() == original


def test_nested_contexts_restore_in_order():
    original_env = get_config().app.environment

    with with_context(ConfigData(app=AppConfig(environment="test"))):
        assert get_config().app.environment == "test"
        with with_context(ConfigData(app=AppConfig(environment="production"))):
            assert get_config().app.environment == "production"
        assert get_config().app.environment == "test"

    assert get_config().app.environment == original_env


def test_with_context_none_is_a_no_op():
    original = get_config()

    with with_context(None):
        assert get_config() is original


def test_with_context_rejects_other_types():
    with pytest.raises(ValueError):
        with with_context({"app": {"environment": "test"}}):
            pass
