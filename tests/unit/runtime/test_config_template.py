"""Tests for config.yaml loading and environment substitution."""

from pathlib import Path

import pytest

from src.productos.runtime.config.config_template import (
    load_templated_yaml,
    parse_config,
    substitute_env_vars,
)

CONFIG_YAML = """
config:
  app:
    environment: ${APP_ENVIRONMENT:-development}
    port: ${APP_PORT:-8080}
  logging:
    level: ${LOG_LEVEL:-INFO}
    file: ${LOG_FILE:-}
  storage:
    backend: ${STORAGE_BACKEND:-firestore}
    firestore:
      credentials_file: ${FIREBASE_CREDENTIALS_FILE:-firebase-credentials.json}
      collection: productos
    database:
      url: ${DATABASE_URL:-sqlite:///./productos.db}
"""


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for name in (
        "APP_ENVIRONMENT",
        "APP_PORT",
        "LOG_LEVEL",
        "LOG_FILE",
        "STORAGE_BACKEND",
        "FIREBASE_CREDENTIALS_FILE",
        "DATABASE_URL",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestSubstituteEnvVars:
    def test_default_used_when_unset(self, clean_env):
        assert substitute_env_vars("port: ${APP_PORT:-8080}") == "port: 8080"

    def test_environment_value_wins(self, clean_env):
        clean_env.setenv("APP_PORT", "9000")

        assert substitute_env_vars("port: ${APP_PORT:-8080}") == "port: 9000"

    def test_required_variable_missing(self, clean_env):
        with pytest.raises(ValueError, match="APP_PORT not set"):
            substitute_env_vars("port: ${APP_PORT}")

    def test_required_variable_custom_message(self, clean_env):
        with pytest.raises(ValueError, match="port is mandatory"):
            substitute_env_vars("port: ${APP_PORT:?port is mandatory}")

    def test_text_without_placeholders_is_untouched(self):
        assert substitute_env_vars("backend: sql") == "backend: sql"


class TestParseConfig:
    def test_defaults(self, clean_env):
        config = parse_config(CONFIG_YAML)

        assert config.app.environment == "development"
        assert config.app.port == 8080
        assert config.logging.file is None
        assert config.storage.backend == "firestore"
        assert config.storage.firestore.credentials_file == "firebase-credentials.json"
        assert config.storage.firestore.collection == "productos"
        assert config.storage.database.is_sqlite is True

    def test_environment_overrides(self, clean_env):
        clean_env.setenv("STORAGE_BACKEND", "sql")
        clean_env.setenv("DATABASE_URL", "postgresql://app@db:5432/productos")

        config = parse_config(CONFIG_YAML)

        assert config.storage.backend == "sql"
        assert config.storage.database.is_sqlite is False

    def test_invalid_backend_is_rejected(self, clean_env):
        clean_env.setenv("STORAGE_BACKEND", "mongo")

        with pytest.raises(ValueError, match="Invalid configuration"):
            parse_config(CONFIG_YAML)

    def test_empty_document_is_rejected(self):
        with pytest.raises(ValueError, match="Failed to parse YAML"):
            parse_config("")

    def test_broken_yaml_is_rejected(self):
        with pytest.raises(ValueError, match="Error parsing YAML"):
            parse_config("config: [unclosed")


class TestLoadTemplatedYaml:
    def test_loads_file(self, clean_env, tmp_path: Path):
        path = tmp_path / "config.yaml"
        path.write_text(CONFIG_YAML)

        config = load_templated_yaml(path)

        assert config.storage.firestore.collection == "productos"

    def test_environment_prefixed_overrides(self, clean_env, tmp_path: Path):
        """TEST_FOO becomes FOO when APP_ENVIRONMENT=test."""
        path = tmp_path / "config.yaml"
        path.write_text(CONFIG_YAML)
        clean_env.setenv("APP_ENVIRONMENT", "test")
        # Registered so the copied value is restored after the test
        clean_env.setenv("STORAGE_BACKEND", "firestore")
        clean_env.setenv("TEST_STORAGE_BACKEND", "sql")

        config = load_templated_yaml(path)

        assert config.app.environment == "test"
        assert config.storage.backend == "sql"

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            load_templated_yaml(tmp_path / "missing.yaml")
