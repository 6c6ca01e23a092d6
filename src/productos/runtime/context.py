"""Process-wide application context holding the active configuration."""

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, replace
from pathlib import Path

from src.productos.runtime.config.config_data import ConfigData
from src.productos.runtime.config.config_template import load_templated_yaml

CONFIG_PATH = Path("config.yaml")


@dataclass
class AppContext:
    config: ConfigData


def _load_default_config() -> ConfigData:
    if CONFIG_PATH.exists():
        return load_templated_yaml(CONFIG_PATH)
    return ConfigData()


_app_context: ContextVar[AppContext] = ContextVar(
    "app_context", default=AppContext(config=_load_default_config())
)


def get_context() -> AppContext:
    return _app_context.get()


def get_config() -> ConfigData:
    """Configuration of the current context."""
    return get_context().config


def _deep_merge(base: dict, override: dict) -> dict:
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


@contextmanager
def with_context(config_override: ConfigData | None = None):
    """Temporarily overlay `config_override` on the current configuration.

    Only fields set explicitly on the override (at any nesting level) win;
    everything else is inherited from the enclosing context.

    Example:
        override = ConfigData(storage=StorageConfig(backend="sql"))
        with with_context(override):
            assert get_config().storage.backend == "sql"
    """
    if config_override is None:
        yield
        return

    if not isinstance(config_override, ConfigData):
        raise ValueError(
            f"config_override must be ConfigData, or None, got {type(config_override)}"
        )

    current = get_context()
    merged = _deep_merge(
        current.config.model_dump(), config_override.model_dump(exclude_unset=True)
    )
    token = _app_context.set(replace(current, config=ConfigData.model_validate(merged)))
    try:
        yield
    finally:
        _app_context.reset(token)
