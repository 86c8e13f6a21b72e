import os
from contextlib import contextmanager
from contextvars import ContextVar
from pathlib import Path

from pydantic import BaseModel

from src.bookstore.runtime.config.config_data import ConfigData
from src.bookstore.runtime.config.config_template import load_config

_config: ContextVar[ConfigData] = ContextVar(
    "bookstore_config",
    default=load_config(Path(os.getenv("APP_CONFIG_FILE", "config.yaml"))),
)


def get_config() -> ConfigData:
    """Configuration active in the current context."""
    return _config.get()


def _explicit_fields(model: BaseModel) -> dict:
    """Fields assigned on ``model`` or on any model nested inside it."""
    fields = {}
    for name in type(model).model_fields:
        value = getattr(model, name)
        if isinstance(value, BaseModel):
            nested = _explicit_fields(value)
            if nested:
                fields[name] = nested
                continue
        if name in model.model_fields_set:
            fields[name] = value.model_dump() if isinstance(value, BaseModel) else value
    return fields


def _merge(base: dict, overrides: dict) -> dict:
    merged = dict(base)
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            value = _merge(merged[key], value)
        merged[key] = value
    return merged


@contextmanager
def with_context(config_override: ConfigData | None = None):
    """Temporarily layer the explicitly set fields of ``config_override``.

    Example:
        override = ConfigData()
        override.logging.level = "DEBUG"
        with with_context(override):
            assert get_config().logging.level == "DEBUG"
    """
    if config_override is None:
        yield
        return
    if not isinstance(config_override, ConfigData):
        raise ValueError(
            f"config_override must be ConfigData, or None, got {type(config_override)}"
        )

    merged = _merge(get_config().model_dump(), _explicit_fields(config_override))
    token = _config.set(ConfigData.model_validate(merged))
    try:
        yield
    finally:
        _config.reset(token)
