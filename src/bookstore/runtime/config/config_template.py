"""Load config.yaml, resolving ``${...}`` placeholders from the environment."""

import os
import re
from pathlib import Path

import yaml
from loguru import logger
from pydantic import ValidationError

from src.bookstore.runtime.config.config_data import ConfigData

_PLACEHOLDER = re.compile(r"\$\{(?P<name>[A-Za-z_][A-Za-z0-9_]*)(?:(?P<op>:-|:\?)(?P<arg>[^}]*))?\}")


def substitute_env_vars(text: str) -> str:
    """Replace ``${NAME}``, ``${NAME:-default}`` and ``${NAME:?message}``.

    A bare ``${NAME}`` or a ``:?`` placeholder whose variable is unset raises
    ``ValueError``.
    """

    def resolve(match: re.Match) -> str:
        name, op, arg = match.group("name", "op", "arg")
        value = os.environ.get(name)
        if value is not None:
            return value
        if op == ":-":
            return arg
        if op == ":?":
            raise ValueError(f"Required environment variable {name}: {arg}")
        raise ValueError(f"Required environment variable {name} not set")

    return _PLACEHOLDER.sub(resolve, text)


def load_templated_yaml(file_path: Path) -> ConfigData:
    """Parse ``file_path`` into ``ConfigData``.

    Raises:
        ValueError: on unresolvable placeholders, malformed YAML or values
            that fail validation.
        FileNotFoundError: if the file does not exist.
    """
    text = substitute_env_vars(file_path.read_text())
    try:
        document = yaml.safe_load(text) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"Error parsing YAML: {e}") from e

    try:
        return ConfigData.model_validate(document.get("config") or {})
    except ValidationError as e:
        raise ValueError(f"Invalid configuration: {e}") from e


def load_config(file_path: Path) -> ConfigData:
    """Like ``load_templated_yaml`` but falls back to defaults when absent."""
    if not file_path.exists():
        logger.warning("{} not found; using default configuration", file_path)
        return ConfigData()
    logger.debug("Loading configuration from {}", file_path)
    return load_templated_yaml(file_path)
