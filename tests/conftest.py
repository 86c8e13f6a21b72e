"""Test configuration and fixtures for the bookstore service."""

import os
from pathlib import Path

# Must be set before the application context loads config.yaml
os.environ.setdefault("APP_CONFIG_FILE", str(Path(__file__).resolve().parent.parent / "config.yaml"))
os.environ.setdefault("APP_ENVIRONMENT", "test")
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")
os.environ.setdefault("LOG_FILE", "")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from tests.fixtures import *  # noqa: E402,F401,F403
