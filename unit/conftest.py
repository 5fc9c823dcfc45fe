"""Pytest configuration and shared fixtures."""

import pytest
import yaml

from components.interfaces import Config
from unit.fixtures.document_factory import DocumentFactory


@pytest.fixture
def document_factory():
    """Provide DocumentFactory instance."""
    return DocumentFactory()


@pytest.fixture
def make_config(tmp_path):
    """Build a Config from a dict written to a temporary config.yaml."""
    def _make_config(values: dict | None = None) -> Config:
        path = tmp_path / "config.yaml"
        with open(path, "w", encoding="utf-8") as f:
            yaml.safe_dump(values or {}, f)
        return Config(str(path))
    return _make_config


@pytest.fixture
def config(make_config):
    """Config with every key at its default."""
    return make_config()
