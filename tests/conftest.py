"""
Shared pytest fixtures for test suite.
"""

import logging

import pytest

from specfilter import logging_config
from specfilter.catalog import sample_products
from specfilter.models import Color, Product, Size


@pytest.fixture(autouse=True)
def isolated_runtime(tmp_path, monkeypatch):
    """Keep log files inside the test's tmp dir."""
    monkeypatch.setattr(logging_config, "LOG_DIR", tmp_path / "logs")
    monkeypatch.setenv("SPECFILTER_NO_COLOR", "1")
    monkeypatch.delenv("SPECFILTER_STRICT_CONFIG", raising=False)
    monkeypatch.delenv("SPECFILTER_CONFIG_DIR", raising=False)
    root = logging.getLogger()
    saved_level = root.level
    yield
    for logger in (root, logging.getLogger("specfilter.audit")):
        for handler in list(logger.handlers):
            if any(isinstance(f, logging_config.ContextFilter) for f in handler.filters):
                logger.removeHandler(handler)
                handler.close()
    root.setLevel(saved_level)


@pytest.fixture
def products():
    return sample_products()


@pytest.fixture
def full_catalog():
    """Every color/size combination, in a fixed order."""
    return [
        Product(f"{color.value}-{size.value}", color, size) for color in Color for size in Size
    ]
