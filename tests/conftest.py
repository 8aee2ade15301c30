import logging

import pytest


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers main() attached, they point at a per-test capture stream."""
    yield
    logger = logging.getLogger("animal_age")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def columns_80(monkeypatch):
    monkeypatch.setenv("COLUMNS", "80")
    monkeypatch.delenv("NO_COLOR", raising=False)
