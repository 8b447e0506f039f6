"""
Pytest configuration and fixtures for mc_client tests.
"""

import logging
import os
from collections.abc import Iterator
from pathlib import Path

import pytest
import structlog


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """
    Run every test without MC_* variables, inside an empty working directory.

    The working directory matters for settings (``.env`` lookup) and for
    relative local paths, which are made absolute against it.
    """
    for key in list(os.environ):
        if key.startswith("MC_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    """
    Sort test items to run unit tests before integration tests.

    Tests marked with @pytest.mark.integration run last.
    """

    def sort_key(item: pytest.Item) -> tuple[int, str]:
        if item.get_closest_marker("integration"):
            return (1, item.nodeid)
        return (0, item.nodeid)

    items.sort(key=sort_key)


@pytest.fixture
def restore_logging() -> Iterator[None]:
    """Restore root logger and structlog state after a test."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    mc_level = logging.getLogger("mc_client").level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    logging.getLogger("mc_client").setLevel(mc_level)
    structlog.reset_defaults()
