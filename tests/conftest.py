# tests/conftest.py

"""Shared pytest fixtures for all tests."""

from collections.abc import Generator
from pathlib import Path

import pytest

from src.config.settings import Settings


@pytest.fixture(autouse=True)
def isolated_logs_dir(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch,
) -> Generator[Path, None, None]:
    """Keep per-run log files out of the repository's logs/ folder."""
    logs_dir = tmp_path / "logs"
    monkeypatch.setattr(Settings, "LOGS_DIR", logs_dir)
    yield logs_dir
