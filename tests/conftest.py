"""
Pytest configuration and fixtures.
"""

from pathlib import Path

import pytest


@pytest.fixture
def example_config_path() -> Path:
    """Path to the example jail.conf shipped with the repository."""
    return Path(__file__).parent.parent / "jail.conf.example"


@pytest.fixture
def config_file(tmp_path: Path):
    """Factory writing jail.conf text to a temporary file."""

    def _write(text: str, name: str = "jail.conf") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write
