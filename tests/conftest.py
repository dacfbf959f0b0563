"""Pytest configuration and fixtures."""

import logging
import os
from pathlib import Path

import pytest
import structlog
from typer.testing import CliRunner

from fountaintree.config import reset_settings

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: mark test as unit test")
    config.addinivalue_line("markers", "integration: mark test as integration test")


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Drop FOUNTAINTREE_ variables so the host environment cannot leak in."""
    for var in [k for k in os.environ if k.startswith("FOUNTAINTREE_")]:
        monkeypatch.delenv(var, raising=False)


@pytest.fixture(autouse=True)
def reset_global_settings():
    """Reset global settings state around each test."""
    reset_settings()
    yield
    reset_settings()


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo logging set up by a test or a CLI run."""
    yield
    package_logger = logging.getLogger("fountaintree")
    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)
        handler.close()
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True
    structlog.reset_defaults()


@pytest.fixture
def sample_script_path() -> Path:
    """Path to the sample screenplay fixture."""
    return FIXTURES_DIR / "scripts" / "coffee_break.fountain"


@pytest.fixture
def sample_script(sample_script_path) -> str:
    """Contents of the sample screenplay fixture."""
    return sample_script_path.read_text(encoding="utf-8")


@pytest.fixture
def cli_runner() -> CliRunner:
    """Typer CLI runner."""
    return CliRunner()
