"""
Pytest configuration and shared fixtures for all tests.
"""

import json
import sys
from pathlib import Path

import pytest

# Add the src directory to sys.path so tests run without installing the package
src_dir = Path(__file__).parent.parent / "src"
if str(src_dir) not in sys.path:
    sys.path.insert(0, str(src_dir))


@pytest.fixture(scope="session")
def fixtures_dir():
    """Get the fixtures directory path."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture(scope="session")
def sample_observations(fixtures_dir):
    """Load sample station observations from fixtures."""
    data_file = fixtures_dir / "sample_observations.json"
    with open(data_file, encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep configuration environment variables from leaking into tests."""
    for name in (
        "REFERENCE_ET_CONFIG",
        "REFERENCE_ET_LOG_LEVEL",
        "REFERENCE_ET_LOG_FILE",
        "REFERENCE_ET_TIMEZONE",
        "REFERENCE_ET_HS_COEFFICIENT",
    ):
        monkeypatch.delenv(name, raising=False)


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "reference: mark test as checked against published FAO56 worked examples"
    )
    config.addinivalue_line(
        "markers", "unit: mark test as unit test (no external dependencies)"
    )
