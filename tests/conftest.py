"""
Pytest configuration and shared fixtures.
This file ensures the project root is in sys.path for imports.
"""

import json
import sys
from pathlib import Path

# Add project root to sys.path so we can import domain, services, etc.
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

import pytest  # noqa: E402


@pytest.fixture
def catalog_file(tmp_path):
    """Write a JSON catalog document to a temporary file and return its path."""

    def _write(content) -> Path:
        path = tmp_path / "catalog.json"
        if isinstance(content, str):
            path.write_text(content, encoding="utf-8")
        else:
            path.write_text(json.dumps(content), encoding="utf-8")
        return path

    return _write


@pytest.fixture(scope="session")
def engine():
    """Protocol engine over the built-in catalog and meal policy."""
    from test_fixtures import make_engine

    return make_engine()
