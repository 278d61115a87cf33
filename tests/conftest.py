"""
Pytest configuration and shared fixtures.
"""

import tempfile
from pathlib import Path

import pytest

from chuk_mcp_scales.catalog import ScaleCatalog


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for project scales."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def library_path() -> Path:
    """Path to the built-in scale library."""
    return Path(__file__).parent.parent / "src" / "chuk_mcp_scales" / "catalog" / "library"


@pytest.fixture
def catalog(library_path: Path, temp_dir: Path) -> ScaleCatalog:
    """Catalog over the built-in library and an empty project directory."""
    return ScaleCatalog(library_path=library_path, project_path=temp_dir)
