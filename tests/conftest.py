"""
Pytest configuration and shared fixtures.
"""

import tempfile
from pathlib import Path

import pytest

from chuk_mcp_scales.core import Note, Scale

MAJOR_STEPS = [200, 200, 100, 200, 200, 200, 100]
MINOR_STEPS = [200, 100, 200, 200, 100, 200, 200]


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def library_path() -> Path:
    """Path to the built-in scale library."""
    return Path(__file__).parent.parent / "src" / "chuk_mcp_scales" / "catalog" / "library"


@pytest.fixture
def c_major() -> Scale:
    """C major rooted on middle C."""
    return Scale(MAJOR_STEPS, Note.parse("C4"), "Major")


@pytest.fixture
def a_minor() -> Scale:
    """A natural minor rooted on A4."""
    return Scale(MINOR_STEPS, Note.parse("A4"), "Minor")
