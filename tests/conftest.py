"""Pytest configuration and fixtures for Kalends tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add the parent directory to sys.path so kalends can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from kalends.config import reset_config  # noqa: E402
from kalends.locales import reset_locale  # noqa: E402


@pytest.fixture(autouse=True)
def _restore_process_state():
    """Restore process-wide configuration and locale around every test."""
    reset_config()
    reset_locale()
    yield
    reset_config()
    reset_locale()
