# Copyright 2025 Wahyu Ardiansyah
# Licensed under the Apache License, Version 2.0

"""
Pytest configuration for tensorlayout Python tests.
"""

import io
import sys
from pathlib import Path

import pytest

# Add the project root to sys.path so we can import tensorlayout
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

from tensorlayout.observability import LayoutLogger, Verbosity  # noqa: E402

# Skip test modules that require optional dependencies not installed
collect_ignore = []

# Check for hypothesis
try:
    import hypothesis  # noqa: F401
except ImportError:
    collect_ignore.append("test_property_based.py")


@pytest.fixture
def log_output(monkeypatch):
    """Fresh logger at DEBUG verbosity writing into a StringIO."""
    monkeypatch.delenv("TENSORLAYOUT_VERBOSITY", raising=False)
    LayoutLogger.reset()
    output = io.StringIO()
    logger = LayoutLogger.get()
    logger.set_output(output)
    logger.set_verbosity(Verbosity.DEBUG)
    yield output
    LayoutLogger.reset()
