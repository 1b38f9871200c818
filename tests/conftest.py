"""Shared pytest fixtures for simulator tests."""

import io

import matplotlib

matplotlib.use("Agg")

import pytest
from rich.console import Console


@pytest.fixture
def console() -> Console:
    """Console writing to an in-memory buffer."""
    return Console(file=io.StringIO(), width=80)
