"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from optlab.config import load_config


@pytest.fixture
def cfg() -> dict:
    """The bundled problem set (config/problems.yml)."""
    return load_config()


@pytest.fixture
def tmp_config(tmp_path: Path) -> Path:
    """A small standalone config file."""
    path = tmp_path / "problems.yml"
    path.write_text(
        "neville:\n"
        "  datasets:\n"
        "    squares:\n"
        "      x: [-1, 0, 1, 2]\n"
        "      y: [1, 0, 1, 4]\n"
        "      target: 0.5\n"
        "golden_section:\n"
        "  objective: square\n"
        "  a: -2.0\n"
        "  b: 3.0\n"
        "  epsilon: 0.001\n"
        "  max_iterations: 500\n"
        "  criterion: function\n"
    )
    return path
