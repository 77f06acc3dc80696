"""Pytest configuration and fixtures."""

import pytest


@pytest.fixture
def upload_file(tmp_path):
    """Write a small binary PNG-named file and return its path."""
    path = tmp_path / "pau.png"
    path.write_bytes(b"\x89PNG\r\n\x1a\n\x00\x00--fake")
    return path


@pytest.fixture
def fixed_boundary():
    """Boundary factory that always returns the same token."""
    return lambda: "B1"

