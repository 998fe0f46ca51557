"""Tests for the release_schedule package."""

import pytest


def test_package_import():
    """Test that the package can be imported."""
    import release_schedule
    assert release_schedule.__version__ == "0.1.0"


def test_cli_import():
    """Test that CLI module can be imported."""
    from release_schedule.cli import main
    assert callable(main)


def test_public_api():
    """Test that the derivation entry points are exported."""
    from release_schedule import create, derive_intervals
    assert callable(create)
    assert callable(derive_intervals)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
