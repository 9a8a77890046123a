"""Pytest configuration and common fixtures for ThemePrefs tests."""

import os
import sys
import pytest

# Add the project root to the Python path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

# Set environment variables for testing
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")


@pytest.fixture(scope="function")
def settings_path(tmp_path):
    """Settings file location inside a directory that does not exist yet."""
    return str(tmp_path / "config" / "themeprefs" / "settings.json")


@pytest.fixture(scope="function")
def test_store(settings_path):
    """Provide a store bound to a temporary settings file."""
    from themeprefs.store import SettingsStore

    return SettingsStore(storage_path=lambda: settings_path)


@pytest.fixture(autouse=True)
def _no_scale_override(monkeypatch):
    """Keep the developer's environment out of default-scale lookups."""
    monkeypatch.delenv("THEMEPREFS_SCALE", raising=False)


def pytest_configure(config):
    """Configure pytest for ThemePrefs testing."""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add default markers."""
    for item in items:
        if "test_cli_entrypoints.py" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)
