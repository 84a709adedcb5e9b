import sys
from pathlib import Path

# Ensure the application package root is on sys.path so importing application
# modules (e.g. `core.config`) works during pytest collection regardless of
# the directory pytest is invoked from.
project_root = str(Path(__file__).resolve().parents[1])
if project_root not in sys.path:
    sys.path.insert(0, project_root)

import core.config as core_config
import pytest
from infrastructure.i18n import reset_translator

LOCALE_VARIABLES = ("LANGUAGE", "LC_ALL", "LC_MESSAGES", "LANG")


@pytest.fixture(autouse=True)
def clean_locale_environment(monkeypatch):
    """Start every test from an unset locale environment."""
    for name in LOCALE_VARIABLES:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def fresh_default_translator():
    """Drop the process-wide translator around each test."""
    reset_translator()
    yield
    reset_translator()


@pytest.fixture
def i18n_settings():
    """Live i18n settings; override attributes with monkeypatch.setattr."""
    return core_config.settings.i18n
