"""Feature-level fixtures for i18n system tests.

Provides catalog directories and loaders for locale selection and
translation scenarios.
"""

import pytest
import yaml

from infrastructure.i18n import GettextTranslationLoader, YAMLTranslationLoader
from tests.factories.i18n import write_mo_file

GERMAN_MESSAGES = {
    "File": "Datei",
    "Directory": "Verzeichnis",
    "Command": "Befehl",
    "%s: Expected %d args, got %d": "%s: %d Argumente erwartet, %d erhalten",
}

AUSTRIAN_MESSAGES = {
    "Directory": "Ordner",
}

FRENCH_MESSAGES = {
    "File": "Fichier",
    "Directory": "Répertoire",
}


@pytest.fixture
def temp_translations_dir(tmp_path):
    """Create temporary directory with sample YAML catalogs.

    Returns a directory structure like:
    - fish.de.yml
    - fish.de_AT.yml
    - fish.fr_FR.yml
    - other.de.yml (foreign domain)
    """
    with open(tmp_path / "fish.de.yml", "w", encoding="utf-8") as f:
        yaml.dump(GERMAN_MESSAGES, f, allow_unicode=True)

    with open(tmp_path / "fish.de_AT.yml", "w", encoding="utf-8") as f:
        yaml.dump(AUSTRIAN_MESSAGES, f, allow_unicode=True)

    with open(tmp_path / "fish.fr_FR.yml", "w", encoding="utf-8") as f:
        yaml.dump(FRENCH_MESSAGES, f, allow_unicode=True)

    with open(tmp_path / "other.de.yml", "w", encoding="utf-8") as f:
        yaml.dump({"Help": "Hilfe"}, f, allow_unicode=True)

    return tmp_path


@pytest.fixture
def temp_gettext_dir(tmp_path):
    """Create temporary gettext tree with compiled catalogs.

    Returns a directory structure like:
    - de/LC_MESSAGES/fish.mo
    - fr_FR/LC_MESSAGES/fish.mo
    """
    localedir = tmp_path / "locale"
    write_mo_file(localedir / "de" / "LC_MESSAGES" / "fish.mo", GERMAN_MESSAGES)
    write_mo_file(localedir / "fr_FR" / "LC_MESSAGES" / "fish.mo", FRENCH_MESSAGES)
    return localedir


@pytest.fixture
def yaml_loader(temp_translations_dir):
    """Create YAMLTranslationLoader for temporary translations directory."""
    return YAMLTranslationLoader(temp_translations_dir, use_cache=False)


@pytest.fixture
def yaml_loader_with_cache(temp_translations_dir):
    """Create YAMLTranslationLoader with caching enabled."""
    return YAMLTranslationLoader(temp_translations_dir, use_cache=True)


@pytest.fixture
def gettext_loader(temp_gettext_dir):
    """Create GettextTranslationLoader for temporary gettext tree."""
    return GettextTranslationLoader(temp_gettext_dir)


@pytest.fixture
def locale_environments():
    """Collection of LANG values for testing."""
    return {
        "german": "de_DE.UTF-8",
        "austrian": "de_AT.UTF-8",
        "french": "fr_FR.UTF-8",
        "japanese": "ja_JP.UTF-8",
        "posix": "POSIX",
        "c_utf8": "C.UTF-8",
        "malformed": "not a locale!",
    }
