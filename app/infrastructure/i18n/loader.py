"""Translation loading interface and implementations.

Defines the contract for loading catalogs and provides YAML and GNU gettext
loaders.
"""

import gettext
import struct
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List

import yaml

import structlog
from infrastructure.i18n.models import DOMAIN, Locale, TranslationCatalog

logger = structlog.get_logger()


def _utcnow() -> str:
    return datetime.now(timezone.utc).isoformat()


class TranslationLoader(ABC):
    """Abstract base for translation loaders.

    A loader is the catalog capability of a translation-enabled build: it
    reports which locales it has catalogs for and loads them for one domain.
    """

    domain: str = DOMAIN

    @abstractmethod
    def load(self, locale: Locale) -> TranslationCatalog:
        """Load the catalog for a specific locale.

        Args:
            locale: Locale to load; matched on its exact tag.

        Returns:
            TranslationCatalog with loaded messages.

        Raises:
            FileNotFoundError: If no catalog exists for the locale.
            ValueError: If the catalog cannot be read or parsed.
        """
        pass

    @abstractmethod
    def available_locales(self) -> List[Locale]:
        """List the locales this loader has catalogs for.

        Returns:
            Locales with a catalog for the loader's domain.
        """
        pass


class YAMLTranslationLoader(TranslationLoader):
    """Loader for YAML catalogs.

    Expects files named <domain>.<tag>.yml (e.g. fish.de.yml, fish.pt_BR.yml)
    in the translations directory, each holding a flat mapping of source
    string to translation.

    Attributes:
        translations_dir: Path to directory containing YAML files.
        domain: Catalog domain.
        cache: Loaded catalogs (locale -> catalog) when caching is enabled.
    """

    def __init__(
        self,
        translations_dir: Path,
        domain: str = DOMAIN,
        use_cache: bool = True,
    ):
        """Initialize YAML translation loader.

        Args:
            translations_dir: Path to directory with YAML catalogs.
            domain: Catalog domain (file name prefix).
            use_cache: Whether to cache loaded catalogs in memory.

        Raises:
            ValueError: If translations_dir does not exist.
        """
        self.translations_dir = Path(translations_dir)
        self.domain = domain
        self.use_cache = use_cache
        self.cache: Dict[Locale, TranslationCatalog] = {}

        if not self.translations_dir.is_dir():
            raise ValueError(
                f"Translations directory not found: {self.translations_dir}"
            )

        logger.debug(
            "initialized_yaml_loader",
            translations_dir=str(self.translations_dir),
            domain=domain,
            use_cache=use_cache,
        )

    def _path_for(self, locale: Locale) -> Path:
        return self.translations_dir / f"{self.domain}.{locale.tag}.yml"

    def load(self, locale: Locale) -> TranslationCatalog:
        """Load the catalog for a locale from its YAML file.

        Args:
            locale: Locale to load.

        Returns:
            TranslationCatalog with loaded messages.

        Raises:
            FileNotFoundError: If no YAML file exists for the locale.
            ValueError: If the YAML file cannot be read or parsed.
        """
        if self.use_cache and locale in self.cache:
            logger.debug("loaded_from_cache", locale=locale.tag)
            return self.cache[locale]

        yaml_file = self._path_for(locale)
        if not yaml_file.is_file():
            raise FileNotFoundError(
                f"No {self.domain} catalog found for locale {locale.tag} in {self.translations_dir}"
            )

        try:
            with open(yaml_file, "r", encoding="utf-8") as f:
                # BaseLoader keeps every scalar a string: "No", "yes", "on", "1".
                data = yaml.load(f, Loader=yaml.BaseLoader)
        except yaml.YAMLError as e:
            logger.info("yaml_parse_error", file=str(yaml_file), error=str(e))
            raise ValueError(f"Failed to parse {yaml_file}: {e}") from e
        except (OSError, UnicodeDecodeError) as e:
            logger.info("yaml_read_error", file=str(yaml_file), error=str(e))
            raise ValueError(f"Failed to read {yaml_file}: {e}") from e

        catalog = TranslationCatalog(
            locale=locale,
            domain=self.domain,
            messages=self._extract_messages(data, yaml_file),
            loaded_at=_utcnow(),
        )

        logger.debug(
            "loaded_translations",
            locale=locale.tag,
            file=str(yaml_file),
            message_count=len(catalog),
        )

        if self.use_cache:
            self.cache[locale] = catalog

        return catalog

    def available_locales(self) -> List[Locale]:
        """Detect locales from <domain>.<tag>.yml file names.

        Returns:
            Locales with a catalog file, sorted by tag.
        """
        locales = []
        for yaml_file in sorted(self.translations_dir.glob(f"{self.domain}.*.yml")):
            # "fish.pt_BR.yml" -> "pt_BR"
            locale_str = yaml_file.stem[len(self.domain) + 1 :]
            try:
                locales.append(Locale.from_string(locale_str))
            except ValueError:
                logger.debug("skipped_catalog_file", file=str(yaml_file))
        return locales

    def _extract_messages(self, data: Any, source_file: Path) -> Dict[str, str]:
        """Collect usable entries from parsed YAML data.

        Expected format:
        "source string": "translated string"

        Args:
            data: Parsed YAML data.
            source_file: Source file (for logging).

        Returns:
            Mapping of source string to translation.
        """
        if data is None:
            return {}
        if not isinstance(data, dict):
            logger.info(
                "invalid_yaml_format", file=str(source_file), expected="dict"
            )
            return {}

        messages = {}
        for source, translated in data.items():
            if not isinstance(source, str) or not isinstance(translated, str):
                logger.debug(
                    "skipped_invalid_entry", file=str(source_file), source=str(source)
                )
                continue
            if source and translated:
                messages[source] = translated
        return messages

    def clear_cache(self) -> None:
        """Clear all cached catalogs."""
        self.cache.clear()
        logger.debug("cleared_translation_cache")


class GettextTranslationLoader(TranslationLoader):
    """Loader for compiled GNU gettext catalogs.

    Expects the standard layout <localedir>/<tag>/LC_MESSAGES/<domain>.mo.

    Attributes:
        localedir: Root of the gettext catalog tree.
        domain: Catalog domain (.mo file name).
    """

    def __init__(self, localedir: Path, domain: str = DOMAIN):
        """Initialize gettext loader.

        Args:
            localedir: Root of the gettext catalog tree.
            domain: Catalog domain.

        Raises:
            ValueError: If localedir does not exist.
        """
        self.localedir = Path(localedir)
        self.domain = domain

        if not self.localedir.is_dir():
            raise ValueError(f"Locale directory not found: {self.localedir}")

    def _path_for(self, locale: Locale) -> Path:
        return self.localedir / locale.tag / "LC_MESSAGES" / f"{self.domain}.mo"

    def load(self, locale: Locale) -> TranslationCatalog:
        """Load the catalog for a locale from its .mo file.

        Args:
            locale: Locale to load.

        Returns:
            TranslationCatalog with loaded messages.

        Raises:
            FileNotFoundError: If no .mo file exists for the locale.
            ValueError: If the .mo file is unreadable, corrupt or names an
                unknown charset.
        """
        mo_file = self._path_for(locale)
        if not mo_file.is_file():
            raise FileNotFoundError(
                f"No {self.domain} catalog found for locale {locale.tag} in {self.localedir}"
            )

        try:
            with open(mo_file, "rb") as f:
                translations = gettext.GNUTranslations(f)
        except (OSError, struct.error, LookupError, ValueError) as e:
            # LookupError: the header names a charset Python does not know.
            logger.info("mo_parse_error", file=str(mo_file), error=str(e))
            raise ValueError(f"Failed to parse {mo_file}: {e}") from e

        messages = _catalog_messages(translations)

        logger.debug(
            "loaded_translations",
            locale=locale.tag,
            file=str(mo_file),
            message_count=len(messages),
        )

        return TranslationCatalog(
            locale=locale,
            domain=self.domain,
            messages=messages,
            loaded_at=_utcnow(),
        )

    def available_locales(self) -> List[Locale]:
        """Detect locales from the catalog tree.

        Returns:
            Locales with a <domain>.mo file, sorted by tag.
        """
        locales = []
        for mo_file in sorted(self.localedir.glob(f"*/LC_MESSAGES/{self.domain}.mo")):
            try:
                locales.append(Locale.from_string(mo_file.parent.parent.name))
            except ValueError:
                logger.debug("skipped_catalog_file", file=str(mo_file))
        return locales


def _catalog_messages(translations: gettext.GNUTranslations) -> Dict[str, str]:
    """Singular entries of a parsed .mo catalog.

    GNUTranslations has no public way to enumerate its entries, so this reads
    the CPython ``_catalog`` dict it fills while parsing. Plural forms are
    keyed there by (msgid, n) and the header by "".

    Raises:
        TypeError: If the interpreter's GNUTranslations has no ``_catalog`` dict.
    """
    catalog = getattr(translations, "_catalog", None)
    if not isinstance(catalog, dict):
        raise TypeError(
            f"{type(translations).__name__} does not expose a _catalog dict"
        )
    return {
        source: translated
        for source, translated in catalog.items()
        if isinstance(source, str) and source and isinstance(translated, str)
    }
