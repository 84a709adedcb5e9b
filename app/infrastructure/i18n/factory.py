"""Factory functions for creating i18n components.

Provides convenience functions for building translators from the application
settings, plus the process-wide default translator.
"""

from functools import lru_cache
from pathlib import Path
from typing import Optional

import structlog
from core.config import I18nSettings, settings
from infrastructure.i18n.loader import (
    GettextTranslationLoader,
    TranslationLoader,
    YAMLTranslationLoader,
)
from infrastructure.i18n.models import DOMAIN, LocaleContext
from infrastructure.i18n.translator import Translator

logger = structlog.get_logger()


def create_loader(
    translations_dir: Path,
    catalog_format: str = "yaml",
    domain: str = DOMAIN,
) -> TranslationLoader:
    """Create the catalog loader for a format.

    Args:
        translations_dir: Catalog directory.
        catalog_format: "yaml" or "gettext".
        domain: Catalog domain.

    Returns:
        TranslationLoader for the format.

    Raises:
        ValueError: If the format is unknown or the directory does not exist.
    """
    if catalog_format == "yaml":
        return YAMLTranslationLoader(translations_dir, domain=domain)
    if catalog_format == "gettext":
        return GettextTranslationLoader(translations_dir, domain=domain)
    raise ValueError(f"Unsupported catalog format: {catalog_format}")


def create_translator(
    context: Optional[LocaleContext] = None,
    i18n_settings: Optional[I18nSettings] = None,
    translations_dir: Optional[Path] = None,
    catalog_format: Optional[str] = None,
    preload: bool = False,
) -> Translator:
    """Create and configure a Translator instance.

    A build with translations disabled, or a missing catalog directory,
    yields a translator that returns every message unchanged.

    Args:
        context: Locale context (default: snapshot of os.environ)
        i18n_settings: Translation settings (default: settings.i18n)
        translations_dir: Catalog directory (default: from settings)
        catalog_format: "yaml" or "gettext" (default: from settings)
        preload: Whether to load the catalog immediately (default: False)

    Returns:
        Translator: Configured translator instance

    Usage:
        # Use defaults (bundled catalogs, current environment)
        translator = create_translator()

        # Explicit locale and catalog directory
        translator = create_translator(
            context=LocaleContext(lang="de_DE.UTF-8"),
            translations_dir=Path("/usr/share/locale"),
            catalog_format="gettext",
        )
    """
    i18n_settings = i18n_settings or settings.i18n
    context = context if context is not None else LocaleContext.from_environ()

    if not i18n_settings.ENABLED:
        logger.debug("translator_created_without_support")
        return Translator(loader=None, context=context)

    translations_dir = Path(translations_dir or i18n_settings.LOCALE_DIR)
    catalog_format = catalog_format or i18n_settings.CATALOG_FORMAT

    try:
        loader = create_loader(translations_dir, catalog_format)
    except ValueError as e:
        logger.info(
            "translations_unavailable",
            translations_dir=str(translations_dir),
            error=str(e),
        )
        return Translator(loader=None, context=context)

    translator = Translator(loader=loader, context=context)

    if preload:
        translator.load()
        logger.debug(
            "translator_created_with_preload",
            translations_dir=str(translations_dir),
            catalog_format=catalog_format,
        )
    else:
        logger.debug(
            "translator_created_lazy",
            translations_dir=str(translations_dir),
            catalog_format=catalog_format,
        )

    return translator


@lru_cache(maxsize=1)
def get_translator() -> Translator:
    """Get the process-wide translator for the current environment."""
    return create_translator()


def reset_translator() -> None:
    """Drop the process-wide translator so the next call rebuilds it."""
    get_translator.cache_clear()


def translate(message: str) -> str:
    """Translate message with the process-wide translator."""
    return get_translator().resolve(message)


_ = translate
