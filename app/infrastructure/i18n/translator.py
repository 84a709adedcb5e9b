"""Translation service for resolving messages against the active catalog.

Resolution never fails: every missing piece (translation support, locale,
catalog, entry) falls back to returning the source string unchanged.
"""

import threading
from typing import Any, Optional

from core.logging import get_module_logger
from infrastructure.i18n.loader import TranslationLoader
from infrastructure.i18n.models import (
    DOMAIN,
    Locale,
    LocaleContext,
    TranslationCatalog,
    TranslationKey,
)
from infrastructure.i18n.resolvers import LocaleResolver

logger = get_module_logger()


class Translator:
    """Service for translating messages of one domain.

    The catalog for the context's locale is loaded at most once, on first
    use, and is read-only afterwards.

    Attributes:
        loader: Catalog capability, or None for a build without translation support.
        context: Locale environment snapshot.
        domain: Domain of the messages this translator serves.
        resolver: LocaleResolver used to pick catalogs.
    """

    def __init__(
        self,
        loader: Optional[TranslationLoader],
        context: Optional[LocaleContext] = None,
        domain: str = DOMAIN,
        resolver: Optional[LocaleResolver] = None,
    ):
        """Initialize Translator.

        Args:
            loader: TranslationLoader instance, or None to disable translation.
            context: Locale context (default: snapshot of os.environ).
            domain: Message domain (default: "fish").
            resolver: LocaleResolver (default: new instance).
        """
        self.loader = loader
        self.context = context if context is not None else LocaleContext.from_environ()
        self.domain = domain
        self.resolver = resolver or LocaleResolver()
        self._catalog: Optional[TranslationCatalog] = None
        self._loaded = False
        self._lock = threading.Lock()

    @property
    def enabled(self) -> bool:
        """Whether this translator was built with catalog support."""
        return self.loader is not None

    @property
    def locale(self) -> Optional[Locale]:
        """Locale selected by the context, or None."""
        return self.resolver.resolve_from_context(self.context)

    def load(self) -> Optional[TranslationCatalog]:
        """Load the catalog for the context's locale, once.

        Returns:
            The catalog, or None if none is available.
        """
        if not self._loaded:
            with self._lock:
                if not self._loaded:
                    self._catalog = self._load_catalog()
                    self._loaded = True
        return self._catalog

    def _load_catalog(self) -> Optional[TranslationCatalog]:
        if self.loader is None:
            return None

        locale = self.locale
        if locale is None:
            return None

        try:
            chain = self.resolver.select_chain(locale, self.loader.available_locales())
            if not chain:
                logger.debug("no_catalog_for_locale", locale=locale.tag)
                return None

            # Least specific first so more specific entries win
            catalog = None
            for selected in reversed(chain):
                loaded = self.loader.load(selected)
                catalog = loaded if catalog is None else catalog.merged_with(loaded)
        except (OSError, LookupError, ValueError) as e:
            logger.info("catalog_unavailable", locale=locale.tag, error=str(e))
            return None

        logger.debug(
            "loaded_catalog",
            locale=locale.tag,
            catalog_locale=catalog.locale.tag,
            message_count=len(catalog),
        )
        return catalog

    def resolve(self, key: str) -> str:
        """Return the translation of key, or key itself.

        Args:
            key: Literal source string.

        Returns:
            Non-empty translation if one exists, otherwise key unchanged.
        """
        # The empty msgid maps to the catalog header in gettext
        if not key or self.loader is None:
            return key

        catalog = self.load()
        if catalog is None:
            return key

        message = catalog.get_message(TranslationKey(key, self.domain))
        if message is None:
            logger.debug(
                "translation_not_found", key=key, locale=catalog.locale.tag
            )
            return key
        return message

    def resolve_format(self, key: str, *args: Any) -> str:
        """Resolve key, then apply printf-style formatting.

        Formatting applies even without args, so "%%" always becomes "%".
        A translation whose placeholders do not fit args is ignored in
        favour of the source template.

        Args:
            key: Literal printf-style template.
            *args: Values for the template's placeholders.

        Returns:
            Formatted string.

        Raises:
            TypeError, ValueError: If the source template itself does not fit args.
        """
        template = self.resolve(key)
        if template != key:
            try:
                return template % args
            except (TypeError, ValueError) as e:
                logger.info("translated_template_mismatch", key=key, error=str(e))
        return key % args

    def has_message(self, key: str) -> bool:
        """Check if a translation exists for key.

        Args:
            key: Literal source string.

        Returns:
            True if the active catalog translates key.
        """
        if not key or self.loader is None:
            return False
        catalog = self.load()
        return catalog.has_message(TranslationKey(key, self.domain)) if catalog else False

    def get_catalog(self) -> Optional[TranslationCatalog]:
        """Get the active catalog.

        Returns:
            TranslationCatalog or None if none is available.
        """
        return self.load()
