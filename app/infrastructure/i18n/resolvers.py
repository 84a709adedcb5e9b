"""Locale resolution logic for selecting the message catalog.

Turns the environment-derived locale context into a Locale and picks the
catalogs to consult from the locales a loader can provide.
"""

from typing import List, Optional, Sequence

import structlog
from infrastructure.i18n.models import Locale, LocaleContext

logger = structlog.get_logger().bind(component="i18n.resolver")


class LocaleResolver:
    """Resolves the catalog locale from the locale context.

    Selection follows the gettext fallback chain:
    1. Exact tag matches, most specific first (ll_CC@mod, ll_CC, ll@mod, ll)
    2. Any available catalog of the same language
    3. No catalog
    """

    def __init__(self):
        self.log = logger

    def resolve_from_context(self, context: LocaleContext) -> Optional[Locale]:
        """Resolve locale from a LocaleContext.

        Args:
            context: Locale environment snapshot.

        Returns:
            Resolved Locale, or None if translation should not apply.
        """
        resolved = context.resolve()
        if resolved is None:
            self.log.debug(
                "no_locale_from_context", effective_value=context.effective_value
            )
            return None
        self.log.debug("resolved_from_context", locale=resolved.tag)
        return resolved

    def resolve_from_string(self, locale_str: str) -> Locale:
        """Parse and validate locale string.

        Args:
            locale_str: Locale string (e.g., "de_DE.UTF-8").

        Returns:
            Parsed Locale.

        Raises:
            ValueError: If locale_str is malformed.
        """
        try:
            return Locale.from_string(locale_str)
        except ValueError:
            log = self.log.bind(locale_str=locale_str)
            log.debug("invalid_locale_string")
            raise

    def select_chain(
        self, locale: Locale, available: Sequence[Locale]
    ) -> List[Locale]:
        """Pick the available catalog locales to consult, best first.

        Args:
            locale: Requested locale.
            available: Locales a loader can provide.

        Returns:
            Matching available locales ordered from most to least specific.
            Empty if nothing matches.
        """
        by_tag = {}
        for candidate in available:
            by_tag.setdefault(_normalize(candidate.tag), candidate)

        chain = [
            by_tag[_normalize(tag)]
            for tag in locale.candidates()
            if _normalize(tag) in by_tag
        ]
        if chain:
            return chain

        best = LanguageNegotiator.find_best_match(
            locale.candidates(), [candidate.tag for candidate in available]
        )
        if best is None:
            self.log.debug("no_matching_catalog", locale=locale.tag)
            return []
        return [by_tag[_normalize(best)]]

    def select(self, locale: Locale, available: Sequence[Locale]) -> Optional[Locale]:
        """Pick the best available catalog locale.

        Args:
            locale: Requested locale.
            available: Locales a loader can provide.

        Returns:
            Best matching locale, or None.
        """
        chain = self.select_chain(locale, available)
        return chain[0] if chain else None


def _normalize(tag: str) -> str:
    return tag.replace("-", "_").lower()


def _language(tag: str) -> str:
    return _normalize(tag).split("@")[0].split("_")[0]


class LanguageNegotiator:
    """Matches requested locale tags against available ones.

    Tags compare case-insensitively, and "_" and "-" are equivalent.
    """

    @staticmethod
    def matches_language(
        requested: str,
        available: str,
        strict: bool = False,
    ) -> bool:
        """Check if available tag matches requested tag.

        Args:
            requested: Requested tag (e.g., "de_AT").
            available: Available tag (e.g., "de").
            strict: If True, requires exact match. If False, allows language-only match.

        Returns:
            True if tags match.
        """
        if _normalize(requested) == _normalize(available):
            return True

        if strict:
            return False

        return _language(requested) == _language(available)

    @staticmethod
    def find_best_match(
        requested: Sequence[str],
        available: Sequence[str],
        default: Optional[str] = None,
    ) -> Optional[str]:
        """Find best matching tag from available options.

        Every requested tag is tried for an exact match before any
        language-only match is considered.

        Args:
            requested: Requested tags in preference order.
            available: Available tags.
            default: Default if no match found.

        Returns:
            Best matching tag from available, or default if no match.
        """
        for strict in (True, False):
            for req_tag in requested:
                for avail_tag in available:
                    if LanguageNegotiator.matches_language(
                        req_tag, avail_tag, strict=strict
                    ):
                        return avail_tag

        return default
