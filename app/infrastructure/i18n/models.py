"""Translation models for i18n system.

Defines core data structures for message lookup: the message key, the parsed
locale, the environment-derived locale context and the translation catalog.
"""

import os
import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import List, Mapping, Optional

DOMAIN = "fish"

# language[_territory][.codeset][@modifier]
_LOCALE_PATTERN = re.compile(
    r"^(?P<language>[A-Za-z]{2,3})"
    r"(?:[_-](?P<region>[A-Za-z]{2}|[0-9]{3}))?"
    r"(?:\.(?P<codeset>[A-Za-z0-9_-]+))?"
    r"(?:@(?P<modifier>[A-Za-z0-9_-]+))?$"
)

_UNTRANSLATED_LOCALES = ("c", "posix")


@dataclass(frozen=True)
class Locale:
    """A parsed POSIX locale name.

    Accepts ``language[_territory][.codeset][@modifier]`` (e.g. "de_DE.UTF-8",
    "sr_RS@latin"). A hyphen is accepted as the territory separator.

    Attributes:
        language: Lowercase language code (e.g. "de").
        region: Uppercase territory code, or "" when absent.
        codeset: Character set as written, or "" when absent. Not compared.
        modifier: Modifier as written, or "" when absent.
    """

    language: str
    region: str = ""
    codeset: str = field(default="", compare=False)
    modifier: str = ""

    @classmethod
    def from_string(cls, locale_str: str) -> "Locale":
        """Parse a locale name.

        Args:
            locale_str: Locale name (e.g., "de_DE.UTF-8", "fr", "pt-BR").

        Returns:
            Parsed Locale.

        Raises:
            ValueError: If locale_str is not a well-formed locale name.
        """
        match = _LOCALE_PATTERN.match((locale_str or "").strip())
        if not match:
            raise ValueError(f"Unsupported locale: {locale_str!r}")
        return cls(
            language=match.group("language").lower(),
            region=(match.group("region") or "").upper(),
            codeset=match.group("codeset") or "",
            modifier=match.group("modifier") or "",
        )

    @property
    def tag(self) -> str:
        """Most specific lookup tag (e.g. "de_DE", "sr_RS@latin").

        Returns:
            Tag without the codeset.
        """
        return self.candidates()[0]

    def candidates(self) -> List[str]:
        """Lookup tags from most to least specific.

        The codeset never takes part in catalog selection.

        Returns:
            Tags in the order ll_CC@mod, ll_CC, ll@mod, ll.
        """
        tags = []
        if self.region and self.modifier:
            tags.append(f"{self.language}_{self.region}@{self.modifier}")
        if self.region:
            tags.append(f"{self.language}_{self.region}")
        if self.modifier:
            tags.append(f"{self.language}@{self.modifier}")
        tags.append(self.language)
        return tags

    def __str__(self) -> str:
        return self.tag


@dataclass(frozen=True)
class TranslationKey:
    """A message lookup key.

    The message is the literal source string; the domain scopes which
    catalogs may translate it.

    Attributes:
        message: Literal source string (msgid).
        domain: Catalog domain the message belongs to.
    """

    message: str
    domain: str = DOMAIN

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class TranslationCatalog:
    """Translations of one domain for a single locale.

    Catalogs are read-only once built; merging produces a new catalog.

    Attributes:
        locale: The Locale this catalog is for.
        domain: Domain the messages belong to.
        messages: Mapping of msgid to translated string.
        loaded_at: Timestamp (ISO 8601) when translations were loaded.
    """

    locale: Locale
    domain: str = DOMAIN
    messages: Mapping[str, str] = field(default_factory=dict)
    loaded_at: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, "messages", MappingProxyType(dict(self.messages)))

    def get_message(self, key: TranslationKey) -> Optional[str]:
        """Retrieve a translation by key.

        Args:
            key: TranslationKey to look up.

        Returns:
            Translated string, or None if the key belongs to another domain,
            is absent, or maps to an empty value.
        """
        if key.domain != self.domain:
            return None
        message = self.messages.get(key.message)
        if not isinstance(message, str) or not message:
            return None
        return message

    def has_message(self, key: TranslationKey) -> bool:
        """Check if a usable translation exists for the key."""
        return self.get_message(key) is not None

    def merged_with(self, other: "TranslationCatalog") -> "TranslationCatalog":
        """Return a new catalog with other's entries layered on top.

        Later entries override earlier ones. The result keeps other's locale.

        Args:
            other: TranslationCatalog whose entries win.

        Returns:
            Merged TranslationCatalog.
        """
        messages = dict(self.messages)
        messages.update(other.messages)
        return TranslationCatalog(
            locale=other.locale,
            domain=self.domain,
            messages=messages,
            loaded_at=other.loaded_at or self.loaded_at,
        )

    def __len__(self) -> int:
        return len(self.messages)


@dataclass(frozen=True)
class LocaleContext:
    """Snapshot of the locale environment at resolution time.

    Attributes:
        lc_all: Value of LC_ALL, if set.
        lc_messages: Value of LC_MESSAGES, if set.
        lang: Value of LANG, if set.
    """

    lc_all: Optional[str] = None
    lc_messages: Optional[str] = None
    lang: Optional[str] = None

    @classmethod
    def from_environ(cls, environ: Optional[Mapping[str, str]] = None) -> "LocaleContext":
        """Capture the locale variables from an environment mapping.

        Args:
            environ: Environment to read (default: os.environ).

        Returns:
            LocaleContext snapshot.
        """
        environ = os.environ if environ is None else environ
        return cls(
            lc_all=environ.get("LC_ALL"),
            lc_messages=environ.get("LC_MESSAGES"),
            lang=environ.get("LANG"),
        )

    @property
    def effective_value(self) -> Optional[str]:
        """First non-empty of LC_ALL, LC_MESSAGES and LANG."""
        for value in (self.lc_all, self.lc_messages, self.lang):
            if value and value.strip():
                return value.strip()
        return None

    def resolve(self) -> Optional[Locale]:
        """Resolve the locale that selects the message catalog.

        Returns:
            Parsed Locale, or None when unset, C/POSIX, or malformed.
        """
        value = self.effective_value
        if value is None:
            return None
        if value.split(".", 1)[0].lower() in _UNTRANSLATED_LOCALES:
            return None
        try:
            return Locale.from_string(value)
        except ValueError:
            return None
