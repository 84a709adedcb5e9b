"""i18n system - message translation for the fish domain.

Maps literal source strings to their translation for the locale selected by
the environment, returning the source string whenever no translation applies.

Main components:
- models: TranslationKey, Locale, TranslationCatalog, LocaleContext
- loader: TranslationLoader, YAMLTranslationLoader and GettextTranslationLoader
- translator: Translator service with identity fallback
- resolvers: LocaleResolver and LanguageNegotiator for catalog selection
- factory: create_translator() and the process-wide translate()
"""

from infrastructure.i18n.factory import (
    create_loader,
    create_translator,
    get_translator,
    reset_translator,
    translate,
)
from infrastructure.i18n.loader import (
    GettextTranslationLoader,
    TranslationLoader,
    YAMLTranslationLoader,
)
from infrastructure.i18n.models import (
    DOMAIN,
    Locale,
    LocaleContext,
    TranslationCatalog,
    TranslationKey,
)
from infrastructure.i18n.resolvers import LanguageNegotiator, LocaleResolver
from infrastructure.i18n.translator import Translator

__all__ = [
    "DOMAIN",
    "Locale",
    "TranslationKey",
    "TranslationCatalog",
    "LocaleContext",
    "TranslationLoader",
    "YAMLTranslationLoader",
    "GettextTranslationLoader",
    "Translator",
    "LocaleResolver",
    "LanguageNegotiator",
    "create_loader",
    "create_translator",
    "get_translator",
    "reset_translator",
    "translate",
]
