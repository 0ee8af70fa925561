"""
AllTranslations: localized message resolution.

Provides:
- Message lookup by key and locale, with fallback to en-US
- Positional {0}, {1}, ... argument substitution
- Nested translations via TranslationRequest arguments
- Catalog loading from .properties and YAML files

Usage:
    from alltranslations import Translator, TranslationRequest, load_catalog

    translator = Translator(load_catalog("i18n").unwrap())

    translator.get("test.hello", "es_ES")            # "Hola"
    translator.get("test.arguments", "es-ES", 2)     # "Hay 2 manzanas"
    translator.get(
        "test.nested.translations",
        "es-ES",
        2,
        TranslationRequest.of("test.nested.translations.liters"),
    )                                                # "El volumen es 2 litros"
"""

from alltranslations.binding import LocaleBinding
from alltranslations.catalog import Catalog, MissingTemplateError
from alltranslations.config import TranslationSettings, load_settings
from alltranslations.loader import LoadResult, load_catalog, parse_properties
from alltranslations.locale import DEFAULT_LOCALE, LocaleId, normalize
from alltranslations.request import TranslationRequest
from alltranslations.translator import Translator, get_translator, reset_translator, t

__version__ = "0.1.0"

__all__ = [
    # Core translation
    "Translator",
    "TranslationRequest",
    "t",
    "get_translator",
    "reset_translator",
    # Locales
    "LocaleId",
    "DEFAULT_LOCALE",
    "normalize",
    # Catalogs
    "Catalog",
    "MissingTemplateError",
    "LoadResult",
    "load_catalog",
    "parse_properties",
    # Binding and configuration
    "LocaleBinding",
    "TranslationSettings",
    "load_settings",
]
