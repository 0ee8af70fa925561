"""
Core translation module for AllTranslations.

Provides message translation with:
- Lookup of raw templates by key and locale
- Single-hop fallback to the default locale (en-US) for missing translations
- Positional {0}, {1}, ... argument substitution
- Nested translations through TranslationRequest arguments
"""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence
from typing import Any

from alltranslations.binding import LocaleBinding
from alltranslations.catalog import Catalog
from alltranslations.locale import LocaleId, normalize
from alltranslations.request import TranslationRequest

logger = logging.getLogger(__name__)

_PLACEHOLDER = re.compile(r"\{(0|[1-9][0-9]*)\}", re.ASCII)


class Translator:
    """
    Resolves message keys into rendered, localized strings.

    Features:
    - Reads templates from an immutable Catalog
    - Falls back to the default locale if the requested one lacks a key
    - Returns None (never the key, never an empty string) for unknown keys
    - Optionally binds application users to locales

    Substitution modes:
        By default each argument is substituted into the progressively
        updated template, so an argument whose text contains "{1}" is itself
        substituted when index 1 is processed. With single_pass=True the
        original template is scanned once and inserted text is left alone.

    Nested TranslationRequests are not checked for cycles: a key that
    transitively nests itself recurses until RecursionError.
    """

    def __init__(
        self,
        catalog: Catalog,
        binding: LocaleBinding | None = None,
        single_pass: bool = False,
    ):
        """
        Initialize the translator.

        Args:
            catalog: Loaded catalog, including the default locale entry
            binding: Optional user -> locale binding for get_for/set_locale
            single_pass: Substitute placeholders without re-scanning inserted text
        """
        self._catalog = catalog
        self._binding = binding
        self._single_pass = single_pass

    @property
    def catalog(self) -> Catalog:
        return self._catalog

    @property
    def default_locale(self) -> LocaleId:
        return self._catalog.default_locale

    @property
    def single_pass(self) -> bool:
        return self._single_pass

    @property
    def locales(self) -> list[LocaleId]:
        """All loaded locales, sorted by tag."""
        return sorted(self._catalog, key=lambda locale: locale.tag)

    def resolve(self, key: str, locale: str | LocaleId) -> str | None:
        """
        Find the raw template for a key.

        Args:
            key: Message key using dot notation (e.g., 'test.hello')
            locale: Requested locale

        Returns:
            The template from the requested locale, else from the default
            locale, else None.
        """
        locale = normalize(locale)
        templates = self._catalog.get(locale)
        if templates is not None and key in templates:
            return templates[key]

        if locale != self.default_locale:
            logger.debug(f"'{key}' missing in {locale}, falling back to {self.default_locale}")
            return self.resolve(key, self.default_locale)

        return None

    def _render_argument(self, value: Any, locale: LocaleId) -> str:
        if isinstance(value, TranslationRequest):
            nested = self.get(value, locale)
            if nested is None:
                logger.debug(f"Nested translation '{value.key}' not found in {locale}")
                return ""
            return nested
        return str(value)

    def render(self, template: str, locale: str | LocaleId, args: Sequence[Any] = ()) -> str:
        """
        Substitute positional arguments into a template.

        Args:
            template: Raw template with {i} placeholders
            locale: Locale used to translate nested TranslationRequests
            args: Values for the placeholders, by index

        Returns:
            The rendered string. Placeholders without an argument are kept
            as they are.
        """
        if not args:
            return template

        locale = normalize(locale)
        if self._single_pass:
            rendered: dict[int, str] = {}

            def substitute(match: re.Match) -> str:
                index = int(match.group(1))
                if index >= len(args):
                    return match.group(0)
                if index not in rendered:
                    rendered[index] = self._render_argument(args[index], locale)
                return rendered[index]

            return _PLACEHOLDER.sub(substitute, template)

        for index, value in enumerate(args):
            replacement = self._render_argument(value, locale)
            template = template.replace(f"{{{index}}}", replacement)
        return template

    def get(self, key: str | TranslationRequest, locale: str | LocaleId, *args: Any) -> str | None:
        """
        Translate a message key with optional positional arguments.

        Args:
            key: Message key, or a TranslationRequest carrying key and args
            locale: Requested locale, as a LocaleId or a tag like 'es_ES'
            *args: Values for {0}, {1}, ...; TranslationRequests are translated

        Returns:
            The rendered message, or None if no translation exists in the
            requested or the default locale.

        Raises:
            TypeError: If args are given together with a TranslationRequest

        Examples:
            >>> translator.get("test.arguments", "es-ES", 2)
            'Hay 2 manzanas'

            >>> translator.get(TranslationRequest.of("test.hello"), "xx-ZZ")
            'Hello'
        """
        if isinstance(key, TranslationRequest):
            if args:
                raise TypeError("Arguments must be given inside the TranslationRequest")
            key, args = key.key, key.args

        locale = normalize(locale)
        template = self.resolve(key, locale)
        if template is None:
            logger.debug(f"No translation for '{key}' in {locale}")
            return None

        # Nested arguments follow the requested locale, even after fallback
        return self.render(template, locale, args)

    def _require_binding(self) -> LocaleBinding:
        if self._binding is None:
            raise RuntimeError("No locale binding configured for this translator")
        return self._binding

    def get_for(self, key: str | TranslationRequest, user: Any, *args: Any) -> str | None:
        """Translate a message key in the locale bound to a user."""
        return self.get(key, self._require_binding().get_locale(user), *args)

    def get_locale(self, user: Any) -> LocaleId:
        return self._require_binding().get_locale(user)

    def set_locale(self, user: Any, locale: str | LocaleId) -> None:
        """Bind a user to a locale, normalizing tag strings first."""
        self._require_binding().set_locale(user, normalize(locale))

    def keys(self, locale: str | LocaleId) -> set[str]:
        """Keys defined for exactly this locale (no fallback)."""
        return set(self._catalog.templates(normalize(locale)))

    def missing_keys(self, locale: str | LocaleId) -> set[str]:
        """
        Find keys that exist in the default locale but not in the target one.

        Args:
            locale: Target locale to check

        Returns:
            Set of missing translation keys
        """
        return self.keys(self.default_locale) - self.keys(locale)


# Global translator instance
_translator: Translator | None = None


def get_translator() -> Translator:
    """
    Get or create the global translator instance.

    The catalog is loaded from the configured translations directory the
    first time this is called.

    Returns:
        The global Translator instance

    Raises:
        MissingTemplateError: If the template strings cannot be loaded
    """
    global _translator
    if _translator is None:
        from alltranslations.config import load_settings
        from alltranslations.loader import load_catalog

        settings = load_settings()
        catalog = load_catalog(settings.directory).unwrap()
        _translator = Translator(catalog, single_pass=settings.single_pass)
    return _translator


def t(key: str | TranslationRequest, locale: str | LocaleId, *args: Any) -> str | None:
    """
    Translate a message key (shorthand function).

    Examples:
        >>> t("test.hello", "es_ES")
        'Hola'
    """
    return get_translator().get(key, locale, *args)


def reset_translator() -> None:
    """Reset the global translator (mainly for testing)."""
    global _translator
    _translator = None
