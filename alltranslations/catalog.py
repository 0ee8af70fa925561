"""
In-memory translation catalog.

A Catalog maps each LocaleId to its key -> template strings. It is built once
and exposes read-only views afterwards, so lookups from several threads need
no locking.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType

from alltranslations.locale import DEFAULT_LOCALE, LocaleId, normalize

_EMPTY: Mapping[str, str] = MappingProxyType({})


class MissingTemplateError(RuntimeError):
    """Raised when the default locale's template strings are not available."""

    def __init__(self, message: str = "Missing template strings file!"):
        super().__init__(message)


class Catalog:
    """
    Immutable LocaleId -> (key -> template) store.

    Raises:
        MissingTemplateError: If there is no entry for the default locale
    """

    def __init__(
        self,
        translations: Mapping[LocaleId, Mapping[str, str]],
        default_locale: LocaleId = DEFAULT_LOCALE,
    ):
        if default_locale not in translations:
            raise MissingTemplateError(
                f"Missing template strings for default locale {default_locale}"
            )

        self._default_locale = default_locale
        self._translations: Mapping[LocaleId, Mapping[str, str]] = MappingProxyType(
            {locale: MappingProxyType(dict(entries)) for locale, entries in translations.items()}
        )

    @classmethod
    def from_mapping(
        cls,
        translations: Mapping[str | LocaleId, Mapping[str, str]],
        default_locale: str | LocaleId = DEFAULT_LOCALE,
    ) -> Catalog:
        """
        Build a Catalog from already-parsed data keyed by locale tags.

        Tags that normalize to the same LocaleId are merged, later ones
        overriding earlier keys.
        """
        merged: dict[LocaleId, dict[str, str]] = {}
        for raw_locale, entries in translations.items():
            merged.setdefault(normalize(raw_locale), {}).update(entries)
        return cls(merged, default_locale=normalize(default_locale))

    @property
    def default_locale(self) -> LocaleId:
        return self._default_locale

    def get(self, locale: LocaleId) -> Mapping[str, str] | None:
        """Return the templates for exactly this locale, or None."""
        return self._translations.get(locale)

    def templates(self, locale: LocaleId) -> Mapping[str, str]:
        return self._translations.get(locale, _EMPTY)

    def __contains__(self, locale: object) -> bool:
        return locale in self._translations

    def __iter__(self) -> Iterator[LocaleId]:
        return iter(self._translations)

    def __len__(self) -> int:
        return len(self._translations)
