"""
Locale identifiers for AllTranslations.

Locale tags are accepted in either separator style and any case:
- es-ES
- es_es
- EN-us

and normalize to a canonical LocaleId ("es-ES", "en-US").
"""

from __future__ import annotations

from dataclasses import dataclass, field

SEPARATOR = "-"


@dataclass(frozen=True)
class LocaleId:
    """
    Canonical language + region identifier.

    Equality is structural over the normalized parts, so two LocaleIds built
    from "es_es" and "ES-es" compare (and hash) the same.
    """

    language: str
    region: str = ""
    variants: tuple[str, ...] = field(default=())

    @property
    def tag(self) -> str:
        """Canonical tag, e.g. 'es-ES'."""
        parts = [self.language]
        if self.region:
            parts.append(self.region)
        parts.extend(self.variants)
        return SEPARATOR.join(parts)

    def __str__(self) -> str:
        return self.tag


def normalize(raw: str | LocaleId) -> LocaleId:
    """
    Normalize a locale tag into a LocaleId.

    This never raises: malformed input simply yields a LocaleId that no
    catalog is registered under.

    Args:
        raw: Locale tag using '-' or '_' as separator, or a LocaleId

    Returns:
        The canonical LocaleId

    Examples:
        >>> normalize("es_es").tag
        'es-ES'
        >>> normalize("invalid locale code").tag
        'invalid locale code'
    """
    if isinstance(raw, LocaleId):
        return raw

    subtags = str(raw).strip().replace("_", SEPARATOR).split(SEPARATOR)
    language = subtags[0].lower()
    region = subtags[1].upper() if len(subtags) > 1 else ""
    variants = tuple(part.lower() for part in subtags[2:])
    return LocaleId(language=language, region=region, variants=variants)


DEFAULT_LOCALE = LocaleId("en", "US")
