"""
Catalog loading for AllTranslations.

Reads every catalog file in a translations directory:
- strings.properties (or strings.yaml) holds the default en-US template strings
- <locale>.properties / <locale>.yaml holds one locale, e.g. es_es.properties

All files are read as UTF-8. YAML catalogs may nest keys; they are flattened
into dot notation ('install.success').
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from alltranslations.catalog import Catalog, MissingTemplateError
from alltranslations.locale import DEFAULT_LOCALE, LocaleId, normalize

logger = logging.getLogger(__name__)

TEMPLATE_NAME = "strings"
PROPERTIES_SUFFIXES = (".properties",)
YAML_SUFFIXES = (".yaml", ".yml")

_ESCAPES = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}


@dataclass
class LoadResult:
    """
    Outcome of loading a translations directory.

    Exactly one of `catalog` and `error` is set. Callers decide whether a
    failed load aborts startup (`unwrap()`) or runs degraded.
    """

    catalog: Catalog | None = None
    error: MissingTemplateError | None = None
    files: list[Path] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.catalog is not None

    def unwrap(self) -> Catalog:
        """Return the catalog or raise the load error."""
        if self.catalog is None:
            raise self.error or MissingTemplateError()
        return self.catalog


def _ends_with_odd_backslashes(line: str) -> bool:
    count = len(line) - len(line.rstrip("\\"))
    return count % 2 == 1


def _logical_lines(text: str):
    """Yield logical lines, joining backslash-continued physical lines."""
    pending = None
    for physical in text.splitlines():
        line = physical.lstrip() if pending is not None else physical
        if pending is None:
            stripped = line.lstrip()
            if not stripped or stripped[0] in "#!":
                continue
            line = stripped

        if _ends_with_odd_backslashes(line):
            pending = (pending or "") + line[:-1]
            continue

        yield (pending or "") + line
        pending = None

    if pending is not None:
        yield pending


def _unescape(text: str) -> str:
    out = []
    i = 0
    while i < len(text):
        char = text[i]
        if char != "\\" or i + 1 >= len(text):
            out.append(char)
            i += 1
            continue

        nxt = text[i + 1]
        if nxt == "u" and i + 6 <= len(text):
            try:
                out.append(chr(int(text[i + 2 : i + 6], 16)))
                i += 6
                continue
            except ValueError:
                pass
        out.append(_ESCAPES.get(nxt, nxt))
        i += 2
    return "".join(out)


def _split_entry(line: str) -> tuple[str, str]:
    i = 0
    while i < len(line):
        char = line[i]
        if char == "\\":
            i += 2
            continue
        if char in "=: \t\f":
            break
        i += 1

    key = line[:i]
    rest = line[i:]
    if rest[:1] not in ("=", ":"):
        rest = rest.lstrip(" \t\f")
    if rest[:1] in ("=", ":"):
        rest = rest[1:]
    return _unescape(key), _unescape(rest.lstrip(" \t\f"))


def parse_properties(text: str) -> dict[str, str]:
    """
    Parse the key/value text format of a .properties file.

    Args:
        text: File contents, already decoded

    Returns:
        Mapping of key to raw template string. Later duplicate keys win.

    Examples:
        >>> parse_properties("test.hello=Hola\\n# comment\\ntest.bye : Adiós")
        {'test.hello': 'Hola', 'test.bye': 'Adiós'}
    """
    entries: dict[str, str] = {}
    for line in _logical_lines(text):
        key, value = _split_entry(line)
        entries[key] = value
    return entries


def _flatten(data: dict[str, Any], prefix: str = "") -> dict[str, str]:
    """
    Recursively flatten a nested dictionary into dot-notation keys.

    Args:
        data: Dictionary to flatten
        prefix: Current key prefix

    Returns:
        Flat mapping of dot-notation keys to string values
    """
    flat: dict[str, str] = {}
    for key, value in data.items():
        full_key = f"{prefix}.{key}" if prefix else str(key)
        if isinstance(value, dict):
            flat.update(_flatten(value, full_key))
        elif value is not None:
            flat[full_key] = str(value)
    return flat


def _read_catalog_file(path: Path) -> dict[str, str] | None:
    """
    Read one catalog file.

    Returns:
        The flat key -> template mapping, or None if the file is unreadable
        or malformed (the problem is logged).
    """
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.warning(f"Could not read catalog file {path}: {e}")
        return None

    if path.suffix.lower() in PROPERTIES_SUFFIXES:
        return parse_properties(text)

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        logger.warning(f"Malformed YAML in catalog file {path}: {e}")
        return None

    if data is None:
        return {}
    if not isinstance(data, dict):
        logger.warning(
            f"Catalog file {path} contains invalid type: {type(data).__name__}, "
            "expected mapping. Skipping."
        )
        return None
    return _flatten(data)


def _catalog_files(directory: Path) -> list[Path]:
    suffixes = PROPERTIES_SUFFIXES + YAML_SUFFIXES
    return sorted(p for p in directory.iterdir() if p.is_file() and p.suffix.lower() in suffixes)


def load_catalog(directory: str | Path, default_locale: LocaleId = DEFAULT_LOCALE) -> LoadResult:
    """
    Load every catalog file in a translations directory.

    Args:
        directory: Directory holding strings.properties and locale files
        default_locale: Locale the template strings file is registered under

    Returns:
        A LoadResult; its error is a MissingTemplateError when the directory
        or the template strings file is missing.
    """
    directory = Path(directory)
    result = LoadResult()

    if not directory.is_dir():
        logger.error(f"Translations directory {directory} does not exist")
        result.error = MissingTemplateError(f"Missing translations directory: {directory}")
        return result

    translations: dict[LocaleId, dict[str, str]] = {}
    template: dict[str, str] | None = None

    for path in _catalog_files(directory):
        entries = _read_catalog_file(path)
        if entries is None:
            continue

        result.files.append(path)
        if path.stem == TEMPLATE_NAME:
            template = {**(template or {}), **entries}
            logger.debug(f"Loaded {len(entries)} template strings from {path}")
            continue

        locale = normalize(path.stem)
        translations.setdefault(locale, {}).update(entries)
        logger.debug(f"Loaded {len(entries)} strings for {locale} from {path}")

    if template is None:
        logger.error(
            f"Could not initialize translations: missing {TEMPLATE_NAME}.properties in {directory}"
        )
        result.error = MissingTemplateError()
        return result

    if default_locale in translations:
        logger.warning(
            f"Template strings override the {default_locale} catalog loaded from {directory}"
        )
    translations[default_locale] = template

    result.catalog = Catalog(translations, default_locale=default_locale)
    return result
