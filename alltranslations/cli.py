from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from rich.markup import escape

from alltranslations import __version__
from alltranslations.catalog import MissingTemplateError
from alltranslations.config import TranslationSettings, load_settings
from alltranslations.loader import load_catalog
from alltranslations.request import TranslationRequest
from alltranslations.translator import Translator
from alltranslations.ui import console, data_table, error, success, warning

NESTED_PREFIX = "@"


def parse_argument(raw: str):
    """Turn a command line argument into a value; '@some.key' nests a translation."""
    if raw.startswith(NESTED_PREFIX) and len(raw) > 1:
        return TranslationRequest.of(raw[len(NESTED_PREFIX) :])
    return raw


class TranslationsCLI:
    def __init__(self, settings: TranslationSettings):
        self.settings = settings
        self._translator: Translator | None = None

    def _load(self) -> Translator:
        if self._translator is None:
            catalog = load_catalog(self.settings.directory).unwrap()
            self._translator = Translator(catalog, single_pass=self.settings.single_pass)
        return self._translator

    def get(self, args: argparse.Namespace) -> int:
        """Print one rendered translation."""
        translator = self._load()
        values = [parse_argument(raw) for raw in args.args]
        translated = translator.get(args.key, args.locale, *values)
        if translated is None:
            warning(f"No translation for '{escape(args.key)}' in {escape(args.locale)}")
            return 1

        console.print(translated, markup=False, highlight=False, soft_wrap=True)
        return 0

    def locales(self, args: argparse.Namespace) -> int:
        """List loaded locales with their key counts."""
        translator = self._load()
        rows = []
        for locale in translator.locales:
            marker = "default" if locale == translator.default_locale else ""
            rows.append([locale.tag, len(translator.keys(locale)), marker])

        data_table(
            columns=[
                {"name": "Locale", "style": "cyan", "no_wrap": True},
                {"name": "Keys", "justify": "right"},
                {"name": "", "style": "dim"},
            ],
            rows=rows,
            title=f"Locales in {escape(str(self.settings.directory))}",
        )
        return 0

    def missing(self, args: argparse.Namespace) -> int:
        """List default-locale keys the given locale does not translate."""
        translator = self._load()
        missing = sorted(translator.missing_keys(args.locale))
        if not missing:
            success(f"{escape(args.locale)} translates every key of {translator.default_locale}")
            return 0

        console.print(f"[bold]{len(missing)} key(s) missing in {escape(args.locale)}:[/bold]")
        for key in missing:
            console.print(f"  • {key}", markup=False, soft_wrap=True)
        return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="alltranslations",
        description="Inspect and render translation catalogs",
    )
    parser.add_argument(
        "--version", "-V", action="version", version=f"alltranslations {__version__}"
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Show debug logging")
    parser.add_argument("--dir", "-d", help="Translations directory (default: from settings)")
    parser.add_argument(
        "--single-pass",
        action="store_true",
        help="Substitute placeholders without re-scanning inserted text",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    get_parser = subparsers.add_parser("get", help="Render a translation")
    get_parser.add_argument("key")
    get_parser.add_argument("locale")
    get_parser.add_argument("args", nargs="*", help="Positional arguments; @key nests a translation")

    subparsers.add_parser("locales", help="List loaded locales")

    missing_parser = subparsers.add_parser("missing", help="List untranslated keys of a locale")
    missing_parser.add_argument("locale")

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not args.command:
        parser.print_help()
        return 0

    settings = load_settings()
    if args.dir or args.single_pass:
        settings = TranslationSettings(
            directory=Path(args.dir) if args.dir else settings.directory,
            single_pass=args.single_pass or settings.single_pass,
        )

    cli = TranslationsCLI(settings)

    try:
        if args.command == "get":
            return cli.get(args)
        elif args.command == "locales":
            return cli.locales(args)
        elif args.command == "missing":
            return cli.missing(args)
        else:
            parser.print_help()
            return 1
    except MissingTemplateError as e:
        error(
            f"Could not load translations: {escape(str(e))}",
            details=f"Looked in {escape(str(settings.directory))}",
        )
        return 1
    except KeyboardInterrupt:
        error("Operation cancelled")
        return 130
    except (ValueError, OSError) as e:
        error(f"Error: {escape(str(e))}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
