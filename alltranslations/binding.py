"""
User -> locale binding.

How an application stores each user's locale is up to the application; it
hands the Translator an object implementing LocaleBinding.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from alltranslations.locale import LocaleId


@runtime_checkable
class LocaleBinding(Protocol):
    """Get and set the locale of an application's end user."""

    def get_locale(self, user: Any) -> LocaleId:
        """Get the locale of your end user."""
        ...

    def set_locale(self, user: Any, locale: LocaleId) -> None:
        """Set the locale of your end user."""
        ...
