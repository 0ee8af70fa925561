"""Translation requests: a key bundled with its arguments."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class TranslationRequest:
    """
    A translatable key with all its arguments.

    Arguments may themselves be TranslationRequests, which are translated
    in the caller's locale when the outer message is rendered.
    """

    key: str
    args: tuple[Any, ...] = field(default=())

    def __post_init__(self) -> None:
        if not isinstance(self.args, tuple):
            object.__setattr__(self, "args", tuple(self.args))

    @classmethod
    def of(cls, key: str, *args: Any) -> TranslationRequest:
        """Build a request from a key and positional arguments."""
        return cls(key, args)
