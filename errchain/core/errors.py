from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable


class MessageError(Exception):
    """Plain error carrying only a message."""

    @property
    def message(self) -> str:
        return str(self)


@runtime_checkable
class GenericErrorLike(Protocol):
    """Capability marker for caller-defined error categories.

    Any error type exposing ``is_generic_error()`` is picked up by
    ``find_generic_error``; the check is on the method being present, not on
    what it returns.
    """

    def is_generic_error(self) -> bool: ...


@dataclass(frozen=True)
class GenericError(Exception):
    """Bundled example of a generic error category."""

    def __str__(self) -> str:
        return "GenericError"

    def is_generic_error(self) -> bool:
        return True


class PathRootsConfigError(ValueError):
    pass
