from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Iterator, Mapping, Optional, cast

from errchain.core.config import resolve_path_roots
from errchain.core.errors import MessageError
from errchain.core.location import (
    Location,
    PathRoots,
    caller_frame,
    capture_location,
    capture_stacktrace,
)

logger = logging.getLogger(__name__)

SEPARATOR = " <br> "


@dataclass(frozen=True, eq=False)
class WrappedError(Exception):
    """One link of an error chain.

    ``actual`` is the error introduced at this wrap, ``previous`` whatever was
    wrapped (another WrappedError or any plain error). Only the root of a
    chain carries a stacktrace; outer nodes report the root's.

    ``fields`` is a read-only view over the node's own copy of the mapping.
    """

    actual: BaseException
    previous: Optional[BaseException] = None
    fields: Mapping[str, Any] = field(default_factory=dict)
    location: Location = Location(file="<unknown>", line=0)
    frames: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))

    def __str__(self) -> str:
        return self.render()

    def is_wrapped_error(self) -> bool:
        return True

    def chain(self) -> list[WrappedError]:
        """Nodes from this one down to the root, outermost first."""
        nodes = [self]
        while isinstance(nodes[-1].previous, WrappedError):
            nodes.append(nodes[-1].previous)
        return nodes

    def root(self) -> WrappedError:
        return self.chain()[-1]

    def render(self) -> str:
        """Render the whole chain on one line, outermost first."""
        nodes = self.chain()
        parts = [_render_node(n) for n in nodes]
        terminal = nodes[-1].previous
        if terminal is not None:
            parts.append(f"Message: {terminal}.")
        return SEPARATOR.join(parts)

    def collect_all_fields(self) -> dict[str, Any]:
        """Merge the fields of every wrap in the chain.

        On key collisions the value closer to the root wins.
        """
        merged: dict[str, Any] = {}
        for node in reversed(self.chain()):
            for k, v in node.fields.items():
                merged.setdefault(k, v)
        return merged

    def stacktrace(self) -> str:
        return " ".join(self.root().frames)


def format_fields(fields: Mapping[str, Any]) -> str:
    entries = " ".join(f"{k}:{fields[k]}" for k in sorted(fields))
    return f"map[{entries}]"


def _render_node(node: WrappedError) -> str:
    if node.fields:
        return (
            f"Message: {node.actual}. Location: {node.location}. "
            f"Fields: {format_fields(node.fields)}."
        )
    return f"Message: {node.actual}. Location: {node.location}"


def new_from_message(
    message: str,
    fields: Optional[Mapping[str, Any]] = None,
    *,
    roots: PathRoots | None = None,
) -> WrappedError:
    """Start a chain from a bare message."""
    return cast(WrappedError, _create(None, MessageError(message), fields, roots))


def new_from_error(
    actual: Optional[BaseException],
    fields: Optional[Mapping[str, Any]] = None,
    *,
    roots: PathRoots | None = None,
) -> Optional[WrappedError]:
    """Start a chain from an existing error. Returns None when ``actual`` is None."""
    return _create(None, actual, fields, roots)


def wrap(
    previous: Optional[BaseException],
    actual: Optional[BaseException],
    fields: Optional[Mapping[str, Any]] = None,
    *,
    roots: PathRoots | None = None,
) -> Optional[WrappedError]:
    """Wrap ``previous`` with ``actual``. Returns None when ``actual`` is None."""
    return _create(previous, actual, fields, roots)


def _create(
    previous: Optional[BaseException],
    actual: Optional[BaseException],
    fields: Optional[Mapping[str, Any]],
    roots: PathRoots | None,
) -> Optional[WrappedError]:
    if actual is None:
        logger.debug("refusing to wrap a None error")
        return None

    r = resolve_path_roots(roots)
    frame = caller_frame()
    try:
        loc = capture_location(frame, r)
        # Roots own the stacktrace; outer wraps reach it through previous.
        frames: tuple[str, ...] = ()
        if not isinstance(previous, WrappedError):
            frames = capture_stacktrace(frame, r)
    finally:
        del frame

    return WrappedError(
        actual=actual,
        previous=previous,
        fields=fields or {},
        location=loc,
        frames=frames,
    )


def iter_chain(err: Optional[BaseException]) -> Iterator[tuple[BaseException, dict[str, Any]]]:
    """Yield ``(error, fields)`` from the outermost wrap toward the root.

    A terminal plain error is paired with the fields of the node wrapping it.
    """
    if err is None:
        return
    if not isinstance(err, WrappedError):
        yield err, {}
        return

    node: Optional[BaseException] = err
    while isinstance(node, WrappedError):
        yield node.actual, dict(node.fields)
        if node.previous is not None and not isinstance(node.previous, WrappedError):
            yield node.previous, dict(node.fields)
        node = node.previous
