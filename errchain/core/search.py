from __future__ import annotations

from typing import Any, Optional

from errchain.core.chain import WrappedError, iter_chain
from errchain.core.errors import GenericErrorLike, MessageError


def _as_generic(err: Any) -> Optional[GenericErrorLike]:
    if isinstance(err, GenericErrorLike):
        return err
    return None


def find_generic_error(
    err: Optional[BaseException],
) -> tuple[Optional[GenericErrorLike], dict[str, Any], bool]:
    """Find a generic error category in a chain.

    Fields returned are those of the wrap that introduced the match, never
    the aggregate of the chain. A bare generic error comes back with no fields.
    """
    ge = _as_generic(err)
    if ge is not None:
        return ge, {}, True

    node = err
    while isinstance(node, WrappedError):
        ge = _as_generic(node.actual)
        if ge is not None:
            return ge, dict(node.fields), True
        if node.previous is None:
            break
        # One level of lookahead on previous.
        ge = _as_generic(node.previous)
        if ge is not None:
            return ge, dict(node.fields), True
        node = node.previous
    return None, {}, False


def find_error(
    target: Optional[BaseException],
    err: Optional[BaseException],
) -> tuple[Optional[BaseException], dict[str, Any], bool]:
    """Find ``target`` in a chain, outermost wrap first."""
    if target is None or err is None:
        return None, {}, False
    for candidate, fields in iter_chain(err):
        if candidate == target:
            return candidate, fields, True
    return None, {}, False


def find_error_by_prefix(
    prefix: Optional[str],
    err: Optional[BaseException],
) -> tuple[Optional[BaseException], dict[str, Any], bool]:
    """Find the first error in a chain whose message starts with ``prefix``.

    The match comes back as a MessageError holding the matched message.
    """
    if prefix is None or err is None:
        return None, {}, False
    for candidate, fields in iter_chain(err):
        message = str(candidate)
        if message.startswith(prefix):
            return MessageError(message), fields, True
    return None, {}, False
