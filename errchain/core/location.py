from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from types import FrameType
from typing import Optional


STACKTRACE_DEPTH = 20

# Frames from modules under this prefix are library internals, never a call site.
_INTERNAL_PREFIX = "errchain."


@dataclass(frozen=True)
class Location:
    file: str
    line: int

    def __str__(self) -> str:
        return f"{self.file}:{self.line}"


@dataclass(frozen=True)
class PathRoots:
    """Known path roots stripped from captured file names.

    ``external`` is where third-party packages live, ``stdlib`` the standard
    library. The external root is checked first since it is often nested
    inside the stdlib root.
    """

    external: Optional[str] = None
    stdlib: Optional[str] = None

    def trim(self, path: str) -> str:
        for root in (self.external, self.stdlib):
            if not root:
                continue
            prefix = root.rstrip(os.sep) + os.sep
            if path.startswith(prefix):
                return path[len(prefix) :]
        return path


def _is_internal(frame: FrameType) -> bool:
    name = frame.f_globals.get("__name__", "")
    return isinstance(name, str) and name.startswith(_INTERNAL_PREFIX)


def caller_frame() -> Optional[FrameType]:
    """Return the innermost frame that does not belong to errchain itself."""
    frame: Optional[FrameType] = sys._getframe(1)
    while frame is not None and _is_internal(frame):
        frame = frame.f_back
    return frame


def capture_location(frame: Optional[FrameType], roots: PathRoots) -> Location:
    if frame is None:
        return Location(file="<unknown>", line=0)
    return Location(file=roots.trim(frame.f_code.co_filename), line=frame.f_lineno)


def capture_stacktrace(
    frame: Optional[FrameType], roots: PathRoots, depth: int = STACKTRACE_DEPTH
) -> tuple[str, ...]:
    """Locations from ``frame`` outward, at most ``depth`` of them."""
    out: list[str] = []
    while frame is not None and len(out) < depth:
        out.append(str(capture_location(frame, roots)))
        frame = frame.f_back
    return tuple(out)
