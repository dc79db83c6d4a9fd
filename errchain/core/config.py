from __future__ import annotations

import logging
import sysconfig
from functools import lru_cache
from pathlib import Path

import yaml

from errchain.core.errors import PathRootsConfigError
from errchain.core.location import PathRoots

logger = logging.getLogger(__name__)

ALLOWED_KEYS: set[str] = {"external_root", "stdlib_root"}


@lru_cache(maxsize=None)
def default_path_roots() -> PathRoots:
    """Roots of the running interpreter: site-packages and the stdlib."""
    paths = sysconfig.get_paths()
    return PathRoots(external=paths.get("purelib"), stdlib=paths.get("stdlib"))


def resolve_path_roots(roots: PathRoots | None) -> PathRoots:
    return roots if roots is not None else default_path_roots()


def load_path_roots(path: str | Path) -> PathRoots:
    """Load path roots from a YAML file.

    Format:
      external_root: /path/to/site-packages
      stdlib_root: /path/to/lib/python3.X

    Both keys are optional; a missing key keeps the interpreter default.
    """
    p = Path(path)
    raw = yaml.safe_load(p.read_text(encoding="utf-8"))
    defaults = default_path_roots()
    if raw is None:
        return defaults
    if not isinstance(raw, dict):
        raise PathRootsConfigError("path roots file must be a mapping")

    unknown = sorted(str(k) for k in raw if k not in ALLOWED_KEYS)
    if unknown:
        raise PathRootsConfigError(f"unknown path roots keys: {', '.join(unknown)}")

    values: dict[str, str] = {}
    for k, v in raw.items():
        if not isinstance(v, str) or not v.strip():
            raise PathRootsConfigError(f"'{k}' must be a non-empty string")
        values[k] = v.strip()

    roots = PathRoots(
        external=values.get("external_root", defaults.external),
        stdlib=values.get("stdlib_root", defaults.stdlib),
    )
    logger.debug("loaded path roots from %s: %s", p, roots)
    return roots
