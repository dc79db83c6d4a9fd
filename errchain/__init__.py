from errchain.core.chain import (
    WrappedError,
    iter_chain,
    new_from_error,
    new_from_message,
    wrap,
)
from errchain.core.config import default_path_roots, load_path_roots
from errchain.core.errors import (
    GenericError,
    GenericErrorLike,
    MessageError,
    PathRootsConfigError,
)
from errchain.core.location import Location, PathRoots
from errchain.core.search import find_error, find_error_by_prefix, find_generic_error

__all__ = [
    "WrappedError",
    "iter_chain",
    "new_from_error",
    "new_from_message",
    "wrap",
    "default_path_roots",
    "load_path_roots",
    "GenericError",
    "GenericErrorLike",
    "MessageError",
    "PathRootsConfigError",
    "Location",
    "PathRoots",
    "find_error",
    "find_error_by_prefix",
    "find_generic_error",
]
