"""Move On Up - step from a URL towards its site root."""

from .chain import build_chain
from .engine import clear_query_and_fragment, drop_subdomain, pop_path_segment, step
from .exceptions import MalformedUrlError, MoveOnUpError, UnknownModeError
from .models.mode import Mode
from .models.url import Url

__version__ = "0.1.0"

__all__ = [
    "build_chain",
    "clear_query_and_fragment",
    "drop_subdomain",
    "pop_path_segment",
    "step",
    "MalformedUrlError",
    "MoveOnUpError",
    "UnknownModeError",
    "Mode",
    "Url",
]
