"""Navigation modes."""

from enum import Enum
from typing import Union

from ..exceptions import UnknownModeError


class Mode(str, Enum):
    """How far a single "move up" goes and what it discards first."""

    STANDARD = "standard"  # query+fragment, then one path segment, then a sub-domain
    ROOT = "root"  # straight to "/", then one sub-domain at a time
    PARAM = "param"  # one query pair at a time, then fragment, then as standard
    SLASH_KEEP = "slash-keep"  # keep query+fragment, pop path, then sub-domain

    @classmethod
    def values(cls) -> tuple:
        return tuple(mode.value for mode in cls)

    @classmethod
    def parse(cls, value: Union["Mode", str]) -> "Mode":
        """
        Resolve a mode from a Mode or its string value.

        Matching is case-insensitive and accepts "_" in place of "-"
        (so "SLASH_KEEP" and "slash-keep" are the same mode).

        Raises:
            UnknownModeError: for anything that is not a known mode
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            normalized = value.strip().lower().replace("_", "-")
            for mode in cls:
                if mode.value == normalized:
                    return mode
        raise UnknownModeError(value, cls.values())
