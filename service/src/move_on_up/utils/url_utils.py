"""URL helpers shared by the engine and the jump list."""

from typing import TYPE_CHECKING, List

if TYPE_CHECKING:
    from ..models.url import Url


def strip_trailing_slashes(path: str) -> str:
    """Remove redundant trailing slashes for consistent comparisons."""
    return path.rstrip("/")


def split_segments(path: str) -> List[str]:
    """
    Split a path into its segments below the root.

    Trailing slashes are ignored, inner empty segments are kept:
        "/"        -> []
        "/a/b/"    -> ["a", "b"]
        "/a//b"    -> ["a", "", "b"]
    """
    stripped = strip_trailing_slashes(path)
    if not stripped:
        return []
    return stripped.split("/")[1:]


def split_labels(hostname: str) -> List[str]:
    """Split a hostname into its dot-separated labels."""
    return hostname.split(".")


def format_display_label(url: "Url") -> str:
    """
    Short form of a URL for menus: hostname followed by path.

    Example:
        https://docs.example.com/guide/intro?x=1#top
        -> docs.example.com/guide/intro
    """
    return f"{url.hostname}{url.path}"
