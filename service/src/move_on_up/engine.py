"""Mode engine: one "move up" step per call.

Every mode reduces a URL in the same order of concerns (query, fragment,
path, sub-domain) and differs only in which of them it touches and how much
it discards at once. All functions are pure and return new Url values.
"""

import logging
from typing import Optional, Union

from .models.mode import Mode
from .models.url import Url
from .utils.url_utils import strip_trailing_slashes

logger = logging.getLogger(__name__)


def pop_path_segment(url: Url) -> Optional[Url]:
    """
    Remove the last path segment.

    Returns None when the path is already the root.
    """
    segments = url.segments
    if not segments:
        return None
    parent = strip_trailing_slashes("/" + "/".join(segments[:-1])) or "/"
    return url.replace(path=parent)


def drop_subdomain(url: Url) -> Optional[Url]:
    """
    Remove the left-most hostname label.

    The last two labels are never removed; returns None when only they remain.
    """
    labels = url.labels
    if len(labels) <= 2:
        return None
    return url.replace(hostname=".".join(labels[1:]))


def clear_query_and_fragment(url: Url) -> Url:
    return url.replace(query=(), fragment=None)


def _pop_path_or_subdomain(url: Url) -> Url:
    return pop_path_segment(url) or drop_subdomain(url) or url


def _step_standard(url: Url) -> Url:
    if url.query:
        return clear_query_and_fragment(url)
    if url.fragment:
        return url.replace(fragment=None)
    return _pop_path_or_subdomain(url)


def _step_root(url: Url) -> Url:
    cleared = clear_query_and_fragment(url)
    if url.segments:
        return cleared.replace(path="/")
    # At "/" with nothing left to drop, the page is unchanged even if it
    # still has a query or fragment.
    return drop_subdomain(cleared) or url


def _step_param(url: Url) -> Url:
    if url.query:
        return url.replace(query=url.query[:-1])
    if url.fragment:
        return url.replace(fragment=None)
    return _pop_path_or_subdomain(url)


def _step_slash_keep(url: Url) -> Url:
    return _pop_path_or_subdomain(url)


_STEPS = {
    Mode.STANDARD: _step_standard,
    Mode.ROOT: _step_root,
    Mode.PARAM: _step_param,
    Mode.SLASH_KEEP: _step_slash_keep,
}


def step(url: Union[Url, str], mode: Union[Mode, str] = Mode.STANDARD) -> Url:
    """
    Compute the next "higher" URL for the given mode.

    Args:
        url: Current location (a Url or an absolute URL string)
        mode: Navigation mode (a Mode or its string value)

    Returns:
        The URL one step up. When nothing is left to trim the input is
        returned unchanged; callers treat that as a no-op, not an error.

    Raises:
        MalformedUrlError: if a string URL can not be parsed
        UnknownModeError: if the mode is not recognised
    """
    if not isinstance(url, Url):
        url = Url.parse(url)
    mode = Mode.parse(mode)

    result = _STEPS[mode](url)
    if result == url:
        logger.debug(f"[{mode.value}] {url} is already at the top")
    else:
        logger.debug(f"[{mode.value}] {url} -> {result}")
    return result
