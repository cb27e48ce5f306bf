"""Candidate chain: every Standard step from a URL up to its root-most form."""

import logging
from typing import List, Union

from .engine import step
from .models.mode import Mode
from .models.url import Url

logger = logging.getLogger(__name__)

DEFAULT_MAX_STEPS = 50


def build_chain(url: Union[Url, str], max_steps: int = DEFAULT_MAX_STEPS) -> List[Url]:
    """
    Build the ordered list of ancestor URLs, deepest first, root-most last.

    The input URL itself is never part of the chain. Construction stops when
    a step leaves the URL unchanged, when a step would repeat an entry, or
    after `max_steps` steps, whichever comes first.

    Raises:
        MalformedUrlError: if a string URL can not be parsed
        ValueError: if max_steps is negative
    """
    if max_steps < 0:
        raise ValueError(f"max_steps must be >= 0, got {max_steps}")
    if not isinstance(url, Url):
        url = Url.parse(url)

    chain: List[Url] = []
    seen = {url}
    current = url
    for _ in range(max_steps):
        following = step(current, Mode.STANDARD)
        if following in seen:
            break
        chain.append(following)
        seen.add(following)
        current = following
    else:
        if max_steps:
            logger.warning(f"Chain for {url} stopped after {max_steps} steps")

    logger.debug(f"Built chain of {len(chain)} candidate(s) for {url}")
    return chain
