"""Host-facing navigation helpers.

These wrap the engine for an extension shell: resolving which mode applies
to a move, and turning the candidate chain into menu entries. Nothing here
holds state between calls; menu identifiers are produced per render and are
only meaningful alongside the list they came with.
"""

import logging
from typing import Dict, List, Optional, Tuple, Union

from .chain import DEFAULT_MAX_STEPS, build_chain
from .engine import step
from .models.mode import Mode
from .models.navigation import JumpEntry, MoveResult
from .models.url import Url
from .utils.url_utils import format_display_label

logger = logging.getLogger(__name__)

# One-shot menu actions: (action id, title) per mode
ONE_SHOT_ACTIONS: Dict[Mode, Tuple[str, str]] = {
    Mode.STANDARD: ("once-standard", "Move up - standard"),
    Mode.ROOT: ("once-root", "Go to root"),
    Mode.PARAM: ("once-param", "Move up - remove last param"),
    Mode.SLASH_KEEP: ("once-slash", "Move up - keep params/hash"),
}

JUMP_ID_PREFIX = "jump"


def resolve_mode(
    override: Optional[Union[Mode, str]] = None,
    default: Union[Mode, str] = Mode.STANDARD,
) -> Mode:
    """Pick the effective mode: an explicit override wins over the default."""
    if override is not None:
        return Mode.parse(override)
    return Mode.parse(default)


def mode_for_action(action_id: str) -> Optional[Mode]:
    """Map a one-shot menu action id back to its mode."""
    for mode, (candidate_id, _title) in ONE_SHOT_ACTIONS.items():
        if candidate_id == action_id:
            return mode
    return None


def move_up(
    url: Union[Url, str],
    mode: Optional[Union[Mode, str]] = None,
    default_mode: Union[Mode, str] = Mode.STANDARD,
) -> MoveResult:
    """
    Perform one move up without touching any stored preference.

    Args:
        url: Current location
        mode: One-shot override; `default_mode` is used when omitted
        default_mode: The host's configured mode

    Returns:
        MoveResult whose `changed` flag tells the host whether to navigate.
    """
    source = url if isinstance(url, Url) else Url.parse(url)
    effective = resolve_mode(mode, default_mode)
    target = step(source, effective)
    changed = target != source

    if changed:
        logger.info(f"Move up ({effective.value}): {source} -> {target}")
    else:
        logger.info(f"Move up ({effective.value}): {source} has nothing left to trim")

    return MoveResult(source=source, target=target, mode=effective, changed=changed)


def build_jump_list(
    url: Union[Url, str], max_steps: int = DEFAULT_MAX_STEPS
) -> List[JumpEntry]:
    """
    Build the jump list shown under "Navigate up".

    Entries follow the candidate chain order (deepest first). Ids are
    "jump-0", "jump-1", ... and are only valid for this list.
    """
    return [
        JumpEntry(
            id=f"{JUMP_ID_PREFIX}-{index}",
            title=format_display_label(candidate),
            url=candidate.to_string(),
        )
        for index, candidate in enumerate(build_chain(url, max_steps=max_steps))
    ]
