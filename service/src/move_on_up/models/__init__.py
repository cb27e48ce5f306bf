"""Data models for Move On Up."""

from .mode import Mode
from .url import Url
from .navigation import JumpEntry, MoveResult
from .messages import (
    ActionRequest,
    ChainRequest,
    ChainResponse,
    ErrorMessage,
    ModeInfo,
    StepRequest,
    StepResponse,
)

__all__ = [
    "ActionRequest",
    "Mode",
    "Url",
    "JumpEntry",
    "MoveResult",
    "ChainRequest",
    "ChainResponse",
    "ErrorMessage",
    "ModeInfo",
    "StepRequest",
    "StepResponse",
]
