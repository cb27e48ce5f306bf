"""Results handed back to the host after a navigation computation."""

from pydantic import BaseModel, ConfigDict, Field

from .mode import Mode
from .url import Url


class MoveResult(BaseModel):
    """Outcome of a single move up."""

    model_config = ConfigDict(frozen=True)

    source: Url = Field(..., description="URL the step started from")
    target: Url = Field(..., description="URL one step up (may equal source)")
    mode: Mode = Field(..., description="Mode that was applied")
    changed: bool = Field(..., description="False when nothing was left to trim")


class JumpEntry(BaseModel):
    """One direct-navigation target of the jump list."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Identifier scoped to a single render")
    title: str = Field(..., description="Display label (hostname + path)")
    url: str = Field(..., description="Full target URL")
