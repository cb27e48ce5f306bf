"""HTTP request and response models for the extension."""

from typing import List, Literal, Optional
from pydantic import BaseModel, Field

from .mode import Mode
from .navigation import JumpEntry


class StepRequest(BaseModel):
    """Single move-up request from extension."""

    url: str = Field(..., description="Current page URL")
    mode: Optional[str] = Field(
        None, description="One-shot mode override; the configured default if omitted"
    )


class StepResponse(BaseModel):
    """Target of a single move up."""

    source: str = Field(..., description="URL the step started from")
    target: str = Field(..., description="URL to navigate to")
    mode: Mode = Field(..., description="Mode that was applied")
    changed: bool = Field(..., description="False when the page is already at the top")


class ActionRequest(BaseModel):
    """One-shot menu action request."""

    url: str = Field(..., description="Current page URL")


class ChainRequest(BaseModel):
    """Jump list request from extension."""

    url: str = Field(..., description="Current page URL")
    max_steps: Optional[int] = Field(
        None, ge=0, description="Step cap; the configured default if omitted"
    )


class ChainResponse(BaseModel):
    """Ancestor destinations, deepest first."""

    source: str = Field(..., description="URL the chain was built from")
    candidates: List[JumpEntry] = Field(
        default_factory=list, description="Jump list entries, root-most last"
    )


class ModeInfo(BaseModel):
    """A navigation mode with its one-shot menu action."""

    mode: Mode
    action_id: str = Field(..., description="Menu item identifier")
    title: str = Field(..., description="Menu item title")


class ErrorMessage(BaseModel):
    """Error message to extension."""

    type: Literal["error"] = "error"
    code: str = Field(..., description="Error code")
    message: str = Field(..., description="Human-readable error message")
    detail: Optional[str] = Field(None, description="Additional error details")
