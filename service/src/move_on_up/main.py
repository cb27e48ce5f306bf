"""Main FastAPI application serving navigation targets to the extension."""

import logging
import re
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import settings
from .exceptions import MoveOnUpError
from .logging_config import setup_logging
from .models.messages import (
    ActionRequest,
    ChainRequest,
    ChainResponse,
    ErrorMessage,
    ModeInfo,
    StepRequest,
    StepResponse,
)
from .models.navigation import MoveResult
from .models.url import Url
from .navigation import ONE_SHOT_ACTIONS, build_jump_list, mode_for_action, move_up

# Setup logging
setup_logging(level=settings.LOG_LEVEL, debug=settings.DEBUG)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: startup and shutdown."""
    logger.info(f"Starting {settings.PROJECT_NAME}...")
    logger.info(f"Default mode: {settings.DEFAULT_MODE.value}")
    logger.info(f"Max chain steps: {settings.MAX_CHAIN_STEPS}")

    yield

    logger.info("Shutdown complete")


# Create FastAPI app
app = FastAPI(
    title=settings.PROJECT_NAME,
    version="0.1.0",
    lifespan=lifespan,
)

# Only the extension may call us
app.add_middleware(
    CORSMiddleware,
    allow_origin_regex="|".join(
        f"{re.escape(origin)}.*" for origin in settings.ALLOWED_ORIGINS
    ),
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)


@app.exception_handler(MoveOnUpError)
async def move_on_up_error_handler(request: Request, exc: MoveOnUpError):
    """Report bad URLs and modes as client errors."""
    logger.warning(f"Rejected {request.url.path}: {exc.message}")
    error = ErrorMessage(code=exc.code, message=exc.message, detail=exc.detail or None)
    return JSONResponse(status_code=400, content=error.model_dump())


def _to_response(result: MoveResult) -> StepResponse:
    return StepResponse(
        source=result.source.to_string(),
        target=result.target.to_string(),
        mode=result.mode,
        changed=result.changed,
    )


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "ok",
        "service": settings.PROJECT_NAME,
        "default_mode": settings.DEFAULT_MODE.value,
    }


@app.get("/api/v1/modes")
async def list_modes():
    """List navigation modes with their one-shot menu actions."""
    modes = [
        ModeInfo(mode=mode, action_id=action_id, title=title)
        for mode, (action_id, title) in ONE_SHOT_ACTIONS.items()
    ]
    return {
        "default_mode": settings.DEFAULT_MODE.value,
        "modes": [info.model_dump() for info in modes],
    }


@app.post("/api/v1/step", response_model=StepResponse)
async def step_up(request_body: StepRequest):
    """
    Compute one move up.

    Uses the mode from the request when given, otherwise the configured
    default. `changed` is false when the page is already at the top.
    """
    result = move_up(
        request_body.url,
        mode=request_body.mode,
        default_mode=settings.DEFAULT_MODE,
    )
    return _to_response(result)


@app.post("/api/v1/actions/{action_id}", response_model=StepResponse)
async def run_action(action_id: str, request_body: ActionRequest):
    """Run a one-shot menu action (e.g. "once-root") once."""
    mode = mode_for_action(action_id)
    if mode is None:
        raise HTTPException(status_code=404, detail=f"Unknown action: {action_id}")

    return _to_response(move_up(request_body.url, mode=mode))


@app.post("/api/v1/chain", response_model=ChainResponse)
async def navigate_up_candidates(request_body: ChainRequest):
    """
    List every ancestor destination for the "Navigate up" menu.

    Entry ids belong to this response only.
    """
    max_steps = request_body.max_steps
    if max_steps is None:
        max_steps = settings.MAX_CHAIN_STEPS

    source = Url.parse(request_body.url)
    candidates = build_jump_list(source, max_steps=max_steps)
    logger.info(f"Jump list for {source}: {len(candidates)} candidate(s)")

    return ChainResponse(source=source.to_string(), candidates=candidates)
