"""Logging configuration for Move On Up."""

import logging
import sys

# Modules that log once per computed step
STEP_TRACE_LOGGERS = ("move_on_up.engine", "move_on_up.chain")


def setup_logging(level: str = "INFO", debug: bool = False) -> None:
    """
    Configure logging for the application.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        debug: Enable debug mode with verbose formatting and per-step tracing
    """
    log_level = logging.DEBUG if debug else getattr(logging, level.upper(), logging.INFO)

    if debug:
        log_format = (
            "%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s"
        )
    else:
        log_format = "%(asctime)s | %(levelname)-8s | %(message)s"

    logging.basicConfig(
        level=log_level,
        format=log_format,
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    logging.getLogger("move_on_up").setLevel(log_level)

    # Every move and jump list walks the engine several times; its trace is
    # only wanted while debugging. The cap warning from the chain still shows.
    for name in STEP_TRACE_LOGGERS:
        logging.getLogger(name).setLevel(
            logging.DEBUG if debug else max(log_level, logging.INFO)
        )

    logging.getLogger("uvicorn").setLevel(log_level)
    logging.getLogger("uvicorn.access").setLevel(
        logging.DEBUG if debug else logging.WARNING
    )
    logging.getLogger("uvicorn.error").setLevel(log_level)

    # The health probe in the CLI goes through httpx
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
