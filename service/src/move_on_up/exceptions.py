"""Custom exception classes for Move On Up."""


class MoveOnUpError(Exception):
    """Base exception for Move On Up errors."""

    def __init__(self, message: str, code: str = "internal", detail: str = ""):
        self.message = message
        self.code = code
        self.detail = detail
        super().__init__(message)


class MalformedUrlError(MoveOnUpError):
    """The input is not a parsable absolute URL."""

    def __init__(self, url: object, reason: str = "not an absolute URL"):
        self.url = url
        super().__init__(
            f"Malformed URL: {url!r} ({reason})",
            code="malformed_url",
            detail=reason,
        )


class UnknownModeError(MoveOnUpError):
    """Navigation mode is not one of the supported modes."""

    def __init__(self, mode: object, valid_modes: tuple = ()):
        self.mode = mode
        super().__init__(
            f"Unknown navigation mode: {mode!r}",
            code="unknown_mode",
            detail=f"Valid modes: {', '.join(valid_modes)}" if valid_modes else "",
        )
