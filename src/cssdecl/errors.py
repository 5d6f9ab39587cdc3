"""Exception types raised outside the (non-raising) parsing core."""


class CSSDeclError(Exception):
    """Base class for cssdecl errors."""


class UnknownPlatformError(CSSDeclError):
    """Raised when a color provider is requested for an unknown platform."""

    def __init__(self, platform: str, known: list[str]) -> None:
        self.platform = platform
        self.known = known
        super().__init__(
            f"Unknown platform {platform!r}; expected one of: " + ", ".join(known)
        )


class InvalidLogLevelError(CSSDeclError):
    """Raised when a configured log level is not a ``logging`` level name."""

    def __init__(self, level: str) -> None:
        self.level = level
        super().__init__(f"Unknown log level {level!r}")
