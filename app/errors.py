# app/errors.py


class TypingTestError(Exception):
    """Base class for every error raised by the typing test core."""


class SourceUnavailable(TypingTestError):
    """The word resource could not be read."""

    def __init__(self, path, reason: str = ""):
        self.path = str(path)
        self.reason = reason
        msg = f"Word list unavailable: {self.path}"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg)


class NotLoaded(TypingTestError, RuntimeError):
    """Sampling was requested before the word pool was loaded."""


class InsufficientPool(TypingTestError):
    def __init__(self, requested: int, available: int):
        self.requested = requested
        self.available = available
        super().__init__(
            f"Requested {requested} words but the pool only holds {available}."
        )


class EmptyInput(TypingTestError, ValueError):
    """Stats were requested for an empty target or typed word list."""
