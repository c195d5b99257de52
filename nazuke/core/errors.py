"""Exception types shared across nazuke."""


class NazukeError(Exception):
    """Base class for nazuke errors."""


class InvalidGenderError(NazukeError, ValueError):
    """Raised when a name is composed without a supported gender."""

    def __init__(self, gender: object):
        self.gender = gender
        super().__init__(
            f"Invalid gender: {gender!r}. Expected one of: male, female"
        )


class TableLoadError(NazukeError):
    """Raised when a name table is missing, malformed, or empty."""

    def __init__(self, path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load name table {path}: {reason}")
