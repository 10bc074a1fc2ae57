"""
Trade finder exceptions.
"""


class TradeFinderError(ValueError):
    """Base exception for invalid trade finder input."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class InvalidRosterError(TradeFinderError):
    """Raised when a roster is missing or malformed."""

    def __init__(self, message: str, roster_id: int | None = None):
        self.roster_id = roster_id
        super().__init__(message)
