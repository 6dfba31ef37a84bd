class ExtractionError(Exception):
    """Raised when food item extraction fails."""


class ExtractionNetworkError(ExtractionError):
    """Raised when the AI provider call fails due to network/infrastructure issues."""


class ExtractionResponseError(ExtractionError):
    """Raised when the AI provider returns something that cannot be used."""

    def __init__(self, message: str, reason: str) -> None:
        super().__init__(message)
        self.reason = reason
