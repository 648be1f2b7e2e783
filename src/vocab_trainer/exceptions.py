"""Custom exception hierarchy for the vocab trainer client."""


class VocabTrainerError(Exception):
    """Base exception for all vocab trainer errors."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        """Initialize exception with message and optional HTTP status code."""
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class VocabStoreError(VocabTrainerError):
    """The vocab store could not be reached or answered with an error."""

    def __init__(
        self, operation: str, reason: str, status_code: int | None = None
    ) -> None:
        """Initialize with the failed store operation and the reason."""
        self.operation = operation
        self.reason = reason
        super().__init__(f"Vocab store {operation} failed: {reason}", status_code=status_code)
