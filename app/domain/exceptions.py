from __future__ import annotations


class DatabaseStartupError(RuntimeError):
    """Raised when the database is unconfigured or unreachable during startup."""


class CompletionRequestError(Exception):
    """Raised when a completion (plain or comparison) cannot be produced."""

    def __init__(self, message: str = "Failed to process request"):
        super().__init__(message)
        self.message = message


class ResultsFetchError(Exception):
    """Raised when stored comparison results cannot be read back."""

    def __init__(self, details: str):
        super().__init__(details)
        self.message = "Failed to fetch data"
        self.details = details
