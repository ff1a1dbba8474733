"""Exception types shared by validation, extractors and the orchestration layer."""

from __future__ import annotations


class InvalidInputError(ValueError):
    """Raised when a requested URL is missing or malformed.

    Always raised before any network access and fatal for the request.
    """

    def __init__(self, message: str = "Invalid input"):
        self.message = message
        super().__init__(self.message)


class ExtractorError(RuntimeError):
    """Raised when one platform's fetch, parse or API call fails.

    The pipeline catches it, logs it and leaves the platform out of the
    aggregate.
    """

    def __init__(self, platform: str, message: str):
        self.platform = platform
        self.message = message
        super().__init__(f"{platform}: {message}")
