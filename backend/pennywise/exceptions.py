"""
Domain exceptions.
"""


class PennywiseError(Exception):
    """Base class for application errors."""


class DataUnavailable(PennywiseError):
    """The persistent store could not be reached or a query failed."""


class ValidationError(PennywiseError):
    """Input that passed schema validation but is still not acceptable."""


class ProviderFailure(PennywiseError):
    """A text-completion or mail transport call failed."""

    def __init__(self, provider: str, message: str):
        super().__init__(f"{provider}: {message}")
        self.provider = provider
