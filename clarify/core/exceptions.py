"""Domain exceptions for Clarify.

Services raise these; the API layer maps them onto HTTP responses.
"""


class ClarifyError(Exception):
    """Base class for all Clarify domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ValidationError(ClarifyError):
    """Caller-correctable input problem. Never retried."""


class NotFoundError(ClarifyError):
    """Requested entity does not exist or is not owned by the caller."""

    def __init__(self, resource: str, resource_id: object) -> None:
        self.resource = resource
        self.resource_id = resource_id
        super().__init__(f"{resource} {resource_id} not found")


class ConfigurationError(ClarifyError):
    """Required configuration (e.g. an API key) is missing."""
