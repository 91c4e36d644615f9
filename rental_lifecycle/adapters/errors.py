"""Project-native typed exceptions for external collaborator failures."""

from __future__ import annotations


class CollaboratorError(Exception):
    """Base exception for adapter-level collaborator failures.

    Attributes:
        collaborator: Source label of the failing collaborator.
        error_code: Optional upstream status or failure code.
    """

    def __init__(self, message: str, collaborator: str, error_code: str | None = None):
        super().__init__(message)
        self.collaborator = collaborator
        self.error_code = error_code


class CollaboratorUnavailableError(CollaboratorError, ConnectionError):
    """Collaborator could not be reached or answered outside its contract."""


class CollaboratorTimeoutError(CollaboratorUnavailableError, TimeoutError):
    """Collaborator call exceeded its bounded timeout."""
