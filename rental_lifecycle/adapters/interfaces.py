"""Typed interfaces for external collaborator lookups."""

from typing import Protocol

from rental_lifecycle.domain import PropertySummary, UserSummary


class IdentityLookupPort(Protocol):
    """Port definition for identity-service user lookups."""

    def adapter_source_name(self) -> str:
        """Return collaborator source identifier for diagnostics.

        Returns:
            str: Human-readable collaborator identifier.
        """

    def adapter_user_exists(self, user_id: int) -> bool:
        """Report whether the user exists upstream.

        Args:
            user_id: External user identifier.

        Returns:
            bool: True when the identity service knows the user.

        Raises:
            CollaboratorUnavailableError: Raised when the service cannot answer.
        """

    def adapter_fetch_user_summary(self, user_id: int) -> UserSummary | None:
        """Fetch display data for one user.

        Args:
            user_id: External user identifier.

        Returns:
            UserSummary | None: User projection, or None when absent.

        Raises:
            CollaboratorUnavailableError: Raised when the service cannot answer.
        """


class PropertyLookupPort(Protocol):
    """Port definition for property-service listing lookups."""

    def adapter_source_name(self) -> str:
        """Return collaborator source identifier for diagnostics."""

    def adapter_property_exists(self, property_id: int) -> bool:
        """Report whether the property exists upstream.

        Args:
            property_id: External property identifier.

        Returns:
            bool: True when the property service knows the property.

        Raises:
            CollaboratorUnavailableError: Raised when the service cannot answer.
        """

    def adapter_property_is_available(self, property_id: int) -> bool:
        """Report whether the property can currently be rented.

        Args:
            property_id: External property identifier.

        Returns:
            bool: True when the property exists and is available.

        Raises:
            CollaboratorUnavailableError: Raised when the service cannot answer.
        """

    def adapter_fetch_property_summary(self, property_id: int) -> PropertySummary | None:
        """Fetch display data for one property.

        Args:
            property_id: External property identifier.

        Returns:
            PropertySummary | None: Property projection, or None when absent.

        Raises:
            CollaboratorUnavailableError: Raised when the service cannot answer.
        """


class DocumentLookupPort(Protocol):
    """Port definition for document-service approval checks."""

    def adapter_source_name(self) -> str:
        """Return collaborator source identifier for diagnostics."""

    def adapter_user_has_approved_documents(self, user_id: int) -> bool:
        """Report whether all required user documents are approved.

        Args:
            user_id: External user identifier.

        Returns:
            bool: True when the document service confirms approval.

        Raises:
            CollaboratorUnavailableError: Raised when the service cannot answer.
        """
