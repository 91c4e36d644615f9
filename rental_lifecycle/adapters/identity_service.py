"""Identity-service adapter for user existence checks and display data."""

from __future__ import annotations

import httpx

from rental_lifecycle.domain import UserSummary

from .http_collaborator import HttpCollaboratorAdapter
from .interfaces import IdentityLookupPort


class HttpIdentityLookupAdapter(HttpCollaboratorAdapter, IdentityLookupPort):
    """Adapter for `GET /api/usuarios/{id}` on the identity service."""

    def __init__(
        self,
        base_url: str,
        timeout_seconds: float = 5.0,
        transport: httpx.BaseTransport | None = None,
    ):
        super().__init__(
            source_name="identity_service",
            base_url=base_url,
            timeout_seconds=timeout_seconds,
            transport=transport,
        )

    def adapter_user_exists(self, user_id: int) -> bool:
        """Report whether the identity service returns a user with an id.

        Args:
            user_id: External user identifier.

        Returns:
            bool: True when a user record with id is returned.

        Raises:
            CollaboratorUnavailableError: Raised when the service cannot answer.
        """

        return self.adapter_fetch_user_summary(user_id) is not None

    def adapter_fetch_user_summary(self, user_id: int) -> UserSummary | None:
        """Fetch and project one user record.

        Args:
            user_id: External user identifier.

        Returns:
            UserSummary | None: Projected user, or None when absent.

        Raises:
            CollaboratorUnavailableError: Raised when the service cannot answer.
        """

        payload = self._adapter_get_json(f"/api/usuarios/{int(user_id)}")
        if payload is None:
            return None

        user_payload = self._adapter_require_object(payload)
        if user_payload.get("id") is None:
            return None

        role_value = user_payload.get("rol")
        return UserSummary(
            user_id=self._adapter_parse_identifier(user_payload["id"]),
            display_name=user_payload.get("nombre"),
            email=user_payload.get("email"),
            role=None if role_value is None else str(role_value).strip().upper(),
        )
