"""Shared httpx transport for time-bounded collaborator reads."""

from __future__ import annotations

from typing import Any, Final

import httpx
import structlog

from .errors import CollaboratorTimeoutError, CollaboratorUnavailableError

logger = structlog.get_logger(__name__)


class HttpCollaboratorAdapter:
    """Base adapter issuing JSON GET requests against one collaborator service.

    Every request is bounded by the configured timeout. A 404 response maps to
    an absent record; any other failure raises `CollaboratorUnavailableError`.
    """

    _USER_AGENT: Final[str] = "rental-lifecycle/1.0 (Python/httpx)"

    def __init__(
        self,
        source_name: str,
        base_url: str,
        timeout_seconds: float = 5.0,
        transport: httpx.BaseTransport | None = None,
    ):
        """Initialize collaborator transport.

        Args:
            source_name: Stable collaborator label used in errors and logs.
            base_url: Collaborator base URL.
            timeout_seconds: Per-request timeout in seconds.
            transport: Optional httpx transport override.

        Returns:
            None: Initializer does not return a value.

        Raises:
            ValueError: Raised when required config values are invalid.
        """

        normalized_source_name = source_name.strip()
        normalized_base_url = base_url.strip()
        if not normalized_source_name:
            raise ValueError("source_name must not be blank")
        if not normalized_base_url:
            raise ValueError("base_url must not be blank")
        if timeout_seconds <= 0:
            raise ValueError("timeout_seconds must be > 0")

        self._source_name = normalized_source_name
        self._client = httpx.Client(
            base_url=normalized_base_url.rstrip("/"),
            timeout=httpx.Timeout(timeout_seconds),
            headers={"User-Agent": self._USER_AGENT, "Accept": "application/json"},
            transport=transport,
        )

    def adapter_source_name(self) -> str:
        """Return stable collaborator source label."""

        return self._source_name

    def adapter_close(self) -> None:
        """Release pooled HTTP connections."""

        self._client.close()

    def _adapter_get_json(self, path: str) -> Any | None:
        """Execute one GET request and decode the JSON body.

        Args:
            path: Path relative to the collaborator base URL.

        Returns:
            Any | None: Decoded JSON body, or None when upstream answered 404.

        Raises:
            CollaboratorTimeoutError: Raised when the request exceeded its timeout.
            CollaboratorUnavailableError: Raised for transport failures, error statuses and invalid bodies.
        """

        try:
            response = self._client.get(path)
        except httpx.TimeoutException as error:
            logger.warning("collaborator_timeout", collaborator=self._source_name, path=path)
            raise CollaboratorTimeoutError(
                f"{self._source_name} request timed out",
                collaborator=self._source_name,
            ) from error
        except httpx.HTTPError as error:
            logger.warning("collaborator_transport_failed", collaborator=self._source_name, path=path, error=str(error))
            raise CollaboratorUnavailableError(
                f"{self._source_name} request failed",
                collaborator=self._source_name,
            ) from error

        if response.status_code == httpx.codes.NOT_FOUND:
            return None
        if response.status_code >= 400:
            logger.warning(
                "collaborator_error_status",
                collaborator=self._source_name,
                path=path,
                status_code=response.status_code,
            )
            raise CollaboratorUnavailableError(
                f"{self._source_name} returned HTTP {response.status_code}",
                collaborator=self._source_name,
                error_code=str(response.status_code),
            )

        try:
            return response.json()
        except ValueError as error:
            raise CollaboratorUnavailableError(
                f"{self._source_name} returned a non-JSON body",
                collaborator=self._source_name,
            ) from error

    def _adapter_require_object(self, payload: Any) -> dict[str, Any]:
        """Return payload as a JSON object or raise a contract failure."""

        if not isinstance(payload, dict):
            raise CollaboratorUnavailableError(
                f"{self._source_name} returned an unexpected payload shape",
                collaborator=self._source_name,
            )
        return payload

    def _adapter_parse_identifier(self, value: Any) -> int:
        """Return a JSON integer id or raise a contract failure.

        Booleans and non-integral values are rejected; numeric strings are accepted.
        """

        if isinstance(value, bool) or (isinstance(value, float) and not value.is_integer()):
            value = None
        try:
            return int(value)
        except (TypeError, ValueError) as error:
            raise CollaboratorUnavailableError(
                f"{self._source_name} returned an invalid id",
                collaborator=self._source_name,
            ) from error

    def _adapter_parse_optional_flag(self, value: Any, field_name: str) -> bool | None:
        if value is None or isinstance(value, bool):
            return value
        raise CollaboratorUnavailableError(
            f"{self._source_name} returned a non-boolean {field_name}",
            collaborator=self._source_name,
        )
