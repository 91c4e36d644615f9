"""Property-service adapter for existence, availability and display data."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any

import httpx

from rental_lifecycle.domain import PropertySummary

from .errors import CollaboratorUnavailableError
from .http_collaborator import HttpCollaboratorAdapter
from .interfaces import PropertyLookupPort


class HttpPropertyLookupAdapter(HttpCollaboratorAdapter, PropertyLookupPort):
    """Adapter for `GET /api/propiedades/{id}` on the property service.

    Listings without an explicit `disponible` flag are treated as available.
    """

    def __init__(
        self,
        base_url: str,
        timeout_seconds: float = 5.0,
        transport: httpx.BaseTransport | None = None,
    ):
        super().__init__(
            source_name="property_service",
            base_url=base_url,
            timeout_seconds=timeout_seconds,
            transport=transport,
        )

    def adapter_property_exists(self, property_id: int) -> bool:
        """Report whether the property service returns a listing with an id."""

        return self.adapter_fetch_property_summary(property_id) is not None

    def adapter_property_is_available(self, property_id: int) -> bool:
        """Report whether the listing exists and is open for rental.

        Args:
            property_id: External property identifier.

        Returns:
            bool: False when the listing is absent or flagged unavailable.

        Raises:
            CollaboratorUnavailableError: Raised when the service cannot answer.
        """

        summary = self.adapter_fetch_property_summary(property_id)
        if summary is None:
            return False
        return summary.available is not False

    def adapter_fetch_property_summary(self, property_id: int) -> PropertySummary | None:
        """Fetch and project one property listing.

        Args:
            property_id: External property identifier.

        Returns:
            PropertySummary | None: Projected listing, or None when absent.

        Raises:
            CollaboratorUnavailableError: Raised when the service cannot answer.
        """

        payload = self._adapter_get_json(f"/api/propiedades/{int(property_id)}")
        if payload is None:
            return None

        property_payload = self._adapter_require_object(payload)
        if property_payload.get("id") is None:
            return None

        return PropertySummary(
            property_id=self._adapter_parse_identifier(property_payload["id"]),
            address=property_payload.get("direccion"),
            monthly_price=self._adapter_parse_price(property_payload.get("precioMensual")),
            title=property_payload.get("titulo"),
            currency=property_payload.get("divisa"),
            available=self._adapter_parse_optional_flag(property_payload.get("disponible"), "disponible"),
        )

    def _adapter_parse_price(self, value: Any) -> Decimal | None:
        if value is None:
            return None
        try:
            return Decimal(str(value))
        except InvalidOperation as error:
            raise CollaboratorUnavailableError(
                f"{self.adapter_source_name()} returned an invalid monthly price",
                collaborator=self.adapter_source_name(),
            ) from error
