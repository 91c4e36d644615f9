"""Typed domain records shared across runtime layers.

Records are immutable snapshots; state changes always produce a new record
returned by the owning store.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from uuid import UUID


@dataclass(frozen=True)
class HealthStatus:
    """Health response contract used by health-check surfaces.

    Attributes:
        status: Overall status text for service health.
        detail: Additional message suitable for operational diagnostics.
    """

    status: str
    detail: str


@dataclass(frozen=True)
class ApplicationRecord:
    """Persisted rental application linking a prospective tenant to a property.

    Attributes:
        application_id: Unique application identifier.
        user_id: External identity-service user identifier.
        property_id: External property-service property identifier.
        status: Application status (`PENDING`, `ACCEPTED`, `REJECTED`).
        created_at_utc: Creation timestamp in UTC.
    """

    application_id: UUID
    user_id: int
    property_id: int
    status: str
    created_at_utc: datetime


@dataclass(frozen=True)
class RegistryRecord:
    """Persisted tenancy registry created from an accepted application.

    Attributes:
        registry_id: Unique registry identifier.
        application_id: Source application identifier.
        start_date: Tenancy start date.
        end_date: Optional tenancy end date.
        monthly_amount: Agreed monthly rent amount.
        active: Whether the tenancy is currently active.
        created_at_utc: Creation timestamp in UTC.
    """

    registry_id: UUID
    application_id: UUID
    start_date: date
    end_date: date | None
    monthly_amount: Decimal
    active: bool
    created_at_utc: datetime


@dataclass(frozen=True)
class UserSummary:
    """Display projection of an identity-service user.

    Attributes:
        user_id: External user identifier.
        display_name: Optional full display name.
        email: Optional email address.
        role: Optional role label reported by the identity service.
    """

    user_id: int
    display_name: str | None
    email: str | None
    role: str | None = None


@dataclass(frozen=True)
class PropertySummary:
    """Display projection of a property-service listing.

    Attributes:
        property_id: External property identifier.
        address: Optional street address.
        monthly_price: Optional listed monthly price.
        title: Optional listing title.
        currency: Optional price currency code.
        available: Availability flag when the property service reports one.
    """

    property_id: int
    address: str | None
    monthly_price: Decimal | None
    title: str | None = None
    currency: str | None = None
    available: bool | None = None
