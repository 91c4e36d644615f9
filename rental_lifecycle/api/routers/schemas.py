"""Request body models for lifecycle endpoints."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class ApplicationCreateRequest(BaseModel):
    """Body of `POST /applications`."""

    model_config = ConfigDict(extra="forbid")

    user_id: int = Field(gt=0)
    property_id: int = Field(gt=0)


class RegistryCreateRequest(BaseModel):
    """Body of `POST /registries`.

    Attributes:
        application_id: Accepted application the registry is created from.
        start_date: Tenancy start date.
        end_date: Optional tenancy end date, on or after `start_date`.
        monthly_amount: Monthly rent amount; sign is validated by the lifecycle layer.
    """

    model_config = ConfigDict(extra="forbid")

    application_id: UUID
    start_date: date
    end_date: date | None = None
    monthly_amount: Decimal
