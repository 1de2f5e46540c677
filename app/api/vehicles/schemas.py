from datetime import date, datetime
from decimal import Decimal
from typing import Annotated, Any, Optional
from uuid import UUID

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from app.models.enums import VehicleStatus

MIN_YEAR = 1900


def max_year() -> int:
    """Newest model year accepted: next calendar year, evaluated on every call."""
    return date.today().year + 1


def _check_year(value: int) -> int:
    if value > max_year():
        raise ValueError(f"Year must be between {MIN_YEAR} and {max_year()}")
    return value


NonEmptyStr = Annotated[str, Field(min_length=1)]
Year = Annotated[int, Field(ge=MIN_YEAR), AfterValidator(_check_year)]
Price = Annotated[Decimal, Field(gt=0, max_digits=12, decimal_places=2)]


class CreateVehicleRequest(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    brand: NonEmptyStr = Field(..., description="Vehicle manufacturer")
    model: NonEmptyStr = Field(..., description="Vehicle model")
    year: Year = Field(..., description="Model year")
    color: NonEmptyStr = Field(..., description="Vehicle color")
    price: Price = Field(..., description="Price of the vehicle")
    status: VehicleStatus = Field(VehicleStatus.available, description="Vehicle status (AVAILABLE/SOLD)")


class UpdateVehicleRequest(BaseModel):
    """Partial update. Only the fields present in the request body are applied."""

    model_config = ConfigDict(use_enum_values=True)

    brand: Optional[NonEmptyStr] = Field(None, description="Vehicle manufacturer")
    model: Optional[NonEmptyStr] = Field(None, description="Vehicle model")
    year: Optional[Year] = Field(None, description="Model year")
    color: Optional[NonEmptyStr] = Field(None, description="Vehicle color")
    price: Optional[Price] = Field(None, description="Price of the vehicle")
    status: Optional[VehicleStatus] = Field(None, description="Vehicle status (AVAILABLE/SOLD)")

    @field_validator("*", mode="before")
    @classmethod
    def _reject_null(cls, value: Any, info) -> Any:
        # Defaults are not validated, so this only fires for an explicit null.
        if value is None:
            raise ValueError(f"{info.field_name} cannot be null")
        return value

    def changes(self) -> dict[str, Any]:
        """The patch: explicitly provided fields only."""
        return self.model_dump(exclude_unset=True)


class VehicleQueryParams(BaseModel):
    status: Optional[VehicleStatus] = Field(None, description="Filter by status")
    brand: Optional[NonEmptyStr] = Field(None, description="Case-insensitive substring of the brand")
    year: Optional[Year] = Field(None, description="Exact model year")

    @field_validator("*", mode="before")
    @classmethod
    def _blank_as_missing(cls, value: Any) -> Any:
        if isinstance(value, str) and value == "":
            return None
        return value


class VehicleResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)

    id: UUID
    brand: str
    model: str
    year: int
    color: str
    price: Decimal
    status: VehicleStatus
    created_at: datetime
    updated_at: datetime


class MessageResponse(BaseModel):
    message: str
