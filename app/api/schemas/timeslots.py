from datetime import date

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from app.services.slot_service import parse_booking_date


class TimeslotsRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    booking_date: date = Field(alias="date")
    service_ids: list[str] = Field(default_factory=list, alias="serviceIds")
    # Entries for ids missing from serviceIds are ignored
    service_quantities: dict[str, int] = Field(default_factory=dict, alias="serviceQuantities")

    @field_validator("booking_date", mode="before")
    @classmethod
    def _parse_date(cls, value: object) -> date:
        if not isinstance(value, str):
            raise ValueError("date must be a string in YYYY-MM-DD format")
        return parse_booking_date(value)

    @model_validator(mode="after")
    def _positive_quantities(self) -> "TimeslotsRequest":
        requested = set(self.service_ids)
        bad = sorted(k for k, q in self.service_quantities.items() if k in requested and q < 1)
        if bad:
            raise ValueError(f"quantities must be at least 1 (got {', '.join(bad)})")
        return self


class TimeslotOut(BaseModel):
    time: str  # HH:MM
    available: bool


class TimeslotsResponse(BaseModel):
    timeslots: list[TimeslotOut]


class ErrorResponse(BaseModel):
    error: str
