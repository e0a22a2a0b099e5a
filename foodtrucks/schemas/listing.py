from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator


class SodaTruckRecord(BaseModel):
    """One row of the mobile food schedule dataset, as served by the open-data API."""

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True, frozen=True)

    start24: Optional[str] = Field(None, description="Opening time, 24-hour H:MM")
    end24: Optional[str] = Field(None, description="Closing time, 24-hour H:MM")
    dayofweekstr: Optional[str] = Field(None, description="Full English day name")
    applicant: Optional[str] = Field(None, description="Permit holder / vendor name")
    location: Optional[str] = None

    @field_validator("start24", "end24", "dayofweekstr", "applicant", "location", mode="before")
    @classmethod
    def bool_as_str(cls, v: Any) -> Any:
        # JSON true/false read as "true"/"false", like any other scalar
        if isinstance(v, bool):
            return "true" if v else "false"
        return v


# null entries are allowed in the array and dropped by the decoder
SODA_PAYLOAD = TypeAdapter(list[Optional[SodaTruckRecord]])
