"""Data schemas for instants and Pacific Time results."""
from datetime import datetime
from typing import Literal
from pydantic import BaseModel, Field


class UTCFields(BaseModel):
    """The UTC calendar fields the daylight decision is made from."""
    month: int = Field(ge=1, le=12, description="1=January..12=December")
    day: int = Field(ge=1, le=31, description="Day of the month")
    weekday: int = Field(ge=0, le=6, description="0=Sunday..6=Saturday")
    hour: int = Field(ge=0, le=23)

    model_config = {"frozen": True}


class PacificTimeInfo(BaseModel):
    """Pacific Time status of a single instant."""
    is_daylight: bool
    offset_minutes: Literal[480, 420] = Field(
        description="Minutes behind UTC (getTimezoneOffset convention)"
    )
    utc_offset: Literal["-08:00", "-07:00"]
    abbreviation: Literal["PST", "PDT"]
    local_time: datetime

    model_config = {"frozen": True}
