# schemas/adminSchema/executiveSchema.py

from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field, field_validator

from utils.utils import ensure_utc


class ExecutiveWrite(BaseModel):
    """Caller input. graduation_year and is_alumni are derived from grade."""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(min_length=1, max_length=255)
    grade: int = Field(ge=9, le=12)
    role: str = Field(min_length=1, max_length=255)
    image_url: str = ""


class ExecutiveRecord(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    grade: int
    role: str
    image_url: str = ""
    graduation_year: int
    is_alumni: bool
    created_at: datetime

    @field_validator("created_at")
    @classmethod
    def _created_at_utc(cls, value):
        return ensure_utc(value)
