import uuid
from datetime import datetime, timezone
from pydantic import BaseModel, ConfigDict, Field, field_validator

from crime_intent.db.models.base import now_utc


class CrimeBase(BaseModel):
    title: str = ''
    date: datetime = Field(default_factory=now_utc)
    is_solved: bool = False
    suspect: str = ''

    @field_validator('date')
    @classmethod
    def _ensure_utc(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)


class Crime(CrimeBase):
    """A single crime record.

    Fields are edited in place by the UI (``crime.title = "Burglary"``) and
    validated on assignment. The id is fixed at creation.
    """
    id: uuid.UUID = Field(default_factory=uuid.uuid4, frozen=True)
    model_config = ConfigDict(from_attributes=True, validate_assignment=True)
