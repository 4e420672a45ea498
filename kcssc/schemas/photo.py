from pydantic import BaseModel, Field, field_validator
from typing import Optional
import datetime as dt

from kcssc.schemas.event import coerce_date


class PhotoCreate(BaseModel):
    photo: str = Field(..., min_length=1, max_length=500, description="URL or path of the image")
    description: Optional[str] = None
    event: str = Field(..., min_length=1, max_length=255, description="Event name label")
    date: dt.date
    favourite: bool = False

    @field_validator("date", mode="before")
    @classmethod
    def parse_date(cls, v):
        return coerce_date(v)


class PhotoUpdate(BaseModel):
    photo: Optional[str] = Field(None, min_length=1, max_length=500)
    description: Optional[str] = None
    event: Optional[str] = Field(None, min_length=1, max_length=255)
    date: Optional[dt.date] = None
    favourite: Optional[bool] = None

    @field_validator("date", mode="before")
    @classmethod
    def parse_date(cls, v):
        return coerce_date(v)


class PhotoResponse(BaseModel):
    """date is ISO "YYYY-MM-DD"; favourite photos feed the home page carousel."""
    id: int
    photo: str
    description: Optional[str] = None
    event: str
    date: str
    favourite: bool = False


class PhotoFilters(BaseModel):
    favourite: Optional[bool] = None
    event: Optional[str] = None
    year: Optional[int] = None

    def to_query_params(self) -> dict:
        params = {}
        if self.favourite is not None:
            params["favourite"] = "true" if self.favourite else "false"
        if self.event:
            params["event"] = self.event
        if self.year is not None:
            params["year"] = str(self.year)
        return params

    def matches(self, photo: PhotoResponse) -> bool:
        if self.favourite is not None and photo.favourite != self.favourite:
            return False
        if self.event and photo.event != self.event:
            return False
        if self.year is not None and not photo.date.startswith(f"{self.year:04d}-"):
            return False
        return True
