from pydantic import BaseModel, Field, field_validator
from typing import Optional
import datetime as dt

from kcssc.services.formatting import parse_display_date, parse_time, parse_time_range


def coerce_date(value):
    if value is None or isinstance(value, dt.date):
        return value
    return parse_display_date(str(value))


class EventBase(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    date: dt.date
    time: str = Field(..., min_length=1, description='"10:00 AM", "14:00" or "10:00 AM - 12:00 PM"')
    end_time: Optional[str] = Field(None, alias="endTime")
    location: str = Field(..., min_length=1, max_length=255)
    category: str = Field(..., min_length=1, max_length=100)
    description: str = Field(..., min_length=1)
    featured: bool = False
    image_url: Optional[str] = Field(None, alias="imageUrl")

    class Config:
        populate_by_name = True

    @field_validator("date", mode="before")
    @classmethod
    def parse_date(cls, v):
        return coerce_date(v)

    @field_validator("time")
    @classmethod
    def check_time(cls, v: str) -> str:
        parse_time_range(v)
        return v.strip()

    @field_validator("end_time")
    @classmethod
    def check_end_time(cls, v: Optional[str]) -> Optional[str]:
        if v is None or not v.strip():
            return None
        parse_time(v)
        return v.strip()


class EventCreate(EventBase):
    pass


class EventUpdate(BaseModel):
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    date: Optional[dt.date] = None
    time: Optional[str] = None
    end_time: Optional[str] = Field(None, alias="endTime")
    location: Optional[str] = Field(None, min_length=1, max_length=255)
    category: Optional[str] = Field(None, min_length=1, max_length=100)
    description: Optional[str] = None
    featured: Optional[bool] = None
    image_url: Optional[str] = Field(None, alias="imageUrl")

    class Config:
        populate_by_name = True

    @field_validator("date", mode="before")
    @classmethod
    def parse_date(cls, v):
        return coerce_date(v)

    @field_validator("time")
    @classmethod
    def check_time(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        parse_time_range(v)
        return v.strip()

    @field_validator("end_time")
    @classmethod
    def check_end_time(cls, v: Optional[str]) -> Optional[str]:
        if v is None or not v.strip():
            return v
        parse_time(v)
        return v.strip()


class EventResponse(BaseModel):
    """Display-shaped event: date "January 25, 2025", time "10:00 AM - 12:00 PM"."""
    id: int
    title: str
    date: str
    time: str
    location: str
    category: str
    description: str
    featured: bool = False
    image_url: Optional[str] = Field(None, alias="imageUrl")

    class Config:
        populate_by_name = True


class EventFilters(BaseModel):
    category: Optional[str] = None
    start_date: Optional[dt.date] = Field(None, alias="startDate")
    end_date: Optional[dt.date] = Field(None, alias="endDate")
    featured: Optional[bool] = None

    class Config:
        populate_by_name = True

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def parse_bounds(cls, v):
        return coerce_date(v)

    def to_query_params(self) -> dict:
        params = {}
        if self.category:
            params["category"] = self.category
        if self.start_date:
            params["startDate"] = self.start_date.isoformat()
        if self.end_date:
            params["endDate"] = self.end_date.isoformat()
        if self.featured is not None:
            params["featured"] = "true" if self.featured else "false"
        return params

    def matches(self, event: EventResponse) -> bool:
        if self.category and event.category != self.category:
            return False
        if self.featured is not None and event.featured != self.featured:
            return False
        if self.start_date or self.end_date:
            try:
                event_date = parse_display_date(event.date)
            except ValueError:
                return False
            if self.start_date and event_date < self.start_date:
                return False
            if self.end_date and event_date > self.end_date:
                return False
        return True
