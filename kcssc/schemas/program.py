from pydantic import BaseModel, Field
from typing import List, Optional
import datetime as dt

from kcssc.services.schedule import Recurrence


class ProgramBase(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    category: str = Field(..., min_length=1, max_length=100)
    icon: str = Field(..., min_length=1, max_length=50, description="Icon name, e.g. Palette, Heart, Music")
    schedule: str = Field(..., min_length=1, max_length=255, description='e.g. "Tuesdays, 10:00 AM - 12:00 PM"')
    age_group: str = Field(..., min_length=1, max_length=50, alias="ageGroup")
    description: str = Field(..., min_length=1)
    spots: str = ""
    image_url: Optional[str] = Field(None, alias="imageUrl")

    class Config:
        populate_by_name = True


class ProgramCreate(ProgramBase):
    pass


class ProgramUpdate(BaseModel):
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    category: Optional[str] = Field(None, min_length=1, max_length=100)
    icon: Optional[str] = Field(None, min_length=1, max_length=50)
    schedule: Optional[str] = Field(None, min_length=1, max_length=255)
    age_group: Optional[str] = Field(None, min_length=1, max_length=50, alias="ageGroup")
    description: Optional[str] = None
    spots: Optional[str] = None
    image_url: Optional[str] = Field(None, alias="imageUrl")

    class Config:
        populate_by_name = True


class ProgramResponse(BaseModel):
    id: int
    title: str
    category: str
    icon: str
    schedule: str
    age_group: str = Field(..., alias="ageGroup")
    description: str
    spots: str = ""
    image_url: Optional[str] = Field(None, alias="imageUrl")
    schedule_days: Optional[List[int]] = Field(None, alias="scheduleDays", description="Weekdays the program meets on, Monday=0")
    schedule_start: Optional[dt.time] = Field(None, alias="scheduleStart")
    schedule_end: Optional[dt.time] = Field(None, alias="scheduleEnd")

    class Config:
        populate_by_name = True

    @property
    def recurrence(self) -> Optional[Recurrence]:
        """None when the response carries only the schedule text."""
        if self.schedule_days is None:
            return None
        return Recurrence(frozenset(self.schedule_days), self.schedule_start, self.schedule_end)


def recurrence_fields(recurrence: Recurrence) -> dict:
    return {
        "schedule_days": sorted(recurrence.weekdays),
        "schedule_start": recurrence.start,
        "schedule_end": recurrence.end,
    }


class ProgramFilters(BaseModel):
    category: Optional[str] = None
    age_group: Optional[str] = Field(None, alias="ageGroup")

    class Config:
        populate_by_name = True

    def to_query_params(self) -> dict:
        params = {}
        if self.category:
            params["category"] = self.category
        if self.age_group:
            params["ageGroup"] = self.age_group
        return params

    def matches(self, program: ProgramResponse) -> bool:
        if self.category and program.category != self.category:
            return False
        if self.age_group and program.age_group != self.age_group:
            return False
        return True
