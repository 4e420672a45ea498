from sqlalchemy import Column, String, DateTime, Integer, Text, Time
from datetime import datetime
from kcssc.core.database import Base
from kcssc.services.schedule import Recurrence


class Program(Base):
    __tablename__ = "programs"

    id = Column(Integer, primary_key=True, autoincrement=True)

    title = Column(String(255), nullable=False)
    category = Column(String(100), nullable=False, index=True)
    icon = Column(String(50), nullable=False)

    schedule = Column(String(255), nullable=False)
    schedule_days = Column(String(20), nullable=True)
    schedule_start = Column(Time, nullable=True)
    schedule_end = Column(Time, nullable=True)

    age_group = Column(String(50), nullable=False, index=True)
    description = Column(Text, nullable=False)
    spots = Column(String(100), nullable=True)
    image_url = Column(String(500), nullable=True)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    @property
    def recurrence(self) -> Recurrence:
        return Recurrence.from_storage(self.schedule_days, self.schedule_start, self.schedule_end)

    def set_schedule(self, text: str) -> None:
        """Stores the display text and the recurrence parsed from it."""
        recurrence = Recurrence.parse(text)
        self.schedule = text
        self.schedule_days = recurrence.storage_days() or None
        self.schedule_start = recurrence.start
        self.schedule_end = recurrence.end
