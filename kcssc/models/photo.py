from sqlalchemy import Column, String, DateTime, Boolean, Integer, Text, Date
from datetime import datetime
from kcssc.core.database import Base


class Photo(Base):
    __tablename__ = "photos"

    id = Column(Integer, primary_key=True, autoincrement=True)

    photo = Column(String(500), nullable=False)
    description = Column(Text, nullable=True)

    # free-text label, matched by name only
    event = Column(String(255), nullable=False, index=True)
    date = Column(Date, nullable=False, index=True)
    favourite = Column(Boolean, default=False, nullable=False, index=True)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
