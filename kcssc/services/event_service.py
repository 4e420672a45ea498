"""
Event queries, writes and display formatting.
"""
import logging
from typing import List, Optional
from sqlalchemy.orm import Session

from kcssc.models.event import Event
from kcssc.schemas.event import EventCreate, EventUpdate, EventResponse, EventFilters
from kcssc.services.formatting import format_date_for_display, format_time_range, parse_time, parse_time_range

logger = logging.getLogger(__name__)


class EventService:

    @staticmethod
    def to_response(event: Event) -> EventResponse:
        return EventResponse(
            id=event.id,
            title=event.title,
            date=format_date_for_display(event.date),
            time=format_time_range(event.time, event.end_time),
            location=event.location,
            category=event.category,
            description=event.description,
            featured=bool(event.featured),
            image_url=event.image_url or None,
        )

    @staticmethod
    def list_events(db: Session, filters: Optional[EventFilters] = None) -> List[Event]:
        query = db.query(Event)
        if filters is not None:
            if filters.category:
                query = query.filter(Event.category == filters.category)
            if filters.start_date:
                query = query.filter(Event.date >= filters.start_date)
            if filters.end_date:
                query = query.filter(Event.date <= filters.end_date)
            if filters.featured is not None:
                query = query.filter(Event.featured == filters.featured)
        return query.order_by(Event.date.asc(), Event.time.asc()).all()

    @staticmethod
    def get_event(db: Session, event_id: int) -> Optional[Event]:
        return db.query(Event).filter(Event.id == event_id).first()

    @staticmethod
    def create_event(db: Session, data: EventCreate) -> Event:
        start, end = parse_time_range(data.time)
        if data.end_time:
            end = parse_time(data.end_time)

        event = Event(
            title=data.title,
            date=data.date,
            time=start,
            end_time=end,
            location=data.location,
            category=data.category,
            description=data.description,
            featured=data.featured,
            image_url=data.image_url or None,
        )
        try:
            db.add(event)
            db.commit()
            db.refresh(event)
        except Exception as e:
            logger.error(f"Error creating event: {e}")
            db.rollback()
            raise
        return event

    @staticmethod
    def update_event(db: Session, event: Event, data: EventUpdate) -> Event:
        """Applies only the fields present in the payload."""
        changes = data.model_dump(exclude_unset=True)

        if changes.get("time"):
            start, range_end = parse_time_range(changes["time"])
            event.time = start
            if "end_time" not in changes:
                event.end_time = range_end
        if "end_time" in changes:
            event.end_time = parse_time(changes["end_time"]) if changes["end_time"] else None

        for field in ("title", "date", "location", "category", "description", "featured"):
            if changes.get(field) is not None:
                setattr(event, field, changes[field])
        if "image_url" in changes:
            event.image_url = changes["image_url"] or None

        try:
            db.commit()
            db.refresh(event)
        except Exception as e:
            logger.error(f"Error updating event {event.id}: {e}")
            db.rollback()
            raise
        return event

    @staticmethod
    def delete_event(db: Session, event: Event) -> None:
        try:
            db.delete(event)
            db.commit()
        except Exception as e:
            logger.error(f"Error deleting event {event.id}: {e}")
            db.rollback()
            raise
