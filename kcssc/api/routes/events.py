from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session
from typing import List, Optional
from datetime import date

from kcssc.core.database import get_db
from kcssc.schemas.event import EventCreate, EventUpdate, EventResponse, EventFilters
from kcssc.services.event_service import EventService

router = APIRouter()


@router.get("/events", response_model=List[EventResponse], response_model_exclude_none=True)
def list_events(
    category: Optional[str] = None,
    start_date: Optional[date] = Query(None, alias="startDate"),
    end_date: Optional[date] = Query(None, alias="endDate"),
    featured: Optional[bool] = None,
    db: Session = Depends(get_db)
):
    """Lists events ordered by date and start time, optionally filtered"""
    filters = EventFilters(category=category, start_date=start_date, end_date=end_date, featured=featured)
    return [EventService.to_response(e) for e in EventService.list_events(db, filters)]


@router.get("/events/{event_id}", response_model=EventResponse, response_model_exclude_none=True)
def get_event(event_id: int, db: Session = Depends(get_db)):
    event = EventService.get_event(db, event_id)
    if not event:
        raise HTTPException(status_code=404, detail="Event not found")
    return EventService.to_response(event)


@router.post("/events", response_model=EventResponse, response_model_exclude_none=True, status_code=status.HTTP_201_CREATED)
def create_event(data: EventCreate, db: Session = Depends(get_db)):
    event = EventService.create_event(db, data)
    return EventService.to_response(event)


@router.put("/events/{event_id}", response_model=EventResponse, response_model_exclude_none=True)
def update_event(event_id: int, data: EventUpdate, db: Session = Depends(get_db)):
    event = EventService.get_event(db, event_id)
    if not event:
        raise HTTPException(status_code=404, detail="Event not found")
    event = EventService.update_event(db, event, data)
    return EventService.to_response(event)


@router.delete("/events/{event_id}")
def delete_event(event_id: int, db: Session = Depends(get_db)):
    event = EventService.get_event(db, event_id)
    if not event:
        raise HTTPException(status_code=404, detail="Event not found")
    EventService.delete_event(db, event)
    return {"message": "Event deleted successfully", "id": event_id}
