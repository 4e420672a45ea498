from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session
from typing import List, Optional

from kcssc.core.database import get_db
from kcssc.schemas.photo import PhotoCreate, PhotoUpdate, PhotoResponse, PhotoFilters
from kcssc.services.photo_service import PhotoService

router = APIRouter()


@router.get("/photos", response_model=List[PhotoResponse], response_model_exclude_none=True)
def list_photos(
    favourite: Optional[bool] = None,
    event: Optional[str] = None,
    year: Optional[int] = None,
    db: Session = Depends(get_db)
):
    """Lists photos, newest first. favourite=true gives the home page carousel"""
    filters = PhotoFilters(favourite=favourite, event=event, year=year)
    return [PhotoService.to_response(p) for p in PhotoService.list_photos(db, filters)]


@router.get("/photos/{photo_id}", response_model=PhotoResponse, response_model_exclude_none=True)
def get_photo(photo_id: int, db: Session = Depends(get_db)):
    photo = PhotoService.get_photo(db, photo_id)
    if not photo:
        raise HTTPException(status_code=404, detail="Photo not found")
    return PhotoService.to_response(photo)


@router.post("/photos", response_model=PhotoResponse, response_model_exclude_none=True, status_code=status.HTTP_201_CREATED)
def create_photo(data: PhotoCreate, db: Session = Depends(get_db)):
    photo = PhotoService.create_photo(db, data)
    return PhotoService.to_response(photo)


@router.put("/photos/{photo_id}", response_model=PhotoResponse, response_model_exclude_none=True)
def update_photo(photo_id: int, data: PhotoUpdate, db: Session = Depends(get_db)):
    if not data.model_fields_set:
        raise HTTPException(status_code=400, detail="No fields to update")
    photo = PhotoService.get_photo(db, photo_id)
    if not photo:
        raise HTTPException(status_code=404, detail="Photo not found")
    photo = PhotoService.update_photo(db, photo, data)
    return PhotoService.to_response(photo)


@router.delete("/photos/{photo_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_photo(photo_id: int, db: Session = Depends(get_db)):
    photo = PhotoService.get_photo(db, photo_id)
    if not photo:
        raise HTTPException(status_code=404, detail="Photo not found")
    PhotoService.delete_photo(db, photo)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
