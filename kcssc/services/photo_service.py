import logging
from typing import List, Optional
from sqlalchemy import extract
from sqlalchemy.orm import Session

from kcssc.models.photo import Photo
from kcssc.schemas.photo import PhotoCreate, PhotoUpdate, PhotoResponse, PhotoFilters
from kcssc.services import storage_service

logger = logging.getLogger(__name__)


class PhotoService:

    @staticmethod
    def to_response(photo: Photo) -> PhotoResponse:
        return PhotoResponse(
            id=photo.id,
            photo=photo.photo,
            description=photo.description or None,
            event=photo.event,
            date=photo.date.isoformat(),
            favourite=bool(photo.favourite),
        )

    @staticmethod
    def list_photos(db: Session, filters: Optional[PhotoFilters] = None) -> List[Photo]:
        query = db.query(Photo)
        if filters is not None:
            if filters.favourite is not None:
                query = query.filter(Photo.favourite == filters.favourite)
            if filters.event:
                query = query.filter(Photo.event == filters.event)
            if filters.year is not None:
                query = query.filter(extract("year", Photo.date) == filters.year)
        return query.order_by(Photo.date.desc(), Photo.id.desc()).all()

    @staticmethod
    def get_photo(db: Session, photo_id: int) -> Optional[Photo]:
        return db.query(Photo).filter(Photo.id == photo_id).first()

    @staticmethod
    def create_photo(db: Session, data: PhotoCreate) -> Photo:
        photo = Photo(
            photo=data.photo,
            description=data.description or None,
            event=data.event,
            date=data.date,
            favourite=data.favourite,
        )
        try:
            db.add(photo)
            db.commit()
            db.refresh(photo)
        except Exception as e:
            logger.error(f"Error creating photo: {e}")
            db.rollback()
            raise
        return photo

    @staticmethod
    def update_photo(db: Session, photo: Photo, data: PhotoUpdate) -> Photo:
        changes = data.model_dump(exclude_unset=True)

        for field in ("photo", "event", "date", "favourite"):
            if changes.get(field) is not None:
                setattr(photo, field, changes[field])
        if "description" in changes:
            photo.description = changes["description"] or None

        try:
            db.commit()
            db.refresh(photo)
        except Exception as e:
            logger.error(f"Error updating photo {photo.id}: {e}")
            db.rollback()
            raise
        return photo

    @staticmethod
    def delete_photo(db: Session, photo: Photo) -> None:
        """Deletes the record, and the uploaded file when no other photo points to it."""
        path = photo.photo
        try:
            db.delete(photo)
            db.commit()
        except Exception as e:
            logger.error(f"Error deleting photo {photo.id}: {e}")
            db.rollback()
            raise

        if db.query(Photo).filter(Photo.photo == path).count() == 0:
            storage_service.delete_file(path)
