from fastapi import APIRouter, UploadFile, File

from kcssc.schemas.upload import UploadResponse
from kcssc.services import storage_service

router = APIRouter()


@router.post("/upload/photo", response_model=UploadResponse, response_model_exclude_none=True)
def upload_photo(photo: UploadFile = File(...)):
    """Stores an image and returns its public path (or bucket URL). Runs in the threadpool: storage may block."""
    file_content = photo.file.read()
    return storage_service.store_photo(file_content, photo.filename or "", photo.content_type)
