from pydantic import BaseModel, Field
from typing import Optional


class UploadResponse(BaseModel):
    success: bool = True
    file_path: str = Field(..., alias="filePath")
    filename: str
    original_name: str = Field(..., alias="originalName")
    size: int
    width: Optional[int] = None
    height: Optional[int] = None

    class Config:
        populate_by_name = True
