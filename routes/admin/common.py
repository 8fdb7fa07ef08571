from typing import Optional

from fastapi import HTTPException, UploadFile

from services.errors import (
    ContentError,
    RecordNotFound,
    StoreUnavailable,
    UploadFailed,
    ValidationFailed,
)
from services.image_storage import ImageUpload


def content_http_error(e: ContentError) -> HTTPException:
    if isinstance(e, ValidationFailed):
        return HTTPException(status_code=422, detail={"message": str(e), "errors": e.errors})
    if isinstance(e, RecordNotFound):
        return HTTPException(status_code=404, detail=str(e))
    if isinstance(e, StoreUnavailable):
        return HTTPException(status_code=503, detail=f"Database error: {str(e)}")
    if isinstance(e, UploadFailed):
        return HTTPException(status_code=502, detail=f"Image upload failed: {str(e)}")
    return HTTPException(status_code=500, detail=f"Something went wrong: {str(e)}")


async def read_image(image: Optional[UploadFile]) -> Optional[ImageUpload]:
    if image is None or not image.filename:
        return None
    return ImageUpload(
        data=await image.read(),
        filename=image.filename,
        content_type=image.content_type,
    )
