import logging

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile

from routes.admin.common import content_http_error, read_image
from schemas.authSchema.authSchema import AdminSession
from services.dependencies import get_image_storage
from services.errors import ContentError
from services.image_storage import LocalImageStorage
from utils.utils import get_admin_session

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/uploads/image")
async def upload_image(
    file: UploadFile = File(...),
    storage: LocalImageStorage = Depends(get_image_storage),
    session: AdminSession = Depends(get_admin_session),
):
    image = await read_image(file)
    if image is None:
        raise HTTPException(status_code=400, detail="No file provided")
    try:
        url = storage.store(image)
    except ContentError as e:
        raise content_http_error(e)

    logger.info(f"{session.email} uploaded {image.filename} as {url}")
    return {"url": url}
