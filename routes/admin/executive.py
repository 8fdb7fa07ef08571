import logging

from fastapi import APIRouter, Depends

from routes.admin.common import content_http_error
from schemas.adminSchema.executiveSchema import ExecutiveWrite
from schemas.authSchema.authSchema import AdminSession
from services.content_repository import ContentKind, ContentRepository
from services.dependencies import get_content_repository
from services.errors import ContentError
from utils.utils import get_admin_session

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/executives")
async def fetch_executives(
    repo: ContentRepository = Depends(get_content_repository),
    session: AdminSession = Depends(get_admin_session),
):
    try:
        executives = await repo.load_all(ContentKind.EXECUTIVES, feed=False)
        return {"message": "Executives fetched successfully", "data": executives}
    except ContentError as e:
        raise content_http_error(e)


# graduation_year and is_alumni in the body are ignored, grade drives both
@router.post("/executives", status_code=201)
async def create_executive(
    payload: ExecutiveWrite,
    repo: ContentRepository = Depends(get_content_repository),
    session: AdminSession = Depends(get_admin_session),
):
    try:
        executive = await repo.save(ContentKind.EXECUTIVES, payload)
        logger.info(f"{session.email} created executive {executive.id}")
        return {"message": "Executive created successfully", "data": executive}
    except ContentError as e:
        raise content_http_error(e)


@router.put("/executives/{executive_id}")
async def update_executive(
    executive_id: str,
    payload: ExecutiveWrite,
    repo: ContentRepository = Depends(get_content_repository),
    session: AdminSession = Depends(get_admin_session),
):
    try:
        executive = await repo.save(
            ContentKind.EXECUTIVES, {**payload.model_dump(), "id": executive_id}
        )
        logger.info(f"{session.email} updated executive {executive_id}")
        return {"message": "Executive updated successfully", "data": executive}
    except ContentError as e:
        raise content_http_error(e)


@router.delete("/executives/{executive_id}")
async def delete_executive(
    executive_id: str,
    repo: ContentRepository = Depends(get_content_repository),
    session: AdminSession = Depends(get_admin_session),
):
    try:
        await repo.delete(ContentKind.EXECUTIVES, executive_id)
        logger.info(f"{session.email} deleted executive {executive_id}")
        return {"message": "Executive deleted successfully", "id": executive_id}
    except ContentError as e:
        raise content_http_error(e)
