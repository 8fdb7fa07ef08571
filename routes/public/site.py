from fastapi import APIRouter, Depends

from services.announcement_lifecycle import live_feed
from services.content_repository import ContentKind, ContentRepository
from services.dependencies import get_content_repository
from services.membership import split_roster
from utils.utils import site_today

router = APIRouter()


@router.get("/site")
async def get_site(repo: ContentRepository = Depends(get_content_repository)):
    # a kind that fails to load comes back empty and is listed in "unavailable"
    unavailable = await repo.load_everything()

    now = repo.clock()
    current, alumni = split_roster(repo.collections[ContentKind.EXECUTIVES], site_today(now))
    projects = repo.collections[ContentKind.PROJECTS]
    announcements = live_feed(repo.collections[ContentKind.ANNOUNCEMENTS], now)

    return {
        "message": "Site content fetched successfully",
        "data": {
            "projects": projects,
            "executives": {"current": current, "alumni": alumni},
            "announcements": announcements,
            "stats": {
                "projects": len(projects),
                "current_executives": len(current),
                "alumni": len(alumni),
            },
        },
        "unavailable": [kind.value for kind in unavailable],
    }
