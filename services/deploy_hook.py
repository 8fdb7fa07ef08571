import logging
from typing import Optional

import httpx

logger = logging.getLogger(__name__)


class BuildHook:
    """Refresh callback that asks the static front end host to rebuild."""

    def __init__(self, url: str, client: Optional[httpx.AsyncClient] = None, timeout: float = 10.0):
        self.url = url
        self.client = client
        self.timeout = timeout

    async def __call__(self, kind) -> bool:
        try:
            if self.client is not None:
                response = await self.client.post(self.url, json={})
            else:
                async with httpx.AsyncClient(timeout=self.timeout) as client:
                    response = await client.post(self.url, json={})
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.error(f"Failed to trigger build after {kind.value} change: {str(e)}")
            return False

        logger.info(f"Build triggered after {kind.value} change")
        return True
