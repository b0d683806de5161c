"""YouTube lookup of a tutorial video to guide generation."""

import logging
from typing import List, Optional

import httpx

from deycook.config import Settings
from deycook.models.recipe import VideoContext

logger = logging.getLogger(__name__)

YOUTUBE_SEARCH_URL = "https://www.googleapis.com/youtube/v3/search"
MAX_QUERY_INGREDIENTS = 6
MAX_DESCRIPTION_CHARS = 800


def build_search_query(ingredients: List[str]) -> str:
    """Keyword query from the first few ingredients."""
    return " ".join(ingredients[:MAX_QUERY_INGREDIENTS]) + " recipe"


class VideoService:
    """Best-effort video search; every failure yields ``None``."""

    def __init__(self, settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None) -> None:
        self.api_key = settings.youtube_api_key
        self.timeout = settings.http_timeout
        self._transport = transport

    @property
    def enabled(self) -> bool:
        return bool(self.api_key)

    async def find_video(self, ingredients: List[str]) -> Optional[VideoContext]:
        """Return the top matching video for the ingredients, or ``None``."""
        if not self.enabled:
            logger.info("Video lookup skipped: no YouTube API key configured")
            return None

        params = {
            "part": "snippet",
            "type": "video",
            "maxResults": 1,
            "q": build_search_query(ingredients),
            "key": self.api_key,
        }

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.get(YOUTUBE_SEARCH_URL, params=params)
                response.raise_for_status()
                data = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.warning(f"[youtube] search failed: {type(e).__name__}")
            return None

        items = data.get("items") if isinstance(data, dict) else None
        if not isinstance(items, list) or not items or not isinstance(items[0], dict):
            logger.info("[youtube] search returned no results")
            return None

        item = items[0]
        ident = item.get("id")
        video_id = ident.get("videoId") if isinstance(ident, dict) else None
        if not video_id:
            return None

        snippet = item.get("snippet")
        if not isinstance(snippet, dict):
            snippet = {}
        return VideoContext(
            id=video_id,
            title=snippet.get("title") or "",
            channel=snippet.get("channelTitle") or "",
            description=(snippet.get("description") or "")[:MAX_DESCRIPTION_CHARS],
            url=f"https://www.youtube.com/watch?v={video_id}",
        )
