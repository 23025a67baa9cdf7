from fastapi import APIRouter, Depends
import httpx
from loguru import logger

from blogpost_publisher.core.config import Settings, get_settings

async def reachable(url: str, timeout: float = 2) -> bool:
    # any HTTP answer counts, auth errors included
    try:
        async with httpx.AsyncClient(timeout=timeout) as client:
            await client.head(url)
            return True
    except httpx.HTTPError as e:
        logger.warning("health check failed url={} error={!r}", url, e)
        return False

router = APIRouter(tags=["health"])

@router.get("/health")
async def health(s: Settings = Depends(get_settings)):
    return {"status": "ok", "app": s.APP_NAME}

@router.get("/health/upstreams")
async def health_upstreams(s: Settings = Depends(get_settings)):
    return {
        "github": await reachable(s.GITHUB_API_BASE),
        "devto": await reachable(s.DEV_TO_ARTICLES_URL),
    }
