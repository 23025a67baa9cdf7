from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional
import httpx
from loguru import logger

from blogpost_publisher.schemas.devto import ArticleEnvelope


@dataclass
class DevToResult:
    status: int
    reason: str
    data: Dict[str, Any] = field(default_factory=dict)

    @property
    def created(self) -> bool:
        return self.status == 201


class DevToClient:
    def __init__(
        self,
        api_key: Optional[str] = None,
        articles_url: str = "https://dev.to/api/articles",
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.api_key = api_key
        self.articles_url = articles_url
        self.timeout = timeout
        self.transport = transport

    def _headers(self) -> Dict[str, str]:
        # dev.to rejects the call itself when the key is missing
        return {
            "api-key": self.api_key or "",
            "content-type": "application/json",
        }

    async def publish_article(self, envelope: ArticleEnvelope) -> DevToResult:
        body = envelope.model_dump_json()
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                resp = await client.post(self.articles_url, headers=self._headers(), content=body)
        except httpx.HTTPError as e:
            logger.warning("dev.to request failed error={!r}", e)
            return DevToResult(status=502, reason="Bad Gateway")

        data: Dict[str, Any] = {}
        if resp.status_code == 201:
            try:
                parsed = resp.json()
            except ValueError:
                parsed = None
            if isinstance(parsed, dict):
                data = parsed
            else:
                logger.warning("dev.to answered 201 without a JSON object body")

        return DevToResult(status=resp.status_code, reason=resp.reason_phrase, data=data)
