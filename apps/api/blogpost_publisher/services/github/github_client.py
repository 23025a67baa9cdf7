from __future__ import annotations

import base64
import binascii
import codecs
from dataclasses import dataclass, field
from typing import Any, Dict, Optional
from urllib.parse import quote
import httpx
from loguru import logger

from blogpost_publisher.schemas.github import ReadmeContent


@dataclass
class GitHubResult:
    """Outcome of a GitHub read call. Error statuses are reported here, never raised."""
    status: int
    reason: str
    data: Dict[str, Any] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.status == 200


def _segment(value: str) -> str:
    # one path segment; "/", "?", "#" and dot segments must not reshape the URL
    s = quote(value, safe="")
    if s in (".", ".."):
        s = s.replace(".", "%2E")
    return s


class GitHubClient:
    def __init__(
        self,
        token: Optional[str] = None,
        base: str = "https://api.github.com",
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.base = base.rstrip("/")
        self.token = token
        self.timeout = timeout
        self.transport = transport

    def _headers(self) -> Dict[str, str]:
        headers = {
            "Accept": "application/vnd.github+json",
            "User-Agent": "blogpost-publisher/0.1",
        }
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    async def _get(self, path: str) -> GitHubResult:
        url = f"{self.base}{path}"
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                resp = await client.get(url, headers=self._headers())
        except httpx.HTTPError as e:
            logger.warning("GitHub request failed path={} error={!r}", path, e)
            return GitHubResult(status=502, reason="Bad Gateway")

        if resp.status_code in (403, 429):
            logger.warning(
                "GitHub forbidden. status={} ratelimit-remaining={}",
                resp.status_code, resp.headers.get("x-ratelimit-remaining"),
            )

        try:
            data = resp.json()
        except ValueError:
            data = {}
        if not isinstance(data, dict):
            data = {}

        return GitHubResult(status=resp.status_code, reason=resp.reason_phrase, data=data)

    async def get_repo(self, owner: str, repo: str) -> GitHubResult:
        return await self._get(f"/repos/{_segment(owner)}/{_segment(repo)}")

    async def get_readme(self, owner: str, repo: str) -> GitHubResult:
        # README of the default branch, root directory
        return await self._get(f"/repos/{_segment(owner)}/{_segment(repo)}/readme")


def _strip_b64(content: str) -> str:
    # GitHub wraps base64 at 60 columns
    s = "".join(content.split())
    return s + "=" * (-len(s) % 4)


def decode_readme(readme: ReadmeContent) -> str:
    """
    Decode README content using the encoding GitHub declared for it.
    - base64 / base64url / hex are binary-to-text encodings
    - any other codec name is used to turn the string back into bytes
    - empty or unknown encodings mean the content is already text
    Result is always UTF-8 text; invalid byte sequences are replaced.
    """
    enc = (readme.encoding or "").strip().lower()
    content = readme.content or ""

    try:
        if enc in ("base64", "base64url"):
            # either alphabet, mixed too
            raw = base64.b64decode(_strip_b64(content), altchars=b"-_")
        elif enc == "hex":
            raw = bytes.fromhex("".join(content.split()))
        else:
            try:
                codec = codecs.lookup(enc).name
            except LookupError:
                codec = "utf-8"
            raw = content.encode(codec, errors="replace")
    except (binascii.Error, ValueError) as e:
        logger.warning("README content is not valid {}, using it as plain text: {}", enc, e)
        raw = content.encode("utf-8")

    return raw.decode("utf-8", errors="replace")
