from typing import Optional
from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse
from pydantic import ValidationError

from blogpost_publisher.core.config import Settings, get_settings
from blogpost_publisher.schemas.publish import PublishRequest
from blogpost_publisher.services.devto.devto_client import DevToClient
from blogpost_publisher.services.github.github_client import GitHubClient
from blogpost_publisher.services.publisher.pipeline import clients_from_settings, publish_repository

router = APIRouter(tags=["publish"])

def get_clients(s: Settings = Depends(get_settings)) -> tuple[GitHubClient, DevToClient]:
    return clients_from_settings(s)

async def _read_payload(request: Request) -> Optional[PublishRequest]:
    # anything that is not a JSON object with string fields counts as missing input
    try:
        body = await request.json()
    except ValueError:
        return None
    if not isinstance(body, dict):
        return None
    try:
        return PublishRequest.model_validate(body)
    except ValidationError:
        return None

@router.post("/publish", response_class=PlainTextResponse)
async def publish(request: Request, clients: tuple[GitHubClient, DevToClient] = Depends(get_clients)):
    github, devto = clients
    payload = await _read_payload(request)
    outcome = await publish_repository(payload, github, devto)
    return PlainTextResponse(content=outcome.message, status_code=outcome.status)
