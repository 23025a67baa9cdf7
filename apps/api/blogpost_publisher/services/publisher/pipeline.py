from __future__ import annotations

from loguru import logger

from blogpost_publisher.core.config import Settings
from blogpost_publisher.schemas.github import ReadmeContent, RepoMetadata
from blogpost_publisher.schemas.publish import PublishOutcome, PublishRequest
from blogpost_publisher.services.article.builder import build_devto_article, wrap_article
from blogpost_publisher.services.devto.devto_client import DevToClient
from blogpost_publisher.services.github.github_client import GitHubClient, decode_readme

MISSING_INPUT_MESSAGE = "Please provide the name of the repository and the repository owner"
DEVTO_DASHBOARD_URL = "https://dev.to/dashboard"


def clients_from_settings(s: Settings) -> tuple[GitHubClient, DevToClient]:
    github = GitHubClient(
        token=s.GITHUB_API_KEY,
        base=s.GITHUB_API_BASE,
        timeout=s.HTTP_TIMEOUT_SECONDS,
    )
    devto = DevToClient(
        api_key=s.DEV_TO_API_KEY,
        articles_url=s.DEV_TO_ARTICLES_URL,
        timeout=s.HTTP_TIMEOUT_SECONDS,
    )
    return github, devto


async def publish_repository(
    payload: PublishRequest | None,
    github: GitHubClient,
    devto: DevToClient,
) -> PublishOutcome:
    """
    Publish a GitHub repository's README as a dev.to draft.
    - 400 when repoowner/reponame is missing
    - 500 when either GitHub read is not 200 (both statuses reported)
    - 201 or the dev.to status otherwise
    Calls run one after the other; nothing is retried.
    """
    if payload is None or not payload.is_complete():
        outcome = PublishOutcome(status=400, message=MISSING_INPUT_MESSAGE)
        logger.warning("Status: {} - Message: {}", outcome.status, outcome.message)
        return outcome

    owner, repo = payload.repoowner, payload.reponame

    repo_res = await github.get_repo(owner, repo)
    readme_res = await github.get_readme(owner, repo)

    if not (repo_res.ok and readme_res.ok):
        outcome = PublishOutcome(
            status=500,
            message=(
                f"Error when fetching metadata (status: {repo_res.status}) "
                f"or readme (status: {readme_res.status}) from GitHub repository"
            ),
        )
        logger.warning(outcome.message)
        return outcome

    readme_text = decode_readme(ReadmeContent.model_validate(readme_res.data))
    article = build_devto_article(RepoMetadata.model_validate(repo_res.data), readme_text)

    devto_res = await devto.publish_article(wrap_article(article))

    if devto_res.created:
        outcome = PublishOutcome(
            status=devto_res.status,
            message=(
                "Blog post published at dev.to. Check the post on your dashboard "
                f"{DEVTO_DASHBOARD_URL} (preliminary URL: {devto_res.data.get('url')})"
            ),
        )
        logger.info(outcome.message)
        return outcome

    outcome = PublishOutcome(
        status=devto_res.status,
        message=f"Error when publishing blog post - status: {devto_res.status} - {devto_res.reason}",
    )
    logger.warning(outcome.message)
    return outcome
