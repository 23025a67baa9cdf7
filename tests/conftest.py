from __future__ import annotations

import base64

import pytest

from blogpost_publisher.services.devto.devto_client import DevToResult
from blogpost_publisher.services.github.github_client import GitHubResult


def b64(text: str) -> str:
    return base64.b64encode(text.encode("utf-8")).decode("ascii")


class FakeGitHub:
    def __init__(self, repo: GitHubResult, readme: GitHubResult) -> None:
        self.repo = repo
        self.readme = readme
        self.calls: list[tuple[str, str, str]] = []

    async def get_repo(self, owner: str, repo: str) -> GitHubResult:
        self.calls.append(("repo", owner, repo))
        return self.repo

    async def get_readme(self, owner: str, repo: str) -> GitHubResult:
        self.calls.append(("readme", owner, repo))
        return self.readme


class FakeDevTo:
    def __init__(self, result: DevToResult) -> None:
        self.result = result
        self.sent = []

    async def publish_article(self, envelope):
        self.sent.append(envelope)
        return self.result


@pytest.fixture
def repo_ok() -> GitHubResult:
    return GitHubResult(
        status=200,
        reason="OK",
        data={"name": "hello-functions", "description": "Serverless sample", "stargazers_count": 3},
    )


@pytest.fixture
def readme_ok() -> GitHubResult:
    return GitHubResult(
        status=200,
        reason="OK",
        data={"content": b64("# Hello"), "encoding": "base64", "name": "README.md"},
    )
