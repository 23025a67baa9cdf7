from __future__ import annotations

import json

from blogpost_publisher.schemas.github import RepoMetadata
from blogpost_publisher.services.article.builder import (
    DEVTO_TAGS,
    MAIN_IMAGE_URL,
    build_devto_article,
    wrap_article,
)


def test_build_devto_article_copies_repo_fields() -> None:
    meta = RepoMetadata(name="hello-functions", description="Serverless sample")

    article = build_devto_article(meta, "# Hello\n\nSome text")

    assert article.title == "hello-functions"
    assert article.description == "Serverless sample"
    assert article.body_markdown == "# Hello\n\nSome text"


def test_build_devto_article_is_always_a_tagged_draft() -> None:
    article = build_devto_article(RepoMetadata(name="x"), "")

    assert article.tags == ["microsoft", "azure", "serverless"]
    assert article.published is False
    assert article.main_image == MAIN_IMAGE_URL
    assert article.main_image.startswith("https://user-images.githubusercontent.com/")


def test_build_devto_article_keeps_missing_description() -> None:
    article = build_devto_article(RepoMetadata(name="x", description=None), "body")

    assert article.description is None


def test_build_devto_article_does_not_share_tag_list() -> None:
    first = build_devto_article(RepoMetadata(name="a"), "")
    first.tags.append("python")

    second = build_devto_article(RepoMetadata(name="b"), "")

    assert second.tags == ["microsoft", "azure", "serverless"]
    assert DEVTO_TAGS == ["microsoft", "azure", "serverless"]


def test_wrap_article_nests_under_article_key() -> None:
    article = build_devto_article(RepoMetadata(name="repo", description="d"), "text")

    body = json.loads(wrap_article(article).model_dump_json())

    assert list(body) == ["article"]
    assert body["article"] == {
        "title": "repo",
        "description": "d",
        "body_markdown": "text",
        "tags": ["microsoft", "azure", "serverless"],
        "published": False,
        "main_image": MAIN_IMAGE_URL,
    }
