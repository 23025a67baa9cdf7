from blogpost_publisher.schemas.devto import ArticleEnvelope, ArticlePayload
from blogpost_publisher.schemas.github import RepoMetadata

DEVTO_TAGS = ["microsoft", "azure", "serverless"]

MAIN_IMAGE_URL = (
    "https://user-images.githubusercontent.com/69332964/"
    "114803220-14269100-9d6d-11eb-9a3a-e92a637e5d79.png"
)

def build_devto_article(repo_metadata: RepoMetadata, readme_text: str) -> ArticlePayload:
    """Repository name/description + README -> dev.to draft."""
    return ArticlePayload(
        title=repo_metadata.name,
        description=repo_metadata.description,
        body_markdown=readme_text,
        tags=list(DEVTO_TAGS),
        published=False,
        main_image=MAIN_IMAGE_URL,
    )

def wrap_article(article: ArticlePayload) -> ArticleEnvelope:
    return ArticleEnvelope(article=article)
