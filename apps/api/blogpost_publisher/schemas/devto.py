from pydantic import BaseModel
from typing import List, Optional

class ArticlePayload(BaseModel):
    title: str
    description: Optional[str] = None
    body_markdown: str
    tags: List[str]
    published: bool = False
    main_image: str

class ArticleEnvelope(BaseModel):
    article: ArticlePayload
