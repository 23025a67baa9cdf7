from pydantic import BaseModel, ConfigDict, Field
from typing import Optional

class PublishRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    repoowner: Optional[str] = Field(None, description="GitHub user or organisation owning the repository")
    reponame: Optional[str] = Field(None, description="Repository name")

    def is_complete(self) -> bool:
        return bool(self.repoowner) and bool(self.reponame)

class PublishOutcome(BaseModel):
    status: int
    message: str
