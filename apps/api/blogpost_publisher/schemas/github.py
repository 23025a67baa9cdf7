from pydantic import BaseModel, ConfigDict
from typing import Optional

class RepoMetadata(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str = ""
    description: Optional[str] = None

class ReadmeContent(BaseModel):
    model_config = ConfigDict(extra="ignore")

    content: Optional[str] = None
    encoding: Optional[str] = None
