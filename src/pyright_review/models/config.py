from pydantic import BaseModel, Field


class RepoConfig(BaseModel):
    exclude: list[str] = Field(default_factory=list)
