from pydantic import BaseModel, ConfigDict


class ReviewMessage(BaseModel):
    model_config = ConfigDict(frozen=True)

    path: str
    line: int  # one-based, in the new file
    level: str | None = None
    msg: str | None = None
    commit_sha: str | None = None
    runner: str
