"""Pattern table schemas."""

from pydantic import BaseModel


class PatternTableResponse(BaseModel):
    kind: str
    epoch: int
    exact: dict[str, str]
    contains: dict[str, str]  # insertion order is the match priority


class CacheClearResponse(BaseModel):
    epoch: int
