"""Documentation search schemas."""

from pydantic import BaseModel


class DocsSearchResponse(BaseModel):
    url: str
