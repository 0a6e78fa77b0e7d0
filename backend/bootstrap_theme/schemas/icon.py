"""Icon element schemas."""

from pydantic import BaseModel, Field


class IconElement(BaseModel):
    """An inline glyphicon: ``<span class="icon glyphicon glyphicon-NAME" aria-hidden="true"></span>``."""
    name: str
    tag: str = "span"
    value: str = ""
    classes: list[str] = Field(default_factory=list)
    attributes: dict[str, str] = Field(default_factory=dict)


class GlyphiconListResponse(BaseModel):
    version: str
    icons: list[str]
