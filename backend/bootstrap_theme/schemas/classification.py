"""Label classification schemas."""

from pydantic import BaseModel, Field

from bootstrap_theme.schemas.icon import IconElement


class CssClassRequest(BaseModel):
    label: str
    default: str = ""


class CssClassResponse(BaseModel):
    label: str
    category: str
    matched: bool  # False when the default was returned


class CssClassBatchRequest(BaseModel):
    labels: list[str] = Field(max_length=500)
    default: str = ""


class IconRequest(BaseModel):
    label: str


class IconResponse(BaseModel):
    label: str
    icon: IconElement | None = None
