"""Configuration schema using Pydantic for validation."""

from typing import Optional
from uuid import uuid4

from pydantic import BaseModel, Field


class WidgetConfigModel(BaseModel):
    """Configuration for a single widget instance."""

    type: str
    id: str = Field(default_factory=lambda: str(uuid4()))
    color: Optional[str] = None
    bold: bool = False
    raw_value: bool = False
    metadata: dict[str, str] = Field(default_factory=dict)


class StatusLineSettings(BaseModel):
    """Complete status line settings."""

    version: int = 1
    widgets: list[WidgetConfigModel] = Field(default_factory=list)

    model_config = {"extra": "forbid"}
