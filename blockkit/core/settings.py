"""
Réglages d'encodage JSON passés explicitement au renderer.
"""
from typing import Optional
from pydantic import BaseModel, Field


class RenderSettings(BaseModel):
    """Options passées à json.dumps par le renderer (défaut : compact, UTF-8)."""
    json_indent: Optional[int] = Field(default=None, ge=0)
    ensure_ascii: bool = False
