"""Bloc Header — texte brut affiché en gros et en gras."""
from typing import Any, Dict, Literal
from .base import Block
from ..core.composition import plain_text


class HeaderBlock(Block):
    type: Literal["header"] = "header"
    text: str  # 150 caractères max

    def to_mapping(self) -> Dict[str, Any]:
        return {"type": self.type, "text": plain_text(self.text)}
