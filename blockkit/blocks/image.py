"""Bloc Image — image seule avec titre optionnel."""
from typing import Any, Dict, Literal, Optional
from .base import Block
from ..core.composition import plain_text


class ImageBlock(Block):
    """
    Image simple.

    Limites documentées par l'API (non vérifiées ici) :
      - image_url : 3000 caractères
      - alt_text  : 2000 caractères
      - title     : 2000 caractères
    """
    type: Literal["image"] = "image"
    image_url: str
    alt_text: str
    title: Optional[str] = None

    def to_mapping(self) -> Dict[str, Any]:
        block: Dict[str, Any] = {
            "type": self.type,
            "image_url": self.image_url,
            "alt_text": self.alt_text,
        }
        if self.title is not None:
            block["title"] = plain_text(self.title)
        return block
