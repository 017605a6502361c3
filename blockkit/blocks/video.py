"""
Bloc Video — vidéo intégrée (unfurls, messages, modals, App Home).

`alt_text` retombe sur `title` quand il n'est pas fourni.
"""
from typing import Any, Dict, Literal, Optional
from .base import Block
from ..core.composition import plain_text


class VideoBlock(Block):
    type: Literal["video"] = "video"
    title: str                               # < 200 caractères
    thumbnail_url: str
    video_url: str                           # HTTPS, domaine d'unfurl de l'app
    alt_text: Optional[str] = None
    author_name: Optional[str] = None        # < 50 caractères
    description: Optional[str] = None
    provider_icon_url: Optional[str] = None
    provider_name: Optional[str] = None
    title_url: Optional[str] = None          # HTTPS, URL non-embeddable

    def to_mapping(self) -> Dict[str, Any]:
        block: Dict[str, Any] = {
            "type": self.type,
            "alt_text": self.alt_text if self.alt_text is not None else self.title,
        }
        if self.author_name is not None:
            block["author_name"] = self.author_name
        if self.description is not None:
            block["description"] = plain_text(self.description)
        if self.provider_icon_url is not None:
            block["provider_icon_url"] = self.provider_icon_url
        if self.provider_name is not None:
            block["provider_name"] = self.provider_name
        block["title"] = plain_text(self.title)
        if self.title_url is not None:
            block["title_url"] = self.title_url
        block["thumbnail_url"] = self.thumbnail_url
        block["video_url"] = self.video_url
        return block
