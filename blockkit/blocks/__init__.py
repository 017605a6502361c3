"""
Blocs — exports publics + BlockUnion discriminé.
"""
from typing import Annotated, Union
from pydantic import Field

from .base import Block
from .actions import ActionsBlock
from .context import ContextBlock
from .divider import DividerBlock
from .file import FileBlock
from .header import HeaderBlock
from .image import ImageBlock
from .input import InputBlock
from .section import SectionBlock
from .video import VideoBlock

# Union discriminée par `type` — pour annoter des listes de blocs
BlockUnion = Annotated[
    Union[
        ActionsBlock,
        ContextBlock,
        DividerBlock,
        FileBlock,
        HeaderBlock,
        ImageBlock,
        InputBlock,
        SectionBlock,
        VideoBlock,
    ],
    Field(discriminator="type"),
]

__all__ = [
    "Block",
    "ActionsBlock",
    "ContextBlock",
    "DividerBlock",
    "FileBlock",
    "HeaderBlock",
    "ImageBlock",
    "InputBlock",
    "SectionBlock",
    "VideoBlock",
    "BlockUnion",
]
