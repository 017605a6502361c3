"""
blockkit — blocs de mise en page de messages, sérialisés en dicts JSON-ready.

Usage:
    >>> from blockkit import HeaderBlock, SectionBlock, DividerBlock, render_blocks
    >>> render_blocks([
    ...     HeaderBlock(text="Déploiement"),
    ...     DividerBlock(),
    ...     SectionBlock(fields=["*Env*", "prod"]),
    ... ])

Chaque bloc est immuable ; `to_mapping()` renvoie le dict attendu par l'API.
"""

from .blocks import (
    Block,
    ActionsBlock,
    ContextBlock,
    DividerBlock,
    FileBlock,
    HeaderBlock,
    ImageBlock,
    InputBlock,
    SectionBlock,
    VideoBlock,
    BlockUnion,
)
from .core import PLAIN_TEXT, MRKDWN, plain_text, mrkdwn, RenderSettings
from .renderer import BlockRenderer, PayloadRenderer, render_blocks, to_json

__version__ = "0.1.0"

__all__ = [
    # blocs
    "Block",
    "ActionsBlock", "ContextBlock", "DividerBlock", "FileBlock", "HeaderBlock",
    "ImageBlock", "InputBlock", "SectionBlock", "VideoBlock",
    "BlockUnion",
    # composition
    "PLAIN_TEXT", "MRKDWN", "plain_text", "mrkdwn",
    # réglages
    "RenderSettings",
    # renderer
    "BlockRenderer", "PayloadRenderer", "render_blocks", "to_json",
]
