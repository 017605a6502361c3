"""Renderer — protocol + payload."""
from .base import BlockRenderer
from .payload import PayloadRenderer, render_blocks, to_json

__all__ = ["BlockRenderer", "PayloadRenderer", "render_blocks", "to_json"]
