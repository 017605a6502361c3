"""
Protocol Renderer — interface pluggable pour les renderers de blocs.
"""
from typing import Any, Dict, Iterable, List, Protocol, runtime_checkable
from ..blocks.base import Block


@runtime_checkable
class BlockRenderer(Protocol):
    def render_block(self, block: Block) -> Dict[str, Any]: ...
    def render_blocks(self, blocks: Iterable[Block]) -> List[Dict[str, Any]]: ...
