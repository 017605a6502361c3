"""
Renderer payload — liste de blocs → tableau `blocks` (dicts ou JSON).
L'enveloppe du message (channel, thread, texte de repli) reste à l'appelant.
"""
import json
import logging
from typing import Any, Dict, Iterable, List, Optional

from ..blocks.base import Block
from ..core.settings import RenderSettings

log = logging.getLogger(__name__)


class PayloadRenderer:
    """
    Rend des blocs en structures prêtes à encoder.

    Usage:
        >>> renderer = PayloadRenderer()
        >>> renderer.to_json([DividerBlock()])
        '[{"type": "divider"}]'
    """

    def __init__(self, settings: Optional[RenderSettings] = None):
        self.settings = settings or RenderSettings()

    def render_block(self, block: Block) -> Dict[str, Any]:
        if not isinstance(block, Block):
            raise TypeError(f"Bloc attendu, reçu {type(block).__name__}")
        return block.to_mapping()

    def render_blocks(self, blocks: Iterable[Block]) -> List[Dict[str, Any]]:
        rendered = []
        for i, block in enumerate(blocks):
            if not isinstance(block, Block):
                raise TypeError(f"Bloc attendu en position {i}, reçu {type(block).__name__}")
            rendered.append(block.to_mapping())
        log.debug("%d bloc(s) rendu(s) : %s", len(rendered), [b["type"] for b in rendered])
        return rendered

    def to_json(self, blocks: Iterable[Block]) -> str:
        return json.dumps(
            self.render_blocks(blocks),
            indent=self.settings.json_indent,
            ensure_ascii=self.settings.ensure_ascii,
        )


# Fonctions raccourcies pour usage direct
def render_blocks(blocks: Iterable[Block]) -> List[Dict[str, Any]]:
    return PayloadRenderer().render_blocks(blocks)


def to_json(blocks: Iterable[Block]) -> str:
    return PayloadRenderer().to_json(blocks)
