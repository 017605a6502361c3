"""Bloc Context — contexte du message (images et textes)."""
from typing import Any, Dict, List, Literal
from .base import Block


class ContextBlock(Block):
    type: Literal["context"] = "context"
    # Éléments image et objets texte. 10 éléments max.
    elements: List[Dict[str, Any]]

    def to_mapping(self) -> Dict[str, Any]:
        return {"type": self.type, "elements": self.elements}
