"""Bloc Actions — conteneur d'éléments interactifs."""
from typing import Any, Dict, List, Literal
from .base import Block


class ActionsBlock(Block):
    type: Literal["actions"] = "actions"
    # Boutons, menus select, overflow, date pickers. 25 éléments max côté API.
    elements: List[Dict[str, Any]]

    def to_mapping(self) -> Dict[str, Any]:
        return {"type": self.type, "elements": self.elements}
