"""Bloc Input — collecte une saisie utilisateur via un élément."""
from typing import Any, Dict, Literal, Optional
from .base import Block
from ..core.composition import plain_text


class InputBlock(Block):
    """
    Bloc de saisie.

    `element` : plain-text input, checkboxes, radio buttons, select,
    multi-select ou datepicker. Transmis tel quel.
    `label` et `hint` : 2000 caractères max.
    """
    type: Literal["input"] = "input"
    label: str
    element: Dict[str, Any]
    hint: Optional[str] = None

    def to_mapping(self) -> Dict[str, Any]:
        block: Dict[str, Any] = {
            "type": self.type,
            "label": plain_text(self.label),
            "element": self.element,
        }
        if self.hint is not None:
            block["hint"] = plain_text(self.hint)
        return block
