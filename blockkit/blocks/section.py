"""
Bloc Section — bloc texte le plus flexible.

Texte simple, champs en deux colonnes, ou accompagné d'un élément (accessory).
L'API exige `text` ou `fields` ; ce n'est pas vérifié localement.
"""
from typing import Any, Dict, List, Literal, Optional
from .base import Block
from ..core.composition import mrkdwn


class SectionBlock(Block):
    type: Literal["section"] = "section"
    text: Optional[str] = None                  # 3000 caractères max
    fields: Optional[List[str]] = None          # 10 items max, 2000 caractères chacun
    accessory: Optional[Dict[str, Any]] = None

    def to_mapping(self) -> Dict[str, Any]:
        block: Dict[str, Any] = {"type": self.type}
        if self.text is not None:
            block["text"] = mrkdwn(self.text)
        if self.fields is not None:
            block["fields"] = [mrkdwn(f) for f in self.fields]
        if self.accessory is not None:
            block["accessory"] = self.accessory
        return block
