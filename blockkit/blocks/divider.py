"""Bloc Divider — séparateur entre blocs."""
from typing import Any, Dict, Literal
from .base import Block


class DividerBlock(Block):
    type: Literal["divider"] = "divider"

    def to_mapping(self) -> Dict[str, Any]:
        return {"type": self.type}
