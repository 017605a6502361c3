"""
Bloc File — fichier distant.

Ne peut pas être ajouté directement à une surface d'app : il apparaît
lorsqu'on récupère des messages contenant des fichiers distants.
"""
from typing import Any, Dict, Literal
from .base import Block

REMOTE_SOURCE = "remote"


class FileBlock(Block):
    type: Literal["file"] = "file"
    external_id: str

    def to_mapping(self) -> Dict[str, Any]:
        return {"type": self.type, "external_id": self.external_id, "source": REMOTE_SOURCE}
