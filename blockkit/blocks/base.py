"""
Bloc de base pour blockkit.
Chaque variante déclare son littéral `type` et implémente `to_mapping()`.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict
from pydantic import BaseModel, ConfigDict


class Block(BaseModel, ABC):
    """
    Bloc de base (classe abstraite, non instanciable).

    Les listes et dicts transmis (elements, element, accessory) sont renvoyés
    par référence dans `to_mapping()` : modifier le dict obtenu modifie aussi
    les sorties suivantes du bloc. Copier le résultat avant de l'altérer.
    """
    model_config = ConfigDict(frozen=True)

    type: str

    @abstractmethod
    def to_mapping(self) -> Dict[str, Any]:
        """Représentation dict du bloc, prête pour json.dumps."""
