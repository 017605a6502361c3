"""
Objets texte de composition — wrappers plain_text / mrkdwn communs aux blocs.
"""
from typing import Dict

PLAIN_TEXT = "plain_text"
MRKDWN = "mrkdwn"


def plain_text(text: str) -> Dict[str, str]:
    """{"type": "plain_text", "text": ...}"""
    return {"type": PLAIN_TEXT, "text": text}


def mrkdwn(text: str) -> Dict[str, str]:
    """{"type": "mrkdwn", "text": ...}"""
    return {"type": MRKDWN, "text": text}
