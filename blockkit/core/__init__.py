"""Core module pour blockkit."""
from .composition import PLAIN_TEXT, MRKDWN, plain_text, mrkdwn
from .settings import RenderSettings

__all__ = [
    "PLAIN_TEXT",
    "MRKDWN",
    "plain_text",
    "mrkdwn",
    "RenderSettings",
]
