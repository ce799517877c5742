from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Tuple


@dataclass(frozen=True)
class ChatField:
    title: str
    value: str
    short: bool = True

    def to_dict(self):
        return {"title": self.title, "value": self.value, "short": self.short}


@dataclass(frozen=True)
class ChatMessage:
    """Mensagem de saída independente de plataforma.

    Cada adaptador (Slack, Mattermost) escolhe quais atributos serializa.
    """

    text: str
    attachment_color: Optional[str] = None
    title: Optional[str] = None
    fields: Tuple[ChatField, ...] = ()
    channel: Optional[str] = None
    timestamp: Optional[datetime] = None
