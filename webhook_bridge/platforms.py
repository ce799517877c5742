"""Serialização do ChatMessage para o JSON de webhook de cada plataforma.

Slack e Mattermost aceitam o mesmo formato de incoming webhook com
attachments; o Mattermost recebe também o author_name. Campos vazios são
omitidos do payload.
"""
from typing import Any, Dict

from .config import DestinationConfig
from .constants import ATTACHMENT_AUTHOR
from .models import ChatMessage


def _build_attachment(message: ChatMessage) -> Dict[str, Any]:
    attachment: Dict[str, Any] = {
        "fallback": message.text,
        "color": message.attachment_color or "",
    }
    if message.title:
        attachment["title"] = message.title
    if message.fields:
        attachment["fields"] = [f.to_dict() for f in message.fields]
    if message.timestamp is not None:
        attachment["ts"] = int(message.timestamp.timestamp())
    return attachment


def _build_base(message: ChatMessage, destination: DestinationConfig) -> Dict[str, Any]:
    payload: Dict[str, Any] = {"text": message.text}
    if message.channel:
        payload["channel"] = message.channel
    if destination.username:
        payload["username"] = destination.username
    if destination.icon_emoji:
        payload["icon_emoji"] = destination.icon_emoji
    return payload


def build_slack_payload(message: ChatMessage, destination: DestinationConfig) -> Dict[str, Any]:
    payload = _build_base(message, destination)
    payload["attachments"] = [_build_attachment(message)]
    return payload


def build_mattermost_payload(message: ChatMessage, destination: DestinationConfig) -> Dict[str, Any]:
    payload = _build_base(message, destination)
    attachment = _build_attachment(message)
    attachment["author_name"] = ATTACHMENT_AUTHOR
    payload["attachments"] = [attachment]
    return payload


PAYLOAD_BUILDERS = {
    "slack": build_slack_payload,
    "mattermost": build_mattermost_payload,
}


def build_payload(message: ChatMessage, destination: DestinationConfig) -> Dict[str, Any]:
    return PAYLOAD_BUILDERS[destination.platform](message, destination)
