import logging
from typing import Any, Dict

import requests

from .constants import ERROR_BODY_SNIPPET_MAX, WEBHOOK_TIMEOUT_SECONDS
from .exceptions import DeliveryError
from .utils import truncate

logger = logging.getLogger(__name__)


class WebhookClient:
    """Envia payloads JSON para o incoming webhook do Slack/Mattermost, sem retry."""

    def __init__(self, webhook_url: str, platform: str, timeout: float = WEBHOOK_TIMEOUT_SECONDS):
        self.webhook_url = webhook_url
        self.platform = platform
        self.timeout = timeout

    def post_message(self, payload: Dict[str, Any]) -> requests.Response:
        try:
            resp = requests.post(
                self.webhook_url,
                json=payload,
                headers={"Content-Type": "application/json"},
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            raise DeliveryError(f"failed to post message: {exc}") from exc

        logger.debug("%s response status=%s", self.platform, resp.status_code)

        if resp.status_code < 200 or resp.status_code >= 300:
            body = truncate(resp.text or "", ERROR_BODY_SNIPPET_MAX)
            raise DeliveryError(
                f"{self.platform} returned status {resp.status_code}: {body}",
                status_code=resp.status_code,
                body=body,
            )
        return resp
