import logging
from typing import Optional

from flask import Flask, Response, request

from .alert import Clock, parse_alert
from .config import Configuration, load_config
from .constants import LOG_MESSAGE_MAX_LENGTH, VERSION
from .exceptions import DeliveryError, ParseError
from .formatters import render_message
from .platforms import build_payload
from .services import WebhookClient
from .utils import truncate

logger = logging.getLogger(__name__)


def create_app(config: Optional[Configuration] = None, client: Optional[WebhookClient] = None,
               clock: Optional[Clock] = None):
    if config is None:
        config = load_config()
    if client is None:
        client = WebhookClient(config.destination.webhook_url, config.destination.platform)

    app = Flask(__name__)
    app.config["BRIDGE_CONFIG"] = config

    @app.route('/health', methods=['GET'])
    def health():
        return {'status': 'healthy'}, 200

    @app.route('/', methods=['GET'])
    def root():
        banner = "\n".join([
            f"Graylog Webhook Service v{VERSION}",
            "Supports: Slack and Mattermost",
            "POST /webhook - Receive Graylog alerts",
            "GET  /health  - Health check",
            "",
        ])
        return Response(banner, status=200, mimetype='text/plain')

    @app.route('/webhook', methods=['POST'])
    def webhook():
        body = request.get_data()
        try:
            alert = parse_alert(body)
        except ParseError as exc:
            logger.error("Failed to parse Graylog alert error=%s", exc)
            return Response("Failed to parse alert\n", status=400, mimetype='text/plain')

        logger.info(
            "Received alert event_id=%s severity=%s message=%s",
            alert.event_definition_id,
            alert.severity_name(),
            truncate(alert.display_message(), LOG_MESSAGE_MAX_LENGTH),
        )

        message = render_message(alert, config, clock)
        payload = build_payload(message, config.destination)

        try:
            client.post_message(payload)
        except DeliveryError as exc:
            logger.error(
                "Failed to post to %s error=%s channel=%s",
                config.destination.platform, exc, message.channel,
            )
            return Response("Failed to post message\n", status=500, mimetype='text/plain')

        logger.info(
            "Alert posted to %s event_id=%s channel=%s",
            config.destination.platform, alert.event_definition_id, message.channel,
        )
        return {'status': 'ok'}, 200

    return app
