import logging
import signal
import sys

from webhook_bridge.config import load_config
from webhook_bridge.constants import DEBUG_MODE, VERSION
from webhook_bridge.controller import create_app
from webhook_bridge.exceptions import ConfigError
from webhook_bridge.logging_config import setup_logging

logger = logging.getLogger("webhook_bridge")


def _handle_sigterm(signum, frame):
    logger.info("Shutdown signal received")
    sys.exit(0)


def main():
    try:
        config = load_config()
        host, port = config.listen_host_port
    except ConfigError as exc:
        setup_logging("error")
        logger.error("Failed to load configuration error=%s", exc)
        sys.exit(1)

    setup_logging(config.server.log_level)
    logger.info(
        "Starting Graylog Webhook Service version=%s listen=%s destination=%s",
        VERSION, config.server.listen_addr, config.destination.platform,
    )

    app = create_app(config)
    signal.signal(signal.SIGTERM, _handle_sigterm)
    try:
        # use_reloader=False evita carregar a configuração duas vezes em DEBUG_MODE
        app.run(host=host, port=port, debug=DEBUG_MODE, use_reloader=False)
    finally:
        logger.info("Server stopped")


if __name__ == '__main__':
    main()
