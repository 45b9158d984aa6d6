import logging
import sys

from webhook_relay.config import Settings
from webhook_relay.constants import APP_PORT, DEBUG_MODE
from webhook_relay.controller import create_app
from webhook_relay.exceptions import ConfigError

logging.basicConfig(
    level=logging.DEBUG if DEBUG_MODE else logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger("webhook_relay")

try:
    settings = Settings.from_env()
except ConfigError as exc:
    logger.critical("%s", exc)
    sys.exit(1)

app = create_app(settings)

if __name__ == '__main__':
    logger.info("Starting server on :%s", APP_PORT)
    app.run(host='0.0.0.0', port=APP_PORT, debug=DEBUG_MODE, use_reloader=False)
