import logging
from typing import Optional

from flask import Flask, request

from .config import Settings
from .constants import CORS_HEADERS
from .exceptions import RelayError
from .formatters import format_message
from .services import TelegramRelay

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, relay: Optional[TelegramRelay] = None):
    settings = settings or Settings.from_env()
    relay = relay or TelegramRelay(settings)

    app = Flask(__name__)
    app.config['SETTINGS'] = settings
    app.config['RELAY'] = relay

    @app.after_request
    def add_cors_headers(response):
        # Cabeçalhos CORS apenas quando ALLOWED_CORS_ORIGIN está definido
        if settings.allowed_origin:
            response.headers['Access-Control-Allow-Origin'] = settings.allowed_origin
            for name, value in CORS_HEADERS.items():
                response.headers[name] = value
        return response

    @app.errorhandler(405)
    def method_not_allowed(_exc):
        return 'Invalid request method\n', 405, {'Content-Type': 'text/plain; charset=utf-8'}

    @app.before_request
    def answer_preflight():
        # Preflight responde 200 em qualquer caminho, antes do roteamento gerar 404/405
        if request.method == 'OPTIONS':
            return '', 200
        return None

    @app.route('/', methods=['GET'])
    def health():
        return 'OK\n', 200, {'Content-Type': 'text/plain; charset=utf-8'}

    @app.route('/webhook', methods=['POST'])
    def webhook():
        data = request.get_json(force=True, silent=True)
        if not isinstance(data, dict):
            logger.debug("Corpo inválido recebido em /webhook: %r", request.get_data(as_text=True)[:500])
            return 'Could not parse JSON\n', 400, {'Content-Type': 'text/plain; charset=utf-8'}

        logger.debug("Received data: %s", data)
        message = format_message(data, settings.timing_divisor)

        try:
            relay.send(message)
        except RelayError as exc:
            logger.error("Error sending message to Telegram: %s", exc)
            return 'Error\n', 500, {'Content-Type': 'text/plain; charset=utf-8'}

        return 'OK\n', 200, {'Content-Type': 'text/plain; charset=utf-8'}

    return app
