#!/usr/bin/env python3
import unittest
from unittest.mock import Mock

from webhook_relay.config import Settings
from webhook_relay.controller import create_app
from webhook_relay.exceptions import RelayError
from webhook_relay.services import TelegramRelay


def build_client(allowed_origin=None, timing_divisor=1.0):
    settings = Settings(bot_token="123:ABC", chat_id="42", allowed_origin=allowed_origin, timing_divisor=timing_divisor)
    relay = Mock(spec=TelegramRelay)
    app = create_app(settings, relay=relay)
    app.testing = True
    return app.test_client(), relay


class TestWebhookEndpoint(unittest.TestCase):
    def test_valid_payload_is_relayed(self):
        client, relay = build_client()
        resp = client.post('/webhook', json={"event": "signup", "plan": "pro"})

        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.get_data(as_text=True), "OK\n")
        relay.send.assert_called_once()
        message = relay.send.call_args[0][0]
        self.assertIn("*event:* signup", message)
        self.assertIn("*plan:* pro", message)

    def test_content_type_is_not_required(self):
        client, relay = build_client()
        resp = client.post('/webhook', data='{"a": 1}', content_type='text/plain')
        self.assertEqual(resp.status_code, 200)
        relay.send.assert_called_once()

    def test_malformed_json_returns_400_without_relay(self):
        client, relay = build_client()
        resp = client.post('/webhook', data='{not json', content_type='application/json')

        self.assertEqual(resp.status_code, 400)
        self.assertIn("Could not parse JSON", resp.get_data(as_text=True))
        relay.send.assert_not_called()

    def test_non_object_json_returns_400(self):
        client, relay = build_client()
        for body in ('[1, 2]', '"texto"', 'null', ''):
            resp = client.post('/webhook', data=body, content_type='application/json')
            self.assertEqual(resp.status_code, 400, f"corpo {body!r} deveria ser rejeitado")
        relay.send.assert_not_called()

    def test_non_post_returns_405(self):
        client, relay = build_client()
        for method in (client.get, client.put, client.delete):
            resp = method('/webhook')
            self.assertEqual(resp.status_code, 405)
            self.assertIn("Invalid request method", resp.get_data(as_text=True))
        relay.send.assert_not_called()

    def test_relay_failure_returns_500(self):
        client, relay = build_client()
        relay.send.side_effect = RelayError("failed to send message to Telegram, status code: 400", status_code=400)

        resp = client.post('/webhook', json={"event": "x"})
        self.assertEqual(resp.status_code, 500)
        self.assertEqual(resp.get_data(as_text=True), "Error\n")
        relay.send.assert_called_once()

    def test_timing_payload_reaches_relay_formatted(self):
        client, relay = build_client()
        payload = {"timing": {"navigationStart": 0, "domainLookupStart": 10, "domainLookupEnd": 50}}
        resp = client.post('/webhook', json=payload)

        self.assertEqual(resp.status_code, 200)
        self.assertIn("*DNS Lookup:* 40.00 ms", relay.send.call_args[0][0])

    def test_timing_divisor_comes_from_settings(self):
        client, relay = build_client(timing_divisor=1e6)
        payload = {"timing": {"domainLookupStart": 10_000_000, "domainLookupEnd": 50_000_000}}
        resp = client.post('/webhook', json=payload)

        self.assertEqual(resp.status_code, 200)
        self.assertIn("*DNS Lookup:* 40.00 ms", relay.send.call_args[0][0])

    def test_huge_integer_skips_only_its_interval(self):
        client, relay = build_client()
        body = '{"timing": {"domainLookupStart": 1' + "0" * 400 + ', "domainLookupEnd": 5, "requestStart": 1, "responseStart": 3}}'
        resp = client.post('/webhook', data=body, content_type='application/json')

        self.assertEqual(resp.status_code, 200, "inteiro enorme não pode derrubar a requisição")
        message = relay.send.call_args[0][0]
        self.assertIn("*Request (TTFB):* 2.00 ms", message)
        self.assertNotIn("DNS Lookup", message)


class TestHealthAndCors(unittest.TestCase):
    def test_health(self):
        client, _ = build_client()
        resp = client.get('/')
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.get_data(as_text=True), "OK\n")

    def test_no_cors_headers_without_origin(self):
        client, _ = build_client()
        resp = client.get('/')
        self.assertNotIn('Access-Control-Allow-Origin', resp.headers)

    def test_cors_headers_with_origin(self):
        client, _ = build_client(allowed_origin="https://example.com")
        resp = client.get('/')
        self.assertEqual(resp.headers['Access-Control-Allow-Origin'], "https://example.com")
        self.assertEqual(resp.headers['Access-Control-Allow-Methods'], "GET, POST, OPTIONS")
        self.assertEqual(resp.headers['Access-Control-Allow-Credentials'], "true")

    def test_preflight_options(self):
        client, relay = build_client(allowed_origin="https://example.com")
        resp = client.options('/webhook')
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.headers['Access-Control-Allow-Origin'], "https://example.com")
        relay.send.assert_not_called()

    def test_preflight_on_any_path(self):
        client, relay = build_client(allowed_origin="https://example.com")
        for path in ('/', '/anything', '/deep/nested/path'):
            resp = client.options(path)
            self.assertEqual(resp.status_code, 200, f"preflight em {path} deveria responder 200")
            self.assertEqual(resp.headers['Access-Control-Allow-Origin'], "https://example.com")
        relay.send.assert_not_called()

    def test_unknown_path_still_404(self):
        client, _ = build_client()
        self.assertEqual(client.get('/anything').status_code, 404)

    def test_cors_headers_on_error_responses(self):
        client, _ = build_client(allowed_origin="https://example.com")
        resp = client.post('/webhook', data='oops')
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.headers['Access-Control-Allow-Origin'], "https://example.com")


if __name__ == '__main__':
    unittest.main()
