#!/usr/bin/env python3
import json
import unittest
from datetime import datetime, timezone
from types import MappingProxyType
from unittest.mock import Mock, patch

from webhook_bridge.config import Configuration, DestinationConfig
from webhook_bridge.constants import COLOR_ORANGE
from webhook_bridge.controller import create_app


FIXED_NOW = datetime(2030, 6, 1, 12, 0, 0, tzinfo=timezone.utc)

GRAYLOG_PAYLOAD = {
    "event_definition_id": "5f1a2b3c",
    "event_definition_type": "aggregation-v1",
    "event_definition_title": "Disk usage",
    "event_trigger_id": "01HZY",
    "event_timestamp": "2024-01-01T00:00:00Z",
    "event_message": "disk full",
    "priority": "2",
    "alert": True,
    "fields": {"mount": "/"},
    "source": "host1",
}


def make_app(platform="mattermost"):
    config = Configuration(destination=DestinationConfig(
        webhook_url="https://chat.example.com/hooks/abc",
        platform=platform,
        channel="#alerts",
        destinations=MappingProxyType({"2": "#errors"}),
    ))
    app = create_app(config, clock=lambda: FIXED_NOW)
    app.testing = True
    return app


class TestWebhookEndpoint(unittest.TestCase):
    def setUp(self):
        self.client = make_app().test_client()

    @patch('webhook_bridge.services.requests.post')
    def test_end_to_end(self, mock_post):
        mock_post.return_value = Mock(status_code=200, text="ok")
        resp = self.client.post('/webhook', data=json.dumps(GRAYLOG_PAYLOAD), content_type='application/json')
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.get_json(), {"status": "ok"})

        payload = mock_post.call_args.kwargs["json"]
        self.assertIn("[ERROR] disk full", payload["text"])
        self.assertEqual(payload["channel"], "#errors")
        attachment = payload["attachments"][0]
        self.assertEqual(attachment["color"], COLOR_ORANGE)
        self.assertIn({"title": "Source", "value": "host1", "short": True}, attachment["fields"])
        self.assertIn({"title": "Time", "value": "2024-01-01T00:00:00Z", "short": True}, attachment["fields"])

    @patch('webhook_bridge.services.requests.post')
    def test_body_without_json_content_type(self, mock_post):
        mock_post.return_value = Mock(status_code=200, text="ok")
        resp = self.client.post('/webhook', data=b'{}', content_type='text/plain')
        self.assertEqual(resp.status_code, 200)
        payload = mock_post.call_args.kwargs["json"]
        self.assertEqual(payload["text"], "[UNKNOWN] No message available")
        self.assertEqual(payload["channel"], "#alerts")

    @patch('webhook_bridge.services.requests.post')
    def test_huge_numeric_level_is_delivered(self, mock_post):
        mock_post.return_value = Mock(status_code=200, text="ok")
        resp = self.client.post('/webhook', data=b'{"level": ' + b'9' * 400 + b'}', content_type='application/json')
        self.assertEqual(resp.status_code, 200)
        payload = mock_post.call_args.kwargs["json"]
        self.assertEqual(payload["text"], "[UNKNOWN] No message available")

    @patch('webhook_bridge.services.requests.post')
    def test_unparseable_body_returns_400(self, mock_post):
        for body in [b'not json', b'[1, 2]']:
            resp = self.client.post('/webhook', data=body, content_type='application/json')
            self.assertEqual(resp.status_code, 400)
        mock_post.assert_not_called()

    @patch('webhook_bridge.services.requests.post')
    def test_delivery_failure_returns_500(self, mock_post):
        mock_post.return_value = Mock(status_code=502, text="bad gateway")
        resp = self.client.post('/webhook', data=json.dumps(GRAYLOG_PAYLOAD), content_type='application/json')
        self.assertEqual(resp.status_code, 500)
        self.assertEqual(mock_post.call_count, 1)

    def test_wrong_method_returns_405(self):
        self.assertEqual(self.client.get('/webhook').status_code, 405)
        self.assertEqual(self.client.put('/webhook', data=b'{}').status_code, 405)

    def test_injected_client(self):
        fake_client = Mock()
        app = create_app(make_app().config["BRIDGE_CONFIG"], client=fake_client, clock=lambda: FIXED_NOW)
        resp = app.test_client().post('/webhook', data=b'{"message": "hello", "level": 6}')
        self.assertEqual(resp.status_code, 200)
        payload = fake_client.post_message.call_args.args[0]
        self.assertEqual(payload["text"], "[DEBUG] hello")
        self.assertEqual(payload["attachments"][0]["ts"], int(FIXED_NOW.timestamp()))


class TestAuxEndpoints(unittest.TestCase):
    def setUp(self):
        self.client = make_app(platform="slack").test_client()

    def test_health(self):
        resp = self.client.get('/health')
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.get_json(), {"status": "healthy"})
        self.assertEqual(self.client.post('/health').status_code, 405)

    def test_root_banner(self):
        resp = self.client.get('/')
        self.assertEqual(resp.status_code, 200)
        self.assertTrue(resp.content_type.startswith('text/plain'))
        text = resp.get_data(as_text=True)
        self.assertIn("Graylog Webhook Service v", text)
        self.assertIn("POST /webhook", text)

    def test_unknown_path_404(self):
        self.assertEqual(self.client.get('/nope').status_code, 404)


if __name__ == '__main__':
    unittest.main()
