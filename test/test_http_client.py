"""Tests for the requests-based search client."""

from __future__ import annotations

import json
import sys
import unittest
from pathlib import Path
from unittest.mock import MagicMock, patch

import requests

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from ElasticDSL.clients.http_client import HttpClient, normalize_server_url


class _StubResponse:
    def __init__(self, status_code: int = 200, payload: object = None, headers: dict | None = None) -> None:
        self.status_code = status_code
        self._payload = payload
        self.content = b"" if payload is None else json.dumps(payload).encode("utf-8")
        self.headers = headers or {}

    def json(self) -> object:
        return self._payload


def _client(*responses: object, **kwargs: object) -> tuple[HttpClient, MagicMock]:
    session = MagicMock()
    session.request.side_effect = list(responses)
    return HttpClient("http://es.local:9200/", session=session, **kwargs), session


class TestServerUrl(unittest.TestCase):
    def test_normalization(self) -> None:
        self.assertEqual(normalize_server_url("http://es.local:9200/"), "http://es.local:9200")
        self.assertEqual(normalize_server_url("es.local", 9201), "http://es.local:9201")
        self.assertEqual(normalize_server_url("es.local"), "http://es.local:80")
        self.assertEqual(normalize_server_url("localhost:9200"), "http://localhost:9200")
        self.assertEqual(normalize_server_url("localhost:9200/"), "http://localhost:9200")

    def test_host_port_string_builds_client_url(self) -> None:
        client = HttpClient("es.local:9201", session=MagicMock())

        self.assertEqual(client.url("/_search"), "http://es.local:9201/_search")

    def test_url_joins_relative_paths(self) -> None:
        client, _ = _client()

        self.assertEqual(client.url("twitter/_search"), "http://es.local:9200/twitter/_search")
        self.assertEqual(client.url("/_search"), "http://es.local:9200/_search")

    def test_server_url_can_be_changed(self) -> None:
        client, _ = _client()

        client.server_url("other", 9300)

        self.assertEqual(client.server_url(), "http://other:9300")


class TestRequests(unittest.TestCase):
    def test_post_sends_json_and_calls_on_success(self) -> None:
        client, session = _client(_StubResponse(payload={"hits": {"total": 3}}))

        received = []
        client.post("/twitter/_search", {"query": {"match_all": {}}}, received.append)

        self.assertEqual(received, [{"hits": {"total": 3}}])
        args, kwargs = session.request.call_args
        self.assertEqual(args, ("POST", "http://es.local:9200/twitter/_search"))
        self.assertEqual(json.loads(kwargs["data"]), {"query": {"match_all": {}}})
        self.assertEqual(kwargs["headers"]["Content-Type"], "application/json")

    def test_string_body_is_sent_unchanged(self) -> None:
        client, session = _client(_StubResponse(payload={}))

        client.post("/_search", '{"size":1}')

        self.assertEqual(session.request.call_args.kwargs["data"], '{"size":1}')

    def test_get_stringifies_params(self) -> None:
        client, session = _client(_StubResponse(payload={"status": "green"}))

        result = client.get("/_cluster/health", {"pretty": True, "timeout": 5})

        self.assertEqual(result, {"status": "green"})
        self.assertEqual(session.request.call_args.kwargs["params"], {"pretty": "true", "timeout": "5"})

    def test_head_returns_headers(self) -> None:
        client, _ = _client(_StubResponse(headers={"content-length": "0"}))

        self.assertEqual(client.head("/twitter"), {"content-length": "0"})

    def test_empty_body_decodes_to_none(self) -> None:
        client, _ = _client(_StubResponse())

        self.assertIsNone(client.delete("/twitter"))

    def test_auth_is_set_on_session(self) -> None:
        client, session = _client(auth=("elastic", "secret"))

        self.assertEqual(session.auth, ("elastic", "secret"))
        client.close()
        session.close.assert_called_once()


class TestRetries(unittest.TestCase):
    def test_retryable_status_is_retried(self) -> None:
        client, session = _client(_StubResponse(503), _StubResponse(payload={"ok": True}))

        with patch("ElasticDSL.clients.http_client.time.sleep") as sleep:
            result = client.get("/")

        self.assertEqual(result, {"ok": True})
        self.assertEqual(session.request.call_count, 2)
        sleep.assert_called_once()

    def test_final_failure_goes_to_on_error(self) -> None:
        error = requests.ConnectionError("refused")
        client, session = _client(error, error, error, max_attempts=3)

        errors = []
        with patch("ElasticDSL.clients.http_client.time.sleep"):
            result = client.post("/_search", {}, None, errors.append)

        self.assertIsNone(result)
        self.assertEqual(errors, [error])
        self.assertEqual(session.request.call_count, 3)

    def test_final_failure_without_on_error_is_logged(self) -> None:
        client, _ = _client(requests.Timeout("slow"), max_attempts=1)

        with self.assertLogs("ElasticDSL", level="ERROR") as captured:
            result = client.get("/")

        self.assertIsNone(result)
        self.assertIn("GET / failed", captured.output[0])

    def test_non_retryable_status_is_returned(self) -> None:
        client, session = _client(_StubResponse(404, payload={"error": "IndexMissingException"}))

        result = client.get("/missing/_search")

        self.assertEqual(result, {"error": "IndexMissingException"})
        self.assertEqual(session.request.call_count, 1)


if __name__ == "__main__":
    unittest.main()
