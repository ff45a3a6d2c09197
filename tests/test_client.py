"""Tests for the requests-based client and the smoke-test harness."""

from unittest.mock import MagicMock

import pytest
import requests

import smoke_test
from message_board_client import DEFAULT_BASE_URL, MessageBoardClient, MessageBoardClientError


def _response(status_code, json_body=None, text=None):
    resp = MagicMock()
    resp.status_code = status_code
    if json_body is not None:
        resp.content = b"x"
        resp.json.return_value = json_body
    elif text is not None:
        resp.content = text.encode()
        resp.text = text
        resp.json.side_effect = ValueError("not json")
    else:
        resp.content = b""
    return resp


class TestMessageBoardClient:
    def test_base_url_from_env(self, monkeypatch):
        monkeypatch.setenv("API_URL", "http://api.local:9000/")
        assert MessageBoardClient().base_url == "http://api.local:9000"

    def test_base_url_default(self, monkeypatch):
        monkeypatch.delenv("API_URL", raising=False)
        assert MessageBoardClient().base_url == DEFAULT_BASE_URL

    def test_create_message_payload(self):
        session = MagicMock()
        session.request.return_value = _response(201, {"id": "1"})
        client = MessageBoardClient(base_url="http://x", session=session)
        status, body = client.create_message("Test User", "hello")
        assert (status, body) == (201, {"id": "1"})
        kwargs = session.request.call_args.kwargs
        assert kwargs["method"] == "POST"
        assert kwargs["url"] == "http://x/api/messages"
        assert kwargs["json"] == {"author": "Test User", "content": "hello"}

    def test_missing_fields_are_omitted(self):
        session = MagicMock()
        session.request.return_value = _response(400, {"error": "Author and content are required"})
        client = MessageBoardClient(base_url="http://x", session=session)
        status, _ = client.create_message(content="Test")
        assert status == 400
        assert session.request.call_args.kwargs["json"] == {"content": "Test"}

    def test_non_json_and_empty_bodies(self):
        session = MagicMock()
        session.request.side_effect = [_response(502, text="Bad Gateway"), _response(204)]
        client = MessageBoardClient(base_url="http://x", session=session)
        assert client.health() == (502, "Bad Gateway")
        assert client.list_messages() == (204, {})

    def test_transport_error_raises(self):
        session = MagicMock()
        session.request.side_effect = requests.ConnectionError("refused")
        client = MessageBoardClient(base_url="http://x", session=session)
        with pytest.raises(MessageBoardClientError):
            client.health()


class FakeBoard:
    """In-process stand-in for the HTTP API used to drive the smoke checks."""

    def __init__(self, broken_validation=False):
        self.messages = []
        self.broken_validation = broken_validation

    def health(self):
        return 200, {"status": "ok"}

    def list_messages(self):
        return 200, list(self.messages)

    def create_message(self, author=None, content=None):
        if not self.broken_validation and (not author or not content):
            return 400, {"error": "Author and content are required"}
        msg = {"id": str(len(self.messages) + 1), "author": author, "content": content, "timestamp": "t"}
        self.messages.append(msg)
        return 201, msg


class TestSmokeChecks:
    def test_all_checks_pass(self, capsys):
        assert smoke_test.run_checks(FakeBoard()) == (len(smoke_test.CHECKS), 0)
        assert "[x]" not in capsys.readouterr().out

    def test_failures_are_counted(self, capsys):
        passed, failed = smoke_test.run_checks(FakeBoard(broken_validation=True))
        assert failed == 2
        assert passed == len(smoke_test.CHECKS) - 2
        assert "without author returns 400" in capsys.readouterr().out

    def test_main_unreachable_server(self, monkeypatch):
        def refuse(self, *args, **kwargs):
            raise requests.ConnectionError("refused")

        monkeypatch.setattr(requests.Session, "request", refuse)
        assert smoke_test.main(["--base-url", "http://127.0.0.1:1"]) == 1
