import logging

import httpx
import pytest

from flownet import LogLevel, NotFoundError, Request
from flownet._utils._logger import MAX_LOGGED_BODY, FlowNetLogger


@pytest.fixture
def resolved(base_url: str, secret: str):
    return Request(
        path="/catches",
        method="POST",
        body={"species": "pike"},
        headers={"Cookie": "session=1"},
    ).resolve(base_url, auth_token=secret)


def _response(status_code: int = 200, content: bytes = b"{}") -> httpx.Response:
    return httpx.Response(
        status_code,
        content=content,
        request=httpx.Request("POST", "https://api.example.com/catches"),
    )


class TestLogRequest:
    def test_off_logs_nothing(self, caplog: pytest.LogCaptureFixture, resolved):
        caplog.set_level(logging.DEBUG, logger="flownet")

        FlowNetLogger(LogLevel.OFF).log_request(resolved)

        assert caplog.records == []

    def test_info_logs_method_and_url_only(
        self, caplog: pytest.LogCaptureFixture, resolved
    ):
        caplog.set_level(logging.DEBUG, logger="flownet")

        FlowNetLogger(LogLevel.INFO).log_request(resolved)

        assert caplog.messages == [
            "[FlowNet] Request: POST https://api.example.com/catches"
        ]

    def test_debug_logs_redacted_headers_and_curl(
        self, caplog: pytest.LogCaptureFixture, resolved, secret: str
    ):
        caplog.set_level(logging.DEBUG, logger="flownet")

        FlowNetLogger(LogLevel.DEBUG).log_request(resolved)

        assert len(caplog.messages) == 3
        headers_message, curl_message = caplog.messages[1], caplog.messages[2]
        assert "'Authorization': 'Bearer ***'" in headers_message
        assert curl_message.startswith('cURL:\ncurl "https://api.example.com/catches"')
        assert "-X POST" in curl_message
        assert "-H 'Authorization: Bearer ***'" in curl_message
        assert "Cookie" not in curl_message
        assert "-d '{\"species\":\"pike\"}'" in curl_message
        assert secret not in caplog.text
        assert "session=1" not in caplog.text


class TestLogResponse:
    def test_info_logs_status_line(self, caplog: pytest.LogCaptureFixture):
        caplog.set_level(logging.DEBUG, logger="flownet")

        FlowNetLogger(LogLevel.INFO).log_response(_response(201), b"{}")

        assert caplog.messages == [
            "[FlowNet] Response: 201 POST https://api.example.com/catches"
        ]

    def test_debug_masks_cookies(self, caplog: pytest.LogCaptureFixture):
        caplog.set_level(logging.DEBUG, logger="flownet")
        response = httpx.Response(
            200,
            content=b"{}",
            headers={"Set-Cookie": "session=abc123; Path=/", "X-Trace": "t1"},
            request=httpx.Request("GET", "https://api.example.com/me"),
        )

        FlowNetLogger(LogLevel.DEBUG).log_response(response, b"{}")

        headers_message = caplog.messages[1]
        assert "'set-cookie': '***'" in headers_message
        assert "'x-trace': 't1'" in headers_message
        assert "abc123" not in caplog.text

    def test_debug_logs_truncated_body(self, caplog: pytest.LogCaptureFixture):
        caplog.set_level(logging.DEBUG, logger="flownet")
        body = b"x" * (MAX_LOGGED_BODY + 100)

        FlowNetLogger(LogLevel.DEBUG).log_response(_response(200, body), body)

        body_message = caplog.messages[-1]
        assert body_message.startswith("BODY: xxx")
        assert body_message.endswith(f"... ({len(body)} bytes)")

    def test_off_logs_nothing(self, caplog: pytest.LogCaptureFixture):
        caplog.set_level(logging.DEBUG, logger="flownet")

        FlowNetLogger(LogLevel.OFF).log_response(_response(), b"{}")

        assert caplog.records == []


class TestLogError:
    def test_info_logs_error(self, caplog: pytest.LogCaptureFixture):
        caplog.set_level(logging.DEBUG, logger="flownet")

        FlowNetLogger(LogLevel.INFO).log_error(NotFoundError(404, b"{}"))

        assert caplog.messages == [
            "[FlowNet] Failure: NotFoundError(status_code=404, "
            "description='Not found (404)')"
        ]

    def test_off_logs_nothing(self, caplog: pytest.LogCaptureFixture):
        caplog.set_level(logging.DEBUG, logger="flownet")

        FlowNetLogger(LogLevel.OFF).log_error(NotFoundError(404))

        assert caplog.records == []


def test_log_levels_are_ordered():
    assert LogLevel.OFF < LogLevel.INFO < LogLevel.DEBUG
