"""Tests for the Hello World Lambda handler."""

import json
from datetime import UTC, datetime

import pytest
from structlog.testing import capture_logs

from yeojeong_lambda import hello_world
from yeojeong_lambda.hello_world import handler
from yeojeong_lambda.infrastructure.clock import utc_timestamp


def parse_body(response: dict) -> dict:
    return json.loads(response["body"])


class TestHelloWorldHandler:
    def test_empty_event_returns_sentinel_request_id(self):
        response = handler({}, None)

        assert response["statusCode"] == 200
        assert parse_body(response)["requestId"] == "N/A"

    def test_request_id_from_request_context(self):
        response = handler({"requestContext": {"requestId": "abc"}}, None)

        assert parse_body(response)["requestId"] == "abc"

    @pytest.mark.parametrize(
        "event",
        [
            {"requestContext": None},
            {"requestContext": {}},
            {"requestContext": {"requestId": ""}},
            {"requestContext": {"requestId": None}},
        ],
    )
    def test_missing_or_empty_request_id_uses_sentinel(self, event):
        assert parse_body(handler(event, None))["requestId"] == "N/A"

    def test_cors_headers(self):
        headers = handler({}, None)["headers"]

        assert headers == {
            "Content-Type": "application/json",
            "Access-Control-Allow-Origin": "*",
            "Access-Control-Allow-Headers": "Content-Type",
            "Access-Control-Allow-Methods": "OPTIONS,POST,GET",
        }

    def test_body_fields(self):
        body = parse_body(handler({}, None))

        assert set(body) == {"message", "timestamp", "requestId", "environment"}
        assert body["message"] == "Hello from Yeojeong Lambda!"
        assert body["environment"] == hello_world.settings.environment

    def test_body_is_compact_json_string(self):
        body = handler({}, None)["body"]

        assert isinstance(body, str)
        assert body.startswith('{"message":"Hello from Yeojeong Lambda!",')

    def test_timestamp_is_iso8601_utc(self):
        timestamp = parse_body(handler({}, None))["timestamp"]

        assert timestamp.endswith("Z")
        assert datetime.fromisoformat(timestamp).utcoffset().total_seconds() == 0

    def test_environment_from_settings(self, monkeypatch):
        monkeypatch.setattr(hello_world.settings, "environment", "prod")

        assert parse_body(handler({}, None))["environment"] == "prod"

    def test_logs_event_and_response(self):
        event = {"requestContext": {"requestId": "abc"}}

        with capture_logs() as logs:
            response = handler(event, None)

        assert [log["event"] for log in logs] == ["Event received", "Response"]
        assert logs[0]["lambda_event"] == event
        assert logs[1]["response"] == response


class TestUtcTimestamp:
    def test_millisecond_precision_with_z_suffix(self):
        now = datetime(2026, 10, 19, 8, 30, 0, 123456, tzinfo=UTC)

        assert utc_timestamp(now) == "2026-10-19T08:30:00.123Z"
