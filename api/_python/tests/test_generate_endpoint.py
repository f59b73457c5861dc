"""
Tests for the /api/schedule/generate HTTP function.
"""

import importlib.util
import io
import json
from pathlib import Path

import pytest

ENDPOINT_PATH = Path(__file__).parent.parent.parent / "schedule" / "generate.py"


@pytest.fixture(scope="module")
def handler_class():
    spec = importlib.util.spec_from_file_location("schedule_generate", ENDPOINT_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module.handler


def post(handler_class, body: bytes) -> tuple[int, dict]:
    """Drive do_POST without a socket, returning (status, json body)."""
    handler = handler_class.__new__(handler_class)
    handler.headers = {"Content-Length": str(len(body))}
    handler.rfile = io.BytesIO(body)
    handler.wfile = io.BytesIO()

    sent = {}
    handler.send_response = lambda code: sent.setdefault("status", code)
    handler.send_header = lambda name, value: None
    handler.end_headers = lambda: None

    handler.do_POST()
    return sent["status"], json.loads(handler.wfile.getvalue())


class TestGenerateEndpoint:
    def test_success(self, handler_class):
        body = json.dumps(
            {
                "wake_time": "06:00",
                "policy": {
                    "default_wake_window": 1.5,
                    "default_nap_duration": 0.5,
                    "bedtime": "19:00",
                },
                "naps": [{"id": "n1", "start_time": "13:00"}],
            }
        ).encode()

        status, data = post(handler_class, body)

        assert status == 200
        nap = next(e for e in data["events"] if e["id"] == "n1")
        assert nap["status"] == "in-progress"
        assert nap["end"] == 13 * 60 + 30

    def test_invalid_json(self, handler_class):
        status, data = post(handler_class, b"{not json")
        assert status == 400
        assert data["error"] == "Invalid JSON in request body"

    def test_missing_policy(self, handler_class):
        status, data = post(handler_class, json.dumps({"wake_time": "06:00"}).encode())
        assert status == 400
        assert "policy" in data["error"]

    def test_invalid_policy_value(self, handler_class):
        body = json.dumps(
            {
                "policy": {
                    "default_wake_window": 0,
                    "default_nap_duration": 0.5,
                    "bedtime": "19:00",
                }
            }
        ).encode()

        status, data = post(handler_class, body)
        assert status == 400
        assert "default_wake_window" in data["error"]
