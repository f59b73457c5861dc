"""
Vercel Python Function for nap schedule generation.

This endpoint handles POST requests to /api/schedule/generate and returns
the day's timeline (wake, awake intervals, naps, bedtime) for the given
wake time, schedule policy, logged naps and skipped slots.
"""

from http.server import BaseHTTPRequestHandler
import json
import logging
import sys
from pathlib import Path

# Add the _python directory to the Python path for importing naptime module
sys.path.insert(0, str(Path(__file__).parent.parent / "_python"))

from naptime.scheduler import generate_day_schedule
from naptime.serialization import events_to_dicts, parse_generate_request, validate_request

logger = logging.getLogger(__name__)


class handler(BaseHTTPRequestHandler):
    """HTTP handler for Vercel Python Functions."""

    def do_POST(self):
        """Handle POST requests for schedule generation."""
        try:
            # Read request body
            content_length = int(self.headers.get("Content-Length", 0))
            body = self.rfile.read(content_length)
            data = json.loads(body)

            # Validate input
            validation_error = validate_request(data)
            if validation_error:
                self._send_json_response(400, {"error": validation_error})
                return

            wake_time, policy, naps, skipped = parse_generate_request(data)
            events = generate_day_schedule(wake_time, policy, naps, skipped)

            self._send_json_response(200, {"events": events_to_dicts(events)})

        except json.JSONDecodeError:
            self._send_json_response(400, {"error": "Invalid JSON in request body"})
        except ValueError as e:
            self._send_json_response(400, {"error": str(e)})
        except Exception as e:
            logger.exception("Schedule generation failed")
            self._send_json_response(
                500, {"error": f"Schedule generation failed: {str(e)}"}
            )

    def _send_json_response(self, status_code: int, data: dict):
        """Send a JSON response with the given status code."""
        self.send_response(status_code)
        self.send_header("Content-Type", "application/json")
        self.send_header("Access-Control-Allow-Origin", "*")
        self.end_headers()
        self.wfile.write(json.dumps(data).encode())

    def do_OPTIONS(self):
        """Handle CORS preflight requests."""
        self.send_response(200)
        self.send_header("Access-Control-Allow-Origin", "*")
        self.send_header("Access-Control-Allow-Methods", "POST, OPTIONS")
        self.send_header("Access-Control-Allow-Headers", "Content-Type")
        self.end_headers()
