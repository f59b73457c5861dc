#!/usr/bin/env python3
"""
Generate a day's nap schedule from a JSON request file.

Usage: python3 generate_day_schedule.py <request_file.json>

Reads a request ({"wake_time", "policy", "naps", "skipped_slots"}) and
writes {"events": [...]} as JSON to stdout. Errors are written as
{"error": "..."} with exit status 1.
"""

import json
import logging
import sys

# Import naptime modules (assumes api/_python is in path or script is run from there)
from naptime.scheduler import generate_day_schedule
from naptime.serialization import events_to_dicts, parse_generate_request, validate_request

logger = logging.getLogger(__name__)


def run(request_file: str) -> dict:
    """Load the request file and return the response body."""
    with open(request_file) as f:
        data = json.load(f)

    validation_error = validate_request(data)
    if validation_error:
        raise ValueError(validation_error)

    wake_time, policy, naps, skipped = parse_generate_request(data)
    events = generate_day_schedule(wake_time, policy, naps, skipped)
    return {"events": events_to_dicts(events)}


def main() -> None:
    if len(sys.argv) != 2:
        print(json.dumps({"error": "Usage: generate_day_schedule.py <request_file.json>"}))
        sys.exit(1)

    request_file = sys.argv[1]

    try:
        print(json.dumps(run(request_file)))
    except FileNotFoundError:
        print(json.dumps({"error": f"Request file not found: {request_file}"}))
        sys.exit(1)
    except json.JSONDecodeError as e:
        print(json.dumps({"error": f"Invalid JSON in request file: {e}"}))
        sys.exit(1)
    except ValueError as e:
        print(json.dumps({"error": str(e)}))
        sys.exit(1)
    except Exception as e:
        logger.exception("Schedule generation failed for %s", request_file)
        print(json.dumps({"error": f"Schedule generation failed: {e}"}))
        sys.exit(1)


if __name__ == "__main__":
    logging.basicConfig(level=logging.WARNING)
    main()
