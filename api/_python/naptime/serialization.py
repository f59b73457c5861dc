"""
Conversion between plain JSON data and naptime types.

Shared by the HTTP function and the CLI script.
"""

from dataclasses import asdict
from typing import Any

from .types import Event, LoggedNap, SchedulePolicy

REQUIRED_POLICY_FIELDS = ["default_wake_window", "default_nap_duration", "bedtime"]


def to_dict(obj: object) -> object:
    """Convert dataclass instances to dicts recursively."""
    if hasattr(obj, "__dataclass_fields__"):
        return {k: to_dict(v) for k, v in asdict(obj).items()}
    elif isinstance(obj, (list, tuple)):
        return [to_dict(item) for item in obj]
    else:
        return obj


def events_to_dicts(events: list[Event]) -> list[dict[str, Any]]:
    return [to_dict(event) for event in events]


def validate_request(data: Any) -> str | None:
    """Validate request shape, return error message or None if valid."""
    if not isinstance(data, dict):
        return "Request body must be a JSON object"

    policy = data.get("policy")
    if not isinstance(policy, dict):
        return "Missing required field: policy"
    for field in REQUIRED_POLICY_FIELDS:
        if field not in policy:
            return f"Missing required field: policy.{field}"

    naps = data.get("naps", [])
    if not isinstance(naps, list):
        return "naps must be a list"
    for nap in naps:
        if not isinstance(nap, dict) or "id" not in nap or "start_time" not in nap:
            return "Each nap needs an id and a start_time"

    skipped = data.get("skipped_slots", [])
    if not isinstance(skipped, list) or not all(
        isinstance(s, int) and not isinstance(s, bool) and s >= 0 for s in skipped
    ):
        return "skipped_slots must be a list of non-negative integers"

    return None


def policy_from_dict(data: dict[str, Any]) -> SchedulePolicy:
    kwargs = {field: data[field] for field in REQUIRED_POLICY_FIELDS}
    if data.get("typical_wake_time"):
        kwargs["typical_wake_time"] = data["typical_wake_time"]
    return SchedulePolicy(**kwargs)


def nap_from_dict(data: dict[str, Any]) -> LoggedNap:
    return LoggedNap(
        id=str(data["id"]),
        start_time=data["start_time"],
        end_time=data.get("end_time"),
        notes=data.get("notes", ""),
    )


def parse_generate_request(
    data: dict[str, Any],
) -> tuple[str, SchedulePolicy, list[LoggedNap], list[int]]:
    """
    Build generator arguments from a validated request body.

    Returns:
        Tuple of (wake_time, policy, logged_naps, skipped_slots)
    """
    policy = policy_from_dict(data["policy"])
    wake_time = data.get("wake_time") or policy.typical_wake_time
    naps = [nap_from_dict(nap) for nap in data.get("naps", [])]
    return wake_time, policy, naps, list(data.get("skipped_slots", []))
