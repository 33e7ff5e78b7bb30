"""
Structured event logging for the HabitTracker application.

Events are written as one JSON object per line on stdout so they can be
collected and filtered by any log shipper. Logging never interrupts the
caller: a failure to serialise an event is reported and swallowed.

Functions:
    log_event: Emit a structured event line
"""

import json
from datetime import datetime, timezone
from typing import Any


def log_event(event_type: str, **data: Any) -> None:
    """
    Log a structured event.

    Args:
        event_type: Short event name, e.g. "COMMAND_APPLIED"
        **data: Additional event fields (camelCase keys)

    Example:
        >>> log_event("COMMAND_IGNORED", reason="unknown_type")
        {"timestamp": "...", "eventType": "COMMAND_IGNORED", "reason": "unknown_type"}
    """
    try:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "eventType": event_type,
        }
        log_data.update(data)

        print(json.dumps(log_data, default=str))

    except Exception as e:
        print(f"Error logging event {event_type}: {e}")
