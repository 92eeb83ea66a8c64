import re
from typing import Any

# Base64 image payloads make verbose request logs unreadable; long runs are shortened.
BASE64_RUN_PATTERN = re.compile(r"[A-Za-z0-9+/]{120,}={0,2}")
BASE64_KEYS = {
    "base64",
    "base64_images",
}
KEEP_PREFIX = 16


def _shorten(match: re.Match) -> str:
    run = match.group(0)
    return f"{run[:KEEP_PREFIX]}...[{len(run)} chars]"


def redact_text(text: str) -> str:
    """
    Shortens embedded base64 blobs inside a string (e.g. a serialized JSON body).
    """
    if not text:
        return text
    return BASE64_RUN_PATTERN.sub(_shorten, text)


def redact_value(value: Any) -> Any:
    """
    Recursive helper to redact values in dicts/lists.
    """
    if isinstance(value, str):
        return redact_text(value)
    elif isinstance(value, dict):
        return redact_dict(value)
    elif isinstance(value, list):
        return [redact_value(item) for item in value]
    return value


def redact_dict(obj: dict[str, Any]) -> dict[str, Any]:
    """
    Replaces image payload keys with a size marker and shortens base64 found elsewhere.
    """
    new_obj = {}
    for k, v in obj.items():
        if str(k).lower() in BASE64_KEYS and v:
            size = sum(len(item) for item in v) if isinstance(v, list) else len(str(v))
            new_obj[k] = f"[{size} base64 chars]"
        else:
            new_obj[k] = redact_value(v)
    return new_obj


def redaction_processor(
    logger: Any,  # noqa: ARG001
    method_name: str,  # noqa: ARG001
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Structlog processor applying `redact_value` to every field of the event."""
    return {key: redact_value(value) for key, value in event_dict.items()}
