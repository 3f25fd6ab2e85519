from __future__ import annotations
from datetime import datetime, timezone
from typing import Any, List, Optional
from urllib.parse import quote
import json

def encode_path_segment(s: str) -> str:
    """Percent-encode a single URL path segment ('/' included)."""
    return quote(s, safe="")

def decode_json(body: bytes) -> Any:
    """Parse a JSON body; raises ValueError on empty or malformed input."""
    if not body:
        raise ValueError("empty body")
    try:
        return json.loads(body)
    except RecursionError:
        raise ValueError("JSON nested too deeply") from None

def decode_name_list(body: bytes) -> List[str]:
    """Decode a JSON array of strings, keeping server order."""
    data = decode_json(body)
    if not isinstance(data, list) or not all(isinstance(n, str) for n in data):
        raise ValueError(f"expected a JSON array of strings, got {type(data).__name__}")
    return data

def decode_record(body: bytes, required: str) -> dict:
    """Decode a JSON object that must carry a non-empty string `required` field."""
    data = decode_json(body)
    if not isinstance(data, dict):
        raise ValueError(f"expected a JSON object, got {type(data).__name__}")
    value = data.get(required)
    if not isinstance(value, str) or not value:
        raise ValueError(f"missing or invalid '{required}'")
    return data

def epoch_to_iso8601_utc(epoch: Optional[int | float]) -> Optional[str]:
    """
    Convert epoch to ISO8601 UTC with 'Z'.
    Auto-detect unit (s/ms) by magnitude.
    Returns None for invalid or negative timestamps.
    """
    if not isinstance(epoch, (int, float)) or isinstance(epoch, bool) or epoch < 0:
        return None

    ts = float(epoch)
    if ts >= 10**12:         # milliseconds
        ts /= 1_000.0
    try:
        dt = datetime.fromtimestamp(ts, tz=timezone.utc)
    except (OverflowError, OSError, ValueError):
        return None
    return dt.isoformat().replace("+00:00", "Z")
