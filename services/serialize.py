"""
JSON-safe serialization of AWS responses.

Some responses (S3 in particular) carry streaming bodies, and responses
assembled by hooks can reference themselves. Neither survives emission, so
both are stripped before the payload leaves the block.
"""
import base64
import datetime as dt
from decimal import Decimal
from typing import Any, Optional, Set
from botocore.eventstream import EventStream
from botocore.response import StreamingBody

_STRIP = object()


def _is_stream(value: Any) -> bool:
    if isinstance(value, (StreamingBody, EventStream)):
        return True
    return callable(getattr(value, 'read', None))


def _serialize_bytes(value: bytes) -> str:
    try:
        return value.decode('utf-8')
    except UnicodeDecodeError:
        return base64.b64encode(value).decode('ascii')


def _serialize(value: Any, seen: Set[int]) -> Any:
    if value is None or isinstance(value, (str, bool, int, float)):
        return value
    if isinstance(value, (dt.datetime, dt.date)):
        return value.isoformat()
    if isinstance(value, Decimal):
        return int(value) if value == value.to_integral_value() else float(value)
    if isinstance(value, (bytes, bytearray)):
        return _serialize_bytes(bytes(value))
    if _is_stream(value):
        return _STRIP

    if isinstance(value, (dict, list, tuple, set, frozenset)):
        if id(value) in seen:
            return _STRIP
        seen.add(id(value))
        try:
            if isinstance(value, dict):
                result = {}
                for key, item in value.items():
                    serialized = _serialize(item, seen)
                    if serialized is not _STRIP:
                        result[str(key)] = serialized
                return result
            items = (_serialize(item, seen) for item in value)
            return [item for item in items if item is not _STRIP]
        finally:
            # Only ancestors count as cycles; shared siblings are kept
            seen.discard(id(value))

    return str(value)


def serialize_aws_response(response: Any) -> Optional[Any]:
    """
    Return a copy of ``response`` safe to emit as a JSON event.

    Streams and circular references are dropped, timestamps become ISO-8601
    strings, bytes become text (base64 when not UTF-8) and decimals become
    numbers.

    Args:
        response: Raw SDK response

    Returns:
        The serialized response, or None for a None response
    """
    serialized = _serialize(response, set())
    if serialized is _STRIP:
        return None
    return serialized
