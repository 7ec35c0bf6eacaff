# Twist SDK — Python client for the Twist REST API
# Copyright (C) 2025–2026 Neven Kordic <neven@broodlink.ai>
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Translation between the wire format and the internal format.

The wire uses snake_case keys and Unix-epoch seconds in ``*_ts`` fields.
Internally keys are camelCase and timestamps are timezone-aware
:class:`~datetime.datetime` values under the key without the suffix::

    >>> from_wire({"channel_id": 1, "created_ts": 0})
    {'channelId': 1, 'created': datetime.datetime(1970, 1, 1, 0, 0, tzinfo=datetime.timezone.utc)}
    >>> to_wire({"channelId": 1})
    {'channel_id': 1}

The two functions are inverse for mappings whose datetimes sit directly under
a key. A datetime with no key of its own, such as a list element
(``{"times": [dt]}``), goes out as a bare number and reads back as that
number, since only a ``_ts`` key marks a timestamp on the wire.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any

TIMESTAMP_SUFFIX = "_ts"

_UPPER = re.compile(r"(?<!^)([A-Z])")


def camel_to_snake(key: str) -> str:
    return _UPPER.sub(r"_\1", key).lower()


def snake_to_camel(key: str) -> str:
    parts = [p for p in key.split("_") if p]
    if not parts:
        return key
    head, *tail = parts
    return head[:1].lower() + head[1:] + "".join(p[:1].upper() + p[1:] for p in tail)


def timestamp_to_datetime(timestamp: int | float) -> datetime:
    return datetime.fromtimestamp(timestamp, tz=timezone.utc)


def datetime_to_timestamp(value: datetime) -> int | float:
    """Seconds since the epoch; naive datetimes are taken as UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    ts = value.timestamp()
    return int(ts) if ts.is_integer() else ts


def _is_timestamp(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def to_wire(value: Any) -> Any:
    """Recursively convert an internal-format value to the wire format."""
    if isinstance(value, Mapping):
        result: dict[str, Any] = {}
        for key, item in value.items():
            wire_key = camel_to_snake(key) if isinstance(key, str) else key
            if isinstance(item, datetime):
                result[wire_key + TIMESTAMP_SUFFIX] = datetime_to_timestamp(item)
            else:
                result[wire_key] = to_wire(item)
        return result
    if isinstance(value, (list, tuple)):
        return [to_wire(item) for item in value]
    if isinstance(value, datetime):
        return datetime_to_timestamp(value)
    return value


def from_wire(value: Any) -> Any:
    """Recursively convert a wire-format value to the internal format."""
    if isinstance(value, Mapping):
        result: dict[str, Any] = {}
        for key, item in value.items():
            if not isinstance(key, str):
                result[key] = from_wire(item)
            elif key.endswith(TIMESTAMP_SUFFIX) and (item is None or _is_timestamp(item)):
                internal_key = snake_to_camel(key[: -len(TIMESTAMP_SUFFIX)])
                result[internal_key] = None if item is None else timestamp_to_datetime(item)
            else:
                result[snake_to_camel(key)] = from_wire(item)
        return result
    if isinstance(value, list):
        return [from_wire(item) for item in value]
    return value
