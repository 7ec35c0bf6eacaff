# Twist SDK — Python client for the Twist REST API
# Copyright (C) 2025–2026 Neven Kordic <neven@broodlink.ai>
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Error taxonomy for the Twist SDK.

Every failure surfaced by the SDK is a :class:`TwistError`. The ``kind``
attribute lets callers branch without ``isinstance`` chains::

    try:
        await client.channels.get_channel(42)
    except TwistError as e:
        if e.kind == "api" and e.status_code == 404:
            ...
"""

from __future__ import annotations

from typing import Any


class TwistError(Exception):
    """Base class for all SDK errors."""

    kind = "error"

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        error_code: Any = None,
        response_data: Any = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.error_code = error_code
        self.response_data = response_data

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind,
            "message": self.message,
            "status_code": self.status_code,
            "error_code": self.error_code,
        }

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r}, status_code={self.status_code!r})"


class TwistTransportError(TwistError):
    """The transport could not complete the exchange (DNS, refused, timeout)."""

    kind = "transport"


class TwistApiError(TwistError):
    """A completed exchange returned a non-2xx status."""

    kind = "api"

    @property
    def error_string(self) -> str | None:
        if isinstance(self.response_data, dict):
            return self.response_data.get("error_string")
        return None

    @classmethod
    def from_response(cls, status_code: int, data: Any) -> TwistApiError:
        """Build an API error from a decoded (wire-format) error body."""
        error_code = None
        message = f"Request failed with status {status_code}"
        if isinstance(data, dict):
            error_code = data.get("error_code")
            if data.get("error_string"):
                message = f"{message}: {data['error_string']}"
        return cls(message, status_code=status_code, error_code=error_code, response_data=data)


class TwistProtocolError(TwistError):
    """The reply does not have the shape the protocol promises."""

    kind = "protocol"


class TwistValidationError(TwistError):
    """A decoded payload failed its declared shape check."""

    kind = "validation"


class TwistUsageError(TwistError):
    """The SDK was used incorrectly (bad arguments, reused batch builder)."""

    kind = "usage"
