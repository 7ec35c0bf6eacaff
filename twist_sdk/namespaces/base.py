# Twist SDK — Python client for the Twist REST API
# Copyright (C) 2025–2026 Neven Kordic <neven@broodlink.ai>
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Base namespace class for type-safe endpoint wrappers."""

from __future__ import annotations

import math
from datetime import datetime
from typing import Any, Awaitable, Mapping, Optional, Protocol

from ..case_conversion import datetime_to_timestamp, timestamp_to_datetime
from ..consts.endpoints import API_VERSION
from ..descriptors import CallDescriptor, HttpMethod, ResponseShape, shape


class Executor(Protocol):
    """Runs a call now (``RestClient``) or records it (``BatchBuilder``)."""

    def dispatch(self, descriptor: CallDescriptor) -> Awaitable[Any]: ...


def compact(params: Mapping[str, Any]) -> dict[str, Any]:
    """Drop optional arguments that were not given."""
    return {k: v for k, v in params.items() if v is not None}


class BaseNamespace:
    """Base class for all namespace wrappers.

    Namespace methods return an awaitable: a coroutine that performs the call
    when bound to a client, or a pending future when bound to a batch.
    """

    api_version: str = API_VERSION

    def __init__(self, executor: Executor) -> None:
        self._x = executor

    def _describe(
        self,
        method: HttpMethod,
        path: str,
        params: Optional[Mapping[str, Any]] = None,
        response: Any = None,
        validator: Optional[ResponseShape] = None,
    ) -> CallDescriptor:
        if validator is None and response is not None:
            validator = shape(response)
        return CallDescriptor(method, path, params, validator, self.api_version)

    def _call(
        self,
        method: HttpMethod,
        path: str,
        params: Optional[Mapping[str, Any]] = None,
        response: Any = None,
        validator: Optional[ResponseShape] = None,
    ) -> Awaitable[Any]:
        return self._x.dispatch(self._describe(method, path, params, response, validator))


def epoch_seconds(value: datetime) -> int:
    """Whole seconds since the epoch, for params the API takes as plain numbers."""
    return math.floor(datetime_to_timestamp(value))


def whole_seconds(value: datetime) -> datetime:
    """``value`` as an aware UTC datetime truncated to the second.

    Used for ``*_ts`` params, which ``to_wire`` sends as epoch seconds.
    """
    return timestamp_to_datetime(epoch_seconds(value))
