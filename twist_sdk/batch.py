# Twist SDK — Python client for the Twist REST API
# Copyright (C) 2025–2026 Neven Kordic <neven@broodlink.ai>
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Batch execution: many logical API calls in one HTTP request.

Calls are recorded through a facade that exposes the same namespaces as the
client but captures each call instead of sending it::

    async with AsyncTwistClient(token) as client:
        batch = client.new_batch()
        first = batch.add(lambda c: c.workspace_users.get_user_by_id(1, 456))
        second = batch.add(lambda c: c.channels.get_channel(42))
        results = await batch.execute()

        user = await first          # raises if that item failed
        print(results[1].ok, results[1].data)

The batch endpoint answers positionally: reply ``i`` belongs to request ``i``.
No request id is round-tripped, so a reordering upstream would go unnoticed.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Awaitable, Callable, Generic, Optional, TypeVar, Union

from pydantic import BaseModel, ValidationError

from .case_conversion import to_wire
from .consts.endpoints import API_VERSION, ENDPOINT_BATCH
from .descriptors import CallDescriptor
from .errors import TwistApiError, TwistError, TwistProtocolError, TwistUsageError
from .rest_client import _decode_error_body, decode_body, to_internal

if TYPE_CHECKING:
    from .rest_client import RestClient

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class BatchResponse(Generic[T]):
    """Outcome of one item in a batch."""

    code: int
    headers: dict[str, str] = field(default_factory=dict)
    data: Optional[T] = None
    error: Optional[TwistError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class BatchReplyItem(BaseModel):
    code: int
    headers: Union[str, dict[str, Any], None] = ""
    body: Optional[str] = None


@dataclass
class _PendingCall:
    index: int
    descriptor: CallDescriptor
    future: asyncio.Future


def parse_batch_headers(raw: Union[str, Mapping[str, Any], None]) -> dict[str, str]:
    """Decode a ``Name: value`` header blob, one header per line."""
    if not raw:
        return {}
    if isinstance(raw, Mapping):
        return {str(k): str(v) for k, v in raw.items()}
    headers: dict[str, str] = {}
    for line in raw.splitlines():
        name, sep, value = line.partition(":")
        if sep and name.strip():
            headers[name.strip()] = value.strip()
    return headers


def _reject(future: asyncio.Future, exc: BaseException) -> None:
    if future.done():
        return
    future.set_exception(exc)
    # The same error is reported in the outcome list; mark it retrieved so an
    # unawaited future does not log "exception was never retrieved".
    future.exception()


def _resolve(future: asyncio.Future, value: Any) -> None:
    if not future.done():
        future.set_result(value)


class BatchBuilder:
    """Records call descriptors and executes them in a single request.

    A builder is single-use: ``add`` after ``execute``, or a second
    ``execute``, raises :class:`TwistUsageError`.
    """

    def __init__(self, rest: RestClient, facade_factory: Callable[[BatchBuilder], Any]) -> None:
        self._rest = rest
        self._facade = facade_factory(self)
        self._pending: list[_PendingCall] = []
        self._executed = False

    def __len__(self) -> int:
        return len(self._pending)

    @property
    def executed(self) -> bool:
        return self._executed

    def _ensure_open(self) -> None:
        if self._executed:
            raise TwistUsageError("batch has already been executed; create a new batch")

    def dispatch(self, descriptor: CallDescriptor) -> asyncio.Future:
        """Capture ``descriptor``; the returned future settles on ``execute``."""
        self._ensure_open()
        future = asyncio.get_running_loop().create_future()
        self._pending.append(_PendingCall(len(self._pending), descriptor, future))
        return future

    def add_descriptor(self, descriptor: CallDescriptor) -> asyncio.Future:
        return self.dispatch(descriptor)

    def add(self, factory: Callable[[Any], Awaitable[T]]) -> asyncio.Future:
        """Record the single API call that ``factory`` makes on the facade."""
        self._ensure_open()
        before = len(self._pending)
        factory(self._facade)
        recorded = len(self._pending) - before
        if recorded != 1:
            for call in self._pending[before:]:
                call.future.cancel()
            del self._pending[before:]
            raise TwistUsageError(f"batch factory must make exactly one API call, made {recorded}")
        return self._pending[-1].future

    def _serialize(self, descriptor: CallDescriptor) -> dict[str, Any]:
        item: dict[str, Any] = {
            "method": descriptor.method,
            "path": f"/api/{descriptor.api_version}/{descriptor.path.lstrip('/')}",
        }
        if descriptor.params is not None:
            item["params"] = to_wire(descriptor.params)
        return item

    def _decode_results(self, body: Any, expected: int) -> list[BatchReplyItem]:
        raw = body.get("results") if isinstance(body, Mapping) else body
        if not isinstance(raw, list):
            raise TwistProtocolError("batch reply has no result list", response_data=body)
        if len(raw) != expected:
            raise TwistProtocolError(
                f"batch reply has {len(raw)} results for {expected} requests",
                response_data=body,
            )
        try:
            return [BatchReplyItem.model_validate(item) for item in raw]
        except ValidationError as e:
            raise TwistProtocolError("malformed batch reply item", response_data=body) from e

    def _settle(self, call: _PendingCall, item: BatchReplyItem) -> BatchResponse[Any]:
        headers = parse_batch_headers(item.headers)
        try:
            if not 200 <= item.code < 300:
                raise TwistApiError.from_response(item.code, _decode_error_body(item.body))
            try:
                body = decode_body(item.body)
            except ValueError as e:
                raise TwistProtocolError(
                    f"batch item {call.index}: body is not valid JSON", status_code=item.code
                ) from e
            data = call.descriptor.parse(to_internal(body, f"batch item {call.index}"))
        except TwistError as exc:
            logger.warning(
                "batch item %d (%s %s) failed: %s",
                call.index, call.descriptor.method, call.descriptor.path, exc.message,
            )
            _reject(call.future, exc)
            return BatchResponse(item.code, headers, None, exc)
        _resolve(call.future, data)
        return BatchResponse(item.code, headers, data, None)

    async def execute(self) -> list[BatchResponse[Any]]:
        """Send all recorded calls; returns one outcome per call, in order.

        Raises:
            TwistUsageError: the builder was already executed.
            TwistTransportError, TwistApiError: the physical request failed.
            TwistProtocolError: the reply does not match the request count.

        When it raises, every pending future is rejected with the same error.
        No future is left pending once ``execute`` returns or raises.
        """
        self._ensure_open()
        self._executed = True
        pending, self._pending = self._pending, []
        if not pending:
            return []

        requests = [self._serialize(call.descriptor) for call in pending]
        payload: dict[str, Any] = {"requests": requests}
        if all(call.descriptor.method == "GET" for call in pending):
            payload["parallel"] = True

        logger.debug("executing batch of %d requests", len(pending))
        try:
            response = await self._rest.request(
                "POST", ENDPOINT_BATCH, payload, api_version=API_VERSION, convert=False
            )
            items = self._decode_results(response.body, len(pending))
        except TwistError as exc:
            for call in pending:
                _reject(call.future, exc)
            raise
        except asyncio.CancelledError:
            for call in pending:
                call.future.cancel()
            raise

        results: list[BatchResponse[Any]] = []
        try:
            for call, item in zip(pending, items):
                results.append(self._settle(call, item))
        except BaseException:
            unsettled = TwistProtocolError("batch aborted before this item was settled")
            for call in pending[len(results):]:
                _reject(call.future, unsettled)
            raise
        return results
