# Twist SDK — Python client for the Twist REST API
# Copyright (C) 2025–2026 Neven Kordic <neven@broodlink.ai>
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Unexecuted descriptions of single API calls, and their response shapes."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from functools import lru_cache
from types import MappingProxyType
from typing import Any, Callable, Literal, Optional

from pydantic import TypeAdapter, ValidationError

from .consts.endpoints import API_VERSION
from .errors import TwistError, TwistValidationError

HttpMethod = Literal["GET", "POST"]
ResponseShape = Callable[[Any], Any]


@dataclass(frozen=True)
class CallDescriptor:
    """One logical API call: method, path, params and expected response shape.

    ``path`` is relative to the versioned API root (``channels/getone``).
    ``params`` use internal (camelCase) or wire (snake_case) keys; they are
    translated to the wire format when the call is sent.
    """

    method: HttpMethod
    path: str
    params: Optional[Mapping[str, Any]] = None
    response_shape: Optional[ResponseShape] = field(default=None, compare=False)
    api_version: str = API_VERSION

    def __post_init__(self) -> None:
        if self.params is not None and not isinstance(self.params, MappingProxyType):
            object.__setattr__(self, "params", MappingProxyType(dict(self.params)))

    def parse(self, data: Any) -> Any:
        """Run ``data`` (internal format) through the response shape, if any.

        Any non-SDK exception from the shape surfaces as
        :class:`TwistValidationError`.
        """
        if self.response_shape is None:
            return data
        try:
            return self.response_shape(data)
        except ValidationError as e:
            raise TwistValidationError(
                f"{self.method} {self.path}: response failed validation: {e.error_count()} error(s)",
                response_data=data,
            ) from e
        except TwistError:
            raise
        except Exception as e:
            raise TwistValidationError(
                f"{self.method} {self.path}: response shape raised {type(e).__name__}: {e}",
                response_data=data,
            ) from e


@lru_cache(maxsize=None)
def _adapter(tp: Any) -> TypeAdapter:
    return TypeAdapter(tp)


def shape(tp: Any) -> ResponseShape:
    """Validator for ``tp`` (a pydantic model, or e.g. ``list[Channel]``)."""
    return _adapter(tp).validate_python
