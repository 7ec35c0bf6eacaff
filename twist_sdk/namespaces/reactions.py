# Twist SDK — Python client for the Twist REST API
# Copyright (C) 2025–2026 Neven Kordic <neven@broodlink.ai>
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Reactions namespace: emoji reactions on threads, comments and messages."""

from __future__ import annotations

from typing import Any, Awaitable, Optional

from .base import BaseNamespace
from ..consts.endpoints import ENDPOINT_REACTIONS
from ..errors import TwistUsageError


def _target(
    thread_id: Optional[int], comment_id: Optional[int], conversation_message_id: Optional[int]
) -> dict[str, int]:
    given = {
        key: value
        for key, value in (
            ("threadId", thread_id),
            ("commentId", comment_id),
            ("conversationMessageId", conversation_message_id),
        )
        if value is not None
    }
    if len(given) != 1:
        raise TwistUsageError(
            "Exactly one of thread_id, comment_id or conversation_message_id is required"
        )
    return given


class ReactionsNamespace(BaseNamespace):

    def add(
        self,
        emoji: str,
        *,
        thread_id: Optional[int] = None,
        comment_id: Optional[int] = None,
        conversation_message_id: Optional[int] = None,
    ) -> Awaitable[Any]:
        params = {"emoji": emoji, **_target(thread_id, comment_id, conversation_message_id)}
        return self._call("POST", f"{ENDPOINT_REACTIONS}/add", params)

    def remove(
        self,
        emoji: str,
        *,
        thread_id: Optional[int] = None,
        comment_id: Optional[int] = None,
        conversation_message_id: Optional[int] = None,
    ) -> Awaitable[Any]:
        params = {"emoji": emoji, **_target(thread_id, comment_id, conversation_message_id)}
        return self._call("POST", f"{ENDPOINT_REACTIONS}/remove", params)
