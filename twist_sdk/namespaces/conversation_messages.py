# Twist SDK — Python client for the Twist REST API
# Copyright (C) 2025–2026 Neven Kordic <neven@broodlink.ai>
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Conversation messages namespace."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Awaitable, Optional

from .base import BaseNamespace, compact, whole_seconds
from ..consts.endpoints import ENDPOINT_CONVERSATION_MESSAGES
from ..models import ConversationMessage


class ConversationMessagesNamespace(BaseNamespace):

    def get_messages(
        self,
        conversation_id: int,
        *,
        newer_than: Optional[datetime] = None,
        older_than: Optional[datetime] = None,
        limit: Optional[int] = None,
        cursor: Optional[str] = None,
    ) -> Awaitable[list[ConversationMessage]]:
        params = compact({
            "conversationId": conversation_id,
            "newerThan": whole_seconds(newer_than) if newer_than else None,
            "olderThan": whole_seconds(older_than) if older_than else None,
            "limit": limit,
            "cursor": cursor,
        })
        return self._call(
            "GET", f"{ENDPOINT_CONVERSATION_MESSAGES}/get", params, list[ConversationMessage]
        )

    def get_message(self, message_id: int) -> Awaitable[ConversationMessage]:
        return self._call(
            "GET", f"{ENDPOINT_CONVERSATION_MESSAGES}/getone", {"id": message_id}, ConversationMessage
        )

    def create_message(
        self,
        conversation_id: int,
        content: str,
        *,
        attachments: Optional[list[Any]] = None,
        actions: Optional[list[Any]] = None,
    ) -> Awaitable[ConversationMessage]:
        params = compact({
            "conversationId": conversation_id,
            "content": content,
            "attachments": attachments,
            "actions": actions,
        })
        return self._call("POST", f"{ENDPOINT_CONVERSATION_MESSAGES}/add", params, ConversationMessage)

    def update_message(
        self, message_id: int, content: str, *, attachments: Optional[list[Any]] = None
    ) -> Awaitable[ConversationMessage]:
        params = compact({"id": message_id, "content": content, "attachments": attachments})
        return self._call(
            "POST", f"{ENDPOINT_CONVERSATION_MESSAGES}/update", params, ConversationMessage
        )

    def delete_message(self, message_id: int) -> Awaitable[Any]:
        return self._call("POST", f"{ENDPOINT_CONVERSATION_MESSAGES}/remove", {"id": message_id})
