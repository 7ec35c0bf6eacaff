# Twist SDK — Python client for the Twist REST API
# Copyright (C) 2025–2026 Neven Kordic <neven@broodlink.ai>
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Comments namespace: replies inside threads."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Awaitable, Optional

from .base import BaseNamespace, compact, epoch_seconds
from ..consts.endpoints import ENDPOINT_COMMENTS
from ..models import Comment


class CommentsNamespace(BaseNamespace):

    def get_comments(
        self,
        thread_id: int,
        from_date: Optional[datetime] = None,
        limit: Optional[int] = None,
    ) -> Awaitable[list[Comment]]:
        """Comments of a thread, optionally only those posted since ``from_date``."""
        params = compact({
            "threadId": thread_id,
            "from": epoch_seconds(from_date) if from_date else None,
            "limit": limit,
        })
        return self._call("GET", f"{ENDPOINT_COMMENTS}/get", params, list[Comment])

    def get_comment(self, comment_id: int) -> Awaitable[Comment]:
        return self._call("GET", f"{ENDPOINT_COMMENTS}/getone", {"id": comment_id}, Comment)

    def create_comment(
        self,
        thread_id: int,
        content: str,
        *,
        recipients: Optional[list[int]] = None,
        attachments: Optional[list[Any]] = None,
        actions: Optional[list[Any]] = None,
        temp_id: Optional[int] = None,
    ) -> Awaitable[Comment]:
        params = compact({
            "threadId": thread_id,
            "content": content,
            "recipients": recipients,
            "attachments": attachments,
            "actions": actions,
            "tempId": temp_id,
        })
        return self._call("POST", f"{ENDPOINT_COMMENTS}/add", params, Comment)

    def update_comment(self, comment_id: int, content: str) -> Awaitable[Comment]:
        params = {"id": comment_id, "content": content}
        return self._call("POST", f"{ENDPOINT_COMMENTS}/update", params, Comment)

    def delete_comment(self, comment_id: int) -> Awaitable[Any]:
        return self._call("POST", f"{ENDPOINT_COMMENTS}/remove", {"id": comment_id})

    def mark_position(self, thread_id: int, comment_id: int) -> Awaitable[Any]:
        """Move the read marker of a thread to ``comment_id``."""
        params = {"threadId": thread_id, "commentId": comment_id}
        return self._call("POST", f"{ENDPOINT_COMMENTS}/mark_position", params)
