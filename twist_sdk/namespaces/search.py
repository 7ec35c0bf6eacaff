# Twist SDK — Python client for the Twist REST API
# Copyright (C) 2025–2026 Neven Kordic <neven@broodlink.ai>
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Search namespace: workspace-wide and scoped full-text search."""

from __future__ import annotations

from typing import Awaitable, Optional

from .base import BaseNamespace, compact
from ..consts.endpoints import ENDPOINT_SEARCH
from ..models import SearchConversationResponse, SearchResponse, SearchThreadResponse


class SearchNamespace(BaseNamespace):

    def search(
        self,
        workspace_id: int,
        query: str,
        *,
        channel_ids: Optional[list[int]] = None,
        author_ids: Optional[list[int]] = None,
        mention_self: Optional[bool] = None,
        date_from: Optional[str] = None,
        date_to: Optional[str] = None,
        limit: Optional[int] = None,
        cursor: Optional[str] = None,
    ) -> Awaitable[SearchResponse]:
        """Search a workspace. ``date_from`` / ``date_to`` are ``YYYY-MM-DD``."""
        params = compact({
            "query": query,
            "workspaceId": workspace_id,
            "channelIds": channel_ids,
            "authorIds": author_ids,
            "mentionSelf": mention_self,
            "dateFrom": date_from,
            "dateTo": date_to,
            "limit": limit,
            "cursor": cursor,
        })
        return self._call("GET", ENDPOINT_SEARCH, params, SearchResponse)

    def search_thread(
        self, thread_id: int, query: str, *, limit: Optional[int] = None, cursor: Optional[str] = None
    ) -> Awaitable[SearchThreadResponse]:
        params = compact({"query": query, "threadId": thread_id, "limit": limit, "cursor": cursor})
        return self._call("GET", f"{ENDPOINT_SEARCH}/thread", params, SearchThreadResponse)

    def search_conversation(
        self,
        conversation_id: int,
        query: str,
        *,
        limit: Optional[int] = None,
        cursor: Optional[str] = None,
    ) -> Awaitable[SearchConversationResponse]:
        params = compact({
            "query": query,
            "conversationId": conversation_id,
            "limit": limit,
            "cursor": cursor,
        })
        return self._call("GET", f"{ENDPOINT_SEARCH}/conversation", params, SearchConversationResponse)
