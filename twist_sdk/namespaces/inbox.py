# Twist SDK — Python client for the Twist REST API
# Copyright (C) 2025–2026 Neven Kordic <neven@broodlink.ai>
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Inbox namespace.

``since`` and ``until`` bound the inbox window; the API takes them as epoch
seconds under ``since_ts_or_obj_idx`` / ``until_ts_or_obj_idx``.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Awaitable, Optional

from .base import BaseNamespace, compact, epoch_seconds
from ..consts.endpoints import ENDPOINT_INBOX
from ..models import InboxCount, InboxThread


def _window(since: Optional[datetime], until: Optional[datetime]) -> dict[str, Any]:
    return {
        "sinceTsOrObjIdx": epoch_seconds(since) if since else None,
        "untilTsOrObjIdx": epoch_seconds(until) if until else None,
    }


def _count(data: Any) -> int:
    return InboxCount.model_validate(data).data


class InboxNamespace(BaseNamespace):

    def get_inbox(
        self,
        workspace_id: int,
        *,
        since: Optional[datetime] = None,
        until: Optional[datetime] = None,
        limit: Optional[int] = None,
        cursor: Optional[str] = None,
    ) -> Awaitable[list[InboxThread]]:
        params = compact({
            "workspaceId": workspace_id,
            **_window(since, until),
            "limit": limit,
            "cursor": cursor,
        })
        return self._call("GET", f"{ENDPOINT_INBOX}/get", params, list[InboxThread])

    def get_count(self, workspace_id: int) -> Awaitable[int]:
        """Number of threads in the inbox."""
        params = {"workspaceId": workspace_id}
        return self._call("GET", f"{ENDPOINT_INBOX}/get_count", params, validator=_count)

    def archive_thread(self, thread_id: int) -> Awaitable[Any]:
        return self._call("POST", f"{ENDPOINT_INBOX}/archive", {"id": thread_id})

    def unarchive_thread(self, thread_id: int) -> Awaitable[Any]:
        return self._call("POST", f"{ENDPOINT_INBOX}/unarchive", {"id": thread_id})

    def mark_all_read(self, workspace_id: int) -> Awaitable[Any]:
        return self._call("POST", f"{ENDPOINT_INBOX}/mark_all_read", {"workspaceId": workspace_id})

    def archive_all(
        self,
        workspace_id: int,
        *,
        channel_ids: Optional[list[int]] = None,
        since: Optional[datetime] = None,
        until: Optional[datetime] = None,
    ) -> Awaitable[Any]:
        params = compact({"workspaceId": workspace_id, "channelIds": channel_ids, **_window(since, until)})
        return self._call("POST", f"{ENDPOINT_INBOX}/archive_all", params)
