# Twist SDK — Python client for the Twist REST API
# Copyright (C) 2025–2026 Neven Kordic <neven@broodlink.ai>
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Threads namespace: channel threads and their read state."""

from __future__ import annotations

from typing import Any, Awaitable, Optional

from .base import BaseNamespace, compact
from ..consts.endpoints import ENDPOINT_THREADS
from ..models import Thread, UnreadThread


class ThreadsNamespace(BaseNamespace):

    def get_threads(
        self,
        workspace_id: int,
        channel_id: Optional[int] = None,
        archived: Optional[bool] = None,
    ) -> Awaitable[list[Thread]]:
        params = compact({"workspaceId": workspace_id, "channelId": channel_id, "archived": archived})
        return self._call("GET", f"{ENDPOINT_THREADS}/get", params, list[Thread])

    def get_thread(self, thread_id: int) -> Awaitable[Thread]:
        return self._call("GET", f"{ENDPOINT_THREADS}/getone", {"id": thread_id}, Thread)

    def create_thread(
        self,
        channel_id: int,
        title: str,
        content: str,
        *,
        recipients: Optional[list[int]] = None,
        groups: Optional[list[int]] = None,
        temp_id: Optional[int] = None,
    ) -> Awaitable[Thread]:
        params = compact({
            "channelId": channel_id,
            "title": title,
            "content": content,
            "recipients": recipients,
            "groups": groups,
            "tempId": temp_id,
        })
        return self._call("POST", f"{ENDPOINT_THREADS}/add", params, Thread)

    def update_thread(
        self, thread_id: int, *, title: Optional[str] = None, content: Optional[str] = None
    ) -> Awaitable[Thread]:
        params = compact({"id": thread_id, "title": title, "content": content})
        return self._call("POST", f"{ENDPOINT_THREADS}/update", params, Thread)

    def delete_thread(self, thread_id: int) -> Awaitable[Any]:
        return self._call("POST", f"{ENDPOINT_THREADS}/remove", {"id": thread_id})

    def archive_thread(self, thread_id: int) -> Awaitable[Any]:
        return self._call("POST", f"{ENDPOINT_THREADS}/archive", {"id": thread_id})

    def unarchive_thread(self, thread_id: int) -> Awaitable[Any]:
        return self._call("POST", f"{ENDPOINT_THREADS}/unarchive", {"id": thread_id})

    def star_thread(self, thread_id: int) -> Awaitable[Any]:
        return self._call("POST", f"{ENDPOINT_THREADS}/star", {"id": thread_id})

    def unstar_thread(self, thread_id: int) -> Awaitable[Any]:
        return self._call("POST", f"{ENDPOINT_THREADS}/unstar", {"id": thread_id})

    def mark_read(self, thread_id: int) -> Awaitable[Any]:
        return self._call("POST", f"{ENDPOINT_THREADS}/mark_read", {"id": thread_id})

    def mark_all_read(self, workspace_id: int) -> Awaitable[Any]:
        return self._call("POST", f"{ENDPOINT_THREADS}/mark_all_read", {"workspaceId": workspace_id})

    def clear_unread(self, thread_id: int) -> Awaitable[Any]:
        return self._call("POST", f"{ENDPOINT_THREADS}/clear_unread", {"id": thread_id})

    def get_unread(self, workspace_id: int) -> Awaitable[list[UnreadThread]]:
        params = {"workspaceId": workspace_id}
        return self._call("GET", f"{ENDPOINT_THREADS}/get_unread", params, list[UnreadThread])
