# Twist SDK — Python client for the Twist REST API
# Copyright (C) 2025–2026 Neven Kordic <neven@broodlink.ai>
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Pydantic models for Twist API responses.

Models validate the internal format produced by
:func:`~twist_sdk.case_conversion.from_wire` (camelCase keys, ``datetime``
timestamps) and expose snake_case attributes. All models use
``extra="allow"`` for forward compatibility with new fields.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Literal, Optional, Union

from pydantic import BaseModel, computed_field
from pydantic.alias_generators import to_camel

from ..url_helpers import get_full_twist_url

UserType = Literal["USER", "GUEST", "ADMIN"]
WorkspacePlan = Literal["free", "unlimited"]


class _Base(BaseModel):
    model_config = {"extra": "allow", "alias_generator": to_camel, "populate_by_name": True}


class AvatarUrls(_Base):
    s35: str
    s60: str
    s195: str
    s640: str


class AwayMode(_Base):
    date_from: str
    type: str
    date_to: str


# ── Users ────────────────────────────────────────────────────────────

class _BaseUser(_Base):
    id: int
    name: str
    short_name: str
    first_name: Optional[str] = None
    contact_info: Optional[str] = None
    bot: bool
    profession: Optional[str] = None
    timezone: str
    removed: bool
    avatar_id: Optional[str] = None
    avatar_urls: Optional[AvatarUrls] = None
    away_mode: Optional[AwayMode] = None
    restricted: Optional[bool] = None
    setup_pending: Optional[Union[bool, int]] = None


class User(_BaseUser):
    email: str
    lang: str
    snooze_dnd_start: Optional[str] = None
    snooze_dnd_end: Optional[str] = None
    snoozed: Optional[bool] = None
    snooze_until: Optional[int] = None
    client_id: Optional[str] = None
    comet_channel: Optional[str] = None
    comet_server: Optional[str] = None
    off_days: Optional[list[int]] = None
    default_workspace: Optional[int] = None
    token: Optional[str] = None
    scheduled_banners: Optional[list[str]] = None


class WorkspaceUser(_BaseUser):
    email: Optional[str] = None
    user_type: UserType
    date_format: Optional[str] = None
    feature_flags: Optional[list[str]] = None
    theme: Optional[str] = None
    time_format: Optional[str] = None
    version: int


# ── Workspaces ───────────────────────────────────────────────────────

class Workspace(_Base):
    id: int
    name: str
    creator: int
    created: datetime
    default_channel: Optional[int] = None
    default_conversation: Optional[int] = None
    avatar_id: Optional[str] = None
    avatar_urls: Optional[AvatarUrls] = None
    plan: Optional[WorkspacePlan] = None


# ── Channels ─────────────────────────────────────────────────────────

class Channel(_Base):
    id: int
    name: str
    creator: int
    public: bool
    workspace_id: int
    archived: bool
    created: datetime
    version: int
    description: Optional[str] = None
    user_ids: Optional[list[int]] = None
    color: Optional[int] = None
    use_default_recipients: Optional[bool] = None
    default_groups: Optional[list[int]] = None
    default_recipients: Optional[list[int]] = None
    is_favorited: Optional[bool] = None
    icon: Optional[int] = None
    filters: Optional[dict[str, str]] = None

    @computed_field
    @property
    def url(self) -> str:
        return get_full_twist_url(workspace_id=self.workspace_id, channel_id=self.id)


# ── Comments ─────────────────────────────────────────────────────────

class Comment(_Base):
    id: int
    content: str
    creator: int
    thread_id: int
    channel_id: int
    workspace_id: int
    posted: datetime
    conversation_id: Optional[int] = None
    last_edited: Optional[datetime] = None
    creator_name: Optional[str] = None
    direct_mentions: Optional[list[int]] = None
    direct_group_mentions: Optional[list[int]] = None
    system_message: Optional[Any] = None
    attachments: Optional[list[Any]] = None
    reactions: Optional[dict[str, Any]] = None
    actions: Optional[list[Any]] = None
    obj_index: Optional[int] = None
    recipients: Optional[list[int]] = None
    groups: Optional[list[int]] = None
    to_emails: Optional[list[str]] = None
    deleted: Optional[bool] = None
    deleted_by: Optional[int] = None
    version: Optional[int] = None

    @computed_field
    @property
    def url(self) -> str:
        return get_full_twist_url(
            workspace_id=self.workspace_id,
            channel_id=self.channel_id,
            thread_id=self.thread_id,
            comment_id=self.id,
        )


# ── Threads ──────────────────────────────────────────────────────────

class _ThreadFields(_Base):
    id: int
    title: str
    content: str
    creator: int
    channel_id: int
    workspace_id: int
    comment_count: int
    last_updated: datetime
    posted: datetime
    pinned: bool
    snippet: str
    snippet_creator: int
    starred: bool
    is_archived: bool
    creator_name: Optional[str] = None
    actions: Optional[list[Any]] = None
    attachments: Optional[list[Any]] = None
    direct_group_mentions: Optional[list[int]] = None
    direct_mentions: Optional[list[int]] = None
    groups: Optional[list[int]] = None
    last_edited: Optional[datetime] = None
    last_obj_index: Optional[int] = None
    muted_until: Optional[datetime] = None
    participants: Optional[list[int]] = None
    pinned_date: Optional[datetime] = None
    reactions: Optional[dict[str, Any]] = None
    recipients: Optional[list[int]] = None
    responders: Optional[list[int]] = None
    snippet_mask_avatar_url: Optional[str] = None
    snippet_mask_poster: Optional[Union[int, str]] = None
    system_message: Optional[Any] = None
    to_emails: Optional[list[str]] = None
    is_saved: Optional[bool] = None

    @computed_field
    @property
    def url(self) -> str:
        return get_full_twist_url(
            workspace_id=self.workspace_id, channel_id=self.channel_id, thread_id=self.id
        )


class Thread(_ThreadFields):
    closed: Optional[bool] = None
    in_inbox: Optional[bool] = None
    last_comment: Optional[dict[str, Any]] = None


class InboxThread(_ThreadFields):
    closed: bool
    in_inbox: bool
    last_comment: Optional[Comment] = None
    version: Optional[int] = None


class UnreadThread(_Base):
    thread_id: int
    channel_id: int
    obj_index: int
    direct_mention: bool


class InboxCount(_Base):
    data: int
    version: Optional[int] = None


# ── Groups ───────────────────────────────────────────────────────────

class Group(_Base):
    id: int
    name: str
    workspace_id: int
    user_ids: list[int]
    version: int
    description: Optional[str] = None


# ── Conversations ────────────────────────────────────────────────────

class ConversationMessage(_Base):
    id: int
    content: str
    creator: int
    conversation_id: int
    workspace_id: int
    posted: datetime
    system_message: Optional[Any] = None
    attachments: Optional[list[Any]] = None
    reactions: Optional[dict[str, list[int]]] = None
    actions: Optional[list[Any]] = None
    obj_index: Optional[int] = None
    last_edited: Optional[datetime] = None
    is_deleted: Optional[bool] = None
    direct_group_mentions: Optional[list[int]] = None
    direct_mentions: Optional[list[int]] = None
    version: Optional[int] = None

    @computed_field
    @property
    def url(self) -> str:
        return get_full_twist_url(
            workspace_id=self.workspace_id,
            conversation_id=self.conversation_id,
            message_id=self.id,
        )


class Conversation(_Base):
    id: int
    workspace_id: int
    user_ids: list[int]
    last_obj_index: int
    snippet: str
    snippet_creators: list[int]
    last_active: datetime
    archived: bool
    created: datetime
    creator: int
    message_count: Optional[int] = None
    muted_until: Optional[datetime] = None
    title: Optional[str] = None
    private: Optional[bool] = None
    last_message: Optional[dict[str, Any]] = None

    @computed_field
    @property
    def url(self) -> str:
        return get_full_twist_url(workspace_id=self.workspace_id, conversation_id=self.id)


class UnreadConversation(_Base):
    conversation_id: int
    obj_index: int
    direct_mention: bool


# ── Search ───────────────────────────────────────────────────────────

class SearchResult(_Base):
    id: str
    type: Literal["thread", "comment", "message"]
    snippet: str
    snippet_creator_id: int
    snippet_last_updated: datetime
    thread_id: Optional[int] = None
    conversation_id: Optional[int] = None
    comment_id: Optional[int] = None
    channel_id: Optional[int] = None
    channel_name: Optional[str] = None
    channel_color: Optional[int] = None
    title: Optional[str] = None
    closed: Optional[bool] = None


class SearchResponse(_Base):
    items: list[SearchResult]
    has_more: bool = False
    is_plan_restricted: bool = False
    next_cursor_mark: Optional[str] = None


class SearchThreadResponse(_Base):
    comment_ids: list[int]


class SearchConversationResponse(_Base):
    message_ids: list[int]


# ── OAuth ────────────────────────────────────────────────────────────

class AuthTokenResponse(_Base):
    access_token: str
    token_type: str
    refresh_token: Optional[str] = None
    expires_in: Optional[int] = None
    scope: Optional[str] = None
