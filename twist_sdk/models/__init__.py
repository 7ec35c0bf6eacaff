# Twist SDK — Python client for the Twist REST API
# Copyright (C) 2025–2026 Neven Kordic <neven@broodlink.ai>
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Pydantic v2 models for Twist API responses."""

from .entities import (
    AuthTokenResponse,
    AvatarUrls,
    AwayMode,
    Channel,
    Comment,
    Conversation,
    ConversationMessage,
    Group,
    InboxCount,
    InboxThread,
    SearchConversationResponse,
    SearchResponse,
    SearchResult,
    SearchThreadResponse,
    Thread,
    UnreadConversation,
    UnreadThread,
    User,
    UserType,
    Workspace,
    WorkspacePlan,
    WorkspaceUser,
)

__all__ = [
    "AuthTokenResponse",
    "AvatarUrls",
    "AwayMode",
    "Channel",
    "Comment",
    "Conversation",
    "ConversationMessage",
    "Group",
    "InboxCount",
    "InboxThread",
    "SearchConversationResponse",
    "SearchResponse",
    "SearchResult",
    "SearchThreadResponse",
    "Thread",
    "UnreadConversation",
    "UnreadThread",
    "User",
    "UserType",
    "Workspace",
    "WorkspacePlan",
    "WorkspaceUser",
]
