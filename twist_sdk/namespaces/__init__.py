# Twist SDK — Python client for the Twist REST API
# Copyright (C) 2025–2026 Neven Kordic <neven@broodlink.ai>
# SPDX-License-Identifier: AGPL-3.0-or-later

from .base import BaseNamespace, Executor
from .channels import ChannelsNamespace
from .comments import CommentsNamespace
from .conversation_messages import ConversationMessagesNamespace
from .conversations import ConversationsNamespace
from .groups import GroupsNamespace
from .inbox import InboxNamespace
from .reactions import ReactionsNamespace
from .search import SearchNamespace
from .threads import ThreadsNamespace
from .users import UsersNamespace
from .workspace_users import WorkspaceUsersNamespace
from .workspaces import WorkspacesNamespace

NAMESPACES = {
    "users": UsersNamespace,
    "workspaces": WorkspacesNamespace,
    "workspace_users": WorkspaceUsersNamespace,
    "channels": ChannelsNamespace,
    "threads": ThreadsNamespace,
    "groups": GroupsNamespace,
    "conversations": ConversationsNamespace,
    "comments": CommentsNamespace,
    "conversation_messages": ConversationMessagesNamespace,
    "inbox": InboxNamespace,
    "reactions": ReactionsNamespace,
    "search": SearchNamespace,
}

__all__ = [
    "BaseNamespace",
    "ChannelsNamespace",
    "CommentsNamespace",
    "ConversationMessagesNamespace",
    "ConversationsNamespace",
    "Executor",
    "GroupsNamespace",
    "InboxNamespace",
    "NAMESPACES",
    "ReactionsNamespace",
    "SearchNamespace",
    "ThreadsNamespace",
    "UsersNamespace",
    "WorkspaceUsersNamespace",
    "WorkspacesNamespace",
]
