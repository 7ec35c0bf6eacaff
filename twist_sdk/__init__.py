# Twist SDK — Python client for the Twist REST API
# Copyright (C) 2025–2026 Neven Kordic <neven@broodlink.ai>
# SPDX-License-Identifier: AGPL-3.0-or-later
"""Twist Python SDK: typed clients, namespaces and batch requests."""

__version__ = "0.1.0"

from .config import ClientConfig
from .client import AsyncTwistClient, BatchFacade, TwistClient
from .batch import BatchBuilder, BatchResponse
from .descriptors import CallDescriptor
from ._transport import AiohttpTransport, BaseTransport, CustomTransport, TransportResponse
from .errors import (
    TwistApiError,
    TwistError,
    TwistProtocolError,
    TwistTransportError,
    TwistUsageError,
    TwistValidationError,
)
from .models import (
    AuthTokenResponse,
    Channel,
    Comment,
    Conversation,
    ConversationMessage,
    Group,
    InboxThread,
    SearchResponse,
    SearchResult,
    Thread,
    User,
    Workspace,
    WorkspaceUser,
)

__all__ = [
    # Clients
    "AsyncTwistClient",
    "TwistClient",
    "BatchFacade",
    # Batching
    "BatchBuilder",
    "BatchResponse",
    "CallDescriptor",
    # Transports
    "AiohttpTransport",
    "BaseTransport",
    "CustomTransport",
    "TransportResponse",
    # Config
    "ClientConfig",
    # Errors
    "TwistError",
    "TwistApiError",
    "TwistProtocolError",
    "TwistTransportError",
    "TwistUsageError",
    "TwistValidationError",
    # Models
    "AuthTokenResponse",
    "Channel",
    "Comment",
    "Conversation",
    "ConversationMessage",
    "Group",
    "InboxThread",
    "SearchResponse",
    "SearchResult",
    "Thread",
    "User",
    "Workspace",
    "WorkspaceUser",
]
