# Twist SDK — Python client for the Twist REST API
# Copyright (C) 2025–2026 Neven Kordic <neven@broodlink.ai>
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Deep links into the Twist web app."""

from __future__ import annotations

from typing import Literal, Optional, Union
from urllib.parse import quote

from .consts.endpoints import DEFAULT_WEB_URL

# Search hits on a thread title report this comment id; linking to it would
# scroll to a comment that does not exist.
TITLE_MATCH_COMMENT_ID = -1


def _is_draft(thread_id: Union[int, str]) -> bool:
    return int(thread_id) < 0


def _comment_suffix(comment_id: Union[int, str, None]) -> str:
    if comment_id and str(comment_id) != str(TITLE_MATCH_COMMENT_ID):
        return f"c/{comment_id}"
    return ""


def get_twist_url(
    workspace_id: int,
    channel_id: Optional[int] = None,
    conversation_id: Optional[int] = None,
    thread_id: Optional[int] = None,
    comment_id: Union[int, str, None] = None,
    message_id: Union[int, str, None] = None,
    user_id: Optional[int] = None,
) -> str:
    """Relative web-app path, e.g. ``/a/1/ch/42/t/1337/``."""
    url = f"/a/{workspace_id}/"

    if channel_id:
        url += f"ch/{channel_id}/"
        if thread_id:
            if _is_draft(thread_id):
                url += f"compose/{thread_id}/"
            else:
                url += f"t/{thread_id}/" + _comment_suffix(comment_id)
    elif thread_id:
        url += f"inbox/t/{thread_id}/" + _comment_suffix(comment_id)
    elif conversation_id:
        url += f"msg/{conversation_id}/"
        if message_id:
            url += f"m/{message_id}"
    elif user_id:
        url += f"people/u/{user_id}"

    return url


def get_full_twist_url(base_url: str = DEFAULT_WEB_URL, **params: Union[int, str, None]) -> str:
    return f"{base_url.rstrip('/')}{get_twist_url(**params)}"


def get_thread_url(workspace_id: int, channel_id: int, thread_id: int) -> str:
    if thread_id < 0:
        return f"/a/{workspace_id}/ch/{channel_id}/compose/{thread_id}"
    return get_twist_url(workspace_id, channel_id=channel_id, thread_id=thread_id)


def get_channel_url(workspace_id: int, channel_id: int) -> str:
    return get_twist_url(workspace_id, channel_id=channel_id)


def get_conversation_url(workspace_id: int, conversation_id: int) -> str:
    return get_twist_url(workspace_id, conversation_id=conversation_id)


def get_message_url(workspace_id: int, conversation_id: int, message_id: Union[int, str]) -> str:
    return get_twist_url(workspace_id, conversation_id=conversation_id, message_id=message_id)


def get_comment_url(
    workspace_id: int, channel_id: int, thread_id: int, comment_id: Union[int, str]
) -> str:
    return get_twist_url(
        workspace_id, channel_id=channel_id, thread_id=thread_id, comment_id=comment_id
    )


def get_inbox_url(workspace_id: int, tab: Optional[Literal["done", "mentions"]] = None) -> str:
    return f"/a/{workspace_id}/inbox" + (f"/{tab}" if tab else "")


def get_user_profile_url(workspace_id: int, user_id: int) -> str:
    return f"/a/{workspace_id}/people/u/{user_id}"


def get_search_query_url(workspace_id: int, query: str) -> str:
    return f"/a/{workspace_id}/search?q={quote(query)}"


def get_settings_url(workspace_id: int, initial_location: Optional[str] = None) -> str:
    if initial_location:
        return f"/a/{workspace_id}/settings/{initial_location}"
    return f"/a/{workspace_id}/settings"
