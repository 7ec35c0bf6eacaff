# Twist SDK — Python client for the Twist REST API
# Copyright (C) 2025–2026 Neven Kordic <neven@broodlink.ai>
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Tests for wire/internal key and timestamp translation."""

from datetime import datetime, timezone

from twist_sdk.case_conversion import (
    camel_to_snake,
    datetime_to_timestamp,
    from_wire,
    snake_to_camel,
    to_wire,
)

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
NEW_YEAR_2024 = datetime(2024, 1, 1, tzinfo=timezone.utc)


class TestKeyNames:
    def test_camel_to_snake(self):
        assert camel_to_snake("workspaceId") == "workspace_id"
        assert camel_to_snake("conversationMessageId") == "conversation_message_id"
        assert camel_to_snake("id") == "id"

    def test_snake_to_camel(self):
        assert snake_to_camel("default_recipients") == "defaultRecipients"
        assert snake_to_camel("id") == "id"
        assert snake_to_camel("s35") == "s35"


class TestFromWire:
    def test_keys_and_timestamps(self):
        result = from_wire({"channel_id": 1, "created_ts": 0})
        assert result == {"channelId": 1, "created": EPOCH}

    def test_nested_objects_and_lists(self):
        wire = {"items": [{"user_ids": [1, 2], "last_comment": {"thread_id": 7}}]}
        assert from_wire(wire) == {"items": [{"userIds": [1, 2], "lastComment": {"threadId": 7}}]}

    def test_null_timestamp_keeps_stripped_key(self):
        assert from_wire({"last_edited_ts": None}) == {"lastEdited": None}

    def test_non_numeric_ts_field_is_not_a_timestamp(self):
        assert from_wire({"foo_ts": "abc"}) == {"fooTs": "abc"}
        assert from_wire({"flag_ts": True}) == {"flagTs": True}

    def test_scalars_pass_through(self):
        assert from_wire(5) == 5
        assert from_wire("text") == "text"
        assert from_wire(None) is None


class TestToWire:
    def test_datetime_gets_ts_suffix(self):
        assert to_wire({"lastEdited": NEW_YEAR_2024}) == {"last_edited_ts": 1704067200}

    def test_naive_datetime_is_utc(self):
        assert to_wire({"since": datetime(2024, 1, 1)}) == {"since_ts": 1704067200}

    def test_fractional_seconds_kept(self):
        value = datetime(1970, 1, 1, 0, 0, 1, 500000, tzinfo=timezone.utc)
        assert datetime_to_timestamp(value) == 1.5

    def test_non_string_keys_untouched(self):
        assert to_wire({1: {"userId": 2}}) == {1: {"user_id": 2}}

    def test_tuples_become_lists(self):
        assert to_wire({"userIds": (1, 2)}) == {"user_ids": [1, 2]}

    def test_round_trip(self):
        internal = {
            "workspaceId": 1,
            "posted": NEW_YEAR_2024,
            "recipients": [{"userId": 3, "seen": EPOCH}],
        }
        assert from_wire(to_wire(internal)) == internal

    def test_keyless_datetime_reads_back_as_number(self):
        wire = to_wire({"times": [NEW_YEAR_2024]})
        assert wire == {"times": [1704067200]}
        assert from_wire(wire) == {"times": [1704067200]}
