"""Tests for friend, friend request and chat normalization."""

import pytest

from chronosclient.models.social import ChatMessage, FriendRequest, FriendSummary
from chronosclient.parsers.social import (
    FRIEND_ID_FIELDS,
    normalize_chat_message,
    normalize_friend,
    normalize_friend_request,
    normalize_records,
)


class TestNormalizeFriend:
    def test_candidate_order_is_fixed(self) -> None:
        assert FRIEND_ID_FIELDS == ("friendId", "id", "friend.id", "user.id")

    def test_friend_id_preferred_over_id(self) -> None:
        """friendId wins over the relation row id."""
        friend = normalize_friend({"id": "rel-1", "friendId": "u-2", "username": "bob"})

        assert friend == FriendSummary(id="u-2", username="bob")

    def test_nested_friend_object(self) -> None:
        """Nested friend.id / friend.username are understood."""
        friend = normalize_friend({"friend": {"id": 7, "username": "carol"}})

        assert friend is not None
        assert friend.id == "7"
        assert friend.username == "carol"

    def test_nested_user_object(self) -> None:
        friend = normalize_friend({"user": {"id": "u-9", "username": "dave"}})

        assert friend is not None
        assert friend.id == "u-9"

    def test_username_only_record(self) -> None:
        """Username doubles as id on legacy payloads."""
        friend = normalize_friend({"username": "erin"})

        assert friend == FriendSummary(id="erin", username="erin")

    def test_rejects_record_without_identifier(self) -> None:
        """No id and no username means no friend."""
        assert normalize_friend({"status": "ONLINE", "avatarUrl": "/a.png"}) is None

    @pytest.mark.parametrize("raw", [None, "bob", 3, []])
    def test_rejects_non_mapping(self, raw: object) -> None:
        assert normalize_friend(raw) is None

    def test_explicit_status_wins(self) -> None:
        """status/state strings are preferred over the online flag."""
        friend = normalize_friend({"id": "u1", "username": "a", "state": "IN_GAME", "online": False})

        assert friend is not None
        assert friend.status == "IN_GAME"

    def test_status_from_online_flag(self) -> None:
        online = normalize_friend({"id": "u1", "username": "a", "online": True})
        offline = normalize_friend({"id": "u2", "username": "b", "online": False})

        assert online is not None and online.status == "ONLINE"
        assert offline is not None and offline.status == "OFFLINE"

    def test_status_unset_without_signal(self) -> None:
        friend = normalize_friend({"id": "u1", "username": "a"})

        assert friend is not None
        assert friend.status is None


class TestNormalizeFriendRequest:
    def test_full_record(self) -> None:
        request = normalize_friend_request(
            {
                "id": "r1",
                "fromId": "u1",
                "fromUsername": "alice",
                "toId": "u2",
                "status": "PENDING",
                "createdAt": "2024-05-01T10:00:00Z",
            }
        )

        assert request == FriendRequest(
            id="r1",
            from_id="u1",
            from_username="alice",
            to_id="u2",
            status="PENDING",
            created_at="2024-05-01T10:00:00Z",
        )

    def test_nested_requester(self) -> None:
        """Requester can arrive as a nested object."""
        request = normalize_friend_request(
            {"id": 5, "requester": {"id": 11, "username": "bob"}, "created_at": "yesterday"}
        )

        assert request is not None
        assert request.id == "5"
        assert request.from_id == "11"
        assert request.from_username == "bob"
        assert request.created_at == "yesterday"

    def test_rejects_without_request_id(self) -> None:
        assert normalize_friend_request({"fromId": "u1"}) is None

    def test_rejects_without_from_id(self) -> None:
        assert normalize_friend_request({"id": "r1", "toId": "u2"}) is None


class TestNormalizeChatMessage:
    def test_content_alternates(self) -> None:
        """content, text and message are accepted in that order."""
        by_text = normalize_chat_message({"id": "m1", "senderId": "u1", "text": "hi"})
        by_message = normalize_chat_message({"id": "m2", "senderId": "u1", "message": "yo"})
        both = normalize_chat_message({"id": "m3", "senderId": "u1", "content": "a", "text": "b"})

        assert by_text is not None and by_text.content == "hi"
        assert by_message is not None and by_message.content == "yo"
        assert both is not None and both.content == "a"

    def test_timestamp_alternates(self) -> None:
        message = normalize_chat_message({"id": "m1", "senderId": "u1", "sentAt": "t1"})

        assert message is not None
        assert message.created_at == "t1"

    def test_full_record(self) -> None:
        message = normalize_chat_message(
            {
                "id": "m1",
                "senderId": "u1",
                "recipientId": "u2",
                "content": "gg",
                "createdAt": "2024-05-01T10:00:00Z",
            }
        )

        assert message == ChatMessage(
            id="m1",
            sender_id="u1",
            content="gg",
            created_at="2024-05-01T10:00:00Z",
            recipient_id="u2",
        )

    def test_derives_id_from_sender_and_time(self) -> None:
        """Messages without id get a stable derived one."""
        raw = {"sender": {"id": "u1"}, "text": "hello", "createdAt": "t9"}

        first = normalize_chat_message(raw)
        second = normalize_chat_message(raw)

        assert first is not None and second is not None
        assert first.id == "u1:t9"
        assert first == second

    def test_derived_id_without_timestamp_is_stable(self) -> None:
        raw = {"senderId": "u1", "text": "hello"}

        first = normalize_chat_message(raw)
        second = normalize_chat_message(raw)

        assert first is not None and second is not None
        assert first.id.startswith("u1:")
        assert first.id == second.id

    def test_missing_content_defaults_to_empty(self) -> None:
        message = normalize_chat_message({"id": "m1", "senderId": "u1"})

        assert message is not None
        assert message.content == ""

    def test_rejects_without_sender(self) -> None:
        assert normalize_chat_message({"id": "m1", "content": "orphan"}) is None


class TestNormalizeRecords:
    def test_drops_rejected_records(self) -> None:
        """Unaddressable records never reach the result."""
        payload = [
            {"id": "u1", "username": "alice"},
            {"status": "ONLINE"},
            None,
            {"friendId": "u3", "username": "carol"},
        ]

        friends = normalize_records(payload, normalize_friend)

        assert [friend.id for friend in friends] == ["u1", "u3"]

    def test_wrapped_payload(self) -> None:
        payload = {"requests": [{"id": "r1", "fromId": "u1"}, {"id": "r2"}]}

        requests = normalize_records(payload, normalize_friend_request, "requests")

        assert [request.id for request in requests] == ["r1"]

    def test_unexpected_payload_is_empty(self) -> None:
        assert normalize_records(None, normalize_chat_message) == []
