"""
Friends, friend requests and chat message normalization.

Each normalizer reads every field through an explicit candidate tuple and
returns None when the record carries no usable identifier. Callers filter
those out (see normalize_records) so malformed network records never reach
consumers as half-empty objects.
"""

import hashlib
import logging
from collections.abc import Callable
from typing import Any, TypeVar

from chronosclient.models.social import ChatMessage, FriendRequest, FriendSummary
from chronosclient.parsers.candidates import as_record_list, coerce_bool, first_hit, first_text

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Friend records
FRIEND_ID_FIELDS: tuple[str, ...] = ("friendId", "id", "friend.id", "user.id")
FRIEND_USERNAME_FIELDS: tuple[str, ...] = (
    "username",
    "friend.username",
    "user.username",
    "name",
    "displayName",
)
FRIEND_STATUS_FIELDS: tuple[str, ...] = ("status", "state")
FRIEND_ONLINE_FIELDS: tuple[str, ...] = ("online", "isOnline", "friend.online", "user.online")
FRIEND_AVATAR_FIELDS: tuple[str, ...] = (
    "avatarUrl",
    "avatar",
    "friend.avatarUrl",
    "user.avatarUrl",
)

# Friend request records
REQUEST_ID_FIELDS: tuple[str, ...] = ("id", "requestId", "request.id")
REQUEST_FROM_ID_FIELDS: tuple[str, ...] = (
    "fromId",
    "from_id",
    "requesterId",
    "senderId",
    "from.id",
    "requester.id",
    "sender.id",
)
REQUEST_FROM_USERNAME_FIELDS: tuple[str, ...] = (
    "fromUsername",
    "from.username",
    "requester.username",
    "sender.username",
)
REQUEST_TO_ID_FIELDS: tuple[str, ...] = ("toId", "to_id", "targetId", "recipientId", "to.id")
REQUEST_STATUS_FIELDS: tuple[str, ...] = ("status", "state")

# Chat message records
MESSAGE_ID_FIELDS: tuple[str, ...] = ("id", "messageId", "_id")
MESSAGE_SENDER_FIELDS: tuple[str, ...] = (
    "senderId",
    "sender_id",
    "fromId",
    "from",
    "authorId",
    "userId",
    "sender.id",
    "author.id",
)
MESSAGE_RECIPIENT_FIELDS: tuple[str, ...] = (
    "recipientId",
    "recipient_id",
    "toId",
    "to",
    "receiverId",
    "recipient.id",
)
MESSAGE_CONTENT_FIELDS: tuple[str, ...] = ("content", "text", "message", "body")

# Shared by requests and messages
CREATED_AT_FIELDS: tuple[str, ...] = ("createdAt", "created_at", "sentAt", "timestamp")

ONLINE = "ONLINE"
OFFLINE = "OFFLINE"


def normalize_friend(raw: Any) -> FriendSummary | None:
    """
    Normalize a friend (or friend search hit).

    The id falls back to the username on payloads that only carry a name.
    Returns None when neither resolves.
    """
    username = first_text(raw, FRIEND_USERNAME_FIELDS)
    friend_id = first_text(raw, FRIEND_ID_FIELDS) or username
    if friend_id is None:
        return None

    return FriendSummary(
        id=friend_id,
        username=username or friend_id,
        status=_friend_status(raw),
        avatar_url=first_text(raw, FRIEND_AVATAR_FIELDS),
    )


def _friend_status(raw: Any) -> str | None:
    status = first_text(raw, FRIEND_STATUS_FIELDS)
    if status is not None:
        return status

    online = first_hit(raw, FRIEND_ONLINE_FIELDS, coerce_bool)
    if online is None:
        return None
    return ONLINE if online else OFFLINE


def normalize_friend_request(raw: Any) -> FriendRequest | None:
    """Normalize a friend request. Needs both a request id and a requester id."""
    request_id = first_text(raw, REQUEST_ID_FIELDS)
    from_id = first_text(raw, REQUEST_FROM_ID_FIELDS)
    if request_id is None or from_id is None:
        return None

    return FriendRequest(
        id=request_id,
        from_id=from_id,
        from_username=first_text(raw, REQUEST_FROM_USERNAME_FIELDS),
        to_id=first_text(raw, REQUEST_TO_ID_FIELDS),
        status=first_text(raw, REQUEST_STATUS_FIELDS),
        created_at=first_text(raw, CREATED_AT_FIELDS),
    )


def normalize_chat_message(raw: Any) -> ChatMessage | None:
    """
    Normalize a chat message. Needs a sender id.

    Messages without their own id get one derived from sender and timestamp
    (or a content digest when the timestamp is missing too), so the same
    payload always yields the same id.
    """
    sender_id = first_text(raw, MESSAGE_SENDER_FIELDS)
    if sender_id is None:
        return None

    content = _message_content(raw)
    created_at = first_text(raw, CREATED_AT_FIELDS)
    message_id = first_text(raw, MESSAGE_ID_FIELDS)
    if message_id is None:
        suffix = created_at or hashlib.sha1(content.encode("utf-8")).hexdigest()[:12]
        message_id = f"{sender_id}:{suffix}"

    return ChatMessage(
        id=message_id,
        sender_id=sender_id,
        content=content,
        created_at=created_at,
        recipient_id=first_text(raw, MESSAGE_RECIPIENT_FIELDS),
    )


def _message_content(raw: Any) -> str:
    # Whitespace-only text is still a message; only absence falls through
    content = first_hit(raw, MESSAGE_CONTENT_FIELDS, _raw_string)
    return content or ""


def _raw_string(value: Any) -> str | None:
    return value if isinstance(value, str) else None


def normalize_records(
    payload: Any,
    normalize: Callable[[Any], T | None],
    *wrapper_keys: str,
) -> list[T]:
    """
    Normalize every record of a list payload, dropping rejected ones.

    Args:
        payload: Bare list, or object wrapping the list under one of wrapper_keys
        normalize: One of the normalize_* functions
        wrapper_keys: Keys to look under when the payload is an object

    Returns:
        Normalized records in payload order.
    """
    records = as_record_list(payload, *wrapper_keys)
    normalized = [normalize(record) for record in records]
    kept = [record for record in normalized if record is not None]

    dropped = len(records) - len(kept)
    if dropped:
        logger.info(
            "social_records_dropped",
            extra={"normalizer": normalize.__name__, "dropped": dropped, "kept": len(kept)},
        )
    return kept
