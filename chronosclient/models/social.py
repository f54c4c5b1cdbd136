"""
Friends and chat records.

Canonical shapes produced by the social normalizers. Construction implies
that an addressable identifier was found: records without one never get
built, because accept/reject/remove operations need an id to target.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class FriendSummary:
    """
    A friend (or search hit) as shown in the friends list.

    Attributes:
        id: Friend user id, falls back to username on legacy payloads
        username: Display username
        status: Presence string such as "ONLINE"/"OFFLINE", None when unknown
        avatar_url: Avatar image URL, None when absent
    """

    id: str
    username: str
    status: str | None = None
    avatar_url: str | None = None


@dataclass(frozen=True, slots=True)
class FriendRequest:
    """
    A pending or historical friend request.

    Attributes:
        id: Request id (target of accept/reject)
        from_id: User id of the requester
        from_username: Requester username, when the backend includes it
        to_id: User id of the recipient, when the backend includes it
        status: Request state such as "PENDING"
        created_at: Creation timestamp as sent by the backend
    """

    id: str
    from_id: str
    from_username: str | None = None
    to_id: str | None = None
    status: str | None = None
    created_at: str | None = None


@dataclass(frozen=True, slots=True)
class ChatMessage:
    """
    A direct message between two friends.

    Attributes:
        id: Message id, derived from sender and timestamp when absent
        sender_id: User id of the author
        content: Message text
        created_at: Send timestamp as sent by the backend
        recipient_id: User id of the recipient, when known
    """

    id: str
    sender_id: str
    content: str = ""
    created_at: str | None = None
    recipient_id: str | None = None
