"""
Friends and chat endpoints.

List endpoints return normalized records with unaddressable entries
already filtered out.
"""

from typing import Any
from urllib.parse import quote, urlencode

from chronosclient.models.social import ChatMessage, FriendRequest, FriendSummary
from chronosclient.parsers.social import (
    normalize_chat_message,
    normalize_friend,
    normalize_friend_request,
    normalize_records,
)
from chronosclient.services.request_executor import RequestExecutor


class FriendsService:
    """Client for /friends endpoints. Every call needs a bearer token."""

    def __init__(self, executor: RequestExecutor) -> None:
        self._executor = executor

    async def search(self, query: str, token: str) -> list[FriendSummary]:
        """Find users by name."""
        payload = await self._executor.request(
            f"/friends/search?{urlencode({'q': query})}",
            token=token,
        )
        return normalize_records(payload, normalize_friend, "users", "results", "items")

    async def list_friends(self, token: str) -> list[FriendSummary]:
        payload = await self._executor.request("/friends", token=token)
        return normalize_records(payload, normalize_friend, "friends", "items")

    async def list_requests(self, token: str) -> list[FriendRequest]:
        payload = await self._executor.request("/friends/requests", token=token)
        return normalize_records(payload, normalize_friend_request, "requests", "items")

    async def send_request(self, target_id: str, token: str) -> Any:
        return await self._executor.request(
            "/friends/request",
            method="POST",
            body={"targetId": target_id},
            token=token,
        )

    async def accept_request(self, request_id: str, token: str) -> Any:
        return await self._executor.request(
            f"/friends/request/{_segment(request_id)}/accept",
            method="POST",
            token=token,
        )

    async def reject_request(self, request_id: str, token: str) -> Any:
        return await self._executor.request(
            f"/friends/request/{_segment(request_id)}/reject",
            method="POST",
            token=token,
        )

    async def remove_friend(self, friend_id: str, token: str) -> None:
        await self._executor.request(f"/friends/{_segment(friend_id)}", method="DELETE", token=token)

    async def block(self, target_id: str, token: str) -> Any:
        return await self._executor.request(
            "/friends/block",
            method="POST",
            body={"targetId": target_id},
            token=token,
        )

    async def get_chat(self, friend_id: str, token: str) -> list[ChatMessage]:
        """Conversation with one friend, oldest first as the server sends it."""
        payload = await self._executor.request(f"/friends/chat/{_segment(friend_id)}", token=token)
        return normalize_records(payload, normalize_chat_message, "messages", "items")

    async def send_chat(self, friend_id: str, content: str, token: str) -> ChatMessage | None:
        """
        Send a message to a friend.

        Returns:
            The stored message when the server echoes it back, otherwise None
        """
        payload = await self._executor.request(
            f"/friends/chat/{_segment(friend_id)}",
            method="POST",
            body={"content": content},
            token=token,
        )
        return normalize_chat_message(payload)


def _segment(value: str) -> str:
    return quote(value, safe="")
