"""
Chronos backend client.

Composes the request executor, the card cache and every endpoint facade
into one object. The client owns the card cache, so a fresh client means a
fresh cache.
"""

import httpx

from chronosclient.services.auth import AuthService
from chronosclient.services.card_cache import CardCache
from chronosclient.services.card_resolver import CardMetadataResolver
from chronosclient.services.duel import DuelService
from chronosclient.services.friends import FriendsService
from chronosclient.services.game import GameService
from chronosclient.services.request_executor import RequestExecutor


class ChronosClient:
    """
    Entry point for consumers of the Chronos card-game backend.

    Attributes:
        auth: Registration, login and current-user lookup
        games: Match lifecycle and classic actions
        duel: Attribute duel actions
        cards: Card metadata resolution (cached)
        friends: Friends and chat
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        http_client: httpx.AsyncClient | None = None,
        card_cache: CardCache | None = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            base_url: Backend base URL. Defaults to settings.api_base_url.
            timeout: Request timeout in seconds. Defaults to settings.request_timeout.
            http_client: Optional shared httpx client; the caller closes it.
            card_cache: Cache to resolve cards through. Defaults to a new empty cache.
        """
        self.executor = RequestExecutor(base_url=base_url, timeout=timeout, client=http_client)
        self.card_cache = card_cache if card_cache is not None else CardCache()

        self.auth = AuthService(self.executor)
        self.games = GameService(self.executor)
        self.duel = DuelService(self.executor)
        self.cards = CardMetadataResolver(self.executor, self.card_cache)
        self.friends = FriendsService(self.executor)

    @property
    def base_url(self) -> str:
        return self.executor.base_url


# Default client instance
_client: ChronosClient | None = None


def get_chronos_client() -> ChronosClient:
    """
    Get the default client instance.

    Returns:
        Singleton ChronosClient instance (one card cache per process)
    """
    global _client
    if _client is None:
        _client = ChronosClient()
    return _client


def reset_chronos_client() -> None:
    """Drop the default client, and with it the default card cache."""
    global _client
    _client = None
