"""Tests for the composing client."""

import httpx
import respx

from chronosclient.client import ChronosClient, get_chronos_client, reset_chronos_client
from chronosclient.config import Settings
from chronosclient.services.card_cache import CardCache


class TestChronosClient:
    def test_init_with_default_url(self) -> None:
        """Client uses settings URL by default."""
        assert ChronosClient().base_url == "http://localhost:3053"

    def test_services_share_executor(self) -> None:
        client = ChronosClient(base_url="http://chronos.test")

        assert client.cards._executor is client.executor
        assert client.games._executor is client.executor

    def test_fresh_cache_per_client(self) -> None:
        """Each client owns its own cache."""
        assert ChronosClient().card_cache is not ChronosClient().card_cache

    def test_injected_cache(self) -> None:
        cache = CardCache()
        client = ChronosClient(card_cache=cache)

        assert client.card_cache is cache
        assert client.cards.cache is cache

    async def test_card_cache_shared_across_calls(
        self, client: ChronosClient, api_mock: respx.MockRouter
    ) -> None:
        """Cards resolved through the client land in its cache."""
        api_mock.get("/game/cards/C01").mock(
            return_value=httpx.Response(200, json={"code": "C01", "name": "Ember Fox"})
        )

        await client.cards.get_card_meta("C01")

        assert "C01" in client.card_cache


class TestGetChronosClient:
    def test_returns_singleton(self) -> None:
        """Returns the same instance on multiple calls."""
        reset_chronos_client()

        assert get_chronos_client() is get_chronos_client()

    def test_reset_creates_new_client(self) -> None:
        first = get_chronos_client()
        reset_chronos_client()

        assert get_chronos_client() is not first


class TestSettings:
    def test_env_override(self, monkeypatch) -> None:
        """CHRONOS_* variables configure the client."""
        monkeypatch.setenv("CHRONOS_API_BASE_URL", "https://api.example.com")
        monkeypatch.setenv("CHRONOS_REQUEST_TIMEOUT", "5")

        settings = Settings()

        assert settings.api_base_url == "https://api.example.com"
        assert settings.request_timeout == 5.0
