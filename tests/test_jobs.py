"""Tests for scheduled jobs."""

import httpx
import pytest
import respx

from chronosclient.client import ChronosClient
from chronosclient.jobs.expire_games import run_expire
from chronosclient.models.failure import HttpError


class TestRunExpire:
    async def test_expire_success(self, client: ChronosClient, api_mock: respx.MockRouter) -> None:
        """Posts to the expire endpoint."""
        route = api_mock.post("/game/expire").mock(return_value=httpx.Response(200))

        await run_expire(client)

        assert route.call_count == 1

    async def test_expire_failure_reraises(
        self, client: ChronosClient, api_mock: respx.MockRouter
    ) -> None:
        """Failures are logged and re-raised."""
        api_mock.post("/game/expire").mock(return_value=httpx.Response(500))

        with pytest.raises(HttpError):
            await run_expire(client)
