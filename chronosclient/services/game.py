"""
Match lifecycle endpoints.

One method per backend operation. Methods only shape paths and bodies;
rule validation belongs to the server.
"""

import logging
from typing import Any
from urllib.parse import quote

from chronosclient.models.game import GameMode, GameResult, GameState, GameSummary, PlayerStats
from chronosclient.parsers.candidates import as_record_list
from chronosclient.parsers.game import (
    GAME_LIST_KEYS,
    decode_model,
    parse_game_id,
    parse_game_summaries,
)
from chronosclient.services.request_executor import RequestExecutor

logger = logging.getLogger(__name__)

START_PATHS: dict[GameMode | None, str] = {
    GameMode.CLASSIC: "/game/start-classic",
    GameMode.ATTRIBUTE_DUEL: "/game/start-duel",
    None: "/game/start",
}


class GameService:
    """Client for /game endpoints."""

    def __init__(self, executor: RequestExecutor) -> None:
        self._executor = executor

    async def start_classic_game(self, player_a_id: str) -> str:
        """Start a classic match. Returns the new game id."""
        return await self._start(GameMode.CLASSIC, player_a_id)

    async def start_duel_game(self, player_a_id: str) -> str:
        """Start an attribute duel match. Returns the new game id."""
        return await self._start(GameMode.ATTRIBUTE_DUEL, player_a_id)

    async def start_game(self, player_a_id: str) -> str:
        """Start a match in whatever mode the server picks. Returns the new game id."""
        return await self._start(None, player_a_id)

    async def _start(self, mode: GameMode | None, player_a_id: str) -> str:
        path = START_PATHS[mode]
        payload = await self._executor.request(path, method="POST", body={"playerAId": player_a_id})
        game_id = parse_game_id(payload, "POST", path)
        logger.info(
            "game_started",
            extra={"game_id": game_id, "mode": mode.value if mode else "auto"},
        )
        return game_id

    async def end_game(self, game_id: str) -> None:
        """Permanently end one game."""
        await self._executor.request(f"/game/end/{_segment(game_id)}", method="DELETE")

    async def surrender(self, game_id: str, token: str) -> Any:
        return await self._executor.request(
            "/game/surrender",
            method="POST",
            body={"gameId": game_id},
            token=token,
        )

    async def play_card(self, game_id: str, player: str, card: str) -> Any:
        """Play a card from the player's hand (classic mode)."""
        return await self._executor.request(
            "/game/play-card",
            method="POST",
            body={"gameId": game_id, "player": player, "card": card},
        )

    async def skip_turn(self, game_id: str, player: str) -> Any:
        return await self._executor.request(
            "/game/skip-turn",
            method="POST",
            body={"gameId": game_id, "player": player},
        )

    async def get_game_state(self, game_id: str) -> GameState | None:
        """
        Fetch the current state snapshot.

        Returns:
            GameState, or None when the server has no state for this game
        """
        path = f"/game/state/{_segment(game_id)}"
        payload = await self._executor.request(path)
        if payload is None:
            return None
        return decode_model(GameState, payload, "GET", path)

    async def get_game_result(self, game_id: str) -> GameResult:
        path = f"/game/result/{_segment(game_id)}"
        payload = await self._executor.request(path)
        return decode_model(GameResult, payload, "GET", path)

    async def list_active_raw(self) -> list[Any]:
        """Full, untyped records from GET /game/active."""
        payload = await self._executor.request("/game/active")
        return as_record_list(payload, *GAME_LIST_KEYS)

    async def list_active(self) -> list[GameSummary]:
        payload = await self._executor.request("/game/active")
        return parse_game_summaries(payload)

    async def list_my_active(self, token: str) -> list[GameSummary]:
        """Active games the authenticated player takes part in."""
        payload = await self._executor.request("/game/active/mine", token=token)
        return parse_game_summaries(payload)

    async def expire_games(self) -> None:
        """Ask the server to expire stale games."""
        await self._executor.request("/game/expire", method="POST")

    async def get_my_stats(self, token: str) -> PlayerStats:
        path = "/game/stats/me"
        payload = await self._executor.request(path, token=token)
        return decode_model(PlayerStats, payload, "GET", path)

    async def health(self) -> str:
        """Health check, GET /game/test."""
        return await self._executor.request_text("/game/test")


def _segment(value: str) -> str:
    return quote(value, safe="")
