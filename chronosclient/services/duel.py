"""
Attribute duel actions.

Shapes and sends duel transition requests. The server is authoritative for
every precondition (current stage, whose turn to choose, ...); the client
performs no local stage checks and re-fetches GameState to observe the
result.
"""

from typing import Any
from urllib.parse import quote

from chronosclient.models.duel import DuelAttribute
from chronosclient.services.request_executor import RequestExecutor


class DuelService:
    """Duel sub-mode endpoints under /game/{id}/duel."""

    def __init__(self, executor: RequestExecutor) -> None:
        self._executor = executor

    async def choose_card(self, game_id: str, player_id: str, card_code: str) -> Any:
        """Pick a card for the duel (PICK_CARD stage)."""
        return await self._executor.request(
            _duel_path(game_id, "choose-card"),
            method="POST",
            body={"playerId": player_id, "cardCode": card_code},
        )

    async def choose_attribute(
        self,
        game_id: str,
        player_id: str,
        attribute: DuelAttribute | str,
    ) -> Any:
        """
        Pick the attribute both cards are compared on.

        Raises:
            ValueError: If attribute is not one of magic, might, fire
        """
        chosen = DuelAttribute(attribute)
        return await self._executor.request(
            _duel_path(game_id, "choose-attribute"),
            method="POST",
            body={"playerId": player_id, "attribute": chosen.value},
        )

    async def unchoose_card(self, game_id: str, player_id: str) -> Any:
        """Withdraw the player's card/attribute choice before the reveal."""
        return await self._executor.request(
            _duel_path(game_id, "unchoose-card"),
            method="POST",
            body={"playerId": player_id},
        )

    async def advance(self, game_id: str) -> Any:
        """
        Ask the server to move the duel forward.

        The response is returned untouched; re-fetch state to see the new stage.
        """
        return await self._executor.request(_duel_path(game_id, "advance"), method="POST")


def _duel_path(game_id: str, action: str) -> str:
    return f"/game/{quote(game_id, safe='')}/duel/{action}"
