"""
Match models.

GameState and GameResult mirror backend payloads (camelCase on the wire,
snake_case here). They are read-only snapshots: the backend owns the match
and the client re-fetches instead of mutating.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from chronosclient.models.duel import DuelCenter, DuelStage


class GameMode(str, Enum):
    """Match mode."""

    CLASSIC = "CLASSIC"
    ATTRIBUTE_DUEL = "ATTRIBUTE_DUEL"


@dataclass(frozen=True, slots=True)
class GameSummary:
    """
    One entry of the active games listing.

    Attributes:
        id: Game id
        player_a_id: First seated player, "unknown" when the listing omits players
        mode: Match mode, CLASSIC when the listing omits it
    """

    id: str
    player_a_id: str
    mode: GameMode = GameMode.CLASSIC


class _Snapshot(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        coerce_numbers_to_str=True,
        frozen=True,
        extra="ignore",
    )


class GameState(_Snapshot):
    """The shape returned by GET /game/state/:id."""

    game_id: str
    players: list[str] = Field(default_factory=list)
    turn: int = 0
    last_activity: datetime | None = None
    winner: str | None = None
    hp: dict[str, int] = Field(default_factory=dict)
    hands: dict[str, list[str]] = Field(default_factory=dict)
    decks: dict[str, list[str]] = Field(default_factory=dict)
    mode: GameMode = GameMode.CLASSIC
    duel_stage: DuelStage | None = None
    duel_center: DuelCenter | None = None
    discard_piles: dict[str, list[str]] | None = None

    @property
    def is_finished(self) -> bool:
        return self.winner is not None or self.duel_stage == DuelStage.RESOLVED


class GameResult(_Snapshot):
    """Outcome of a finished match."""

    winner: str | None = None
    log: list[str] = Field(default_factory=list)


class PlayerStats(_Snapshot):
    """Lifetime totals from GET /game/stats/me."""

    games_played: int = 0
    games_won: int = 0
    games_drawn: int = 0
