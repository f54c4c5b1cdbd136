"""
Match payload parsing.

Converts backend match payloads into models. Pydantic validation failures
surface as DecodeError so consumers only ever see gateway failures.
"""

import json
from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from chronosclient.models.failure import DecodeError
from chronosclient.models.game import GameMode, GameSummary
from chronosclient.parsers.candidates import as_record_list, first_text

M = TypeVar("M", bound=BaseModel)

GAME_ID_FIELDS: tuple[str, ...] = ("gameId", "id")

GAME_LIST_KEYS: tuple[str, ...] = ("games", "data", "items")

UNKNOWN_PLAYER = "unknown"


def decode_model(model: type[M], payload: Any, method: str, path: str) -> M:
    """
    Validate a payload into a pydantic model.

    Raises:
        DecodeError: If the payload does not fit the model
    """
    try:
        return model.model_validate(payload)
    except ValidationError as e:
        raise DecodeError(method, path, _dump(payload), reason=f"invalid {model.__name__}") from e


def parse_game_id(payload: Any, method: str, path: str) -> str:
    """
    Extract the id from a start-game response ({"gameId": "..."}).

    Raises:
        DecodeError: If no game id is present
    """
    game_id = first_text(payload, GAME_ID_FIELDS)
    if game_id is None:
        raise DecodeError(method, path, _dump(payload), reason="missing gameId")
    return game_id


def parse_game_summary(raw: Any) -> GameSummary:
    """
    Map one raw active-game record to a GameSummary.

    id is gameId when it is a string, otherwise the JSON-encoded record;
    player A is players[0], or "unknown".
    """
    record = raw if isinstance(raw, Mapping) else {}

    game_id = record.get("gameId")
    if not isinstance(game_id, str):
        game_id = _dump(raw)

    players = record.get("players")
    if isinstance(players, list) and players:
        player_a_id = str(players[0])
    else:
        player_a_id = UNKNOWN_PLAYER

    try:
        mode = GameMode(record.get("mode", GameMode.CLASSIC))
    except ValueError:
        mode = GameMode.CLASSIC

    return GameSummary(id=game_id, player_a_id=player_a_id, mode=mode)


def parse_game_summaries(payload: Any) -> list[GameSummary]:
    return [parse_game_summary(raw) for raw in as_record_list(payload, *GAME_LIST_KEYS)]


def _dump(payload: Any) -> str:
    try:
        return json.dumps(payload, separators=(",", ":"), default=str)
    except (TypeError, ValueError):
        return repr(payload)
