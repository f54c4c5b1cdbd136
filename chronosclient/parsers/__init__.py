from chronosclient.parsers.card import CARD_NUMBER_FIELDS, normalize_card, resolve_card_number
from chronosclient.parsers.game import parse_game_summaries, parse_game_summary
from chronosclient.parsers.social import (
    normalize_chat_message,
    normalize_friend,
    normalize_friend_request,
    normalize_records,
)

__all__ = [
    "CARD_NUMBER_FIELDS",
    "normalize_card",
    "normalize_chat_message",
    "normalize_friend",
    "normalize_friend_request",
    "normalize_records",
    "parse_game_summaries",
    "parse_game_summary",
    "resolve_card_number",
]
