from chronosclient.models.auth import AuthSession, AuthUser
from chronosclient.models.card import CanonicalCard
from chronosclient.models.duel import DuelAttribute, DuelCenter, DuelStage
from chronosclient.models.failure import (
    DecodeError,
    FailureDetail,
    FailureKind,
    GatewayError,
    HttpError,
    NotFoundError,
    TransportError,
)
from chronosclient.models.game import GameMode, GameResult, GameState, GameSummary, PlayerStats
from chronosclient.models.social import ChatMessage, FriendRequest, FriendSummary

__all__ = [
    "AuthSession",
    "AuthUser",
    "CanonicalCard",
    "ChatMessage",
    "DecodeError",
    "DuelAttribute",
    "DuelCenter",
    "DuelStage",
    "FailureDetail",
    "FailureKind",
    "FriendRequest",
    "FriendSummary",
    "GameMode",
    "GameResult",
    "GameState",
    "GameSummary",
    "GatewayError",
    "HttpError",
    "NotFoundError",
    "PlayerStats",
    "TransportError",
]
