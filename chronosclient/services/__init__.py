"""
chronosclient services.

Network-facing facades over the backend REST surface.
"""

from chronosclient.services.auth import AuthService
from chronosclient.services.card_cache import CardCache
from chronosclient.services.card_resolver import CardMetadataResolver, LookupOutcome
from chronosclient.services.duel import DuelService
from chronosclient.services.friends import FriendsService
from chronosclient.services.game import GameService
from chronosclient.services.request_executor import RequestExecutor

__all__ = [
    "AuthService",
    "CardCache",
    "CardMetadataResolver",
    "DuelService",
    "FriendsService",
    "GameService",
    "LookupOutcome",
    "RequestExecutor",
]
