"""Client gateway for the Chronos card-game backend."""

from chronosclient.client import ChronosClient, get_chronos_client, reset_chronos_client

__all__ = [
    "ChronosClient",
    "get_chronos_client",
    "reset_chronos_client",
]
