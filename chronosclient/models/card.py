"""
Canonical Card Model.

This module defines the stable card shape handed to consumers, independent
of which backend revision produced the raw record.

INVARIANTS:
- Every numeric field is a number (never None)
- Text fields are strings (never None)
- Instances are frozen (safe to share through the cache)
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CanonicalCard:
    """
    Normalized card metadata.

    Attributes:
        code: Unique card code, also the cache key (e.g., "C01")
        name: Display name
        description: Rules or flavor text, empty when the backend omits it
        image_url: Card art URL, empty when unknown
        damage: Damage dealt when played
        heal: Health restored when played
        fire: Fire attribute value (duel mode)
        might: Might attribute value (duel mode)
        magic: Magic attribute value (duel mode)
        number: Corner number printed on the card
    """

    code: str
    name: str = ""
    description: str = ""
    image_url: str = ""
    damage: float = 0
    heal: float = 0
    fire: float = 0
    might: float = 0
    magic: float = 0
    number: float = 0
