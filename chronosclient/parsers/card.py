"""
Card record normalization.

Turns loosely-typed backend card records into CanonicalCard. Normalization
is total: any input, including non-mapping garbage, produces a card with
numeric defaults rather than an exception.
"""

from collections.abc import Mapping
from typing import Any

from chronosclient.models.card import CanonicalCard
from chronosclient.parsers.candidates import first_number, first_text

# Priority order for the corner number; first parseable hit wins
CARD_NUMBER_FIELDS: tuple[str, ...] = (
    "number",
    "cardNumber",
    "cornerNumber",
    "meta.number",
    "metadata.number",
    "no",
    "idx",
    "id",
)

CARD_IMAGE_FIELDS: tuple[str, ...] = ("imageUrl", "image_url", "image")

CARD_STAT_FIELDS: tuple[str, ...] = ("damage", "heal", "fire", "might", "magic")


def resolve_card_number(raw: Any) -> int | float:
    """
    Resolve the card number from the first usable candidate field.

    Args:
        raw: Raw card record

    Returns:
        The coerced number, or 0 when no candidate parses.
    """
    return first_number(raw, CARD_NUMBER_FIELDS)


def normalize_card(raw: Any) -> CanonicalCard:
    """
    Convert a raw card record into a CanonicalCard.

    Args:
        raw: Card record as returned by any /game/cards endpoint

    Returns:
        CanonicalCard with text fields defaulted to "" and numbers to 0.
    """
    if not isinstance(raw, Mapping):
        raw = {}

    stats = {field: first_number(raw, (field,)) for field in CARD_STAT_FIELDS}

    return CanonicalCard(
        code=first_text(raw, ("code",)) or "",
        name=_text(raw.get("name")),
        description=_text(raw.get("description")),
        image_url=first_text(raw, CARD_IMAGE_FIELDS) or "",
        number=resolve_card_number(raw),
        **stats,
    )


def _text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)
