"""
Attribute Duel contract.

The duel sub-mode is a server-owned stage machine:

    PICK_CARD -> PICK_ATTRIBUTE -> REVEAL -> RESOLVED

Stages only move forward. The one exception is "unchoose", which clears a
player's selection while the duel is still in PICK_CARD or PICK_ATTRIBUTE.
The client never drives transitions locally; it sends choices and re-reads
state to observe the stage the server settled on.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class DuelStage(str, Enum):
    """Server-side progression of an attribute duel."""

    PICK_CARD = "PICK_CARD"
    PICK_ATTRIBUTE = "PICK_ATTRIBUTE"
    REVEAL = "REVEAL"
    RESOLVED = "RESOLVED"

    @property
    def next_stage(self) -> "DuelStage | None":
        """Stage that follows this one, None once resolved."""
        return _NEXT_STAGE[self]

    @property
    def allows_unchoose(self) -> bool:
        """Whether a player may still withdraw a choice."""
        return self in (DuelStage.PICK_CARD, DuelStage.PICK_ATTRIBUTE)


_NEXT_STAGE: dict[DuelStage, DuelStage | None] = {
    DuelStage.PICK_CARD: DuelStage.PICK_ATTRIBUTE,
    DuelStage.PICK_ATTRIBUTE: DuelStage.REVEAL,
    DuelStage.REVEAL: DuelStage.RESOLVED,
    DuelStage.RESOLVED: None,
}


class DuelAttribute(str, Enum):
    """Card attribute compared in a duel."""

    MAGIC = "magic"
    MIGHT = "might"
    FIRE = "fire"


class DuelCenter(BaseModel):
    """
    Cards and choices currently on the duel table.

    Produced by the server, consumed for rendering only.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        coerce_numbers_to_str=True,
        frozen=True,
        extra="ignore",
    )

    a_card_code: str | None = None
    b_card_code: str | None = None
    chosen_attribute: DuelAttribute | None = None
    revealed: bool | None = None
    chooser_id: str | None = None
