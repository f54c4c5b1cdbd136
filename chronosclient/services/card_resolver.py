"""
Card metadata resolution.

Resolves card codes to CanonicalCard with a two-tier strategy:

1. Preferred endpoint: GET /game/cards/{code} for one code,
   GET /game/cards?codes=a,b,c for a batch.
2. Fallback: GET /game/cards (full catalog), scanned for the codes still
   missing.

Each strategy step returns a LookupOutcome telling the caller whether the
fallback is needed, so the branching does not depend on exceptions. Every
resolved card is written into the shared CardCache.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any
from urllib.parse import quote

from chronosclient.config import CARD_CODES_SEPARATOR
from chronosclient.models.card import CanonicalCard
from chronosclient.models.failure import GatewayError, NotFoundError
from chronosclient.parsers.candidates import as_record_list
from chronosclient.parsers.card import normalize_card
from chronosclient.services.card_cache import CardCache
from chronosclient.services.request_executor import RequestExecutor

logger = logging.getLogger(__name__)

CARDS_PATH = "/game/cards"

# Keys newer backends wrap card lists in
CARD_LIST_KEYS: tuple[str, ...] = ("cards", "data", "items")


@dataclass(frozen=True, slots=True)
class LookupOutcome:
    """Result of one resolution strategy step."""

    cards: list[CanonicalCard] = field(default_factory=list)
    """Cards this step resolved."""

    needs_fallback: bool = False
    """True when the caller should try the next strategy."""

    reason: str | None = None
    """Why the step fell short, for logging."""

    @classmethod
    def resolved(cls, cards: list[CanonicalCard]) -> "LookupOutcome":
        return cls(cards=cards)

    @classmethod
    def fallback(cls, reason: str, cards: list[CanonicalCard] | None = None) -> "LookupOutcome":
        return cls(cards=cards or [], needs_fallback=True, reason=reason)


class CardMetadataResolver:
    """
    Resolves card codes through cache, preferred endpoint, then catalog.

    The cache is injected so its lifetime belongs to the composing client.
    """

    def __init__(self, executor: RequestExecutor, cache: CardCache) -> None:
        self._executor = executor
        self.cache = cache

    async def get_card_meta(self, code: str) -> CanonicalCard:
        """
        Resolve a single card code.

        Args:
            code: Card code

        Returns:
            The cached or freshly resolved CanonicalCard

        Raises:
            NotFoundError: If neither the direct endpoint nor the catalog knows the code
            GatewayError: If the catalog request itself fails
        """
        cached = self.cache.get(code)
        if cached is not None:
            return cached

        outcome = await self._lookup_direct(code)
        if not outcome.needs_fallback:
            return self.cache.put(outcome.cards[0])

        logger.info(
            "card_meta_catalog_fallback",
            extra={"code": code, "reason": outcome.reason},
        )
        catalog = await self._fetch_catalog()
        for card in catalog:
            if card.code == code:
                return self.cache.put(card)

        raise NotFoundError(code)

    async def get_card_metas(self, codes: Iterable[str]) -> list[CanonicalCard]:
        """
        Resolve several card codes.

        Codes that no strategy resolves are omitted, so the result may be
        shorter than the request.

        Args:
            codes: Card codes, in the order the result should follow

        Returns:
            Resolved cards in request order
        """
        requested = list(codes)
        missing = self.cache.missing(requested)

        if missing:
            outcome = await self._lookup_batch(missing)
            for card in outcome.cards:
                self.cache.put(card)

            still_missing = [code for code in missing if code not in self.cache]
            if still_missing:
                logger.info(
                    "card_metas_catalog_fallback",
                    extra={
                        "missing_count": len(still_missing),
                        "reason": outcome.reason or "batch response incomplete",
                    },
                )
                await self._fill_from_catalog(still_missing)

        result: list[CanonicalCard] = []
        for code in requested:
            card = self.cache.get(code)
            if card is not None:
                result.append(card)
        return result

    async def _lookup_direct(self, code: str) -> LookupOutcome:
        try:
            payload = await self._executor.request(f"{CARDS_PATH}/{quote(code, safe='')}")
        except GatewayError as e:
            return LookupOutcome.fallback(f"direct lookup failed: {e.message}")

        if not isinstance(payload, dict):
            return LookupOutcome.fallback("direct lookup returned no card")

        card = normalize_card(payload)
        if card.code != code:
            return LookupOutcome.fallback(f"direct lookup returned code {card.code!r}")
        return LookupOutcome.resolved([card])

    async def _lookup_batch(self, codes: list[str]) -> LookupOutcome:
        joined = CARD_CODES_SEPARATOR.join(quote(code, safe="") for code in codes)
        try:
            payload = await self._executor.request(f"{CARDS_PATH}?codes={joined}")
        except GatewayError as e:
            return LookupOutcome.fallback(f"batch lookup failed: {e.message}")

        wanted = set(codes)
        cards = [card for card in _normalize_list(payload) if card.code in wanted]
        if len(cards) < len(wanted):
            return LookupOutcome.fallback("batch lookup incomplete", cards)
        return LookupOutcome.resolved(cards)

    async def _fill_from_catalog(self, codes: list[str]) -> None:
        try:
            catalog = await self._fetch_catalog()
        except GatewayError as e:
            logger.warning(
                "card_catalog_unavailable",
                extra={"missing_count": len(codes), "error": e.message},
            )
            return

        wanted = set(codes)
        for card in catalog:
            if card.code in wanted:
                self.cache.put(card)
                wanted.discard(card.code)

        if wanted:
            logger.info(
                "card_metas_unresolved",
                extra={"codes": sorted(wanted)[:10], "unresolved_count": len(wanted)},
            )

    async def _fetch_catalog(self) -> list[CanonicalCard]:
        payload = await self._executor.request(CARDS_PATH)
        return _normalize_list(payload)


def _normalize_list(payload: Any) -> list[CanonicalCard]:
    cards = [normalize_card(raw) for raw in as_record_list(payload, *CARD_LIST_KEYS)]
    return [card for card in cards if card.code]
