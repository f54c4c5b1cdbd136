"""
Card metadata cache.

Append-only mapping of card code to CanonicalCard. Entries are never
evicted or invalidated; the cache lives as long as whoever owns it (the
ChronosClient, i.e. one application session).

Concurrent lookups of the same code may both miss and both write. That is
harmless: normalization is pure, so every write for a code stores an equal
value.
"""

from collections.abc import Iterable, Iterator

from chronosclient.models.card import CanonicalCard


class CardCache:
    """In-memory card metadata cache keyed by card code."""

    def __init__(self) -> None:
        self._cards: dict[str, CanonicalCard] = {}

    def get(self, code: str) -> CanonicalCard | None:
        return self._cards.get(code)

    def put(self, card: CanonicalCard) -> CanonicalCard:
        """Store a card under its own code and return it."""
        self._cards[card.code] = card
        return card

    def missing(self, codes: Iterable[str]) -> list[str]:
        """
        Codes not yet cached.

        Returns:
            De-duplicated list, in first-seen order.
        """
        seen: set[str] = set()
        result: list[str] = []
        for code in codes:
            if code in seen or code in self._cards:
                continue
            seen.add(code)
            result.append(code)
        return result

    def __contains__(self, code: object) -> bool:
        return code in self._cards

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[str]:
        return iter(self._cards)
