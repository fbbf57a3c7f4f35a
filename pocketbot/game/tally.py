"""Frequency counting of card multisets."""

from typing import Iterable

import numpy as np

from .cards import Card, NUM_RANKS, NUM_SUITS
from .category import HandCategory

# Returned when a structure is absent
NONE = -1


class CardTally:
    """
    Suit and rank counts for a multiset of cards.

    The grid holds one cell per suit/rank pair; cards may be added more
    than once, so cells are counts rather than flags. A tally is reused
    across hands by calling clear() first.
    """

    def __init__(self, cards: Iterable[Card] = ()):
        self.grid = np.zeros((NUM_SUITS, NUM_RANKS), dtype=np.int64)
        self.suit_counts = np.zeros(NUM_SUITS, dtype=np.int64)
        self.rank_counts = np.zeros(NUM_RANKS, dtype=np.int64)
        self.add_all(cards)

    def add(self, card: Card) -> None:
        """Add a single card."""
        self.grid[card.suit, card.rank] += 1
        self.suit_counts[card.suit] += 1
        self.rank_counts[card.rank] += 1

    def add_all(self, cards: Iterable[Card]) -> None:
        for card in cards:
            self.add(card)

    def clear(self) -> None:
        """Reset every counter to zero."""
        self.grid.fill(0)
        self.suit_counts.fill(0)
        self.rank_counts.fill(0)

    @property
    def total(self) -> int:
        return int(self.suit_counts.sum())

    def __len__(self) -> int:
        return self.total

    def suit_count(self, suit: int) -> int:
        return int(self.suit_counts[suit])

    def rank_count(self, rank: int) -> int:
        return int(self.rank_counts[rank])

    def has_flush(self) -> bool:
        """True if any suit holds five or more cards."""
        return bool((self.suit_counts >= 5).any())

    def highest_multiple(self, n: int) -> int:
        """
        Find the highest rank held at least n times.

        Args:
            n: 2 for a pair, 3 for three of a kind, 4 for four of a kind

        Returns:
            The rank, or NONE if no rank qualifies
        """
        for rank in range(NUM_RANKS - 1, -1, -1):
            if self.rank_counts[rank] >= n:
                return rank
        return NONE

    def count_multiples(self, n: int) -> int:
        """Number of distinct ranks held at least n times."""
        return int((self.rank_counts >= n).sum())

    def highest_straight(self, length: int = 5) -> int:
        """
        Find the best run of consecutive ranks in any suits.

        Ranks are scanned from Ace down, so the first qualifying run is the
        highest one. The Ace only counts high: A-2-3-4-5 is not a run.

        Args:
            length: Number of consecutive ranks (5 for a normal straight)

        Returns:
            The lowest rank of the run, or NONE if none was found
        """
        return _first_run(self.rank_counts, length)

    def highest_straight_flush(self, length: int = 5) -> int:
        """
        Find the best same-suit run of consecutive ranks.

        Args:
            length: Number of consecutive ranks (5 for a normal straight flush)

        Returns:
            The lowest rank of the highest run across suits, or NONE
        """
        return max(_first_run(row, length) for row in self.grid)

    def has_full_house(self) -> bool:
        """Three of one rank plus at least a pair of another."""
        trips = self.highest_multiple(3)
        if trips == NONE:
            return False
        return any(
            count >= 2 for rank, count in enumerate(self.rank_counts) if rank != trips
        )

    def classify(self) -> HandCategory:
        """Return the strongest category present in the tally."""
        if self.highest_straight_flush(5) != NONE:
            return HandCategory.STRAIGHT_FLUSH
        if self.highest_multiple(4) != NONE:
            return HandCategory.FOUR_OF_A_KIND
        if self.has_full_house():
            return HandCategory.FULL_HOUSE
        if self.has_flush():
            return HandCategory.FLUSH
        if self.highest_straight(5) != NONE:
            return HandCategory.STRAIGHT
        if self.highest_multiple(3) != NONE:
            return HandCategory.THREE_OF_A_KIND
        if self.count_multiples(2) > 1:
            return HandCategory.TWO_PAIR
        if self.highest_multiple(2) != NONE:
            return HandCategory.PAIR
        return HandCategory.NO_PAIR

    def __repr__(self) -> str:
        return f"CardTally(cards={self.total}, suits={self.suit_counts.tolist()})"


def _first_run(counts: np.ndarray, length: int) -> int:
    """Lowest rank of the first run of occupied ranks, scanning from the top."""
    continuous = 0
    for rank in range(NUM_RANKS - 1, -1, -1):
        if counts[rank] == 0:
            continuous = 0
        else:
            continuous += 1
            if continuous >= length:
                return rank
    return NONE
