"""Hand categorization for hole cards combined with the board."""

from typing import Callable, Optional, Sequence

from treys import Evaluator

from .cards import Card, Hand
from .category import HandCategory
from .tally import CardTally, NONE

# Anything that maps a set of cards onto a HandCategory. A ranker may
# carry a min_cards attribute; smaller sets go to the counting tally.
HandRanker = Callable[[Sequence[Card]], HandCategory]

DEFAULT_MIN_CARDS = 5


def counting_rank(cards: Sequence[Card]) -> HandCategory:
    """Exact categorization by counting suits and ranks."""
    return CardTally(cards).classify()


class TreysRanker:
    """
    Oracle ranking backed by the treys evaluator.

    treys scores 5, 6 or 7 cards and reports a rank class from 1
    (straight flush) to 9 (high card).
    """

    min_cards = 5
    max_cards = 7

    def __init__(self):
        self.evaluator = Evaluator()

    def score(self, cards: Sequence[Card]) -> int:
        """treys score, lower is better."""
        if not self.min_cards <= len(cards) <= self.max_cards:
            raise ValueError(
                f"treys ranks {self.min_cards}-{self.max_cards} cards, got {len(cards)}"
            )
        treys_cards = [c.to_treys() for c in cards]
        return self.evaluator.evaluate(treys_cards[:2], treys_cards[2:])

    def __call__(self, cards: Sequence[Card]) -> HandCategory:
        rank_class = self.evaluator.get_rank_class(self.score(cards))
        return HandCategory(len(HandCategory) - rank_class)


class HandCategorizer:
    """
    Categorizes hands for the betting policy.

    Uses an injected ranker when the card count allows it and the
    counting tally otherwise, so both paths speak HandCategory.
    """

    def __init__(self, ranker: Optional[HandRanker] = None):
        self.ranker = ranker
        self._tally = CardTally()

    def categorize(self, cards: Sequence[Card]) -> HandCategory:
        min_cards = getattr(self.ranker, "min_cards", DEFAULT_MIN_CARDS)
        if self.ranker is not None and len(cards) >= min_cards:
            return self.ranker(cards)
        self._tally.clear()
        self._tally.add_all(cards)
        return self._tally.classify()

    def hand_category(self, hole: Hand, board: Sequence[Card]) -> HandCategory:
        """Category of the hole cards with whatever is on the board."""
        if not board:
            return HandCategory.PAIR if hole.is_pair else HandCategory.NO_PAIR
        return self.categorize(hole.cards + list(board))

    def board_category(self, board: Sequence[Card]) -> HandCategory:
        """Category of the community cards on their own."""
        if not board:
            return HandCategory.NO_PAIR
        return self.categorize(board)

    def board_has_pair(self, board: Sequence[Card]) -> bool:
        self._tally.clear()
        self._tally.add_all(board)
        return self._tally.highest_multiple(2) != NONE

    def is_concealed(self, hole: Hand, board: Sequence[Card]) -> bool:
        """
        A pocket pair that makes trips with the board.

        A pocket pair on a paired board only makes two pair, which rests
        on the board's pair rather than the hole cards.
        """
        if not hole.is_pair:
            return False
        self._tally.clear()
        self._tally.add_all(hole.cards + list(board))
        return self._tally.rank_count(hole.card1.rank) >= 3
