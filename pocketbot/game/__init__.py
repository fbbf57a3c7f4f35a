"""Cards, hand categories and starting-hand odds."""

from .cards import Card, Hand, Deck, Rank, Suit, parse_cards
from .category import HandCategory, VALUE_SHIFT, category_from_oracle_rank
from .tally import CardTally, NONE
from .categorizer import HandCategorizer, TreysRanker, counting_rank
from .starting_hands import StartingHandTable, STARTING_HANDS, canonical_key

__all__ = [
    "Card",
    "Hand",
    "Deck",
    "Rank",
    "Suit",
    "parse_cards",
    "HandCategory",
    "VALUE_SHIFT",
    "category_from_oracle_rank",
    "CardTally",
    "NONE",
    "HandCategorizer",
    "TreysRanker",
    "counting_rank",
    "StartingHandTable",
    "STARTING_HANDS",
    "canonical_key",
]
