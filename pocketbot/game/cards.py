"""Card and hand representation utilities."""

from dataclasses import dataclass
from enum import IntEnum
import random

from treys import Card as TreysCard


class Rank(IntEnum):
    """Card ranks (0-12 where 12 is Ace)."""
    TWO = 0
    THREE = 1
    FOUR = 2
    FIVE = 3
    SIX = 4
    SEVEN = 5
    EIGHT = 6
    NINE = 7
    TEN = 8
    JACK = 9
    QUEEN = 10
    KING = 11
    ACE = 12


class Suit(IntEnum):
    """Card suits, in engine card-number order."""
    SPADES = 0
    HEARTS = 1
    CLUBS = 2
    DIAMONDS = 3


NUM_RANKS = 13
NUM_SUITS = 4

# Mapping for string conversion
RANK_STR = {
    0: "2", 1: "3", 2: "4", 3: "5", 4: "6", 5: "7", 6: "8", 7: "9",
    8: "T", 9: "J", 10: "Q", 11: "K", 12: "A"
}
STR_RANK = {v: k for k, v in RANK_STR.items()}

SUIT_STR = {0: "s", 1: "h", 2: "c", 3: "d"}
STR_SUIT = {v: k for k, v in SUIT_STR.items()}


@dataclass(frozen=True, order=True)
class Card:
    """A playing card, ordered by rank first."""
    rank: int  # 0-12
    suit: int  # 0-3

    def __str__(self) -> str:
        return f"{RANK_STR[self.rank]}{SUIT_STR[self.suit]}"

    def __repr__(self) -> str:
        return str(self)

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Parse card from string like 'As', 'Th', '2c'."""
        if len(s) != 2:
            raise ValueError(f"Invalid card string: {s}")
        rank_char = s[0].upper()
        suit_char = s[1].lower()

        if rank_char not in STR_RANK:
            raise ValueError(f"Invalid rank: {rank_char}")
        if suit_char not in STR_SUIT:
            raise ValueError(f"Invalid suit: {suit_char}")

        return cls(rank=STR_RANK[rank_char], suit=STR_SUIT[suit_char])

    @classmethod
    def from_number(cls, number: int) -> "Card":
        """Build a card from its engine number (suit * 13 + rank)."""
        if not 0 <= number < NUM_RANKS * NUM_SUITS:
            raise ValueError(f"Invalid card number: {number}")
        return cls(rank=number % NUM_RANKS, suit=number // NUM_RANKS)

    @property
    def number(self) -> int:
        return self.suit * NUM_RANKS + self.rank

    def to_treys(self) -> int:
        """Convert to treys library card format."""
        return TreysCard.new(str(self))


@dataclass
class Hand:
    """The two hole cards, in the order they were dealt."""
    card1: Card
    card2: Card

    @property
    def cards(self) -> list[Card]:
        return [self.card1, self.card2]

    @property
    def is_pair(self) -> bool:
        """Check if hand is a pocket pair."""
        return self.card1.rank == self.card2.rank

    @property
    def is_suited(self) -> bool:
        """Check if hand is suited."""
        return self.card1.suit == self.card2.suit

    @property
    def rank_sum(self) -> int:
        return self.card1.rank + self.card2.rank

    def __str__(self) -> str:
        return f"{self.card1}{self.card2}"

    def __repr__(self) -> str:
        return f"Hand({self.card1}, {self.card2})"

    @classmethod
    def from_string(cls, s: str) -> "Hand":
        """Parse hand from string like 'AsKh' or '[As,Kh]'."""
        cards = parse_cards(s)
        if len(cards) != 2:
            raise ValueError(f"Invalid hand string: {s}")
        return cls(cards[0], cards[1])


class Deck:
    """A standard 52-card deck."""

    def __init__(self, seed: int | None = None):
        self.cards: list[Card] = []
        self._random = random.Random(seed)
        self.reset()

    def reset(self) -> None:
        """Reset deck to full 52 cards."""
        self.cards = [Card.from_number(n) for n in range(NUM_RANKS * NUM_SUITS)]

    def shuffle(self) -> None:
        """Shuffle the deck."""
        self._random.shuffle(self.cards)

    def deal(self, n: int = 1) -> list[Card]:
        """Deal n cards from the deck."""
        if n > len(self.cards):
            raise ValueError(f"Cannot deal {n} cards, only {len(self.cards)} remaining")
        dealt = self.cards[:n]
        self.cards = self.cards[n:]
        return dealt

    def remove(self, cards: list[Card]) -> None:
        """Remove specific cards from the deck."""
        for card in cards:
            if card in self.cards:
                self.cards.remove(card)

    def __len__(self) -> int:
        return len(self.cards)


def parse_cards(text: str) -> list[Card]:
    """
    Parse a list of cards.

    Accepts the engine's bracketed form ("[Tc,8d,9c]"), separated
    cards ("Tc 8d 9c") or a run of card pairs ("Tc8d9c").

    Examples:
        "[]" -> []
        "[As,Kh]" -> [As, Kh]
        "AsKh" -> [As, Kh]
    """
    text = text.strip().strip("[]")
    for sep in (",", " "):
        text = text.replace(sep, "")
    if len(text) % 2:
        raise ValueError(f"Invalid card list: {text}")
    return [Card.from_string(text[i:i + 2]) for i in range(0, len(text), 2)]
