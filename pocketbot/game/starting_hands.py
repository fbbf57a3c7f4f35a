"""Heads-up win odds for two-card starting hands."""

from .cards import Card, Hand, RANK_STR

SUITED = "="

# Every heads-up starting hand that wins more than half the time,
# as (hand, win probability). Suited hands carry a trailing "=".
STARTING_HAND_ODDS = [
    ("AA", 0.8493), ("KK", 0.8212), ("QQ", 0.7963), ("JJ", 0.7715),
    ("TT", 0.7466), ("99", 0.7167), ("88", 0.6872), ("AK=", 0.6622),
    ("77", 0.6573), ("AQ=", 0.6531), ("AJ=", 0.6440), ("AK", 0.6447),
    ("AT=", 0.6349), ("AQ", 0.6351), ("AJ", 0.6254), ("KQ=", 0.6241),
    ("66", 0.6270), ("A9=", 0.6151), ("AT", 0.6157), ("KJ=", 0.6148),
    ("A8=", 0.6051), ("KT=", 0.6059), ("KQ", 0.6043), ("A7=", 0.5939),
    ("A9", 0.5945), ("KJ", 0.5944), ("55", 0.5964), ("QJ=", 0.5907),
    ("K9=", 0.5864), ("A5=", 0.5806), ("A6=", 0.5818), ("A8", 0.5837),
    ("KT", 0.5849), ("QT=", 0.5817), ("A4=", 0.5714), ("A7", 0.5717),
    ("K8=", 0.5679), ("A3=", 0.5634), ("QJ", 0.5691), ("K9", 0.5641),
    ("A5", 0.5574), ("A6", 0.5587), ("Q9=", 0.5622), ("K7=", 0.5585),
    ("JT=", 0.5615), ("A2=", 0.5551), ("QT", 0.5595), ("44", 0.5626),
    ("A4", 0.5473), ("K6=", 0.5480), ("K8", 0.5443), ("Q8=", 0.5442),
    ("A3", 0.5386), ("K5=", 0.5383), ("J9=", 0.5411), ("Q9", 0.5386),
    ("JT", 0.5383), ("K7", 0.5342), ("A2", 0.5295), ("K4=", 0.5289),
    ("Q7=", 0.5252), ("K6", 0.5230), ("K3=", 0.5207), ("T9=", 0.5238),
    ("J8=", 0.5231), ("33", 0.5284), ("Q6=", 0.5168), ("Q8", 0.5193),
    ("K5", 0.5125), ("J9", 0.5164), ("K2=", 0.5124), ("Q5=", 0.5071),
    ("T8=", 0.5051), ("K4", 0.5023), ("J7=", 0.5045),
]


def _sorted_ranks(letters: str) -> str:
    return "".join(sorted(letters))


def canonical_key(card_a: Card, card_b: Card) -> str:
    """
    Build the starting-hand key for two hole cards.

    The key is the two rank letters in sorted order, followed by "="
    when the cards share a suit. Card order does not matter.
    """
    key = _sorted_ranks(str(card_a)[0] + str(card_b)[0])
    if card_a.suit == card_b.suit:
        key += SUITED
    return key


def hand_key(hand: Hand) -> str:
    """Starting-hand key of the hole cards, e.g. "AK=" or "9A"."""
    return canonical_key(hand.card1, hand.card2)


def normalize_key(text: str) -> str:
    """
    Canonicalize a written starting hand.

    Examples:
        "KA=" -> "AK="
        "AKs" -> "AK="
        "AKo" -> "AK"
        "72" -> "27"
    """
    text = text.strip()
    suited = False
    if text.endswith(SUITED) or text.endswith("s"):
        suited = True
        text = text[:-1]
    elif text.endswith("o"):
        text = text[:-1]

    letters = text.upper()
    if len(letters) != 2 or any(c not in RANK_STR.values() for c in letters):
        raise ValueError(f"Invalid starting hand: {text}")
    return _sorted_ranks(letters) + (SUITED if suited else "")


class StartingHandTable:
    """Lookup of pre-computed win probabilities; unknown hands score 0."""

    def __init__(self, entries=STARTING_HAND_ODDS):
        self._odds: dict[str, float] = {}
        for hand, odds in entries:
            self.add(hand, odds)

    def add(self, hand: str, odds: float) -> None:
        if not 0.0 < odds <= 1.0:
            raise ValueError(f"Win probability out of range for {hand}: {odds}")
        self._odds[normalize_key(hand)] = odds

    def lookup(self, key: str) -> float:
        """Win probability for a written hand, or 0.0 if not listed."""
        try:
            key = normalize_key(key)
        except ValueError:
            return 0.0
        return self._odds.get(key, 0.0)

    def lookup_cards(self, card_a: Card, card_b: Card) -> float:
        return self._odds.get(canonical_key(card_a, card_b), 0.0)

    def __contains__(self, key: str) -> bool:
        return self.lookup(key) > 0.0

    def __len__(self) -> int:
        return len(self._odds)


STARTING_HANDS = StartingHandTable()
