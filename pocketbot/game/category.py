"""Ordered hand categories shared by every ranking path."""

from enum import IntEnum


class HandCategory(IntEnum):
    """Poker hand categories, weakest to strongest."""
    NO_PAIR = 0
    PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    STRAIGHT = 4
    FLUSH = 5
    FULL_HOUSE = 6
    FOUR_OF_A_KIND = 7
    STRAIGHT_FLUSH = 8

    @property
    def label(self) -> str:
        return self.name.replace("_", " ").title()

    def __str__(self) -> str:
        return self.label


# Packed oracle ranks keep the category above this bit
VALUE_SHIFT = 24


def category_from_oracle_rank(rank: int, shift: int = VALUE_SHIFT) -> HandCategory:
    """
    Convert a packed oracle rank into a HandCategory.

    The oracle stores the category in the high bits of the rank and the
    kicker detail below them.

    Args:
        rank: Packed rank returned by the evaluator
        shift: Bit position of the category

    Returns:
        The matching HandCategory
    """
    index = rank >> shift
    if not 0 <= index < len(HandCategory):
        raise ValueError(f"Rank {rank} has no hand category")
    return HandCategory(index)

