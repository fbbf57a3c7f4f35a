"""Snapshot of the table handed to the policy for one decision."""

from dataclasses import dataclass, field
from typing import Optional

from pocketbot.game.cards import Card, Hand
from .actions import Action


@dataclass
class BotState:
    """
    Everything the policy reads for a decision.

    Amounts are in chips. The board holds 0, 3, 4 or 5 cards.
    """
    hand: Hand
    board: list[Card] = field(default_factory=list)
    big_blind: int = 20
    small_blind: int = 10
    stack: int = 0
    opponent_stack: int = 0
    amount_to_call: int = 0
    opponent_action: Optional[Action] = None
    round: int = 0
    name: str = ""
    time_budget: Optional[int] = None  # ms allowed for this decision

    @property
    def is_preflop(self) -> bool:
        return len(self.board) < 3

    @property
    def opponent_raised(self) -> bool:
        return self.opponent_action is not None and self.opponent_action.is_raise

    @property
    def stack_lead(self) -> int:
        """Chips we hold over the opponent, zero when behind."""
        return max(0, self.stack - self.opponent_stack)
