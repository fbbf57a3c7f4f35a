"""Per-round bookkeeping of chips committed by the bot."""

from dataclasses import dataclass
from typing import Optional

from .actions import ActionType


@dataclass
class RoundLedger:
    """Chips called and raised in the current round."""
    called: int = 0
    raised: int = 0
    round: Optional[int] = None

    def record_action(self, action_type: ActionType, amount: int) -> None:
        """Add a call or raise to the round totals. Checks and folds cost nothing."""
        if amount < 0:
            raise ValueError(f"Negative amount for {action_type.name}: {amount}")
        if action_type == ActionType.CALL:
            self.called += amount
        elif action_type == ActionType.RAISE:
            self.raised += amount

    def committed_so_far(self) -> int:
        return self.called + self.raised

    def reset_for_new_round(self) -> None:
        self.called = 0
        self.raised = 0

    def observe_round(self, round_index: int) -> bool:
        """
        Track the engine's round index.

        Returns:
            True if the index changed and the totals were reset
        """
        if round_index == self.round:
            return False
        self.round = round_index
        self.reset_for_new_round()
        return True
