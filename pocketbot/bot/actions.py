"""Betting actions exchanged with the engine."""

from dataclasses import dataclass
from enum import Enum, auto


class ActionType(Enum):
    """Moves the bot can send."""
    CALL = auto()
    RAISE = auto()
    CHECK = auto()
    FOLD = auto()

    @classmethod
    def from_string(cls, s: str) -> "ActionType":
        """Parse action type from an engine word."""
        s = s.lower().strip()
        mapping = {
            "call": cls.CALL,
            "raise": cls.RAISE,
            "check": cls.CHECK,
            "fold": cls.FOLD,
        }
        if s in mapping:
            return mapping[s]
        raise ValueError(f"Unknown action type: {s}")

    def __str__(self) -> str:
        return self.name.lower()


@dataclass(frozen=True)
class Action:
    """An action and the chips it puts in."""
    action_type: ActionType
    amount: int = 0

    def __post_init__(self):
        if self.amount < 0:
            raise ValueError(f"Negative amount for {self.action_type.name}: {self.amount}")
        if self.action_type in (ActionType.CHECK, ActionType.FOLD) and self.amount:
            raise ValueError(f"{self.action_type.name} cannot carry an amount")

    @property
    def is_raise(self) -> bool:
        return self.action_type == ActionType.RAISE

    def __str__(self) -> str:
        return f"{self.action_type} {self.amount}"
