"""Betting policy and the state it decides from."""

from .actions import Action, ActionType
from .state import BotState
from .ledger import RoundLedger
from .policy import BettingPolicy, PolicyConfig, CATEGORY_ODDS

__all__ = [
    "Action",
    "ActionType",
    "BotState",
    "RoundLedger",
    "BettingPolicy",
    "PolicyConfig",
    "CATEGORY_ODDS",
]
