"""
Rule-based betting policy.

Each call to decide() picks one action from the hole cards, the board
and the chips already committed this round:

- Pre-flop: starting-hand win odds decide between a bounded raise
  and the curiosity rule (cheap call or check).
- Post-flop: the hand category, measured against what the board
  shows on its own, scales a raise or gates a call.
"""

from dataclasses import dataclass, field
from typing import Optional

from pocketbot.game.categorizer import HandCategorizer, TreysRanker
from pocketbot.game.category import HandCategory
from pocketbot.game.starting_hands import STARTING_HANDS, StartingHandTable
from .actions import Action, ActionType
from .ledger import RoundLedger
from .state import BotState


# Rough odds against making each category, used to scale raises
CATEGORY_ODDS = {
    HandCategory.STRAIGHT_FLUSH: 72192,
    HandCategory.FOUR_OF_A_KIND: 4164,
    HandCategory.FULL_HOUSE: 693,
    HandCategory.FLUSH: 508,
    HandCategory.STRAIGHT: 254,
    HandCategory.THREE_OF_A_KIND: 46,
    HandCategory.TWO_PAIR: 20,
    HandCategory.PAIR: 2,
    HandCategory.NO_PAIR: 1,
}


@dataclass
class PolicyConfig:
    """Configuration for the betting policy."""
    strong_preflop_odds: float = 0.55   # Raise regardless of the opponent above this
    curiosity_ratio: float = 0.05       # Max (bb - sb) / stack for a curiosity call
    min_raise_blinds: int = 2           # Minimum raise in big blinds
    odds_divisor: float = 120.0         # Category odds per extra big blind raised
    stack_lead_bonus: float = 0.15      # Share of our stack lead added to raises
    half_strength: float = 0.5          # Raise scale for trips and two pair

    # Hole rank sums needed to call with a shared or board-made hand
    made_hand_call_sum: int = 15
    pair_call_sum: int = 20

    category_odds: dict[HandCategory, int] = field(
        default_factory=lambda: dict(CATEGORY_ODDS)
    )


class BettingPolicy:
    """
    Deterministic betting policy for one bot.

    Owns the round ledger and a scratch categorizer, so one instance
    serves one seat and handles one decision at a time.
    """

    def __init__(
        self,
        config: Optional[PolicyConfig] = None,
        categorizer: Optional[HandCategorizer] = None,
        table: Optional[StartingHandTable] = None,
    ):
        """
        Initialize the policy.

        Args:
            config: Thresholds and raise sizing
            categorizer: Hand categorizer (treys oracle by default)
            table: Starting-hand odds (built-in table by default)
        """
        self.config = config or PolicyConfig()
        self.categorizer = categorizer or HandCategorizer(ranker=TreysRanker())
        self.table = table if table is not None else STARTING_HANDS
        self.ledger = RoundLedger()

    def decide(self, state: BotState) -> Action:
        """Choose and record the action for this decision."""
        self.ledger.observe_round(state.round)

        if state.is_preflop:
            action = self._preflop(state)
        else:
            action = self._postflop(state)

        self.ledger.record_action(action.action_type, action.amount)
        return action

    # Pre-flop

    def preflop_win_odds(self, state: BotState) -> float:
        return self.table.lookup_cards(state.hand.card1, state.hand.card2)

    def _preflop(self, state: BotState) -> Action:
        win_odds = self.preflop_win_odds(state)

        if win_odds > self.config.strong_preflop_odds:
            return self.preflop_raise(state, win_odds) or Action(ActionType.CALL)

        if win_odds > 0 and not state.opponent_raised:
            action = self.preflop_raise(state, win_odds)
            if action is not None:
                return action

        return self.curiosity(state)

    def preflop_raise(self, state: BotState, win_odds: float) -> Optional[Action]:
        """
        Raise in proportion to the starting-hand odds.

        Raising stops once the round's commitment reaches both the
        minimum raise and the odds-weighted share of our stack.

        Returns:
            The raise, or None when we are being re-raised past our budget
        """
        min_raise = self.config.min_raise_blinds * state.big_blind
        max_raise = win_odds * state.stack
        committed = self.ledger.committed_so_far()

        if committed < max_raise or committed < min_raise:
            amount = max(min_raise, max_raise / 2)
            return Action(ActionType.RAISE, round(amount))
        return None

    # Post-flop

    def _postflop(self, state: BotState) -> Action:
        hand, board = state.hand, state.board
        category = self.categorizer.hand_category(hand, board)

        # The hole cards add nothing to what the board already shows
        if self.categorizer.board_category(board) >= category:
            return self.curiosity(state)

        odds = self.config.category_odds[category]

        if category >= HandCategory.STRAIGHT:
            return self.postflop_raise(state, odds) or Action(ActionType.CALL)

        if category in (HandCategory.THREE_OF_A_KIND, HandCategory.TWO_PAIR):
            if self.categorizer.is_concealed(hand, board) or not self.categorizer.board_has_pair(board):
                action = self.postflop_raise(state, odds, self.config.half_strength)
                if action is not None:
                    return action
            if hand.rank_sum > self.config.made_hand_call_sum:
                return Action(ActionType.CALL, state.amount_to_call)

        elif category == HandCategory.PAIR:
            if hand.rank_sum > self.config.pair_call_sum:
                return Action(ActionType.CALL, state.amount_to_call)

        return Action(ActionType.CHECK)

    def postflop_raise(
        self,
        state: BotState,
        odds: int,
        strength: float = 1.0,
    ) -> Optional[Action]:
        """
        Raise in proportion to how rare our hand is.

        Args:
            state: Current table state
            odds: Odds against the hand category
            strength: Scale of the raise and of the round budget

        Returns:
            The raise, or None once strength * stack is committed
        """
        if self.ledger.committed_so_far() >= strength * state.stack:
            return None

        blinds = self.config.min_raise_blinds + odds / self.config.odds_divisor
        amount = blinds * state.big_blind + self.config.stack_lead_bonus * state.stack_lead
        amount = max(self.config.min_raise_blinds * state.big_blind, amount * strength)
        return Action(ActionType.RAISE, round(amount))

    # Shared

    def curiosity(self, state: BotState) -> Action:
        """Pay a small curiosity fee to see more cards, otherwise check."""
        blind_gap = state.big_blind - state.small_blind
        if state.stack <= 0:
            return Action(ActionType.CHECK)

        cost_ratio = blind_gap / state.stack
        if cost_ratio < self.config.curiosity_ratio and state.amount_to_call <= blind_gap:
            return Action(ActionType.CALL, state.amount_to_call)
        return Action(ActionType.CHECK)
