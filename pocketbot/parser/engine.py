"""Parser for the line-based engine protocol."""

import re
from typing import Iterable, Iterator, Optional

from pocketbot.bot.actions import Action, ActionType
from pocketbot.bot.policy import BettingPolicy
from pocketbot.bot.state import BotState
from pocketbot.game.cards import Card, Hand, parse_cards


class EngineParser:
    """
    Parser for the heads-up engine protocol.

    Protocol characteristics:
    - One instruction per line, space separated
    - "Settings" lines arrive once, "Match" lines at every hand
    - Player lines report stacks, hole cards and moves
    - "Action <bot> <ms>" asks the bot for a move
    """

    LINE_PATTERN = re.compile(r"^(\S+)\s+(\S+)(?:\s+(.+))?$")

    PLAYER_MOVES = {"call", "raise", "check", "fold"}

    def __init__(self, policy: Optional[BettingPolicy] = None):
        self.policy = policy or BettingPolicy()
        self.settings: dict[str, str] = {}
        self.name = ""
        self._stacks: dict[str, int] = {}
        self._reset_hand()
        self.round = 0
        self.small_blind = 10
        self.big_blind = 20

    def _reset_hand(self) -> None:
        self._hand: Optional[Hand] = None
        self._board: list[Card] = []
        self._amount_to_call = 0
        self._opponent_action: Optional[Action] = None

    def run(self, lines: Iterable[str]) -> Iterator[str]:
        """Consume engine lines, yielding one move per action request."""
        for line in lines:
            action = self.parse_line(line)
            if action is not None:
                yield str(action)

    def parse_line(self, line: str) -> Optional[Action]:
        """
        Apply one engine line.

        Returns:
            The bot's move if the line was an action request for us
        """
        line = line.strip()
        if not line:
            return None

        match = self.LINE_PATTERN.match(line)
        if not match:
            raise ValueError(f"Malformed engine line: {line}")
        head, key, value = match.group(1), match.group(2), match.group(3) or ""

        if head == "Settings":
            self._parse_setting(key, value)
        elif head == "Match":
            self._parse_match(key, value, line)
        elif head == "Action":
            if key == self.name:
                return self.policy.decide(self.build_state(self._to_int(value, line)))
        else:
            self._parse_player(head, key, value, line)
        return None

    def build_state(self, time_budget: Optional[int] = None) -> BotState:
        """Snapshot the parsed table for the policy."""
        if self._hand is None:
            raise ValueError("No hole cards received before action request")
        opponent_stack = sum(s for p, s in self._stacks.items() if p != self.name)
        return BotState(
            hand=self._hand,
            board=list(self._board),
            big_blind=self.big_blind,
            small_blind=self.small_blind,
            stack=self._stacks.get(self.name, 0),
            opponent_stack=opponent_stack,
            amount_to_call=self._amount_to_call,
            opponent_action=self._opponent_action,
            round=self.round,
            name=self.name,
            time_budget=time_budget,
        )

    def _parse_setting(self, key: str, value: str) -> None:
        if key == "your_bot":
            self.name = value
        self.settings[key] = value

    def _parse_match(self, key: str, value: str, line: str) -> None:
        if key == "round":
            self.round = self._to_int(value, line)
            self._reset_hand()
        elif key == "small_blind":
            self.small_blind = self._to_int(value, line)
        elif key == "big_blind":
            self.big_blind = self._to_int(value, line)
        elif key == "table":
            self._board = self._to_cards(value, line)
        elif key == "amount_to_call":
            self._amount_to_call = self._to_int(value, line)

    def _parse_player(self, player: str, key: str, value: str, line: str) -> None:
        if key == "stack":
            self._stacks[player] = self._to_int(value, line)
        elif key == "hand":
            if player == self.name:
                cards = self._to_cards(value, line)
                if len(cards) != 2:
                    raise ValueError(f"Expected two hole cards: {line}")
                self._hand = Hand(cards[0], cards[1])
        elif key in self.PLAYER_MOVES:
            if player != self.name:
                amount = self._to_int(value or "0", line)
                action_type = ActionType.from_string(key)
                if action_type in (ActionType.CHECK, ActionType.FOLD):
                    amount = 0
                self._opponent_action = Action(action_type, amount)

    @staticmethod
    def _to_int(value: str, line: str) -> int:
        try:
            return int(value)
        except ValueError:
            raise ValueError(f"Expected a number: {line}") from None

    @staticmethod
    def _to_cards(value: str, line: str) -> list[Card]:
        try:
            return parse_cards(value)
        except ValueError as e:
            raise ValueError(f"Bad cards in line '{line}': {e}") from None
