"""Pytest configuration and fixtures."""

import pytest

from pocketbot.bot.policy import BettingPolicy
from pocketbot.bot.state import BotState
from pocketbot.game.cards import Hand, parse_cards
from pocketbot.game.categorizer import HandCategorizer, TreysRanker


@pytest.fixture
def make_state():
    """Build a BotState from card strings and overrides."""

    def _make_state(hand="AsAh", board="", **kwargs):
        defaults = dict(
            big_blind=20,
            small_blind=10,
            stack=2000,
            opponent_stack=2000,
            amount_to_call=0,
            round=1,
            name="player1",
        )
        defaults.update(kwargs)
        return BotState(hand=Hand.from_string(hand), board=parse_cards(board), **defaults)

    return _make_state


@pytest.fixture(params=["treys", "counting"])
def policy(request):
    """A fresh policy for each ranking backend."""
    ranker = TreysRanker() if request.param == "treys" else None
    return BettingPolicy(categorizer=HandCategorizer(ranker=ranker))
