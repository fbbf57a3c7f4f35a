"""Tests for round bookkeeping."""

import pytest

from pocketbot.bot.actions import ActionType
from pocketbot.bot.ledger import RoundLedger


class TestRoundLedger:
    def test_starts_empty(self):
        assert RoundLedger().committed_so_far() == 0

    def test_calls_and_raises_combine(self):
        ledger = RoundLedger()
        ledger.record_action(ActionType.RAISE, 40)
        ledger.record_action(ActionType.CALL, 20)
        assert ledger.raised == 40
        assert ledger.called == 20
        assert ledger.committed_so_far() == 60

    def test_strictly_increases(self):
        ledger = RoundLedger()
        previous = 0
        for action_type, amount in [(ActionType.CALL, 10), (ActionType.RAISE, 5), (ActionType.CALL, 1)]:
            ledger.record_action(action_type, amount)
            assert ledger.committed_so_far() > previous
            previous = ledger.committed_so_far()

    def test_check_and_fold_are_free(self):
        ledger = RoundLedger()
        ledger.record_action(ActionType.CHECK, 0)
        ledger.record_action(ActionType.FOLD, 0)
        assert ledger.committed_so_far() == 0

    def test_negative_amount(self):
        with pytest.raises(ValueError):
            RoundLedger().record_action(ActionType.CALL, -5)

    def test_reset(self):
        ledger = RoundLedger()
        ledger.record_action(ActionType.RAISE, 40)
        ledger.reset_for_new_round()
        assert ledger.committed_so_far() == 0

    def test_observe_round_resets_once(self):
        ledger = RoundLedger()
        assert ledger.observe_round(1)
        ledger.record_action(ActionType.RAISE, 40)
        assert not ledger.observe_round(1)
        assert ledger.committed_so_far() == 40

        assert ledger.observe_round(2)
        assert ledger.committed_so_far() == 0
        assert not ledger.observe_round(2)
