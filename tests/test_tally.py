"""Tests for suit and rank counting."""

import pytest

from pocketbot.game.cards import Card, Deck, Rank, Suit, parse_cards
from pocketbot.game.category import HandCategory
from pocketbot.game.tally import CardTally, NONE


@pytest.fixture
def mixed_tally():
    """Eleven cards holding a flush, trip kings, a pair of fours and a straight."""
    numbers = [2, 4, 6, 8, 10, 11 + 13, 11 + 26, 11, 9 + 13, 7 + 26, 2 + 26]
    return CardTally(Card.from_number(n) for n in numbers)


class TestCounting:
    def test_counts(self, mixed_tally):
        assert mixed_tally.suit_count(Suit.SPADES) == 6
        assert mixed_tally.rank_count(Rank.KING) == 3
        assert mixed_tally.rank_count(Rank.FOUR) == 2
        assert len(mixed_tally) == 11

    def test_sums_match_cards_added(self):
        deck = Deck(seed=3)
        deck.shuffle()
        tally = CardTally()
        for n in range(1, 20):
            tally.add_all(deck.deal(1))
            assert tally.suit_counts.sum() == n
            assert tally.rank_counts.sum() == n
            assert tally.grid.sum() == n

    def test_repeated_card_counts_twice(self):
        card = Card.from_string("As")
        tally = CardTally([card, card])
        assert tally.rank_count(Rank.ACE) == 2
        assert tally.highest_multiple(2) == Rank.ACE

    def test_clear(self, mixed_tally):
        mixed_tally.clear()
        assert mixed_tally.total == 0
        assert mixed_tally.grid.sum() == 0
        assert mixed_tally.classify() == HandCategory.NO_PAIR


class TestMultiples:
    def test_highest_multiple(self, mixed_tally):
        assert mixed_tally.highest_multiple(2) == Rank.KING
        assert mixed_tally.highest_multiple(3) == Rank.KING
        assert mixed_tally.highest_multiple(4) == NONE

    def test_count_multiples(self, mixed_tally):
        assert mixed_tally.count_multiples(2) == 2
        assert mixed_tally.count_multiples(3) == 1

    def test_lowest_rank_pair(self):
        tally = CardTally(parse_cards("2s2h"))
        assert tally.highest_multiple(2) == Rank.TWO


class TestFlush:
    def test_flush(self, mixed_tally):
        assert mixed_tally.has_flush()

    def test_four_suited_is_not_flush(self):
        assert not CardTally(parse_cards("As Ks Qs Js Th")).has_flush()


class TestStraight:
    def test_broadway_run(self):
        tally = CardTally(parse_cards("8s 9h Tc Jd Qs"))
        assert tally.highest_straight(5) == Rank.EIGHT

    def test_gap_breaks_run(self):
        tally = CardTally(parse_cards("2s 3h 4c 5d 7s"))
        assert tally.highest_straight(5) == NONE

    def test_highest_run_wins(self):
        tally = CardTally(parse_cards("4s 5h 6c 7d 8s 9h"))
        assert tally.highest_straight(5) == Rank.FIVE

    def test_ace_high(self):
        tally = CardTally(parse_cards("Ts Jh Qc Kd As"))
        assert tally.highest_straight(5) == Rank.TEN

    def test_no_wheel(self):
        tally = CardTally(parse_cards("As 2h 3c 4d 5s"))
        assert tally.highest_straight(5) == NONE
        assert tally.classify() == HandCategory.NO_PAIR

    def test_lowest_straight(self):
        tally = CardTally(parse_cards("2s 3h 4c 5d 6s"))
        assert tally.highest_straight(5) == Rank.TWO

    def test_mixed_tally(self, mixed_tally):
        # K Q J T 9 are all present
        assert mixed_tally.highest_straight(5) == Rank.NINE

    def test_shorter_runs(self):
        tally = CardTally(parse_cards("9s Th Jc"))
        assert tally.highest_straight(3) == Rank.NINE
        assert tally.highest_straight(4) == NONE


class TestStraightFlush:
    def test_same_suit_run(self):
        tally = CardTally(parse_cards("5h 6h 7h 8h 9h Ks"))
        assert tally.highest_straight_flush(5) == Rank.FIVE

    def test_lowest_straight_flush(self):
        tally = CardTally(parse_cards("2d 3d 4d 5d 6d"))
        assert tally.highest_straight_flush(5) == Rank.TWO
        assert tally.classify() == HandCategory.STRAIGHT_FLUSH

    def test_best_across_suits(self):
        tally = CardTally(parse_cards("2d 3d 4d 5d 6d 9s Ts Js Qs Ks"))
        assert tally.highest_straight_flush(5) == Rank.NINE

    def test_mixed_suits_is_not_straight_flush(self, mixed_tally):
        assert mixed_tally.highest_straight_flush(5) == NONE


class TestClassify:
    @pytest.mark.parametrize("text, expected", [
        ("9s Ts Js Qs Ks", HandCategory.STRAIGHT_FLUSH),
        ("7s 7h 7c 7d 2s", HandCategory.FOUR_OF_A_KIND),
        ("Ks Kh Kc 2d 2s", HandCategory.FULL_HOUSE),
        ("2h 5h 9h Jh Kh", HandCategory.FLUSH),
        ("6s 7h 8c 9d Ts", HandCategory.STRAIGHT),
        ("Qs Qh Qc 3d 8s", HandCategory.THREE_OF_A_KIND),
        ("Js Jh 4c 4d As", HandCategory.TWO_PAIR),
        ("Js Jh 4c 8d As", HandCategory.PAIR),
        ("2s 5h 9c Jd Ks", HandCategory.NO_PAIR),
    ])
    def test_categories(self, text, expected):
        assert CardTally(parse_cards(text)).classify() == expected

    def test_full_house_beats_flush(self, mixed_tally):
        assert mixed_tally.classify() == HandCategory.FULL_HOUSE

    def test_two_trips_is_full_house(self):
        tally = CardTally(parse_cards("Ks Kh Kc 2d 2s 2h 9c"))
        assert tally.classify() == HandCategory.FULL_HOUSE

    def test_permutation_invariant(self):
        deck = Deck(seed=11)
        for _ in range(50):
            deck.reset()
            deck.shuffle()
            hand = deck.deal(7)
            expected = CardTally(hand).classify()
            assert CardTally(reversed(hand)).classify() == expected
            assert CardTally(sorted(hand)).classify() == expected
