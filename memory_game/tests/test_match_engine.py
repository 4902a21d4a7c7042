"""Tests for the match engine and star rating."""

import pytest

from memory_game.game.errors import PreconditionViolation
from memory_game.game.match_engine import MatchEngine, star_rating
from memory_game.models.card import Card
from memory_game.models.game_state import GameStats, Outcome


@pytest.fixture
def engine():
    return MatchEngine()


def expected_stars(moves):
    if moves <= 11:
        return 3
    if moves <= 16:
        return 2
    if moves <= 20:
        return 1
    return 0


class TestStarRating:
    """Tests for star_rating."""

    @pytest.mark.parametrize("moves", range(0, 41))
    def test_table(self, moves):
        """Test the rating table for every move count up to 40."""
        assert star_rating(moves) == expected_stars(moves)

    def test_boundaries(self):
        """Test the exact step boundaries."""
        assert star_rating(11) == 3
        assert star_rating(12) == 2
        assert star_rating(16) == 2
        assert star_rating(17) == 1
        assert star_rating(20) == 1
        assert star_rating(21) == 0
        assert star_rating(1000) == 0

    def test_non_increasing(self):
        """Test that the rating never rises as moves grow."""
        ratings = [star_rating(m) for m in range(100)]
        assert all(a >= b for a, b in zip(ratings, ratings[1:]))

    def test_other_max_stars(self):
        """Test the rating with a different star count."""
        assert star_rating(0, max_stars=5) == 5
        assert star_rating(21, max_stars=5) == 2
        assert star_rating(0, max_stars=1) == 1
        assert star_rating(12, max_stars=1) == 0

    def test_negative_moves_rejected(self):
        """Test that negative move counts are rejected."""
        with pytest.raises(ValueError):
            star_rating(-1)


class TestMatchEngine:
    """Tests for MatchEngine."""

    def test_adjudicate_match(self, engine):
        """Test that equal symbols match regardless of ids."""
        pair = [Card(card_id=3, symbol="bolt"), Card(card_id=9, symbol="bolt")]
        assert engine.adjudicate(pair) == Outcome.MATCH

    def test_adjudicate_no_match(self, engine):
        """Test that different symbols do not match."""
        pair = [Card(card_id=3, symbol="bolt"), Card(card_id=4, symbol="cube")]
        assert engine.adjudicate(pair) == Outcome.NO_MATCH

    def test_adjudicate_leaves_cards_untouched(self, engine):
        """Test that adjudication does not mutate the cards."""
        pair = [Card(card_id=0, symbol="A", face_up=True), Card(card_id=1, symbol="A", face_up=True)]
        engine.adjudicate(pair)
        assert not any(c.matched for c in pair)
        assert all(c.face_up for c in pair)

    def test_adjudicate_requires_pair(self, engine):
        """Test that anything but two cards is refused."""
        with pytest.raises(PreconditionViolation):
            engine.adjudicate([Card(card_id=0, symbol="A")])

    def test_record_move(self, engine):
        """Test that each call adds exactly one move."""
        stats = GameStats.initial()
        for expected in range(1, 25):
            stats = engine.record_move(stats)
            assert stats.moves == expected
            assert stats.star_rating == expected_stars(expected)

    def test_record_move_returns_copy(self, engine):
        """Test that the input stats are not modified."""
        stats = GameStats.initial()
        updated = engine.record_move(stats)
        assert stats.moves == 0
        assert updated.moves == 1

    @pytest.mark.parametrize("max_stars", [1, 3, 5])
    def test_record_move_keeps_rating_in_range(self, max_stars):
        """Test that the rating stays within [0, max_stars] for any move count."""
        engine = MatchEngine(max_stars)
        stats = GameStats.initial(max_stars)
        assert stats.star_rating == max_stars
        for _ in range(30):
            stats = engine.record_move(stats)
            assert 0 <= stats.star_rating <= max_stars

    def test_record_move_recomputes_rating(self, engine):
        """Test that a stale rating is replaced, not decremented."""
        stats = GameStats(moves=4, star_rating=0)
        assert engine.record_move(stats).star_rating == 3

    def test_check_game_over(self, engine):
        """Test game over only when every card is matched."""
        cards = [Card(card_id=i, symbol=s) for i, s in enumerate("AABBCCDDEEFFGGHH")]
        for pair_index in range(8):
            assert not engine.check_game_over(cards)
            cards[2 * pair_index].matched = True
            cards[2 * pair_index + 1].matched = True
        assert engine.check_game_over(cards)
