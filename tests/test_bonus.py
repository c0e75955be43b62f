"""
Unit tests for the rank-based bonus calculator.
"""

import pytest

from app.bonus import bonus_percent, calculate_bonus_by_profit


class TestBonusPercent:
    @pytest.mark.parametrize(
        "rank, total, expected",
        [
            (0, 10, 15),
            (1, 10, 10),
            (2, 10, 10),
            (3, 10, 5),
            (8, 10, 5),
            (9, 10, 0),
        ],
    )
    def test_tiers(self, rank, total, expected):
        assert bonus_percent(rank, total) == expected

    def test_sole_seller_is_top_tier(self):
        assert bonus_percent(0, 1) == 15

    def test_rank_zero_wins_over_last_place(self):
        assert bonus_percent(0, 2) == 15

    def test_runner_up_tier_wins_over_last_place(self):
        # with three sellers the last one is still rank 2
        assert bonus_percent(2, 3) == 10

    def test_last_place_in_larger_ranking(self):
        assert bonus_percent(3, 4) == 0


class TestBonusAmount:
    def test_top_earner(self):
        assert calculate_bonus_by_profit(0, 5, 1_000) == 150

    def test_middle_tier(self):
        assert calculate_bonus_by_profit(3, 5, 200) == 10

    def test_last_place_gets_nothing(self):
        assert calculate_bonus_by_profit(4, 5, 200) == 0

    def test_negative_profit(self):
        assert calculate_bonus_by_profit(0, 3, -100) == -15
