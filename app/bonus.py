_TOP_PERCENT = 15
_RUNNER_UP_PERCENT = 10
_MIDDLE_PERCENT = 5
_LAST_PERCENT = 0


def bonus_percent(rank_index: int, total_sellers: int) -> int:
    """Tier percentage for a zero-based rank.

    Rank 0 is checked first, so a lone seller gets the top tier; ranks 1 and 2
    stay in the runner-up tier even when they are also last.
    """
    if rank_index == 0:
        return _TOP_PERCENT
    if rank_index <= 2:
        return _RUNNER_UP_PERCENT
    if rank_index < total_sellers - 1:
        return _MIDDLE_PERCENT
    return _LAST_PERCENT


def calculate_bonus_by_profit(rank_index: int, total_sellers: int, profit: float) -> float:
    """Bonus for the seller at ``rank_index`` of a profit-descending ranking."""
    return profit * bonus_percent(rank_index, total_sellers) / 100
