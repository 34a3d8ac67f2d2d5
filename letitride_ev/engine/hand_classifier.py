"""
Hand classification for Let It Ride.
Maps a final five-card hand to its paytable category.
"""

from collections import Counter
from enum import Enum
from typing import Iterable

from .deck import Card, HIGH_RANKS, RANK_ORDER


class HandCategory(Enum):
    """Final hand categories, best first."""
    ROYAL_FLUSH = "royal_flush"
    STRAIGHT_FLUSH = "straight_flush"
    FOUR_KIND = "four_kind"
    FULL_HOUSE = "full_house"
    FLUSH = "flush"
    STRAIGHT = "straight"
    THREE_KIND = "three_kind"
    TWO_PAIR = "two_pair"
    PAIR_10_OR_BETTER = "pair_10_or_better"
    NOTHING = "nothing"

    def __str__(self) -> str:
        return self.value


# Ladder order, used for every per-category table and report
CATEGORIES = list(HandCategory)

WHEEL_ORDERS = [RANK_ORDER[r] for r in ("2", "3", "4", "5", "A")]


def is_straight_orders(orders: list[int]) -> bool:
    """True if five face orders form a straight (the wheel included)."""
    orders = sorted(orders)
    if orders == WHEEL_ORDERS:
        return True
    return len(set(orders)) == 5 and orders[4] - orders[0] == 4


def classify_hand(cards: Iterable[Card]) -> HandCategory:
    """Classify exactly five distinct cards."""
    cards = list(cards)
    if len(cards) != 5 or len(set(cards)) != 5:
        raise ValueError(f"classify_hand expects 5 distinct cards, got {cards}")

    rank_counts = Counter(c.rank for c in cards)
    freqs = sorted(rank_counts.values(), reverse=True)

    is_flush = len({c.suit for c in cards}) == 1
    is_straight = is_straight_orders([c.rank_order for c in cards])

    if is_straight and is_flush:
        if set(rank_counts) == HIGH_RANKS:
            return HandCategory.ROYAL_FLUSH
        return HandCategory.STRAIGHT_FLUSH

    if freqs[0] == 4:
        return HandCategory.FOUR_KIND

    if freqs[0] == 3 and freqs[1] == 2:
        return HandCategory.FULL_HOUSE

    if is_flush:
        return HandCategory.FLUSH

    if is_straight:
        return HandCategory.STRAIGHT

    if freqs[0] == 3:
        return HandCategory.THREE_KIND

    if freqs[0] == 2 and freqs[1] == 2:
        return HandCategory.TWO_PAIR

    if freqs[0] == 2:
        pair_rank = next(r for r, n in rank_counts.items() if n == 2)
        if pair_rank in HIGH_RANKS:
            return HandCategory.PAIR_10_OR_BETTER

    return HandCategory.NOTHING
