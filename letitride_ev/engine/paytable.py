"""
Paytables: net payout per unit wager for each final hand category.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from .hand_classifier import CATEGORIES, HandCategory


@dataclass(frozen=True)
class Paytable:
    name: str
    payouts: Mapping[HandCategory, int] = field(hash=False)

    def __post_init__(self):
        payouts = {}
        for k, v in dict(self.payouts).items():
            cat = HandCategory(k)
            if isinstance(v, bool) or int(v) != v:
                raise ValueError(f"Paytable {self.name!r} payout for {cat.value} must be a whole number, got {v!r}")
            payouts[cat] = int(v)
        missing = [c.value for c in CATEGORIES if c not in payouts]
        if missing:
            raise ValueError(f"Paytable {self.name!r} has no payout for: {', '.join(missing)}")
        # Freeze in ladder order
        frozen = MappingProxyType({c: payouts[c] for c in CATEGORIES})
        object.__setattr__(self, "payouts", frozen)

    def __getitem__(self, category: HandCategory) -> int:
        return self.payouts[category]

    def items(self):
        return self.payouts.items()

    def to_dict(self) -> dict[str, int]:
        return {c.value: v for c, v in self.payouts.items()}

    def lines(self) -> list[str]:
        """Display lines like 'royal_flush: +1000'."""
        return [f"{c.value}: {v:+d}" for c, v in self.payouts.items()]


STANDARD_PAYTABLE = Paytable(
    name="standard",
    payouts={
        HandCategory.ROYAL_FLUSH: 1000,
        HandCategory.STRAIGHT_FLUSH: 200,
        HandCategory.FOUR_KIND: 50,
        HandCategory.FULL_HOUSE: 11,
        HandCategory.FLUSH: 8,
        HandCategory.STRAIGHT: 5,
        HandCategory.THREE_KIND: 3,
        HandCategory.TWO_PAIR: 2,
        HandCategory.PAIR_10_OR_BETTER: 1,
        HandCategory.NOTHING: -1,
    },
)
