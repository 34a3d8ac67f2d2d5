"""
Exhaustive enumeration engine.
Averages the paytable over every possible final card for a 3 + 1 hand.
"""

import logging
from dataclasses import dataclass, field
from fractions import Fraction
from typing import Optional, Union

from .deck import Card, parse_card, remaining
from .errors import DuplicateCard, IncompleteSelection, ValidationError
from .hand_classifier import CATEGORIES, HandCategory, classify_hand
from .paytable import STANDARD_PAYTABLE, Paytable

logger = logging.getLogger(__name__)

INPUT_NAMES = ["hole card 1", "hole card 2", "hole card 3", "shared card"]


@dataclass(frozen=True)
class BreakdownEntry:
    """Outcome of one candidate final card."""
    card: Card
    category: HandCategory
    payout: int

    def to_dict(self) -> dict:
        return {
            "final_card": self.card.code,
            "category": self.category.value,
            "payout": self.payout,
        }


@dataclass
class EnumerationResult:
    """Result of enumerating every completion of a known 4-card set."""
    known: tuple[Card, ...]
    ev_exact: Fraction
    counts: dict[HandCategory, int]
    probs: dict[HandCategory, float]
    total: int
    breakdown: list[BreakdownEntry] = field(default_factory=list)
    paytable_name: str = "standard"

    @property
    def ev(self) -> float:
        return float(self.ev_exact)

    def __str__(self):
        cards = " ".join(c.code for c in self.known[:3])
        lines = [
            f"{'='*50}",
            f"  Hole: {cards}   Shown: {self.known[3].code}",
            f"  Paytable: {self.paytable_name}",
            f"{'='*50}",
            f"  Averaged over {self.total} possible final cards",
            f"  EV per unit wager: {self.ev:+.6f}",
            "",
            "  Final hand distribution:",
        ]

        for cat in CATEGORIES:
            count = self.counts[cat]
            pct = self.probs[cat] * 100
            bar = "█" * int(pct / 2)
            lines.append(f"    {cat.value:<18} {count:>3} ({pct:>6.3f}%) {bar}")

        lines.append(f"{'='*50}")
        return "\n".join(lines)

    def to_dict(self):
        return {
            "known": [c.code for c in self.known],
            "paytable": self.paytable_name,
            "ev": self.ev,
            "total": self.total,
            "probs": {c.value: p for c, p in self.probs.items()},
            "counts": {c.value: n for c, n in self.counts.items()},
            "breakdown": [b.to_dict() for b in self.breakdown],
        }


Outcome = Union[EnumerationResult, ValidationError]


class EnumerationEngine:
    """
    Computes exact EV by classifying every remaining card as the final card.

    Usage:
        engine = EnumerationEngine(STANDARD_PAYTABLE)
        outcome = engine.evaluate("Ah", "Kh", "Qh", "Jh")
        if isinstance(outcome, ValidationError):
            print(outcome.message)
    """

    def __init__(self, paytable: Paytable = STANDARD_PAYTABLE):
        self.paytable = paytable

    def validate(self, cards: list) -> Union[tuple[Card, ...], ValidationError]:
        """Parse and check the 4 known cards; returns the cards or an error."""
        missing = [name for name, c in zip(INPUT_NAMES, cards) if c is None or c == ""]
        if missing:
            return IncompleteSelection(missing)

        try:
            known = tuple(parse_card(c) for c in cards)
        except ValidationError as e:
            return e

        seen = set()
        for card in known:
            if card in seen:
                return DuplicateCard(card)
            seen.add(card)
        return known

    def evaluate(self, hole1=None, hole2=None, hole3=None,
                 shared=None) -> Outcome:
        """
        Evaluate 3 hole cards and the shown shared card.

        Args:
            hole1, hole2, hole3: Private cards, as Card or code like 'Ah'
            shared: The revealed community card

        Returns:
            EnumerationResult, or the ValidationError describing bad input
        """
        known = self.validate([hole1, hole2, hole3, shared])
        if isinstance(known, ValidationError):
            logger.debug("Rejected %s: %s", [hole1, hole2, hole3, shared], known.message)
            return known

        return self.enumerate(known)

    def enumerate(self, known: tuple[Card, ...]) -> EnumerationResult:
        """Enumerate completions of already-validated known cards."""
        pool = remaining(known)
        counts = {cat: 0 for cat in CATEGORIES}
        payout_sum = 0
        breakdown = []

        for candidate in pool:
            cat = classify_hand(known + (candidate,))
            payout = self.paytable[cat]
            counts[cat] += 1
            payout_sum += payout
            breakdown.append(BreakdownEntry(candidate, cat, payout))
            logger.debug("%s -> %s (%+d)", candidate, cat.value, payout)

        total = len(pool)
        ev_exact = Fraction(payout_sum, total)
        probs = {cat: counts[cat] / total for cat in CATEGORIES}

        logger.debug("Evaluated %s over %d cards: EV %s",
                     " ".join(c.code for c in known), total, ev_exact)

        return EnumerationResult(
            known=tuple(known),
            ev_exact=ev_exact,
            counts=counts,
            probs=probs,
            total=total,
            breakdown=breakdown,
            paytable_name=self.paytable.name,
        )


def evaluate(hole1=None, hole2=None, hole3=None, shared=None,
             paytable: Optional[Paytable] = None) -> Outcome:
    """Convenience function to evaluate with the standard paytable."""
    engine = EnumerationEngine(paytable or STANDARD_PAYTABLE)
    return engine.evaluate(hole1, hole2, hole3, shared)
