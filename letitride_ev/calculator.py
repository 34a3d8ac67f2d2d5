"""
Main API for Let It Ride EV calculation.
Provides a clean interface over the enumeration engine.
"""

from dataclasses import dataclass, replace
from typing import Optional, Union

from .engine.enumerator import EnumerationEngine, EnumerationResult, Outcome
from .engine.errors import ValidationError
from .presets import CalculatorConfig, Preset, require_preset


@dataclass
class BatchResult:
    """Results from evaluating several hands."""
    outcomes: list[Outcome]
    valid: int
    invalid: int
    avg_ev: Optional[float]
    best: Optional[EnumerationResult] = None
    worst: Optional[EnumerationResult] = None
    preset_used: str = "standard"

    def __str__(self):
        lines = [
            f"{'='*50}",
            f"  BATCH RESULTS ({len(self.outcomes)} hands)",
            f"  Paytable: {self.preset_used}",
            f"{'='*50}",
            f"  Evaluated: {self.valid}   Rejected: {self.invalid}",
        ]
        if self.valid:
            lines.append(f"  Mean EV: {self.avg_ev:+.6f}")
            lines.append(f"  Best:  {_hand_label(self.best)} ({self.best.ev:+.6f})")
            lines.append(f"  Worst: {_hand_label(self.worst)} ({self.worst.ev:+.6f})")

        lines.append("")
        for outcome in self.outcomes:
            if isinstance(outcome, ValidationError):
                lines.append(f"    ERROR  {outcome.message}")
            else:
                lines.append(f"    {_hand_label(outcome):<16} {outcome.ev:+.6f}")

        lines.append(f"{'='*50}")
        return "\n".join(lines)

    def to_dict(self):
        return {
            "hands": len(self.outcomes),
            "valid": self.valid,
            "invalid": self.invalid,
            "avg_ev": self.avg_ev,
            "best": _hand_label(self.best) if self.best else None,
            "worst": _hand_label(self.worst) if self.worst else None,
            "preset_used": self.preset_used,
        }


def _hand_label(result: EnumerationResult) -> str:
    hole = " ".join(c.code for c in result.known[:3])
    return f"{hole} | {result.known[3].code}"


class Calculator:
    """
    EV calculator bound to one paytable.

    Usage:
        calc = Calculator("standard")
        result = calc.run("Ah", "Kh", "Qh", "Jh")
        print(result)

        # Or evaluate many:
        batch = calc.run_batch([("Ah", "Kh", "Qh", "Jh"), ("2c", "2d", "2h", "7s")])
        print(batch)
    """

    def __init__(self, preset: Union[str, Preset] = "standard",
                 config: CalculatorConfig = None,
                 config_overrides: dict = None):
        if isinstance(preset, str):
            preset = require_preset(preset)
        self.preset = preset

        # Overrides apply to a copy; the caller's config is left as passed
        self.config = replace(config) if config else CalculatorConfig()
        for key, value in (config_overrides or {}).items():
            if hasattr(self.config, key):
                setattr(self.config, key, value)

        self.engine = EnumerationEngine(preset.paytable)

    @property
    def paytable(self):
        return self.engine.paytable

    def paytable_lines(self) -> list[str]:
        return self.paytable.lines()

    def run(self, hole1=None, hole2=None, hole3=None, shared=None,
            verbose: bool = False, raise_errors: bool = False) -> Outcome:
        """
        Evaluate a single hand.

        Args:
            hole1, hole2, hole3: Hole cards as codes ('Ah') or Cards
            shared: The shown community card
            verbose: Print each final card's outcome
            raise_errors: Raise ValidationError instead of returning it

        Returns:
            EnumerationResult, or a ValidationError for bad input
        """
        outcome = self.engine.evaluate(hole1, hole2, hole3, shared)

        if isinstance(outcome, ValidationError):
            if raise_errors:
                raise outcome
            if verbose:
                print(f"Rejected: {outcome.message}")
            return outcome

        if verbose:
            for entry in outcome.breakdown:
                print(f"  {entry.card.code}: {entry.category.value:<18} {entry.payout:+d}")

        return outcome

    def run_batch(self, hands: list, verbose: bool = False) -> BatchResult:
        """
        Evaluate several 4-card configurations.

        Args:
            hands: Sequence of (hole1, hole2, hole3, shared) tuples
            verbose: Print progress

        Returns:
            BatchResult with every outcome and aggregate stats
        """
        outcomes = []
        for i, hand in enumerate(hands):
            hand = list(hand) + [None] * (4 - len(hand))
            outcome = self.run(*hand[:4])
            outcomes.append(outcome)
            if verbose and (i + 1) % 10 == 0:
                print(f"  Hand {i + 1}/{len(hands)}...")

        results = [o for o in outcomes if isinstance(o, EnumerationResult)]
        avg_ev = sum(r.ev for r in results) / len(results) if results else None

        return BatchResult(
            outcomes=outcomes,
            valid=len(results),
            invalid=len(outcomes) - len(results),
            avg_ev=avg_ev,
            best=max(results, key=lambda r: r.ev_exact) if results else None,
            worst=min(results, key=lambda r: r.ev_exact) if results else None,
            preset_used=self.paytable.name,
        )


# Convenience functions
def run(hole1=None, hole2=None, hole3=None, shared=None,
        preset: str = "standard", verbose: bool = False) -> Outcome:
    """Quick evaluation with a default calculator."""
    calc = Calculator(preset)
    return calc.run(hole1, hole2, hole3, shared, verbose=verbose)
