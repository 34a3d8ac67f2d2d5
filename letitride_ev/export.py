"""
CSV export of enumeration results.
Flattens EV, probabilities and counts into a metric/value table.
"""

import logging
from pathlib import Path
from typing import Union

import pandas as pd

from .engine.enumerator import EnumerationResult
from .engine.hand_classifier import CATEGORIES
from .presets import CalculatorConfig

logger = logging.getLogger(__name__)


def summary_frame(result: EnumerationResult, precision: int = 6) -> pd.DataFrame:
    """EV row, then probability and count rows per category in ladder order."""
    rows = [("EV_per_unit", f"{result.ev:.{precision}f}")]
    for cat in CATEGORIES:
        rows.append((f"P_{cat.value}", f"{result.probs[cat]:.{precision}f}"))
        rows.append((f"Count_{cat.value}", str(result.counts[cat])))
    return pd.DataFrame(rows, columns=["metric", "value"])


def breakdown_frame(result: EnumerationResult) -> pd.DataFrame:
    """One row per possible final card."""
    return pd.DataFrame(
        [b.to_dict() for b in result.breakdown],
        columns=["final_card", "category", "payout"],
    )


def write_summary_csv(result: EnumerationResult, path: Union[str, Path] = None,
                      config: CalculatorConfig = None) -> Path:
    """
    Write the summary table; defaults to the configured export filename.

    With `include_breakdown` set, the per-final-card table is written beside
    it as `<name>_breakdown.csv`.
    """
    config = config or CalculatorConfig()
    path = Path(path) if path else Path(config.export_filename)
    path.parent.mkdir(parents=True, exist_ok=True)

    summary_frame(result, config.precision).to_csv(path, index=False)
    logger.info("Wrote EV summary to %s", path)
    if config.include_breakdown:
        write_breakdown_csv(result, path.with_name(f"{path.stem}_breakdown.csv"))
    return path


def write_breakdown_csv(result: EnumerationResult, path: Union[str, Path]) -> Path:
    """Write the per-final-card breakdown."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    breakdown_frame(result).to_csv(path, index=False)
    logger.info("Wrote %d-card breakdown to %s", len(result.breakdown), path)
    return path
