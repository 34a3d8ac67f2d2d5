"""
Tests for CSV export.
"""

import pandas as pd

from letitride_ev.engine.enumerator import evaluate
from letitride_ev.engine.hand_classifier import CATEGORIES
from letitride_ev.export import (
    breakdown_frame,
    summary_frame,
    write_breakdown_csv,
    write_summary_csv,
)
from letitride_ev.presets import CalculatorConfig


class TestSummary:

    def test_rows(self, royal_draw):
        frame = summary_frame(evaluate(*royal_draw))
        assert list(frame.columns) == ["metric", "value"]
        assert len(frame) == 1 + 2 * len(CATEGORIES)
        assert frame.iloc[0].tolist() == ["EV_per_unit", "22.229167"]
        assert frame.iloc[1].tolist() == ["P_royal_flush", "0.020833"]
        assert frame.iloc[2].tolist() == ["Count_royal_flush", "1"]

    def test_precision(self, trips_draw):
        frame = summary_frame(evaluate(*trips_draw), precision=2)
        assert frame.iloc[0]["value"] == "4.48"

    def test_write(self, royal_draw, tmp_path):
        path = write_summary_csv(evaluate(*royal_draw), tmp_path / "out" / "summary.csv")
        lines = path.read_text().splitlines()
        assert lines[0] == "metric,value"
        assert lines[1] == "EV_per_unit,22.229167"
        assert lines[-1] == "Count_nothing,24"

    def test_default_filename(self, royal_draw, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        config = CalculatorConfig(precision=3)
        path = write_summary_csv(evaluate(*royal_draw), config=config)
        assert path.name == "let_it_ride_ev_summary.csv"
        assert "EV_per_unit,22.229" in path.read_text()


class TestBreakdown:

    def test_frame(self, royal_draw):
        frame = breakdown_frame(evaluate(*royal_draw))
        assert len(frame) == 48
        assert frame.iloc[0].tolist() == ["2c", "nothing", -1]
        royal = frame[frame["final_card"] == "Th"]
        assert royal["category"].item() == "royal_flush"
        assert royal["payout"].item() == 1000

    def test_write(self, trips_draw, tmp_path):
        path = write_breakdown_csv(evaluate(*trips_draw), tmp_path / "breakdown.csv")
        frame = pd.read_csv(path)
        assert len(frame) == 48
        assert (frame["category"] == "three_kind").sum() == 44
        assert frame["payout"].sum() == 215

    def test_breakdown_beside_summary(self, royal_draw, tmp_path):
        config = CalculatorConfig(include_breakdown=True)
        path = write_summary_csv(evaluate(*royal_draw), tmp_path / "ev.csv", config)
        companion = tmp_path / "ev_breakdown.csv"
        assert path.exists()
        assert companion.read_text().splitlines()[0] == "final_card,category,payout"
