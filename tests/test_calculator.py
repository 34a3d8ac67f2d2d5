"""
Tests for the calculator facade.
"""

from fractions import Fraction

import pytest

from letitride_ev.calculator import BatchResult, Calculator, run
from letitride_ev.engine.enumerator import EnumerationResult
from letitride_ev.engine.errors import DuplicateCard, UnknownPreset
from letitride_ev.presets import CalculatorConfig, get_preset


class TestCalculator:

    def test_run(self, royal_draw):
        result = Calculator().run(*royal_draw)
        assert isinstance(result, EnumerationResult)
        assert result.ev_exact == Fraction(1067, 48)

    def test_reduced_preset(self, royal_draw):
        result = Calculator("reduced").run(*royal_draw)
        assert result.ev_exact == Fraction(548, 48)
        assert result.paytable_name == "reduced"

    def test_preset_object(self, royal_draw):
        calc = Calculator(get_preset("reduced"))
        assert calc.paytable.name == "reduced"

    def test_unknown_preset(self):
        with pytest.raises(UnknownPreset):
            Calculator("nope")

    def test_errors_returned_by_default(self):
        outcome = Calculator().run("Ah", "Ah", "2c", "3d")
        assert isinstance(outcome, DuplicateCard)

    def test_raise_errors(self):
        with pytest.raises(DuplicateCard):
            Calculator().run("Ah", "Ah", "2c", "3d", raise_errors=True)

    def test_verbose_prints_every_card(self, royal_draw, capsys):
        Calculator().run(*royal_draw, verbose=True)
        out = capsys.readouterr().out
        assert "Th: royal_flush" in out
        assert len(out.strip().splitlines()) == 48

    def test_config_overrides(self):
        calc = Calculator(config_overrides={"precision": 3, "unknown_key": 1})
        assert calc.config.precision == 3
        assert not hasattr(calc.config, "unknown_key")

    def test_explicit_config(self):
        config = CalculatorConfig(include_breakdown=True)
        assert Calculator(config=config).config == config

    def test_overrides_leave_caller_config_alone(self):
        config = CalculatorConfig()
        calc = Calculator(config=config, config_overrides={"precision": 2})
        assert calc.config.precision == 2
        assert config.precision == 6
        assert Calculator(config=config).config.precision == 6

    def test_paytable_lines(self):
        assert Calculator().paytable_lines()[0] == "royal_flush: +1000"

    def test_module_run(self, trips_draw):
        assert run(*trips_draw).ev_exact == Fraction(215, 48)


class TestBatch:

    def test_batch(self, royal_draw, trips_draw):
        batch = Calculator().run_batch([royal_draw, trips_draw, ("Ah", "Ah", "2c", "3d")])
        assert isinstance(batch, BatchResult)
        assert batch.valid == 2
        assert batch.invalid == 1
        assert batch.best.ev_exact == Fraction(1067, 48)
        assert batch.worst.ev_exact == Fraction(215, 48)
        assert batch.avg_ev == pytest.approx((1067 / 48 + 215 / 48) / 2)

    def test_short_hand_is_incomplete(self):
        batch = Calculator().run_batch([("Ah", "Kh")])
        assert batch.invalid == 1
        assert batch.avg_ev is None
        assert batch.best is None

    def test_batch_text_and_dict(self, royal_draw):
        batch = Calculator().run_batch([royal_draw, ("Ah", "Ah", "2c", "3d")])
        text = str(batch)
        assert "Ah Kh Qh | Jh" in text
        assert "ERROR  duplicate card: Ah" in text
        assert batch.to_dict()["best"] == "Ah Kh Qh | Jh"
