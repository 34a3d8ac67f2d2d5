"""
Preset paytables and calculator configuration.
Allows easy substitution of house payout schedules.
"""

from dataclasses import dataclass
from typing import Optional

from .engine.errors import UnknownPreset
from .engine.hand_classifier import HandCategory
from .engine.paytable import Paytable, STANDARD_PAYTABLE


@dataclass
class CalculatorConfig:
    """Output settings for the calculator and exports."""
    precision: int = 6                  # Decimals in CSV output
    export_filename: str = "let_it_ride_ev_summary.csv"
    include_breakdown: bool = False     # Also write the per-final-card table


@dataclass
class Preset:
    """A named paytable."""
    name: str
    description: str
    paytable: Paytable


REDUCED_PAYTABLE = Paytable(
    name="reduced",
    payouts={
        HandCategory.ROYAL_FLUSH: 500,
        HandCategory.STRAIGHT_FLUSH: 100,
        HandCategory.FOUR_KIND: 25,
        HandCategory.FULL_HOUSE: 8,
        HandCategory.FLUSH: 6,
        HandCategory.STRAIGHT: 4,
        HandCategory.THREE_KIND: 3,
        HandCategory.TWO_PAIR: 2,
        HandCategory.PAIR_10_OR_BETTER: 1,
        HandCategory.NOTHING: -1,
    },
)


# Built-in presets
PRESETS = {
    "standard": Preset(
        name="Standard",
        description="Standard Let It Ride paytable (royal flush pays 1000)",
        paytable=STANDARD_PAYTABLE,
    ),

    "reduced": Preset(
        name="Reduced",
        description="Lower-paying house variant with a 500 royal",
        paytable=REDUCED_PAYTABLE,
    ),
}


def get_preset(name: str) -> Optional[Preset]:
    """Get a preset by name."""
    return PRESETS.get(name.lower().replace(" ", "_"))


def require_preset(name: str) -> Preset:
    """Get a preset by name, raising UnknownPreset if it does not exist."""
    preset = get_preset(name)
    if preset is None:
        raise UnknownPreset(name, list_presets())
    return preset


def list_presets() -> list[str]:
    """List all available preset names."""
    return list(PRESETS.keys())


def get_preset_info(name: str) -> Optional[dict]:
    """Get info about a preset."""
    preset = get_preset(name)
    if preset:
        return {
            "name": preset.name,
            "description": preset.description,
            "payouts": preset.paytable.to_dict(),
        }
    return None
