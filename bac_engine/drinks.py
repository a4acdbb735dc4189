"""Drink definitions and ethanol-mass helpers.

A drink is a volume in mL, an ABV in percent (0-100) and a count.
"""

from dataclasses import dataclass
from typing import Iterable, List, Optional

from bac_engine.config import DEFAULT_CONFIG, ModelConfig


@dataclass(frozen=True)
class Drink:
    volume_ml: float
    percent: float  # e.g. 5.0 for 5%
    count: float = 1.0
    label: str = ""


@dataclass(frozen=True)
class DrinkPreset:
    """A common serving offered by the form as a one-click drink."""

    key: str
    name: str
    volume_ml: float
    percent: float


PRESETS = {
    "large_beer": DrinkPreset("large_beer", "Large beer (500 ml)", 500.0, 5.0),
    "small_beer": DrinkPreset("small_beer", "Small beer (350 ml)", 350.0, 5.0),
    "wine": DrinkPreset("wine", "Glass of wine (175 ml)", 175.0, 12.0),
    "champagne": DrinkPreset("champagne", "Glass of champagne (120 ml)", 120.0, 12.0),
    "spirit": DrinkPreset("spirit", "Shot of spirit (50 ml)", 50.0, 40.0),
}


def drink_from_preset(key: str, count: float = 1.0) -> Optional[Drink]:
    preset = PRESETS.get(key)
    if preset is None:
        return None
    return Drink(preset.volume_ml, preset.percent, count, preset.name)


def grams_from_volume_abv(volume_ml: float, percent: float, config: ModelConfig = DEFAULT_CONFIG) -> float:
    """Convert mL and ABV (0 to 100) to grams of ethanol."""
    pure_ml = max(0.0, volume_ml) * max(0.0, percent) / 100.0
    return pure_ml * config.ethanol_density


def grams_from_drink(drink: Drink, config: ModelConfig = DEFAULT_CONFIG) -> float:
    """Grams of ethanol for `count` servings; negative fields contribute nothing."""
    return grams_from_volume_abv(drink.volume_ml, drink.percent, config) * max(0.0, drink.count)


def total_grams(drinks: Iterable[Drink], config: ModelConfig = DEFAULT_CONFIG) -> float:
    return sum((grams_from_drink(d, config) for d in drinks), 0.0)


def list_presets() -> List[dict]:
    """Return presets as dicts for UI dropdowns."""
    return [
        {"id": p.key, "label": p.name, "volumeMl": p.volume_ml, "percent": p.percent}
        for p in PRESETS.values()
    ]
