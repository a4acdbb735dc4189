"""Model constants for the BAC estimator.

Everything the math depends on lives in one frozen ModelConfig so a caller
(or a test) can swap a single value without touching module globals.
"""

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class ModelConfig:
    # Ethanol density (g/mL) for volume x ABV -> grams.
    ethanol_density: float = 0.789

    # Distribution ratio (Widmark r)
    r_male: float = 0.68
    r_female: float = 0.55

    # Elimination rate (% BAC per hour), i.e. 0.15 promile per hour.
    elimination_per_hour: float = 0.015

    step_minutes: int = 10
    min_horizon_hours: float = 6.0
    tail_hours: float = 16.0
    max_horizon_hours: float = 24.0

    # At or below this the result is reported as below-threshold.
    threshold_promiles: float = 0.2

    min_weight_kg: float = 30.0
    default_weight_kg: float = 70.0
    max_percent: float = 100.0
    max_volume_ml: float = 5000.0
    max_count: float = 100.0

    precision: int = 3

    def __post_init__(self):
        if self.step_minutes <= 0:
            raise ValueError("step_minutes must be > 0")

    def distribution_ratio(self, is_male: bool) -> float:
        return self.r_male if is_male else self.r_female

    def with_overrides(self, **changes) -> "ModelConfig":
        """Copy of this config with the given fields replaced."""
        return replace(self, **changes)


DEFAULT_CONFIG = ModelConfig()
