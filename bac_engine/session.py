"""
Drinking session: body parameters, drinking window and drink list.
Built by bac_engine.normalize; the math only ever sees this typed value.
"""

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from enum import Enum
from typing import Tuple

from bac_engine.config import DEFAULT_CONFIG, ModelConfig
from bac_engine.drinks import Drink


class Sex(str, Enum):
    MALE = "male"
    FEMALE = "female"


@dataclass(frozen=True)
class Session:
    weight_kg: float
    sex: Sex
    start_time: datetime
    end_time: datetime
    drinks: Tuple[Drink, ...] = field(default_factory=tuple)

    @property
    def is_male(self) -> bool:
        return self.sex is Sex.MALE

    @property
    def duration(self) -> timedelta:
        """Drinking window length; an inverted window counts as instantaneous."""
        return max(timedelta(0), self.end_time - self.start_time)

    def distribution_ratio(self, config: ModelConfig = DEFAULT_CONFIG) -> float:
        return config.distribution_ratio(self.is_male)
