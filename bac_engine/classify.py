"""Status and summary for a finished timeline."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Optional, Tuple

from bac_engine.calculations import TimelinePoint
from bac_engine.config import DEFAULT_CONFIG, ModelConfig


class Status(str, Enum):
    BELOW_THRESHOLD = "below-threshold"
    ABOVE_THRESHOLD = "above-threshold"


@dataclass(frozen=True)
class Result:
    promiles: float
    peak_promiles: float
    total_grams: float
    status: Status
    summary: str
    timeline: Tuple[TimelinePoint, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict:
        return {
            "promiles": self.promiles,
            "peakPromiles": self.peak_promiles,
            "totalGrams": round(self.total_grams, 3),
            "status": self.status.value,
            "summary": self.summary,
            "timeline": [p.to_dict() for p in self.timeline],
        }


def status_for(promiles: float, config: ModelConfig = DEFAULT_CONFIG) -> Status:
    if promiles <= config.threshold_promiles:
        return Status.BELOW_THRESHOLD
    return Status.ABOVE_THRESHOLD


def summarize(total_grams: float, promiles: float) -> str:
    return (
        f"You consumed {total_grams:.1f} g of pure alcohol. "
        f"Estimated current concentration: {promiles:.2f}‰."
    )


def classify(
    last_point: Optional[TimelinePoint],
    total_grams: float,
    timeline: Iterable[TimelinePoint] = (),
    config: ModelConfig = DEFAULT_CONFIG,
) -> Result:
    """Build the Result from the last sample; a missing sample reads as 0."""
    points = tuple(timeline)
    promiles = last_point.promiles if last_point is not None else 0.0
    peak = max((p.promiles for p in points), default=promiles)
    return Result(
        promiles=promiles,
        peak_promiles=max(peak, promiles),
        total_grams=total_grams,
        status=status_for(promiles, config),
        summary=summarize(total_grams, promiles),
        timeline=points,
    )
