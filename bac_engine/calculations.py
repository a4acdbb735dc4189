"""BAC timeline using a linear absorption ramp and linear elimination.

Model:
- Absorption: the dose enters the blood uniformly across the drinking window
  (all at once when the window is empty).
- Rise: BAC% = absorbed_grams / (r * weight_kg)
- r = 0.68 (male), 0.55 (female)
- Elimination: 0.015 BAC percentage points per hour since the session start
- Reported in promile (BAC% * 10), never negative.
"""

from dataclasses import dataclass
from datetime import timedelta
from typing import Iterator

from bac_engine.config import DEFAULT_CONFIG, ModelConfig
from bac_engine.session import Session


@dataclass(frozen=True)
class TimelinePoint:
    minutes: int  # offset from session start
    label: str  # wall-clock HH:MM
    promiles: float

    def to_dict(self) -> dict:
        return {"time": self.minutes, "label": self.label, "promiles": self.promiles}


def _duration_minutes(session: Session) -> float:
    return session.duration.total_seconds() / 60.0


def horizon_minutes(session: Session, config: ModelConfig = DEFAULT_CONFIG) -> float:
    """Minutes to simulate: window + tail, kept within [min, max] horizon."""
    hours = _duration_minutes(session) / 60.0 + config.tail_hours
    hours = min(config.max_horizon_hours, max(config.min_horizon_hours, hours))
    return hours * 60.0


def absorbed_grams(session: Session, total_grams: float, minutes: float) -> float:
    duration = _duration_minutes(session)
    if duration <= 0:
        return total_grams
    return min(1.0, minutes / duration) * total_grams


def clock_label(session: Session, minutes: int) -> str:
    """Wall-clock HH:MM at `minutes` after the start; `+HH:MM` offset past the calendar's end."""
    try:
        return (session.start_time + timedelta(minutes=minutes)).strftime("%H:%M")
    except OverflowError:
        return f"+{minutes // 60:02d}:{minutes % 60:02d}"


def promiles_at(
    session: Session,
    total_grams: float,
    minutes: float,
    config: ModelConfig = DEFAULT_CONFIG,
) -> float:
    """Concentration (promile) `minutes` after the session start."""
    r = session.distribution_ratio(config)
    rise = absorbed_grams(session, total_grams, minutes) / (r * session.weight_kg)
    bac_percent = max(0.0, rise - config.elimination_per_hour * minutes / 60.0)
    return round(bac_percent * 10.0, config.precision)


def simulate(
    session: Session,
    total_grams: float,
    config: ModelConfig = DEFAULT_CONFIG,
) -> Iterator[TimelinePoint]:
    """Yield timeline samples every `step_minutes` up to the horizon.

    Stops after the first zero once nothing is left to absorb, or at any zero
    after t=0, so the curve is never padded with trailing zeros.
    """
    end = horizon_minutes(session, config)
    minutes = 0
    while minutes <= end:
        promiles = promiles_at(session, total_grams, minutes, config)
        label = clock_label(session, minutes)
        yield TimelinePoint(minutes, label, promiles)
        if promiles <= 0 and (minutes > 0 or absorbed_grams(session, total_grams, minutes) >= total_grams):
            return
        minutes += config.step_minutes
