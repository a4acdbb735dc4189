"""Turn a loosely-shaped input record into a Session.

The form layer may send partial or malformed data (empty strings, negative
counts, an end time before the start). Nothing here raises: every bad value
is replaced with a safe default.
"""

import logging
import math
from datetime import datetime, timezone
from typing import Any, List, Mapping, Optional

from bac_engine.config import DEFAULT_CONFIG, ModelConfig
from bac_engine.drinks import PRESETS, Drink
from bac_engine.session import Sex, Session

logger = logging.getLogger(__name__)

FEMALE_ALIASES = {"female", "f", "woman", "kobieta"}


def _to_float(value: Any, default: float) -> float:
    if isinstance(value, str):
        value = value.strip().replace(",", ".")
    try:
        parsed = float(value)
    except (TypeError, ValueError, OverflowError):
        return default
    if math.isnan(parsed) or math.isinf(parsed):
        return default
    return parsed


def _clamp_float(value: Any, default: float, min_value: float, max_value: float = math.inf) -> float:
    return max(min_value, min(max_value, _to_float(value, default)))


def parse_sex(value: Any) -> Sex:
    """Female for a recognised alias, male for anything else."""
    if isinstance(value, Sex):
        return value
    if isinstance(value, str) and value.strip().lower() in FEMALE_ALIASES:
        return Sex.FEMALE
    return Sex.MALE


def _naive_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def parse_time(value: Any, now: datetime) -> datetime:
    """ISO-8601 or local `YYYY-MM-DDTHH:MM` string -> datetime; `now` if unparsable."""
    try:
        if isinstance(value, datetime):
            return _naive_utc(value)
        if isinstance(value, str):
            text = value.strip()
            if text.endswith(("Z", "z")):
                text = text[:-1] + "+00:00"
            return _naive_utc(datetime.fromisoformat(text))
    except (ValueError, OverflowError):
        pass
    logger.debug("Unparsable time %r, using current time", value)
    return now


def parse_drink(raw: Mapping[str, Any], config: ModelConfig = DEFAULT_CONFIG) -> Drink:
    preset = PRESETS.get(str(raw.get("preset", "")))
    default_volume = preset.volume_ml if preset else 0.0
    default_percent = preset.percent if preset else 0.0
    label = raw.get("label")
    if not isinstance(label, str):
        label = preset.name if preset else ""
    return Drink(
        volume_ml=_clamp_float(raw.get("volumeMl", default_volume), 0.0, 0.0, config.max_volume_ml),
        percent=_clamp_float(raw.get("percent", default_percent), 0.0, 0.0, config.max_percent),
        count=_clamp_float(raw.get("count", 1), 0.0, 0.0, config.max_count),
        label=label,
    )


def parse_drinks(raw: Any, config: ModelConfig = DEFAULT_CONFIG) -> List[Drink]:
    if not isinstance(raw, (list, tuple)):
        return []
    return [parse_drink(d, config) for d in raw if isinstance(d, Mapping)]


def normalize(
    raw: Any,
    now: Optional[datetime] = None,
    config: ModelConfig = DEFAULT_CONFIG,
) -> Session:
    """Build a Session from an input record (camelCase keys as sent by the form)."""
    if not isinstance(raw, Mapping):
        raw = {}
    now = _naive_utc(now if now is not None else datetime.now(timezone.utc))

    weight = _to_float(raw.get("weightKg"), config.default_weight_kg)
    if weight < config.min_weight_kg:
        logger.debug("Weight %.1f kg clamped to %.1f kg", weight, config.min_weight_kg)
        weight = config.min_weight_kg

    return Session(
        weight_kg=weight,
        sex=parse_sex(raw.get("sex")),
        start_time=parse_time(raw.get("startTime"), now),
        end_time=parse_time(raw.get("endTime"), now),
        drinks=tuple(parse_drinks(raw.get("drinks"), config)),
    )
