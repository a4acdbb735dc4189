"""Full estimate: normalize -> total grams -> timeline -> status."""

import logging
from datetime import datetime
from typing import Any, Optional

from bac_engine.calculations import simulate
from bac_engine.classify import Result, classify
from bac_engine.config import DEFAULT_CONFIG, ModelConfig
from bac_engine.drinks import total_grams
from bac_engine.normalize import normalize

logger = logging.getLogger(__name__)


def estimate(
    raw: Any,
    now: Optional[datetime] = None,
    config: ModelConfig = DEFAULT_CONFIG,
) -> Result:
    """Run the whole pipeline on an input record. Never raises for bad field values.

    `now` replaces unparsable start/end times; pass it to get a reproducible
    result for such input.
    """
    session = normalize(raw, now=now, config=config)
    grams = total_grams(session.drinks, config)
    timeline = tuple(simulate(session, grams, config))
    result = classify(timeline[-1] if timeline else None, grams, timeline, config)
    logger.debug(
        "Estimate: %.1f g, %d points, current %.3f, peak %.3f, %s",
        grams,
        len(timeline),
        result.promiles,
        result.peak_promiles,
        result.status.value,
    )
    return result
