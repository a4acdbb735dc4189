"""
BAC estimator: drink doses, absorption/elimination timeline, status, and graph.
Use from project root: python -m bac_engine.main
"""

from bac_engine.config import DEFAULT_CONFIG, ModelConfig
from bac_engine.drinks import (
    PRESETS,
    Drink,
    grams_from_drink,
    list_presets,
    total_grams,
)
from bac_engine.session import Session, Sex
from bac_engine.normalize import normalize
from bac_engine.calculations import TimelinePoint, promiles_at, simulate
from bac_engine.classify import Result, Status, classify
from bac_engine.engine import estimate
from bac_engine.graph import curve_data, save_bac_graph

__all__ = [
    "DEFAULT_CONFIG",
    "ModelConfig",
    "Drink",
    "PRESETS",
    "grams_from_drink",
    "list_presets",
    "total_grams",
    "Session",
    "Sex",
    "normalize",
    "TimelinePoint",
    "promiles_at",
    "simulate",
    "Result",
    "Status",
    "classify",
    "estimate",
    "curve_data",
    "save_bac_graph",
]
