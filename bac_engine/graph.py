"""
BAC-over-time graph. Produces image file or returns data for a web frontend.
"""

from pathlib import Path
from typing import List, Tuple

from bac_engine.classify import Result
from bac_engine.config import DEFAULT_CONFIG


def curve_data(result: Result) -> List[Tuple[int, float]]:
    """(minutes_from_start, promiles) for use in any frontend."""
    return [(p.minutes, p.promiles) for p in result.timeline]


def hour_ticks(result: Result) -> List[Tuple[int, str]]:
    """(minutes, HH:MM) for every full hour of the timeline, for axis labels."""
    return [(p.minutes, p.label) for p in result.timeline if p.minutes % 60 == 0]


def save_bac_graph(
    result: Result,
    output_path: str = "bac_graph.png",
    title: str = "Blood alcohol over time",
    threshold_promiles: float = DEFAULT_CONFIG.threshold_promiles,
) -> str:
    """
    Plot the timeline against clock time, mark the peak and the threshold,
    and save to file. Returns path to saved file. Requires: pip install matplotlib
    """
    try:
        import matplotlib
        matplotlib.use("Agg")
        import matplotlib.pyplot as plt
    except ImportError:
        raise ImportError("matplotlib is required for save_bac_graph. pip install matplotlib")

    points = curve_data(result) or [(0, 0.0)]
    minutes = [m for m, _ in points]
    promiles = [v for _, v in points]
    peak_minutes, peak = max(points, key=lambda p: p[1])

    fig, ax = plt.subplots(figsize=(10, 5))
    ax.plot(minutes, promiles, color="#2E8B57", linewidth=2, label="BAC")
    ax.fill_between(minutes, promiles, alpha=0.15, color="#2E8B57")
    # Shade the part of the curve that is above the threshold.
    ax.fill_between(
        minutes,
        promiles,
        threshold_promiles,
        where=[v > threshold_promiles for v in promiles],
        interpolate=True,
        alpha=0.25,
        color="#dc2626",
    )
    ax.axhline(y=threshold_promiles, color="#dc2626", linestyle="--", linewidth=1, label=f"Threshold ({threshold_promiles:g}‰)")
    if peak > 0:
        ax.plot([peak_minutes], [peak], marker="o", color="#1f2937")
        ax.annotate(f"peak {peak:.2f}‰", (peak_minutes, peak), textcoords="offset points", xytext=(8, 6))

    ticks = hour_ticks(result)
    if ticks:
        ax.set_xticks([m for m, _ in ticks])
        ax.set_xticklabels([label for _, label in ticks], rotation=45)
    ax.set_xlabel("Time")
    ax.set_ylabel("BAC (‰)")
    ax.set_title(f"{title}: {result.status.value}")
    ax.legend(loc="upper right")
    ax.set_ylim(bottom=0)
    ax.grid(True, alpha=0.3)
    fig.tight_layout()
    Path(output_path).parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(output_path, dpi=150)
    plt.close(fig)
    return output_path
