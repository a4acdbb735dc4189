"""
BAC estimator CLI. Run from project root: python -m bac_engine.main
Estimates the curve for the given drinks, prints current/peak BAC and
optionally saves a graph.
"""

import argparse
import json
import sys

from bac_engine.engine import estimate
from bac_engine.graph import curve_data, save_bac_graph


def _drink_arg(value: str) -> dict:
    """VOLUME_ML:PERCENT[:COUNT] -> raw drink record."""
    parts = value.split(":")
    if len(parts) not in (2, 3):
        raise argparse.ArgumentTypeError("expected VOLUME_ML:PERCENT[:COUNT]")
    drink = {"volumeMl": parts[0], "percent": parts[1]}
    if len(parts) == 3:
        drink["count"] = parts[2]
    return drink


def _preset_arg(value: str) -> dict:
    """NAME[:COUNT] -> raw drink record using a preset."""
    name, _, count = value.partition(":")
    return {"preset": name, "count": count or 1}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Estimate blood alcohol concentration over time")
    parser.add_argument("--weight", type=float, default=70.0, help="Body weight (kg)")
    parser.add_argument("--female", action="store_true", help="Female (default: male)")
    parser.add_argument("--start", type=str, default="", help="Drinking start, e.g. 2024-05-01T20:00 (default: now)")
    parser.add_argument("--end", type=str, default="", help="Drinking end (default: now)")
    parser.add_argument(
        "--drink",
        type=_drink_arg,
        action="append",
        default=[],
        metavar="ML:PCT[:N]",
        help="Custom drink, e.g. 500:5:2 for two 500 ml 5%% beers",
    )
    parser.add_argument(
        "--preset",
        type=_preset_arg,
        action="append",
        default=[],
        metavar="NAME[:N]",
        help="Preset drink: large_beer, small_beer, wine, champagne, spirit",
    )
    parser.add_argument("--json", action="store_true", help="Print the full result as JSON")
    parser.add_argument("--graph", type=str, metavar="FILE", help="Save BAC graph to FILE (e.g. bac_graph.png)")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    raw = {
        "weightKg": args.weight,
        "sex": "female" if args.female else "male",
        "startTime": args.start,
        "endTime": args.end,
        "drinks": args.drink + args.preset,
    }
    result = estimate(raw)

    if args.json:
        print(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
    else:
        print(f"Weight: {args.weight} kg, drinks: {len(raw['drinks'])}")
        print(f"Peak BAC: {result.peak_promiles:.2f}‰, current: {result.promiles:.2f}‰ ({result.status.value})")
        print(result.summary)
        print(f"Curve points: {len(curve_data(result))}")

    if args.graph:
        try:
            path = save_bac_graph(result, output_path=args.graph)
            print(f"Graph saved: {path}")
        except ImportError:
            print("matplotlib not installed. pip install matplotlib", file=sys.stderr)
            return 1

    return 0


if __name__ == "__main__":
    sys.exit(main() or 0)
