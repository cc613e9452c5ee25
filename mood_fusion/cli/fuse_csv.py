#!/usr/bin/env python3
"""
Batch fuser for mood observations stored in a CSV file.

- Reads rows of (mood, confidence, weight, source, group); only `mood` is required
- Fuses each group independently, in file order
- Prints one summary line per group and optionally saves the results to CSV
"""
import argparse
import csv
import sys
from pathlib import Path
from typing import Dict, List, Optional

import pandas as pd

from mood_fusion.core import FusionResult
from mood_fusion.inference.fusion import fuse_moods
from mood_fusion.inference.inputs import build_mood_input
from mood_fusion.utils.config import DEFAULT_CONFIDENCE, DEFAULT_SOURCE, DEFAULT_WEIGHT
from mood_fusion.utils.logger import get_logger

logger = get_logger("fuse_csv")

DEFAULT_GROUP = "all"


def load_inputs(csv_path: Path, group_column: str = "group") -> Dict[str, List]:
    df = pd.read_csv(csv_path, dtype={"mood": str, group_column: str})
    if "mood" not in df.columns:
        raise ValueError(f"{csv_path} has no 'mood' column (found: {list(df.columns)})")
    defaults = {
        "confidence": DEFAULT_CONFIDENCE,
        "weight": DEFAULT_WEIGHT,
        "source": DEFAULT_SOURCE,
        group_column: DEFAULT_GROUP,
    }
    for col, value in defaults.items():
        if col not in df.columns:
            df[col] = value
        else:
            df[col] = df[col].fillna(value)
    df["mood"] = df["mood"].fillna("")

    groups: Dict[str, List] = {}
    for _, row in df.iterrows():
        item = build_mood_input(row["mood"], float(row["confidence"]), float(row["weight"]), str(row["source"]))
        groups.setdefault(str(row[group_column]), []).append(item)
    return groups


def fuse_groups(groups: Dict[str, List]) -> Dict[str, FusionResult]:
    return {name: fuse_moods(items) for name, items in groups.items()}


def write_results(results: Dict[str, FusionResult], out_path: Path) -> None:
    out_path.parent.mkdir(parents=True, exist_ok=True)
    with open(out_path, "w", newline="", encoding="utf-8") as f:
        w = csv.writer(f)
        w.writerow(["group", "label", "valence", "arousal", "confidence", "source", "contributing_moods"])
        for name, res in results.items():
            w.writerow([
                name,
                res.label,
                res.vector.valence,
                res.vector.arousal,
                res.confidence,
                res.source,
                "|".join(res.contributing_moods or []),
            ])


def main(argv: Optional[List[str]] = None):
    parser = argparse.ArgumentParser(description="Fuse mood observations from a CSV file, one result per group")
    parser.add_argument("csv_path", type=str, help="CSV with a 'mood' column and optional confidence/weight/source/group")
    parser.add_argument("--group-column", type=str, default="group", help="Column used to split rows into groups")
    parser.add_argument("--out", type=str, default=None, help="Optional path to save fused results as CSV")
    args = parser.parse_args(argv)

    csv_path = Path(args.csv_path)
    if not csv_path.exists():
        print(f"CSV file not found: {csv_path}")
        sys.exit(1)
    try:
        groups = load_inputs(csv_path, group_column=args.group_column)
    except ValueError as e:
        print(str(e))
        sys.exit(1)

    results = fuse_groups(groups)
    print("\n=== Fused Moods ===")
    for name, res in results.items():
        v = res.vector
        print(f"{name}: {res.label} (valence={v.valence:.3f}, arousal={v.arousal:.3f}, "
              f"confidence={res.confidence:.3f}, source={res.source})")

    if args.out:
        out_path = Path(args.out)
        write_results(results, out_path)
        logger.info(f"Saved fused results to {out_path}")
    return results


if __name__ == "__main__":
    main()
