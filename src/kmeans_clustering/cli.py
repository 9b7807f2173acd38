"""Command-line interface for clustering random sample sets."""
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .config import ClusterConfig, SampleConfig
from .constants import (
    DEFAULT_BOX_MAX_SIZE,
    DEFAULT_CLUSTER_COUNT,
    DEFAULT_MAX_ITERATIONS,
    DEFAULT_SAMPLE_SIZE,
    DEFAULT_SEED,
    DEFAULT_SPACE_SIZE,
    SAMPLE_KINDS,
)
from .distance import DISTANCES
from .engine import cluster_with_config
from .errors import ClusteringError
from .samples import generate_samples
from .visuals import render_clusters


def build_parser() -> argparse.ArgumentParser:
    """Build CLI parser for sample clustering."""
    parser = argparse.ArgumentParser(
        description="Cluster random points or boxes with Lloyd's k-means"
    )
    parser.add_argument("--kind", choices=SAMPLE_KINDS, default="vector3")
    parser.add_argument("--sample-size", type=int, default=DEFAULT_SAMPLE_SIZE)
    parser.add_argument(
        "--space-size",
        type=float,
        default=DEFAULT_SPACE_SIZE,
        help="Half-extent of the region samples are drawn from.",
    )
    parser.add_argument(
        "--box-max-size",
        type=float,
        default=DEFAULT_BOX_MAX_SIZE,
        help="Largest box edge length for --kind bounds.",
    )
    parser.add_argument(
        "--sample-seed",
        type=int,
        default=None,
        help="Seed for sample generation (random when omitted).",
    )
    parser.add_argument("--clusters", type=int, default=DEFAULT_CLUSTER_COUNT)
    parser.add_argument("--iterations", type=int, default=DEFAULT_MAX_ITERATIONS)
    parser.add_argument(
        "--seed",
        type=int,
        default=DEFAULT_SEED,
        help="Seed for the initial random assignment.",
    )
    parser.add_argument(
        "--restarts",
        type=int,
        default=1,
        help="Number of consecutive seeds to try, keeping the best run.",
    )
    parser.add_argument(
        "--centroids",
        type=int,
        nargs="+",
        default=None,
        help="Initial centroid item indices, one per cluster.",
    )
    parser.add_argument(
        "--distance", choices=sorted(DISTANCES), default="euclidean"
    )
    parser.add_argument(
        "--render",
        default=None,
        help="Write a PNG preview of the clusters to this path.",
    )
    parser.add_argument("--progress", action="store_true")
    parser.add_argument("--verbose", action="store_true")
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    samples = SampleConfig(
        kind=args.kind,
        sample_size=args.sample_size,
        space_size=args.space_size,
        box_max_size=args.box_max_size,
        seed=args.sample_seed,
    )
    config = ClusterConfig(
        cluster_count=args.clusters,
        max_iterations=args.iterations,
        seed=args.seed,
        distance=args.distance,
        initial_centroid_indices=args.centroids,
        restarts=args.restarts,
    )

    try:
        items = generate_samples(samples)
        result = cluster_with_config(items, config, progress=args.progress)
    except (ClusteringError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(2) from exc

    if args.render:
        output_path = Path(args.render)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        render_clusters(items, result).save(output_path)
        print(f"Wrote preview to {output_path}", file=sys.stderr)

    summary = result.to_dict()
    summary["centroid_items"] = result.centroid_items(items)
    print(json.dumps(summary, indent=2))


if __name__ == "__main__":
    main()
