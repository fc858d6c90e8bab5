from __future__ import annotations

import argparse
import csv
import json
import logging
import math
from pathlib import Path
from typing import Optional

from ..sim.core.config import SimulationConfig
from ..sim.core.flock import Flock
from ..sim.core.geometry import Point

logger = logging.getLogger(__name__)

_BASIC_HEADER = [
    "tick",
    "population",
    "respawns",
    "avg_speed",
    "max_speed",
    "neighbor_checks",
    "tick_ms",
]

_DETAILED_HEADER = [
    "tick",
    "population",
    "respawns",
    "avg_speed",
    "max_speed",
    "centroid_x",
    "centroid_y",
    "spread",
    "target_distance",
    "neighbor_checks",
    "tick_ms",
    "neighbor_checks_per_boid",
    "tick_ms_per_boid",
]


def _format_basic_row(metrics: object, tick_ms: float) -> list[object]:
    return [
        metrics.tick,
        metrics.population,
        metrics.respawns,
        f"{metrics.average_speed:.4f}",
        f"{metrics.max_speed:.4f}",
        metrics.neighbor_checks,
        f"{tick_ms:.3f}",
    ]


def _format_detailed_row(flock: Flock, metrics: object, tick_ms: float) -> list[object]:
    population = metrics.population
    target = flock.target
    target_distance = math.hypot(metrics.centroid_x - target.x, metrics.centroid_y - target.y)
    if population <= 0:
        neighbor_checks_per_boid = 0.0
        tick_ms_per_boid = 0.0
    else:
        neighbor_checks_per_boid = metrics.neighbor_checks / population
        tick_ms_per_boid = tick_ms / population
    return [
        metrics.tick,
        population,
        metrics.respawns,
        f"{metrics.average_speed:.4f}",
        f"{metrics.max_speed:.4f}",
        f"{metrics.centroid_x:.4f}",
        f"{metrics.centroid_y:.4f}",
        f"{metrics.spread:.4f}",
        f"{target_distance:.4f}",
        metrics.neighbor_checks,
        f"{tick_ms:.3f}",
        f"{neighbor_checks_per_boid:.4f}",
        f"{tick_ms_per_boid:.4f}",
    ]


def _percentile(sorted_values: list[float], percentile: float) -> float:
    if not sorted_values:
        return 0.0
    if len(sorted_values) == 1:
        return float(sorted_values[0])
    pos = (len(sorted_values) - 1) * percentile
    low = int(math.floor(pos))
    high = int(math.ceil(pos))
    if low == high:
        return float(sorted_values[low])
    weight = pos - low
    return float(sorted_values[low] + (sorted_values[high] - sorted_values[low]) * weight)


def _summary_stats(values: list[float]) -> dict[str, float]:
    if not values:
        return {"min": 0.0, "max": 0.0, "avg": 0.0, "p50": 0.0, "p90": 0.0, "p99": 0.0}
    sorted_values = sorted(values)
    return {
        "min": float(sorted_values[0]),
        "max": float(sorted_values[-1]),
        "avg": float(sum(values) / len(values)),
        "p50": _percentile(sorted_values, 0.50),
        "p90": _percentile(sorted_values, 0.90),
        "p99": _percentile(sorted_values, 0.99),
    }


def run_headless(
    steps: int,
    seed: Optional[int],
    log_path: Optional[Path],
    deterministic_log: bool = False,
    log_format: str = "detailed",
    summary_path: Optional[Path] = None,
    config: Optional[SimulationConfig] = None,
    target: Optional[Point] = None,
) -> Flock:
    config = SimulationConfig() if config is None else config
    if seed is not None:
        config.seed = seed

    log_mode = log_format.lower().strip()
    if log_mode not in {"basic", "detailed"}:
        raise ValueError(f"Unknown log format: {log_format}")

    flock = Flock(config)
    if target is not None:
        flock.set_target(target)

    writer = None
    csv_file = None
    if log_path:
        csv_file = Path(log_path).open("w", newline="")
        writer = csv.writer(csv_file)
        writer.writerow(_DETAILED_HEADER if log_mode == "detailed" else _BASIC_HEADER)

    tick_ms_series: list[float] = []
    speed_series: list[float] = []
    spread_series: list[float] = []
    respawns_total = 0

    try:
        for tick in range(steps):
            metrics = flock.step(tick)
            tick_ms = 0.0 if deterministic_log else metrics.tick_duration_ms
            respawns_total += metrics.respawns
            tick_ms_series.append(tick_ms)
            speed_series.append(metrics.average_speed)
            spread_series.append(metrics.spread)
            if writer:
                if log_mode == "detailed":
                    writer.writerow(_format_detailed_row(flock, metrics, tick_ms))
                else:
                    writer.writerow(_format_basic_row(metrics, tick_ms))
    finally:
        if csv_file:
            csv_file.close()

    logger.info("ran %d ticks with %d boids, %d respawns", steps, len(flock.boids), respawns_total)

    if summary_path:
        summary = {
            "steps": steps,
            "seed": config.seed,
            "wrapped": config.wrapped,
            "log_format": log_mode,
            "deterministic_log": deterministic_log,
            "respawns": respawns_total,
            "tick_ms": _summary_stats(tick_ms_series),
            "avg_speed": _summary_stats(speed_series),
            "spread": _summary_stats(spread_series),
        }
        Path(summary_path).write_text(json.dumps(summary, indent=2))
    return flock


def main() -> None:
    parser = argparse.ArgumentParser(description="Headless flocking simulation")
    parser.add_argument("--steps", type=int, default=3000)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--config", type=Path, default=None, help="YAML simulation config")
    parser.add_argument("--wrapped", action="store_true", help="Wrap around the world edges instead of bouncing")
    parser.add_argument("--target", type=float, nargs=2, default=None, metavar=("X", "Y"))
    parser.add_argument("--log", type=Path, default=None, help="CSV file to write metrics")
    parser.add_argument(
        "--log-format",
        choices=["basic", "detailed"],
        default="detailed",
        help="CSV format to write when --log is provided.",
    )
    parser.add_argument("--summary", type=Path, default=None, help="Optional JSON file to write summary stats.")
    parser.add_argument(
        "--deterministic-log",
        action="store_true",
        help="Write deterministic CSV (tick_ms is forced to 0.000 so identical seeds match).",
    )
    parser.add_argument("--log-level", default="INFO")
    args = parser.parse_args()
    logging.basicConfig(level=args.log_level.upper(), format="[%(levelname)s] %(name)s: %(message)s")

    config = SimulationConfig.from_yaml(args.config) if args.config else SimulationConfig()
    if args.wrapped:
        config.wrapped = True
    run_headless(
        args.steps,
        args.seed,
        args.log,
        deterministic_log=args.deterministic_log,
        log_format=args.log_format,
        summary_path=args.summary,
        config=config,
        target=Point(*args.target) if args.target else None,
    )


if __name__ == "__main__":
    main()
