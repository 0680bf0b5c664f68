#!/usr/bin/env python3
"""Schedule a drill JSON file: assign speeds and waits to every action.

    uv run python scripts/optimize_drill.py drill.json -o drill.scheduled.json

Prints the natural (as drawn, no synchronization) and the scheduled
timeline of every player.  Use --plot to open a Plotly Gantt view.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from drill_tempo.config import DEFAULT_CONFIG, PropagationMode, SyncPolicy
from drill_tempo.data.drill_json import load_drill, save_drill
from drill_tempo.scheduling.optimizer import apply_plan, plan_schedule
from drill_tempo.scheduling.timeline import (
    Timeline,
    idle_time,
    natural_timeline,
    scheduled_timeline,
)


def _print_timeline(title: str, timeline: Timeline) -> None:
    print(f"\n{title}")
    print("=" * 72)
    for e in timeline.entries:
        speed = "—" if e.speed is None else f"{e.speed:g}"
        print(
            f"  [{e.agent_id}] #{e.action_index} {e.kind:<8} "
            f"start={e.start:6.2f}s  end={e.end:6.2f}s  "
            f"wait={e.wait_before:5.2f}s  speed={speed}"
        )
    print(f"  makespan: {timeline.makespan:.2f}s")


def main() -> None:
    parser = argparse.ArgumentParser(description="DrillTempo drill scheduler")
    parser.add_argument("drill", type=Path, help="Drill JSON file")
    parser.add_argument(
        "-o", "--output", type=Path, default=None,
        help="Where to write the scheduled drill (default: <drill>.scheduled.json)",
    )
    parser.add_argument(
        "--propagation", choices=[m.value for m in PropagationMode],
        default=DEFAULT_CONFIG.propagation.value,
        help="Merge semantics for event times (default: critical_path)",
    )
    parser.add_argument(
        "--sync-policy", choices=[p.value for p in SyncPolicy],
        default=DEFAULT_CONFIG.sync_policy.value,
        help="Link a pass to all receivers in range, or the nearest per player",
    )
    parser.add_argument(
        "--sync-radius", type=float, default=DEFAULT_CONFIG.sync_radius,
        help=f"Pass/receiver proximity threshold in px (default: {DEFAULT_CONFIG.sync_radius:g})",
    )
    parser.add_argument("--plot", action="store_true", help="Show a Plotly timeline")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    config = DEFAULT_CONFIG.replace(
        propagation=args.propagation,
        sync_policy=args.sync_policy,
        sync_radius=args.sync_radius,
    )

    try:
        drill = load_drill(args.drill)
        natural = natural_timeline(drill, config)
        plan = plan_schedule(drill, config)
    except (OSError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)

    apply_plan(drill, plan)
    scheduled = scheduled_timeline(drill, plan.times, config)

    _print_timeline("NATURAL TIMINGS (no synchronization)", natural)
    _print_timeline("SCHEDULED TIMINGS", scheduled)
    print(f"\n  sync edges: {len(plan.sync_edges)}   idle time: {idle_time(drill):.2f}s")

    output = args.output or args.drill.with_suffix(".scheduled.json")
    save_drill(drill, output)
    print(f"\nScheduled drill saved to {output}")

    if args.plot:
        from drill_tempo.viz.plotly_timeline import build_timeline_figure

        build_timeline_figure(scheduled, title=args.drill.stem).show()


if __name__ == "__main__":
    main()
