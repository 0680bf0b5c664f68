"""DrillTempo Demo — schedule a give-and-go drill.

Usage:
    uv run python demo.py

Player 1 passes to Player 2's run, Player 2 lays it off to Player 3
who has made a long run, and Player 3 shoots.  The scheduler holds the
runners back so each pass arrives as they do.
"""

from drill_tempo import Action, ActionKind, Agent, Drill, Point, optimize
from drill_tempo.scheduling.optimizer import plan_schedule
from drill_tempo.scheduling.timeline import natural_timeline, scheduled_timeline


def _straight(kind: ActionKind, x1: float, y1: float, x2: float, y2: float) -> Action:
    return Action(kind=kind, start=Point(x1, y1), end=Point(x2, y2))


def build_drill() -> Drill:
    return Drill(agents=[
        Agent("1", [
            _straight(ActionKind.DRIBBLE, 100, 400, 200, 400),
            _straight(ActionKind.PASS, 200, 400, 450, 250),
        ]),
        Agent("2", [
            _straight(ActionKind.RUN, 500, 400, 450, 250),
            _straight(ActionKind.PASS, 450, 250, 800, 150),
        ]),
        Agent("3", [
            _straight(ActionKind.RUN, 300, 500, 800, 150),
            _straight(ActionKind.SHOOT, 800, 150, 950, 100),
        ]),
    ])


def main():
    drill = build_drill()

    natural = natural_timeline(drill)
    print(f"Natural makespan (no synchronization): {natural.makespan:.2f}s")

    plan = plan_schedule(drill)
    print(f"Sync edges: {len(plan.sync_edges)}")
    for edge in plan.sync_edges:
        print(f"  {edge.source.label} → {edge.target.label}")

    optimize(drill)
    timeline = scheduled_timeline(drill, plan.times)

    print("\n" + "=" * 60)
    print("SCHEDULE")
    print("=" * 60)
    for e in timeline.entries:
        speed = "—" if e.speed is None else f"{e.speed:g} px/s"
        print(f"  Player {e.agent_id} #{e.action_index} {e.kind:<8}"
              f" wait {e.wait_before:4.2f}s  {e.start:5.2f}s → {e.end:5.2f}s  speed {speed}")
    print(f"\nScheduled makespan: {timeline.makespan:.2f}s")

    print(timeline.to_df().to_string(index=False))


if __name__ == "__main__":
    main()
