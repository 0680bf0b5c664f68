"""
Project: DrillTempo
File Name: data/drill_json.py
Description:
    Drill JSON parser / serializer.
    Reads and writes the drill description exchanged with the drawing
    client.  The payload is an object with a "players" array; each player
    has an "id" and an ordered "actions" array, each action carries:
      - type: run / dribble / pass / shoot / tackle / turn
      - startX, startY, endX, endY: segment endpoints (canvas px)
      - pathType: "straight" or "freehand", with "points" [{x, y}, ...]
      - speed, waitBefore: scheduler output (may be absent on input)

    Every other field (config, gesture, sceneIndex, player position, ...)
    is kept untouched in metadata so the output has the same shape as
    the input.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from drill_tempo.core.models import Action, ActionKind, Agent, Drill, PathType, Point

logger = logging.getLogger(__name__)

_ACTION_KEYS = {
    "id", "type", "startX", "startY", "endX", "endY",
    "pathType", "points", "speed", "waitBefore",
}
_PLAYER_KEYS = {"id", "actions", "team", "number"}


def _parse_point(raw: dict[str, Any]) -> Point:
    return Point(x=float(raw["x"]), y=float(raw["y"]))


def _parse_action(raw: dict[str, Any], player_id: str, index: int) -> Action:
    """Parse one entry of a player's "actions" array."""
    where = f"player {player_id!r} action {index}"
    try:
        kind = ActionKind(raw["type"])
    except KeyError:
        raise ValueError(f"{where}: missing action type") from None
    except ValueError:
        raise ValueError(f"{where}: unknown action type {raw['type']!r}") from None

    try:
        start = Point(float(raw["startX"]), float(raw["startY"]))
        end = Point(float(raw["endX"]), float(raw["endY"]))
        points = [_parse_point(p) for p in raw.get("points") or []]
    except (KeyError, TypeError, ValueError) as exc:
        raise ValueError(f"{where}: malformed geometry ({exc})") from exc

    try:
        path_type = PathType(raw.get("pathType") or PathType.STRAIGHT.value)
    except ValueError:
        raise ValueError(f"{where}: unknown pathType {raw.get('pathType')!r}") from None

    speed = raw.get("speed")
    return Action(
        kind=kind,
        start=start,
        end=end,
        path_type=path_type,
        points=points,
        action_id=raw.get("id"),
        speed=None if speed is None else float(speed),
        wait_before=float(raw.get("waitBefore") or 0.0),
        metadata={k: v for k, v in raw.items() if k not in _ACTION_KEYS},
    )


def _parse_player(raw: dict[str, Any]) -> Agent:
    if "id" not in raw:
        raise ValueError("player without id")
    player_id = str(raw["id"])
    number = raw.get("number")
    return Agent(
        agent_id=player_id,
        actions=[
            _parse_action(a, player_id, i)
            for i, a in enumerate(raw.get("actions") or [])
        ],
        team=raw.get("team"),
        number=None if number is None else str(number),
        metadata={k: v for k, v in raw.items() if k not in _PLAYER_KEYS},
    )


def parse_drill(payload: dict[str, Any]) -> Drill:
    """Build a Drill from a decoded drill JSON payload.

    Raises:
        ValueError: On unknown action types or malformed geometry.
    """
    players = payload.get("players")
    if not isinstance(players, list):
        raise ValueError("drill payload must contain a 'players' array")
    return Drill(agents=[_parse_player(p) for p in players])


def load_drill(path: str | Path) -> Drill:
    """Load a drill from a JSON file."""
    path = Path(path)
    with open(path, encoding="utf-8") as f:
        payload = json.load(f)
    drill = parse_drill(payload)
    logger.debug("Loaded %s: %d players, %d actions", path, len(drill.agents), drill.action_count)
    return drill


# ---------------------------------------------------------------------------
# Serialization
# ---------------------------------------------------------------------------


def _action_to_dict(action: Action) -> dict[str, Any]:
    out: dict[str, Any] = dict(action.metadata)
    if action.action_id is not None:
        out["id"] = action.action_id
    out.update({
        "type": action.kind.value,
        "startX": action.start.x,
        "startY": action.start.y,
        "endX": action.end.x,
        "endY": action.end.y,
        "pathType": action.path_type.value,
        "points": [{"x": p.x, "y": p.y} for p in action.points],
        "speed": action.speed,
        "waitBefore": action.wait_before,
    })
    return out


def drill_to_dict(drill: Drill) -> dict[str, Any]:
    """Serialize a Drill back to the client's JSON shape."""
    players = []
    for agent in drill.agents:
        raw: dict[str, Any] = dict(agent.metadata)
        raw["id"] = agent.agent_id
        if agent.team is not None:
            raw["team"] = agent.team
        if agent.number is not None:
            raw["number"] = agent.number
        raw["actions"] = [_action_to_dict(a) for a in agent.actions]
        players.append(raw)
    return {"players": players}


def save_drill(drill: Drill, path: str | Path) -> None:
    """Write a drill as indented JSON."""
    with open(path, "w", encoding="utf-8") as f:
        json.dump(drill_to_dict(drill), f, indent=2)
