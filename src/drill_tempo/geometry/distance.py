"""Distance utilities on the drill canvas."""

from __future__ import annotations

import math
from collections.abc import Sequence

import numpy as np
from scipy.spatial.distance import cdist

from drill_tempo.core.models import Point


def euclidean(x1: float, y1: float, x2: float, y2: float) -> float:
    """Euclidean distance between two 2D points."""
    return math.hypot(x2 - x1, y2 - y1)


def point_distance(a: Point, b: Point) -> float:
    """Euclidean distance between two canvas points."""
    return euclidean(a.x, a.y, b.x, b.y)


def polyline_length(points: Sequence[Point]) -> float:
    """Total length of a polyline: sum of consecutive segment lengths.

    A single point (or none) has zero length.
    """
    if len(points) < 2:
        return 0.0
    coords = np.array([(p.x, p.y) for p in points], dtype=float)
    steps = np.diff(coords, axis=0)
    return float(np.hypot(steps[:, 0], steps[:, 1]).sum())


def pairwise_distances(a: Sequence[Point], b: Sequence[Point]) -> np.ndarray:
    """Distance matrix between two point sets, shape (len(a), len(b))."""
    if not a or not b:
        return np.zeros((len(a), len(b)))
    xa = np.array([(p.x, p.y) for p in a], dtype=float)
    xb = np.array([(p.x, p.y) for p in b], dtype=float)
    return cdist(xa, xb)
