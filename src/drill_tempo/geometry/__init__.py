"""Geometry utilities for drill paths."""

from drill_tempo.geometry.distance import (
    euclidean,
    pairwise_distances,
    point_distance,
    polyline_length,
)

__all__ = [
    "euclidean",
    "pairwise_distances",
    "point_distance",
    "polyline_length",
]
