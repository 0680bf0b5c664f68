"""
Project: DrillTempo
File Name: test_geometry.py
Description:
    Tests for canvas distance utilities.
"""

import math

from drill_tempo.core.models import Point
from drill_tempo.geometry.distance import (
    euclidean,
    pairwise_distances,
    point_distance,
    polyline_length,
)


class TestEuclidean:
    def test_same_point(self):
        assert euclidean(0, 0, 0, 0) == 0.0

    def test_horizontal(self):
        assert euclidean(0, 0, 10, 0) == 10.0

    def test_diagonal(self):
        assert math.isclose(euclidean(0, 0, 3, 4), 5.0)


class TestPointDistance:
    def test_known_distance(self):
        assert math.isclose(point_distance(Point(1, 1), Point(4, 5)), 5.0)


class TestPolylineLength:
    def test_empty(self):
        assert polyline_length([]) == 0.0

    def test_single_point(self):
        assert polyline_length([Point(5, 5)]) == 0.0

    def test_two_segments(self):
        pts = [Point(0, 0), Point(3, 4), Point(3, 10)]
        assert math.isclose(polyline_length(pts), 11.0)

    def test_backtracking_counts_both_ways(self):
        pts = [Point(0, 0), Point(10, 0), Point(0, 0)]
        assert math.isclose(polyline_length(pts), 20.0)


class TestPairwiseDistances:
    def test_shape(self):
        a = [Point(0, 0), Point(1, 0)]
        b = [Point(0, 0), Point(0, 3), Point(4, 0)]
        assert pairwise_distances(a, b).shape == (2, 3)

    def test_values(self):
        d = pairwise_distances([Point(0, 0)], [Point(3, 4), Point(0, 0)])
        assert math.isclose(d[0, 0], 5.0)
        assert d[0, 1] == 0.0

    def test_empty_side(self):
        assert pairwise_distances([], [Point(0, 0)]).shape == (0, 1)
