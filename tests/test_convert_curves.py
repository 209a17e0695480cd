"""
geom2topo curve conversion tests

name: test_convert_curves.py
by:   Gumyr
date: March 3rd 2025

desc: Unit tests for the conversion of host curves into edges and wires

license:

    Copyright 2025 Gumyr

    Licensed under the Apache License, Version 2.0 (the "License");
    you may not use this file except in compliance with the License.
    You may obtain a copy of the License at

        http://www.apache.org/licenses/LICENSE-2.0

    Unless required by applicable law or agreed to in writing, software
    distributed under the License is distributed on an "AS IS" BASIS,
    WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
    See the License for the specific language governing permissions and
    limitations under the License.

"""

import math
import unittest

import pytest

from geom2topo.build_enums import GeomType
from geom2topo.convert import (
    edge_by_line,
    edge_by_nurbs_curve,
    topology_by_curve,
    wire_by_poly_curve,
    wire_by_polyline_curve,
)
from geom2topo.errors import DegenerateTopologyError, UnsupportedGeometryError
from geom2topo.geometry import (
    ArcCurve,
    BrepEdge,
    Curve,
    Line,
    LineCurve,
    NurbsCurve,
    PolyCurve,
    PolylineCurve,
)
from geom2topo.topology import Edge, Wire


class TestLines(unittest.TestCase):
    def test_edge_by_line(self):
        edge = edge_by_line(Line((1, 2, 3), (4, 6, 3)))
        self.assertEqual(edge.start_vertex().to_tuple(), (1.0, 2.0, 3.0))
        self.assertEqual(edge.end_vertex().to_tuple(), (4.0, 6.0, 3.0))
        self.assertAlmostEqual(edge.length, 5)

    def test_line_curve(self):
        edge = topology_by_curve(LineCurve(Line((0, 0, 0), (0, 0, 2))))
        self.assertIsInstance(edge, Edge)
        self.assertEqual(edge.geom_type, GeomType.LINE)
        self.assertEqual(edge.end_vertex().to_tuple(), (0.0, 0.0, 2.0))


class TestNurbsCurves(unittest.TestCase):
    def test_cubic(self):
        points = [(0, 0), (1, 2), (3, 2), (4, 0), (6, 1)]
        edge = edge_by_nurbs_curve(NurbsCurve(3, points))
        self.assertEqual(edge.geom_type, GeomType.BSPLINE)
        self.assertAlmostEqual(edge.start_vertex().distance_to((0, 0, 0)), 0, 6)
        self.assertAlmostEqual(edge.end_vertex().distance_to((6, 1, 0)), 0, 6)

    def test_rational_cubic(self):
        curve = NurbsCurve(
            3,
            [(0, 0), (1, 2), (3, 2), (4, 0), (6, 1)],
            weights=[1, 0.5, 2, 0.5, 1],
        )
        edge = edge_by_nurbs_curve(curve)
        adaptor = edge.geom_adaptor()
        self.assertTrue(adaptor.BSpline().IsRational())
        self.assertEqual(adaptor.BSpline().NbPoles(), 5)
        self.assertEqual(adaptor.BSpline().Degree(), 3)

    def test_matching_points(self):
        curve = NurbsCurve(
            2,
            [(0, 0), (1, 2), (2, 0), (3, 1)],
            weights=[1, 3, 1, 1],
            knots=[0, 0, 0.4, 1, 1],
        )
        edge = edge_by_nurbs_curve(curve)
        adaptor = edge.geom_adaptor()
        for parameter in (0.0, 0.25, 0.4, 0.7, 1.0):
            kernel_point = adaptor.Value(parameter)
            host_point = curve.point_at(parameter)
            self.assertAlmostEqual(kernel_point.X(), host_point.X, 9)
            self.assertAlmostEqual(kernel_point.Y(), host_point.Y, 9)

    def test_periodic(self):
        corners = [(0, 0), (2, 0), (2, 2), (0, 2)]
        curve = NurbsCurve(3, corners + corners[:3], knots=range(-2, 7), periodic=True)
        edge = topology_by_curve(curve)
        self.assertTrue(edge.is_closed)
        self.assertTrue(edge.geom_adaptor().IsPeriodic())

    def test_arc(self):
        edge = topology_by_curve(ArcCurve((0, 0, 0), 2, end_angle=math.pi))
        self.assertIsInstance(edge, Edge)
        self.assertAlmostEqual(edge.length, 2 * math.pi, 5)
        self.assertAlmostEqual(edge.end_vertex().distance_to((-2, 0, 0)), 0, 6)

    def test_circle(self):
        edge = topology_by_curve(ArcCurve((0, 0, 0), 1))
        self.assertTrue(edge.is_closed)
        self.assertAlmostEqual(edge.length, 2 * math.pi, 5)

    def test_brep_edge(self):
        edge = topology_by_curve(BrepEdge(LineCurve(Line((0, 0, 0), (1, 1, 0)))))
        self.assertIsInstance(edge, Edge)
        self.assertAlmostEqual(edge.length, math.sqrt(2), 6)


class TestPolylines(unittest.TestCase):
    def test_open(self):
        wire = wire_by_polyline_curve(PolylineCurve([(0, 0), (1, 0), (1, 1), (2, 1)]))
        self.assertIsInstance(wire, Wire)
        self.assertEqual(len(wire.edges()), 3)
        self.assertFalse(wire.is_closed)
        self.assertAlmostEqual(wire.length, 3)

    def test_two_points(self):
        wire = topology_by_curve(PolylineCurve([(0, 0), (0, 3)]))
        self.assertIsInstance(wire, Wire)
        self.assertEqual(len(wire.edges()), 1)

    def test_closed_non_planar(self):
        points = [(0, 0, 0), (1, 0, 0), (1, 1, 1), (0, 1, 0), (0, 0, 0)]
        wire = wire_by_polyline_curve(PolylineCurve(points))
        self.assertTrue(wire.is_closed)
        self.assertEqual(len(wire.edges()), 4)

    def test_too_short(self):
        with self.assertRaises(DegenerateTopologyError):
            wire_by_polyline_curve(PolylineCurve([(0, 0)]))


@pytest.mark.parametrize("distinct", [3, 4, 5, 8])
def test_closed_polyline_edge_count(distinct):
    points = [
        (math.cos(2 * math.pi * i / distinct), math.sin(2 * math.pi * i / distinct))
        for i in range(distinct)
    ]
    wire = topology_by_curve(PolylineCurve(points + points[:1]))
    assert isinstance(wire, Wire)
    assert wire.is_closed
    assert len(wire.edges()) == distinct
    assert len(wire.vertices()) == distinct


class TestPolyCurves(unittest.TestCase):
    def test_mixed_segments(self):
        poly = PolyCurve(
            [
                LineCurve(Line((0, 0), (1, 0))),
                ArcCurve((1, 1), 1, start_angle=-math.pi / 2, end_angle=0),
                PolylineCurve([(2, 1), (2, 2), (0, 2)]),
            ]
        )
        wire = wire_by_poly_curve(poly)
        self.assertEqual(len(wire.edges()), 4)
        self.assertFalse(wire.is_closed)
        self.assertAlmostEqual(wire.length, 1 + math.pi / 2 + 1 + 2, 5)

    def test_nested(self):
        inner = PolyCurve(
            [LineCurve(Line((1, 0), (1, 1))), LineCurve(Line((1, 1), (0, 1)))]
        )
        poly = PolyCurve(
            [LineCurve(Line((0, 0), (1, 0))), inner, LineCurve(Line((0, 1), (0, 0)))]
        )
        wire = topology_by_curve(poly)
        self.assertIsInstance(wire, Wire)
        self.assertEqual(len(wire.edges()), 4)
        self.assertTrue(wire.is_closed)

    def test_gap(self):
        poly = PolyCurve(
            [LineCurve(Line((0, 0), (1, 0))), LineCurve(Line((5, 0), (6, 0)))]
        )
        with self.assertRaises(DegenerateTopologyError):
            wire_by_poly_curve(poly)


class TestUnsupported(unittest.TestCase):
    def test_unknown_curve(self):
        class HelixCurve(Curve):
            pass

        with self.assertRaises(UnsupportedGeometryError):
            topology_by_curve(HelixCurve())
        with self.assertRaises(ValueError):
            topology_by_curve(HelixCurve())


if __name__ == "__main__":
    unittest.main()
