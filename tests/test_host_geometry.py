"""
geom2topo host geometry tests

name: test_host_geometry.py
by:   Gumyr
date: March 3rd 2025

desc: Unit tests for the geom2topo host geometry model and its NURBS forms

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

import dataclasses
import math
import unittest

import pytest

from geom2topo.build_enums import LoopType
from geom2topo.errors import UnsupportedGeometryError
from geom2topo.geometry import (
    ArcCurve,
    Box,
    BrepEdge,
    BrepFace,
    BrepLoop,
    BrepTrim,
    Extrusion,
    Line,
    LineCurve,
    Mesh,
    NurbsCurve,
    NurbsSurface,
    PlaneSurface,
    Point3d,
    PolyCurve,
    PolylineCurve,
    RevSurface,
    SumSurface,
    clamped_knots,
    to_point,
)


class TestPoint3d(unittest.TestCase):
    def test_padding(self):
        self.assertEqual(to_point((1, 2)), Point3d(1, 2, 0))

    def test_distance(self):
        self.assertAlmostEqual(Point3d(0, 0, 0).distance_to((3, 4, 0)), 5)

    def test_bad_coordinates(self):
        with self.assertRaises(ValueError):
            to_point((1, 2, 3, 4))


class TestNurbsCurve(unittest.TestCase):
    def test_clamped_knots(self):
        self.assertEqual(clamped_knots(4, 3), [0.0, 0.0, 0.0, 1.0, 1.0, 1.0])
        knots = clamped_knots(5, 2)
        self.assertEqual(len(knots), 6)
        self.assertAlmostEqual(knots[2], 1 / 3)
        self.assertAlmostEqual(knots[3], 2 / 3)

    def test_defaults(self):
        curve = NurbsCurve(3, [(0, 0), (1, 1), (2, -1), (3, 0)])
        self.assertEqual(curve.weights, [1.0] * 4)
        self.assertEqual(len(curve.knots), 6)
        self.assertFalse(curve.is_rational)
        self.assertFalse(curve.is_periodic)
        self.assertEqual(curve.domain, (0.0, 1.0))

    def test_clamped_end_points(self):
        curve = NurbsCurve(3, [(0, 0), (1, 1), (2, -1), (3, 0), (4, 2)])
        self.assertLess(curve.start_point.distance_to((0, 0, 0)), 1e-9)
        self.assertLess(curve.end_point.distance_to((4, 2, 0)), 1e-9)
        self.assertFalse(curve.is_closed)

    def test_closed(self):
        curve = NurbsCurve(2, [(0, 0), (1, 0), (1, 1), (0, 0)])
        self.assertTrue(curve.is_closed)

    def test_invalid(self):
        with self.assertRaises(ValueError):
            NurbsCurve(0, [(0, 0), (1, 0)])
        with self.assertRaises(ValueError):
            NurbsCurve(3, [(0, 0), (1, 0), (2, 0)])
        with self.assertRaises(ValueError):
            NurbsCurve(1, [(0, 0), (1, 0)], weights=[1])
        with self.assertRaises(ValueError):
            NurbsCurve(1, [(0, 0), (1, 0)], weights=[1, 0])
        with self.assertRaises(ValueError):
            NurbsCurve(1, [(0, 0), (1, 0)], knots=[0, 1, 2])
        with self.assertRaises(ValueError):
            NurbsCurve(2, [(0, 0), (1, 0), (2, 0)], knots=[0, 1, 0.5, 1])


class TestArcCurve(unittest.TestCase):
    def test_full_circle(self):
        circle = ArcCurve((1, 2, 3), 2)
        self.assertAlmostEqual(circle.end_angle - circle.start_angle, 2 * math.pi)
        nurbs = circle.to_nurbs()
        self.assertEqual(nurbs.degree, 2)
        self.assertEqual(len(nurbs.points), 9)
        self.assertEqual(len(nurbs.knots), 10)
        self.assertTrue(nurbs.is_rational)
        self.assertTrue(circle.is_closed)
        self.assertLess(nurbs.start_point.distance_to((3, 2, 3)), 1e-9)

    def test_quarter_weights(self):
        nurbs = ArcCurve((0, 0, 0), 1, end_angle=math.pi / 2).to_nurbs()
        self.assertEqual(len(nurbs.points), 3)
        self.assertAlmostEqual(nurbs.weights[1], math.cos(math.pi / 4))
        self.assertEqual(nurbs.knots, [0.0, 0.0, math.pi / 2, math.pi / 2])

    def test_points_on_circle(self):
        arc = ArcCurve((0, 0, 0), 5, start_angle=0.3, end_angle=2.9)
        nurbs = arc.to_nurbs()
        start, end = nurbs.domain
        for i in range(11):
            point = nurbs.point_at(start + i * (end - start) / 10)
            self.assertAlmostEqual(point.distance_to((0, 0, 0)), 5, places=9)
        self.assertFalse(arc.is_closed)

    def test_normal(self):
        arc = ArcCurve((0, 0, 0), 1, normal=(0, 1, 0), x_axis=(1, 0, 0))
        for point in arc.to_nurbs().points:
            self.assertAlmostEqual(point.Y, 0)

    def test_invalid(self):
        with self.assertRaises(ValueError):
            ArcCurve((0, 0, 0), 0)
        with self.assertRaises(ValueError):
            ArcCurve((0, 0, 0), 1, normal=(1, 0, 0), x_axis=(2, 0, 0))
        with self.assertRaises(ValueError):
            ArcCurve((0, 0, 0), 1, start_angle=1, end_angle=1).to_nurbs()


class TestPolylines(unittest.TestCase):
    def test_line_curve(self):
        curve = LineCurve(Line((0, 0, 0), (3, 4, 0)))
        nurbs = curve.to_nurbs()
        self.assertEqual(nurbs.degree, 1)
        self.assertEqual(nurbs.knots, [0.0, 5.0])
        self.assertEqual(curve.end_point, Point3d(3, 4, 0))

    def test_closed_polyline(self):
        square = PolylineCurve([(0, 0), (1, 0), (1, 1), (0, 1), (0, 0)])
        self.assertTrue(square.is_closed)
        self.assertEqual(square.to_nurbs().knots, [0.0, 1.0, 2.0, 3.0, 4.0])

    def test_short_polyline_not_closed(self):
        self.assertFalse(PolylineCurve([(0, 0), (1, 0), (0, 0)]).is_closed)

    def test_poly_curve(self):
        segments = [
            LineCurve(Line((0, 0), (1, 0))),
            ArcCurve((1, 1), 1, start_angle=-math.pi / 2, end_angle=0),
        ]
        poly = PolyCurve(segments)
        self.assertEqual(poly.explode(), segments)
        self.assertEqual(poly.start_point, Point3d(0, 0, 0))
        self.assertLess(poly.end_point.distance_to((2, 1, 0)), 1e-9)
        with self.assertRaises(UnsupportedGeometryError):
            poly.to_nurbs()
        with self.assertRaises(ValueError):
            PolyCurve([])


class TestSurfaces(unittest.TestCase):
    def test_plane(self):
        nurbs = PlaneSurface((0, 0, 1), x_interval=(0, 2), y_interval=(0, 3)).to_nurbs()
        self.assertEqual((nurbs.degree_u, nurbs.degree_v), (1, 1))
        self.assertEqual((nurbs.point_count_u, nurbs.point_count_v), (2, 2))
        self.assertEqual(nurbs.points[1][1], Point3d(2, 3, 1))
        self.assertEqual(nurbs.knots_u, [0.0, 2.0])

    def test_sum_surface(self):
        line = LineCurve(Line((0, 0, 0), (2, 0, 0)))
        arc = ArcCurve((0, 1, 0), 1, normal=(1, 0, 0), x_axis=(0, -1, 0), end_angle=math.pi / 2)
        nurbs = SumSurface(line, arc).to_nurbs()
        self.assertEqual((nurbs.degree_u, nurbs.degree_v), (1, 2))
        self.assertEqual((nurbs.point_count_u, nurbs.point_count_v), (2, 3))
        self.assertLess(nurbs.points[0][0].distance_to((0, 0, 0)), 1e-9)
        self.assertLess(nurbs.points[1][0].distance_to((2, 0, 0)), 1e-9)
        self.assertAlmostEqual(nurbs.weights[1][1], math.cos(math.pi / 4))
        self.assertTrue(nurbs.is_rational)

    def test_rev_surface(self):
        profile = LineCurve(Line((1, 0, 0), (1, 0, 1)))
        nurbs = RevSurface(profile).to_nurbs()
        self.assertEqual(nurbs.degree_v, 2)
        self.assertEqual((nurbs.point_count_u, nurbs.point_count_v), (2, 9))
        self.assertTrue(nurbs.is_closed("v"))
        self.assertFalse(nurbs.is_closed("u"))
        self.assertLess(nurbs.points[0][0].distance_to((1, 0, 0)), 1e-9)
        self.assertLess(nurbs.points[1][4].distance_to((-1, 0, 1)), 1e-9)

    def test_rev_surface_start_angle(self):
        profile = LineCurve(Line((1, 0, 0), (1, 0, 1)))
        nurbs = RevSurface(profile, start_angle=math.pi / 2, end_angle=math.pi).to_nurbs()
        self.assertEqual(nurbs.point_count_v, 3)
        self.assertLess(nurbs.points[0][0].distance_to((0, 1, 0)), 1e-9)
        self.assertLess(nurbs.points[0][2].distance_to((-1, 0, 0)), 1e-9)

    def test_extrusion(self):
        profile = ArcCurve((0, 0, 0), 1, end_angle=math.pi / 2)
        nurbs = Extrusion(profile, (0, 0, 2)).to_nurbs()
        self.assertEqual((nurbs.point_count_u, nurbs.point_count_v), (3, 2))
        self.assertEqual(nurbs.knots_v, [0.0, 1.0])
        for row in nurbs.points:
            self.assertAlmostEqual(row[1].Z - row[0].Z, 2)
        with self.assertRaises(ValueError):
            Extrusion(profile, (0, 0, 0))

    def test_nurbs_surface_invalid(self):
        with self.assertRaises(ValueError):
            NurbsSurface(1, 1, [[(0, 0), (1, 0)], [(0, 1)]])
        with self.assertRaises(ValueError):
            NurbsSurface(2, 1, [[(0, 0), (1, 0)], [(0, 1), (1, 1)]])
        with self.assertRaises(ValueError):
            NurbsSurface(1, 1, [[(0, 0), (1, 0)], [(0, 1), (1, 1)]], weights=[[1, 1]])
        with self.assertRaises(ValueError):
            NurbsSurface(
                1, 1, [[(0, 0), (1, 0)], [(0, 1), (1, 1)]], knots_u=[0, 0.5, 1]
            )


class TestBrep(unittest.TestCase):
    def test_outer_loop(self):
        edge = BrepEdge(LineCurve(Line((0, 0), (1, 0))))
        outer = BrepLoop([BrepTrim(edge)])
        inner = BrepLoop([BrepTrim(None)], LoopType.INNER)
        face = BrepFace(PlaneSurface((0, 0, 0)), [inner, outer])
        self.assertIs(face.outer_loop, outer)
        with self.assertRaises(ValueError):
            BrepFace(PlaneSurface((0, 0, 0)), [outer, outer]).outer_loop
        with self.assertRaises(ValueError):
            BrepFace(PlaneSurface((0, 0, 0)), [inner]).outer_loop

    def test_box(self):
        box = Box((1, 2, 3), (0, 0, 0))
        self.assertEqual(box.min_point, Point3d(0, 0, 0))
        self.assertEqual(box.size, (1.0, 2.0, 3.0))
        brep = box.to_brep()
        self.assertTrue(brep.is_solid)
        self.assertEqual(len(brep.faces), 6)
        edges = {
            id(trim.edge) for face in brep.faces for trim in face.outer_loop.trims
        }
        self.assertEqual(len(edges), 12)
        for face in brep.faces:
            self.assertEqual(len(face.outer_loop.trims), 4)

    def test_flat_box(self):
        with self.assertRaises(ValueError):
            Box((0, 0, 0), (1, 1, 0))

    def test_immutable(self):
        brep = Box((0, 0, 0), (1, 1, 1)).to_brep()
        self.assertIsInstance(brep.faces, tuple)
        self.assertIsInstance(brep.faces[0].outer_loop.trims, tuple)
        with self.assertRaises(dataclasses.FrozenInstanceError):
            brep.is_solid = False
        with self.assertRaises(dataclasses.FrozenInstanceError):
            brep.faces[0].outer_loop.loop_type = LoopType.INNER


class TestMesh(unittest.TestCase):
    def test_triangle_from_quad(self):
        mesh = Mesh([(0, 0), (1, 0), (0, 1)], [(0, 1, 2, 2)])
        self.assertEqual(mesh.faces, ((0, 1, 2),))

    def test_quad(self):
        mesh = Mesh([(0, 0), (1, 0), (1, 1), (0, 1)], [(0, 1, 2, 3)])
        self.assertEqual(mesh.faces, ((0, 1, 2, 3),))
        self.assertEqual(mesh.vertices[2], Point3d(1, 1, 0))

    def test_immutable(self):
        mesh = Mesh([(0, 0), (1, 0), (0, 1)], [(0, 1, 2)])
        with self.assertRaises(dataclasses.FrozenInstanceError):
            mesh.faces = ()


@pytest.mark.parametrize("face", [(0, 1), (0, 1, 2, 3, 0), (0, 1, 5), (0, -1, 2)])
def test_mesh_invalid_faces(face):
    with pytest.raises(ValueError):
        Mesh([(0, 0), (1, 0), (1, 1), (0, 1)], [face])


if __name__ == "__main__":
    unittest.main()
