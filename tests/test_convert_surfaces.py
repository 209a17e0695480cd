"""
geom2topo surface and trimming tests

name: test_convert_surfaces.py
by:   Gumyr
date: March 3rd 2025

desc: Unit tests for the conversion of host surfaces and brep faces into faces

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

from geom2topo.build_enums import GeomType, LoopType
from geom2topo.convert import (
    face_by_brep_face,
    face_by_nurbs_surface,
    face_by_surface,
    wire_by_brep_loop,
)
from geom2topo.errors import DegenerateTopologyError, UnsupportedGeometryError
from geom2topo.geometry import (
    ArcCurve,
    BrepEdge,
    BrepFace,
    BrepLoop,
    BrepTrim,
    Extrusion,
    Line,
    LineCurve,
    NurbsSurface,
    PlaneSurface,
    PolyCurve,
    PolylineCurve,
    RevSurface,
    SumSurface,
    Surface,
)
from geom2topo.topology import Face, Wire


def square_loop(low, high, loop_type=LoopType.OUTER, missing=(), clockwise=False):
    corners = [(low, low), (high, low), (high, high), (low, high)]
    if clockwise:
        corners.reverse()
    trims = [
        BrepTrim(
            None if i in missing else BrepEdge(LineCurve(Line(start, end)))
        )
        for i, (start, end) in enumerate(zip(corners, corners[1:] + corners[:1]))
    ]
    return BrepLoop(trims, loop_type)


PLANE = PlaneSurface((0, 0, 0), x_interval=(0, 10), y_interval=(0, 10))


class TestSurfaces(unittest.TestCase):
    def test_plane(self):
        face = face_by_surface(PLANE)
        self.assertIsInstance(face, Face)
        self.assertEqual(face.geom_type, GeomType.BSPLINE)
        self.assertAlmostEqual(face.area, 100, 5)

    def test_nurbs_surface(self):
        points = [[(x, y, (x - 1) * (y - 1)) for y in range(3)] for x in range(3)]
        surface = NurbsSurface(2, 2, points)
        face = face_by_nurbs_surface(surface)
        adaptor = face.geom_adaptor()
        self.assertEqual(adaptor.UDegree(), 2)
        self.assertEqual(adaptor.VDegree(), 2)
        self.assertEqual(adaptor.NbUPoles(), 3)
        self.assertEqual(adaptor.NbVPoles(), 3)
        # corners are interpolated
        corner = adaptor.Value(1.0, 0.0)
        self.assertAlmostEqual(corner.X(), 2)
        self.assertAlmostEqual(corner.Y(), 0)
        self.assertAlmostEqual(corner.Z(), -1)

    def test_cylinder_by_extrusion(self):
        face = face_by_surface(Extrusion(ArcCurve((0, 0, 0), 1), (0, 0, 3)))
        self.assertAlmostEqual(face.area, 6 * math.pi, delta=1e-4 * 6 * math.pi)

    def test_sphere_by_revolution(self):
        profile = ArcCurve(
            (0, 0, 0),
            1,
            normal=(0, -1, 0),
            x_axis=(0, 0, -1),
            start_angle=0,
            end_angle=math.pi,
        )
        face = face_by_surface(RevSurface(profile))
        self.assertTrue(face.geom_adaptor().IsURational())
        self.assertAlmostEqual(face.area, 4 * math.pi, delta=1e-4 * 4 * math.pi)

    def test_sum_surface(self):
        face = face_by_surface(
            SumSurface(
                LineCurve(Line((0, 0, 0), (2, 0, 0))),
                LineCurve(Line((0, 0, 0), (0, 3, 0))),
            )
        )
        self.assertAlmostEqual(face.area, 6, 5)

    def test_unsupported(self):
        class OffsetSurface(Surface):
            def to_nurbs(self):
                raise NotImplementedError

        with self.assertRaises(UnsupportedGeometryError):
            face_by_surface(OffsetSurface())

    def test_composite_profile(self):
        profile = PolyCurve(
            [LineCurve(Line((0, 0), (1, 0))), LineCurve(Line((1, 0), (1, 1)))]
        )
        for surface in (
            Extrusion(profile, (0, 0, 1)),
            RevSurface(profile),
            SumSurface(profile, LineCurve(Line((0, 0), (0, 0, 1)))),
        ):
            with self.assertRaises(UnsupportedGeometryError):
                face_by_surface(surface)


class TestLoops(unittest.TestCase):
    def test_wire(self):
        wire = wire_by_brep_loop(square_loop(0, 10))
        self.assertTrue(wire.is_closed)
        self.assertEqual(len(wire.edges()), 4)

    def test_polyline_trim(self):
        polyline = BrepEdge(PolylineCurve([(0, 0), (10, 0), (10, 10)]))
        closing = BrepEdge(
            PolylineCurve([(10, 10), (0, 10), (0, 0)])
        )
        wire = wire_by_brep_loop(BrepLoop([BrepTrim(polyline), BrepTrim(closing)]))
        self.assertEqual(len(wire.edges()), 4)
        self.assertTrue(wire.is_closed)

    def test_missing_trim(self):
        with self.assertWarns(UserWarning):
            wire = wire_by_brep_loop(square_loop(0, 10, missing=(1,)))
        self.assertEqual(len(wire.edges()), 3)
        self.assertFalse(wire.is_closed)

    def test_all_missing(self):
        with self.assertWarns(UserWarning):
            wire = wire_by_brep_loop(square_loop(0, 10, missing=(0, 1, 2, 3)))
        self.assertIsInstance(wire, Wire)
        self.assertTrue(wire.is_empty())


class TestTrimmedFaces(unittest.TestCase):
    def test_outer_only(self):
        face = face_by_brep_face(BrepFace(PLANE, [square_loop(2, 8)]))
        self.assertAlmostEqual(face.area, 36, 5)
        self.assertEqual(len(face.vertices()), 4)
        self.assertEqual(len(face.inner_wires()), 0)

    def test_hole(self):
        face = face_by_brep_face(
            BrepFace(PLANE, [square_loop(4, 6, LoopType.INNER), square_loop(0, 10)])
        )
        self.assertAlmostEqual(face.area, 96, 5)
        self.assertEqual(len(face.inner_wires()), 1)
        self.assertTrue(face.is_valid())

    def test_two_holes(self):
        face = face_by_brep_face(
            BrepFace(
                PLANE,
                [
                    square_loop(0, 10),
                    square_loop(1, 2, LoopType.INNER),
                    square_loop(7, 9, LoopType.INNER),
                ],
            )
        )
        self.assertAlmostEqual(face.area, 95, 5)
        self.assertEqual(len(face.inner_wires()), 2)
        self.assertTrue(face.is_valid())

    def test_clockwise_outer_loop(self):
        face = face_by_brep_face(BrepFace(PLANE, [square_loop(0, 10, clockwise=True)]))
        self.assertAlmostEqual(face.area, 100, 5)
        self.assertTrue(face.is_valid())

    def test_hole_same_direction_as_outer(self):
        face = face_by_brep_face(
            BrepFace(
                PLANE,
                [
                    square_loop(0, 10, clockwise=True),
                    square_loop(4, 6, LoopType.INNER, clockwise=True),
                ],
            )
        )
        self.assertAlmostEqual(face.area, 96, 5)
        self.assertTrue(face.is_valid())

    def test_half_cylinder(self):
        surface = Extrusion(ArcCurve((0, 0, 0), 1, end_angle=math.pi), (0, 0, 2))
        segments = [
            ArcCurve((0, 0, 0), 1, end_angle=math.pi),
            LineCurve(Line((-1, 0, 0), (-1, 0, 2))),
            ArcCurve((0, 0, 2), 1, end_angle=math.pi),
            LineCurve(Line((1, 0, 2), (1, 0, 0))),
        ]
        loop = BrepLoop([BrepTrim(BrepEdge(curve)) for curve in segments])
        face = face_by_brep_face(BrepFace(surface, [loop]))
        self.assertEqual(len(face.edges()), 4)
        self.assertTrue(face.is_valid())
        self.assertAlmostEqual(face.area, 2 * math.pi, delta=1e-3)

    def test_empty_inner_loop(self):
        with self.assertWarns(UserWarning):
            face = face_by_brep_face(
                BrepFace(
                    PLANE,
                    [
                        square_loop(0, 10),
                        square_loop(4, 6, LoopType.INNER, missing=(0, 1, 2, 3)),
                    ],
                )
            )
        self.assertAlmostEqual(face.area, 100, 5)
        self.assertEqual(len(face.inner_wires()), 0)

    def test_empty_outer_loop(self):
        with self.assertWarns(UserWarning):
            with self.assertRaises(DegenerateTopologyError):
                face_by_brep_face(
                    BrepFace(PLANE, [square_loop(0, 10, missing=(0, 1, 2, 3))])
                )

    def test_missing_outer_loop(self):
        with self.assertRaises(ValueError):
            face_by_brep_face(BrepFace(PLANE, [square_loop(0, 10, LoopType.INNER)]))


@pytest.mark.parametrize("low,high", [(0, 10), (1, 9), (3, 4)])
def test_trimmed_square_area(low, high):
    face = face_by_brep_face(BrepFace(PLANE, [square_loop(low, high)]))
    assert face.area == pytest.approx((high - low) ** 2, rel=1e-5)


if __name__ == "__main__":
    unittest.main()
