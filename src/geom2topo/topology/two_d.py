"""
geom2topo topology

name: two_d.py
by:   Gumyr
date: March 3rd 2025

desc:

This module provides the two-dimensional topologies of geom2topo: `Face` and `Shell`.

Key Features:
- **Mixin2D**:
  - Shared functionality for `Face` and `Shell`: dimension and casting.

- **Face Class**:
  - Untrimmed B-spline faces built from NURBS parameters over their full parametric domain.
  - Trimming by an outer boundary wire and the addition of hole wires. Boundary edges don't
    need curves on the face's surface; they are computed while the face is fixed.

- **Shell Class**:
  - Sews faces, whose boundaries coincide within a tolerance, into a single connected shell.

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

from __future__ import annotations

from typing import Iterable, Sequence

import OCP.TopAbs as ta
from OCP.BRep import BRep_Builder, BRep_Tool
from OCP.BRepAdaptor import BRepAdaptor_Surface
from OCP.BRepBuilderAPI import BRepBuilderAPI_MakeFace
from OCP.BRepTools import BRepTools
from OCP.Geom import Geom_BSplineSurface, Geom_Surface
from OCP.Precision import Precision
from OCP.ShapeFix import ShapeFix_Face
from OCP.Standard import Standard_Failure
from OCP.StdFail import StdFail_NotDone
from OCP.TColStd import TColStd_Array2OfReal
from OCP.TColgp import TColgp_Array2OfPnt
from OCP.TopoDS import (
    TopoDS,
    TopoDS_Compound,
    TopoDS_Face,
    TopoDS_Shape,
    TopoDS_Shell,
    TopoDS_Wire,
)
from OCP.gp import gp_Pnt

from geom2topo.errors import DegenerateTopologyError
from geom2topo.geometry import TOLERANCE, logger

from .one_d import Edge, Wire
from .shape_core import (
    Shape,
    ShapeList,
    _sew_topods_faces,
    _topods_area,
    downcast,
    shapetype,
    unwrap_topods_compound,
)
from .utils import _occt_knot_arrays
from .zero_d import Vertex


class Mixin2D(Shape):
    """Additional methods to add to Face and Shell class"""

    # ---- Properties ----

    @property
    def _dim(self) -> int:
        """Dimension of Faces and Shells"""
        return 2

    # ---- Class Methods ----

    @classmethod
    def cast(cls, obj: TopoDS_Shape) -> Vertex | Edge | Wire | Face | Shell:
        "Returns the right type of wrapper, given a OCCT object"

        # define the shape lookup table for casting
        constructor_lut = {
            ta.TopAbs_VERTEX: Vertex,
            ta.TopAbs_EDGE: Edge,
            ta.TopAbs_WIRE: Wire,
            ta.TopAbs_FACE: Face,
            ta.TopAbs_SHELL: Shell,
        }

        shape_type = shapetype(obj)
        # NB downcast is needed to handle TopoDS_Shape types
        return constructor_lut[shape_type](downcast(obj))


class Face(Mixin2D, Shape[TopoDS_Face]):
    """A Face is a bounded portion of a surface. Its boundary is one outer wire and any
    number of inner wires which cut holes into it."""

    # ---- Constructor ----

    def __init__(self, obj: TopoDS_Face | None = None):
        super().__init__(obj)

    # ---- Class Methods ----

    @classmethod
    def by_nurbs_parameters(
        cls,
        control_vertices: Sequence[Sequence[Vertex]],
        weights: Sequence[Sequence[float]],
        u_knots: Sequence[float],
        v_knots: Sequence[float],
        is_rational: bool,
        is_u_periodic: bool,
        is_v_periodic: bool,
        u_degree: int,
        v_degree: int,
    ) -> Face:
        """by_nurbs_parameters

        Create an untrimmed B-spline Face. The control vertices and weights are row-major
        grids, `control_vertices[i][j]` at u index i and v index j. Each flat knot vector
        follows the kernel convention, holding `count + degree + 1` knots for its direction.

        Args:
            control_vertices (Sequence[Sequence[Vertex]]): grid of control points
            weights (Sequence[Sequence[float]]): grid of weights, ignored unless rational
            u_knots (Sequence[float]): flat u knot vector
            v_knots (Sequence[float]): flat v knot vector
            is_rational (bool): use the weights
            is_u_periodic (bool): periodic in u
            is_v_periodic (bool): periodic in v
            u_degree (int): u degree
            v_degree (int): v degree

        Raises:
            ValueError: control vertex grid is ragged
            ValueError: a weight is required for each control point
            ValueError: wrong number of knots
            DegenerateTopologyError: OCCT rejected the parameters

        Returns:
            Face: the untrimmed face
        """
        count_u = len(control_vertices)
        count_v = len(control_vertices[0]) if count_u else 0
        if any(len(row) != count_v for row in control_vertices):
            raise ValueError("All rows of control vertices must be the same length")
        if len(weights) != count_u or any(len(row) != count_v for row in weights):
            raise ValueError("A weight must be provided for each control point")

        u_knot_array, u_multiplicities, pole_count_u = _occt_knot_arrays(
            u_knots, count_u, u_degree, is_u_periodic
        )
        v_knot_array, v_multiplicities, pole_count_v = _occt_knot_arrays(
            v_knots, count_v, v_degree, is_v_periodic
        )

        poles = TColgp_Array2OfPnt(1, pole_count_u, 1, pole_count_v)
        weight_array = TColStd_Array2OfReal(1, pole_count_u, 1, pole_count_v)
        for i in range(pole_count_u):
            for j in range(pole_count_v):
                poles.SetValue(i + 1, j + 1, gp_Pnt(*control_vertices[i][j].to_tuple()))
                weight_array.SetValue(i + 1, j + 1, float(weights[i][j]))

        try:
            if is_rational:
                surface = Geom_BSplineSurface(
                    poles,
                    weight_array,
                    u_knot_array,
                    v_knot_array,
                    u_multiplicities,
                    v_multiplicities,
                    u_degree,
                    v_degree,
                    is_u_periodic,
                    is_v_periodic,
                )
            else:
                surface = Geom_BSplineSurface(
                    poles,
                    u_knot_array,
                    v_knot_array,
                    u_multiplicities,
                    v_multiplicities,
                    u_degree,
                    v_degree,
                    is_u_periodic,
                    is_v_periodic,
                )
            face = BRepBuilderAPI_MakeFace(surface, Precision.Confusion_s()).Face()
        except (Standard_Failure, StdFail_NotDone) as err:
            raise DegenerateTopologyError(
                f"Invalid NURBS parameters for a {u_degree}x{v_degree} surface with "
                f"{count_u}x{count_v} control points"
            ) from err

        logger.debug(
            "built %dx%d b-spline face with %dx%d poles",
            u_degree,
            v_degree,
            pole_count_u,
            pole_count_v,
        )
        return cls(face)

    # ---- Instance Methods ----

    def add_internal_boundaries(
        self, wires: Iterable[Wire], tolerance: float = TOLERANCE
    ) -> Face:
        """add_internal_boundaries

        Cut holes into this Face. The wires must lie on the Face's surface and inside its
        outer boundary. They may run in either direction; each is added running against
        the outer boundary. Empty wires are ignored.

        Args:
            wires (Iterable[Wire]): hole outlines
            tolerance (float, optional): fixing precision. Defaults to TOLERANCE.

        Raises:
            DegenerateTopologyError: a hole wire isn't closed
            DegenerateTopologyError: OCCT couldn't add the holes

        Returns:
            Face: a new Face with holes
        """
        surface = BRep_Tool.Surface_s(self.wrapped)
        face_builder = BRepBuilderAPI_MakeFace(self.wrapped)
        hole_count = 0
        for wire in wires:
            if wire.is_empty():
                logger.debug("ignoring empty internal boundary")
                continue
            if not wire.is_closed:
                raise DegenerateTopologyError("Internal boundary wires must be closed")
            topods_wire = wire.wrapped
            # alone on the surface a hole bounds the outside, giving a negative area
            if _topods_area(_face_on_surface(surface, topods_wire, tolerance)) > 0:
                topods_wire = TopoDS.Wire_s(topods_wire.Reversed())
            face_builder.Add(topods_wire)
            hole_count += 1
        if hole_count == 0:
            return self

        try:
            topods_face = face_builder.Face()
        except StdFail_NotDone as err:
            raise DegenerateTopologyError(
                "Error adding internal boundaries to the face"
            ) from err

        logger.debug("added %d internal boundaries", hole_count)
        return Face(_fix_topods_face(topods_face, tolerance))

    def geom_adaptor(self) -> BRepAdaptor_Surface:
        """Return the Geom Surface adaptor for this Face"""
        return BRepAdaptor_Surface(self.wrapped)

    def inner_wires(self) -> ShapeList[Wire]:
        """Extract the inner or hole wires from this Face"""
        outer = self.outer_wire()

        return ShapeList([w for w in self.wires() if not w.is_same(outer)])

    def outer_wire(self) -> Wire:
        """Extract the perimeter wire from this Face"""
        return Wire(BRepTools.OuterWire_s(self.wrapped))

    def trim_by_wire(self, wire: Wire, tolerance: float = TOLERANCE) -> Face:
        """trim_by_wire

        Restrict this Face's surface to the region bounded by wire. The wire's edges must
        lie on the surface. A wire running clockwise relative to the surface normal is
        reversed so the Face bounds the enclosed region.

        Args:
            wire (Wire): closed outer boundary
            tolerance (float, optional): fixing precision. Defaults to TOLERANCE.

        Raises:
            DegenerateTopologyError: the wire is empty
            DegenerateTopologyError: the wire isn't closed
            DegenerateTopologyError: OCCT couldn't build the trimmed face

        Returns:
            Face: the trimmed Face
        """
        if wire.is_empty():
            raise DegenerateTopologyError("Can't trim a face with an empty wire")
        if not wire.is_closed:
            raise DegenerateTopologyError("The outer boundary wire isn't closed")

        surface = BRep_Tool.Surface_s(self.wrapped)
        topods_face = _face_on_surface(surface, wire.wrapped, tolerance)
        if _topods_area(topods_face) < 0:
            logger.debug("outer boundary runs against the surface, reversing it")
            reversed_wire = TopoDS.Wire_s(wire.wrapped.Reversed())
            topods_face = _face_on_surface(surface, reversed_wire, tolerance)
        return Face(topods_face)


class Shell(Mixin2D, Shape[TopoDS_Shell]):
    """A Shell is a connected set of faces sharing their boundary edges. A closed Shell
    encloses a volume and bounds a Cell."""

    # ---- Constructor ----

    def __init__(self, obj: TopoDS_Shell | None = None):
        super().__init__(obj)

    # ---- Properties ----

    @property
    def is_closed(self) -> bool:
        """Is every edge shared by two faces?"""
        if self.wrapped is None:
            raise ValueError("Can't determine if an empty Shell is closed")
        return BRep_Tool.IsClosed_s(self.wrapped)

    # ---- Class Methods ----

    @classmethod
    def by_faces(cls, faces: Iterable[Face], tolerance: float = TOLERANCE) -> Shell:
        """by_faces

        Sew Faces into a single Shell. Boundary edges closer than tolerance are merged.

        Args:
            faces (Iterable[Face]): faces to sew
            tolerance (float, optional): sewing tolerance. Defaults to TOLERANCE.

        Raises:
            ValueError: no faces
            DegenerateTopologyError: the faces don't form a single connected shell

        Returns:
            Shell: the sewn shell
        """
        topods_faces = [f.wrapped for f in faces if f.wrapped is not None]
        if not topods_faces:
            raise ValueError("At least one face is required to build a shell")

        sewn = _sew_topods_faces(topods_faces, tolerance)
        if isinstance(sewn, TopoDS_Compound):
            sewn = unwrap_topods_compound(sewn)
        if isinstance(sewn, TopoDS_Face):
            topods_shell = TopoDS_Shell()
            builder = BRep_Builder()
            builder.MakeShell(topods_shell)
            builder.Add(topods_shell, sewn)
            sewn = topods_shell
        if not isinstance(sewn, TopoDS_Shell):
            raise DegenerateTopologyError(
                f"{len(topods_faces)} faces don't form a single connected shell"
            )
        logger.debug("sewed %d faces into a shell", len(topods_faces))
        return cls(sewn)


def _face_on_surface(
    surface: Geom_Surface, wire: TopoDS_Wire, tolerance: float
) -> TopoDS_Face:
    """Bound surface by a single wire and compute the wire's curves on surface"""
    face_builder = BRepBuilderAPI_MakeFace(surface, wire, False)
    if not face_builder.IsDone():
        raise DegenerateTopologyError(f"Error trimming the face: {face_builder.Error()}")
    return _fix_topods_face(face_builder.Face(), tolerance)


def _fix_topods_face(face: TopoDS_Face, tolerance: float) -> TopoDS_Face:
    """Compute missing curves on surface of a face"""
    face_fixer = ShapeFix_Face(face)
    face_fixer.SetPrecision(tolerance)
    face_fixer.Perform()
    return downcast(face_fixer.Face())
