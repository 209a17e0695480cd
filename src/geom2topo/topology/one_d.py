"""
geom2topo topology

name: one_d.py
by:   Gumyr
date: March 3rd 2025

desc:

This module defines the one-dimensional topologies of geom2topo: `Edge` and `Wire`.

Key Features:
- **Edge Class**:
  - Straight edges between two vertices.
  - B-spline edges from NURBS parameters given as a flat knot vector, rational or not,
    clamped or periodic.

- **Wire Class**:
  - Connects edges supplied in any order into a single wire, merging end vertices that
    coincide within a tolerance.
  - Represents the empty loop of a trimming boundary without any backing edges.

- **Mixin1D**:
  - Shared functionality for both `Edge` and `Wire` classes: closure, length and casting.

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
from OCP.BRepAdaptor import BRepAdaptor_CompCurve, BRepAdaptor_Curve
from OCP.BRepBuilderAPI import BRepBuilderAPI_MakeEdge
from OCP.BRepTools import BRepTools_WireExplorer
from OCP.GCPnts import GCPnts_AbscissaPoint
from OCP.Geom import Geom_BSplineCurve
from OCP.ShapeAnalysis import ShapeAnalysis_FreeBounds
from OCP.Standard import Standard_Failure
from OCP.StdFail import StdFail_NotDone
from OCP.TColStd import TColStd_Array1OfReal
from OCP.TColgp import TColgp_Array1OfPnt
from OCP.TopExp import TopExp
from OCP.TopTools import TopTools_HSequenceOfShape
from OCP.TopoDS import TopoDS, TopoDS_Edge, TopoDS_Shape, TopoDS_Wire
from OCP.gp import gp_Pnt

from geom2topo.errors import DegenerateTopologyError
from geom2topo.geometry import TOLERANCE, logger

from .shape_core import Shape, ShapeList, downcast, shapetype
from .utils import _occt_knot_arrays
from .zero_d import Vertex


class Mixin1D(Shape):
    """Methods to add to the Edge and Wire classes"""

    # ---- Properties ----

    @property
    def _dim(self) -> int:
        """Dimension of Edges and Wires"""
        return 1

    @property
    def is_closed(self) -> bool:
        """Are the start and end points equal?"""
        if self.wrapped is None:
            raise ValueError("Can't determine if empty Edge or Wire is closed")
        return BRep_Tool.IsClosed_s(self.wrapped)

    @property
    def length(self) -> float:
        """Edge or Wire length"""
        return GCPnts_AbscissaPoint.Length_s(self.geom_adaptor())

    # ---- Class Methods ----

    @classmethod
    def cast(cls, obj: TopoDS_Shape) -> Vertex | Edge | Wire:
        "Returns the right type of wrapper, given a OCCT object"

        # Extend the lookup table with additional entries
        constructor_lut = {
            ta.TopAbs_VERTEX: Vertex,
            ta.TopAbs_EDGE: Edge,
            ta.TopAbs_WIRE: Wire,
        }

        shape_type = shapetype(obj)
        # NB downcast is needed to handle TopoDS_Shape types
        return constructor_lut[shape_type](downcast(obj))

    # ---- Instance Methods ----

    def geom_adaptor(self) -> BRepAdaptor_Curve | BRepAdaptor_CompCurve:
        """Return the Geom Curve adaptor for this Edge or Wire"""
        raise NotImplementedError


class Edge(Mixin1D, Shape[TopoDS_Edge]):
    """An Edge is a one-dimensional topology bounded by two vertices and carrying a curve,
    either a straight line or a B-spline built from NURBS parameters."""

    # ---- Constructor ----

    def __init__(self, obj: TopoDS_Edge | None = None):
        super().__init__(obj)

    # ---- Class Methods ----

    @classmethod
    def by_start_vertex_end_vertex(cls, start: Vertex, end: Vertex) -> Edge:
        """Straight Edge between two vertices, which become the Edge's end vertices

        Args:
            start (Vertex): start of the edge
            end (Vertex): end of the edge

        Raises:
            DegenerateTopologyError: the vertices coincide

        Returns:
            Edge: a line
        """
        edge_builder = BRepBuilderAPI_MakeEdge(start.wrapped, end.wrapped)
        if not edge_builder.IsDone():
            raise DegenerateTopologyError(
                f"Can't build an edge between {start} and {end}"
            )
        return cls(edge_builder.Edge())

    @classmethod
    def by_nurbs_parameters(
        cls,
        control_vertices: Sequence[Vertex],
        weights: Sequence[float],
        knots: Sequence[float],
        is_rational: bool,
        is_periodic: bool,
        degree: int,
    ) -> Edge:
        """by_nurbs_parameters

        Create a B-spline Edge. The flat knot vector follows the kernel convention and holds
        `len(control_vertices) + degree + 1` knots. Periodic parameters repeat the first
        `degree` control vertices at the end.

        Args:
            control_vertices (Sequence[Vertex]): control points
            weights (Sequence[float]): one weight per control point, ignored unless rational
            knots (Sequence[float]): flat knot vector
            is_rational (bool): use the weights
            is_periodic (bool): build a periodic curve
            degree (int): polynomial degree

        Raises:
            ValueError: a weight is required for each control point
            ValueError: wrong number of knots
            DegenerateTopologyError: OCCT rejected the parameters

        Returns:
            Edge: the B-spline edge
        """
        if len(control_vertices) != len(weights):
            raise ValueError("A weight must be provided for each control point")
        knot_array, multiplicity_array, pole_count = _occt_knot_arrays(
            knots, len(control_vertices), degree, is_periodic
        )

        poles = TColgp_Array1OfPnt(1, pole_count)
        weight_array = TColStd_Array1OfReal(1, pole_count)
        for i, (vertex, weight) in enumerate(
            zip(control_vertices[:pole_count], weights[:pole_count])
        ):
            poles.SetValue(i + 1, gp_Pnt(*vertex.to_tuple()))
            weight_array.SetValue(i + 1, float(weight))

        try:
            if is_rational:
                curve = Geom_BSplineCurve(
                    poles,
                    weight_array,
                    knot_array,
                    multiplicity_array,
                    degree,
                    is_periodic,
                )
            else:
                curve = Geom_BSplineCurve(
                    poles, knot_array, multiplicity_array, degree, is_periodic
                )
            edge = BRepBuilderAPI_MakeEdge(curve).Edge()
        except (Standard_Failure, StdFail_NotDone) as err:
            raise DegenerateTopologyError(
                f"Invalid NURBS parameters for a degree {degree} curve with "
                f"{len(control_vertices)} control points"
            ) from err

        logger.debug(
            "built degree %d b-spline edge with %d poles", degree, pole_count
        )
        return cls(edge)

    # ---- Instance Methods ----

    def end_vertex(self) -> Vertex:
        """The Vertex at the end of the Edge"""
        return Vertex(TopExp.LastVertex_s(self.wrapped, True))

    def geom_adaptor(self) -> BRepAdaptor_Curve:
        """Return the Geom Curve from this Edge"""
        return BRepAdaptor_Curve(self.wrapped)

    def start_vertex(self) -> Vertex:
        """The Vertex at the start of the Edge"""
        return Vertex(TopExp.FirstVertex_s(self.wrapped, True))


class Wire(Mixin1D, Shape[TopoDS_Wire]):
    """A Wire is a connected sequence of Edges. Wires bound faces as their outer boundary
    or as holes, and represent polylines and composite curves."""

    # ---- Constructor ----

    def __init__(self, obj: TopoDS_Wire | None = None):
        super().__init__(obj)

    # ---- Class Methods ----

    @classmethod
    def by_edges(cls, edges: Iterable[Edge], tolerance: float = TOLERANCE) -> Wire:
        """by_edges

        Connect Edges into a single Wire. The Edges may be supplied in any order; end
        vertices closer than tolerance are merged. No Edges results in an empty Wire.

        Args:
            edges (Iterable[Edge]): Edges to assemble
            tolerance (float, optional): connection tolerance. Defaults to TOLERANCE.

        Raises:
            DegenerateTopologyError: Edges don't form a single connected Wire

        Returns:
            Wire: assembled edges
        """
        edges = [e for e in edges if e.wrapped is not None]
        if not edges:
            return cls.make_empty()

        wires = cls.combine(edges, tolerance)
        if len(wires) != 1:
            raise DegenerateTopologyError(
                f"{len(edges)} edges form {len(wires)} disconnected wires"
            )
        return wires[0]

    @classmethod
    def combine(
        cls, wires: Iterable[Wire | Edge], tolerance: float = TOLERANCE
    ) -> ShapeList[Wire]:
        """combine

        Combine a list of wires and edges into a list of Wires.

        Args:
            wires (Iterable[Wire | Edge]): unsorted
            tolerance (float, optional): connection tolerance. Defaults to TOLERANCE.

        Returns:
            ShapeList[Wire]: Wires
        """
        edges_in = TopTools_HSequenceOfShape()
        wires_out = TopTools_HSequenceOfShape()

        for edge in [e for w in wires for e in w.edges()]:
            edges_in.Append(edge.wrapped)

        ShapeAnalysis_FreeBounds.ConnectEdgesToWires_s(
            edges_in, tolerance, False, wires_out
        )

        wires = ShapeList()
        for i in range(wires_out.Length()):
            wires.append(cls(TopoDS.Wire_s(wires_out.Value(i + 1))))

        return wires

    @classmethod
    def make_empty(cls) -> Wire:
        """A Wire without any Edges"""
        topods_wire = TopoDS_Wire()
        BRep_Builder().MakeWire(topods_wire)
        return cls(topods_wire)

    # ---- Instance Methods ----

    def geom_adaptor(self) -> BRepAdaptor_CompCurve:
        """Return the Geom Comp Curve for this Wire"""
        return BRepAdaptor_CompCurve(self.wrapped)

    def is_empty(self) -> bool:
        """Does the Wire lack Edges?"""
        return self.is_null() or not self.entities("Edge")

    def order_edges(self) -> ShapeList[Edge]:
        """Return the edges in self ordered by wire direction"""
        ordered_edges: ShapeList[Edge] = ShapeList()
        if self.is_empty():
            return ordered_edges
        explorer = BRepTools_WireExplorer(self.wrapped)
        while explorer.More():
            ordered_edges.append(Edge(explorer.Current()))
            explorer.Next()
        return ordered_edges
