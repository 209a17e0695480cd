"""
geom2topo convert

name: curves.py
by:   Gumyr
date: March 3rd 2025

desc:

This module converts host curves into one-dimensional topology. Curves with a single
free-form representation become B-spline edges; explicit point chains and composite curves
become wires.

Key Features:
- **Dispatch**: `topology_by_curve` picks the conversion by curve kind, most specific first.
- **NURBS Edges**: the host knot vector is corrected to the kernel convention exactly once,
  rational and periodic curves keep their weights and periodicity.
- **Polylines**: one shared vertex per distinct point; closed chains give closed wires.
- **Poly Curves**: segments are converted recursively and all of their edges joined into a
  single wire.

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

from typing import Iterable

from geom2topo.errors import DegenerateTopologyError, UnsupportedGeometryError
from geom2topo.geometry import (
    TOLERANCE,
    ArcCurve,
    BrepEdge,
    Curve,
    Line,
    LineCurve,
    NurbsCurve,
    PolyCurve,
    PolylineCurve,
    logger,
)
from geom2topo.topology import Edge, Face, Vertex, Wire, by_vertices_indices

from .knots import to_kernel_knots


def topology_by_curve(curve: Curve, tolerance: float = TOLERANCE) -> Edge | Wire:
    """topology_by_curve

    Convert any host curve into an Edge or a Wire.

    Args:
        curve (Curve): host curve
        tolerance (float, optional): vertex coincidence tolerance. Defaults to TOLERANCE.

    Raises:
        UnsupportedGeometryError: the curve kind has no conversion

    Returns:
        Edge | Wire: Edges for single curves, Wires for polylines and poly curves
    """
    logger.debug("converting curve %s", type(curve).__name__)
    match curve:
        case LineCurve():
            return edge_by_line(curve.line)
        case NurbsCurve():
            return edge_by_nurbs_curve(curve)
        case ArcCurve():
            return edge_by_nurbs_curve(curve.to_nurbs())
        case BrepEdge():
            return edge_by_nurbs_curve(curve.to_nurbs())
        case PolylineCurve():
            return wire_by_polyline_curve(curve, tolerance)
        case PolyCurve():
            return wire_by_poly_curve(curve, tolerance)
        case _:
            raise UnsupportedGeometryError(f"unsupported curve {type(curve).__name__}")


def edge_by_line(line: Line) -> Edge:
    """Straight Edge from the line's start to its end"""
    return Edge.by_start_vertex_end_vertex(
        Vertex.by_point(line.start), Vertex.by_point(line.end)
    )


def edge_by_nurbs_curve(curve: NurbsCurve) -> Edge:
    """edge_by_nurbs_curve

    B-spline Edge with the same control points, weights, degree and periodicity as the
    host curve. The knots are converted to the kernel convention.

    Args:
        curve (NurbsCurve): host curve

    Returns:
        Edge: the B-spline edge
    """
    knots = to_kernel_knots(curve.knots)
    control_vertices = [Vertex.by_point(p) for p in curve.points]
    logger.debug(
        "nurbs curve of degree %d, %d points, closed=%s, periodic=%s, rational=%s",
        curve.degree,
        len(control_vertices),
        curve.is_closed,
        curve.is_periodic,
        curve.is_rational,
    )
    return Edge.by_nurbs_parameters(
        control_vertices,
        curve.weights,
        knots,
        curve.is_rational,
        curve.is_periodic,
        curve.degree,
    )


def wire_by_polyline_curve(
    curve: PolylineCurve, tolerance: float = TOLERANCE
) -> Wire:
    """wire_by_polyline_curve

    Wire through the points of a polyline. A closed polyline repeats its first point at
    the end; that point shares the first vertex so the Wire is closed with one Edge per
    distinct point.

    Args:
        curve (PolylineCurve): host polyline
        tolerance (float, optional): vertex coincidence tolerance. Defaults to TOLERANCE.

    Raises:
        DegenerateTopologyError: fewer than two points

    Returns:
        Wire: open or closed polyline wire
    """
    if len(curve.points) < 2:
        raise DegenerateTopologyError(
            f"A polyline needs at least two points, got {len(curve.points)}"
        )
    closed = curve.is_closed
    points = curve.points[:-1] if closed else curve.points
    vertices = [Vertex.by_point(p) for p in points]
    indices = list(range(len(vertices)))
    if closed:
        indices.append(0)

    topology = by_vertices_indices(vertices, [indices])[0]
    match topology:
        case Face():
            return topology.outer_wire()
        case Edge():
            return Wire.by_edges([topology], tolerance)
        case _:
            return topology


def wire_by_poly_curve(curve: PolyCurve, tolerance: float = TOLERANCE) -> Wire:
    """wire_by_poly_curve

    Convert each segment of a poly curve, nested poly curves included, and join all of
    the resulting edges into one Wire.

    Args:
        curve (PolyCurve): host composite curve
        tolerance (float, optional): edge connection tolerance. Defaults to TOLERANCE.

    Raises:
        DegenerateTopologyError: the segments don't connect into a single wire

    Returns:
        Wire: the composite wire
    """
    topologies = [topology_by_curve(s, tolerance) for s in curve.explode()]
    return Wire.by_edges(_flatten_edges(topologies), tolerance)


def _flatten_edges(topologies: Iterable[Edge | Wire]) -> list[Edge]:
    """Edges of the given topologies; Wires are replaced by their Edges"""
    edges: list[Edge] = []
    for topology in topologies:
        if isinstance(topology, Wire):
            edges.extend(topology.edges())
        else:
            edges.append(topology)
    return edges
