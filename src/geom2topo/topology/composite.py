"""
geom2topo topology

name: composite.py
by:   Gumyr
date: March 3rd 2025

desc:

This module defines the `Cluster`, a heterogeneous collection of topologies, and the
index-based construction of topologies from a shared list of vertices.

Key Features:
- **Cluster Class**:
  - Groups any topologies into one OCCT compound.
  - `self_merge` fuses the members: faces whose edges coincide are sewn into shells, closed
    shells become cells and loose edges are connected into wires.

- **Index-based Construction**:
  - `by_vertices_indices` builds one vertex, edge, wire or face per index list, all sharing
    the supplied vertices. Mesh faces and polylines are built this way.

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
from OCP.BRepBuilderAPI import BRepBuilderAPI_MakeFace, BRepBuilderAPI_MakePolygon
from OCP.TopoDS import (
    TopoDS_Compound,
    TopoDS_Edge,
    TopoDS_Face,
    TopoDS_Shape,
    TopoDS_Shell,
    TopoDS_Wire,
)
from typing_extensions import Self

from geom2topo.errors import DegenerateTopologyError
from geom2topo.geometry import TOLERANCE, logger

from .one_d import Edge, Wire
from .shape_core import (
    Shape,
    ShapeList,
    _sew_topods_faces,
    downcast,
    get_top_level_topods_shapes,
    shapetype,
)
from .three_d import Cell
from .two_d import Face, Shell
from .utils import _make_topods_compound_from_shapes
from .zero_d import Vertex


class Cluster(Shape[TopoDS_Compound]):
    """A Cluster is a collection of topologies of any dimension. It is the result of
    converting geometry that doesn't merge into a single vertex, edge, wire, face, shell
    or cell."""

    # ---- Constructor ----

    def __init__(self, obj: TopoDS_Compound | None = None):
        super().__init__(obj)

    # ---- Properties ----

    @property
    def _dim(self) -> None:
        """Clusters may hold members of any dimension"""
        return None

    # ---- Class Methods ----

    @classmethod
    def by_topologies(cls, topologies: Iterable[Shape]) -> Cluster:
        """Cluster holding the given topologies"""
        return cls(_make_topods_compound_from_shapes(t.wrapped for t in topologies))

    @classmethod
    def cast(
        cls, obj: TopoDS_Shape
    ) -> Vertex | Edge | Wire | Face | Shell | Cell | Cluster:
        "Returns the right type of wrapper, given a OCCT object"

        # define the shape lookup table for casting
        constructor_lut = {
            ta.TopAbs_VERTEX: Vertex,
            ta.TopAbs_EDGE: Edge,
            ta.TopAbs_WIRE: Wire,
            ta.TopAbs_FACE: Face,
            ta.TopAbs_SHELL: Shell,
            ta.TopAbs_SOLID: Cell,
            ta.TopAbs_COMPOUND: Cluster,
        }

        shape_type = shapetype(obj)
        # NB downcast is needed to handle TopoDS_Shape types
        return constructor_lut[shape_type](downcast(obj))

    # ---- Instance Methods ----

    def __len__(self) -> int:
        """Number of top level members"""
        return len(get_top_level_topods_shapes(self.wrapped))

    def get_top_level_shapes(self) -> ShapeList[Shape]:
        """The members of this Cluster, with nested Clusters flattened"""
        return ShapeList(
            Cluster.cast(s) for s in get_top_level_topods_shapes(self.wrapped)
        )

    def self_merge(self, tolerance: float = TOLERANCE) -> Self | Shape:
        """self_merge

        Merge the members of this Cluster into the simplest topology they form:
        * Faces and the faces of Shells whose edges coincide within tolerance are sewn
          into Shells; closed Shells become Cells.
        * Edges and the edges of Wires are connected into Wires; single edge Wires stay
          Edges.
        * Vertices and Cells are kept as they are.

        Args:
            tolerance (float, optional): merge tolerance. Defaults to TOLERANCE.

        Returns:
            Self | Shape: the single merged topology or a Cluster of them
        """
        merged: list[TopoDS_Shape] = []
        faces: list[TopoDS_Face] = []
        edges: list[Edge] = []
        for member in get_top_level_topods_shapes(self.wrapped):
            if isinstance(member, TopoDS_Face):
                faces.append(member)
            elif isinstance(member, TopoDS_Shell):
                faces.extend(f.wrapped for f in Shell(member).faces())
            elif isinstance(member, TopoDS_Wire):
                edges.extend(Wire(member).edges())
            elif isinstance(member, TopoDS_Edge):
                edges.append(Edge(member))
            else:
                merged.append(member)

        if faces:
            sewn = _sew_topods_faces(faces, tolerance)
            for shape in get_top_level_topods_shapes(sewn):
                if isinstance(shape, TopoDS_Shell) and Shell(shape).is_closed:
                    shape = Cell.by_shell(Shell(shape)).wrapped
                merged.append(shape)

        for wire in Wire.combine(edges, tolerance):
            wire_edges = wire.edges()
            merged.append(
                wire_edges[0].wrapped if len(wire_edges) == 1 else wire.wrapped
            )

        logger.debug(
            "self merge of %d faces and %d edges gave %d topologies",
            len(faces),
            len(edges),
            len(merged),
        )
        if len(merged) == 1:
            return Cluster.cast(merged[0])
        return Cluster(_make_topods_compound_from_shapes(merged))


def by_vertices_indices(
    vertices: Sequence[Vertex], indices: Iterable[Sequence[int]]
) -> list[Vertex | Edge | Wire | Face]:
    """by_vertices_indices

    Build one topology per index list, each sharing the given vertices:
    * one index gives the Vertex itself
    * two indices give an Edge
    * a list of at least four indices whose last index repeats the first gives a closed
      polygon: a Face when it is planar, otherwise a closed Wire
    * any other list gives an open Wire

    Args:
        vertices (Sequence[Vertex]): shared vertices
        indices (Iterable[Sequence[int]]): index lists into vertices, empty lists are skipped

    Raises:
        ValueError: an index list contains a negative index
        ValueError: an index is beyond the end of vertices
        DegenerateTopologyError: the indexed vertices coincide

    Returns:
        list[Vertex | Edge | Wire | Face]: one topology per non-empty index list
    """
    topologies: list[Vertex | Edge | Wire | Face] = []
    for index_list in indices:
        index_list = list(index_list)
        if not index_list:
            continue
        if any(i < 0 for i in index_list):
            raise ValueError("The index list contains a negative index.")
        if any(i >= len(vertices) for i in index_list):
            raise ValueError(
                f"The index list references a vertex beyond the {len(vertices)} given"
            )

        selected = [vertices[i] for i in index_list]
        if len(selected) == 1:
            topologies.append(selected[0])
        elif len(selected) == 2:
            topologies.append(Edge.by_start_vertex_end_vertex(*selected))
        else:
            closed = len(index_list) >= 4 and index_list[0] == index_list[-1]
            topologies.append(_polygon(selected[:-1] if closed else selected, closed))
    return topologies


def _polygon(corners: list[Vertex], closed: bool) -> Wire | Face:
    """Polygonal Wire through corners, filled as a Face when closed and planar"""
    polygon_builder = BRepBuilderAPI_MakePolygon()
    for corner in corners:
        polygon_builder.Add(corner.wrapped)
    if closed:
        polygon_builder.Close()
    if not polygon_builder.IsDone():
        raise DegenerateTopologyError(
            f"Can't build a polygon through {len(corners)} coincident vertices"
        )
    wire = Wire(polygon_builder.Wire())
    if not closed:
        return wire

    face_builder = BRepBuilderAPI_MakeFace(wire.wrapped, True)
    if face_builder.IsDone():
        return Face(face_builder.Face())
    logger.debug("polygon of %d corners isn't planar, keeping its wire", len(corners))
    return wire
