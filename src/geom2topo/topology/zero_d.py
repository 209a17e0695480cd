"""
geom2topo topology

name: zero_d.py
by:   Gumyr
date: March 3rd 2025

desc:

This module provides the zero-dimensional topology of geom2topo: the `Vertex` class. A `Vertex`
represents a single point in 3D space and is the building block of edges, wires and the
index-based construction of polygons and mesh faces.

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

import OCP.TopAbs as ta
from OCP.BRep import BRep_Tool
from OCP.BRepBuilderAPI import BRepBuilderAPI_MakeVertex
from OCP.TopoDS import TopoDS, TopoDS_Shape, TopoDS_Vertex
from OCP.gp import gp_Pnt
from typing_extensions import Self

from geom2topo.geometry import Point3d, VectorLike, to_point

from .shape_core import Shape, downcast, shapetype


class Vertex(Shape[TopoDS_Vertex]):
    """A Vertex represents a zero-dimensional point in the topological data structure.
    It marks the endpoints of edges and the corners of wires, faces and mesh polygons."""

    # ---- Constructor ----

    def __init__(self, ocp_vx: TopoDS_Vertex | None = None):
        super().__init__(ocp_vx)
        if self.wrapped is not None:
            self.X, self.Y, self.Z = self.to_tuple()

    # ---- Properties ----

    @property
    def _dim(self) -> int:
        return 0

    # ---- Class Methods ----

    @classmethod
    def by_coordinates(cls, x: float, y: float, z: float) -> Vertex:
        """Vertex at the given coordinates"""
        return cls(
            downcast(BRepBuilderAPI_MakeVertex(gp_Pnt(x, y, z)).Vertex())
        )

    @classmethod
    def by_point(cls, point: VectorLike) -> Vertex:
        """Vertex at the location of a host point"""
        return cls.by_coordinates(*to_point(point))

    @classmethod
    def cast(cls, obj: TopoDS_Shape) -> Self:
        "Returns the right type of wrapper, given a OCCT object"

        # define the shape lookup table for casting
        constructor_lut = {ta.TopAbs_VERTEX: Vertex}

        shape_type = shapetype(obj)
        # NB downcast is needed to handle TopoDS_Shape types
        return constructor_lut[shape_type](TopoDS.Vertex_s(obj))

    # ---- Instance Methods ----

    def __repr__(self) -> str:
        """To String

        Convert Vertex to String for display

        Returns:
            Vertex as String
        """
        if self.wrapped is None:
            return "Vertex()"
        return f"Vertex({self.X}, {self.Y}, {self.Z})"

    def distance_to(self, other: Vertex | VectorLike) -> float:
        """Distance between this vertex and another vertex or point"""
        target = other.to_tuple() if isinstance(other, Vertex) else other
        return self.to_point().distance_to(target)

    def to_point(self) -> Point3d:
        """Vertex location as a host point"""
        return Point3d(*self.to_tuple())

    def to_tuple(self) -> tuple[float, float, float]:
        """Return vertex as three tuple of floats"""
        geom_point = BRep_Tool.Pnt_s(self.wrapped)
        return (geom_point.X(), geom_point.Y(), geom_point.Z())
