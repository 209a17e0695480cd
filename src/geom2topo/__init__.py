"""
geom2topo package

name: __init__.py
by:   Gumyr
date: March 3rd 2025

desc:
    geom2topo converts boundary representation and mesh geometry (points, lines, curves,
    surfaces, breps and meshes) into non-manifold topology: vertices, edges, wires, faces,
    shells, cells and clusters built on the OpenCascade kernel.

    >>> from geom2topo import NurbsCurve, topology_by_geometry
    >>> edge = topology_by_geometry(NurbsCurve(3, [(0, 0), (1, 1), (2, -1), (3, 0)]))

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

from geom2topo.build_enums import GeomType, LoopType
from geom2topo.errors import DegenerateTopologyError, UnsupportedGeometryError
from geom2topo.geometry import (
    TOLERANCE,
    ArcCurve,
    Box,
    Brep,
    BrepEdge,
    BrepFace,
    BrepLoop,
    BrepTrim,
    Curve,
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
    Surface,
)
from geom2topo.topology import (
    Cell,
    Cluster,
    Edge,
    Face,
    Shape,
    ShapeList,
    Shell,
    Vertex,
    Wire,
    by_vertices_indices,
)
from geom2topo.convert import topology_by_geometry

__all__ = [
    # Enums
    "GeomType",
    "LoopType",
    # Errors
    "DegenerateTopologyError",
    "UnsupportedGeometryError",
    # Host geometry
    "TOLERANCE",
    "ArcCurve",
    "Box",
    "Brep",
    "BrepEdge",
    "BrepFace",
    "BrepLoop",
    "BrepTrim",
    "Curve",
    "Extrusion",
    "Line",
    "LineCurve",
    "Mesh",
    "NurbsCurve",
    "NurbsSurface",
    "PlaneSurface",
    "Point3d",
    "PolyCurve",
    "PolylineCurve",
    "RevSurface",
    "SumSurface",
    "Surface",
    # Topology
    "Cell",
    "Cluster",
    "Edge",
    "Face",
    "Shape",
    "ShapeList",
    "Shell",
    "Vertex",
    "Wire",
    "by_vertices_indices",
    # Conversion
    "topology_by_geometry",
]
