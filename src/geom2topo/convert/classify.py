"""
geom2topo convert

name: classify.py
by:   Gumyr
date: March 3rd 2025

desc:

This module is the entry point of the conversion pipeline. `topology_by_geometry` inspects
the kind of a host geometry object and hands it to the matching converter:

- **Point3d** -> Vertex
- **Line** -> Edge
- **Curve** -> Edge or Wire
- **Surface** -> untrimmed Face
- **Brep** and **Box** -> Face, Shell or Cell
- **Mesh** -> Face, Shell, Cell or Cluster

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

from typing import Any

from geom2topo.errors import UnsupportedGeometryError
from geom2topo.geometry import (
    TOLERANCE,
    Box,
    Brep,
    Curve,
    Line,
    Mesh,
    Point3d,
    Surface,
    logger,
)
from geom2topo.topology import Shape, Vertex

from .aggregate import topology_by_brep
from .curves import edge_by_line, topology_by_curve
from .mesh import topology_by_mesh
from .surfaces import face_by_surface


def topology_by_geometry(geometry: Any, tolerance: float = TOLERANCE) -> Shape | None:
    """topology_by_geometry

    Convert a host geometry object into topology.

    Args:
        geometry (Any): Point3d, Line, Curve, Surface, Brep, Box or Mesh
        tolerance (float, optional): coincidence and trimming tolerance used by every
            step of the conversion. Defaults to TOLERANCE.

    Raises:
        ValueError: tolerance isn't positive
        UnsupportedGeometryError: the geometry kind has no conversion

    Returns:
        Shape | None: the topology, None if geometry is None
    """
    if geometry is None:
        return None
    if tolerance <= 0:
        raise ValueError(f"Tolerance must be positive, got {tolerance}")

    logger.debug("converting %s at tolerance %g", type(geometry).__name__, tolerance)
    match geometry:
        case Point3d():
            return Vertex.by_point(geometry)
        case Line():
            return edge_by_line(geometry)
        case Curve():
            return topology_by_curve(geometry, tolerance)
        case Surface():
            return face_by_surface(geometry)
        case Brep():
            return topology_by_brep(geometry, tolerance)
        case Box():
            return topology_by_brep(geometry.to_brep(), tolerance)
        case Mesh():
            return topology_by_mesh(geometry, tolerance)
        case _:
            raise UnsupportedGeometryError(
                f"unsupported geometry {type(geometry).__name__}"
            )
