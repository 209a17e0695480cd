"""
geom2topo convert

name: mesh.py
by:   Gumyr
date: March 3rd 2025

desc:

This module converts a polygon mesh into topology. Every mesh face becomes a planar face
over shared vertices; the faces are then merged so that a connected mesh gives a shell and
a closed one a cell.

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

from geom2topo.errors import DegenerateTopologyError
from geom2topo.geometry import TOLERANCE, Mesh, logger
from geom2topo.topology import Cluster, Shape, Vertex, by_vertices_indices


def topology_by_mesh(mesh: Mesh, tolerance: float = TOLERANCE) -> Shape:
    """topology_by_mesh

    Build the faces of a mesh over one Vertex per mesh vertex and merge them. Non-planar
    quads remain closed wires.

    Args:
        mesh (Mesh): host mesh
        tolerance (float, optional): merge tolerance. Defaults to TOLERANCE.

    Raises:
        DegenerateTopologyError: the mesh has no faces

    Returns:
        Shape: Face, Shell, Cell or a Cluster of them
    """
    if not mesh.faces:
        raise DegenerateTopologyError("A mesh without faces has no topology")

    vertices = [Vertex.by_point(p) for p in mesh.vertices]
    indices = [[*face, face[0]] for face in mesh.faces]
    topologies = by_vertices_indices(vertices, indices)
    logger.debug(
        "mesh of %d vertices gave %d faces", len(vertices), len(topologies)
    )
    return Cluster.by_topologies(topologies).self_merge(tolerance)
