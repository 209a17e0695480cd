"""
geom2topo geometry

name: mesh.py
by:   Gumyr
date: March 3rd 2025

desc:
    Polygon meshes of triangles and quads.

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

from dataclasses import dataclass

from .core import Point3d, to_point


@dataclass(frozen=True)
class Mesh:
    """Mesh

    Vertex positions plus faces of three or four vertex indices. A four index face whose
    last two indices are equal is a triangle.

    Raises:
        ValueError: a face doesn't have three or four indices
        ValueError: a face index is outside of the vertex list
    """

    vertices: tuple[Point3d, ...] = ()
    faces: tuple[tuple[int, ...], ...] = ()

    def __post_init__(self):
        vertices = tuple(to_point(v) for v in self.vertices)
        faces = []
        for face in self.faces:
            face = tuple(int(i) for i in face)
            if len(face) == 4 and face[2] == face[3]:
                face = face[:3]
            if len(face) not in (3, 4):
                raise ValueError(
                    f"Mesh faces need three or four indices, got {len(face)}"
                )
            if any(not 0 <= i < len(vertices) for i in face):
                raise ValueError(f"Mesh face {face} references a missing vertex")
            faces.append(face)
        object.__setattr__(self, "vertices", vertices)
        object.__setattr__(self, "faces", tuple(faces))

