"""
geom2topo.convert package

name: __init__.py
by:   Gumyr
date: March 3rd 2025

desc:
    This package converts host geometry into topology. `topology_by_geometry` is the single
    entry point; the per-kind converters are exposed for callers that already know what
    they hold.

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

from .knots import to_kernel_knots
from .curves import (
    edge_by_line,
    edge_by_nurbs_curve,
    topology_by_curve,
    wire_by_poly_curve,
    wire_by_polyline_curve,
)
from .surfaces import face_by_nurbs_surface, face_by_surface
from .trimming import face_by_brep_face, wire_by_brep_loop
from .mesh import topology_by_mesh
from .aggregate import aggregate_faces, topology_by_brep
from .classify import topology_by_geometry

__all__ = [
    "to_kernel_knots",
    "edge_by_line",
    "edge_by_nurbs_curve",
    "topology_by_curve",
    "wire_by_poly_curve",
    "wire_by_polyline_curve",
    "face_by_nurbs_surface",
    "face_by_surface",
    "face_by_brep_face",
    "wire_by_brep_loop",
    "topology_by_mesh",
    "aggregate_faces",
    "topology_by_brep",
    "topology_by_geometry",
]
