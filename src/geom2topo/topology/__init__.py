"""
geom2topo.topology package

name: __init__.py
by:   Gumyr
date: March 3rd 2025

desc:
    This package wraps the OCCT topology kernel in the non-manifold vocabulary of
    geom2topo: vertices, edges, wires, faces, shells, cells and clusters. It provides the
    constructors the conversion pipeline needs along with basic queries of the resulting
    topologies.

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

from .shape_core import Shape, ShapeList, downcast, unwrap_topods_compound
from .zero_d import Vertex
from .one_d import Edge, Wire
from .two_d import Face, Shell
from .three_d import Cell
from .composite import Cluster, by_vertices_indices

__all__ = [
    "Shape",
    "ShapeList",
    "downcast",
    "unwrap_topods_compound",
    "Vertex",
    "Edge",
    "Wire",
    "Face",
    "Shell",
    "Cell",
    "Cluster",
    "by_vertices_indices",
]
