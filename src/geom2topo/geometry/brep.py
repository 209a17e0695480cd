"""
geom2topo geometry

name: brep.py
by:   Gumyr
date: March 3rd 2025

desc:

This module describes host boundary representations: faces built from a surface and trimming
loops, loops built from trims and trims backed (or not) by edges. An axis-aligned `Box` expands
into a six face solid brep.

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

import numpy as np

from geom2topo.build_enums import LoopType

from .core import Point3d, VectorLike, to_array, to_point
from .curves import Curve, Line, LineCurve, NurbsCurve
from .surfaces import PlaneSurface, Surface


class BrepEdge(Curve):
    """A curve bound to the surfaces of a brep

    Args:
        curve (Curve): the edge's 3D curve
    """

    def __init__(self, curve: Curve):
        self.curve = curve

    def __repr__(self) -> str:
        return f"BrepEdge({self.curve!r})"

    @property
    def start_point(self) -> Point3d:
        return self.curve.start_point

    @property
    def end_point(self) -> Point3d:
        return self.curve.end_point

    def duplicate_curve(self) -> Curve:
        """The free standing 3D curve of this edge"""
        return self.curve

    def to_nurbs(self) -> NurbsCurve:
        return self.curve.to_nurbs()


@dataclass(frozen=True)
class BrepTrim:
    """One segment of a trimming loop; edge is None when the backing data is missing"""

    edge: BrepEdge | None


@dataclass(frozen=True)
class BrepLoop:
    """An ordered closed sequence of trims"""

    trims: tuple[BrepTrim, ...]
    loop_type: LoopType = LoopType.OUTER

    def __post_init__(self):
        object.__setattr__(self, "trims", tuple(self.trims))


@dataclass(frozen=True)
class BrepFace:
    """A surface restricted by one outer and any number of inner loops"""

    surface: Surface
    loops: tuple[BrepLoop, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "loops", tuple(self.loops))

    @property
    def outer_loop(self) -> BrepLoop:
        """The loop designated as the outer boundary

        Raises:
            ValueError: there isn't exactly one outer loop
        """
        outer_loops = [l for l in self.loops if l.loop_type == LoopType.OUTER]
        if len(outer_loops) != 1:
            raise ValueError(
                f"A brep face needs exactly one outer loop, found {len(outer_loops)}"
            )
        return outer_loops[0]


@dataclass(frozen=True)
class Brep:
    """A collection of faces, flagged when known to bound a closed solid"""

    faces: tuple[BrepFace, ...] = ()
    is_solid: bool = False

    def __post_init__(self):
        object.__setattr__(self, "faces", tuple(self.faces))


class Box:
    """Box

    An axis-aligned box given by two opposite corners.

    Args:
        min_point (VectorLike): corner with the smallest coordinates
        max_point (VectorLike): corner with the largest coordinates

    Raises:
        ValueError: the box has no volume
    """

    def __init__(self, min_point: VectorLike, max_point: VectorLike):
        low = np.minimum(to_array(min_point), to_array(max_point))
        high = np.maximum(to_array(min_point), to_array(max_point))
        if np.any(high - low <= 0):
            raise ValueError("A Box must have a positive size in every direction")
        self.min_point = to_point(low)
        self.max_point = to_point(high)

    def __repr__(self) -> str:
        return f"Box({self.min_point!r}, {self.max_point!r})"

    @property
    def size(self) -> tuple[float, float, float]:
        """Extent along X, Y and Z"""
        return tuple(float(d) for d in to_array(self.max_point) - to_array(self.min_point))

    def to_brep(self) -> Brep:
        """Expand into six planar faces sharing twelve edges"""
        bounds = list(zip(self.min_point, self.max_point))
        corners = {
            (i, j, k): Point3d(bounds[0][i], bounds[1][j], bounds[2][k])
            for i in (0, 1)
            for j in (0, 1)
            for k in (0, 1)
        }
        edges: dict[frozenset, BrepEdge] = {}

        def shared_edge(start: tuple, end: tuple) -> BrepEdge:
            key = frozenset((start, end))
            if key not in edges:
                edges[key] = BrepEdge(LineCurve(Line(corners[start], corners[end])))
            return edges[key]

        faces = []
        for axis in range(3):
            u_axis, v_axis = [a for a in range(3) if a != axis]
            for side in (0, 1):

                def corner(u: int, v: int) -> tuple:
                    index = [0, 0, 0]
                    index[axis], index[u_axis], index[v_axis] = side, u, v
                    return tuple(index)

                cycle = [corner(0, 0), corner(1, 0), corner(1, 1), corner(0, 1)]
                surface = PlaneSurface(
                    corners[cycle[0]],
                    x_axis=np.eye(3)[u_axis],
                    y_axis=np.eye(3)[v_axis],
                    x_interval=(0.0, self.size[u_axis]),
                    y_interval=(0.0, self.size[v_axis]),
                )
                trims = [
                    BrepTrim(shared_edge(start, end))
                    for start, end in zip(cycle, cycle[1:] + cycle[:1])
                ]
                faces.append(BrepFace(surface, [BrepLoop(trims, LoopType.OUTER)]))

        return Brep(faces, is_solid=True)
