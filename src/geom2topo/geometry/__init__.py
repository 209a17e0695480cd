"""
geom2topo geometry package

name: __init__.py
by:   Gumyr
date: March 3rd 2025

desc:

The host geometry model consumed by the conversion pipeline: points, lines, curves, surfaces,
boundary representations, boxes and meshes.

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

from .core import TOLERANCE, Point3d, VectorLike, logger, to_array, to_point
from .curves import (
    ArcCurve,
    Curve,
    Line,
    LineCurve,
    NurbsCurve,
    PolyCurve,
    PolylineCurve,
    clamped_knots,
)
from .surfaces import (
    Extrusion,
    NurbsSurface,
    PlaneSurface,
    RevSurface,
    SumSurface,
    Surface,
)
from .brep import Box, Brep, BrepEdge, BrepFace, BrepLoop, BrepTrim
from .mesh import Mesh

__all__ = [
    "TOLERANCE",
    "Point3d",
    "VectorLike",
    "logger",
    "to_array",
    "to_point",
    "ArcCurve",
    "Curve",
    "Line",
    "LineCurve",
    "NurbsCurve",
    "PolyCurve",
    "PolylineCurve",
    "clamped_knots",
    "Extrusion",
    "NurbsSurface",
    "PlaneSurface",
    "RevSurface",
    "SumSurface",
    "Surface",
    "Box",
    "Brep",
    "BrepEdge",
    "BrepFace",
    "BrepLoop",
    "BrepTrim",
    "Mesh",
]
