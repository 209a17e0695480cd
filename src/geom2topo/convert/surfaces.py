"""
geom2topo convert

name: surfaces.py
by:   Gumyr
date: March 3rd 2025

desc:

This module converts host surfaces into untrimmed B-spline faces covering their full
parametric domain. Analytic surface kinds are first expanded to their exact NURBS form.

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

from geom2topo.errors import UnsupportedGeometryError
from geom2topo.geometry import (
    Extrusion,
    NurbsSurface,
    PlaneSurface,
    RevSurface,
    SumSurface,
    Surface,
    logger,
)
from geom2topo.topology import Face, Vertex

from .knots import to_kernel_knots


def face_by_surface(surface: Surface) -> Face:
    """face_by_surface

    Convert any host surface into an untrimmed Face.

    Args:
        surface (Surface): host surface

    Raises:
        UnsupportedGeometryError: the surface kind has no conversion

    Returns:
        Face: untrimmed face
    """
    logger.debug("converting surface %s", type(surface).__name__)
    match surface:
        case SumSurface() | RevSurface() | PlaneSurface() | Extrusion():
            return face_by_nurbs_surface(surface.to_nurbs())
        case NurbsSurface():
            return face_by_nurbs_surface(surface)
        case _:
            raise UnsupportedGeometryError(
                f"unsupported surface {type(surface).__name__}"
            )


def face_by_nurbs_surface(surface: NurbsSurface) -> Face:
    """B-spline Face over the full domain of surface, knots in kernel convention"""
    u_knots = to_kernel_knots(surface.knots_u)
    v_knots = to_kernel_knots(surface.knots_v)
    control_vertices = [[Vertex.by_point(p) for p in row] for row in surface.points]
    logger.debug(
        "nurbs surface closed u=%s v=%s, periodic u=%s v=%s",
        surface.is_closed("u"),
        surface.is_closed("v"),
        surface.is_periodic("u"),
        surface.is_periodic("v"),
    )
    return Face.by_nurbs_parameters(
        control_vertices,
        surface.weights,
        u_knots,
        v_knots,
        surface.is_rational,
        surface.is_periodic("u"),
        surface.is_periodic("v"),
        surface.degree_u,
        surface.degree_v,
    )
