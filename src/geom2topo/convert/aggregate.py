"""
geom2topo convert

name: aggregate.py
by:   Gumyr
date: March 3rd 2025

desc:

This module assembles the faces of a brep into the highest topology they support: a single
face, an open shell or, for breps known to be closed solids, a cell.

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

from typing import Iterable

from geom2topo.geometry import TOLERANCE, Brep, logger
from geom2topo.topology import Cell, Face, Shell

from .trimming import face_by_brep_face


def aggregate_faces(
    faces: Iterable[Face], is_solid: bool, tolerance: float = TOLERANCE
) -> Face | Shell | Cell | None:
    """aggregate_faces

    Args:
        faces (Iterable[Face]): faces to assemble
        is_solid (bool): the faces bound a closed solid
        tolerance (float, optional): sewing tolerance. Defaults to TOLERANCE.

    Raises:
        DegenerateTopologyError: the faces don't form a single shell
        DegenerateTopologyError: a solid's shell isn't closed

    Returns:
        Face | Shell | Cell | None: None without faces, the face itself when there is
            only one, otherwise a Shell or a Cell if is_solid
    """
    faces = list(faces)
    if not faces:
        return None
    if len(faces) == 1:
        return faces[0]

    shell = Shell.by_faces(faces, tolerance)
    if is_solid:
        return Cell.by_shell(shell)
    return shell


def topology_by_brep(
    brep: Brep, tolerance: float = TOLERANCE
) -> Face | Shell | Cell | None:
    """Trimmed faces of brep aggregated into a Face, Shell or Cell"""
    faces = [face_by_brep_face(f, tolerance) for f in brep.faces]
    logger.debug("brep of %d faces, solid=%s", len(faces), brep.is_solid)
    return aggregate_faces(faces, brep.is_solid, tolerance)
