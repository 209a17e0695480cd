"""
geom2topo convert

name: trimming.py
by:   Gumyr
date: March 3rd 2025

desc:

This module rebuilds trimmed faces from brep faces. The face's surface is converted to an
untrimmed face which is then restricted by the wire of its outer loop; the wires of all
other loops are cut out as holes.

Trims whose backing edge is missing are skipped with a warning, so a loop may lose edges or
become empty. An empty outer loop can't trim a face and is an error; an empty inner loop is
ignored.

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

import warnings

from geom2topo.geometry import TOLERANCE, BrepFace, BrepLoop, logger
from geom2topo.topology import Edge, Face, Wire

from .curves import _flatten_edges, topology_by_curve
from .surfaces import face_by_surface


def wire_by_brep_loop(loop: BrepLoop, tolerance: float = TOLERANCE) -> Wire:
    """wire_by_brep_loop

    Wire through the edges of a trimming loop. The trims may be in any order; missing
    edges are skipped.

    Args:
        loop (BrepLoop): trimming loop
        tolerance (float, optional): edge connection tolerance. Defaults to TOLERANCE.

    Raises:
        DegenerateTopologyError: the edges don't connect into a single wire

    Returns:
        Wire: loop wire, empty if no trim has an edge
    """
    edges: list[Edge] = []
    for index, trim in enumerate(loop.trims):
        if trim.edge is None:
            warnings.warn(
                f"Trim {index} of {loop.loop_type.name.lower()} loop has no edge, "
                "skipping it",
                stacklevel=2,
            )
            logger.info("skipped trim %d without an edge", index)
            continue
        edges.extend(
            _flatten_edges([topology_by_curve(trim.edge.duplicate_curve(), tolerance)])
        )
    return Wire.by_edges(edges, tolerance)


def face_by_brep_face(brep_face: BrepFace, tolerance: float = TOLERANCE) -> Face:
    """face_by_brep_face

    Face of brep_face's surface bounded by its outer loop with its inner loops cut out.

    Args:
        brep_face (BrepFace): host face
        tolerance (float, optional): trimming tolerance. Defaults to TOLERANCE.

    Raises:
        ValueError: brep_face doesn't have exactly one outer loop
        DegenerateTopologyError: the outer loop gives an empty or open wire
        DegenerateTopologyError: OCCT couldn't trim the face

    Returns:
        Face: the trimmed face
    """
    outer_loop = brep_face.outer_loop
    face = face_by_surface(brep_face.surface)
    face = face.trim_by_wire(wire_by_brep_loop(outer_loop, tolerance), tolerance)

    inner_wires = [
        wire_by_brep_loop(loop, tolerance)
        for loop in brep_face.loops
        if loop is not outer_loop
    ]
    logger.debug("trimmed face with %d inner loops", len(inner_wires))
    return face.add_internal_boundaries(inner_wires, tolerance)
