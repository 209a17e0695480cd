"""
geom2topo topology

name: utils.py
by:   Gumyr
date: March 3rd 2025

desc:

This module provides helper functions shared by the topology classes.

Key Features:
- **Shape Creation**:
  - `_make_topods_compound_from_shapes`: Constructs compounds from multiple shapes.

- **NURBS Parameters**:
  - `_knots_and_multiplicities`: Converts a flat knot vector into the distinct knots and
    multiplicities OCCT B-splines are built from.
  - `_occt_knot_arrays`: Builds the OCCT knot and multiplicity arrays for clamped or
    periodic B-splines from a flat knot vector.

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

from typing import Iterable, Sequence

from OCP.TColStd import TColStd_Array1OfInteger, TColStd_Array1OfReal
from OCP.TopoDS import TopoDS_Builder, TopoDS_Compound, TopoDS_Shape


def _knots_and_multiplicities(
    flat_knots: Sequence[float], tolerance: float = 1e-10
) -> tuple[list[float], list[int]]:
    """Convert a flat knot vector into distinct knots and their multiplicities

    A knot starts a new entry when it exceeds the previous knot by more than tolerance.

    Args:
        flat_knots (Sequence[float]): non-decreasing flat knots
        tolerance (float, optional): knot coincidence tolerance. Defaults to 1e-10.

    Raises:
        ValueError: knots decrease

    Returns:
        tuple[list[float], list[int]]: distinct knots, multiplicities
    """
    knots: list[float] = []
    multiplicities: list[int] = []
    for knot in flat_knots:
        if knots and knot < knots[-1] - tolerance:
            raise ValueError("Knots must be non-decreasing")
        if not knots or knot > knots[-1] + tolerance:
            knots.append(float(knot))
            multiplicities.append(1)
        else:
            multiplicities[-1] += 1
    return knots, multiplicities


def _make_topods_compound_from_shapes(
    occt_shapes: Iterable[TopoDS_Shape | None],
) -> TopoDS_Compound:
    """Create an OCCT TopoDS_Compound

    Create an OCCT TopoDS_Compound object from an iterable of TopoDS_Shape objects

    Args:
        occt_shapes (Iterable[TopoDS_Shape]): OCCT shapes

    Returns:
        TopoDS_Compound: OCCT compound
    """
    comp = TopoDS_Compound()
    comp_builder = TopoDS_Builder()
    comp_builder.MakeCompound(comp)

    for shape in occt_shapes:
        if shape is not None:
            comp_builder.Add(comp, shape)

    return comp


def _occt_knot_arrays(
    flat_knots: Sequence[float], pole_count: int, degree: int, periodic: bool
) -> tuple[TColStd_Array1OfReal, TColStd_Array1OfInteger, int]:
    """OCCT knot and multiplicity arrays for one B-spline direction

    The flat knot vector must hold `pole_count + degree + 1` knots. Periodic data repeats
    its first `degree` poles at the end; OCCT stores periodic B-splines without those
    repeated poles and with the knots of the parametric domain only.

    Args:
        flat_knots (Sequence[float]): flat knot vector
        pole_count (int): number of poles including any periodic repeats
        degree (int): polynomial degree
        periodic (bool): build periodic arrays

    Raises:
        ValueError: wrong number of knots

    Returns:
        tuple[TColStd_Array1OfReal, TColStd_Array1OfInteger, int]: knots,
            multiplicities and the number of poles OCCT expects
    """
    if len(flat_knots) != pole_count + degree + 1:
        raise ValueError(
            f"Expected {pole_count + degree + 1} knots for {pole_count} poles of "
            f"degree {degree}, got {len(flat_knots)}"
        )
    if periodic:
        knots, multiplicities = _knots_and_multiplicities(
            flat_knots[degree : pole_count + 1]
        )
        pole_count -= degree
    else:
        knots, multiplicities = _knots_and_multiplicities(flat_knots)

    knot_array = TColStd_Array1OfReal(1, len(knots))
    multiplicity_array = TColStd_Array1OfInteger(1, len(multiplicities))
    for i, (knot, multiplicity) in enumerate(zip(knots, multiplicities)):
        knot_array.SetValue(i + 1, knot)
        multiplicity_array.SetValue(i + 1, multiplicity)
    return knot_array, multiplicity_array, pole_count
