"""
geom2topo convert

name: knots.py
by:   Gumyr
date: March 3rd 2025

desc:

Host geometry stores flat knot vectors without the outermost knot at each end, so a curve
with n control points of degree p carries `n + p - 1` knots. The topology kernel expects the
full `n + p + 1` knots. `to_kernel_knots` is the single place where this correction happens;
every NURBS curve and surface direction passes through it exactly once.

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

from typing import Sequence


def to_kernel_knots(host_knots: Sequence[float]) -> list[float]:
    """Convert host convention knots to kernel convention knots

    The first and last knots are duplicated, so the result is two knots longer, starts with
    two equal knots and ends with two equal knots.

    Args:
        host_knots (Sequence[float]): `n + degree - 1` knots

    Raises:
        ValueError: no knots

    Returns:
        list[float]: `n + degree + 1` knots
    """
    if not host_knots:
        raise ValueError("Can't correct an empty knot vector")
    knots = [float(k) for k in host_knots]
    return [knots[0], *knots, knots[-1]]
