"""
geom2topo geometry

name: surfaces.py
by:   Gumyr
date: March 3rd 2025

desc:

This module describes the surface kinds of the host geometry model. `NurbsSurface` is the
common free-form representation; planes, sum surfaces, surfaces of revolution and extrusions
convert to it exactly with the constructions of Piegl & Tiller's "The NURBS Book".

Control point grids are row-major: `points[i][j]` is the control point at u index i and
v index j. Knot vectors use the host convention (`len(knots) == count + degree - 1`).

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

import math
from abc import ABC, abstractmethod
from typing import Iterable, Literal

import numpy as np

from .core import TOLERANCE, VectorLike, to_array, to_point, unit_vector
from .curves import Curve, NurbsCurve, clamped_knots, unit_arc


class Surface(ABC):
    """Base class of the host surface kinds"""

    @abstractmethod
    def to_nurbs(self) -> NurbsSurface:
        """The exact NURBS form of this surface"""


class NurbsSurface(Surface):
    """NurbsSurface

    Tensor product non-uniform rational B-spline surface.

    Args:
        degree_u (int): degree in the u direction
        degree_v (int): degree in the v direction
        points (Iterable[Iterable[VectorLike]]): row-major control point grid
        weights (Iterable[Iterable[float]], optional): grid of positive weights matching
            points. Defaults to all 1.0.
        knots_u (Iterable[float], optional): host convention u knots. Defaults to clamped
            uniform.
        knots_v (Iterable[float], optional): host convention v knots. Defaults to clamped
            uniform.
        periodic_u (bool, optional): periodic in u. Defaults to False.
        periodic_v (bool, optional): periodic in v. Defaults to False.

    Raises:
        ValueError: grid is ragged or too small for the degrees
        ValueError: weight grid doesn't match the point grid
        ValueError: wrong knot count in either direction
    """

    def __init__(
        self,
        degree_u: int,
        degree_v: int,
        points: Iterable[Iterable[VectorLike]],
        weights: Iterable[Iterable[float]] | None = None,
        knots_u: Iterable[float] | None = None,
        knots_v: Iterable[float] | None = None,
        periodic_u: bool = False,
        periodic_v: bool = False,
    ):
        self.degree_u = int(degree_u)
        self.degree_v = int(degree_v)
        self.points = [[to_point(p) for p in row] for row in points]
        count_u = len(self.points)
        count_v = len(self.points[0]) if self.points else 0
        if any(len(row) != count_v for row in self.points):
            raise ValueError("All rows of the control point grid must be the same length")
        if count_u < self.degree_u + 1 or count_v < self.degree_v + 1:
            raise ValueError(
                f"A {self.degree_u}x{self.degree_v} surface needs at least "
                f"{self.degree_u + 1}x{self.degree_v + 1} control points"
            )
        self.weights = (
            [[1.0] * count_v for _ in range(count_u)]
            if weights is None
            else [[float(w) for w in row] for row in weights]
        )
        if len(self.weights) != count_u or any(
            len(row) != count_v for row in self.weights
        ):
            raise ValueError("A weight must be provided for each control point")
        if any(w <= 0 for row in self.weights for w in row):
            raise ValueError("Weights must be positive")
        self.knots_u = (
            clamped_knots(count_u, self.degree_u)
            if knots_u is None
            else [float(k) for k in knots_u]
        )
        self.knots_v = (
            clamped_knots(count_v, self.degree_v)
            if knots_v is None
            else [float(k) for k in knots_v]
        )
        for name, knots, count, degree in (
            ("u", self.knots_u, count_u, self.degree_u),
            ("v", self.knots_v, count_v, self.degree_v),
        ):
            if len(knots) != count + degree - 1:
                raise ValueError(
                    f"Expected {count + degree - 1} {name} knots, got {len(knots)}"
                )
        self.periodic_u = periodic_u
        self.periodic_v = periodic_v

    def __repr__(self) -> str:
        return (
            f"NurbsSurface(degrees=({self.degree_u}, {self.degree_v}), "
            f"points={self.point_count_u}x{self.point_count_v}, "
            f"rational={self.is_rational})"
        )

    @property
    def point_count_u(self) -> int:
        """Number of control points in the u direction"""
        return len(self.points)

    @property
    def point_count_v(self) -> int:
        """Number of control points in the v direction"""
        return len(self.points[0])

    @property
    def is_rational(self) -> bool:
        """Do the weights differ from one another?"""
        first = self.weights[0][0]
        return any(abs(w - first) > 1e-12 for row in self.weights for w in row)

    def is_periodic(self, direction: Literal["u", "v"]) -> bool:
        """Is the surface periodic in the given direction?"""
        return self.periodic_u if direction == "u" else self.periodic_v

    def is_closed(self, direction: Literal["u", "v"]) -> bool:
        """Do the first and last rows (u) or columns (v) of control points coincide?"""
        if self.is_periodic(direction):
            return True
        if direction == "u":
            pairs = zip(self.points[0], self.points[-1])
        else:
            pairs = ((row[0], row[-1]) for row in self.points)
        return all(a.distance_to(b) <= TOLERANCE for a, b in pairs)

    def to_nurbs(self) -> NurbsSurface:
        return self


def _profile_grid(
    profile: Curve, other: list[tuple], offset
) -> tuple[list[list[np.ndarray]], list[list[float]], NurbsCurve]:
    """Tensor product of a profile's control points with a second set of control points

    `offset(point, other_point)` returns the grid point for a profile control point.
    """
    nurbs = profile.to_nurbs()
    points = []
    weights = []
    for profile_point, profile_weight in zip(nurbs.points, nurbs.weights):
        base = to_array(profile_point)
        points.append([offset(base, p) for p, _ in other])
        weights.append([profile_weight * w for _, w in other])
    return points, weights, nurbs


class PlaneSurface(Surface):
    """PlaneSurface

    A bounded rectangle of a plane.

    Args:
        origin (VectorLike): plane origin
        x_axis (VectorLike): in-plane x direction
        y_axis (VectorLike): in-plane y direction, made orthogonal to x_axis
        x_interval (tuple[float, float], optional): x extent. Defaults to (0, 1).
        y_interval (tuple[float, float], optional): y extent. Defaults to (0, 1).

    Raises:
        ValueError: axes are parallel
        ValueError: empty interval
    """

    def __init__(
        self,
        origin: VectorLike,
        x_axis: VectorLike = (1, 0, 0),
        y_axis: VectorLike = (0, 1, 0),
        x_interval: tuple[float, float] = (0.0, 1.0),
        y_interval: tuple[float, float] = (0.0, 1.0),
    ):
        self.origin = to_point(origin)
        self.x_axis = unit_vector(x_axis)
        y_dir = to_array(y_axis)
        y_dir = y_dir - np.dot(y_dir, self.x_axis) * self.x_axis
        if np.linalg.norm(y_dir) < 1e-9:
            raise ValueError("x_axis and y_axis must not be parallel")
        self.y_axis = y_dir / np.linalg.norm(y_dir)
        if x_interval[1] <= x_interval[0] or y_interval[1] <= y_interval[0]:
            raise ValueError("Plane surface intervals must be increasing")
        self.x_interval = (float(x_interval[0]), float(x_interval[1]))
        self.y_interval = (float(y_interval[0]), float(y_interval[1]))

    def __repr__(self) -> str:
        return (
            f"PlaneSurface(origin={self.origin!r}, x_interval={self.x_interval}, "
            f"y_interval={self.y_interval})"
        )

    def to_nurbs(self) -> NurbsSurface:
        """Bilinear degree one patch"""
        origin = to_array(self.origin)
        points = [
            [origin + x * self.x_axis + y * self.y_axis for y in self.y_interval]
            for x in self.x_interval
        ]
        return NurbsSurface(
            1, 1, points, knots_u=self.x_interval, knots_v=self.y_interval
        )


class SumSurface(Surface):
    """SumSurface

    The translational surface `S(u, v) = A(u) + B(v) - B(v0)`: curve_a swept along curve_b.

    Args:
        curve_a (Curve): u direction curve
        curve_b (Curve): v direction curve
    """

    def __init__(self, curve_a: Curve, curve_b: Curve):
        self.curve_a = curve_a
        self.curve_b = curve_b

    def __repr__(self) -> str:
        return f"SumSurface({self.curve_a!r}, {self.curve_b!r})"

    def to_nurbs(self) -> NurbsSurface:
        """Tensor product with `P_ij = A_i + B_j - B(v0)` and `w_ij = wA_i * wB_j`"""
        nurbs_b = self.curve_b.to_nurbs()
        anchor = to_array(nurbs_b.start_point)
        other = [(to_array(p), w) for p, w in zip(nurbs_b.points, nurbs_b.weights)]
        points, weights, nurbs_a = _profile_grid(
            self.curve_a, other, lambda base, p: base + p - anchor
        )
        return NurbsSurface(
            nurbs_a.degree,
            nurbs_b.degree,
            points,
            weights,
            nurbs_a.knots,
            nurbs_b.knots,
            nurbs_a.periodic,
            nurbs_b.periodic,
        )


class RevSurface(Surface):
    """RevSurface

    A profile curve revolved about an axis. The u direction follows the profile and the
    v direction follows the rational quadratic arc of the revolution.

    Args:
        profile (Curve): revolved curve
        axis_origin (VectorLike, optional): point on the axis. Defaults to (0, 0, 0).
        axis_direction (VectorLike, optional): axis direction. Defaults to (0, 0, 1).
        start_angle (float, optional): radians. Defaults to 0.
        end_angle (float, optional): radians. Defaults to 2π.
    """

    def __init__(
        self,
        profile: Curve,
        axis_origin: VectorLike = (0, 0, 0),
        axis_direction: VectorLike = (0, 0, 1),
        start_angle: float = 0.0,
        end_angle: float = 2 * math.pi,
    ):
        self.profile = profile
        self.axis_origin = to_point(axis_origin)
        self.axis_direction = unit_vector(axis_direction)
        self.start_angle = float(start_angle)
        self.end_angle = float(end_angle)

    def __repr__(self) -> str:
        return (
            f"RevSurface({self.profile!r}, angles=({self.start_angle:.6g}, "
            f"{self.end_angle:.6g}))"
        )

    def to_nurbs(self) -> NurbsSurface:
        """Each profile control point sweeps a circle about the axis"""
        coefficients, arc_weights, arc_knots = unit_arc(
            0.0, self.end_angle - self.start_angle
        )
        axis_origin = to_array(self.axis_origin)
        axis = self.axis_direction
        start_rotation = self.start_angle

        def revolve(base: np.ndarray, coefficient: tuple[float, float]) -> np.ndarray:
            on_axis = axis_origin + np.dot(base - axis_origin, axis) * axis
            radial = base - on_axis
            radius = np.linalg.norm(radial)
            if radius < 1e-12:
                return on_axis
            x_dir = radial / radius
            y_dir = np.cross(axis, x_dir)
            # rotate the frame so angle zero is the start of the revolution
            x_rot = math.cos(start_rotation) * x_dir + math.sin(start_rotation) * y_dir
            y_rot = np.cross(axis, x_rot)
            a, b = coefficient
            return on_axis + radius * (a * x_rot + b * y_rot)

        other = list(zip(coefficients, arc_weights))
        points, weights, nurbs = _profile_grid(self.profile, other, revolve)
        return NurbsSurface(
            nurbs.degree,
            2,
            points,
            weights,
            nurbs.knots,
            arc_knots,
            nurbs.periodic,
            False,
        )


class Extrusion(Surface):
    """Extrusion

    A profile curve swept along a straight direction. The u direction follows the profile
    and the v direction is linear.

    Args:
        profile (Curve): extruded curve
        direction (VectorLike): extrusion vector, its length is the height

    Raises:
        ValueError: zero length direction
    """

    def __init__(self, profile: Curve, direction: VectorLike):
        self.profile = profile
        self.direction = to_array(direction)
        if np.linalg.norm(self.direction) < 1e-12:
            raise ValueError("Extrusion direction must not be zero")

    def __repr__(self) -> str:
        return f"Extrusion({self.profile!r}, direction={tuple(self.direction)})"

    def to_nurbs(self) -> NurbsSurface:
        """Profile control points and their translated copies"""
        other = [(np.zeros(3), 1.0), (self.direction, 1.0)]
        points, weights, nurbs = _profile_grid(
            self.profile, other, lambda base, offset: base + offset
        )
        return NurbsSurface(
            nurbs.degree,
            1,
            points,
            weights,
            nurbs.knots,
            [0.0, 1.0],
            nurbs.periodic,
            False,
        )
