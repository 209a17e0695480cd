"""
geom2topo geometry

name: curves.py
by:   Gumyr
date: March 3rd 2025

desc:

This module describes the curve kinds of the host geometry model. Every curve can report its
end points and closure, and the free-form kinds provide their exact NURBS form:

- **Line / LineCurve**: a straight segment, either as plain geometry or as a curve object.
- **NurbsCurve**: degree, control points, weights and a flat knot vector in the host convention
  (`len(knots) == len(points) + degree - 1`, the outer knot of each end is implied).
- **ArcCurve**: circular arcs and circles, converted to rational quadratic NURBS.
- **PolylineCurve**: an explicit chain of points, closed when the last point repeats the first.
- **PolyCurve**: an ordered composite of other curves.

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
from typing import Iterable, Sequence

import numpy as np

from geom2topo.errors import UnsupportedGeometryError

from .core import TOLERANCE, Point3d, VectorLike, to_array, to_point, unit_vector


def clamped_knots(count: int, degree: int) -> list[float]:
    """Uniform clamped knot vector over [0, 1] in the host convention

    Args:
        count (int): number of control points
        degree (int): polynomial degree

    Returns:
        list[float]: `count + degree - 1` knots
    """
    spans = count - degree
    interior = [i / spans for i in range(1, spans)]
    return [0.0] * degree + interior + [1.0] * degree


def unit_arc(
    start_angle: float, end_angle: float
) -> tuple[list[tuple[float, float]], list[float], list[float]]:
    """Rational quadratic description of a unit circular arc

    The arc is split into one segment per started quarter turn. Each control point is
    returned as a pair of coefficients (a, b) so that the point on an arc with center C,
    radius r and in-plane axes X, Y is `C + r * (a * X + b * Y)`.

    Args:
        start_angle (float): start angle in radians
        end_angle (float): end angle in radians

    Raises:
        ValueError: sweep is not within (0, 2π]

    Returns:
        tuple: coefficients, weights and host convention knots (angle parameterized)
    """
    sweep = end_angle - start_angle
    if not 0 < sweep <= 2 * math.pi + 1e-12:
        raise ValueError(f"Arc sweep must be within (0, 2π], got {sweep}")
    segments = max(1, math.ceil(sweep / (math.pi / 2) - 1e-9))
    delta = sweep / segments
    mid_weight = math.cos(delta / 2)

    coefficients = [(math.cos(start_angle), math.sin(start_angle))]
    weights = [1.0]
    knots = [start_angle, start_angle]
    for i in range(1, segments + 1):
        mid_angle = start_angle + (i - 0.5) * delta
        end = start_angle + i * delta
        coefficients.append(
            (math.cos(mid_angle) / mid_weight, math.sin(mid_angle) / mid_weight)
        )
        coefficients.append((math.cos(end), math.sin(end)))
        weights.extend([mid_weight, 1.0])
        knots.extend([end, end])
    return coefficients, weights, knots


class Line:
    """A straight segment between two points"""

    def __init__(self, start: VectorLike, end: VectorLike):
        self.start = to_point(start)
        self.end = to_point(end)

    def __repr__(self) -> str:
        return f"Line({self.start!r}, {self.end!r})"

    @property
    def length(self) -> float:
        """Distance from start to end"""
        return self.start.distance_to(self.end)


class Curve:
    """Curve

    Base class of the host curve kinds. Subclasses with a single free-form representation
    override `to_nurbs`; the end point and closure queries default to that representation.
    """

    def to_nurbs(self) -> NurbsCurve:
        """The exact NURBS form of this curve"""
        raise UnsupportedGeometryError(
            f"{type(self).__name__} has no single NURBS form"
        )

    @property
    def start_point(self) -> Point3d:
        """Point at the start of the curve's domain"""
        return self.to_nurbs().start_point

    @property
    def end_point(self) -> Point3d:
        """Point at the end of the curve's domain"""
        return self.to_nurbs().end_point

    @property
    def is_closed(self) -> bool:
        """Do the start and end points coincide?"""
        return self.start_point.distance_to(self.end_point) <= TOLERANCE


class LineCurve(Curve):
    """A Line exposed as a curve object"""

    def __init__(self, line: Line):
        self.line = line

    def __repr__(self) -> str:
        return f"LineCurve({self.line!r})"

    @property
    def start_point(self) -> Point3d:
        return self.line.start

    @property
    def end_point(self) -> Point3d:
        return self.line.end

    def to_nurbs(self) -> NurbsCurve:
        """Degree one NURBS parameterized by length"""
        return NurbsCurve(
            1, [self.line.start, self.line.end], knots=[0.0, self.line.length]
        )


class NurbsCurve(Curve):
    """NurbsCurve

    Non-uniform rational B-spline curve in the host convention. The flat knot vector omits
    the outermost knot at each end so `len(knots) == len(points) + degree - 1`. Periodic
    curves repeat their first `degree` control points at the end.

    Args:
        degree (int): polynomial degree, at least 1
        points (Iterable[VectorLike]): control points
        weights (Iterable[float], optional): one positive weight per control point.
            Defaults to all 1.0.
        knots (Iterable[float], optional): non-decreasing host convention knots.
            Defaults to a uniform clamped vector over [0, 1].
        periodic (bool, optional): the curve is periodic. Defaults to False.

    Raises:
        ValueError: degree below one
        ValueError: not enough control points for the degree
        ValueError: weight count doesn't match control point count
        ValueError: weights must be positive
        ValueError: wrong knot count
        ValueError: knots decrease
    """

    def __init__(
        self,
        degree: int,
        points: Iterable[VectorLike],
        weights: Iterable[float] | None = None,
        knots: Iterable[float] | None = None,
        periodic: bool = False,
    ):
        self.degree = int(degree)
        self.points = [to_point(p) for p in points]
        count = len(self.points)
        if self.degree < 1:
            raise ValueError(f"Degree must be at least 1, got {self.degree}")
        if count < self.degree + 1:
            raise ValueError(
                f"A degree {self.degree} curve needs at least {self.degree + 1} "
                f"control points, got {count}"
            )
        self.weights = [1.0] * count if weights is None else [float(w) for w in weights]
        if len(self.weights) != count:
            raise ValueError("A weight must be provided for each control point")
        if any(w <= 0 for w in self.weights):
            raise ValueError("Weights must be positive")
        self.knots = (
            clamped_knots(count, self.degree)
            if knots is None
            else [float(k) for k in knots]
        )
        if len(self.knots) != count + self.degree - 1:
            raise ValueError(
                f"Expected {count + self.degree - 1} knots, got {len(self.knots)}"
            )
        if any(b < a for a, b in zip(self.knots, self.knots[1:])):
            raise ValueError("Knots must be non-decreasing")
        self.periodic = periodic

    def __repr__(self) -> str:
        return (
            f"NurbsCurve(degree={self.degree}, points={len(self.points)}, "
            f"rational={self.is_rational}, periodic={self.periodic})"
        )

    @property
    def is_rational(self) -> bool:
        """Do the weights differ from one another?"""
        return any(abs(w - self.weights[0]) > 1e-12 for w in self.weights)

    @property
    def is_periodic(self) -> bool:
        """Is the curve periodic?"""
        return self.periodic

    @property
    def is_closed(self) -> bool:
        return self.periodic or super().is_closed

    @property
    def domain(self) -> tuple[float, float]:
        """Parametric range of the curve"""
        return self.knots[self.degree - 1], self.knots[len(self.points) - 1]

    @property
    def start_point(self) -> Point3d:
        return self.point_at(self.domain[0])

    @property
    def end_point(self) -> Point3d:
        return self.point_at(self.domain[1])

    def point_at(self, parameter: float) -> Point3d:
        """Evaluate the curve with de Boor's algorithm

        Args:
            parameter (float): value within the curve's domain

        Returns:
            Point3d: point on curve
        """
        flat = np.array([self.knots[0], *self.knots, self.knots[-1]])
        homogeneous = np.array(
            [[*(to_array(p) * w), w] for p, w in zip(self.points, self.weights)]
        )
        return to_point(_de_boor(flat, self.degree, homogeneous, parameter))

    def to_nurbs(self) -> NurbsCurve:
        return self


def _de_boor(
    flat_knots: np.ndarray, degree: int, homogeneous: np.ndarray, parameter: float
) -> np.ndarray:
    """Evaluate a B-spline over homogeneous control points and project the result"""
    count = len(homogeneous)
    span = int(np.searchsorted(flat_knots, parameter, side="right")) - 1
    span = min(max(span, degree), count - 1)
    points = [homogeneous[span - degree + j].copy() for j in range(degree + 1)]
    for r in range(1, degree + 1):
        for j in range(degree, r - 1, -1):
            low = flat_knots[span - degree + j]
            high = flat_knots[span + 1 + j - r]
            alpha = 0.0 if high == low else (parameter - low) / (high - low)
            points[j] = (1.0 - alpha) * points[j - 1] + alpha * points[j]
    result = points[degree]
    return result[:3] / result[3]


class ArcCurve(Curve):
    """ArcCurve

    A circular arc, or a full circle when the sweep is 2π.

    Args:
        center (VectorLike): arc center
        radius (float): arc radius
        normal (VectorLike, optional): plane normal. Defaults to (0, 0, 1).
        x_axis (VectorLike, optional): direction of angle zero, projected into the arc's plane.
            Defaults to (1, 0, 0).
        start_angle (float, optional): radians. Defaults to 0.
        end_angle (float, optional): radians. Defaults to 2π.

    Raises:
        ValueError: non-positive radius
        ValueError: x_axis parallel to normal
    """

    def __init__(
        self,
        center: VectorLike,
        radius: float,
        normal: VectorLike = (0, 0, 1),
        x_axis: VectorLike = (1, 0, 0),
        start_angle: float = 0.0,
        end_angle: float = 2 * math.pi,
    ):
        if radius <= 0:
            raise ValueError(f"Radius must be positive, got {radius}")
        self.center = to_point(center)
        self.radius = float(radius)
        self.normal = unit_vector(normal)
        x_dir = to_array(x_axis)
        x_dir = x_dir - np.dot(x_dir, self.normal) * self.normal
        if np.linalg.norm(x_dir) < 1e-9:
            raise ValueError("x_axis must not be parallel to the normal")
        self.x_axis = x_dir / np.linalg.norm(x_dir)
        self.y_axis = np.cross(self.normal, self.x_axis)
        self.start_angle = float(start_angle)
        self.end_angle = float(end_angle)

    def __repr__(self) -> str:
        return (
            f"ArcCurve(center={self.center!r}, radius={self.radius:.6g}, "
            f"angles=({self.start_angle:.6g}, {self.end_angle:.6g}))"
        )

    def to_nurbs(self) -> NurbsCurve:
        """Exact rational quadratic form"""
        coefficients, weights, knots = unit_arc(self.start_angle, self.end_angle)
        center = to_array(self.center)
        points = [
            center + self.radius * (a * self.x_axis + b * self.y_axis)
            for a, b in coefficients
        ]
        return NurbsCurve(2, points, weights, knots)


class PolylineCurve(Curve):
    """PolylineCurve

    An explicit chain of points joined by straight segments. The chain is closed when it
    holds at least four points and the last one repeats the first.

    Args:
        points (Iterable[VectorLike]): the chain
    """

    def __init__(self, points: Iterable[VectorLike]):
        self.points = [to_point(p) for p in points]

    def __repr__(self) -> str:
        return f"PolylineCurve({len(self.points)} points, closed={self.is_closed})"

    @property
    def start_point(self) -> Point3d:
        return self.points[0]

    @property
    def end_point(self) -> Point3d:
        return self.points[-1]

    @property
    def is_closed(self) -> bool:
        return len(self.points) >= 4 and super().is_closed

    def to_nurbs(self) -> NurbsCurve:
        """Degree one NURBS parameterized by point index"""
        return NurbsCurve(1, self.points, knots=range(len(self.points)))


class PolyCurve(Curve):
    """PolyCurve

    An ordered composite of segment curves; segments may themselves be poly curves.

    Args:
        segments (Sequence[Curve]): the segments in order

    Raises:
        ValueError: no segments
    """

    def __init__(self, segments: Sequence[Curve]):
        if not segments:
            raise ValueError("A PolyCurve needs at least one segment")
        self.segments = list(segments)

    def __repr__(self) -> str:
        return f"PolyCurve({len(self.segments)} segments)"

    @property
    def start_point(self) -> Point3d:
        return self.segments[0].start_point

    @property
    def end_point(self) -> Point3d:
        return self.segments[-1].end_point

    def explode(self) -> list[Curve]:
        """The immediate segments of this curve"""
        return list(self.segments)
