"""
geom2topo geometry

name: core.py
by:   Gumyr
date: March 3rd 2025

desc:

This module holds the shared foundation of the host geometry model: the package logger, the
default conversion tolerance and the `Point3d` type used by every curve, surface, brep and mesh
description.

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

import logging
from typing import Iterable, NamedTuple, Union

import numpy as np

# Create a geom2topo logger to distinguish these logs from application logs.
# If the user doesn't configure logging, all INFO, WARNING, ERROR, and CRITICAL
# messages are lost; configure the "geom2topo" logger to see them.
logging.getLogger("geom2topo").addHandler(logging.NullHandler())
logger = logging.getLogger("geom2topo")

TOLERANCE = 1e-4
"""Default coincidence and trimming tolerance of the conversion pipeline"""


class Point3d(NamedTuple):
    """A location in 3D space and the host's point geometry"""

    X: float
    Y: float
    Z: float

    def __repr__(self) -> str:
        return f"Point3d({self.X:.6g}, {self.Y:.6g}, {self.Z:.6g})"

    def distance_to(self, other: VectorLike) -> float:
        """Euclidean distance between this point and other"""
        return float(np.linalg.norm(to_array(other) - to_array(self)))


VectorLike = Union[Point3d, tuple[float, float], tuple[float, float, float], Iterable[float]]


def to_array(value: VectorLike) -> np.ndarray:
    """Convert a VectorLike into a 3 element float array, padding 2D input with Z=0"""
    array = np.asarray(tuple(value), dtype=float)
    if array.shape == (2,):
        array = np.append(array, 0.0)
    if array.shape != (3,):
        raise ValueError(f"Expected two or three coordinates, got {tuple(value)}")
    return array


def to_point(value: VectorLike) -> Point3d:
    """Convert a VectorLike into a Point3d"""
    return Point3d(*(float(c) for c in to_array(value)))


def unit_vector(value: VectorLike) -> np.ndarray:
    """Normalized copy of value

    Raises:
        ValueError: zero length vector
    """
    array = to_array(value)
    length = np.linalg.norm(array)
    if length < 1e-12:
        raise ValueError("Can't normalize a zero length vector")
    return array / length
