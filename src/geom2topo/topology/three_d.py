"""
geom2topo topology

name: three_d.py
by:   Gumyr
date: March 3rd 2025

desc:

This module provides the three-dimensional topology of geom2topo: the `Cell`, a volume bounded
by a closed shell.

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

import OCP.TopAbs as ta
from OCP.BRepGProp import BRepGProp
from OCP.GProp import GProp_GProps
from OCP.ShapeFix import ShapeFix_Solid
from OCP.Standard import Standard_Failure
from OCP.TopoDS import TopoDS_Shape, TopoDS_Solid
from typing_extensions import Self

from geom2topo.errors import DegenerateTopologyError
from geom2topo.geometry import logger

from .one_d import Edge, Wire
from .shape_core import Shape, downcast, shapetype
from .two_d import Face, Shell
from .zero_d import Vertex


class Cell(Shape[TopoDS_Solid]):
    """A Cell is a volume of space bounded by a closed Shell."""

    # ---- Constructor ----

    def __init__(self, obj: TopoDS_Solid | None = None):
        super().__init__(obj)

    # ---- Properties ----

    @property
    def _dim(self) -> int:
        """Dimension of Cells"""
        return 3

    @property
    def volume(self) -> float:
        """volume - the volume of this Cell"""
        properties = GProp_GProps()
        BRepGProp.VolumeProperties_s(self.wrapped, properties)
        return properties.Mass()

    # ---- Class Methods ----

    @classmethod
    def by_shell(cls, shell: Shell) -> Cell:
        """by_shell

        Create the Cell enclosed by a closed Shell. The faces are oriented so that the
        Cell's volume is positive.

        Args:
            shell (Shell): closed boundary

        Raises:
            DegenerateTopologyError: the shell isn't closed
            DegenerateTopologyError: OCCT couldn't build the cell

        Returns:
            Cell: the enclosed volume
        """
        if not shell.is_closed:
            raise DegenerateTopologyError("A cell can only be built from a closed shell")
        try:
            topods_solid = ShapeFix_Solid().SolidFromShell(shell.wrapped)
        except Standard_Failure as err:
            raise DegenerateTopologyError("Error building a cell from the shell") from err

        logger.debug("built cell from shell of %d faces", len(shell.faces()))
        return cls(topods_solid)

    @classmethod
    def cast(cls, obj: TopoDS_Shape) -> Self:
        "Returns the right type of wrapper, given a OCCT object"

        # define the shape lookup table for casting
        constructor_lut = {
            ta.TopAbs_VERTEX: Vertex,
            ta.TopAbs_EDGE: Edge,
            ta.TopAbs_WIRE: Wire,
            ta.TopAbs_FACE: Face,
            ta.TopAbs_SHELL: Shell,
            ta.TopAbs_SOLID: Cell,
        }

        shape_type = shapetype(obj)
        # NB downcast is needed to handle TopoDS_Shape types
        return constructor_lut[shape_type](downcast(obj))
