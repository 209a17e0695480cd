"""
geom2topo topology

name: shape_core.py
by:   Gumyr
date: March 3rd 2025

desc:

This module defines the foundation of the geom2topo topology classes: the `Shape` base class
that wraps an OpenCascade `TopoDS_Shape`, the `ShapeList` container and the helper functions
that downcast, explore and sew OCCT shapes.

Key Features:
- **Shape Base Class:** holds the wrapped OCCT object and implements the topological queries
  shared by every dimension (sub-shape extraction, validity, sameness, geometry type).
- **Topology Display:** `show_topology` renders the internal structure of a shape as an
  anytree tree, one line per sub-shape.
- **OCCT Helpers:** downcasting, unique sub-shape exploration, compound unwrapping and sewing.

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

from abc import abstractmethod
from typing import (
    cast as tcast,
    Any,
    Generic,
    Literal,
    Optional,
    SupportsIndex,
    TypeVar,
    overload,
    TYPE_CHECKING,
)

from collections.abc import Iterable

import OCP.GeomAbs as ga
import OCP.TopAbs as ta
from OCP.BRepAdaptor import BRepAdaptor_Curve, BRepAdaptor_Surface
from OCP.BRepBndLib import BRepBndLib
from OCP.BRepBuilderAPI import BRepBuilderAPI_Sewing
from OCP.BRepCheck import BRepCheck_Analyzer
from OCP.BRepGProp import BRepGProp
from OCP.Bnd import Bnd_Box
from OCP.GProp import GProp_GProps
from OCP.TopAbs import TopAbs_ShapeEnum
from OCP.TopExp import TopExp
from OCP.TopTools import TopTools_IndexedMapOfShape
from OCP.TopoDS import (
    TopoDS,
    TopoDS_Compound,
    TopoDS_Edge,
    TopoDS_Face,
    TopoDS_Iterator,
    TopoDS_Shape,
)
from anytree import NodeMixin, RenderTree
from typing_extensions import Self

from geom2topo.build_enums import GeomType
from geom2topo.geometry import TOLERANCE


if TYPE_CHECKING:  # pragma: no cover
    from .zero_d import Vertex  # pylint: disable=R0801
    from .one_d import Edge, Wire  # pylint: disable=R0801
    from .two_d import Face, Shell  # pylint: disable=R0801
    from .three_d import Cell  # pylint: disable=R0801
    from .composite import Cluster  # pylint: disable=R0801

Shapes = Literal["Vertex", "Edge", "Wire", "Face", "Shell", "Cell", "Cluster"]
TOPODS = TypeVar("TOPODS", bound=TopoDS_Shape)
T = TypeVar("T", bound="Shape")

# relative error bound of the adaptive surface integration
AREA_PRECISION = 1e-7


class Shape(Generic[TOPODS]):
    """Shape

    Base class for all topologies such as Vertex, Edge, Face, Cell, etc.

    Args:
        obj (TopoDS_Shape, optional): OCCT object. Defaults to None.

    Attributes:
        wrapped (TopoDS_Shape): the OCP object
    """

    shape_LUT = {
        ta.TopAbs_VERTEX: "Vertex",
        ta.TopAbs_EDGE: "Edge",
        ta.TopAbs_WIRE: "Wire",
        ta.TopAbs_FACE: "Face",
        ta.TopAbs_SHELL: "Shell",
        ta.TopAbs_SOLID: "Cell",
        ta.TopAbs_COMPOUND: "Cluster",
    }

    inverse_shape_LUT = {v: k for k, v in shape_LUT.items()}

    downcast_LUT = {
        ta.TopAbs_VERTEX: TopoDS.Vertex_s,
        ta.TopAbs_EDGE: TopoDS.Edge_s,
        ta.TopAbs_WIRE: TopoDS.Wire_s,
        ta.TopAbs_FACE: TopoDS.Face_s,
        ta.TopAbs_SHELL: TopoDS.Shell_s,
        ta.TopAbs_SOLID: TopoDS.Solid_s,
        ta.TopAbs_COMPOUND: TopoDS.Compound_s,
        ta.TopAbs_COMPSOLID: TopoDS.CompSolid_s,
    }

    geom_LUT_EDGE: dict[ga.GeomAbs_CurveType, GeomType] = {
        ga.GeomAbs_Line: GeomType.LINE,
        ga.GeomAbs_Circle: GeomType.CIRCLE,
        ga.GeomAbs_Ellipse: GeomType.ELLIPSE,
        ga.GeomAbs_Hyperbola: GeomType.HYPERBOLA,
        ga.GeomAbs_Parabola: GeomType.PARABOLA,
        ga.GeomAbs_BezierCurve: GeomType.BEZIER,
        ga.GeomAbs_BSplineCurve: GeomType.BSPLINE,
        ga.GeomAbs_OffsetCurve: GeomType.OFFSET,
        ga.GeomAbs_OtherCurve: GeomType.OTHER,
    }
    geom_LUT_FACE: dict[ga.GeomAbs_SurfaceType, GeomType] = {
        ga.GeomAbs_Plane: GeomType.PLANE,
        ga.GeomAbs_Cylinder: GeomType.CYLINDER,
        ga.GeomAbs_Cone: GeomType.CONE,
        ga.GeomAbs_Sphere: GeomType.SPHERE,
        ga.GeomAbs_Torus: GeomType.TORUS,
        ga.GeomAbs_BezierSurface: GeomType.BEZIER,
        ga.GeomAbs_BSplineSurface: GeomType.BSPLINE,
        ga.GeomAbs_SurfaceOfRevolution: GeomType.REVOLUTION,
        ga.GeomAbs_SurfaceOfExtrusion: GeomType.EXTRUSION,
        ga.GeomAbs_OffsetSurface: GeomType.OFFSET,
        ga.GeomAbs_OtherSurface: GeomType.OTHER,
    }

    class _DisplayNode(NodeMixin):
        """Used to create anytree structures from TopoDS_Shapes"""

        def __init__(
            self,
            label: str = "",
            address: int | None = None,
            position: tuple[float, float, float] | None = None,
            parent: Shape._DisplayNode | None = None,
        ):
            self.label = label
            self.address = address
            self.position = position
            self.parent = parent

    _ordered_shapes = [
        TopAbs_ShapeEnum.TopAbs_COMPOUND,
        TopAbs_ShapeEnum.TopAbs_SOLID,
        TopAbs_ShapeEnum.TopAbs_SHELL,
        TopAbs_ShapeEnum.TopAbs_FACE,
        TopAbs_ShapeEnum.TopAbs_WIRE,
        TopAbs_ShapeEnum.TopAbs_EDGE,
        TopAbs_ShapeEnum.TopAbs_VERTEX,
    ]
    # ---- Constructor ----

    def __init__(self, obj: TopoDS_Shape | None = None):
        self.wrapped: TOPODS | None = (
            tcast(Optional[TOPODS], downcast(obj)) if obj is not None else None
        )

    # ---- Properties ----

    @property
    @abstractmethod
    def _dim(self) -> int | None:
        """Dimension of the object"""

    @property
    def area(self) -> float:
        """area - the surface area of all faces in this Shape"""
        if self.wrapped is None:
            return 0.0
        return _topods_area(self.wrapped)

    @property
    def geom_type(self) -> GeomType:
        """Gets the underlying geometry type.

        Returns:
            GeomType: The geometry type of the shape

        """
        if self.wrapped is None:
            raise ValueError("Cannot determine geometry type of an empty shape")

        shape: TopAbs_ShapeEnum = shapetype(self.wrapped)

        if shape == ta.TopAbs_EDGE:
            geom = Shape.geom_LUT_EDGE[
                BRepAdaptor_Curve(tcast(TopoDS_Edge, self.wrapped)).GetType()
            ]
        elif shape == ta.TopAbs_FACE:
            geom = Shape.geom_LUT_FACE[
                BRepAdaptor_Surface(tcast(TopoDS_Face, self.wrapped)).GetType()
            ]
        else:
            geom = GeomType.OTHER

        return geom

    # ---- Class Methods ----

    @classmethod
    @abstractmethod
    def cast(cls: type[Self], obj: TopoDS_Shape) -> Self:
        """Returns the right type of wrapper, given a OCCT object"""

    # ---- Static Methods ----

    @staticmethod
    def _build_tree(
        shape: TopoDS_Shape,
        tree: list[_DisplayNode],
        parent: _DisplayNode | None = None,
        limit: TopAbs_ShapeEnum = TopAbs_ShapeEnum.TopAbs_VERTEX,
    ) -> list[_DisplayNode]:
        """Create an anytree copy of the TopoDS_Shape structure"""

        obj_type = Shape.shape_LUT[shape.ShapeType()]
        tree.append(
            Shape._DisplayNode(obj_type, id(shape), _topods_center(shape), parent)
        )
        iterator = TopoDS_Iterator()
        iterator.Initialize(shape)
        parent_node = tree[-1]
        while iterator.More():
            child = iterator.Value()
            if Shape._ordered_shapes.index(
                child.ShapeType()
            ) <= Shape._ordered_shapes.index(limit):
                Shape._build_tree(child, tree, parent_node, limit)
            iterator.Next()
        return tree

    @staticmethod
    def _show_tree(root_node: _DisplayNode) -> str:
        """Display a TopoDS_Shape anytree structure"""

        # Calculate the size of the tree labels
        size_tuples = [(node.height, len(node.label)) for node in root_node.descendants]
        size_tuples.append((root_node.height, len(root_node.label)))
        # pylint: disable=cell-var-from-loop
        size_tuples_per_level = [
            list(filter(lambda ll: ll[0] == l, size_tuples))
            for l in range(root_node.height + 1)
        ]
        max_sizes_per_level = [
            max(4, max(l[1] for l in level)) for level in size_tuples_per_level
        ]
        level_sizes_per_level = [
            l + i * 4 for i, l in enumerate(reversed(max_sizes_per_level))
        ]
        tree_label_width = max(level_sizes_per_level) + 1

        # Build the tree line by line
        result = ""
        for pre, _fill, node in RenderTree(root_node):
            treestr = f"{pre}{node.label}".ljust(tree_label_width)
            center = ", ".join(f"{c:.3f}" for c in node.position)
            result += f"{treestr}at {node.address:#x}, Center({center})\n"
        return result

    @staticmethod
    def get_shape_list(shape: Shape, entity_type: Shapes) -> ShapeList:
        """Helper to extract entities of a specific type from a shape."""
        if shape.wrapped is None:
            return ShapeList()
        return ShapeList([shape.__class__.cast(i) for i in shape.entities(entity_type)])

    # ---- Instance Methods ----

    def __repr__(self) -> str:
        if self.wrapped is None:
            return f"{self.__class__.__name__}()"
        return f"{self.__class__.__name__} at {id(self):#x}"

    def cells(self) -> ShapeList[Cell]:
        """cells - all the cells in this Shape"""
        return Shape.get_shape_list(self, "Cell")

    def edges(self) -> ShapeList[Edge]:
        """edges - all the edges in this Shape"""
        return Shape.get_shape_list(self, "Edge")

    def entities(self, topo_type: Shapes) -> list[TopoDS_Shape]:
        """Return all of the TopoDS sub entities of the given type"""
        if self.wrapped is None:
            return []
        return _topods_entities(self.wrapped, topo_type)

    def faces(self) -> ShapeList[Face]:
        """faces - all the faces in this Shape"""
        return Shape.get_shape_list(self, "Face")

    def is_null(self) -> bool:
        """Returns true if this shape is null. In other words, it references no
        underlying shape with the potential to be given a location and an
        orientation.
        """
        return self.wrapped is None or self.wrapped.IsNull()

    def is_same(self, other: Shape) -> bool:
        """Returns True if other and this shape are same, i.e. if they share the
        same TShape with the same Locations. Orientations may differ.

        Args:
          other: Shape:

        Returns:
          bool: shapes are the same
        """
        if self.wrapped is None or other.wrapped is None:
            return False
        return self.wrapped.IsSame(other.wrapped)

    def is_valid(self) -> bool:
        """Returns True if no defect is detected on the shape S or any of its
        subshapes. See the OCCT docs on BRepCheck_Analyzer::IsValid for a full
        description of what is checked.
        """
        if self.wrapped is None:
            return True
        chk = BRepCheck_Analyzer(self.wrapped)
        chk.SetParallel(True)
        return chk.IsValid()

    def shape_type(self) -> Shapes:
        """Return the shape type string for this class"""
        return tcast(Shapes, Shape.shape_LUT[shapetype(self.wrapped)])

    def shells(self) -> ShapeList[Shell]:
        """shells - all the shells in this Shape"""
        return Shape.get_shape_list(self, "Shell")

    def show_topology(self, limit_class: Shapes = "Vertex") -> str:
        """Display internal topology

        Display the internal structure of a Shape, one line per sub-shape. Example:

        .. code::

            >>> print(shell.show_topology("Face"))
            Shell          at 0x7f4a4cafafa0, Center(0.500, 0.500, 0.000)
            ├── Face       at 0x7f4a4cafafd0, Center(0.250, 0.250, 0.000)
            └── Face       at 0x7f4a4cafaee0, Center(0.750, 0.750, 0.000)

        Args:
            limit_class: type of displayed leaf node. Defaults to 'Vertex'.

        Raises:
            ValueError: the shape is empty

        Returns:
            str: tree representation of internal structure
        """
        if self.is_null():
            raise ValueError("Can't show the topology of an empty shape")
        tree = Shape._build_tree(
            tcast(TopoDS_Shape, self.wrapped),
            tree=[],
            limit=Shape.inverse_shape_LUT[limit_class],
        )
        return Shape._show_tree(tree[0])

    def vertices(self) -> ShapeList[Vertex]:
        """vertices - all the vertices in this Shape"""
        return Shape.get_shape_list(self, "Vertex")

    def wires(self) -> ShapeList[Wire]:
        """wires - all the wires in this Shape"""
        return Shape.get_shape_list(self, "Wire")


class ShapeList(list[T]):
    """Subclass of list with convenience accessors for topologies"""

    # ---- Properties ----

    @property
    def first(self) -> T:
        """First element in the ShapeList"""
        return self[0]

    @property
    def last(self) -> T:
        """Last element in the ShapeList"""
        return self[-1]

    # ---- Instance Methods ----

    def __add__(self, other: ShapeList) -> ShapeList[T]:  # type: ignore
        """Combine two ShapeLists together operator +"""
        return ShapeList(list(self) + list(other))

    @overload
    def __getitem__(self, key: SupportsIndex) -> T: ...

    @overload
    def __getitem__(self, key: slice) -> ShapeList[T]: ...

    def __getitem__(self, key: SupportsIndex | slice) -> T | ShapeList[T]:
        """Return slices of ShapeList as ShapeList"""
        if isinstance(key, slice):
            return ShapeList(list(self).__getitem__(key))
        return list(self).__getitem__(key)

    def filter_by(self, geom_type: GeomType) -> ShapeList[T]:
        """Filter the list by the geometry type of its members"""
        return ShapeList([s for s in self if s.geom_type == geom_type])


def _sew_topods_faces(
    faces: Iterable[TopoDS_Face], tolerance: float = TOLERANCE
) -> TopoDS_Shape:
    """Sew faces into a shell if possible"""
    shell_builder = BRepBuilderAPI_Sewing(tolerance)
    for face in faces:
        shell_builder.Add(face)
    shell_builder.Perform()
    return downcast(shell_builder.SewedShape())


def _topods_area(shape: TopoDS_Shape) -> float:
    """Surface area of shape; a face whose outer wire runs against the surface
    orientation has a negative area"""
    properties = GProp_GProps()
    BRepGProp.SurfaceProperties_s(shape, properties, AREA_PRECISION)
    return properties.Mass()


def _topods_center(shape: TopoDS_Shape) -> tuple[float, float, float]:
    """Center of the bounding box of a TopoDS_Shape"""
    bounding_box = Bnd_Box()
    BRepBndLib.Add_s(shape, bounding_box)
    x_min, y_min, z_min, x_max, y_max, z_max = bounding_box.Get()
    return ((x_min + x_max) / 2, (y_min + y_max) / 2, (z_min + z_max) / 2)


def _topods_entities(shape: TopoDS_Shape, topo_type: Shapes) -> list[TopoDS_Shape]:
    """Return the unique TopoDS_Shapes of topo_type from this TopoDS_Shape"""
    shape_map = TopTools_IndexedMapOfShape()
    TopExp.MapShapes_s(shape, Shape.inverse_shape_LUT[topo_type], shape_map)
    return [downcast(shape_map.FindKey(i)) for i in range(1, shape_map.Extent() + 1)]


def downcast(obj: TopoDS_Shape) -> TopoDS_Shape:
    """Downcasts a TopoDS object to suitable specialized type

    Args:
      obj: TopoDS_Shape:

    Returns:
      TopoDS_Shape: the specialized object
    """

    f_downcast: Any = Shape.downcast_LUT[shapetype(obj)]
    return_value = f_downcast(obj)

    return return_value


def get_top_level_topods_shapes(
    topods_shape: TopoDS_Shape | None,
) -> list[TopoDS_Shape]:
    """
    Retrieve the first level of child shapes from the shape.

    This method collects all the non-compound shapes directly contained in the
    current shape. If the wrapped shape is a `TopoDS_Compound`, it traverses
    its immediate children and collects all shapes that are not further nested
    compounds. Nested compounds are traversed to gather their non-compound elements
    without returning the nested compound itself.

    Returns:
        list[TopoDS_Shape]: A list of all first-level non-compound child shapes.
    """
    if topods_shape is None:
        return []

    first_level_shapes = []
    stack = [topods_shape]

    while stack:
        current_shape = stack.pop()
        if isinstance(current_shape, TopoDS_Compound):
            iterator = TopoDS_Iterator()
            iterator.Initialize(current_shape)
            while iterator.More():
                child_shape = downcast(iterator.Value())
                if isinstance(child_shape, TopoDS_Compound):
                    # Traverse further into the compound
                    stack.append(child_shape)
                else:
                    first_level_shapes.append(child_shape)
                iterator.Next()
        else:
            first_level_shapes.append(current_shape)

    return first_level_shapes


def shapetype(obj: TopoDS_Shape | None) -> TopAbs_ShapeEnum:
    """Return TopoDS_Shape's TopAbs_ShapeEnum"""
    if obj is None or obj.IsNull():
        raise ValueError("Null TopoDS_Shape object")

    return obj.ShapeType()


def unwrap_topods_compound(
    compound: TopoDS_Compound, fully: bool = True
) -> TopoDS_Compound | TopoDS_Shape:
    """Strip unnecessary Compound wrappers

    Args:
        compound (TopoDS_Compound): The TopoDS_Compound to unwrap.
        fully (bool, optional): return base shape without any TopoDS_Compound
            wrappers (otherwise one TopoDS_Compound is left). Defaults to True.

    Returns:
        TopoDS_Compound | TopoDS_Shape: base shape
    """
    if compound.NbChildren() == 1:
        iterator = TopoDS_Iterator(compound)
        single_element = downcast(iterator.Value())

        # If the single element is another TopoDS_Compound, unwrap it recursively
        if isinstance(single_element, TopoDS_Compound):
            return unwrap_topods_compound(single_element, fully)

        return single_element if fully else compound

    # If there are no elements or more than one element, return TopoDS_Compound
    return compound
