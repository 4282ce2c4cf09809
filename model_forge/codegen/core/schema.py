"""
Core schema representation for code generation.

Walks a parsed JSON document once and produces an ordered list of named
shapes (one per object or array-of-object subtree) that every language
generator renders from.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional
from enum import Enum

from .naming import is_iso_date_string, singularize, to_pascal_case


class FieldType(Enum):
    """JSON value kinds recognised during type inference."""

    NULL = "null"
    BOOLEAN = "boolean"
    INTEGER = "integer"
    FLOAT = "float"
    STRING = "string"
    DATETIME = "datetime"
    ARRAY = "array"
    OBJECT = "object"


def classify_value(value: Any) -> FieldType:
    """
    Classify a single JSON value.

    Booleans are checked before numbers because ``bool`` is an ``int``
    subclass in Python. A number counts as an integer when it has no
    fractional part, so ``3.0`` is an integer just like ``3``.
    """
    if value is None:
        return FieldType.NULL
    if isinstance(value, bool):
        return FieldType.BOOLEAN
    if isinstance(value, (int, float)):
        return FieldType.INTEGER if value % 1 == 0 else FieldType.FLOAT
    if isinstance(value, str):
        return FieldType.DATETIME if is_iso_date_string(value) else FieldType.STRING
    if isinstance(value, list):
        return FieldType.ARRAY
    if isinstance(value, dict):
        return FieldType.OBJECT
    return FieldType.NULL


@dataclass
class TypeInfo:
    """Inferred type of a sampled JSON value."""

    type: FieldType
    sample: Any = None

    # For arrays: type of the first element, None for an empty array
    element: Optional["TypeInfo"] = None

    # For objects: the discovered shape this value is rendered as
    shape: Optional["Schema"] = None

    @property
    def is_array(self) -> bool:
        return self.type == FieldType.ARRAY

    @property
    def is_object(self) -> bool:
        return self.type == FieldType.OBJECT

    @property
    def is_empty_array(self) -> bool:
        return self.type == FieldType.ARRAY and self.element is None

    @property
    def is_object_array(self) -> bool:
        """True for an array whose sampled element is an object."""
        return self.element is not None and self.element.is_object

    def innermost(self) -> "TypeInfo":
        """Follow array element types down to the first non-array type."""
        current = self
        while current.is_array and current.element is not None:
            current = current.element
        return current


@dataclass
class Field:
    """Represents a single field in a data structure."""

    name: str  # Original JSON key, used for serialization annotations
    type_info: TypeInfo

    @property
    def type(self) -> FieldType:
        return self.type_info.type

    @property
    def value(self) -> Any:
        return self.type_info.sample

    @property
    def nested_schema(self) -> Optional["Schema"]:
        return self.type_info.shape if self.type_info.is_object else None

    @property
    def array_element_schema(self) -> Optional["Schema"]:
        inner = self.type_info.innermost()
        if self.type_info.is_array and inner.is_object:
            return inner.shape
        return None


@dataclass
class Schema:
    """A named object shape discovered in the input."""

    name: str
    data: Dict[str, Any]
    fields: List[Field] = field(default_factory=list)
    parent: Optional["Schema"] = None

    def add_field(self, field: Field) -> None:
        """Add a field to this schema."""
        self.fields.append(field)

    def get_field(self, name: str) -> Optional[Field]:
        """Get field by original JSON key."""
        for field in self.fields:
            if field.name == name:
                return field
        return None

    @property
    def depth(self) -> int:
        depth = 0
        node = self.parent
        while node is not None:
            depth += 1
            node = node.parent
        return depth


# name_nested(parent, key, is_array_item) -> canonical shape name
NestedNamer = Callable[[Schema, str, bool], str]


def flat_nested_name(parent: Schema, key: str, is_array_item: bool) -> str:
    """Default naming: ``preferences`` -> ``Preferences``, ``posts`` -> ``Post``."""
    return to_pascal_case(singularize(key) if is_array_item else key)


def qualified_nested_name(parent: Schema, key: str, is_array_item: bool) -> str:
    """Path-qualified naming: ``User`` + ``profile`` -> ``User_profile``."""
    return f"{parent.name}_{singularize(key) if is_array_item else key}"


class DiscoveryError(Exception):
    """Raised when the input exceeds the configured nesting depth."""

    pass


class ShapeDiscovery:
    """
    Single-pass, call-local discovery of every object shape in a document.

    Shapes are registered before their children are visited, so the
    resulting order is a pre-order walk with the root first. A derived name
    that has already been registered is reused as-is; the first subtree
    seen under a name wins and later subtrees with that name are not
    inspected.
    """

    def __init__(
        self,
        sort_keys: bool = False,
        name_nested: Optional[NestedNamer] = None,
        max_depth: Optional[int] = None,
    ):
        self.sort_keys = sort_keys
        self.name_nested = name_nested or flat_nested_name
        self.max_depth = max_depth
        self._discovered: Dict[str, Schema] = {}
        self._order: List[Schema] = []

    def discover(self, data: Dict[str, Any], root_name: str) -> List[Schema]:
        """Discover all shapes reachable from ``data``; root first."""
        self._discovered = {}
        self._order = []
        self._visit(root_name, data, parent=None)
        return list(self._order)

    def _visit(
        self, name: str, data: Dict[str, Any], parent: Optional[Schema]
    ) -> Schema:
        if name in self._discovered:
            return self._discovered[name]

        schema = Schema(name=name, data=data, parent=parent)
        if self.max_depth is not None and schema.depth > self.max_depth:
            raise DiscoveryError(
                f"JSON nesting exceeds the maximum depth of {self.max_depth}"
            )

        self._discovered[name] = schema
        self._order.append(schema)

        keys = sorted(data) if self.sort_keys else list(data)
        for key in keys:
            if key == "":
                continue
            schema.add_field(Field(name=key, type_info=self._infer(data[key], key, schema)))

        return schema

    def _infer(self, value: Any, key: str, owner: Schema, is_item: bool = False) -> TypeInfo:
        field_type = classify_value(value)
        info = TypeInfo(type=field_type, sample=value)

        if field_type == FieldType.OBJECT:
            shape_name = self.name_nested(owner, key, is_item)
            info.shape = self._visit(shape_name, value, parent=owner)
        elif field_type == FieldType.ARRAY and value:
            # Each array level singularizes the key once more
            item_key = singularize(key) if is_item else key
            info.element = self._infer(value[0], item_key, owner, is_item=True)

        return info


def discover_shapes(
    data: Dict[str, Any],
    root_name: str,
    sort_keys: bool = False,
    name_nested: Optional[NestedNamer] = None,
    max_depth: Optional[int] = None,
) -> List[Schema]:
    """
    Convenience wrapper around :class:`ShapeDiscovery`.

    Args:
        data: Parsed JSON object
        root_name: Canonical name for the root shape
        sort_keys: Visit keys alphabetically instead of insertion order
        name_nested: Naming hook for nested shapes
        max_depth: Optional nesting guard; None means unbounded

    Returns:
        Shapes in discovery order, root first
    """
    discovery = ShapeDiscovery(sort_keys, name_nested, max_depth)
    return discovery.discover(data, root_name)
