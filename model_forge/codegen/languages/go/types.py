"""
Go-specific type system for code generation.

Maps inferred JSON types to Go types, applying the pointer options.
"""

from dataclasses import dataclass, field
from typing import Any, FrozenSet, List

from ...core.schema import Field, FieldType, TypeInfo
from .config import GoOptions
from .naming import to_go_name

INTERFACE_TYPE = "interface{}"
TIME_TYPE = "time.Time"


@dataclass(frozen=True)
class GoType:
    """
    Immutable representation of a Go type.

    Carries the rendered type name plus the imports it requires.
    """

    name: str  # The Go type name (e.g., "string", "*User")
    imports_needed: FrozenSet[str] = field(default_factory=frozenset)

    @property
    def is_pointer(self) -> bool:
        return self.name.startswith("*")

    @property
    def is_slice(self) -> bool:
        return self.name.startswith("[]")

    @property
    def accepts_pointer(self) -> bool:
        """Slices, maps and interface{} are never wrapped in a pointer."""
        return not (
            self.is_pointer
            or self.is_slice
            or self.name.startswith("map[")
            or self.name == INTERFACE_TYPE
        )

    def as_pointer(self) -> "GoType":
        """Return a pointer version of this type."""
        if not self.accepts_pointer:
            return self
        return GoType(name=f"*{self.name}", imports_needed=self.imports_needed)

    def as_slice(self) -> "GoType":
        return GoType(name=f"[]{self.name}", imports_needed=self.imports_needed)


def _has_mixed_numbers(values: List[Any]) -> bool:
    kinds = {
        "int" if value % 1 == 0 else "float"
        for value in values
        if isinstance(value, (int, float)) and not isinstance(value, bool)
    }
    return kinds == {"int", "float"}


class GoTypeMapper:
    """Maps schema fields to Go types according to :class:`GoOptions`."""

    def __init__(self, options: GoOptions):
        self.options = options

    def map_field_type(self, field: Field) -> GoType:
        """Go type for a struct field, pointer applied when configured."""
        go_type = self._map(field.type_info)
        if self.options.use_pointers:
            return go_type.as_pointer()
        return go_type

    def _map(self, info: TypeInfo) -> GoType:
        if info.type == FieldType.DATETIME:
            return GoType(TIME_TYPE, frozenset({"time"}))
        if info.type == FieldType.NULL:
            return GoType(INTERFACE_TYPE)
        if info.type == FieldType.STRING:
            return GoType("string")
        if info.type == FieldType.INTEGER:
            return GoType("int")
        if info.type == FieldType.FLOAT:
            return GoType("float64")
        if info.type == FieldType.BOOLEAN:
            return GoType("bool")
        if info.type == FieldType.OBJECT:
            return GoType(to_go_name(info.shape.name))
        if info.type == FieldType.ARRAY:
            return self._map_slice(info)
        return GoType(INTERFACE_TYPE)

    def _map_slice(self, info: TypeInfo) -> GoType:
        values = info.sample
        if info.element is None or any(value is None for value in values):
            return GoType(INTERFACE_TYPE).as_slice()

        if _has_mixed_numbers(values):
            element = GoType("float64")
        else:
            element = self._map(info.element)

        if self.options.use_pointers or self.options.use_array_of_pointers:
            element = element.as_pointer()

        return element.as_slice()

    def get_all_imports(self, go_types: List[GoType]) -> List[str]:
        """Collect the sorted set of imports needed by ``go_types``."""
        imports = set()
        for go_type in go_types:
            imports.update(go_type.imports_needed)
        return sorted(imports)
