"""
SQL schema generator implementation.

Generates ``CREATE TABLE`` statements: nested objects become referenced
tables, arrays of objects become child tables pointing back at their
parent, and primitive arrays are stored as JSON columns.
"""

import re
from dataclasses import dataclass
from typing import Dict, List, Optional

from ....logging_config import get_logger
from ...core.config import GeneratorOptions
from ...core.generator import CodeGenerator
from ...core.naming import to_snake_case
from ...core.schema import Field, FieldType, Schema

logger = get_logger(__name__)

# Looser than the shared ISO check: any string that starts like a timestamp
DATETIME_PREFIX = re.compile(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}")

PRIMARY_KEY = "  id INTEGER PRIMARY KEY AUTOINCREMENT"


@dataclass
class SqlOptions(GeneratorOptions):
    """Options for SQL schema generation."""

    table_prefix: str = ""
    use_snake_case: bool = True
    include_primary_key: bool = True
    use_not_null: bool = True
    include_timestamps: bool = False
    use_foreign_keys: bool = True
    use_type_inference: bool = True
    default_values: bool = False


class SqlGenerator(CodeGenerator):
    """Code generator for relational table definitions."""

    label = "SQL"
    options_class = SqlOptions
    invalid_input_message = "Invalid JSON data"
    allow_empty = True

    @property
    def language_name(self) -> str:
        return "sql"

    @property
    def file_extension(self) -> str:
        return ".sql"

    def name_nested(self, parent: Schema, key: str, is_array_item: bool) -> str:
        # Child tables keep the plural key: user + posts -> user_posts
        return f"{parent.name}_{key}"

    def table_name(self, schema: Schema) -> str:
        base = to_snake_case(schema.name) if self.options.use_snake_case else schema.name
        return f"{self.options.table_prefix}{base}"

    def column_name(self, key: str) -> str:
        return to_snake_case(key) if self.options.use_snake_case else key

    def render(self, shapes: List[Schema], root_name: str) -> str:
        # Array item tables reference the table that owns the array
        owners: Dict[str, Schema] = {}
        for schema in shapes:
            for field in schema.fields:
                if field.type_info.is_object_array:
                    owners.setdefault(field.type_info.element.shape.name, schema)

        logger.debug(f"SQL tables: {[self.table_name(schema) for schema in shapes]}")
        return "\n\n".join(
            self._render_table(schema, owners.get(schema.name)) for schema in reversed(shapes)
        )

    def _column_type(self, field: Field) -> str:
        if not self.options.use_type_inference:
            return "TEXT"
        field_type = field.type
        if field_type == FieldType.BOOLEAN:
            return "BOOLEAN"
        if field_type == FieldType.INTEGER:
            return "INTEGER"
        if field_type == FieldType.FLOAT:
            return "REAL"
        if field_type in (FieldType.STRING, FieldType.DATETIME):
            return "DATETIME" if DATETIME_PREFIX.search(field.value) else "VARCHAR(255)"
        if field_type == FieldType.ARRAY:
            return "JSON"
        return "TEXT"

    def _default_clause(self, value) -> str:
        if not self.options.default_values:
            return ""
        if isinstance(value, bool):
            return f" DEFAULT {1 if value else 0}"
        if isinstance(value, (int, float)):
            return f" DEFAULT {value}"
        if isinstance(value, str):
            escaped = value.replace("'", "''")
            return f" DEFAULT '{escaped}'"
        return ""

    def _render_table(self, schema: Schema, owner: Optional[Schema]) -> str:
        not_null = " NOT NULL" if self.options.use_not_null else ""
        columns: Dict[str, str] = {}
        foreign_keys: List[str] = []

        for field in schema.fields:
            name = self.column_name(field.name)
            info = field.type_info
            if info.is_object:
                column = f"{name}_id"
                columns.setdefault(column, f"  {column} INTEGER{not_null}")
                foreign_keys.append(
                    f"  FOREIGN KEY ({column}) REFERENCES {self.table_name(info.shape)}(id)"
                )
            elif info.is_object_array:
                # Stored in the child table
                continue
            elif name == "id" and self.options.include_primary_key:
                # The surrogate key owns the id column
                continue
            else:
                columns.setdefault(
                    name,
                    f"  {name} {self._column_type(field)}{not_null}{self._default_clause(field.value)}",
                )

        if owner is not None:
            owner_table = self.table_name(owner)
            if self.options.use_snake_case:
                column = to_snake_case(f"{owner_table}_id")
            else:
                column = f"{owner_table}Id"
            columns.setdefault(column, f"  {column} INTEGER")
            foreign_keys.append(f"  FOREIGN KEY ({column}) REFERENCES {owner_table}(id)")

        if self.options.include_timestamps:
            columns.setdefault("created_at", "  created_at DATETIME DEFAULT CURRENT_TIMESTAMP")
            columns.setdefault("updated_at", "  updated_at DATETIME DEFAULT CURRENT_TIMESTAMP")

        lines = [PRIMARY_KEY] if self.options.include_primary_key else []
        lines.extend(columns[name] for name in sorted(columns))
        if self.options.use_foreign_keys:
            lines.extend(foreign_keys)

        return f"CREATE TABLE {self.table_name(schema)} (\n" + ",\n".join(lines) + "\n);"
