"""
SQL schema generator module.
"""

from .generator import SqlGenerator, SqlOptions

__all__ = ["SqlGenerator", "SqlOptions", "generate_sql_code"]


def generate_sql_code(data, root_name: str = "DataModel", options=None) -> str:
    """Generate ``CREATE TABLE`` statements for ``data``."""
    return SqlGenerator(options).generate(data, root_name)
