"""
Render the declarative model metadata as DDL.

Compiles CREATE TABLE / CREATE INDEX statements for a chosen dialect
without connecting to a database, so the column types, lengths and
foreign keys declared on the models can be reviewed per target.
"""

from sqlalchemy.dialects import mssql, postgresql, sqlite
from sqlalchemy.schema import CreateIndex, CreateTable

from northwind.models import Base


SUPPORTED_DIALECTS = {
    "sqlite": sqlite.dialect,
    "postgresql": postgresql.dialect,
    "mssql": mssql.dialect,
}


def render_schema_ddl(dialect_name: str = "sqlite") -> str:
    """
    Compile all model tables to DDL for ``dialect_name``.

    Args:
        dialect_name: One of "sqlite", "postgresql", "mssql"

    Returns:
        Semicolon-terminated statements, tables in dependency order

    Raises:
        ValueError: If the dialect is not supported
    """
    try:
        dialect = SUPPORTED_DIALECTS[dialect_name]()
    except KeyError:
        raise ValueError(
            f"Unsupported dialect '{dialect_name}'. "
            f"Choose one of: {', '.join(sorted(SUPPORTED_DIALECTS))}"
        ) from None

    statements = []
    for table in Base.metadata.sorted_tables:
        statements.append(str(CreateTable(table).compile(dialect=dialect)).strip())
        for index in sorted(table.indexes, key=lambda ix: ix.name):
            statements.append(str(CreateIndex(index).compile(dialect=dialect)).strip())

    return ";\n\n".join(statements) + ";\n"
