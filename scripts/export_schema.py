"""
Export the catalog schema DDL to docs/schema/ directory.

Writes one <dialect>.sql file per supported dialect, compiled from the
model metadata.

Usage:
    python scripts/export_schema.py [dialect ...]
"""

import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from northwind.core.schema import SUPPORTED_DIALECTS, render_schema_ddl


def export_schema(dialects: list[str]) -> None:
    """Write DDL for each dialect to docs/schema/<dialect>.sql."""
    docs_dir = Path(__file__).resolve().parents[1] / "docs" / "schema"
    docs_dir.mkdir(parents=True, exist_ok=True)

    for dialect_name in dialects:
        ddl = render_schema_ddl(dialect_name)
        out_path = docs_dir / f"{dialect_name}.sql"
        out_path.write_text(ddl, encoding="utf-8")
        print(f"Schema DDL ({dialect_name}) exported to: {out_path}")


if __name__ == "__main__":
    export_schema(sys.argv[1:] or sorted(SUPPORTED_DIALECTS))
