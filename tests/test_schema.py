"""
Tests for DDL rendered from the model metadata.
"""

import pytest

from northwind.core.schema import render_schema_ddl
from northwind.models import Base


class TestMetadata:
    """Checks on the declarative table metadata."""

    def test_tables_and_columns(self):
        category = Base.metadata.tables["Category"]
        product = Base.metadata.tables["Product"]

        assert list(category.columns.keys()) == [
            "CategoryId", "CategoryName", "Description",
        ]
        assert list(product.columns.keys()) == [
            "ProductId", "ProductName", "UnitPrice", "UnitsInStock",
            "Discontinued", "CategoryId",
        ]

    def test_nullability(self):
        category = Base.metadata.tables["Category"].c
        product = Base.metadata.tables["Product"].c

        assert category.CategoryName.nullable is False
        assert category.Description.nullable is True
        assert product.ProductName.nullable is False
        assert product.UnitPrice.nullable is True
        assert product.UnitsInStock.nullable is True
        assert product.Discontinued.nullable is False
        assert product.CategoryId.nullable is False

    def test_string_lengths(self):
        assert Base.metadata.tables["Category"].c.CategoryName.type.length == 15
        assert Base.metadata.tables["Product"].c.ProductName.type.length == 40

    def test_foreign_key(self):
        fks = list(Base.metadata.tables["Product"].c.CategoryId.foreign_keys)

        assert len(fks) == 1
        assert fks[0].target_fullname == "Category.CategoryId"


class TestRenderSchemaDDL:
    """Tests for render_schema_ddl()."""

    def test_sqlite_ddl(self):
        ddl = render_schema_ddl("sqlite")

        assert 'CREATE TABLE "Category"' in ddl
        assert 'CREATE TABLE "Product"' in ddl
        assert '"CategoryName" VARCHAR(15) NOT NULL' in ddl
        assert '"ProductName" VARCHAR(40) NOT NULL' in ddl
        assert '"Description" TEXT' in ddl
        assert '"UnitsInStock" SMALLINT' in ddl
        assert '"UnitPrice" VARCHAR(21)' in ddl
        assert 'FOREIGN KEY("CategoryId") REFERENCES "Category" ("CategoryId")' in ddl
        assert 'CREATE INDEX "IX_Product_CategoryId"' in ddl

    def test_category_created_before_product(self):
        ddl = render_schema_ddl("sqlite")

        assert ddl.index('CREATE TABLE "Category"') < ddl.index('CREATE TABLE "Product"')

    def test_postgresql_ddl(self):
        ddl = render_schema_ddl("postgresql")

        assert '"UnitPrice" NUMERIC(19, 4)' in ddl
        assert '"Discontinued" BOOLEAN' in ddl

    def test_mssql_uses_money_and_ntext(self):
        ddl = render_schema_ddl("mssql")

        assert "MONEY" in ddl
        assert "NTEXT" in ddl
        assert "BIT" in ddl

    def test_unsupported_dialect(self):
        with pytest.raises(ValueError) as exc_info:
            render_schema_ddl("oracle")

        assert "Unsupported dialect 'oracle'" in str(exc_info.value)
