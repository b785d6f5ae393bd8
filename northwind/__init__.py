"""Product catalog data model backed by SQLAlchemy."""

__version__ = "0.1.0"
