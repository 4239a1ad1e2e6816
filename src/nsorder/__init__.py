"""nsorder - custom grouping and ordering of import directives."""

__version__ = "0.1.0"
