"""
xbquery: build parameterized SQL or backend documents from auto-filtered conditions.

Exposes the `Builder`, the `of` factory, value and node types, result
artifacts and the pluggable backends.
"""

from .backends import BaseBackend, DefaultBackend, MySQLBackend, MySQLBuilder, QdrantBackend, QdrantBuilder
from .builder import Builder, Sort, of
from .constants import ASC, DESC, SortDirection
from .node import ConditionNode
from .result import DocumentResult, Result, SQLResult
from .value import Value, ValueKind

__version__ = "0.2.0"

__all__ = [
    "of",
    "Builder",
    "Sort",
    "SortDirection",
    "ASC",
    "DESC",
    "Value",
    "ValueKind",
    "ConditionNode",
    "SQLResult",
    "DocumentResult",
    "Result",
    "BaseBackend",
    "DefaultBackend",
    "MySQLBackend",
    "MySQLBuilder",
    "QdrantBackend",
    "QdrantBuilder",
]
