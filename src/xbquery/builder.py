"""
Fluent SQL query builder.

This module provides the `Builder`, which accumulates flat AND-joined
conditions, sort specs and pagination bounds for a single table and turns
them into a parameterized `SELECT` statement plus its positional arguments.
A pluggable backend can be attached to replace the default generation with
a vendor-specific statement or a serialized document.

Conditions whose value is "empty" (None, 0, 0.0, "") are dropped silently,
so optional filters can be passed straight through:

    builder = of("users").eq("status", status).gte("age", min_age).limit(10)
    result = builder.build()
    cursor.execute(result.sql, result.params())
"""

from typing import TYPE_CHECKING, Any, List, NamedTuple, Optional, Tuple

from .constants import PLACEHOLDER, Op, SortDirection
from .exceptions import BackendError, InvalidDirectionError, UnsupportedValueError
from .logger import get_logger
from .node import ConditionNode
from .result import DocumentResult, Result, SQLResult
from .types import Args, Direction, Scalar
from .value import Value

if TYPE_CHECKING:
    from .backends.base import BaseBackend

__all__ = ("Builder", "Sort", "of")

logger = get_logger(__name__)


class Sort(NamedTuple):
    field: str
    direction: SortDirection


def _to_direction(direction: Direction) -> SortDirection:
    if isinstance(direction, SortDirection):
        return direction
    if isinstance(direction, str):
        try:
            return SortDirection(direction.upper())
        except ValueError:
            pass
    raise InvalidDirectionError("Sort direction must be ASC or DESC", direction=direction)


def _to_bound(n: Any, name: str) -> int:
    if isinstance(n, bool) or not isinstance(n, int):
        raise UnsupportedValueError(f"{name} requires an integer", value_type=type(n).__name__)
    return n


class Builder:
    """Single-table SELECT builder with auto-filtering of empty values.

    Key Features:
        - Comparison mutators (`eq`, `ne`, `gt`, `gte`, `lt`, `lte`) that skip
          None/0/0.0/"" values instead of adding a condition
        - `like` (contains) and `like_left` (prefix) pattern matching
        - Ordered `sort`, positive-only `limit` / `offset`
        - Default generation of `?`-parameterized SQL and its argument list
        - Optional backend that takes over generation entirely

    The argument list always holds one entry per stored condition, in the
    order the conditions were added, matching the placeholders left to right.

    Attributes:
        table: Table name, emitted verbatim
    """

    def __init__(self, table: str, backend: Optional["BaseBackend"] = None) -> None:
        self.table = table
        self._conditions: List[ConditionNode] = []
        self._sorts: List[Sort] = []
        self._limit: Optional[int] = None
        self._offset: Optional[int] = None
        # Pattern strings built by like()/like_left()
        self._patterns: List[str] = []
        self._backend = backend

    # ------------------------------------------------------------------
    # Inspection
    # ------------------------------------------------------------------

    @property
    def conditions(self) -> Tuple[ConditionNode, ...]:
        return tuple(self._conditions)

    @property
    def sorts(self) -> Tuple[Sort, ...]:
        return tuple(self._sorts)

    @property
    def limit_value(self) -> Optional[int]:
        return self._limit

    @property
    def offset_value(self) -> Optional[int]:
        return self._offset

    @property
    def patterns(self) -> Tuple[str, ...]:
        return tuple(self._patterns)

    @property
    def backend(self) -> Optional["BaseBackend"]:
        return self._backend

    def __len__(self) -> int:
        return len(self._conditions)

    def __repr__(self) -> str:
        return f"<Builder: {self.sql_of_select()}>"

    # ------------------------------------------------------------------
    # Backend
    # ------------------------------------------------------------------

    def set_backend(self, backend: Optional["BaseBackend"]) -> "Builder":
        """Attach a backend (or detach with None) that takes over generation."""
        self._backend = backend
        return self

    set_custom = set_backend

    # ------------------------------------------------------------------
    # Comparison mutators
    # ------------------------------------------------------------------

    def _append(self, op: str, key: str, value: Scalar) -> "Builder":
        val = Value.of(value)
        if val.should_filter():
            logger.debug("Auto-filtered condition %s %s %r on %s", key, op, val.python_value, self.table)
            return self
        self._conditions.append(ConditionNode.leaf(op, key, val))
        return self

    def eq(self, key: str, value: Scalar) -> "Builder":
        """Add `key = ?` unless the value is empty."""
        return self._append(Op.EQ, key, value)

    def ne(self, key: str, value: Scalar) -> "Builder":
        """Add `key != ?` unless the value is empty."""
        return self._append(Op.NE, key, value)

    def gt(self, key: str, value: Scalar) -> "Builder":
        return self._append(Op.GT, key, value)

    def gte(self, key: str, value: Scalar) -> "Builder":
        return self._append(Op.GTE, key, value)

    def lt(self, key: str, value: Scalar) -> "Builder":
        return self._append(Op.LT, key, value)

    def lte(self, key: str, value: Scalar) -> "Builder":
        return self._append(Op.LTE, key, value)

    # ------------------------------------------------------------------
    # Pattern mutators
    # ------------------------------------------------------------------

    def _append_pattern(self, key: str, text: str, pattern_format: str) -> "Builder":
        if not isinstance(text, str):
            raise UnsupportedValueError("LIKE requires a string", value_type=type(text).__name__)
        if not text:
            logger.debug("Auto-filtered empty LIKE on %s.%s", self.table, key)
            return self
        pattern = pattern_format.format(text)
        node = ConditionNode.leaf(Op.LIKE, key, pattern)
        self._patterns.append(pattern)
        self._conditions.append(node)
        return self

    def like(self, key: str, text: str) -> "Builder":
        """Add `key LIKE ?` bound to `%text%` (contains)."""
        return self._append_pattern(key, text, "%{}%")

    def like_left(self, key: str, text: str) -> "Builder":
        """Add `key LIKE ?` bound to `text%` (starts with).

        There is no ends-with counterpart: a leading wildcard defeats indexes.
        """
        return self._append_pattern(key, text, "{}%")

    # ------------------------------------------------------------------
    # Ordering and pagination
    # ------------------------------------------------------------------

    def sort(self, field: str, direction: Direction) -> "Builder":
        """Append an ORDER BY entry. Sorts are never filtered."""
        self._sorts.append(Sort(field, _to_direction(direction)))
        return self

    def limit(self, n: int) -> "Builder":
        """Set LIMIT when `n > 0`; otherwise keep the current value."""
        if _to_bound(n, "limit") > 0:
            self._limit = n
        return self

    def offset(self, n: int) -> "Builder":
        """Set OFFSET when `n > 0`; otherwise keep the current value."""
        if _to_bound(n, "offset") > 0:
            self._offset = n
        return self

    # ------------------------------------------------------------------
    # Default generation
    # ------------------------------------------------------------------

    def _where_clause(self) -> str:
        if not self._conditions:
            return ""
        parts = []
        for cond in self._conditions:
            rhs = "NULL" if cond.value.is_null else PLACEHOLDER
            parts.append(f"{cond.key} {cond.op} {rhs}")
        return " WHERE " + " AND ".join(parts)

    def sql_of_select(self) -> str:
        """Build the SELECT statement with `?` placeholders."""
        sql = f"SELECT * FROM {self.table}" + self._where_clause()
        if self._sorts:
            sql += " ORDER BY " + ", ".join(f"{s.field} {s.direction.value}" for s in self._sorts)
        if self._limit is not None:
            sql += f" LIMIT {self._limit}"
        if self._offset is not None:
            sql += f" OFFSET {self._offset}"
        return sql

    def sql_of_count(self) -> str:
        """Build the row count query for the same filter, ignoring sort and pagination."""
        return f"SELECT COUNT(*) FROM {self.table}" + self._where_clause()

    def args(self) -> Args:
        """Return the values bound to the placeholders, in order."""
        return [cond.value for cond in self._conditions if not cond.value.should_filter()]

    def default_result(self, with_count: bool = False) -> SQLResult:
        """Package the default SQL and arguments, bypassing any attached backend."""
        return SQLResult(
            sql=self.sql_of_select(),
            args=self.args(),
            count_sql=self.sql_of_count() if with_count else None,
        )

    # ------------------------------------------------------------------
    # Terminal operations
    # ------------------------------------------------------------------

    def generate(self) -> Result:
        """Return the attached backend's artifact, or the default SQLResult."""
        if self._backend is None:
            result = self.default_result()
        else:
            result = self._backend.generate(self)
        logger.debug("Generated %s artifact for table=%s", result.kind, self.table)
        return result

    def build(self, with_count: bool = False) -> SQLResult:
        """Build SQL and arguments together.

        Args:
            with_count: Also fill `count_sql`. With a backend attached the
                backend decides; a result without `count_sql` is logged
                as a warning

        Returns:
            SQLResult from default generation or from the attached backend

        Raises:
            BackendError: If the attached backend produces a document
        """
        if self._backend is None:
            return self.default_result(with_count=with_count)
        result = self._backend.generate(self)
        if not isinstance(result, SQLResult):
            raise BackendError(
                "Backend produces documents; use json_of_select()",
                backend=self._backend.name,
            )
        if with_count and result.count_sql is None:
            logger.warning(
                "Backend %s did not produce a count query; configure count on the backend", self._backend.name
            )
        return result

    def json_of_select(self) -> str:
        """Return the serialized document from an attached document backend.

        Raises:
            BackendError: If no backend is attached or it produces SQL
        """
        if self._backend is None:
            raise BackendError("No backend attached; json_of_select() needs a document backend", table=self.table)
        result = self._backend.generate(self)
        if not isinstance(result, DocumentResult):
            raise BackendError("Backend produces SQL; use build()", backend=self._backend.name)
        return result.document


def of(table: str) -> Builder:
    """Create a new Builder for `table`."""
    return Builder(table)
