"""Scalar values carried by query conditions.

A `Value` is a closed variant over text, 64-bit integers, floats, booleans
and null. Every comparison mutator on the builder converts its input through
`Value.of` and consults `Value.should_filter` to decide whether the condition
is kept: zero numbers, empty strings and null are treated as "not set".

Typical usage:

- Convert: `Value.of(18)`, `Value.of("Alice")`, `Value.of(None)`
- Filter: `Value.of(0).should_filter()` -> `True`
- Bind: `value.python_value` for a DB-API driver
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Union

from pydantic import BaseModel, ConfigDict, StrictBool, StrictFloat, StrictInt, StrictStr, model_validator

from .constants import INT64_MAX, INT64_MIN
from .exceptions import UnsupportedValueError

__all__ = ("Value", "ValueKind")


class ValueKind(str, Enum):
    STRING = "string"
    INT = "int"
    FLOAT = "float"
    BOOL = "bool"
    NULL = "null"


_KIND_TYPES = {
    ValueKind.STRING: str,
    ValueKind.INT: int,
    ValueKind.FLOAT: float,
    ValueKind.BOOL: bool,
    ValueKind.NULL: type(None),
}


class Value(BaseModel):
    """Immutable scalar with exactly one active variant.

    `kind` names the active variant and `data` holds its payload. Instances
    are normally created through `Value.of`; direct construction is validated
    so that `data` always matches `kind`.
    """

    model_config = ConfigDict(frozen=True)

    kind: ValueKind
    data: Union[StrictBool, StrictInt, StrictFloat, StrictStr, None] = None

    @model_validator(mode="after")
    def check_variant(self) -> "Value":
        # bool is a subclass of int, so compare exact types
        if type(self.data) is not _KIND_TYPES[self.kind]:
            raise ValueError(f"data of type {type(self.data).__name__} does not match kind {self.kind.value!r}")
        if self.kind is ValueKind.INT and not INT64_MIN <= self.data <= INT64_MAX:
            raise ValueError(f"integer {self.data} is outside the signed 64-bit range")
        return self

    @classmethod
    def of(cls, value: Any) -> "Value":
        """Convert a Python scalar into a `Value`.

        Args:
            value: str, bool, int, float, None, or an existing Value

        Returns:
            Value instance (existing Values are returned unchanged)

        Raises:
            UnsupportedValueError: If the type is not one of the supported
                scalars or an integer does not fit in 64 bits
        """
        if isinstance(value, cls):
            return value
        if value is None:
            return cls(kind=ValueKind.NULL)
        # Enums mixing in str/int are not plain scalars
        if isinstance(value, Enum):
            raise UnsupportedValueError("Unsupported value type", value_type=type(value).__name__)
        if isinstance(value, str):
            return cls(kind=ValueKind.STRING, data=str(value))
        if isinstance(value, bool):
            return cls(kind=ValueKind.BOOL, data=value)
        if isinstance(value, int):
            if not INT64_MIN <= value <= INT64_MAX:
                raise UnsupportedValueError("Integer does not fit in 64 bits", value=value)
            return cls(kind=ValueKind.INT, data=int(value))
        if isinstance(value, float):
            return cls(kind=ValueKind.FLOAT, data=float(value))
        raise UnsupportedValueError("Unsupported value type", value_type=type(value).__name__)

    @property
    def is_null(self) -> bool:
        return self.kind is ValueKind.NULL

    @property
    def python_value(self) -> Union[str, int, float, bool, None]:
        """Raw Python scalar, suitable for a driver's parameter list."""
        return self.data

    def should_filter(self) -> bool:
        """Return True when this value counts as "not set" and must be dropped.

        - null: always
        - string: when empty
        - int / float: when equal to zero
        - bool: never (False is a real condition)
        """
        if self.kind is ValueKind.NULL:
            return True
        if self.kind is ValueKind.STRING:
            return len(self.data) == 0
        if self.kind in (ValueKind.INT, ValueKind.FLOAT):
            return self.data == 0
        return False

    def to_sql_literal(self) -> str:
        """Format the value as an SQL literal for logging and debugging.

        Generated queries always bind values through placeholders instead.
        """
        if self.kind is ValueKind.NULL:
            return "NULL"
        if self.kind is ValueKind.STRING:
            return "'" + self.data.replace("'", "''") + "'"
        if self.kind is ValueKind.BOOL:
            return "true" if self.data else "false"
        return str(self.data)

    def __str__(self) -> str:
        return self.to_sql_literal()

    def __repr__(self) -> str:
        return f"<Value {self.kind.value}: {self.data!r}>"
