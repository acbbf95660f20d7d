"""Tests for Value construction and the auto-filter predicate."""

import pydantic
import pytest

from xbquery.constants import DESC, INT64_MAX, INT64_MIN
from xbquery.exceptions import UnsupportedValueError, XbQueryError
from xbquery.value import Value, ValueKind


class TestValueOf:
    @pytest.mark.parametrize(
        "raw,kind",
        [
            ("Alice", ValueKind.STRING),
            ("", ValueKind.STRING),
            (42, ValueKind.INT),
            (-7, ValueKind.INT),
            (99.5, ValueKind.FLOAT),
            (True, ValueKind.BOOL),
            (False, ValueKind.BOOL),
            (None, ValueKind.NULL),
        ],
    )
    def test_kind_detection(self, raw, kind):
        value = Value.of(raw)
        assert value.kind is kind
        assert value.python_value == raw

    def test_bool_is_not_int(self):
        assert Value.of(True).kind is ValueKind.BOOL
        assert Value.of(1).kind is ValueKind.INT
        assert Value.of(True) != Value.of(1)

    def test_value_passthrough(self):
        value = Value.of(5)
        assert Value.of(value) is value

    def test_int64_bounds(self):
        assert Value.of(INT64_MAX).python_value == INT64_MAX
        assert Value.of(INT64_MIN).python_value == INT64_MIN
        with pytest.raises(UnsupportedValueError):
            Value.of(INT64_MAX + 1)
        with pytest.raises(UnsupportedValueError):
            Value.of(INT64_MIN - 1)

    @pytest.mark.parametrize("raw", [b"bytes", [1, 2], {"a": 1}, (1,), object(), DESC])
    def test_unsupported_types(self, raw):
        with pytest.raises(UnsupportedValueError) as exc_info:
            Value.of(raw)
        assert isinstance(exc_info.value, TypeError)
        assert isinstance(exc_info.value, XbQueryError)

    def test_direct_construction_checks_variant(self):
        with pytest.raises(pydantic.ValidationError):
            Value(kind=ValueKind.INT, data="1")
        with pytest.raises(pydantic.ValidationError):
            Value(kind=ValueKind.INT, data=True)
        with pytest.raises(pydantic.ValidationError):
            Value(kind=ValueKind.NULL, data=0)

    def test_immutable(self):
        value = Value.of(1)
        with pytest.raises(pydantic.ValidationError):
            value.data = 2

    def test_hashable_and_equal(self):
        assert Value.of("a") == Value.of("a")
        assert len({Value.of("a"), Value.of("a"), Value.of(1)}) == 2


class TestShouldFilter:
    @pytest.mark.parametrize("raw", [None, "", 0, 0.0, -0.0])
    def test_empty_values_are_filtered(self, raw):
        assert Value.of(raw).should_filter() is True

    @pytest.mark.parametrize("raw", ["x", " ", 1, -1, 0.001, True, False])
    def test_set_values_are_kept(self, raw):
        assert Value.of(raw).should_filter() is False

    def test_false_is_never_filtered(self):
        assert not Value.of(False).should_filter()


class TestSqlLiteral:
    def test_literals(self):
        assert Value.of("Alice").to_sql_literal() == "'Alice'"
        assert Value.of("O'Brien").to_sql_literal() == "'O''Brien'"
        assert Value.of(18).to_sql_literal() == "18"
        assert Value.of(100.0).to_sql_literal() == "100.0"
        assert Value.of(True).to_sql_literal() == "true"
        assert Value.of(False).to_sql_literal() == "false"
        assert Value.of(None).to_sql_literal() == "NULL"

    def test_str_and_repr(self):
        assert str(Value.of("x")) == "'x'"
        assert repr(Value.of(3)) == "<Value int: 3>"
