"""Tests for the exception hierarchy."""

import pytest

from xbquery.exceptions import (
    BackendError,
    ConfigurationError,
    InvalidConfigError,
    InvalidDirectionError,
    InvalidFieldError,
    UnsupportedValueError,
    ValidationError,
    XbQueryError,
)


def test_message_without_details():
    err = XbQueryError("boom")
    assert str(err) == "boom"
    assert err.details == {}


def test_message_with_details():
    err = InvalidConfigError("Invalid config value", config_key="hnsw_ef", value=0)
    assert str(err) == "Invalid config value (config_key='hnsw_ef', value=0)"
    assert err.details == {"config_key": "hnsw_ef", "value": 0}


def test_details_only():
    assert str(BackendError(backend="qdrant")) == "backend='qdrant'"


def test_repr():
    err = InvalidFieldError("bad", op="=")
    assert repr(err) == "InvalidFieldError(message='bad', details={'op': '='})"


@pytest.mark.parametrize(
    "exc_cls,parents",
    [
        (UnsupportedValueError, (ValidationError, TypeError)),
        (InvalidDirectionError, (ValidationError, ValueError)),
        (InvalidFieldError, (ValidationError,)),
        (InvalidConfigError, (ConfigurationError,)),
        (BackendError, (XbQueryError,)),
    ],
)
def test_hierarchy(exc_cls, parents):
    assert issubclass(exc_cls, XbQueryError)
    for parent in parents:
        assert issubclass(exc_cls, parent)
