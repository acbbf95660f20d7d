"""Pytest configuration and fixtures for query builder tests."""

import pytest
from dotenv import load_dotenv

import xbquery
from xbquery.builder import Builder

# Load environment variables
load_dotenv()


@pytest.fixture
def users() -> Builder:
    """Empty builder on the users table."""
    return xbquery.of("users")


@pytest.fixture
def products() -> Builder:
    """Empty builder on the products table."""
    return xbquery.of("products")


@pytest.fixture
def scenario_a() -> Builder:
    """Users query with three conditions, one sort and a limit."""
    return (
        xbquery.of("users")
        .eq("status", 1)
        .eq("name", "Alice")
        .gte("age", 18)
        .sort("created_at", xbquery.DESC)
        .limit(10)
    )
