"""Default relational backend.

Wraps the builder's own generation so it can be attached, swapped and
passed around like any other backend.
"""

from typing import TYPE_CHECKING

from xbquery.logger import Logger
from xbquery.result import SQLResult

from .base import BaseBackend

if TYPE_CHECKING:
    from xbquery.builder import Builder

__all__ = ("DefaultBackend",)


class DefaultBackend(BaseBackend):
    """Generate `?`-parameterized SQL exactly as an unconfigured builder does."""

    name = "default"
    OUTPUT_KIND = "sql"

    def __init__(self, with_count: bool = False) -> None:
        self.with_count = with_count
        self.logger = Logger(self.__class__.__name__)

    def generate(self, builder: "Builder") -> SQLResult:
        result = builder.default_result(with_count=self.with_count)
        self.logger.debug("Default SQL table=%s args=%d", builder.table, len(result.args))
        return result
