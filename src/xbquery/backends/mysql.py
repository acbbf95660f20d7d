"""MySQL backend.

Carries MySQL statement switches (`INSERT ... ON DUPLICATE KEY UPDATE`,
`INSERT IGNORE`). SELECT generation is identical to the default generator;
the switches are recorded but not yet reflected in emitted SQL.
"""

from typing import TYPE_CHECKING

from xbquery.logger import Logger
from xbquery.result import SQLResult

from .base import BaseBackend

if TYPE_CHECKING:
    from xbquery.builder import Builder

__all__ = (
    "MySQLBackend",
    "MySQLBuilder",
)


class MySQLBackend(BaseBackend):
    """MySQL-flavoured relational backend.

    Attributes:
        use_upsert: Emit `ON DUPLICATE KEY UPDATE` on inserts (not wired yet)
        use_ignore: Emit `INSERT IGNORE` on inserts (not wired yet)
    """

    name = "mysql"
    OUTPUT_KIND = "sql"

    def __init__(self, use_upsert: bool = False, use_ignore: bool = False) -> None:
        self.use_upsert = use_upsert
        self.use_ignore = use_ignore
        self.logger = Logger(self.__class__.__name__)

    @classmethod
    def with_upsert(cls) -> "MySQLBackend":
        return cls(use_upsert=True)

    @classmethod
    def with_ignore(cls) -> "MySQLBackend":
        return cls(use_ignore=True)

    def generate(self, builder: "Builder") -> SQLResult:
        # TODO: apply use_upsert/use_ignore once insert statements are generated
        result = SQLResult(sql=builder.sql_of_select(), args=builder.args(), count_sql=None)
        self.logger.debug(
            "MySQL SQL table=%s upsert=%s ignore=%s", builder.table, self.use_upsert, self.use_ignore
        )
        return result


class MySQLBuilder:
    """Fluent configuration for `MySQLBackend`.

    Example:
        backend = MySQLBuilder().use_upsert(True).build()
    """

    def __init__(self) -> None:
        self._use_upsert = False
        self._use_ignore = False

    def use_upsert(self, use: bool) -> "MySQLBuilder":
        self._use_upsert = bool(use)
        return self

    def use_ignore(self, use: bool) -> "MySQLBuilder":
        self._use_ignore = bool(use)
        return self

    def build(self) -> MySQLBackend:
        return MySQLBackend(use_upsert=self._use_upsert, use_ignore=self._use_ignore)
