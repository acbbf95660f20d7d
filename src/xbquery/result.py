"""Pydantic schemas for generated query artifacts."""

import re
from typing import Annotated, Any, List, Literal, Optional, Union

from pydantic import BaseModel, Field

from .constants import PLACEHOLDER
from .value import Value

__all__ = ("SQLResult", "DocumentResult", "Result")

_PLACEHOLDER_RE = re.compile(re.escape(PLACEHOLDER))


class SQLResult(BaseModel):
    kind: Literal["sql"] = "sql"
    sql: str = Field(..., description="Parameterized SQL text using positional placeholders.")
    args: List[Value] = Field(default_factory=list, description="One value per placeholder, in order.")
    count_sql: Optional[str] = Field(None, description="Row count query under the same filter.")

    def params(self) -> List[Any]:
        """Return the arguments as raw Python scalars for a DB-API driver."""
        return [arg.python_value for arg in self.args]

    def to_expr(self) -> str:
        """Return the SQL with arguments inlined as literals, for debugging only.

        Placeholders are substituted left to right; identifiers are not
        scanned, so a `?` inside a table or field name shifts the binding.
        """
        remaining = iter(self.args)
        return _PLACEHOLDER_RE.sub(lambda _: next(remaining).to_sql_literal(), self.sql)


class DocumentResult(BaseModel):
    kind: Literal["json"] = "json"
    document: str = Field(..., description="Serialized request document for a non-relational target.")


Result = Annotated[Union[SQLResult, DocumentResult], Field(discriminator="kind")]
