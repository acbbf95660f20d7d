"""
Operator symbols, sort directions and placeholder token shared by the builder and backends.
"""

from enum import Enum


class SortDirection(str, Enum):
    ASC = "ASC"
    DESC = "DESC"


ASC = SortDirection.ASC
DESC = SortDirection.DESC


class Op:
    EQ = "="
    NE = "!="
    GT = ">"
    GTE = ">="
    LT = "<"
    LTE = "<="
    LIKE = "LIKE"
    AND = "AND"
    OR = "OR"


PLACEHOLDER = "?"

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1
