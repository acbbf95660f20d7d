"""Type aliases for xbquery package.

This module provides reusable type definitions to ensure consistency
across the codebase and improve code readability.
"""

from typing import List, Union

from .constants import SortDirection
from .value import Value

# Scalar input accepted by comparison mutators
Scalar = Union[str, int, float, bool, None, Value]

# Sort direction given as enum member or "ASC"/"DESC" text
Direction = Union[SortDirection, str]

# Positional arguments bound to placeholders
Args = List[Value]
