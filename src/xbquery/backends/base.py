"""Base backend interface.

Defines the abstract contract all pluggable query generators must follow.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Literal

from xbquery.result import Result

if TYPE_CHECKING:
    from xbquery.builder import Builder

__all__ = ("BaseBackend",)


class BaseBackend(ABC):
    """Abstract base class for query generation backends.

    Subclasses implement `generate` to turn builder state into either a
    relational artifact (`SQLResult`) or a serialized document
    (`DocumentResult`). `OUTPUT_KIND` declares which of the two a backend
    produces.
    """

    name: str = "base"
    OUTPUT_KIND: Literal["sql", "json"] = "sql"

    @abstractmethod
    def generate(self, builder: "Builder") -> Result:
        """
        Produce the backend-specific artifact for the builder's current state.
        - SQLResult for relational targets
        - DocumentResult for document/vector targets
        """
        raise NotImplementedError

    def release(self) -> None:
        """Release backend resources. Reference backends hold none."""
        return None

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}: {self.name}>"
