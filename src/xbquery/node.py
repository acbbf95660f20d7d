"""Condition tree nodes.

A `ConditionNode` is either a leaf (`key op value`) or a compound node that
groups child nodes under a boolean operator. The builder only ever creates
leaves; compound nodes can be built directly for callers that assemble their
own trees.
"""

from __future__ import annotations

from copy import deepcopy
from typing import Any, Dict, List, Sequence

from .exceptions import InvalidFieldError
from .value import Value

__all__ = ("ConditionNode",)


class ConditionNode:
    """Leaf or compound condition term.

    - Leaf: non-empty `key`, a `value`, no `children`.
    - Compound: empty `key`, null `value`, one or more `children`.
    """

    __slots__ = ("op", "key", "value", "children")

    def __init__(self, op: str, key: str = "", value: Any = None, children: Sequence["ConditionNode"] = ()):
        """Validate and store a node. Use `leaf` or `compound` in most code.

        Raises:
            InvalidFieldError: If the node is neither a leaf nor a compound
            UnsupportedValueError: If `value` is not a supported scalar
        """
        val = Value.of(value)
        children = list(children)
        if not children and not key:
            raise InvalidFieldError("Leaf condition requires a non-empty key", op=op)
        if children and key:
            raise InvalidFieldError("Compound condition cannot have a key", op=op, key=key)
        if children and not val.is_null:
            raise InvalidFieldError("Compound condition cannot have a value", op=op, value=val.python_value)
        self.op = op
        self.key = key
        self.value: Value = val
        self.children: List[ConditionNode] = children

    @classmethod
    def leaf(cls, op: str, key: str, value: Any) -> "ConditionNode":
        """Create a single `key op value` condition.

        Raises:
            InvalidFieldError: If `key` is empty
            UnsupportedValueError: If `value` is not a supported scalar
        """
        return cls(op, key, Value.of(value))

    @classmethod
    def compound(cls, op: str, children: Sequence["ConditionNode"]) -> "ConditionNode":
        """Create a compound node owning deep copies of `children`.

        Raises:
            InvalidFieldError: If `children` is empty
        """
        if not children:
            raise InvalidFieldError("Compound condition requires at least one child", op=op)
        return cls(op, "", None, deepcopy(list(children)))

    @property
    def is_leaf(self) -> bool:
        return not self.children

    @property
    def is_compound(self) -> bool:
        return bool(self.children)

    def release(self) -> None:
        """Recursively release owned child nodes."""
        for child in self.children:
            child.release()
        self.children.clear()

    def to_dict(self) -> Dict[str, Any]:
        if self.children:
            return {self.op: [child.to_dict() for child in self.children]}
        return {"op": self.op, "key": self.key, "value": self.value.python_value}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ConditionNode):
            return NotImplemented
        return (
            self.op == other.op
            and self.key == other.key
            and self.value == other.value
            and self.children == other.children
        )

    def __repr__(self) -> str:
        return f"<ConditionNode: {self.to_dict()}>"
