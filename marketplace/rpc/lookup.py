"""
Explicit id-or-key lookups.

Several commands accept either a numeric id or a string key for the same
parameter. The wire value is turned into a tagged ``Lookup`` once, and
services are called according to its ``kind``.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Union

from marketplace.exceptions import ValidationException


class LookupKind(Enum):
    BY_ID = "id"
    BY_KEY = "key"


@dataclass(frozen=True)
class Lookup:
    kind: LookupKind
    value: Union[int, str]

    @classmethod
    def by_id(cls, value: int) -> "Lookup":
        return cls(LookupKind.BY_ID, value)

    @classmethod
    def by_key(cls, value: str) -> "Lookup":
        return cls(LookupKind.BY_KEY, value)

    @classmethod
    def from_param(cls, param: Any, field: str = "params.0") -> "Lookup":
        """JSON numbers select by id, JSON strings select by key."""
        # bool is an int subclass but never a valid id
        if isinstance(param, int) and not isinstance(param, bool):
            return cls.by_id(param)
        if isinstance(param, str) and param:
            return cls.by_key(param)
        raise ValidationException(
            "Request body is not valid",
            [{"field": field, "message": "Expected a numeric id or a string key"}],
        )
