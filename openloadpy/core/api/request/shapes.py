"""Result shapes using Strategy Pattern.

A shape turns the raw ``result`` of a success envelope into the typed
value an endpoint returns, or raises ResultShapeError.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, List

from ...exceptions import ResultShapeError


def _type_name(value: Any) -> str:
    if value is None:
        return 'null'
    if isinstance(value, bool):
        return 'boolean'
    if isinstance(value, (int, float)):
        return 'number'
    if isinstance(value, str):
        return 'string'
    if isinstance(value, list):
        return 'array'
    if isinstance(value, dict):
        return 'object'
    return type(value).__name__


class ResultShape(ABC):
    """Abstract result shape."""

    @abstractmethod
    def decode(self, value: Any) -> Any:
        """Decodes value or raises ResultShapeError."""
        pass

    def _mismatch(self, expected: str, value: Any) -> ResultShapeError:
        return ResultShapeError(
            f"Expected {expected} result, got {_type_name(value)}",
            body=value
        )


class Record(ResultShape):
    """A JSON object decoded by a model's ``from_dict``."""

    def __init__(self, model):
        self.model = model

    def decode(self, value: Any) -> Any:
        if not isinstance(value, dict):
            raise self._mismatch('object', value)
        return self.model.from_dict(value)

    def __repr__(self) -> str:
        return f"Record({self.model.__name__})"


class MappingOf(ResultShape):
    """A JSON object whose values all decode with the same shape."""

    def __init__(self, shape: ResultShape):
        self.shape = shape

    def decode(self, value: Any) -> Dict[str, Any]:
        # An empty mapping may come back as an empty array
        if value == []:
            return {}
        if not isinstance(value, dict):
            raise self._mismatch('object', value)
        return {str(k): self.shape.decode(v) for k, v in value.items()}

    def __repr__(self) -> str:
        return f"MappingOf({self.shape!r})"


class ListOf(ResultShape):
    """A JSON array whose items all decode with the same shape."""

    def __init__(self, shape: ResultShape):
        self.shape = shape

    def decode(self, value: Any) -> List[Any]:
        if not isinstance(value, list):
            raise self._mismatch('array', value)
        return [self.shape.decode(item) for item in value]

    def __repr__(self) -> str:
        return f"ListOf({self.shape!r})"


class Boolean(ResultShape):
    """A JSON boolean."""

    def decode(self, value: Any) -> bool:
        if not isinstance(value, bool):
            raise self._mismatch('boolean', value)
        return value

    def __repr__(self) -> str:
        return "Boolean()"


class String(ResultShape):
    """A JSON string."""

    def decode(self, value: Any) -> str:
        if not isinstance(value, str):
            raise self._mismatch('string', value)
        return value

    def __repr__(self) -> str:
        return "String()"
