from __future__ import annotations

from datetime import timedelta
from typing import TYPE_CHECKING, Any, List, Protocol, Type

from pydantic import StrictStr, TypeAdapter, ValidationError

from providerhub.core.exceptions import MalformedDocumentError
from providerhub.models.duration import format_duration, parse_duration

if TYPE_CHECKING:
    from providerhub.models.base import Model


class FieldCodec(Protocol):
    def encode(self, value: Any) -> Any:
        ...

    def decode(self, value: Any, *, key: str) -> Any:
        ...


def _validate(adapter: TypeAdapter, value: Any, *, key: str, expected: str) -> Any:
    try:
        return adapter.validate_python(value)
    except ValidationError as exc:
        raise MalformedDocumentError(f"expected {expected}", key=key, value=value) from exc


class StringCodec:
    _adapter = TypeAdapter(StrictStr)

    def encode(self, value: str) -> str:
        return value

    def decode(self, value: Any, *, key: str) -> str:
        return _validate(self._adapter, value, key=key, expected="a string")


class StringListCodec:
    _adapter = TypeAdapter(List[StrictStr])

    def encode(self, value: List[str]) -> List[str]:
        return list(value)

    def decode(self, value: Any, *, key: str) -> List[str]:
        # Only JSON arrays; a bare string would otherwise look iterable
        if not isinstance(value, list):
            raise MalformedDocumentError("expected an array of strings", key=key, value=value)
        return _validate(self._adapter, value, key=key, expected="an array of strings")


class DurationCodec:
    def encode(self, value: timedelta) -> str:
        return format_duration(value)

    def decode(self, value: Any, *, key: str) -> timedelta:
        return parse_duration(value, key=key)


class ModelCodec:
    """Nested record stored as a JSON object."""

    def __init__(self, model_cls: Type["Model"]):
        self.model_cls = model_cls

    def encode(self, value: "Model") -> dict:
        return value.serialize()

    def decode(self, value: Any, *, key: str) -> "Model":
        if not isinstance(value, dict):
            raise MalformedDocumentError(
                f"expected a {self.model_cls.__name__} object", key=key, value=value
            )
        return self.model_cls.deserialize(value)


class ModelListCodec:
    """Array of nested records."""

    def __init__(self, model_cls: Type["Model"]):
        self._item = ModelCodec(model_cls)

    def encode(self, value: List["Model"]) -> List[dict]:
        return [self._item.encode(item) for item in value]

    def decode(self, value: Any, *, key: str) -> List["Model"]:
        if not isinstance(value, list):
            raise MalformedDocumentError("expected an array", key=key, value=value)
        return [self._item.decode(item, key=f"{key}[{i}]") for i, item in enumerate(value)]
