"""Typed records mapped to JSON documents through an explicit field table.

Each record class lists its fields once, in ``_fields``, as
``FieldSpec(attribute, wire key, codec)``. Serialization walks that table;
nothing is inferred from annotations.

Unset fields hold ``None`` and are left out of serialized documents. On the
way in, unknown keys are ignored and ``null`` is read as absent.

Records can carry a post-construction hook for custom defaults:

    >>> from providerhub.models.resource_type_extension import ResourceTypeExtension
    >>> def default_categories(record):
    ...     if record.extension_categories is None:
    ...         record.extension_categories = []
    >>> ResourceTypeExtension.set_custom_init(default_categories)
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Callable, ClassVar, Dict, Mapping, Optional, Tuple, Type, TypeVar

from providerhub.core.exceptions import MalformedDocumentError
from providerhub.core.logger import get_logger
from providerhub.models.codecs import FieldCodec

logger = get_logger(__name__)

M = TypeVar("M", bound="Model")

CustomInit = Callable[["Model"], None]


@dataclass(frozen=True)
class FieldSpec:
    attr: str
    key: str
    codec: FieldCodec


class Model:
    _fields: ClassVar[Tuple[FieldSpec, ...]] = ()
    _custom_init: ClassVar[Optional[CustomInit]] = None

    @classmethod
    def set_custom_init(cls, hook: Optional[CustomInit]) -> None:
        """Install (or clear, with ``None``) the hook run after every construction of ``cls``."""
        cls._custom_init = staticmethod(hook) if hook is not None else None

    def _run_custom_init(self, hook: Optional[CustomInit] = None) -> None:
        hook = hook or type(self)._custom_init
        if hook is not None:
            hook(self)

    # -----------------
    # Serialization
    # -----------------

    def serialize(self) -> Dict[str, Any]:
        """Return the wire document for this record; unset fields are omitted."""
        document: Dict[str, Any] = {}
        for spec in self._fields:
            value = getattr(self, spec.attr)
            if value is None:
                continue
            document[spec.key] = spec.codec.encode(value)
        return document

    @classmethod
    def deserialize(cls: Type[M], document: Any) -> M:
        """Build a record from a wire document.

        Raises:
            MalformedDocumentError: if ``document`` is not an object or a
                known key holds a value of the wrong type.
        """
        if not isinstance(document, Mapping):
            raise MalformedDocumentError(
                f"expected a JSON object for {cls.__name__}, got {type(document).__name__}"
            )

        values: Dict[str, Any] = {}
        try:
            for spec in cls._fields:
                raw = document.get(spec.key)
                if raw is None:
                    continue
                values[spec.attr] = spec.codec.decode(raw, key=spec.key)
        except MalformedDocumentError as exc:
            logger.debug(f"Rejected {cls.__name__} document: {exc}")
            raise

        return cls(**values)

    def to_json(self, **dumps_kwargs: Any) -> str:
        return json.dumps(self.serialize(), **dumps_kwargs)

    @classmethod
    def from_json(cls: Type[M], text: str) -> M:
        try:
            document = json.loads(text)
        except json.JSONDecodeError as exc:
            raise MalformedDocumentError(f"invalid JSON: {exc.msg}") from exc
        return cls.deserialize(document)

    # -----------------
    # Value semantics
    # -----------------

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return all(self._wire_value(s) == other._wire_value(s) for s in self._fields)

    def _wire_value(self, spec: FieldSpec) -> Any:
        # Compare as encoded so a tuple and a list of the same strings agree
        value = getattr(self, spec.attr)
        return None if value is None else spec.codec.encode(value)

    def __repr__(self) -> str:
        parts = [
            f"{s.attr}={getattr(self, s.attr)!r}"
            for s in self._fields
            if getattr(self, s.attr) is not None
        ]
        return f"{type(self).__name__}({', '.join(parts)})"
