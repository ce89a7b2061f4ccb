"""Dataclass helpers for DTOs that mirror the API's JSON payloads.

Field names match the snake_case wire keys unless a field carries a ``key``
in its metadata. ``to_dict`` omits fields still holding their default value,
so a payload parsed with ``from_dict`` serializes back to the same keys it was
read from (minus keys that only carried defaults).
"""

from __future__ import annotations

from dataclasses import MISSING, Field, field, fields
from enum import Enum
from typing import Any, ClassVar, Dict, Mapping, Optional, Tuple, Type, TypeVar


T = TypeVar("T", bound="JsonDto")


def wire(
    key: Optional[str] = None,
    dto: Optional[type] = None,
    many: bool = False,
    local: bool = False,
    **kwargs,
) -> Any:
    """Declare a dataclass field with wire metadata.

    Args:
        key: JSON key, if different from the field name
        dto: JsonDto subclass used to parse the nested value
        many: The nested value is a list of ``dto``
        local: Filled in client side, never read from or written to JSON
    """
    metadata: Dict[str, Any] = {}
    if local:
        metadata["local"] = True
    if key:
        metadata["key"] = key
    if dto is not None:
        metadata["dto"] = dto
        metadata["many"] = many
    return field(metadata=metadata, **kwargs)


def _is_default(f: Field, value: Any) -> bool:
    if value is None:
        return True
    if f.default is not MISSING:
        return value == f.default
    if f.default_factory is not MISSING:  # type: ignore[misc]
        return value == f.default_factory()  # type: ignore[misc]
    return False


def to_json_value(value: Any) -> Any:
    if isinstance(value, JsonDto):
        return value.to_dict()
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (list, tuple)):
        return [to_json_value(v) for v in value]
    if isinstance(value, dict):
        return {k: to_json_value(v) for k, v in value.items()}
    return value


class JsonDto:
    """Mixin for frozen dataclasses parsed from and serialized to JSON."""

    # Fields written even when they hold their default value.
    _always_include: ClassVar[Tuple[str, ...]] = ()

    @classmethod
    def from_dict(cls: Type[T], payload: Optional[Mapping[str, Any]]) -> Optional[T]:
        if payload is None:
            return None
        kwargs: Dict[str, Any] = {}
        for f in fields(cls):  # type: ignore[arg-type]
            if not f.init or f.metadata.get("local"):
                continue
            key = f.metadata.get("key", f.name)
            if key not in payload:
                continue
            value = payload[key]
            dto = f.metadata.get("dto")
            if dto is not None and value is not None:
                if f.metadata.get("many"):
                    value = [dto.from_dict(item) for item in value]
                else:
                    value = dto.from_dict(value)
            kwargs[f.name] = value
        return cls(**kwargs)

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {}
        for f in fields(self):  # type: ignore[arg-type]
            if not f.init or f.metadata.get("local"):
                continue
            value = getattr(self, f.name)
            if f.name not in self._always_include and _is_default(f, value):
                continue
            out[f.metadata.get("key", f.name)] = to_json_value(value)
        return out
