"""Strict conversion between JSON builtins and botwire's typed records.

Types without a polymorphic field go straight through ``msgspec.convert``.
Types that reach a registered variant family are walked field by field so the
family can pick its variant from the discriminant before msgspec takes over.
"""

from __future__ import annotations

import types
from typing import Any, Protocol, TypeVar, Union, get_args, get_origin

import msgspec
from msgspec import UnsetType

T = TypeVar("T")

_UNION_ORIGINS = (Union, types.UnionType)
_NONE_TYPE = type(None)


class DecodeError(ValueError):
    """Raw payload does not match the shape of its declared type."""

    def __init__(self, reason: str, *, raw: Any, path: str = "$") -> None:
        self.reason = reason
        self.raw = raw
        self.path = path
        super().__init__(reason if path == "$" else f"{reason} - at `{path}`")


class Family(Protocol):
    name: str

    def select(self, obj: Any, path: str) -> type: ...


_FAMILIES: dict[frozenset[Any], Family] = {}
_WALK_CACHE: dict[Any, bool] = {}


def register_family(members: tuple[type, ...], family: Family) -> None:
    key = frozenset(members)
    existing = _FAMILIES.get(key)
    if existing is not None and existing is not family:
        raise ValueError(f"variant family {existing.name} already covers {family.name}")
    _FAMILIES[key] = family
    _WALK_CACHE.clear()


def family_for(members: tuple[Any, ...]) -> Family | None:
    return _FAMILIES.get(frozenset(members))


def encode(value: Any) -> Any:
    """Lower a record to JSON builtins, dropping every UNSET field."""
    return msgspec.to_builtins(value)


def to_json(value: Any) -> bytes:
    return msgspec.json.encode(value)


def convert(raw: Any, type_: Any, *, path: str = "$") -> Any:
    """Decode already-parsed JSON ``raw`` into ``type_`` or raise DecodeError."""
    return _convert(raw, type_, path)


def decode_json(data: bytes | str, type_: type[T]) -> T:
    try:
        raw = msgspec.json.decode(data)
    except msgspec.DecodeError as exc:
        raise DecodeError(str(exc), raw=data) from exc
    return _convert(raw, type_, "$")


def _convert(obj: Any, tp: Any, path: str) -> Any:
    if not _needs_walk(tp):
        try:
            return msgspec.convert(obj, tp)
        except msgspec.ValidationError as exc:
            raise _wrap(exc, obj, path) from exc

    origin = get_origin(tp)
    if origin in _UNION_ORIGINS:
        return _convert_union(obj, tp, path)
    if origin is list:
        if not isinstance(obj, list):
            raise DecodeError(f"Expected `array`, got `{_kind(obj)}`", raw=obj, path=path)
        (item_type,) = get_args(tp)
        return [
            _convert(item, item_type, f"{path}[{index}]")
            for index, item in enumerate(obj)
        ]
    if origin is dict:
        if not isinstance(obj, dict):
            raise DecodeError(f"Expected `object`, got `{_kind(obj)}`", raw=obj, path=path)
        _, value_type = get_args(tp)
        return {
            key: _convert(value, value_type, f"{path}.{key}")
            for key, value in obj.items()
        }
    if _is_struct(tp):
        return _convert_struct(obj, tp, path)
    raise TypeError(f"cannot walk type {tp!r}")


def _convert_union(obj: Any, tp: Any, path: str) -> Any:
    args = get_args(tp)
    if obj is None and _NONE_TYPE in args:
        return None
    members = _members(tp)
    family = family_for(members)
    if family is not None:
        return _convert(obj, family.select(obj, path), path)
    if len(members) == 1:
        return _convert(obj, members[0], path)
    raise TypeError(
        f"union {tp!r} mixes structured members without a registered variant family"
    )


def _convert_struct(obj: Any, tp: type, path: str) -> Any:
    if not isinstance(obj, dict):
        raise DecodeError(f"Expected `object`, got `{_kind(obj)}`", raw=obj, path=path)
    kwargs: dict[str, Any] = {}
    for field in msgspec.structs.fields(tp):
        if field.encode_name not in obj:
            if field.required:
                raise DecodeError(
                    f"Object missing required field `{field.encode_name}`",
                    raw=obj,
                    path=path,
                )
            continue
        kwargs[field.name] = _convert(
            obj[field.encode_name],
            _strip_unset(field.type),
            f"{path}.{field.encode_name}",
        )
    return tp(**kwargs)


def _needs_walk(tp: Any) -> bool:
    cached = _WALK_CACHE.get(tp)
    if cached is None:
        cached = _WALK_CACHE[tp] = _reaches_family(tp, set())
    return cached


def _reaches_family(tp: Any, seen: set[Any]) -> bool:
    if tp in seen:
        return False
    seen.add(tp)
    origin = get_origin(tp)
    if origin in _UNION_ORIGINS:
        members = _members(tp)
        if family_for(members) is not None:
            return True
        return any(_reaches_family(member, seen) for member in members)
    if origin is not None:
        return any(_reaches_family(arg, seen) for arg in get_args(tp))
    if _is_struct(tp):
        return any(
            _reaches_family(field.type, seen) for field in msgspec.structs.fields(tp)
        )
    return False


def _members(tp: Any) -> tuple[Any, ...]:
    return tuple(
        arg for arg in get_args(tp) if arg is not _NONE_TYPE and arg is not UnsetType
    )


def _strip_unset(tp: Any) -> Any:
    if get_origin(tp) not in _UNION_ORIGINS:
        return tp
    args = tuple(arg for arg in get_args(tp) if arg is not UnsetType)
    if len(args) == 1:
        return args[0]
    return Union[args]


def _is_struct(tp: Any) -> bool:
    return isinstance(tp, type) and issubclass(tp, msgspec.Struct)


def _wrap(exc: msgspec.ValidationError, obj: Any, path: str) -> DecodeError:
    message = str(exc)
    reason, sep, inner = message.rpartition(" - at `")
    if not sep:
        return DecodeError(message, raw=obj, path=path)
    inner = inner.rstrip("`")
    return DecodeError(reason, raw=obj, path=path + inner[1:])


def _kind(obj: Any) -> str:
    if obj is None:
        return "null"
    if isinstance(obj, bool):
        return "bool"
    if isinstance(obj, int):
        return "int"
    if isinstance(obj, float):
        return "float"
    if isinstance(obj, str):
        return "str"
    if isinstance(obj, list):
        return "array"
    if isinstance(obj, dict):
        return "object"
    return type(obj).__name__


__all__ = [
    "DecodeError",
    "convert",
    "decode_json",
    "encode",
    "family_for",
    "register_family",
    "to_json",
]
