"""Type-driven JSON Schema generation and typed value construction.

``schema_for`` turns a Python type (dataclass, builtin, generic alias, Enum,
Literal, Optional...) into a Draft 7 JSON Schema used to reject files whose
content does not match the caller's type. Once a document validates,
``build_value`` turns it into an instance of that type, and ``to_primitive``
goes the other way for saving.
"""

from __future__ import annotations

import dataclasses
import json
import types
from collections import deque
from collections.abc import Iterable, Mapping
from enum import Enum
from typing import Any, Literal, Union, get_args, get_origin, get_type_hints

from jsonschema import Draft7Validator

_PRIMITIVE_TYPES: dict[Any, str] = {
    bool: "boolean",
    int: "integer",
    float: "number",
    str: "string",
}

_ARRAY_ORIGINS = (list, set, frozenset)


def _is_union(tp: Any) -> bool:
    return get_origin(tp) in (Union, types.UnionType)


def _literal_values(tp: Any) -> list[Any]:
    return [to_primitive(arg) for arg in get_args(tp)]


def _enum_values(tp: type[Enum]) -> list[Any]:
    return [to_primitive(member.value) for member in tp]


def _dataclass_hints(cls: type) -> dict[str, Any]:
    return get_type_hints(cls)


def _has_default(f: dataclasses.Field[Any]) -> bool:
    return (
        f.default is not dataclasses.MISSING
        or f.default_factory is not dataclasses.MISSING
    )


def schema_for(tp: Any) -> dict[str, Any]:
    """Build a Draft 7 JSON Schema describing values of ``tp``."""
    if tp is Any or tp is object:
        return {}
    if tp is None or tp is type(None):
        return {"type": "null"}
    if tp in _PRIMITIVE_TYPES:
        return {"type": _PRIMITIVE_TYPES[tp]}

    origin = get_origin(tp)
    args = get_args(tp)

    if _is_union(tp):
        return {"anyOf": [schema_for(arg) for arg in args]}
    if origin is Literal:
        return {"enum": _literal_values(tp)}
    if isinstance(tp, type) and issubclass(tp, Enum):
        return {"enum": _enum_values(tp)}
    if isinstance(tp, type) and dataclasses.is_dataclass(tp):
        hints = _dataclass_hints(tp)
        fields = dataclasses.fields(tp)
        schema: dict[str, Any] = {
            "type": "object",
            "properties": {f.name: schema_for(hints[f.name]) for f in fields},
        }
        required = [f.name for f in fields if f.init and not _has_default(f)]
        if required:
            schema["required"] = required
        return schema

    if tp in _ARRAY_ORIGINS or tp is tuple:
        return {"type": "array"}
    if origin in _ARRAY_ORIGINS:
        return {"type": "array", "items": schema_for(args[0]) if args else {}}
    if origin is tuple:
        if not args or (len(args) == 2 and args[1] is Ellipsis):
            return {"type": "array", "items": schema_for(args[0]) if args else {}}
        return {
            "type": "array",
            "items": [schema_for(arg) for arg in args],
            "minItems": len(args),
            "maxItems": len(args),
        }
    if tp is dict:
        return {"type": "object"}
    if origin is dict:
        key_type, value_type = args
        if key_type not in (str, Any):
            raise TypeError(f"dict keys must be str to be stored as JSON, got {tp!r}")
        return {"type": "object", "additionalProperties": schema_for(value_type)}

    raise TypeError(f"Unsupported config type: {tp!r}")


def format_location(path: Iterable[Any]) -> str:
    """Render a jsonschema error path as ``a.b[0].c``."""
    out = ""
    for part in path:
        if isinstance(part, int):
            out += f"[{part}]"
        else:
            out += f".{part}" if out else str(part)
    return out or "<root>"


def validation_errors(schema: dict[str, Any], data: Any) -> tuple[str, ...]:
    """Return sorted ``location: message`` strings for every schema violation."""
    validator = Draft7Validator(schema)
    errors: list[tuple[str, str]] = []
    for error in validator.iter_errors(data):
        location = format_location(deque(error.absolute_path))
        errors.append((location, f"{location}: {error.message}"))
    return tuple(message for _, message in sorted(errors))


def _matches(tp: Any, value: Any) -> bool:
    return Draft7Validator(schema_for(tp)).is_valid(value)


def _pick_member(members: Iterable[Any], primitives: list[Any], value: Any) -> Any:
    for member, primitive in zip(members, primitives):
        if type(primitive) is type(value) and primitive == value:
            return member
    raise ValueError(f"{value!r} is not one of {primitives!r}")


def build_value(tp: Any, value: Any) -> Any:
    """Construct an instance of ``tp`` from JSON data already validated against it."""
    if tp is Any or tp is object:
        return value
    if get_origin(tp) is Literal:
        return _pick_member(get_args(tp), _literal_values(tp), value)
    if tp is None or tp is type(None):
        return None
    if tp is float:
        return float(value)
    if tp is int:
        return int(value)
    if tp in (bool, str):
        return value

    if _is_union(tp):
        for arg in get_args(tp):
            if _matches(arg, value):
                return build_value(arg, value)
        raise ValueError(f"{value!r} matches no member of {tp!r}")
    if isinstance(tp, type) and issubclass(tp, Enum):
        return _pick_member(list(tp), _enum_values(tp), value)
    if isinstance(tp, type) and dataclasses.is_dataclass(tp):
        hints = _dataclass_hints(tp)
        fields = [f for f in dataclasses.fields(tp) if f.name in value]
        instance = tp(
            **{
                f.name: build_value(hints[f.name], value[f.name])
                for f in fields
                if f.init
            }
        )
        # init=False fields are restored after construction; frozen classes too
        for f in fields:
            if not f.init:
                object.__setattr__(
                    instance, f.name, build_value(hints[f.name], value[f.name])
                )
        return instance

    origin = get_origin(tp) or tp
    args = get_args(tp)
    if origin in _ARRAY_ORIGINS:
        item_type = args[0] if args else Any
        return origin(build_value(item_type, item) for item in value)
    if origin is tuple:
        if not args or (len(args) == 2 and args[1] is Ellipsis):
            item_type = args[0] if args else Any
            return tuple(build_value(item_type, item) for item in value)
        return tuple(build_value(arg, item) for arg, item in zip(args, value))
    if origin is dict:
        value_type = args[1] if args else Any
        return {key: build_value(value_type, item) for key, item in value.items()}

    raise TypeError(f"Unsupported config type: {tp!r}")


def default_value(tp: Any) -> Any:
    """First-run value for ``tp``: ``tp()`` where possible, ``None`` for Optional."""
    if tp is Any or tp is object or tp is None or tp is type(None):
        return None
    if _is_union(tp):
        args = get_args(tp)
        return None if type(None) in args else default_value(args[0])
    origin = get_origin(tp)
    args = get_args(tp)
    if origin is Literal:
        return args[0]
    if isinstance(tp, type) and issubclass(tp, Enum):
        return next(iter(tp))
    if origin is tuple and args and not (len(args) == 2 and args[1] is Ellipsis):
        return tuple(default_value(arg) for arg in args)
    if origin is not None:
        return origin()
    try:
        return tp()
    except TypeError as e:
        raise TypeError(f"Config type {tp!r} is not default-constructible: {e}") from e


def _sort_key(item: Any) -> str:
    return json.dumps(item, sort_keys=True, allow_nan=True)


def to_primitive(value: Any) -> Any:
    """Convert a typed value into plain JSON data (dicts, lists, scalars)."""
    if isinstance(value, Enum):
        return to_primitive(value.value)
    if value is None or isinstance(value, (bool, int, float, str)):
        return value
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {
            f.name: to_primitive(getattr(value, f.name))
            for f in dataclasses.fields(value)
        }
    if isinstance(value, Mapping):
        out: dict[str, Any] = {}
        for key, item in value.items():
            if not isinstance(key, str):
                raise TypeError(f"dict key {key!r} is not a string")
            out[key] = to_primitive(item)
        return out
    if isinstance(value, (list, tuple)):
        return [to_primitive(item) for item in value]
    if isinstance(value, (set, frozenset)):
        return sorted((to_primitive(item) for item in value), key=_sort_key)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")
