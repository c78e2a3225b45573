"""Codec capability used by Config to turn values into file bytes and back.

Any object with ``extension``, ``encode``, ``decode`` and ``default`` works as
a codec; ``JsonCodec`` is the built-in one and is what ``Config.load`` uses
when given a plain data type.
"""

from __future__ import annotations

import json
from typing import Any, Generic, Protocol, TypeVar

from ilo_config.core.errors import DecodeError, EncodeError
from ilo_config.core.schema import (
    build_value,
    default_value,
    schema_for,
    to_primitive,
    validation_errors,
)

T = TypeVar("T")


class Codec(Protocol[T]):
    extension: str

    def encode(self, value: T) -> bytes: ...

    def decode(self, data: bytes) -> T: ...

    def default(self) -> T: ...


def _type_name(tp: Any) -> str:
    return getattr(tp, "__name__", None) or repr(tp)


class JsonCodec(Generic[T]):
    """JSON codec for dataclasses, builtins and typing generics.

    Decoding validates the parsed document against a schema derived from
    ``data_type`` and fails with DecodeError on any mismatch, so a string
    stored where a number is expected is never coerced. Encoding is
    deterministic: fields in declaration order, compact separators unless
    ``indent`` is given.
    """

    extension = ".json"

    def __init__(self, data_type: Any, indent: int | None = None):
        self.data_type = data_type
        self.indent = indent
        self.schema = schema_for(data_type)

    def __repr__(self) -> str:
        return f"JsonCodec({_type_name(self.data_type)})"

    @property
    def type_name(self) -> str:
        return _type_name(self.data_type)

    def default(self) -> T:
        return default_value(self.data_type)

    def decode(self, data: bytes) -> T:
        try:
            raw = json.loads(data.decode("utf-8"))
        except UnicodeDecodeError as e:
            raise DecodeError(f"Config is not valid UTF-8: {e}") from e
        except ValueError as e:
            # JSONDecodeError, and int-string limits on very long numbers
            raise DecodeError(f"JSON could not be parsed: {e}") from e

        errors = validation_errors(self.schema, raw)
        if errors:
            raise DecodeError(
                f"Config does not match {self.type_name}: {'; '.join(errors)}",
                context={"errors": list(errors)},
            )
        try:
            return build_value(self.data_type, raw)
        except (TypeError, ValueError, OverflowError) as e:
            # e.g. __post_init__ validation, or ints too large for a float field
            raise DecodeError(
                f"Config could not be converted to {self.type_name}: {e}"
            ) from e

    def encode(self, value: T) -> bytes:
        try:
            primitive = to_primitive(value)
        except TypeError as e:
            raise EncodeError(f"Config could not be serialized: {e}") from e

        errors = validation_errors(self.schema, primitive)
        if errors:
            raise EncodeError(
                f"Config value does not match {self.type_name}: {'; '.join(errors)}",
                context={"errors": list(errors)},
            )

        separators = (",", ": ") if self.indent is not None else (",", ":")
        try:
            text = json.dumps(
                primitive,
                indent=self.indent,
                separators=separators,
                ensure_ascii=False,
                allow_nan=False,
            )
        except ValueError as e:
            raise EncodeError(f"Config could not be serialized: {e}") from e
        return text.encode("utf-8")
