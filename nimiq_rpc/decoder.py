"""Response decoder: raw JSON result payload to typed domain value.

Pure functions, no I/O. Decoding is strict: wrong JSON types, missing
required fields and out-of-range numbers raise :class:`DecodeError`;
nothing is coerced, widened or truncated.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .errors import DecodeError
from .shapes import (
    Bool,
    Choice,
    Float,
    Int,
    Into,
    ListOf,
    Null,
    Nullable,
    OneOf,
    Record,
    SequenceOf,
    Shape,
    Str,
)

if TYPE_CHECKING:
    from .catalog import MethodSpec


def _type_name(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "bool"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


def _mismatch(shape: Shape, value: Any, path: str) -> DecodeError:
    return DecodeError(
        f"expected {shape.describe()}, got {_type_name(value)}", path
    )


def _decode_int(shape: Int, value: Any, path: str) -> int:
    # bool is an int subclass; JSON true/false is never a number.
    if isinstance(value, bool) or not isinstance(value, int):
        raise _mismatch(shape, value, path)
    if not shape.minimum <= value <= shape.maximum:
        raise DecodeError(
            f"{value} is out of range for {shape.describe()}", path
        )
    return value


def _decode_float(shape: Float, value: Any, path: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise _mismatch(shape, value, path)
    return float(value)


def _decode_record(shape: Record, value: Any, path: str) -> Any:
    if not isinstance(value, dict):
        raise _mismatch(shape, value, path)

    kwargs: dict[str, Any] = {}
    for attr, spec in shape.fields:
        field_path = f"{path}.{spec.key}"
        if spec.key not in value:
            if spec.optional:
                kwargs[attr] = None
                continue
            raise DecodeError(
                f"missing required field '{spec.key}' of {shape.describe()}",
                field_path,
            )
        raw = value[spec.key]
        if raw is None and spec.optional:
            kwargs[attr] = None
        else:
            kwargs[attr] = decode(spec.shape, raw, field_path)
    return shape.cls(**kwargs)


def _decode_one_of(shape: OneOf, value: Any, path: str) -> Any:
    failures: list[str] = []
    for variant in shape.variants:
        try:
            return decode(variant, value, path)
        except DecodeError as e:
            failures.append(f"{variant.describe()}: {e}")
    raise DecodeError(
        f"payload matches no variant of {shape.describe()} ({'; '.join(failures)})",
        path,
    )


def _decode_sequence_of(shape: SequenceOf, value: Any, path: str) -> tuple[Any, ...]:
    if not isinstance(value, list):
        raise _mismatch(shape, value, path)

    failures: list[str] = []
    for variant in shape.variants:
        try:
            return tuple(
                decode(variant, item, f"{path}[{i}]") for i, item in enumerate(value)
            )
        except DecodeError as e:
            failures.append(f"{variant.describe()}: {e}")
    raise DecodeError(
        f"inconsistent element shapes for {shape.describe()} ({'; '.join(failures)})",
        path,
    )


def decode(shape: Shape, value: Any, path: str = "$") -> Any:
    """Decode ``value`` according to ``shape``.

    Args:
        shape: Declared wire shape.
        value: Parsed JSON value (dict/list/str/int/float/bool/None).
        path: JSONPath-like location used in error messages.

    Raises:
        DecodeError: If the value does not satisfy the shape.
    """
    if isinstance(shape, Int):
        return _decode_int(shape, value, path)
    if isinstance(shape, Float):
        return _decode_float(shape, value, path)
    if isinstance(shape, Str):
        if not isinstance(value, str):
            raise _mismatch(shape, value, path)
        return value
    if isinstance(shape, Bool):
        if not isinstance(value, bool):
            raise _mismatch(shape, value, path)
        return value
    if isinstance(shape, Null):
        if value is not None:
            raise _mismatch(shape, value, path)
        return None
    if isinstance(shape, Choice):
        if not isinstance(value, str) or value not in shape.values:
            raise _mismatch(shape, value, path)
        return value
    if isinstance(shape, Nullable):
        if value is None:
            return None
        return decode(shape.inner, value, path)
    if isinstance(shape, ListOf):
        if not isinstance(value, list):
            raise _mismatch(shape, value, path)
        return tuple(
            decode(shape.item, item, f"{path}[{i}]") for i, item in enumerate(value)
        )
    if isinstance(shape, Record):
        return _decode_record(shape, value, path)
    if isinstance(shape, Into):
        return shape.factory(decode(shape.inner, value, path))
    if isinstance(shape, OneOf):
        return _decode_one_of(shape, value, path)
    if isinstance(shape, SequenceOf):
        return _decode_sequence_of(shape, value, path)
    raise TypeError(f"Unsupported shape: {shape!r}")


def decode_result(spec: MethodSpec, raw: Any) -> Any:
    """Decode the raw result of ``spec``'s wire method."""
    return decode(spec.result, raw)
