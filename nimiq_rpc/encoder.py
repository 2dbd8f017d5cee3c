"""Parameter encoder: typed call arguments to the positional wire list."""
from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from .errors import EncodingError
from .shapes import Bool, Choice, Float, Int, ListOf, Nullable, Record, Shape, Str

if TYPE_CHECKING:
    from .catalog import MethodSpec


def encode_value(shape: Shape, value: Any, where: str) -> Any:
    """Encode one argument, rejecting anything outside its declared shape."""
    if isinstance(shape, Int):
        if isinstance(value, bool) or not isinstance(value, int):
            raise EncodingError(
                f"{where}: expected {shape.describe()}, got {type(value).__name__}"
            )
        if not shape.minimum <= value <= shape.maximum:
            raise EncodingError(
                f"{where}: {value} does not fit {shape.describe()} "
                f"[{shape.minimum}, {shape.maximum}]"
            )
        return value
    if isinstance(shape, Float):
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise EncodingError(f"{where}: expected float, got {type(value).__name__}")
        return float(value)
    if isinstance(shape, Str):
        if not isinstance(value, str):
            raise EncodingError(f"{where}: expected string, got {type(value).__name__}")
        return value
    if isinstance(shape, Bool):
        if not isinstance(value, bool):
            raise EncodingError(f"{where}: expected bool, got {type(value).__name__}")
        return value
    if isinstance(shape, Choice):
        if value not in shape.values:
            raise EncodingError(f"{where}: expected {shape.describe()}, got {value!r}")
        return value
    if isinstance(shape, Nullable):
        return None if value is None else encode_value(shape.inner, value, where)
    if isinstance(shape, ListOf):
        if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
            raise EncodingError(f"{where}: expected {shape.describe()}")
        return [
            encode_value(shape.item, item, f"{where}[{i}]")
            for i, item in enumerate(value)
        ]
    if isinstance(shape, Record):
        if not isinstance(value, shape.cls):
            raise EncodingError(
                f"{where}: expected {shape.describe()}, got {type(value).__name__}"
            )
        encoded: dict[str, Any] = {}
        for attr, spec in shape.fields:
            item = getattr(value, attr)
            if item is None and spec.optional:
                continue
            encoded[spec.key] = encode_value(spec.shape, item, f"{where}.{spec.key}")
        return encoded
    raise EncodingError(f"{where}: {shape.describe()} cannot be sent as a parameter")


def encode_params(spec: MethodSpec, args: Sequence[Any]) -> list[Any]:
    """Build the ordered parameter list for ``spec``.

    Raises:
        EncodingError: On an arity mismatch or an argument that does not fit
            its declared parameter shape.
    """
    if len(args) != len(spec.params):
        raise EncodingError(
            f"{spec.operation} expects {len(spec.params)} parameter(s), "
            f"got {len(args)}"
        )
    return [
        encode_value(param.shape, arg, f"{spec.operation}({param.name})")
        for param, arg in zip(spec.params, args)
    ]
