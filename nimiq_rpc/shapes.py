"""Wire-shape vocabulary: declarative description of JSON values.

Shapes are pure data. The encoder and decoder interpret them; the catalog
and the models only declare them. Record shapes are bound to frozen
dataclasses whose fields carry their wire key and shape via :func:`wire`.
"""
from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Any, Callable


class Shape:
    """Base class for every wire shape."""

    def describe(self) -> str:
        raise NotImplementedError


@dataclass(frozen=True)
class Int(Shape):
    """JSON integer constrained to a fixed width and signedness."""

    bits: int
    signed: bool = False

    @property
    def minimum(self) -> int:
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def maximum(self) -> int:
        return (1 << (self.bits - 1)) - 1 if self.signed else (1 << self.bits) - 1

    def describe(self) -> str:
        return f"{'i' if self.signed else 'u'}{self.bits}"


@dataclass(frozen=True)
class Float(Shape):
    def describe(self) -> str:
        return "float"


@dataclass(frozen=True)
class Str(Shape):
    def describe(self) -> str:
        return "string"


@dataclass(frozen=True)
class Bool(Shape):
    def describe(self) -> str:
        return "bool"


@dataclass(frozen=True)
class Null(Shape):
    def describe(self) -> str:
        return "null"


@dataclass(frozen=True)
class Choice(Shape):
    """String restricted to a fixed set of values."""

    values: tuple[str, ...]

    def describe(self) -> str:
        return "one of " + "/".join(self.values)


@dataclass(frozen=True)
class ListOf(Shape):
    item: Shape

    def describe(self) -> str:
        return f"list[{self.item.describe()}]"


@dataclass(frozen=True)
class Nullable(Shape):
    """Either ``null`` (decoded as ``None``) or the inner shape."""

    inner: Shape

    def describe(self) -> str:
        return f"{self.inner.describe()} | null"


@dataclass(frozen=True)
class Record(Shape):
    """JSON object mapped onto a frozen dataclass."""

    cls: type

    @property
    def fields(self) -> tuple[tuple[str, "WireField"], ...]:
        return record_fields(self.cls)

    def describe(self) -> str:
        return self.cls.__name__


@dataclass(frozen=True)
class Into(Shape):
    """Inner shape whose decoded value is passed to ``factory``.

    Used for union variants that are bare scalars on the wire but need a
    distinct domain type (``false`` -> ``SyncState(syncing=False)``).
    """

    inner: Shape
    factory: Callable[[Any], Any]
    name: str

    def describe(self) -> str:
        return self.name


@dataclass(frozen=True)
class OneOf(Shape):
    """Untagged union; variants are attempted in declared order.

    The first variant that decodes the whole payload wins, so when two
    variants could both match, only the earlier one is ever produced.
    """

    name: str
    variants: tuple[Shape, ...]

    def describe(self) -> str:
        return self.name


@dataclass(frozen=True)
class SequenceOf(Shape):
    """JSON array whose elements all share one of several element shapes.

    Element variants are attempted in declared order; a variant is chosen
    only if it decodes every element. An empty array resolves to the
    first variant.
    """

    name: str
    variants: tuple[Shape, ...]

    def describe(self) -> str:
        return self.name


# ---------------------------------------------------------------------------
# Record field metadata
# ---------------------------------------------------------------------------

_WIRE = "nimiq_rpc.wire"


@dataclass(frozen=True)
class WireField:
    key: str
    shape: Shape
    optional: bool = False


def wire(key: str, shape: Shape, *, optional: bool = False) -> Any:
    """Declare a dataclass field's wire key and shape.

    Optional fields get no default: the decoder always passes ``None``
    explicitly when the key is absent.
    """
    return field(metadata={_WIRE: WireField(key, shape, optional)})


def record_fields(cls: type) -> tuple[tuple[str, WireField], ...]:
    """Return ``(attribute, WireField)`` pairs in declaration order."""
    pairs: list[tuple[str, WireField]] = []
    for f in dataclasses.fields(cls):
        spec = f.metadata.get(_WIRE)
        if spec is None:
            raise TypeError(f"{cls.__name__}.{f.name} has no wire declaration")
        pairs.append((f.name, spec))
    return tuple(pairs)


# ---------------------------------------------------------------------------
# Common scalar shapes
# ---------------------------------------------------------------------------

U8 = Int(8)
U16 = Int(16)
U32 = Int(32)
U64 = Int(64)
I8 = Int(8, signed=True)
I64 = Int(64, signed=True)
FLOAT = Float()
STR = Str()
BOOL = Bool()
NULL = Null()
