"""Immutable value model for tnetstring payloads.

This module provides the closed set of value types the codec can carry. Each
type is a frozen Pydantic model tagged with a ``kind`` literal, and ``Value``
is the discriminated union of all seven.

Example:
    >>> from tnscodec.models import Bytes, List, Map
    >>> pets = List(items=(Bytes(value=b"cat"), Bytes(value=b"dog")))
    >>> doc = Map(entries=((b"pets", pets),))
    >>> doc.get(b"pets") == pets
    True
"""

from __future__ import annotations

from typing import Annotated, Any, ClassVar, Literal, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictBytes,
    StrictFloat,
    StrictInt,
    field_validator,
)

from ..codec.tags import INT64_MAX, INT64_MIN, WireType


class BaseValue(BaseModel):
    """Base class for all tnetstring values.

    Values are frozen snapshots: they can be hashed, compared and shared
    between threads, but never mutated after construction.

    Attributes:
        wire_type: Tag byte this value is written with
    """

    model_config = ConfigDict(
        # Values are immutable snapshots
        frozen=True,
        # Reject unknown fields
        extra="forbid",
    )

    wire_type: ClassVar[WireType]


class Null(BaseValue):
    """The null value, always written as ``0:~``."""

    kind: Literal["null"] = "null"

    wire_type: ClassVar[WireType] = WireType.NULL


class Bool(BaseValue):
    """A boolean, written as ``true`` or ``false``."""

    kind: Literal["bool"] = "bool"
    value: StrictBool

    wire_type: ClassVar[WireType] = WireType.BOOL


class Int(BaseValue):
    """A signed 64-bit integer."""

    kind: Literal["int"] = "int"
    value: StrictInt = Field(ge=INT64_MIN, le=INT64_MAX)

    wire_type: ClassVar[WireType] = WireType.INT


class Float(BaseValue):
    """A finite double-precision number."""

    kind: Literal["float"] = "float"
    value: StrictFloat = Field(allow_inf_nan=False)

    wire_type: ClassVar[WireType] = WireType.FLOAT


class Bytes(BaseValue):
    """An opaque byte string. No character set is assumed."""

    kind: Literal["bytes"] = "bytes"
    value: StrictBytes

    wire_type: ClassVar[WireType] = WireType.BYTES


class List(BaseValue):
    """An ordered sequence of values."""

    kind: Literal["list"] = "list"
    items: tuple[Value, ...] = ()

    wire_type: ClassVar[WireType] = WireType.LIST

    def __len__(self) -> int:
        return len(self.items)

    def __getitem__(self, index: int) -> Value:
        return self.items[index]


class Map(BaseValue):
    """An ordered sequence of (key, value) pairs with unique byte-string keys.

    Entry order is the order the map was built or decoded in, and it is the
    order the encoder writes.
    """

    kind: Literal["map"] = "map"
    entries: tuple[tuple[StrictBytes, Value], ...] = ()

    wire_type: ClassVar[WireType] = WireType.MAP

    @field_validator("entries")
    @classmethod
    def _keys_unique(
        cls, entries: tuple[tuple[bytes, Value], ...]
    ) -> tuple[tuple[bytes, Value], ...]:
        seen: set[bytes] = set()
        for key, _ in entries:
            if key in seen:
                raise ValueError(f"duplicate map key {key!r}")
            seen.add(key)
        return entries

    def __len__(self) -> int:
        return len(self.entries)

    def __contains__(self, key: object) -> bool:
        return any(k == key for k, _ in self.entries)

    def keys(self) -> list[bytes]:
        """Return the keys in entry order."""
        return [key for key, _ in self.entries]

    def get(self, key: bytes, default: Any = None) -> Any:
        """Return the value stored under ``key``, or ``default``."""
        for k, v in self.entries:
            if k == key:
                return v
        return default


Value = Annotated[
    Union[Null, Bool, Int, Float, Bytes, List, Map],
    Field(discriminator="kind"),
]

VALUE_TYPES: tuple[type[BaseValue], ...] = (Null, Bool, Int, Float, Bytes, List, Map)

List.model_rebuild()
Map.model_rebuild()
