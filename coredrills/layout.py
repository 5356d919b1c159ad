"""Member offsets, padding and size of C-like structs, aligned or packed."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, Mapping, Optional


def _align_up(value: int, alignment: int) -> int:
    return (value + alignment - 1) // alignment * alignment


@dataclass(frozen=True)
class Field:
    """One struct member: its name, byte size and required alignment.

    The alignment defaults to the size, as for plain integer types.
    """

    name: str
    size: int
    alignment: Optional[int] = None

    def __post_init__(self) -> None:
        if self.size <= 0:
            raise ValueError(f"field {self.name!r} must have a positive size")
        if self.alignment is None:
            object.__setattr__(self, "alignment", self.size)
        align = self.alignment
        if align <= 0 or align & (align - 1):
            raise ValueError(f"field {self.name!r} alignment {align} is not a power of two")


@dataclass(frozen=True)
class StructLayout:
    """The computed layout: member offsets, total size and struct alignment."""

    offsets: Mapping[str, int]
    size: int
    alignment: int
    packed: bool
    fields: tuple[Field, ...] = field(default=())

    def offset_of(self, name: str) -> int:
        """Byte offset of member ``name``; KeyError when there is no such member."""
        try:
            return self.offsets[name]
        except KeyError:
            raise KeyError(f"no member named {name!r}") from None

    @property
    def padding(self) -> int:
        """Bytes the compiler would insert between and after the members."""
        return self.size - sum(f.size for f in self.fields)


def compute_layout(fields: Iterable[Field], packed: bool = False) -> StructLayout:
    """Lay the fields out in order.

    Unpacked, each member starts at a multiple of its alignment and the total
    size is rounded up to the largest alignment. Packed, members follow each
    other with no padding and the struct aligns to one byte.
    """
    members = tuple(fields)
    if not members:
        raise ValueError("a struct needs at least one field")
    offsets: dict[str, int] = {}
    cursor = 0
    struct_align = 1
    for member in members:
        if member.name in offsets:
            raise ValueError(f"duplicate field name {member.name!r}")
        if not packed:
            cursor = _align_up(cursor, member.alignment)
            struct_align = max(struct_align, member.alignment)
        offsets[member.name] = cursor
        cursor += member.size
    size = cursor if packed else _align_up(cursor, struct_align)
    return StructLayout(
        offsets=MappingProxyType(offsets),
        size=size,
        alignment=struct_align,
        packed=packed,
        fields=members,
    )