"""Named object types compared by a checksum of their names."""

from __future__ import annotations

from functools import total_ordering

_BASE = 65521  # largest prime smaller than 65536
_NMAX = 5552
_MASK = 0xFFFFFFFF


def _signed(byte: int) -> int:
    return byte - 256 if byte >= 128 else byte


def _lower(byte: int) -> int:
    if 0x41 <= byte <= 0x5A:
        return byte + 32
    return _signed(byte)


def hash_name(name: str | None) -> int:
    """Adler-style checksum of a type name, as a 32-bit unsigned integer.

    Characters in whole 16-byte blocks are lowered before summing; the
    remaining characters are summed as they are.  ``None`` hashes to 0.
    """
    if name is None:
        return 0
    data = name.encode("utf-8")
    s1 = s2 = 0
    pos = 0
    remaining = len(data)
    while remaining > 0:
        k = min(remaining, _NMAX)
        remaining -= k
        while k >= 16:
            for byte in data[pos:pos + 16]:
                s1 = (s1 + _lower(byte)) & _MASK
                s2 = (s2 + s1) & _MASK
            pos += 16
            k -= 16
        if k:
            for byte in data[pos:pos + k]:
                s1 = (s1 + _signed(byte)) & _MASK
                s2 = (s2 + s1) & _MASK
            pos += k
            s1 %= _BASE
            s2 %= _BASE
    return ((s2 << 16) | s1) & _MASK


@total_ordering
class GameObjectType:
    """A type tag; two tags are equal when their name checksums are equal."""

    __slots__ = ("_name", "_type_id")

    def __init__(self, name: str) -> None:
        self._name = name
        self._type_id = hash_name(name)

    @property
    def name(self) -> str:
        return self._name

    @property
    def type_id(self) -> int:
        return self._type_id

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GameObjectType):
            return NotImplemented
        return self._type_id == other._type_id

    def __lt__(self, other: GameObjectType) -> bool:
        if not isinstance(other, GameObjectType):
            return NotImplemented
        return self._type_id < other._type_id

    def __hash__(self) -> int:
        return hash(self._type_id)

    def __repr__(self) -> str:
        return f"GameObjectType({self._name!r})"