"""Prefix value object.

A Prefix is the length part of a CIDR block ("/24") together with the width of the
address family it belongs to. Everything else (netmask, host mask, dotted groups) is
derived from those two numbers.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, TYPE_CHECKING

import xxhash

if TYPE_CHECKING:
    from ip_prefix.family import AddressFamily


def in_mask(bits: int) -> int:
    """All-ones mask `bits` wide, e.g. in_mask(32) == 0xFFFFFFFF."""
    return (1 << bits) - 1


@dataclass(frozen=True)
class Prefix:
    """Immutable prefix length bound to an address family.

    Example: prefix32.construct(24).to_ip_str() == '255.255.255.0'
    """
    length: int
    address_bits: int
    group_bits: int
    family: AddressFamily

    # Derived once when the Prefix is created.
    in_mask: int = field(init=False, repr=False, compare=False)
    mask: int = field(init=False, repr=False, compare=False)
    _hash: int = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.group_bits <= 0 or self.address_bits % self.group_bits != 0:
            raise ValueError(
                f"address_bits ({self.address_bits}) must be a multiple of group_bits ({self.group_bits})")
        self.family.check_length(self.length, self.address_bits)
        full = in_mask(self.address_bits)
        host_bits = self.address_bits - self.length
        object.__setattr__(self, 'in_mask', full)
        object.__setattr__(self, 'mask', (full >> host_bits) << host_bits)
        object.__setattr__(self, '_hash', xxhash.xxh64(
            f"{self.family.name}/{self.address_bits}/{self.group_bits}/{self.length}".encode()).intdigest())

    def __hash__(self) -> int:
        return self._hash

    def __str__(self) -> str:
        return str(self.length)

    def to_cidr_str(self) -> str:
        return f"/{self.length}"

    def host_prefix(self) -> int:
        return self.address_bits - self.length

    def host_mask(self) -> int:
        return self.in_mask ^ self.mask

    def size(self) -> int:
        """Number of addresses covered by a network with this prefix."""
        return 1 << self.host_prefix()

    def to_int(self) -> int:
        return self.mask

    def groups(self) -> List[int]:
        """Netmask groups, most significant first (octets for IPv4)."""
        return self._split(self.mask)

    def _split(self, value: int) -> List[int]:
        group_mask = in_mask(self.group_bits)
        count = self.address_bits // self.group_bits
        return [(value >> (self.group_bits * (count - 1 - i))) & group_mask for i in range(count)]

    def __getitem__(self, index: int) -> int:
        return self.groups()[index]

    def to_ip_str(self) -> str:
        """Netmask in the family's canonical notation, e.g. '255.255.255.0'."""
        return self.family.to_netmask_string(self.groups())

    def hostmask_str(self) -> str:
        return self.family.to_netmask_string(self._split(self.host_mask()))

    def from_length(self, num: int) -> Prefix:
        return self.family.from_length(num)

    def add(self, num: int) -> Prefix:
        return self.from_length(self.length + num)

    def sub(self, num: int) -> Prefix:
        return self.from_length(self.length - num)

    def inc(self) -> Prefix:
        return self.add(1)

    def dec(self) -> Prefix:
        return self.sub(1)
