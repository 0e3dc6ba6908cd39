from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional, Sequence, TYPE_CHECKING

from ip_prefix.errors import RangeError

if TYPE_CHECKING:
    from ip_prefix.prefix import Prefix


class AddressFamily(ABC):
    """An address family a Prefix can belong to.

    A Prefix keeps a reference to its family so generic code can format a netmask or
    derive a new prefix without knowing whether it holds an IPv4 or IPv6 value.

    Contract:
      - `from_length(n)` returns a Prefix of this family or raises RangeError.
      - `to_netmask_string(groups)` formats `group_count` numeric groups.
    """

    name: str
    bits: int
    group_bits: int

    @property
    def group_count(self) -> int:
        return self.bits // self.group_bits

    def check_length(self, num: int, bits: Optional[int] = None) -> None:
        high = self.bits if bits is None else bits
        # bool is an int subclass, but True/False are never meant as lengths
        if isinstance(num, bool) or not isinstance(num, int):
            raise TypeError(f"Prefix length must be an int, got {type(num).__name__}")
        if not (0 <= num <= high):
            raise RangeError(num, 0, high)

    @abstractmethod
    def from_length(self, num: int) -> Prefix:
        raise NotImplementedError

    @abstractmethod
    def to_netmask_string(self, groups: Sequence[int]) -> str:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"AddressFamily({self.name})"
