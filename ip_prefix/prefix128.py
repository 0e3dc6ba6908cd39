"""IPv6 prefixes (0..128), rendered as eight colon-separated hex groups."""

from __future__ import annotations

from typing import Sequence

from ip_prefix.errors import ArityError
from ip_prefix.family import AddressFamily
from ip_prefix.prefix import Prefix

ADDRESS_BITS = 128
GROUP_BITS = 16
GROUP_COUNT = ADDRESS_BITS // GROUP_BITS


class Ipv6Family(AddressFamily):
    name = "ipv6"
    bits = ADDRESS_BITS
    group_bits = GROUP_BITS

    def from_length(self, num: int) -> Prefix:
        return construct(num)

    def to_netmask_string(self, groups: Sequence[int]) -> str:
        return render(groups)


IPV6 = Ipv6Family()


def construct(num: int) -> Prefix:
    return Prefix(length=num, address_bits=ADDRESS_BITS, group_bits=GROUP_BITS, family=IPV6)


def render(groups: Sequence[int]) -> str:
    if len(groups) != GROUP_COUNT:
        raise ArityError(GROUP_COUNT, len(groups))
    return ':'.join(f"{g:x}" for g in groups)
