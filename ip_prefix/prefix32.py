"""IPv4 prefixes: construction, netmask parsing and dotted-decimal rendering.

    prefix = construct(24)
    prefix.to_ip_str()                      # => '255.255.255.0'
    parse_netmask('255.255.255.0').length   # => 24
"""

from __future__ import annotations

import logging
import re
from typing import Sequence

from ip_prefix.errors import ArityError, GroupParseError, NetmaskContiguityError, RangeError, ValidationError
from ip_prefix.family import AddressFamily
from ip_prefix.prefix import Prefix, in_mask

_logger = logging.getLogger(__name__)

ADDRESS_BITS = 32
GROUP_BITS = 8
GROUP_COUNT = ADDRESS_BITS // GROUP_BITS

_GROUP_RE = re.compile(r"[0-9]{1,3}")
_LENGTH_RE = re.compile(r"/?([0-9]{1,3})")


class Ipv4Family(AddressFamily):
    name = "ipv4"
    bits = ADDRESS_BITS
    group_bits = GROUP_BITS

    def from_length(self, num: int) -> Prefix:
        return construct(num)

    def to_netmask_string(self, groups: Sequence[int]) -> str:
        return render(groups)


IPV4 = Ipv4Family()


def construct(num: int) -> Prefix:
    """Build the IPv4 Prefix for a length in 0..32.

    Raises RangeError (carrying the offending value) when num is out of range.
    """
    return Prefix(length=num, address_bits=ADDRESS_BITS, group_bits=GROUP_BITS, family=IPV4)


def render(groups: Sequence[int]) -> str:
    """Format four groups as 'g0.g1.g2.g3'. The values are not range checked."""
    if len(groups) != GROUP_COUNT:
        raise ArityError(GROUP_COUNT, len(groups))
    return '.'.join(str(g) for g in groups)


def _parse_group(group: str, text: str) -> int:
    if not _GROUP_RE.fullmatch(group):
        raise GroupParseError(group, text)
    value = int(group)
    if value > 255:
        raise GroupParseError(group, text, "out of range 0..255")
    return value


def _pack(text: str) -> int:
    parts = text.strip().split('.')
    if len(parts) != GROUP_COUNT:
        raise GroupParseError(text, text, f"expected {GROUP_COUNT} groups, got {len(parts)}")
    ip = 0
    shift = ADDRESS_BITS - GROUP_BITS
    for part in parts:
        ip |= _parse_group(part, text) << shift
        shift -= GROUP_BITS
    return ip


def validate_contiguous_mask(bits: int, address_bits: int = ADDRESS_BITS) -> int:
    """Return the prefix length encoded by a netmask given as an integer.

    The mask must be ones from the most significant bit followed by zeros. Scanning
    starts at the least significant bit: first the run of zeros is consumed, then every
    remaining bit has to be a one.
    """
    if bits < 0 or bits > in_mask(address_bits):
        raise ValidationError(f"Mask 0x{bits:x} does not fit in {address_bits} bits")
    value = bits
    nulls = 0
    while nulls < address_bits:
        if bits & 0x1:
            break
        bits >>= 1
        nulls += 1
    one_prefix = 0
    while nulls < address_bits:
        if not bits & 0x1:
            raise NetmaskContiguityError(f"0x{value:0{address_bits // 4}x}")
        one_prefix += 1
        bits >>= 1
        nulls += 1
    return one_prefix


def parse_netmask(text: str) -> Prefix:
    """Parse a dotted-decimal netmask such as '255.255.255.0' into a Prefix.

    Malformed groups raise GroupParseError, masks that are not a contiguous run of ones
    raise NetmaskContiguityError naming the netmask text.

    Each group must be one to three ASCII digits. Signs ('+255') and zero padding
    beyond three characters ('0255') are rejected even though int() would take them.
    """
    ip = _pack(text)
    try:
        one_prefix = validate_contiguous_mask(ip)
    except NetmaskContiguityError:
        _logger.debug("Rejected non-contiguous netmask %s", text)
        raise NetmaskContiguityError(text) from None
    _logger.debug("Parsed netmask %s as /%d", text, one_prefix)
    return construct(one_prefix)


def is_valid_netmask(text: str) -> bool:
    """True when text is a well-formed, contiguous IPv4 netmask."""
    try:
        parse_netmask(text)
    except ValidationError:
        return False
    return True


def parse_netmask_to_prefix(text: str) -> int:
    """Prefix length from '24', '/24' or '255.255.255.0'.

    Only ASCII digits count as a length; other text is parsed as a netmask.
    """
    m = _LENGTH_RE.fullmatch(text.strip())
    if m:
        num = int(m.group(1))
        if not (0 <= num <= ADDRESS_BITS):
            raise RangeError(num, 0, ADDRESS_BITS)
        return num
    return parse_netmask(text).length
