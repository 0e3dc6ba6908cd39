"""Exceptions raised by prefix construction and netmask parsing."""


class ValidationError(ValueError):
    """Input could not be turned into a valid prefix."""


class RangeError(ValidationError):
    def __init__(self, value, low: int, high: int):
        super().__init__(f"Prefix must be in range {low}..{high}, got: {value}")
        self.value = value
        self.low = low
        self.high = high


class NetmaskContiguityError(ValidationError):
    """The netmask bits are not a run of ones followed by a run of zeros."""

    def __init__(self, netmask: str):
        super().__init__(f"Prefix must be 111 and 000 {netmask}")
        self.netmask = netmask


class GroupParseError(ValidationError):
    def __init__(self, group: str, text: str, reason: str = "not a decimal 0..255"):
        super().__init__(f"Invalid netmask group {group!r} in {text!r}: {reason}")
        self.group = group
        self.text = text


class ArityError(IndexError):
    """render() was called with the wrong number of groups."""

    def __init__(self, expected: int, got: int):
        super().__init__(f"Expected {expected} groups, got {got}")
        self.expected = expected
        self.got = got
