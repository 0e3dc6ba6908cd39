import unittest

from ip_prefix.errors import (
    ArityError,
    GroupParseError,
    NetmaskContiguityError,
    RangeError,
    ValidationError,
)
from ip_prefix.prefix32 import (
    IPV4,
    construct,
    is_valid_netmask,
    parse_netmask,
    parse_netmask_to_prefix,
    render,
    validate_contiguous_mask,
)


class TestConstruct(unittest.TestCase):

    def test_every_length_in_range_is_accepted(self):
        for n in range(0, 33):
            prefix = construct(n)
            self.assertEqual(prefix.length, n)
            self.assertEqual(prefix.address_bits, 32)
            self.assertEqual(prefix.group_bits, 8)
            self.assertIs(prefix.family, IPV4)
            self.assertEqual(prefix.in_mask, 0xFFFFFFFF)

    def test_out_of_range_raises_range_error_with_value(self):
        for n in (-1, 33, 64, 1000):
            with self.assertRaises(RangeError) as ctx:
                construct(n)
            self.assertEqual(ctx.exception.value, n)
            self.assertEqual(str(ctx.exception), f"Prefix must be in range 0..32, got: {n}")

    def test_range_error_is_a_validation_error(self):
        with self.assertRaises(ValidationError):
            construct(33)

    def test_non_int_length_is_rejected(self):
        with self.assertRaises(TypeError):
            construct("24")
        with self.assertRaises(TypeError):
            construct(True)

    def test_mask_follows_length(self):
        self.assertEqual(construct(0).mask, 0)
        self.assertEqual(construct(8).mask, 0xFF000000)
        self.assertEqual(construct(24).mask, 0xFFFFFF00)
        self.assertEqual(construct(32).mask, 0xFFFFFFFF)


class TestParseNetmask(unittest.TestCase):

    def test_common_netmasks(self):
        self.assertEqual(parse_netmask("255.255.255.0").length, 24)
        self.assertEqual(parse_netmask("255.255.255.255").length, 32)
        self.assertEqual(parse_netmask("0.0.0.0").length, 0)
        self.assertEqual(parse_netmask("255.255.0.0").length, 16)
        self.assertEqual(parse_netmask("255.255.255.252").length, 30)
        self.assertEqual(parse_netmask("128.0.0.0").length, 1)

    def test_surrounding_whitespace_is_ignored(self):
        self.assertEqual(parse_netmask(" 255.255.240.0\n").length, 20)

    def test_non_contiguous_masks_are_rejected(self):
        for text in ("255.255.255.1", "255.254.255.0", "0.0.0.255", "255.0.255.0", "254.255.255.255"):
            with self.assertRaises(NetmaskContiguityError) as ctx:
                parse_netmask(text)
            self.assertEqual(ctx.exception.netmask, text)
            self.assertIn(text, str(ctx.exception))

    def test_malformed_groups_raise_group_parse_error(self):
        bad = (
            "255.255.255",
            "255.255.255.0.0",
            "255.255.256.0",
            "255.255.a.0",
            "255.255.-1.0",
            "255..255.0",
            "",
            "0255.255.255.0",
            "+255.255.255.0",
        )
        for text in bad:
            with self.assertRaises(GroupParseError, msg=text):
                parse_netmask(text)

    def test_round_trip_through_rendered_netmask(self):
        for n in range(0, 33):
            text = render(construct(n).groups())
            self.assertEqual(parse_netmask(text).length, n)


class TestValidateContiguousMask(unittest.TestCase):

    def test_valid_patterns(self):
        self.assertEqual(validate_contiguous_mask(0), 0)
        self.assertEqual(validate_contiguous_mask(0xFFFFFFFF), 32)
        self.assertEqual(validate_contiguous_mask(0xFFFFFF00), 24)
        self.assertEqual(validate_contiguous_mask(0x80000000), 1)

    def test_holes_are_rejected(self):
        for bits in (0x1, 0xFF00FF00, 0x7FFFFFFF, 0xFFFFFFFE ^ 0x100):
            with self.assertRaises(NetmaskContiguityError):
                validate_contiguous_mask(bits)

    def test_value_wider_than_address_is_rejected(self):
        with self.assertRaises(ValidationError):
            validate_contiguous_mask(1 << 32)
        with self.assertRaises(ValidationError):
            validate_contiguous_mask(-1)

    def test_other_widths(self):
        self.assertEqual(validate_contiguous_mask(0xFFFFFFFFFFFFFFFF << 64, address_bits=128), 64)
        self.assertEqual(validate_contiguous_mask(0xF0, address_bits=8), 4)


class TestRender(unittest.TestCase):

    def test_four_groups(self):
        self.assertEqual(render([255, 255, 255, 0]), "255.255.255.0")
        self.assertEqual(render((10, 0, 0, 1)), "10.0.0.1")

    def test_wrong_arity(self):
        with self.assertRaises(ArityError):
            render([1, 2, 3])
        with self.assertRaises(IndexError):
            render([1, 2, 3, 4, 5])


class TestNetmaskHelpers(unittest.TestCase):

    def test_is_valid_netmask(self):
        self.assertTrue(is_valid_netmask("255.255.255.0"))
        self.assertFalse(is_valid_netmask("255.0.255.0"))
        self.assertFalse(is_valid_netmask("not-a-mask"))

    def test_parse_netmask_to_prefix_accepts_lengths_and_netmasks(self):
        self.assertEqual(parse_netmask_to_prefix("24"), 24)
        self.assertEqual(parse_netmask_to_prefix("/16"), 16)
        self.assertEqual(parse_netmask_to_prefix("255.255.255.128"), 25)

    def test_parse_netmask_to_prefix_range(self):
        with self.assertRaises(RangeError):
            parse_netmask_to_prefix("33")

    def test_parse_netmask_to_prefix_rejects_huge_digit_runs(self):
        with self.assertRaises(ValidationError):
            parse_netmask_to_prefix("9" * 5000)

    def test_parse_netmask_to_prefix_requires_ascii_digits(self):
        with self.assertRaises(ValidationError):
            parse_netmask_to_prefix("٢٤")


if __name__ == '__main__':
    unittest.main()
