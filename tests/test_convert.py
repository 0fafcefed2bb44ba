import unittest
from collections import deque

from bigint.convert import (
    DECIMAL_RADIX, format_decimal, groups_from_decimal, groups_from_signed, groups_from_unsigned,
    groups_to_decimal, groups_to_unsigned, mul_add, split_decimal_chunks,
)
from bigint.groups import GROUP_MAX, GROUP_RADIX, dump_groups, is_zero, make_groups, shrink


class TestGroups(unittest.TestCase):
    def test_make_groups_never_empty(self):
        self.assertEqual(make_groups(()), deque([0]))
        self.assertEqual(make_groups([1, 2]), deque([1, 2]))

    def test_shrink_drops_leading_zero_groups(self):
        self.assertEqual(shrink(deque([5, 0, 0])), deque([5]))
        self.assertEqual(shrink(deque([0, 0, 0])), deque([0]))
        self.assertEqual(shrink(deque([0, 7])), deque([0, 7]))

    def test_shrink_with_all_ones_filler(self):
        self.assertEqual(shrink(deque([1, GROUP_MAX, GROUP_MAX]), GROUP_MAX), deque([1]))
        self.assertEqual(shrink(deque([GROUP_MAX, GROUP_MAX]), GROUP_MAX), deque([GROUP_MAX]))

    def test_is_zero(self):
        self.assertTrue(is_zero(deque([0])))
        self.assertFalse(is_zero(deque([1])))
        self.assertFalse(is_zero(deque([0, 1])))

    def test_dump_groups(self):
        self.assertEqual(dump_groups(deque([1, GROUP_MAX])), "00000001 ffffffff")


class TestNativeConversion(unittest.TestCase):
    def test_zero_is_single_group(self):
        self.assertEqual(groups_from_unsigned(0), deque([0]))

    def test_unsigned_splits_into_32_bit_groups(self):
        self.assertEqual(groups_from_unsigned(GROUP_MAX), deque([GROUP_MAX]))
        self.assertEqual(groups_from_unsigned(GROUP_RADIX), deque([0, 1]))
        self.assertEqual(groups_from_unsigned((1 << 64) - 1), deque([GROUP_MAX, GROUP_MAX]))

    def test_unsigned_rejects_negative(self):
        with self.assertRaises(ValueError):
            groups_from_unsigned(-1)

    def test_signed_extracts_sign(self):
        self.assertEqual(groups_from_signed(-5), (True, deque([5])))
        self.assertEqual(groups_from_signed(5), (False, deque([5])))
        self.assertEqual(groups_from_signed(-(1 << 63)), (True, deque([0, 1 << 31])))

    def test_back_to_native(self):
        for value in [0, 1, GROUP_MAX, GROUP_RADIX, 3 ** 200]:
            self.assertEqual(groups_to_unsigned(groups_from_unsigned(value)), value)


class TestDecimalConversion(unittest.TestCase):
    def test_chunks_start_from_least_significant_end(self):
        self.assertEqual(split_decimal_chunks("1234567890123"), [567890123, 1234])
        self.assertEqual(split_decimal_chunks("123456789"), [123456789])
        self.assertEqual(split_decimal_chunks("42"), [42])

    def test_mul_add_grows_sequence(self):
        digits = deque([GROUP_MAX])
        mul_add(digits, 2, 1, GROUP_RADIX)
        self.assertEqual(digits, deque([GROUP_MAX, 1]))

    def test_mul_add_in_decimal_radix(self):
        digits = deque([999999999])
        mul_add(digits, 10, 9, DECIMAL_RADIX)
        self.assertEqual(digits, deque([999999999, 9]))

    def test_decimal_to_groups(self):
        self.assertEqual(groups_from_decimal("0"), deque([0]))
        self.assertEqual(groups_from_decimal("000"), deque([0]))
        self.assertEqual(groups_from_decimal("4294967296"), deque([0, 1]))
        digits = "123456781234567812345678"
        self.assertEqual(groups_to_unsigned(groups_from_decimal(digits)), int(digits))

    def test_groups_to_decimal_groups(self):
        self.assertEqual(groups_to_decimal(deque([0])), deque([0]))
        self.assertEqual(groups_to_decimal(deque([0, 1])), deque([294967296, 4]))
        value = 7 ** 150
        decimal = groups_to_decimal(groups_from_unsigned(value))
        res = 0
        for d in reversed(decimal):
            res = res * DECIMAL_RADIX + d
        self.assertEqual(res, value)

    def test_format_pads_inner_groups(self):
        self.assertEqual(format_decimal(False, groups_from_unsigned(10 ** 9)), "1000000000")
        self.assertEqual(format_decimal(False, groups_from_unsigned(10 ** 18 + 5)), "1000000000000000005")
        self.assertEqual(format_decimal(True, groups_from_unsigned(42)), "-42")
        self.assertEqual(format_decimal(False, deque([0])), "0")

    def test_large_round_trip(self):
        digits = "123456781234567812345678" * 300
        self.assertEqual(format_decimal(False, groups_from_decimal(digits)), digits)


if __name__ == '__main__':
    unittest.main()
