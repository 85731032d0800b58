import math
import unittest

from mortgage_calc.formatting import (
    parse_number,
    parse_raw_inputs,
    format_number_with_commas,
    adjust_cursor,
    format_currency,
    format_rate,
    format_years,
    format_comparison_count,
)


class TestParsing(unittest.TestCase):

    def test_parse_plain_number(self):
        self.assertEqual(parse_number("6.5"), 6.5)
        self.assertEqual(parse_number("  30 "), 30.0)

    def test_parse_grouped_number(self):
        self.assertEqual(parse_number("300,000", grouped=True), 300000.0)
        self.assertEqual(parse_number("1,234,567.89", grouped=True), 1234567.89)

    def test_commas_rejected_when_not_grouped(self):
        self.assertTrue(math.isnan(parse_number("1,000")))

    def test_invalid_text_is_nan(self):
        self.assertTrue(math.isnan(parse_number("abc")))
        self.assertTrue(math.isnan(parse_number("")))
        self.assertTrue(math.isnan(parse_number(None)))

    def test_underscore_grouping_rejected(self):
        self.assertTrue(math.isnan(parse_number("1_000")))
        self.assertTrue(math.isnan(parse_number("300_000", grouped=True)))

    def test_underscore_amount_fails_validation_path(self):
        _, principal, _, fees = parse_raw_inputs("6.5", "100_000", "30", "1_0")
        self.assertTrue(math.isnan(principal))
        self.assertTrue(math.isnan(fees))

    def test_parse_raw_inputs(self):
        rate, principal, term, fees = parse_raw_inputs("6.5", "300,000", "30", "1,200")
        self.assertEqual((rate, principal, term, fees), (6.5, 300000.0, 30.0, 1200.0))

    def test_empty_fees_default_to_zero(self):
        _, _, _, fees = parse_raw_inputs("6.5", "300,000", "30", "   ")
        self.assertEqual(fees, 0.0)

    def test_fractional_term_kept_for_validation(self):
        _, _, term, _ = parse_raw_inputs("6.5", "300000", "2.5", "")
        self.assertEqual(term, 2.5)


class TestInputFormatting(unittest.TestCase):

    def test_groups_thousands(self):
        self.assertEqual(format_number_with_commas("1234567"), "1,234,567")
        self.assertEqual(format_number_with_commas("1000"), "1,000")
        self.assertEqual(format_number_with_commas("999"), "999")

    def test_keeps_decimal_part(self):
        self.assertEqual(format_number_with_commas("1234567.891"), "1,234,567.891")

    def test_strips_non_numeric(self):
        self.assertEqual(format_number_with_commas("$12a,34"), "1,234")
        self.assertEqual(format_number_with_commas(""), "")

    def test_regroups_existing_commas(self):
        self.assertEqual(format_number_with_commas("1,0000"), "10,000")

    def test_adjust_cursor(self):
        # "1000" -> "1,000" with cursor at end
        self.assertEqual(adjust_cursor("1000", "1,000", 4), 5)
        # "1,0000" -> "10,000"
        self.assertEqual(adjust_cursor("1,0000", "10,000", 6), 6)
        self.assertEqual(adjust_cursor("1,000", "100", 1), 0)


class TestDisplayFormatting(unittest.TestCase):

    def test_currency(self):
        self.assertEqual(format_currency(1896.2041), "$1,896.20")
        self.assertEqual(format_currency(682633.48), "$682,633.48")
        self.assertEqual(format_currency(0), "$0.00")
        self.assertEqual(format_currency(-12), "-$12.00")

    def test_rate(self):
        self.assertEqual(format_rate(6.5), "6.50%")
        self.assertEqual(format_rate(0), "0.00%")

    def test_years(self):
        self.assertEqual(format_years(1), "1 year")
        self.assertEqual(format_years(30), "30 years")

    def test_comparison_count(self):
        self.assertEqual(format_comparison_count(1), "1 mortgage")
        self.assertEqual(format_comparison_count(3), "3 mortgages")
        self.assertEqual(format_comparison_count(0), "0 mortgages")


if __name__ == '__main__':
    unittest.main()
