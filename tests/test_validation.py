import unittest
from console_helpers import scripted
from simbank.currency import FOREIGN_INDICES
from simbank.errors import ParseError, RangeError, UnrecognizedMenuChoice
from simbank.validation import (
    parse_account_name, parse_amount, parse_currency_index, parse_days,
    parse_menu_choice, parse_rate, parse_yes_no, prompt_until_valid,
)


class TestParsers(unittest.TestCase):
    def test_amount_accepts_positive_numbers(self):
        self.assertEqual(parse_amount("500"), 500.0)
        self.assertEqual(parse_amount(" 12.75 "), 12.75)

    def test_amount_not_a_number_is_parse_error(self):
        for text in ("abc", "", "nan", "inf", "-inf"):
            with self.assertRaises(ParseError):
                parse_amount(text)

    def test_amount_non_positive_is_range_error(self):
        for text in ("0", "-5", "-0.01"):
            with self.assertRaises(RangeError):
                parse_amount(text)

    def test_amount_messages_are_distinct(self):
        with self.assertRaises(ParseError) as parse_ctx:
            parse_amount("abc")
        with self.assertRaises(RangeError) as range_ctx:
            parse_amount("-1")
        self.assertTrue(str(parse_ctx.exception).startswith("Invalid Input!"))
        self.assertTrue(str(range_ctx.exception).startswith("Invalid Input!"))
        self.assertNotEqual(str(parse_ctx.exception), str(range_ctx.exception))

    def test_amount_custom_message(self):
        with self.assertRaises(RangeError) as ctx:
            parse_amount("0", "Invalid Amount!")
        self.assertTrue(str(ctx.exception).startswith("Invalid Amount!"))

    def test_rate(self):
        self.assertEqual(parse_rate("58.00"), 58.0)
        with self.assertRaises(RangeError):
            parse_rate("0")
        with self.assertRaises(ParseError):
            parse_rate("fifty")

    def test_currency_index_range(self):
        self.assertEqual(parse_currency_index("0"), 0)
        self.assertEqual(parse_currency_index("5"), 5)
        with self.assertRaises(RangeError):
            parse_currency_index("6")
        with self.assertRaises(ParseError):
            parse_currency_index("two")
        with self.assertRaises(ParseError):
            parse_currency_index("2.5")

    def test_foreign_index_excludes_base(self):
        self.assertEqual(parse_currency_index("1", FOREIGN_INDICES), 1)
        with self.assertRaises(RangeError) as ctx:
            parse_currency_index("0", FOREIGN_INDICES)
        self.assertIn("from 1 to 5", str(ctx.exception))

    def test_days(self):
        self.assertEqual(parse_days("0"), 0)
        self.assertEqual(parse_days("30"), 30)
        with self.assertRaises(RangeError):
            parse_days("-1")
        with self.assertRaises(ParseError):
            parse_days("ten")

    def test_account_name(self):
        self.assertEqual(parse_account_name("  Alice "), "Alice")
        with self.assertRaises(RangeError):
            parse_account_name("   ")

    def test_yes_no_is_case_insensitive(self):
        self.assertEqual(parse_yes_no("y"), "Y")
        self.assertEqual(parse_yes_no(" N "), "N")
        with self.assertRaises(RangeError):
            parse_yes_no("yes")

    def test_menu_choice(self):
        self.assertEqual(parse_menu_choice("1"), 1)
        self.assertEqual(parse_menu_choice(" 6 "), 6)
        for text in ("0", "7", "x", ""):
            with self.assertRaises(UnrecognizedMenuChoice):
                parse_menu_choice(text)


class TestPromptUntilValid(unittest.TestCase):
    def test_reprompts_until_accepted(self):
        console, output = scripted("abc", "-3", "25")
        value = prompt_until_valid(console, "Amount: ", parse_amount)
        self.assertEqual(value, 25.0)
        self.assertEqual(output.count("Amount: "), 3)
        rejections = [line for line in output if line.startswith("Invalid Input!")]
        self.assertEqual(len(rejections), 2)

    def test_other_errors_propagate(self):
        console, _ = scripted("1")

        def parse(text):
            raise KeyError(text)

        with self.assertRaises(KeyError):
            prompt_until_valid(console, "Anything: ", parse)


if __name__ == "__main__":
    unittest.main()
