import unittest

from radixcalc.errors import (
    LexError,
    MissingDigits,
    MissingOutputRadix,
    Overflow,
    UnexpectedChar,
)
from radixcalc.evaluate import format_number
from radixcalc.token import Radix, TokenType
from radixcalc.tokenize import tokenize


class TestTokenize(unittest.TestCase):
    def test_token_stream(self):
        tokens = list(tokenize("d10 + hA d"))
        self.assertEqual(
            [t.kind for t in tokens],
            [TokenType.Number, TokenType.Plus, TokenType.Number, TokenType.OutputRadix],
        )
        self.assertEqual([t.location for t in tokens], [0, 4, 6, 9])
        self.assertEqual(tokens[0].value, 10)
        self.assertEqual(tokens[0].radix, Radix.Decimal)
        self.assertEqual(tokens[2].value, 10)
        self.assertEqual(tokens[2].radix, Radix.Hexadecimal)
        self.assertEqual(tokens[3].radix, Radix.Decimal)

    def test_punctuators_without_spaces(self):
        tokens = list(tokenize("(d1+d2)*d3-d4h"))
        self.assertEqual(
            [t.kind for t in tokens],
            [
                TokenType.LParen,
                TokenType.Number,
                TokenType.Plus,
                TokenType.Number,
                TokenType.RParen,
                TokenType.Star,
                TokenType.Number,
                TokenType.Minus,
                TokenType.Number,
                TokenType.OutputRadix,
            ],
        )
        self.assertEqual(tokens[-1].radix, Radix.Hexadecimal)

    def test_hex_digits_any_case(self):
        tokens = list(tokenize("hff + hFf h"))
        self.assertEqual(tokens[0].value, 255)
        self.assertEqual(tokens[2].value, 255)

    def test_trailing_marker_is_never_a_digit(self):
        tokens = list(tokenize("hAd"))
        self.assertEqual(tokens[0].value, 10)
        self.assertEqual(tokens[0].expression, "hA")
        self.assertEqual(tokens[1].kind, TokenType.OutputRadix)
        self.assertEqual(tokens[1].radix, Radix.Decimal)

    def test_trailing_whitespace(self):
        tokens = list(tokenize("  d7 h \t "))
        self.assertEqual(tokens[-1].location, 5)
        self.assertEqual(tokens[-1].radix, Radix.Hexadecimal)

    def test_literal_round_trip(self):
        for value in [0, 1, 9, 10, 15, 16, 255, 4096, 123456789, 2**70 + 3]:
            for radix in Radix:
                digits = format_number(value, radix)
                tokens = list(tokenize(f"{radix.prefix}{digits} d"))
                self.assertEqual(tokens[0].value, value)
                self.assertEqual(format_number(tokens[0].value, radix), digits)

    def test_missing_output_radix(self):
        with self.assertRaises(MissingOutputRadix) as ctx:
            tokenize("d5 + d3")
        self.assertEqual(ctx.exception.location, 6)
        self.assertEqual(ctx.exception.lexeme, "3")

    def test_blank_line(self):
        with self.assertRaises(MissingOutputRadix) as ctx:
            tokenize("   ")
        self.assertEqual(ctx.exception.location, 3)

    def test_prefix_without_digits(self):
        with self.assertRaises(MissingDigits) as ctx:
            tokenize("d + d5 d")
        self.assertEqual(ctx.exception.location, 0)
        self.assertEqual(ctx.exception.lexeme, "d")

    def test_bare_prefix_before_marker(self):
        with self.assertRaises(MissingDigits) as ctx:
            tokenize("d5 + h d")
        self.assertEqual(ctx.exception.location, 5)
        self.assertEqual(ctx.exception.lexeme, "h")

    def test_literal_with_too_many_digits(self):
        line = "d1 + d" + "1" * 5000 + " h"
        with self.assertRaises(Overflow) as ctx:
            tokenize(line)
        self.assertEqual(ctx.exception.location, 5)
        self.assertEqual(ctx.exception.lexeme, "d" + "1" * 15)

    def test_decimal_prefix_rejects_hex_digits(self):
        with self.assertRaises(MissingDigits):
            tokenize("dA d")

    def test_hex_prefix_rejects_other_letters(self):
        with self.assertRaises(MissingDigits) as ctx:
            tokenize("d1 + hG h")
        self.assertEqual(ctx.exception.location, 5)

    def test_unexpected_char(self):
        with self.assertRaises(UnexpectedChar) as ctx:
            tokenize("d5 / d2 d")
        self.assertEqual(ctx.exception.location, 3)
        self.assertEqual(ctx.exception.lexeme, "/")

    def test_unicode_digits_rejected(self):
        with self.assertRaises(LexError):
            tokenize("d٥ d")

    def test_error_str_is_one_line(self):
        with self.assertRaises(UnexpectedChar) as ctx:
            tokenize("d5 x d")
        self.assertEqual(str(ctx.exception), "invalid character at column 3: 'x'")
        self.assertEqual(
            ctx.exception.diagnostic(), "d5 x d\n   ^ invalid character\n"
        )


if __name__ == "__main__":
    unittest.main()
