import unittest

from scanless.keywords import KEYWORDS, is_keyword
from scanless.parser import (
    Failure,
    Success,
    end_of_input,
    parse_identifier,
    parse_literal,
    parse_literals,
    parse_number,
    parse_tok_with_rule,
)


class LiteralTest(unittest.TestCase):
    def test_match(self) -> None:
        self.assertEqual(parse_literal("let")("let x"), Success(" x", "let"))

    def test_mismatch_consumes_nothing(self) -> None:
        for text in ["le", "Let x", "", " let"]:
            self.assertEqual(
                parse_literal("let")(text), Failure(text, "literal 'let' not found")
            )

    def test_whole_input(self) -> None:
        self.assertEqual(parse_literal("abc")("abc"), Success("", "abc"))

    def test_non_ascii(self) -> None:
        self.assertEqual(parse_literal("λ")("λx.x"), Success("x.x", "λ"))

    def test_empty_literal_always_matches(self) -> None:
        self.assertEqual(parse_literal("")("abc"), Success("abc", ""))


class LiteralsTest(unittest.TestCase):
    def test_first_in_list_wins(self) -> None:
        self.assertEqual(parse_literals(["<", "<="])("<=1"), Success("=1", "<"))
        self.assertEqual(parse_literals(["<=", "<"])("<=1"), Success("1", "<="))

    def test_later_alternative(self) -> None:
        expr = parse_literals(["+", "-", "*"])
        self.assertEqual(expr("*2"), Success("2", "*"))

    def test_none_match(self) -> None:
        expr = parse_literals(["+", "-"])
        self.assertEqual(expr("/2"), Failure("/2", "none of '+' or '-' found"))

    def test_empty_list_never_matches(self) -> None:
        self.assertFalse(parse_literals([])("abc"))

    def test_accepts_any_sequence(self) -> None:
        ops = ["&&", "||"]
        expr = parse_literals(ops)
        ops.append("!")
        self.assertFalse(expr("!x"))
        self.assertEqual(expr("||x"), Success("x", "||"))


class TokWithRuleTest(unittest.TestCase):
    def test_greedy(self) -> None:
        expr = parse_tok_with_rule(str.isdigit)
        self.assertEqual(expr("2024-10"), Success("-10", "2024"))

    def test_consumes_whole_input(self) -> None:
        expr = parse_tok_with_rule(str.isdigit)
        self.assertEqual(expr("123"), Success("", "123"))

    def test_first_character_fails(self) -> None:
        expr = parse_tok_with_rule(str.isdigit)
        self.assertEqual(
            expr("x1"), Failure("x1", "got unexpected character, expected: isdigit")
        )

    def test_empty_input(self) -> None:
        expr = parse_tok_with_rule(str.isdigit)
        self.assertEqual(expr(""), Failure("", "got unexpected end of input"))

    def test_non_ascii_characters(self) -> None:
        expr = parse_tok_with_rule(str.isalpha)
        self.assertEqual(expr("héllo wörld"), Success(" wörld", "héllo"))

    def test_name(self) -> None:
        def is_space(c: str) -> bool:
            return c == " "

        self.assertEqual(parse_tok_with_rule(is_space).name, "token(is_space)")


class NumberTest(unittest.TestCase):
    def test_decimal(self) -> None:
        self.assertEqual(parse_number()("3.14abc"), Success("abc", 3.14))

    def test_integer(self) -> None:
        self.assertEqual(parse_number()("42"), Success("", 42.0))

    def test_leading_and_trailing_dot(self) -> None:
        self.assertEqual(parse_number()(".5)"), Success(")", 0.5))
        self.assertEqual(parse_number()("5.)"), Success(")", 5.0))

    def test_not_a_number(self) -> None:
        res = parse_number()("abc")
        self.assertFalse(res)
        self.assertEqual(res.rest, "abc")

    def test_sign_is_not_part_of_a_number(self) -> None:
        self.assertFalse(parse_number()("-1"))

    def test_invalid_token_is_consumed(self) -> None:
        self.assertEqual(
            parse_number()("1.2.3 x"),
            Failure(" x", "could not parse '1.2.3' into a number"),
        )
        self.assertEqual(
            parse_number()(".."), Failure("", "could not parse '..' into a number")
        )

    def test_only_ascii_digits(self) -> None:
        self.assertFalse(parse_number()("٣"))


class IdentifierTest(unittest.TestCase):
    def test_identifier(self) -> None:
        self.assertEqual(parse_identifier()("_x1 = 2"), Success(" = 2", "_x1"))

    def test_unicode_identifier(self) -> None:
        self.assertEqual(parse_identifier()("été+1"), Success("+1", "été"))

    def test_keyword_prefix_is_an_identifier(self) -> None:
        self.assertEqual(parse_identifier()("true123"), Success("", "true123"))
        self.assertEqual(parse_identifier()("eval_x("), Success("(", "eval_x"))

    def test_keywords_are_rejected(self) -> None:
        for keyword in KEYWORDS:
            res = parse_identifier()(keyword + " x")
            self.assertFalse(res)
            self.assertEqual(res.rest, " x")

    def test_keywords_are_case_sensitive(self) -> None:
        self.assertEqual(parse_identifier()("True"), Success("", "True"))

    def test_leading_digit(self) -> None:
        self.assertEqual(
            parse_identifier()("1abc;"),
            Failure(";", "identifier cannot start with a digit: '1abc'"),
        )

    def test_rule_mismatch(self) -> None:
        self.assertEqual(parse_identifier()("-x").rest, "-x")
        self.assertFalse(parse_identifier()(""))


class EndOfInputTest(unittest.TestCase):
    def test_end(self) -> None:
        self.assertEqual(end_of_input(""), Success("", None))

    def test_not_end(self) -> None:
        self.assertEqual(end_of_input(" "), Failure(" ", "expected end of input"))

    def test_whole_input_parse(self) -> None:
        expr = parse_number() + end_of_input
        self.assertEqual(expr.parse("12"), (12.0, None))
        self.assertFalse(expr("12a"))


class KeywordsTest(unittest.TestCase):
    def test_table(self) -> None:
        self.assertEqual(KEYWORDS, ("true", "false", "if", "eval"))

    def test_is_keyword(self) -> None:
        self.assertTrue(is_keyword("if"))
        self.assertFalse(is_keyword("iff"))
        self.assertFalse(is_keyword(""))
