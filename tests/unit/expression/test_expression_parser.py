"""Recursive-descent parser tests for debug-formatted value dumps."""

from __future__ import annotations

import unittest

from bindsheet.expression import LIST, MAP, MAX_DEPTH, SET, TUPLE, ParseError, Value, parse_expression, term


class ParseExpressionTests(unittest.TestCase):
    def test_named_tuples_nest(self) -> None:
        parsed = parse_expression("Resize(Increase, Some(Left))")
        expected = Value(
            TUPLE,
            name="Resize",
            values=(term("Increase"), Value(TUPLE, name="Some", values=(term("Left"),))),
        )
        self.assertEqual(parsed, expected)

    def test_bare_atom_is_a_term(self) -> None:
        self.assertEqual(parse_expression("Quit"), term("Quit"))
        self.assertEqual(parse_expression("-1"), term("-1"))
        self.assertEqual(parse_expression("Direction::Left"), term("Direction::Left"))

    def test_named_struct_parses_as_map_in_field_order(self) -> None:
        parsed = parse_expression('Run(RunCommandAction { command: "htop", args: [] })')
        inner = parsed.values[0]
        self.assertEqual(parsed.kind, TUPLE)
        self.assertEqual(inner.kind, MAP)
        self.assertEqual(inner.name, "RunCommandAction")
        self.assertEqual(
            inner.entries,
            (("command", term('"htop"')), ("args", Value(LIST))),
        )

    def test_braces_without_colon_parse_as_set(self) -> None:
        parsed = parse_expression("{1, 2}")
        self.assertEqual(parsed, Value(SET, values=(term("1"), term("2"))))

    def test_empty_braces_parse_as_empty_map(self) -> None:
        self.assertEqual(parse_expression("Foo {}"), Value(MAP, name="Foo"))

    def test_quoted_literals_keep_quotes_and_escapes(self) -> None:
        parsed = parse_expression('Write("a\\"b", \'c\')')
        self.assertEqual(parsed.values, (term('"a\\"b"'), term("'c'")))

    def test_pretty_layout_with_trailing_commas(self) -> None:
        source = "[\n    NewPane(\n        Some(\n            Down,\n        ),\n    ),\n]"
        parsed = parse_expression(source)
        self.assertEqual(parsed.kind, LIST)
        self.assertEqual(
            parsed.values,
            (Value(TUPLE, name="NewPane", values=(Value(TUPLE, name="Some", values=(term("Down"),)),)),),
        )

    def test_map_with_string_keys(self) -> None:
        parsed = parse_expression('{"a": 1, "b": [2],}')
        self.assertEqual(parsed.kind, MAP)
        self.assertEqual([key for key, _ in parsed.entries], ['"a"', '"b"'])


class ParseErrorTests(unittest.TestCase):
    def test_malformed_inputs_raise_parse_error(self) -> None:
        for source in ("", "Foo(", "[a, b", '"abc', "a b", "(,)", "{a: }", "]"):
            with self.subTest(source=source):
                with self.assertRaises(ParseError):
                    parse_expression(source)

    def test_parse_error_reports_position(self) -> None:
        with self.assertRaises(ParseError) as ctx:
            parse_expression("[a, b")
        self.assertEqual(ctx.exception.position, 5)
        self.assertIsInstance(ctx.exception, ValueError)

    def test_nesting_up_to_the_limit_parses(self) -> None:
        source = "[" * MAX_DEPTH + "]" * MAX_DEPTH
        parsed = parse_expression(source)
        self.assertEqual(parsed.kind, LIST)

    def test_nesting_past_the_limit_raises_parse_error(self) -> None:
        source = "[" * (MAX_DEPTH + 1) + "]" * (MAX_DEPTH + 1)
        with self.assertRaises(ParseError) as ctx:
            parse_expression(source)
        self.assertEqual(ctx.exception.message, "nesting too deep")
        self.assertEqual(ctx.exception.position, MAX_DEPTH)

    def test_runaway_open_parens_raise_parse_error(self) -> None:
        with self.assertRaises(ParseError):
            parse_expression("Foo" + "(" * 3000)


if __name__ == "__main__":
    unittest.main()
