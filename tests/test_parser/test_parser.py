"""Tests for the JavaScript front-end parser."""

from pathlib import Path

import pytest

from silk_transform.ast import (
    CallExpression,
    Fragment,
    Group,
    Identifier,
    MemberExpression,
    Node,
    NumericLiteral,
    ObjectExpression,
    Program,
    Property,
    SpreadElement,
    StringLiteral,
    Token,
    walk,
)
from silk_transform.parser import ParseError, parse_source
from silk_transform.parser.transformer import decode_number, decode_string

FIXTURES = Path(__file__).parent.parent / "fixtures"


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _calls(program: Program) -> list[CallExpression]:
    return [n for n in walk(program) if isinstance(n, CallExpression)]


def _first_call(source: str) -> CallExpression:
    return _calls(parse_source(source))[0]


def _first_object(source: str) -> ObjectExpression:
    return next(n for n in walk(parse_source(source)) if isinstance(n, ObjectExpression))


def _callee_name(call: CallExpression) -> str:
    callee: Node = call.callee
    if isinstance(callee, MemberExpression):
        callee = callee.property
    return callee.name  # type: ignore[attr-defined]


# ---------------------------------------------------------------------------
# Call expressions
# ---------------------------------------------------------------------------


class TestCalls:
    def test_bare_call(self) -> None:
        call = _first_call("css({ bg: 'red' })")
        assert call.callee == Identifier(name="css")
        assert isinstance(call.arguments[0], ObjectExpression)

    def test_call_span_covers_callee_and_parens(self) -> None:
        source = "const a = css({ bg: 'red' });"
        call = _first_call(source)
        assert call.span is not None
        assert source[call.span[0]:call.span[1]] == "css({ bg: 'red' })"

    def test_member_call(self) -> None:
        call = _first_call("styled.css({ p: 4 })")
        assert isinstance(call.callee, MemberExpression)
        assert call.callee.object == Identifier(name="styled")
        assert call.callee.property == Identifier(name="css")

    def test_member_call_span(self) -> None:
        source = "x = theme.system.css({})"
        call = _first_call(source)
        assert source[call.span[0]:call.span[1]] == "theme.system.css({})"  # type: ignore[index]

    def test_optional_member(self) -> None:
        call = _first_call("a?.css({})")
        assert isinstance(call.callee, MemberExpression)
        assert call.callee.optional is True
        assert call.optional is True

    def test_optional_call(self) -> None:
        call = _first_call("css?.({ bg: 'red' })")
        assert call.callee == Identifier(name="css")
        assert call.optional is True

    def test_optional_chain_marks_later_calls(self) -> None:
        call = _first_call("a?.b.c.css({})")
        assert call.optional is True
        assert call.callee.optional is False  # type: ignore[attr-defined]

    def test_plain_call_not_optional(self) -> None:
        assert _first_call("a.b.css({})").optional is False

    def test_generic_call(self) -> None:
        call = _first_call("css<Props>({ bg: 'red' })")
        assert call.callee == Identifier(name="css")
        assert isinstance(call.arguments[0], ObjectExpression)

    def test_nested_generic_call_span(self) -> None:
        source = "x = styled.css<Array<Props>>({})"
        call = _first_call(source)
        assert source[call.span[0]:call.span[1]] == "styled.css<Array<Props>>({})"  # type: ignore[index]

    def test_comparison_is_not_generic_call(self) -> None:
        program = parse_source("if (a < b || c > (d)) { go() }")
        assert [_callee_name(c) for c in _calls(program)] == ["go"]

    def test_function_declaration_is_not_call(self) -> None:
        program = parse_source("function css({ bg }) { return bg }")
        assert _calls(program) == []

    def test_generator_and_accessor_names_are_not_calls(self) -> None:
        program = parse_source("function* css(x)\nclass A { get css() { return 1 } }")
        assert _calls(program) == []

    def test_method_definition_is_not_call(self) -> None:
        assert _calls(parse_source("const api = { css({ bg }) { return bg } }")) == []

    def test_control_statement_is_not_call(self) -> None:
        program = parse_source("if (css({ p: 4 })) { x() }")
        assert [_callee_name(c) for c in _calls(program)] == ["css", "x"]

    def test_multiplication_before_call(self) -> None:
        program = parse_source("a * css({})")
        assert [_callee_name(c) for c in _calls(program)] == ["css"]

    def test_chained_call_result(self) -> None:
        calls = _calls(parse_source("getTheme().css({ bg: 'red' })"))
        outer = next(c for c in calls if _callee_name(c) == "css")
        assert isinstance(outer.callee, MemberExpression)
        assert isinstance(outer.callee.object, CallExpression)

    def test_arguments_split_on_commas(self) -> None:
        call = _first_call("f(a, 'b', 3, x + 1)")
        args = call.arguments
        assert args[0] == Identifier(name="a")
        assert args[1] == StringLiteral(value="b")
        assert args[2] == NumericLiteral(value=3.0)
        assert isinstance(args[3], Fragment)

    def test_trailing_comma(self) -> None:
        assert len(_first_call("f(a, b,)").arguments) == 2

    def test_no_arguments(self) -> None:
        assert _first_call("css()").arguments == ()

    def test_spread_argument(self) -> None:
        arg = _first_call("css(...styles)").arguments[0]
        assert isinstance(arg, SpreadElement)
        assert arg.argument == Identifier(name="styles")

    def test_object_with_type_assertion_is_not_object(self) -> None:
        arg = _first_call("css({ bg: 'red' } as const)").arguments[0]
        assert isinstance(arg, Fragment)

    def test_calls_nested_in_blocks(self) -> None:
        source = "function f() { if (x) { return [css({ p: 4 })] } }"
        names = [_callee_name(c) for c in _calls(parse_source(source))]
        assert "css" in names

    def test_calls_inside_object_values(self) -> None:
        obj = _first_object("f({ a: css({ bg: 'red' }) })")
        value = obj.properties[0].value  # type: ignore[attr-defined]
        assert isinstance(value, CallExpression)

    def test_keyword_before_call(self) -> None:
        program = parse_source("return css({})")
        assert program.body[0] == Identifier(name="return")
        assert isinstance(program.body[1], CallExpression)


# ---------------------------------------------------------------------------
# Object literals
# ---------------------------------------------------------------------------


class TestObjects:
    def test_key_value_entries(self) -> None:
        obj = _first_object("css({ bg: 'red', p: 4 })")
        assert obj.properties == (
            Property(key=Identifier(name="bg"), value=StringLiteral(value="red")),
            Property(key=Identifier(name="p"), value=NumericLiteral(value=4.0)),
        )

    def test_string_key(self) -> None:
        entry = _first_object("css({ 'font-size': '12px' })").properties[0]
        assert entry.key == StringLiteral(value="font-size")  # type: ignore[attr-defined]

    def test_computed_key(self) -> None:
        entry = _first_object("css({ [key]: 'red' })").properties[0]
        assert isinstance(entry, Property)
        assert entry.computed is True
        assert entry.key == Identifier(name="key")

    def test_shorthand(self) -> None:
        entry = _first_object("css({ bg })").properties[0]
        assert isinstance(entry, Property)
        assert entry.shorthand is True

    def test_spread(self) -> None:
        entry = _first_object("css({ ...base, bg: 'red' })").properties[0]
        assert isinstance(entry, SpreadElement)

    def test_method(self) -> None:
        entry = _first_object("css({ toString() { return 'x' } })").properties[0]
        assert isinstance(entry, Property)
        assert entry.method is True

    def test_nested_object_value(self) -> None:
        entry = _first_object("css({ hover: { bg: 'red' } })").properties[0]
        assert isinstance(entry.value, ObjectExpression)  # type: ignore[attr-defined]

    def test_negative_number_is_not_a_literal(self) -> None:
        entry = _first_object("css({ m: -4 })").properties[0]
        assert isinstance(entry.value, Fragment)  # type: ignore[attr-defined]

    def test_ternary_value(self) -> None:
        entry = _first_object("css({ bg: on ? 'red' : 'blue' })").properties[0]
        assert entry.key == Identifier(name="bg")  # type: ignore[attr-defined]
        assert isinstance(entry.value, Fragment)  # type: ignore[attr-defined]

    def test_commas_inside_strings(self) -> None:
        obj = _first_object("css({ color: 'rgb(255, 0, 0)', bg: 'red' })")
        assert len(obj.properties) == 2
        assert obj.properties[0].value == StringLiteral(value="rgb(255, 0, 0)")  # type: ignore[attr-defined]

    def test_trailing_comma(self) -> None:
        assert len(_first_object("css({ bg: 'red', })").properties) == 1

    def test_object_outside_call_is_group(self) -> None:
        program = parse_source("const o = { bg: 'red' }")
        assert isinstance(program.body[-1], Group)
        assert program.body[-1].open == "{"


# ---------------------------------------------------------------------------
# Literals and tokens
# ---------------------------------------------------------------------------


class TestLiterals:
    def test_string_raw_kept(self) -> None:
        literal = _first_call('f("red")').arguments[0]
        assert literal == StringLiteral(value="red")
        assert literal.raw == '"red"'  # type: ignore[attr-defined]

    @pytest.mark.parametrize(
        "raw, value",
        [
            ("'a\\'b'", "a'b"),
            ('"a\\"b"', 'a"b'),
            ("'\\n\\t'", "\n\t"),
            ("'\\x41'", "A"),
            ("'\\u0041'", "A"),
            ("'\\u{1F600}'", "\U0001f600"),
            ("'\\uD83D\\uDE00'", "\U0001f600"),
            ("'\\0'", "\0"),
            ("'\\q'", "q"),
            ("'a\\\nb'", "ab"),
            ("'\\\\'", "\\"),
        ],
    )
    def test_decode_string(self, raw: str, value: str) -> None:
        assert decode_string(raw) == value

    @pytest.mark.parametrize(
        "raw, value",
        [("4", 4.0), ("0.5", 0.5), (".5", 0.5), ("1e3", 1000.0), ("0x10", 16.0),
         ("0o17", 15.0), ("0b101", 5.0), ("1_000", 1000.0)],
    )
    def test_decode_number(self, raw: str, value: float) -> None:
        assert decode_number(raw) == value

    def test_bigint_is_opaque(self) -> None:
        arg = _first_call("f(10n)").arguments[0]
        assert arg == Token(kind="bigint", text="10n")

    def test_template_literal_is_opaque(self) -> None:
        arg = _first_call("f(`css({ bg: 'red' })`)").arguments[0]
        assert isinstance(arg, Token)
        assert arg.kind == "template"

    def test_unicode_identifier(self) -> None:
        assert parse_source("const café = 1").body[1] == Identifier(name="café")


# ---------------------------------------------------------------------------
# Comments and strings hide code
# ---------------------------------------------------------------------------


class TestIgnoredText:
    def test_line_comment(self) -> None:
        assert _calls(parse_source("// css({ bg: 'red' })\nx")) == []

    def test_block_comment(self) -> None:
        assert _calls(parse_source("/* css({ bg: 'red' }) */")) == []

    def test_string_containing_call(self) -> None:
        program = parse_source("const s = \"css({ bg: 'red' })\"")
        assert _calls(program) == []

    def test_comment_markers_inside_string(self) -> None:
        call = _first_call("fetch('https://api.com')")
        assert call.arguments[0] == StringLiteral(value="https://api.com")

    def test_empty_source(self) -> None:
        assert parse_source("") == Program(body=())


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


class TestParseErrors:
    def test_unclosed_paren(self) -> None:
        with pytest.raises(ParseError):
            parse_source("css({ bg: 'red' }")

    def test_stray_closing_brace(self) -> None:
        with pytest.raises(ParseError):
            parse_source("a }")

    def test_mismatched_brackets(self) -> None:
        with pytest.raises(ParseError):
            parse_source("f(]")

    def test_unterminated_string_reports_line(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse_source("const a = 1\nconst b = 'oops\n")
        assert exc_info.value.line == 2

    def test_message_carries_location(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse_source("const b = 'oops\n")
        error = exc_info.value
        assert (error.line, error.column) == (1, 11)
        assert error.location == "1:11"
        assert str(error) == "1:11: unexpected character \"'\""

    def test_unclosed_bracket_message(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse_source("css({ bg: 'red' }")
        assert "unexpected end of input" in exc_info.value.message

    def test_stray_token_message(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse_source("a }")
        assert exc_info.value.message == "unexpected '}'"
        assert exc_info.value.location == "1:3"


class TestParseErrorFormatting:
    def test_without_position(self) -> None:
        error = ParseError("boom")
        assert error.location == ""
        assert str(error) == "boom"

    def test_line_only(self) -> None:
        assert str(ParseError("boom", line=4)) == "4: boom"

    def test_line_and_column(self) -> None:
        error = ParseError("boom", line=4, column=2)
        assert error.location == "4:2"
        assert str(error) == "4:2: boom"
        assert error.message == "boom"


# ---------------------------------------------------------------------------
# Fixture files
# ---------------------------------------------------------------------------


class TestFixtures:
    def test_basic_fixture_calls(self) -> None:
        program = parse_source((FIXTURES / "basic.input.ts").read_text())
        css_calls = [c for c in _calls(program) if _callee_name(c) == "css"]
        assert len(css_calls) == 5
        assert all(isinstance(c.arguments[0], ObjectExpression) for c in css_calls)

    def test_no_transform_fixture_parses(self) -> None:
        program = parse_source((FIXTURES / "no-transform.input.ts").read_text())
        css_calls = [c for c in _calls(program) if _callee_name(c) == "css"]
        assert len(css_calls) == 3
        assert not any(
            c.arguments and isinstance(c.arguments[0], ObjectExpression) for c in css_calls
        )
