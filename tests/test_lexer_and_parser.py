import pytest
from hypothesis import given, strategies as st

from tinyscheme.errors import SchemeSyntaxError, RecursionDepthError
from tinyscheme.types.symbol import Symbol
from tinyscheme.reader.parser import tokenize, atom, parse, parse_all, TokenStream


@pytest.mark.parametrize(
    "source,expected",
    [
        ("a", ["a"]),
        ("(a b c)", ["(", "a", "b", "c", ")"]),
        ("(+ 1 (* 2 3))", ["(", "+", "1", "(", "*", "2", "3", ")", ")"]),
        ("  (a\n\tb)  ", ["(", "a", "b", ")"]),
        ("()", ["(", ")"]),
        ("", []),
        ("   \n ", []),
    ],
)
def test_tokenize(source, expected):
    assert tokenize(source) == expected


@pytest.mark.parametrize(
    "token, expected",
    [
        ("123", 123),
        ("-45", -45),
        ("+7", 7),
        ("0", 0),
        ("12abc", 12),
        ("abc", Symbol("abc")),
        ("-", Symbol("-")),
        ("+", Symbol("+")),
        ("set!", Symbol("set!")),
        ("null?", Symbol("null?")),
    ],
)
def test_atom(token, expected):
    assert atom(token) == expected


def test_symbols_are_interned():
    assert atom("foo") is Symbol("foo")


@pytest.mark.parametrize(
    "source, expected",
    [
        ("123", 123),
        ("x", Symbol("x")),
        ("(a b c)", [Symbol("a"), Symbol("b"), Symbol("c")]),
        ("()", []),
        ("((a b) (c d))", [[Symbol("a"), Symbol("b")], [Symbol("c"), Symbol("d")]]),
        ("(quote (1 2 3))", [Symbol("quote"), [1, 2, 3]]),
    ],
)
def test_parse(source, expected):
    assert parse(source) == expected


def test_parse_ignores_trailing_forms():
    assert parse("(define x 5) (set! x 6)") == [Symbol("define"), Symbol("x"), 5]
    assert parse("1 )") == 1


@pytest.mark.parametrize("source", ["", "   ", "(", "(a (b c)", "(+ 1"])
def test_unexpected_end_of_input(source):
    with pytest.raises(SchemeSyntaxError, match="unexpected end of input"):
        parse(source)


@pytest.mark.parametrize("source", [")", ") (a)"])
def test_mismatched_parenthesis(source):
    with pytest.raises(SchemeSyntaxError, match="mismatched parenthesis"):
        parse(source)


def test_parse_all_yields_every_form():
    forms = list(parse_all("(define x 1) x (+ x 2)"))
    assert forms == [
        [Symbol("define"), Symbol("x"), 1],
        Symbol("x"),
        [Symbol("+"), Symbol("x"), 2],
    ]


def test_parse_all_empty_source():
    assert list(parse_all("")) == []


def test_token_stream_consumes_from_front():
    stream = TokenStream(tokenize("(a) b"))
    assert stream.parse_expr() == [Symbol("a")]
    assert stream.peek() == "b"
    assert stream.parse_expr() == Symbol("b")
    assert stream.peek() is None


@given(st.integers())
def test_integer_tokens_read_back(n):
    assert atom(str(n)) == n


def test_non_ascii_digits_are_symbols():
    assert atom("٣") == Symbol("٣")
    assert atom("7٣") == 7


def test_deeply_nested_input_reports_recursion_depth():
    source = "(" * 5000 + ")" * 5000
    with pytest.raises(RecursionDepthError):
        parse(source)
    with pytest.raises(RecursionDepthError):
        list(parse_all(source))


def test_symbol_table_releases_unused_names():
    import gc

    Symbol("only-used-once-here")
    gc.collect()
    assert "only-used-once-here" not in Symbol._table
    held = Symbol("kept-alive")
    gc.collect()
    assert Symbol("kept-alive") is held
