import pytest
from hypothesis import given, strategies as st

import tinyscheme
from tinyscheme import run
from tinyscheme.errors import ArityError, UnboundSymbolError, SchemeSyntaxError
from tinyscheme.interpreter import Interpreter
from tinyscheme.printer import stringify
from tinyscheme.types.novalue import NoValue
from tinyscheme.types.symbol import Symbol


@pytest.mark.parametrize(
    "source, expected",
    [
        ("(quote (1 2 3))", "(1 2 3)"),
        ("(+ 1 2)", "3"),
        ("(* 3 4)", "12"),
        ("(if 0 1 2)", "1"),
        ("(car (list 1 2 3))", "1"),
        ("(cdr (list 1 2 3))", "(2 3)"),
        ("(length (list 1 2 3))", "3"),
        ("(< 1 2)", "#t"),
        ("(define unused 1)", "[No output]"),
        ("car", "#<primitive car>"),
        ("(lambda (a b) a)", "#<procedure (a b)>"),
    ],
)
def test_run(env, source, expected):
    assert run(source, env) == expected


def test_run_evaluates_only_the_first_form(env):
    assert run("(define x 5) (set! x (+ x 1))", env) == "[No output]"
    assert run("x", env) == "5"


def test_run_undefined_symbol(env):
    with pytest.raises(UnboundSymbolError) as exc:
        run("(foo)", env)
    assert exc.value.symbol == "foo"
    assert "foo" in str(exc.value)


def test_run_default_environment_persists(monkeypatch):
    monkeypatch.setattr(tinyscheme, "_default_env", None)
    assert run("(define persisted 41)") == "[No output]"
    assert run("(+ persisted 1)") == "42"
    assert tinyscheme._default_env is not None


def test_interpreter_evaluates_all_forms(interp):
    assert interp.eval("(define x 5) (set! x (+ x 1)) x") == 6
    assert interp.run("x") == "6"


def test_interpreter_empty_source(interp):
    assert interp.eval("") is NoValue
    assert interp.run("   ") == "[No output]"


def test_closure_sees_set_after_capture(interp):
    interp.eval(
        """
        (define x 5)
        (define show-x (lambda () x))
        (set! x (+ x 1))
        """
    )
    assert interp.run("(show-x)") == "6"


def test_interpreter_lambda_arity(interp):
    interp.eval("(define id (lambda (v) v))")
    with pytest.raises(ArityError):
        interp.eval("(id 1 2)")
    with pytest.raises(ArityError):
        interp.eval("(id)")


def test_interpreter_syntax_error(interp):
    with pytest.raises(SchemeSyntaxError):
        interp.eval("(define x (+ 1 2)")


def test_interpreters_are_isolated():
    a, b = Interpreter(), Interpreter()
    a.eval("(define only-in-a 1)")
    with pytest.raises(UnboundSymbolError):
        b.eval("only-in-a")


def test_prelude_string():
    interp = Interpreter(prelude="(define square (lambda (x) (* x x)))")
    assert interp.run("(square 9)") == "81"


def test_prelude_auto_from_env(tmp_path, monkeypatch):
    prelude = tmp_path / "prelude.scm"
    prelude.write_text("(define twice (lambda (f x) (f (f x))))\n(define inc (lambda (x) (+ x 1)))")
    monkeypatch.setenv("TINYSCHEME_PRELUDE", str(prelude))
    interp = Interpreter(prelude="auto")
    assert interp.run("(twice inc 5)") == "7"


def test_prelude_auto_without_path(monkeypatch):
    monkeypatch.delenv("TINYSCHEME_PRELUDE", raising=False)
    interp = Interpreter(prelude="auto")
    assert interp.run("(+ 1 1)") == "2"


def test_list_program(interp):
    interp.eval(
        """
        (define map1 (lambda (f xs)
          (if (null? xs)
              (list)
              (cons (f (car xs)) (map1 f (cdr xs))))))
        """
    )
    assert interp.run("(map1 (lambda (x) (* x x)) (list 1 2 3 4))") == "(1 4 9 16)"


symbols = st.from_regex(r"[a-z][a-z0-9?!*-]{0,6}", fullmatch=True).map(Symbol)
trees = st.recursive(
    st.one_of(st.integers(), symbols),
    lambda children: st.lists(children, max_size=5),
    max_leaves=20,
)


@given(st.lists(trees, max_size=5))
def test_quoted_tree_prints_back(tree):
    source = stringify(tree)
    assert run(f"(quote {source})", tinyscheme.standard_env()) == source
