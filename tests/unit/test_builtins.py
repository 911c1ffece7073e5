"""Built-in function tests, through programs and called directly."""

import pytest

from monkey.builtins import BUILTINS
from monkey.environment import Environment
from monkey.evaluator import evaluate
from monkey.lexer import Lexer
from monkey.object import Array, Integer, Null, String, EvaluationError, NULL
from monkey.parser import Parser


def _evaluate(code_str):
    parser = Parser(Lexer(code_str))
    program = parser.parse_program()
    assert parser.errors == [], parser.errors
    return evaluate(program, Environment())


@pytest.mark.parametrize("source, expected", [
    ('len("")', 0),
    ('len("four")', 4),
    ('len("hello world")', 11),
    ('len("héllo")', 6),
    ("first([1, 2, 3])", 1),
    ("last([1, 2, 3])", 3),
    ("first([[7], 2])[0]", 7),
])
def test_builtin_values(source, expected):
    result = _evaluate(source)
    assert not isinstance(result, EvaluationError), result.message
    assert result.value == expected


@pytest.mark.parametrize("source", ["first([])", "last([])", "rest([])"])
def test_empty_array_gives_null(source):
    assert isinstance(_evaluate(source), Null)


@pytest.mark.parametrize("source, expected", [
    ("rest([1, 2, 3])", "[2, 3]"),
    ("rest([1])", "[]"),
    ("rest(rest([1, 2, 3]))", "[3]"),
    ("push([], 1)", "[1]"),
    ("push([1, 2], [3])", "[1, 2, [3]]"),
])
def test_builtins_returning_arrays(source, expected):
    result = _evaluate(source)
    assert isinstance(result, Array)
    assert result.inspect() == expected


def test_push_does_not_mutate_its_argument():
    result = _evaluate("let a = [1]; let b = push(a, 2); a;")
    assert result.inspect() == "[1]"
    result = _evaluate("let a = [1]; let b = push(a, 2); b;")
    assert result.inspect() == "[1, 2]"


def test_rest_does_not_mutate_its_argument():
    assert _evaluate("let a = [1, 2, 3]; rest(a); a").inspect() == "[1, 2, 3]"


@pytest.mark.parametrize("source, message", [
    ("len(1)", "argument to `len` not supported, got Integer"),
    ("len([1, 2])", "argument to `len` not supported, got Array"),
    ('len("one", "two")', "wrong number of arguments. got=2, want=1"),
    ("len()", "wrong number of arguments. got=0, want=1"),
    ("first(1)", "argument to `first` must be Array, got Integer"),
    ('last("abc")', "argument to `last` must be Array, got String"),
    ("rest(true)", "argument to `rest` must be Array, got Boolean"),
    ("push(1, 1)", "argument to `push` must be Array, got Integer"),
    ("push([1])", "wrong number of arguments. got=1, want=2"),
    ("first([1], [2])", "wrong number of arguments. got=2, want=1"),
    # Arity is validated before argument types
    ("first(1, 2)", "wrong number of arguments. got=2, want=1"),
])
def test_builtin_errors(source, message):
    result = _evaluate(source)
    assert isinstance(result, EvaluationError)
    assert result.message == message


def test_user_bindings_shadow_builtins():
    assert _evaluate("let len = fn(x) { 42 }; len([1])").value == 42
    assert _evaluate("let f = fn(first) { first }; f(7)").value == 7


def test_builtins_are_first_class_values():
    assert _evaluate("let l = len; l(\"abc\")").value == 3
    assert _evaluate("len").inspect() == "<built-in function: len>"
    assert _evaluate("let apply = fn(f, x) { f(x) }; apply(first, [9, 8])").value == 9


def test_builtin_table_direct_calls():
    assert set(BUILTINS) == {"len", "first", "last", "rest", "push"}
    assert BUILTINS["len"].fn([String("abc")]).value == 3
    assert BUILTINS["first"].fn([Array([])]) is NULL
    pushed = BUILTINS["push"].fn([Array([Integer(1)]), Integer(2)])
    assert [e.value for e in pushed.elements] == [1, 2]
