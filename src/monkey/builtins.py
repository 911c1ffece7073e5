# src/monkey/builtins.py
"""Host functions exposed to programs as ordinary identifiers.

Each takes the list of evaluated argument Objects and returns an Object,
or an EvaluationError when the arity or argument types are wrong.
"""
from .object import Array, Builtin, EvaluationError, Integer, String, NULL


def _wrong_arity(args, want):
    return EvaluationError(f"wrong number of arguments. got={len(args)}, want={want}")


def _must_be_array(name, arg):
    return EvaluationError(f"argument to `{name}` must be Array, got {arg.type()}")


def _len(args):
    if len(args) != 1:
        return _wrong_arity(args, 1)
    arg = args[0]
    if isinstance(arg, String):
        # byte length of the UTF-8 encoding
        return Integer(len(arg.value.encode("utf-8")))
    return EvaluationError(f"argument to `len` not supported, got {arg.type()}")


def _first(args):
    if len(args) != 1:
        return _wrong_arity(args, 1)
    arg = args[0]
    if not isinstance(arg, Array):
        return _must_be_array("first", arg)
    return arg.elements[0] if arg.elements else NULL


def _last(args):
    if len(args) != 1:
        return _wrong_arity(args, 1)
    arg = args[0]
    if not isinstance(arg, Array):
        return _must_be_array("last", arg)
    return arg.elements[-1] if arg.elements else NULL


def _rest(args):
    if len(args) != 1:
        return _wrong_arity(args, 1)
    arg = args[0]
    if not isinstance(arg, Array):
        return _must_be_array("rest", arg)
    if not arg.elements:
        return NULL
    return Array(arg.elements[1:])


def _push(args):
    if len(args) != 2:
        return _wrong_arity(args, 2)
    arr, value = args
    if not isinstance(arr, Array):
        return _must_be_array("push", arr)
    return Array(arr.elements + (value,))


BUILTINS = {
    name: Builtin(fn, name)
    for name, fn in (
        ("len", _len),
        ("first", _first),
        ("last", _last),
        ("rest", _rest),
        ("push", _push),
    )
}
