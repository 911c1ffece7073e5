# src/monkey/interpreter.py
"""One-call pipeline: source text to Program, and source text to value."""
from .environment import Environment
from .errors import MonkeySyntaxError, MonkeyRuntimeError
from .evaluator import evaluate
from .evaluator.utils import is_error
from .lexer import Lexer
from .parser import Parser


def parse(source, filename="<stdin>"):
    """Parse ``source``; raise MonkeySyntaxError if any diagnostics were recorded."""
    parser = Parser(Lexer(source, filename))
    program = parser.parse_program()
    if parser.has_errors():
        raise MonkeySyntaxError(parser.errors, filename)
    return program


def run(source, env=None, filename="<stdin>"):
    """Evaluate ``source`` in ``env`` (a fresh global scope by default).

    Returns the resulting Object, or ``None`` when there is nothing to
    display. Evaluation errors are raised as MonkeyRuntimeError.
    """
    program = parse(source, filename)
    if env is None:
        env = Environment()
    result = evaluate(program, env)
    if is_error(result):
        raise MonkeyRuntimeError(result.message, filename)
    return result
