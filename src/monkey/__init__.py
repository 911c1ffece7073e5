# src/monkey/__init__.py
"""Monkey: lexer, Pratt parser and tree-walking evaluator for a small
expression-oriented scripting language."""

__version__ = "0.1.0"

from .lexer import Lexer
from .parser import Parser
from .environment import Environment
from .evaluator import evaluate
from .interpreter import parse, run
from .errors import MonkeyError, MonkeySyntaxError, MonkeyRuntimeError

__all__ = [
    "Lexer", "Parser", "Environment", "evaluate", "parse", "run",
    "MonkeyError", "MonkeySyntaxError", "MonkeyRuntimeError", "__version__",
]
