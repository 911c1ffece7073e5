# src/monkey/parser/__init__.py
"""
Parser module for the Monkey language.
"""

from .parser import Parser, precedences, LOWEST, EQUALS, LESSGREATER, SUM, PRODUCT, PREFIX, CALL, INDEX

__all__ = [
    "Parser", "precedences",
    "LOWEST", "EQUALS", "LESSGREATER", "SUM", "PRODUCT", "PREFIX", "CALL", "INDEX",
]
