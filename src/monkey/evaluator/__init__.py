# src/monkey/evaluator/__init__.py
from .core import Evaluator, evaluate, STACK_OVERFLOW
from .utils import EVAL_SUMMARY, is_truthy, is_error

__all__ = ['Evaluator', 'evaluate', 'STACK_OVERFLOW', 'EVAL_SUMMARY', 'is_truthy', 'is_error']
