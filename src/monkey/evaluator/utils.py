# src/monkey/evaluator/utils.py
import logging

from ..config import config
from ..object import EvaluationError, Null, Boolean, ReturnValue, LET, DEFAULT, NULL, TRUE, FALSE

logger = logging.getLogger("monkey.evaluator")

# Summary counters, reset at the start of every evaluate() call
EVAL_SUMMARY = {
    'evaluated_statements': 0,
    'function_calls': 0,
    'errors': 0,
}


def reset_summary():
    for key in EVAL_SUMMARY:
        EVAL_SUMMARY[key] = 0


def debug_log(message, data=None, level='debug'):
    """Conditional debug logging that respects the runtime config."""
    if not config.should_log(level):
        return
    if data is not None:
        logger.debug("%s: %s", message, data)
    else:
        logger.debug("%s", message)


def is_error(obj):
    return isinstance(obj, EvaluationError)


def unwinds(obj):
    """Errors and return values stop the enclosing evaluation unchanged."""
    return isinstance(obj, (EvaluationError, ReturnValue))


def is_truthy(obj):
    if isinstance(obj, Null):
        return False
    if isinstance(obj, Boolean):
        return obj.value
    return True


def native_bool_to_boolean(value):
    return TRUE if value else FALSE


def value_or_null(obj):
    """Internal sentinels become Null before reaching a value position."""
    if obj is LET or obj is DEFAULT:
        return NULL
    return obj


__all__ = [
    'EVAL_SUMMARY', 'reset_summary', 'debug_log', 'is_error', 'unwinds', 'is_truthy',
    'native_bool_to_boolean', 'value_or_null', 'NULL', 'TRUE', 'FALSE',
]
