# src/monkey/evaluator/expressions.py
from ..lexer import INT_MIN, INT_MAX
from ..object import (
    Integer, String, Boolean as BooleanObj, Array, Map, MapPair, EvaluationError,
)
from .utils import (
    unwinds, debug_log, is_truthy, native_bool_to_boolean, value_or_null, NULL,
)


def _checked(value, description):
    """Wrap an arithmetic result, rejecting values outside signed 64-bit."""
    if value < INT_MIN or value > INT_MAX:
        return EvaluationError(f"integer overflow: {description}")
    return Integer(value)


def _truncating_div(left, right):
    quotient = abs(left) // abs(right)
    return -quotient if (left < 0) != (right < 0) else quotient


class ExpressionEvaluatorMixin:
    """Handles evaluation of expressions: identifiers, operators, conditionals,
    arrays, maps and indexing."""

    def eval_identifier(self, node, env):
        val = env.resolve(node.value)
        if val is None:
            debug_log("  Identifier not found", node.value)
            return EvaluationError(f"identifier not found: {node.value}")
        return val

    # === PREFIX ===

    def eval_prefix_expression(self, node, env):
        right = self.eval_node(node.right, env)
        if unwinds(right):
            return right

        operator = node.operator
        if operator == "!":
            return native_bool_to_boolean(not is_truthy(right))
        if operator == "-":
            if not isinstance(right, Integer):
                return EvaluationError(f"unknown operator: -{right.type()}")
            return _checked(-right.value, f"-{right.value}")
        return EvaluationError(f"unknown operator: {operator}{right.type()}")

    # === INFIX ===

    def eval_infix_expression(self, node, env):
        left = self.eval_node(node.left, env)
        if unwinds(left):
            return left
        right = self.eval_node(node.right, env)
        if unwinds(right):
            return right

        operator = node.operator
        if isinstance(left, Integer) and isinstance(right, Integer):
            return self.eval_integer_infix(operator, left, right)
        if isinstance(left, BooleanObj) and isinstance(right, BooleanObj):
            return self.eval_boolean_infix(operator, left, right)
        if isinstance(left, String) and isinstance(right, String):
            return self.eval_string_infix(operator, left, right)

        return EvaluationError(f"type mismatch: {left.type()} {operator} {right.type()}")

    def eval_integer_infix(self, operator, left, right):
        left_val = left.value
        right_val = right.value
        description = f"{left_val} {operator} {right_val}"

        if operator == "+":
            return _checked(left_val + right_val, description)
        elif operator == "-":
            return _checked(left_val - right_val, description)
        elif operator == "*":
            return _checked(left_val * right_val, description)
        elif operator == "/":
            if right_val == 0:
                return EvaluationError(f"division by zero: {left_val} / 0")
            return _checked(_truncating_div(left_val, right_val), description)
        elif operator == "<":
            return native_bool_to_boolean(left_val < right_val)
        elif operator == ">":
            return native_bool_to_boolean(left_val > right_val)
        elif operator == "==":
            return native_bool_to_boolean(left_val == right_val)
        elif operator == "!=":
            return native_bool_to_boolean(left_val != right_val)

        return EvaluationError(f"unknown operator: Integer {operator} Integer")

    def eval_boolean_infix(self, operator, left, right):
        if operator == "==":
            return native_bool_to_boolean(left.value == right.value)
        elif operator == "!=":
            return native_bool_to_boolean(left.value != right.value)
        return EvaluationError(f"unknown operator: Boolean {operator} Boolean")

    def eval_string_infix(self, operator, left, right):
        if operator == "+":
            return String(left.value + right.value)
        elif operator == "==":
            return native_bool_to_boolean(left.value == right.value)
        elif operator == "!=":
            return native_bool_to_boolean(left.value != right.value)
        return EvaluationError(f"unknown operator: String {operator} String")

    # === CONDITIONALS ===

    def eval_if_expression(self, node, env):
        condition = self.eval_node(node.condition, env)
        if unwinds(condition):
            return condition

        if is_truthy(condition):
            return value_or_null(self.eval_node(node.consequence, env))
        elif node.alternative is not None:
            return value_or_null(self.eval_node(node.alternative, env))
        return NULL

    # === COLLECTIONS ===

    def eval_array_literal(self, node, env):
        elements = self.eval_expressions(node.elements, env)
        if unwinds(elements):
            return elements
        return Array(elements)

    def eval_map_literal(self, node, env):
        pairs = {}
        for key_node, value_node in node.pairs:
            key = self.eval_node(key_node, env)
            if unwinds(key):
                return key

            hash_key = key.hash_key()
            if not hash_key.usable:
                return EvaluationError(f"unusable as map key: {key.type()}")

            value = self.eval_node(value_node, env)
            if unwinds(value):
                return value

            pairs[hash_key] = MapPair(key, value)
        return Map(pairs)

    def eval_index_expression(self, node, env):
        left = self.eval_node(node.left, env)
        if unwinds(left):
            return left
        index = self.eval_node(node.index, env)
        if unwinds(index):
            return index

        if isinstance(left, Array) and isinstance(index, Integer):
            return self.eval_array_index(left, index)
        if isinstance(left, Map):
            return self.eval_map_index(left, index)
        return EvaluationError(f"index operator not supported: {left.type()}")

    def eval_array_index(self, array, index):
        idx = index.value
        if idx < 0 or idx >= len(array.elements):
            return NULL
        return array.elements[idx]

    def eval_map_index(self, map_obj, index):
        hash_key = index.hash_key()
        if not hash_key.usable:
            return EvaluationError(f"unusable as map key: {index.type()}")

        value = map_obj.get(index)
        return NULL if value is None else value
