# src/monkey/evaluator/core.py
import sys

from .. import monkey_ast
from ..config import config
from ..object import EvaluationError, Integer, String, LET, DEFAULT
from .utils import debug_log, reset_summary, native_bool_to_boolean, EVAL_SUMMARY, NULL
from .expressions import ExpressionEvaluatorMixin
from .statements import StatementEvaluatorMixin
from .functions import FunctionEvaluatorMixin

STACK_OVERFLOW = "stack overflow: maximum recursion depth exceeded"


class Evaluator(ExpressionEvaluatorMixin, StatementEvaluatorMixin, FunctionEvaluatorMixin):

    def eval_node(self, node, env):
        if node is None:
            debug_log("eval_node", "Node is None, returning NULL")
            return NULL

        node_type = type(node)

        # === STATEMENTS ===
        if node_type == monkey_ast.Program:
            debug_log("  Program node", f"{len(node.statements)} statements")
            return self.eval_program(node.statements, env)

        elif node_type == monkey_ast.ExpressionStatement:
            return self.eval_node(node.expression, env)

        elif node_type == monkey_ast.BlockStatement:
            debug_log("  BlockStatement node", f"{len(node.statements)} statements")
            return self.eval_block_statement(node, env)

        elif node_type == monkey_ast.ReturnStatement:
            return self.eval_return_statement(node, env)

        elif node_type == monkey_ast.LetStatement:
            return self.eval_let_statement(node, env)

        # === EXPRESSIONS ===
        elif node_type == monkey_ast.Identifier:
            return self.eval_identifier(node, env)

        elif node_type == monkey_ast.IntegerLiteral:
            return Integer(node.value)

        elif node_type == monkey_ast.StringLiteral:
            return String(node.value)

        elif node_type == monkey_ast.Boolean:
            return native_bool_to_boolean(node.value)

        elif node_type == monkey_ast.PrefixExpression:
            debug_log("  PrefixExpression node", node.operator)
            return self.eval_prefix_expression(node, env)

        elif node_type == monkey_ast.InfixExpression:
            debug_log("  InfixExpression node", node.operator)
            return self.eval_infix_expression(node, env)

        elif node_type == monkey_ast.GroupedExpression:
            return self.eval_node(node.expression, env)

        elif node_type == monkey_ast.IfExpression:
            return self.eval_if_expression(node, env)

        elif node_type == monkey_ast.FunctionLiteral:
            return self.eval_function_literal(node, env)

        elif node_type == monkey_ast.CallExpression:
            debug_log("  CallExpression node", f"{len(node.arguments)} args")
            return self.eval_call_expression(node, env)

        elif node_type == monkey_ast.ArrayLiteral:
            return self.eval_array_literal(node, env)

        elif node_type == monkey_ast.IndexExpression:
            return self.eval_index_expression(node, env)

        elif node_type == monkey_ast.MapLiteral:
            debug_log("  MapLiteral node", f"{len(node.pairs)} pairs")
            return self.eval_map_literal(node, env)

        # Fallback
        debug_log("  Unknown node type", node_type)
        return EvaluationError(f"unknown node type: {node_type.__name__}")


# Global Entry Point
def evaluate(program, env):
    """Evaluate a parsed program against ``env``.

    Returns the resulting Object, ``None`` when there is nothing to display
    (the program is empty or ends with a ``let``), or an EvaluationError.
    ``config.recursion_limit``, when set, is the host recursion limit for
    the duration of the call.
    """
    reset_summary()
    previous_limit = sys.getrecursionlimit()
    if config.recursion_limit:
        sys.setrecursionlimit(config.recursion_limit)

    evaluator = Evaluator()
    try:
        result = evaluator.eval_node(program, env)
    except RecursionError:
        # Unbounded user recursion exhausts the host stack
        EVAL_SUMMARY['errors'] += 1
        result = EvaluationError(STACK_OVERFLOW)
    finally:
        sys.setrecursionlimit(previous_limit)

    debug_log("evaluate completed", EVAL_SUMMARY)
    if result is LET or result is DEFAULT:
        return None
    return result
