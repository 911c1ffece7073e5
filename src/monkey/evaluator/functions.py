# src/monkey/evaluator/functions.py
from ..object import Function, Builtin, ReturnValue, EvaluationError
from .utils import unwinds, debug_log, value_or_null, EVAL_SUMMARY


class FunctionEvaluatorMixin:
    """Handles function literals, calls and application of closures and builtins."""

    def eval_function_literal(self, node, env):
        # The closure keeps the bindings visible right now, and only those
        return Function(node.parameters, node.body, env.snapshot())

    def eval_expressions(self, expressions, env):
        results = []
        for expr in expressions:
            res = self.eval_node(expr, env)
            if unwinds(res):
                return res
            results.append(res)
        return results

    def eval_call_expression(self, node, env):
        fn = self.eval_node(node.function, env)
        if unwinds(fn):
            return fn

        args = self.eval_expressions(node.arguments, env)
        if unwinds(args):
            return args

        return self.apply_function(fn, args)

    def apply_function(self, fn, args):
        EVAL_SUMMARY['function_calls'] += 1

        if isinstance(fn, Function):
            if len(fn.parameters) != len(args):
                return EvaluationError(
                    f"expected arity to be {len(fn.parameters)}, got {len(args)} instead"
                )

            call_env = fn.env.new_enclosed()
            for param, arg in zip(fn.parameters, args):
                call_env.set(param.value, arg)

            debug_log("  Calling user-defined function", f"{len(args)} args")
            result = self.eval_node(fn.body, call_env)
            if isinstance(result, ReturnValue):
                result = result.value
            return value_or_null(result)

        if isinstance(fn, Builtin):
            debug_log("  Calling builtin", fn.name)
            return fn.fn(args)

        return EvaluationError(f"not a function: {fn.type()}")
