# src/monkey/evaluator/statements.py
from ..object import ReturnValue, LET, DEFAULT
from .utils import is_error, unwinds, debug_log, EVAL_SUMMARY


class StatementEvaluatorMixin:
    """Handles evaluation of programs, blocks, let and return."""

    def eval_program(self, statements, env):
        debug_log("eval_program", f"Processing {len(statements)} statements")

        result = DEFAULT
        for i, stmt in enumerate(statements):
            debug_log(f"  Statement {i+1}", type(stmt).__name__)
            res = self.eval_node(stmt, env)
            EVAL_SUMMARY['evaluated_statements'] += 1

            if isinstance(res, ReturnValue):
                debug_log("  ReturnValue encountered", res.value.type())
                return res.value
            if is_error(res):
                debug_log("  Error encountered", res.message)
                EVAL_SUMMARY['errors'] += 1
                return res
            result = res

        return result

    def eval_block_statement(self, block, env):
        result = DEFAULT
        for stmt in block.statements:
            res = self.eval_node(stmt, env)
            EVAL_SUMMARY['evaluated_statements'] += 1
            # Return values and errors unwind unchanged to the caller
            if unwinds(res):
                return res
            result = res
        return result

    def eval_return_statement(self, node, env):
        val = self.eval_node(node.return_value, env)
        if unwinds(val):
            return val
        return ReturnValue(val)

    def eval_let_statement(self, node, env):
        val = self.eval_node(node.value, env)
        if unwinds(val):
            return val
        env.set(node.name.value, val)
        debug_log("  let binding", node.name.value)
        return LET
