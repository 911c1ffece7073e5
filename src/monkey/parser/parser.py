# src/monkey/parser/parser.py
import logging

from ..monkey_token import (
    ILLEGAL, EOF, IDENT, INT, STRING, ASSIGN, PLUS, MINUS, STAR, SLASH, BANG,
    LT, GT, EQ, NOT_EQ, COMMA, SEMICOLON, COLON, LPAREN, RPAREN, LBRACE, RBRACE,
    LBRACKET, RBRACKET, FUNCTION, LET, TRUE, FALSE, IF, ELSE, RETURN,
)
from ..monkey_ast import (
    Program, LetStatement, ReturnStatement, ExpressionStatement, BlockStatement,
    Identifier, IntegerLiteral, StringLiteral, Boolean, PrefixExpression,
    InfixExpression, GroupedExpression, IfExpression, FunctionLiteral,
    CallExpression, ArrayLiteral, IndexExpression, MapLiteral,
)
from ..config import config

logger = logging.getLogger(__name__)

# Precedence constants
LOWEST, EQUALS, LESSGREATER, SUM, PRODUCT, PREFIX, CALL, INDEX = 1, 2, 3, 4, 5, 6, 7, 8

precedences = {
    EQ: EQUALS, NOT_EQ: EQUALS,
    LT: LESSGREATER, GT: LESSGREATER,
    PLUS: SUM, MINUS: SUM,
    SLASH: PRODUCT, STAR: PRODUCT,
    LPAREN: CALL,
    LBRACKET: INDEX,
}


class Parser:
    def __init__(self, lexer):
        self.lexer = lexer
        self.errors = []
        self.cur_token = None
        self.peek_token = None

        self.prefix_parse_fns = {
            IDENT: self.parse_identifier,
            INT: self.parse_integer_literal,
            STRING: self.parse_string_literal,
            BANG: self.parse_prefix_expression,
            MINUS: self.parse_prefix_expression,
            TRUE: self.parse_boolean,
            FALSE: self.parse_boolean,
            LPAREN: self.parse_grouped_expression,
            IF: self.parse_if_expression,
            FUNCTION: self.parse_function_literal,
            LBRACKET: self.parse_array_literal,
            LBRACE: self.parse_map_literal,
        }
        self.infix_parse_fns = {
            PLUS: self.parse_infix_expression,
            MINUS: self.parse_infix_expression,
            SLASH: self.parse_infix_expression,
            STAR: self.parse_infix_expression,
            EQ: self.parse_infix_expression,
            NOT_EQ: self.parse_infix_expression,
            LT: self.parse_infix_expression,
            GT: self.parse_infix_expression,
            LPAREN: self.parse_call_expression,
            LBRACKET: self.parse_index_expression,
        }
        self.next_token()
        self.next_token()

    def parse_program(self):
        statements = []
        while not self.cur_token_is(EOF):
            stmt = self.parse_statement()
            if stmt is not None:
                statements.append(stmt)
            self.next_token()
        self._log(f"parsed {len(statements)} statements, {len(self.errors)} errors")
        return Program(statements)

    def has_errors(self):
        return len(self.errors) > 0

    # === STATEMENTS ===

    def parse_statement(self):
        if self.cur_token_is(LET):
            return self.parse_let_statement()
        elif self.cur_token_is(RETURN):
            return self.parse_return_statement()
        else:
            return self.parse_expression_statement()

    def parse_let_statement(self):
        if not self.expect_peek(IDENT):
            return None
        name = Identifier(self.cur_token.literal)

        if not self.expect_peek(ASSIGN):
            return None

        self.next_token()
        value = self.parse_expression(LOWEST)
        if value is None:
            return None

        if self.peek_token_is(SEMICOLON):
            self.next_token()
        return LetStatement(name=name, value=value)

    def parse_return_statement(self):
        self.next_token()
        return_value = self.parse_expression(LOWEST)
        if return_value is None:
            return None

        if self.peek_token_is(SEMICOLON):
            self.next_token()
        return ReturnStatement(return_value=return_value)

    def parse_expression_statement(self):
        expression = self.parse_expression(LOWEST)
        if expression is None:
            return None

        if self.peek_token_is(SEMICOLON):
            self.next_token()
        return ExpressionStatement(expression=expression)

    def parse_block_statement(self):
        # cur_token is the opening brace
        statements = []
        self.next_token()

        while not self.cur_token_is(RBRACE) and not self.cur_token_is(EOF):
            stmt = self.parse_statement()
            if stmt is not None:
                statements.append(stmt)
            self.next_token()

        return BlockStatement(statements)

    # === EXPRESSIONS ===

    def parse_expression(self, precedence):
        if self.cur_token_is(ILLEGAL):
            self.illegal_token_error(self.cur_token)
            return None

        prefix = self.prefix_parse_fns.get(self.cur_token.type)
        if prefix is None:
            self.add_error(self.cur_token, f"no parse rule for token {self.cur_token.describe()}")
            return None

        left_exp = prefix()
        if left_exp is None:
            return None

        # Strictly greater: operators of equal precedence associate to the left
        while precedence < self.peek_precedence():
            infix = self.infix_parse_fns.get(self.peek_token.type)
            if infix is None:
                return left_exp

            self.next_token()
            left_exp = infix(left_exp)
            if left_exp is None:
                return None

        return left_exp

    def parse_identifier(self):
        return Identifier(value=self.cur_token.literal)

    def parse_integer_literal(self):
        try:
            return IntegerLiteral(value=int(self.cur_token.literal))
        except ValueError:
            self.add_error(self.cur_token, f"could not parse {self.cur_token.literal!r} as integer")
            return None

    def parse_string_literal(self):
        return StringLiteral(value=self.cur_token.literal)

    def parse_boolean(self):
        return Boolean(value=self.cur_token_is(TRUE))

    def parse_prefix_expression(self):
        operator = self.cur_token.literal
        self.next_token()
        right = self.parse_expression(PREFIX)
        if right is None:
            return None
        return PrefixExpression(operator=operator, right=right)

    def parse_infix_expression(self, left):
        operator = self.cur_token.literal
        precedence = self.cur_precedence()
        self.next_token()
        right = self.parse_expression(precedence)
        if right is None:
            return None
        return InfixExpression(left=left, operator=operator, right=right)

    def parse_grouped_expression(self):
        self.next_token()
        exp = self.parse_expression(LOWEST)
        if exp is None:
            return None
        if not self.expect_peek(RPAREN):
            return None
        return GroupedExpression(exp)

    def parse_if_expression(self):
        if not self.expect_peek(LPAREN):
            return None

        self.next_token()
        condition = self.parse_expression(LOWEST)
        if condition is None:
            return None

        if not self.expect_peek(RPAREN):
            return None

        if not self.expect_peek(LBRACE):
            return None

        consequence = self.parse_block_statement()
        alternative = None

        if self.peek_token_is(ELSE):
            self.next_token()
            if not self.expect_peek(LBRACE):
                return None
            alternative = self.parse_block_statement()

        return IfExpression(condition=condition, consequence=consequence, alternative=alternative)

    def parse_function_literal(self):
        if not self.expect_peek(LPAREN):
            return None

        parameters = self.parse_function_parameters()
        if parameters is None:
            return None

        if not self.expect_peek(LBRACE):
            return None

        body = self.parse_block_statement()
        return FunctionLiteral(parameters=parameters, body=body)

    def parse_function_parameters(self):
        identifiers = []

        if self.peek_token_is(RPAREN):
            self.next_token()
            return identifiers

        if not self.expect_peek(IDENT):
            return None
        identifiers.append(Identifier(self.cur_token.literal))

        while self.peek_token_is(COMMA):
            self.next_token()
            if not self.expect_peek(IDENT):
                return None
            identifiers.append(Identifier(self.cur_token.literal))

        if not self.expect_peek(RPAREN):
            return None

        return identifiers

    def parse_call_expression(self, function):
        arguments = self.parse_expression_list(RPAREN)
        if arguments is None:
            return None
        return CallExpression(function=function, arguments=arguments)

    def parse_array_literal(self):
        elements = self.parse_expression_list(RBRACKET)
        if elements is None:
            return None
        return ArrayLiteral(elements=elements)

    def parse_index_expression(self, left):
        self.next_token()
        index = self.parse_expression(LOWEST)
        if index is None:
            return None

        if not self.expect_peek(RBRACKET):
            return None

        return IndexExpression(left=left, index=index)

    def parse_map_literal(self):
        pairs = self.parse_expression_list(RBRACE, self.parse_map_pair)
        if pairs is None:
            return None
        return MapLiteral(pairs=pairs)

    def parse_map_pair(self):
        key = self.parse_expression(LOWEST)
        if key is None:
            return None

        if not self.expect_peek(COLON):
            return None

        self.next_token()
        value = self.parse_expression(LOWEST)
        if value is None:
            return None

        return (key, value)

    def parse_expression_list(self, end, parse_item=None):
        """Parse comma separated items up to the ``end`` delimiter.

        Shared by call arguments, array elements and map pairs. Returns None
        (with diagnostics recorded) when an item or delimiter is malformed.
        """
        if parse_item is None:
            parse_item = lambda: self.parse_expression(LOWEST)

        items = []
        if self.peek_token_is(end):
            self.next_token()
            return items

        self.next_token()
        item = parse_item()
        if item is None:
            return None
        items.append(item)

        while self.peek_token_is(COMMA):
            self.next_token()
            self.next_token()
            item = parse_item()
            if item is None:
                return None
            items.append(item)

        if not self.expect_peek(end):
            return None

        return items

    # === TOKEN UTILITIES ===
    def next_token(self):
        self.cur_token = self.peek_token
        self.peek_token = self.lexer.next_token()

    def cur_token_is(self, t):
        return self.cur_token.type == t

    def peek_token_is(self, t):
        return self.peek_token.type == t

    def expect_peek(self, t):
        if self.peek_token_is(t):
            self.next_token()
            return True
        if self.peek_token_is(ILLEGAL):
            self.illegal_token_error(self.peek_token)
        else:
            self.add_error(
                self.peek_token,
                f"expected next token to be {t}, got {self.peek_token.describe()} instead",
            )
        return False

    def peek_precedence(self):
        return precedences.get(self.peek_token.type, LOWEST)

    def cur_precedence(self):
        return precedences.get(self.cur_token.type, LOWEST)

    # === DIAGNOSTICS ===
    def _log(self, message):
        """Controlled logging based on config"""
        if config.should_log("debug"):
            logger.debug(message)

    def add_error(self, token, message):
        error_msg = f"Line {token.line}:{token.column} - {message}"
        self.errors.append(error_msg)
        self._log(f"parse error: {error_msg}")

    def illegal_token_error(self, token):
        self.add_error(token, f"illegal character {token.literal!r}")
