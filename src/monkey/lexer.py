# src/monkey/lexer.py
from .monkey_token import (
    Token, lookup_ident, ILLEGAL, EOF, INT, STRING,
    ASSIGN, PLUS, MINUS, STAR, SLASH, BANG, LT, GT, EQ, NOT_EQ,
    COMMA, SEMICOLON, COLON, LPAREN, RPAREN, LBRACE, RBRACE, LBRACKET, RBRACKET,
)

# ASCII whitespace as skipped between tokens (vertical tab is not included)
_WHITESPACE = " \t\n\x0c\r"

_ASCII_DIGITS = "0123456789"

INT_MIN = -(2 ** 63)
INT_MAX = 2 ** 63 - 1

_SINGLE_CHAR_TOKENS = {
    "=": ASSIGN,
    "+": PLUS,
    "-": MINUS,
    "*": STAR,
    "/": SLASH,
    "!": BANG,
    "<": LT,
    ">": GT,
    ",": COMMA,
    ";": SEMICOLON,
    ":": COLON,
    "(": LPAREN,
    ")": RPAREN,
    "{": LBRACE,
    "}": RBRACE,
    "[": LBRACKET,
    "]": RBRACKET,
}


class Lexer:
    def __init__(self, source_code, filename="<stdin>"):
        self.input = source_code
        self.position = 0
        self.read_position = 0
        self.ch = ""
        self.line = 1
        self.column = 0
        self.filename = filename
        self.read_char()

    def read_char(self):
        if self.ch == "\n":
            self.line += 1
            self.column = 0
        if self.read_position >= len(self.input):
            self.ch = ""
        else:
            self.ch = self.input[self.read_position]
        self.position = self.read_position
        self.read_position += 1
        self.column += 1

    def peek_char(self):
        if self.read_position >= len(self.input):
            return ""
        return self.input[self.read_position]

    def next_token(self):
        self.skip_whitespace()
        line, column = self.line, self.column

        if self.ch == "":
            # Repeated calls keep returning EOF without moving the cursor
            return Token(EOF, "", line, column)

        if self.ch == "=" and self.peek_char() == "=":
            self.read_char()
            tok = Token(EQ, "==", line, column)
        elif self.ch == "!" and self.peek_char() == "=":
            self.read_char()
            tok = Token(NOT_EQ, "!=", line, column)
        elif self.ch in _SINGLE_CHAR_TOKENS:
            tok = Token(_SINGLE_CHAR_TOKENS[self.ch], self.ch, line, column)
        elif self.ch == '"':
            return Token(STRING, self.read_string(), line, column)
        elif self.is_letter(self.ch):
            ident = self.read_identifier()
            return Token(lookup_ident(ident), ident, line, column)
        elif self.is_digit(self.ch):
            digits = self.read_number()
            value = int(digits)
            if value > INT_MAX:
                # Out of range for a signed 64-bit integer
                return Token(ILLEGAL, digits[0], line, column)
            return Token(INT, digits, line, column)
        else:
            tok = Token(ILLEGAL, self.ch, line, column)

        self.read_char()
        return tok

    def tokens(self):
        """Drain the lexer, yielding every token up to and including EOF."""
        while True:
            tok = self.next_token()
            yield tok
            if tok.type == EOF:
                return

    def read_identifier(self):
        start = self.position
        while self.is_letter(self.ch):
            self.read_char()
        return self.input[start:self.position]

    def read_number(self):
        start = self.position
        while self.is_digit(self.ch):
            self.read_char()
        return self.input[start:self.position]

    def read_string(self):
        # An unterminated string silently runs to the end of input
        self.read_char()
        start = self.position
        while self.ch != '"' and self.ch != "":
            self.read_char()
        value = self.input[start:self.position]
        if self.ch == '"':
            self.read_char()
        return value

    def skip_whitespace(self):
        while self.ch != "" and self.ch in _WHITESPACE:
            self.read_char()

    @staticmethod
    def is_letter(ch):
        return ch != "" and ch.isalpha()

    @staticmethod
    def is_digit(ch):
        return ch != "" and ch in _ASCII_DIGITS
