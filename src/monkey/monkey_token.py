# src/monkey/monkey_token.py

# Special
ILLEGAL = "ILLEGAL"
EOF = "EOF"

# Identifiers + literals
IDENT = "IDENT"
INT = "INT"
STRING = "STRING"

# Operators
ASSIGN = "="
PLUS = "+"
MINUS = "-"
STAR = "*"
SLASH = "/"
BANG = "!"
LT = "<"
GT = ">"
EQ = "=="
NOT_EQ = "!="

# Delimiters
COMMA = ","
SEMICOLON = ";"
COLON = ":"
LPAREN = "("
RPAREN = ")"
LBRACE = "{"
RBRACE = "}"
LBRACKET = "["
RBRACKET = "]"

# Keywords
FUNCTION = "FUNCTION"
LET = "LET"
TRUE = "TRUE"
FALSE = "FALSE"
IF = "IF"
ELSE = "ELSE"
RETURN = "RETURN"

KEYWORDS = {
    "fn": FUNCTION,
    "let": LET,
    "true": TRUE,
    "false": FALSE,
    "if": IF,
    "else": ELSE,
    "return": RETURN,
}

# Tokens whose literal is a payload rather than fixed text
PAYLOAD_TYPES = {IDENT, INT, STRING, ILLEGAL}


class Token:
    __slots__ = ("type", "literal", "line", "column")

    def __init__(self, token_type, literal, line=1, column=1):
        object.__setattr__(self, "type", token_type)
        object.__setattr__(self, "literal", literal)
        object.__setattr__(self, "line", line)
        object.__setattr__(self, "column", column)

    def __setattr__(self, name, value):
        raise AttributeError("Token is immutable")

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return self.type == other.type and self.literal == other.literal

    def __hash__(self):
        return hash((self.type, self.literal))

    def __repr__(self):
        return f"Token({self.type}, {self.literal!r}, line={self.line}, column={self.column})"

    def describe(self):
        """Human readable form used in parser diagnostics."""
        if self.type in PAYLOAD_TYPES:
            return f"{self.type}({self.literal})"
        return self.type


def lookup_ident(ident):
    return KEYWORDS.get(ident, IDENT)
