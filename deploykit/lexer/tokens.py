"""
Token definitions for the Cadence lexer.

This module contains the TokenType enum, Token dataclass, and
constant mappings for keywords and punctuation.
"""

from dataclasses import dataclass
from enum import Enum, auto


class TokenType(Enum):
    """Enumeration of all token types recognized by the Cadence lexer."""

    # Keywords
    IMPORT = auto()
    FROM = auto()
    CONTRACT = auto()
    INTERFACE = auto()
    RESOURCE = auto()
    STRUCT = auto()
    EVENT = auto()
    ENUM = auto()
    ATTACHMENT = auto()
    TRANSACTION = auto()
    FUN = auto()
    PUB = auto()
    PRIV = auto()
    ACCESS = auto()

    # Literals
    IDENTIFIER = auto()
    STRING_LITERAL = auto()
    NUMBER = auto()
    HEX_NUMBER = auto()

    # Delimiters
    LPAREN = auto()
    RPAREN = auto()
    LBRACE = auto()
    RBRACE = auto()
    LBRACKET = auto()
    RBRACKET = auto()
    COMMA = auto()
    COLON = auto()
    SEMICOLON = auto()
    DOT = auto()
    OTHER = auto()

    EOF = auto()


@dataclass
class Token:
    """A single token with its position in the source."""
    type: TokenType
    value: str
    line: int
    column: int
    start: int = 0  # offset of the first character
    end: int = 0  # offset one past the last character


KEYWORDS = {
    'import': TokenType.IMPORT,
    'from': TokenType.FROM,
    'contract': TokenType.CONTRACT,
    'interface': TokenType.INTERFACE,
    'resource': TokenType.RESOURCE,
    'struct': TokenType.STRUCT,
    'event': TokenType.EVENT,
    'enum': TokenType.ENUM,
    'attachment': TokenType.ATTACHMENT,
    'transaction': TokenType.TRANSACTION,
    'fun': TokenType.FUN,
    'pub': TokenType.PUB,
    'priv': TokenType.PRIV,
    'access': TokenType.ACCESS,
}

DELIMITERS = {
    '(': TokenType.LPAREN,
    ')': TokenType.RPAREN,
    '{': TokenType.LBRACE,
    '}': TokenType.RBRACE,
    '[': TokenType.LBRACKET,
    ']': TokenType.RBRACKET,
    ',': TokenType.COMMA,
    ':': TokenType.COLON,
    ';': TokenType.SEMICOLON,
    '.': TokenType.DOT,
}
