"""
Lexer module for the contract dependency resolver.

This module provides tokenization of Cadence source code.
"""

from .tokens import TokenType, Token, KEYWORDS, DELIMITERS
from .lexer import Lexer

__all__ = [
    'TokenType',
    'Token',
    'KEYWORDS',
    'DELIMITERS',
    'Lexer',
]
