"""
Parser module for the contract dependency resolver.

This module provides AST node definitions and the parser implementation.
"""

from .ast_nodes import (
    ASTNode,
    Program,
    ImportDeclaration,
    CompositeDeclaration,
    InterfaceDeclaration,
    STRING_LOCATION,
    ADDRESS_LOCATION,
    IDENTIFIER_LOCATION,
)
from .parser import Parser

__all__ = [
    'ASTNode',
    'Program',
    'ImportDeclaration',
    'CompositeDeclaration',
    'InterfaceDeclaration',
    'STRING_LOCATION',
    'ADDRESS_LOCATION',
    'IDENTIFIER_LOCATION',
    'Parser',
]
