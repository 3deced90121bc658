"""
Source parser adapter.

Extracts the two facts the resolver needs from a contract's source: the
name of its single contract (or contract interface) declaration and its
string-literal import locations.
"""

from dataclasses import dataclass, field
from typing import List

from ..lexer import Lexer
from ..parser import Parser, Program, ImportDeclaration
from .errors import ParseError, MultipleDeclarationsError


CONTRACT_KIND = 'contract'


@dataclass
class ParsedSource:
    """Result of parsing one contract source."""
    name: str
    program: Program
    imports: List[str] = field(default_factory=list)

    def string_import_declarations(self) -> List[ImportDeclaration]:
        return [imp for imp in self.program.imports if imp.is_string_location]


def parse_program(code: str, location: str = '') -> Program:
    """Tokenize and parse `code`, raising ParseError on malformed source."""
    try:
        tokens = Lexer(code).tokenize()
        return Parser(tokens).parse()
    except SyntaxError as e:
        raise ParseError(location, str(e)) from e


def contract_declaration_count(program: Program) -> int:
    """Number of top-level contract and contract interface declarations."""
    composites = [d for d in program.composite_declarations() if d.kind == CONTRACT_KIND]
    interfaces = [d for d in program.interface_declarations() if d.kind == CONTRACT_KIND]
    return len(composites) + len(interfaces)


def parse_name(program: Program) -> str:
    for declaration in program.composite_declarations():
        if declaration.kind == CONTRACT_KIND:
            return declaration.identifier

    for declaration in program.interface_declarations():
        if declaration.kind == CONTRACT_KIND:
            return declaration.identifier

    return ''


def parse_source(code: str, location: str = '') -> ParsedSource:
    """
    Parse a deployable contract source.

    Args:
        code: The contract source text
        location: Where the source came from, used in error messages

    Returns:
        ParsedSource with the declared name and the string import locations
        in declaration order (duplicates preserved)

    Raises:
        ParseError: the source is malformed
        MultipleDeclarationsError: the source does not declare exactly one
            contract or contract interface
    """
    program = parse_program(code, location)

    count = contract_declaration_count(program)
    if count != 1:
        raise MultipleDeclarationsError(location, count)

    return ParsedSource(
        name=parse_name(program),
        program=program,
        imports=program.string_imports(),
    )
