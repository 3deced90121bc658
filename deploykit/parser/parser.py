"""
Cadence parser implementation.

The Parser converts a stream of tokens from the Lexer into a Program
holding the top-level imports and declarations. Bodies of declarations
and any other top-level blocks are skipped by brace matching.
"""

from typing import List

from ..lexer import Token, TokenType
from .ast_nodes import (
    Program,
    ImportDeclaration,
    CompositeDeclaration,
    InterfaceDeclaration,
    STRING_LOCATION,
    ADDRESS_LOCATION,
    IDENTIFIER_LOCATION,
)


COMPOSITE_KINDS = (
    TokenType.CONTRACT,
    TokenType.RESOURCE,
    TokenType.STRUCT,
    TokenType.EVENT,
    TokenType.ENUM,
    TokenType.ATTACHMENT,
)

ACCESS_MODIFIERS = (TokenType.PUB, TokenType.PRIV, TokenType.ACCESS)


class Parser:
    """
    Recursive descent parser for the top level of Cadence programs.

    Parses a stream of tokens into a Program.
    """

    def __init__(self, tokens: List[Token]):
        self.tokens = tokens
        self.pos = 0

    def peek(self, offset: int = 0) -> Token:
        """Look ahead in the token stream without consuming."""
        pos = self.pos + offset
        if pos >= len(self.tokens):
            return self.tokens[-1]  # EOF
        return self.tokens[pos]

    def current(self) -> Token:
        """Return the current token."""
        return self.peek()

    def advance(self) -> Token:
        """Consume and return the current token."""
        token = self.current()
        self.pos += 1
        return token

    def match(self, *types: TokenType) -> bool:
        """Check if current token matches any of the given types."""
        return self.current().type in types

    def expect(self, token_type: TokenType, message: str = '') -> Token:
        """Consume the current token if it matches, otherwise raise an error."""
        if self.current().type != token_type:
            raise SyntaxError(
                f"Expected {token_type.name} but got {self.current().type.name} "
                f"at line {self.current().line}, column {self.current().column}: {message}"
            )
        return self.advance()

    # =========================================================================
    # TOP-LEVEL PARSING
    # =========================================================================

    def parse(self) -> Program:
        """Parse the entire source file into a Program."""
        program = Program()

        while not self.match(TokenType.EOF):
            if self.match(TokenType.IMPORT):
                program.imports.append(self.parse_import())
            elif self.match(*ACCESS_MODIFIERS, *COMPOSITE_KINDS):
                self.parse_declaration(program)
            elif self.match(TokenType.FUN, TokenType.TRANSACTION):
                self.skip_function_like()
            elif self.match(TokenType.LBRACE):
                self.skip_block()
            elif self.match(TokenType.RBRACE):
                token = self.current()
                raise SyntaxError(
                    f"Unexpected '}}' at line {token.line}, column {token.column}"
                )
            else:
                self.advance()

        return program

    def parse_import(self) -> ImportDeclaration:
        """
        Parse an import declaration.

        Accepted forms:
            import "Location"
            import 0x01
            import A, B from "Location" | 0x01 | Name
            import A
        """
        keyword = self.expect(TokenType.IMPORT)

        if self.match(TokenType.STRING_LITERAL, TokenType.HEX_NUMBER):
            return self._import_location([], self.advance(), keyword.line)

        identifiers = [self.expect(TokenType.IDENTIFIER, 'import name').value]
        name_token = self.tokens[self.pos - 1]
        while self.match(TokenType.COMMA):
            self.advance()
            identifiers.append(self.expect(TokenType.IDENTIFIER, 'import name').value)

        if not self.match(TokenType.FROM):
            return ImportDeclaration(
                location=identifiers[0],
                location_kind=IDENTIFIER_LOCATION,
                identifiers=identifiers,
                span=(name_token.start, name_token.end),
                line=keyword.line,
            )

        self.advance()
        if not self.match(TokenType.STRING_LITERAL, TokenType.HEX_NUMBER, TokenType.IDENTIFIER):
            token = self.current()
            raise SyntaxError(
                f"Expected import location but got {token.type.name} "
                f"at line {token.line}, column {token.column}"
            )
        return self._import_location(identifiers, self.advance(), keyword.line)

    def _import_location(self, identifiers: List[str], token: Token, line: int) -> ImportDeclaration:
        if token.type == TokenType.STRING_LITERAL:
            location, kind = token.value[1:-1], STRING_LOCATION
        elif token.type == TokenType.HEX_NUMBER:
            location, kind = token.value, ADDRESS_LOCATION
        else:
            location, kind = token.value, IDENTIFIER_LOCATION
        return ImportDeclaration(
            location=location,
            location_kind=kind,
            identifiers=identifiers,
            span=(token.start, token.end),
            line=line,
        )

    # =========================================================================
    # DECLARATION PARSING
    # =========================================================================

    def skip_access_modifiers(self) -> None:
        """Skip `pub`, `priv`, `pub(set)` and `access(...)` prefixes."""
        while self.match(*ACCESS_MODIFIERS):
            self.advance()
            if self.match(TokenType.LPAREN):
                self.skip_balanced(TokenType.LPAREN, TokenType.RPAREN)

    def parse_declaration(self, program: Program) -> None:
        """Parse a top-level declaration, recording composites and interfaces."""
        self.skip_access_modifiers()

        if not self.match(*COMPOSITE_KINDS):
            # pub fun, pub let, ... are handled by the top-level loop
            return

        kind_token = self.advance()
        kind = kind_token.value
        is_interface = False
        if self.match(TokenType.INTERFACE):
            self.advance()
            is_interface = True

        identifier = self.expect(TokenType.IDENTIFIER, f'{kind} name').value

        if is_interface:
            program.interfaces.append(InterfaceDeclaration(kind, identifier, kind_token.line))
        else:
            program.composites.append(CompositeDeclaration(kind, identifier, kind_token.line))

        if kind_token.type == TokenType.EVENT:
            if self.match(TokenType.LPAREN):
                self.skip_balanced(TokenType.LPAREN, TokenType.RPAREN)
            return

        # Conformances and attachment targets up to the body
        while not self.match(TokenType.LBRACE):
            if self.match(TokenType.EOF, TokenType.RBRACE):
                raise SyntaxError(
                    f"Expected body of {kind} {identifier} "
                    f"at line {self.current().line}, column {self.current().column}"
                )
            self.advance()
        self.skip_block()

    def skip_function_like(self) -> None:
        """Skip a top-level function or transaction, signature and body."""
        keyword = self.advance()
        while not self.match(TokenType.LBRACE):
            if self.match(TokenType.EOF, TokenType.RBRACE):
                raise SyntaxError(
                    f"Expected body of {keyword.value} "
                    f"at line {keyword.line}, column {keyword.column}"
                )
            self.advance()
        self.skip_block()

    def skip_block(self) -> None:
        """Skip a brace-delimited block including nested blocks."""
        self.skip_balanced(TokenType.LBRACE, TokenType.RBRACE)

    def skip_balanced(self, open_type: TokenType, close_type: TokenType) -> None:
        start = self.expect(open_type)
        depth = 1
        while depth > 0:
            if self.match(TokenType.EOF):
                raise SyntaxError(
                    f"Unterminated '{start.value}' opened at line {start.line}, column {start.column}"
                )
            if self.match(open_type):
                depth += 1
            elif self.match(close_type):
                depth -= 1
            self.advance()
