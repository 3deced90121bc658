"""
Lexer implementation for Cadence source code.

The Lexer tokenizes contract source into a stream of tokens that can be
consumed by the parser. Only the parts of the language needed to find
imports and top-level declarations are distinguished; every other
character becomes an OTHER token.
"""

from typing import List, Tuple

from .tokens import Token, TokenType, KEYWORDS, DELIMITERS


class Lexer:
    """
    Lexer for Cadence source code.

    Converts source text into a list of tokens for parsing.
    """

    def __init__(self, source: str):
        self.source = source
        self.pos = 0
        self.line = 1
        self.column = 1
        self.tokens: List[Token] = []

    def peek(self, offset: int = 0) -> str:
        """Look ahead in the source without consuming."""
        pos = self.pos + offset
        if pos >= len(self.source):
            return ''
        return self.source[pos]

    def advance(self) -> str:
        """Consume and return the current character."""
        ch = self.peek()
        self.pos += 1
        if ch == '\n':
            self.line += 1
            self.column = 1
        else:
            self.column += 1
        return ch

    def error(self, message: str, line: int, column: int) -> SyntaxError:
        return SyntaxError(f"{message} at line {line}, column {column}")

    def skip_whitespace(self) -> None:
        """Skip over whitespace characters."""
        ch = self.peek()
        while ch and ch in ' \t\r\n':
            self.advance()
            ch = self.peek()

    def skip_comment(self) -> None:
        """Skip over single-line and (nested) multi-line comments."""
        if self.peek() == '/' and self.peek(1) == '/':
            while self.peek() and self.peek() != '\n':
                self.advance()
            return

        start_line, start_col = self.line, self.column
        self.advance()  # skip /
        self.advance()  # skip *
        depth = 1
        while depth > 0:
            if not self.peek():
                raise self.error("Unterminated block comment", start_line, start_col)
            if self.peek() == '/' and self.peek(1) == '*':
                self.advance()
                self.advance()
                depth += 1
            elif self.peek() == '*' and self.peek(1) == '/':
                self.advance()
                self.advance()
                depth -= 1
            else:
                self.advance()

    def read_string(self) -> str:
        """Read a string literal including its quotes."""
        start_line, start_col = self.line, self.column
        result = self.advance()
        while self.peek() and self.peek() not in '"\n':
            if self.peek() == '\\':
                result += self.advance()
            result += self.advance()
        if self.peek() != '"':
            raise self.error("Unterminated string literal", start_line, start_col)
        result += self.advance()
        return result

    def read_number(self) -> Tuple[str, TokenType]:
        """Read a numeric literal (decimal, hex, binary or octal)."""
        result = ''
        token_type = TokenType.NUMBER

        if self.peek() == '0' and self.peek(1) in ('x', 'X', 'b', 'B', 'o', 'O'):
            if self.peek(1) in 'xX':
                token_type = TokenType.HEX_NUMBER
            result += self.advance()
            result += self.advance()

        while self.peek() and (self.peek().isalnum() or self.peek() in '_.'):
            if self.peek() == '.' and not self.peek(1).isdigit():
                break
            result += self.advance()

        return result, token_type

    def read_identifier(self) -> str:
        """Read an identifier or keyword."""
        result = ''
        while self.peek() and (self.peek().isalnum() or self.peek() == '_'):
            result += self.advance()
        return result

    def tokenize(self) -> List[Token]:
        """
        Tokenize the entire source and return a list of tokens.

        Returns:
            List of Token objects, ending with an EOF token.

        Raises:
            SyntaxError: on an unterminated string or block comment.
        """
        while self.pos < len(self.source):
            self.skip_whitespace()

            if self.pos >= len(self.source):
                break

            if self.peek() == '/' and self.peek(1) in ('/', '*'):
                self.skip_comment()
                continue

            start = self.pos
            start_line = self.line
            start_col = self.column
            ch = self.peek()

            if ch == '"':
                value = self.read_string()
                token_type = TokenType.STRING_LITERAL
            elif ch.isdigit():
                value, token_type = self.read_number()
            elif ch.isalpha() or ch == '_':
                value = self.read_identifier()
                token_type = KEYWORDS.get(value, TokenType.IDENTIFIER)
            else:
                value = self.advance()
                token_type = DELIMITERS.get(ch, TokenType.OTHER)

            self.tokens.append(Token(token_type, value, start_line, start_col, start, self.pos))

        self.tokens.append(Token(TokenType.EOF, '', self.line, self.column, self.pos, self.pos))
        return self.tokens
