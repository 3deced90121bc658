"""
AST node definitions for Cadence parsing.

Only the top level of a program is represented: import declarations and
the composite/interface declarations found outside of any block.
"""

from dataclasses import dataclass, field
from typing import List, Tuple


# Location kinds of an import declaration
STRING_LOCATION = 'string'
ADDRESS_LOCATION = 'address'
IDENTIFIER_LOCATION = 'identifier'


@dataclass
class ASTNode:
    """Base class for all AST nodes."""
    pass


@dataclass
class ImportDeclaration(ASTNode):
    """
    Represents an import statement.

    `location` is the path for string locations (quotes removed), the hex
    literal for address locations and the imported name for identifier
    locations. String locations are kept raw: escape sequences are not
    decoded, so `import "a\\"b"` has the location `a\\"b`. `span` covers
    the location token in the source, quotes included.
    """
    location: str
    location_kind: str
    identifiers: List[str] = field(default_factory=list)
    span: Tuple[int, int] = (0, 0)
    line: int = 0

    @property
    def is_string_location(self) -> bool:
        return self.location_kind == STRING_LOCATION


@dataclass
class CompositeDeclaration(ASTNode):
    """Represents a contract, resource, struct, event, enum or attachment."""
    kind: str
    identifier: str
    line: int = 0


@dataclass
class InterfaceDeclaration(ASTNode):
    """Represents a `<kind> interface Name { ... }` declaration."""
    kind: str
    identifier: str
    line: int = 0


@dataclass
class Program(ASTNode):
    """Root node representing an entire Cadence source file."""
    imports: List[ImportDeclaration] = field(default_factory=list)
    composites: List[CompositeDeclaration] = field(default_factory=list)
    interfaces: List[InterfaceDeclaration] = field(default_factory=list)

    def import_declarations(self) -> List[ImportDeclaration]:
        return list(self.imports)

    def composite_declarations(self) -> List[CompositeDeclaration]:
        return list(self.composites)

    def interface_declarations(self) -> List[InterfaceDeclaration]:
        return list(self.interfaces)

    def string_imports(self) -> List[str]:
        """Locations of all string-literal imports, in declaration order."""
        return [imp.location for imp in self.imports if imp.is_string_location]
