"""
A single deployable contract.

Holds everything needed to deploy one contract: its source, the account
it is deployed to, its constructor arguments and, once imports are
resolved, the contracts and aliases its imports point at.
"""

from typing import Any, Dict, List, Optional, Sequence, Union

from ..parser import ImportDeclaration
from .address import Address
from .source import parse_source


class Contract:
    """
    One deployable contract source unit.

    `index` is the registration order within a Deployments registry and is
    only used to break ties when ordering; contracts are otherwise
    identified by their location.
    """

    def __init__(
        self,
        index: int,
        location: str,
        code: str,
        account_address: Union[Address, str],
        account_name: str = '',
        args: Optional[Sequence[Any]] = None,
    ):
        """
        Parse `code` and build the contract.

        Raises:
            ParseError: the source is malformed
            MultipleDeclarationsError: the source does not declare exactly
                one contract or contract interface
        """
        self._parsed = parse_source(code, location)
        self._index = index
        self._location = location
        self._code = code
        self._account_address = Address.from_hex(account_address)
        self._account_name = account_name
        self._args = list(args or [])
        self._dependencies: Dict[str, 'Contract'] = {}
        self._aliases: Dict[str, Address] = {}

    def __repr__(self) -> str:
        return f"Contract(index={self._index}, name={self.name!r}, location={self._location!r})"

    @property
    def id(self) -> int:
        return self._index

    @property
    def index(self) -> int:
        return self._index

    @property
    def name(self) -> str:
        return self._parsed.name

    @property
    def location(self) -> str:
        return self._location

    @property
    def code(self) -> str:
        return self._code

    @property
    def args(self) -> List[Any]:
        return self._args

    @property
    def target(self) -> Address:
        """The account address the contract is deployed to."""
        return self._account_address

    @property
    def account_name(self) -> str:
        return self._account_name

    @property
    def dependencies(self) -> Dict[str, 'Contract']:
        return self._dependencies

    @property
    def aliases(self) -> Dict[str, Address]:
        return self._aliases

    def imports(self) -> List[str]:
        """String import locations in declaration order."""
        return list(self._parsed.imports)

    def has_imports(self) -> bool:
        return len(self._parsed.imports) > 0

    def import_declarations(self) -> List[ImportDeclaration]:
        """All import declarations, string or not, in declaration order."""
        return self._parsed.program.import_declarations()

    def add_dependency(self, location: str, dependency: 'Contract') -> None:
        self._dependencies[location] = dependency

    def add_alias(self, location: str, target: Address) -> None:
        self._aliases[location] = target

    def resolved_target(self, location: str) -> Optional[Address]:
        """Address an import location resolves to, or None if unresolved."""
        if location in self._dependencies:
            return self._dependencies[location].target
        return self._aliases.get(location)

    def transpiled_code(self) -> str:
        """
        Source with every resolved import location replaced by the address
        literal it resolves to.

        Replacement is done at each import declaration's own position in
        the source, so text elsewhere that happens to equal a location is
        left untouched. Unresolved imports are kept as written.
        """
        pieces = []
        last = 0
        for declaration in self._parsed.string_import_declarations():
            target = self.resolved_target(declaration.location)
            if target is None:
                continue
            start, end = declaration.span
            pieces.append(self._code[last:start])
            pieces.append(target.literal())
            last = end
        pieces.append(self._code[last:])
        return ''.join(pieces)
