"""
Registry of contracts to deploy.

Deployments loads contracts, resolves every import to either another
contract in the registry or a configured alias, and sorts the contracts
into deployment order.

Lifecycle:
    EMPTY -> POPULATED (add) -> RESOLVED (resolve_imports)
          -> SORTED (sort) | CYCLE_DETECTED (sort)
    UNRESOLVED (resolve_imports or sort)

A registry that reached UNRESOLVED or CYCLE_DETECTED cannot be used
again; build a fresh one for the next attempt.
"""

from enum import Enum
from typing import Any, Dict, List, Optional, Sequence, Set, Union

from ..parser import STRING_LOCATION
from .address import Address
from .contract import Contract
from .diagnostics import ResolverDiagnostics
from .errors import (
    CyclicImportError,
    DuplicateContractError,
    LoadError,
    RegistryStateError,
    UnresolvedImportError,
)
from .loader import Loader
from .sorting import sort_by_deployment_order


class DeploymentState(Enum):
    EMPTY = 'empty'
    POPULATED = 'populated'
    RESOLVED = 'resolved'
    SORTED = 'sorted'
    UNRESOLVED = 'unresolved'
    CYCLE_DETECTED = 'cycle_detected'


FAILED_STATES = (DeploymentState.UNRESOLVED, DeploymentState.CYCLE_DETECTED)


class Deployments:
    """
    An ordered collection of contracts to deploy.

    Not safe for concurrent use; operate one registry per thread.
    """

    def __init__(
        self,
        loader: Loader,
        aliases: Optional[Dict[str, str]] = None,
        diagnostics: Optional[ResolverDiagnostics] = None,
    ):
        """
        Args:
            loader: Provides the source for each added location
            aliases: Import location -> address of an already deployed contract

        Raises:
            InvalidAddressError: an alias address is not a valid address
        """
        self._loader = loader
        self._aliases: Dict[str, Address] = {
            location: Address.from_hex(address)
            for location, address in (aliases or {}).items()
        }
        self._diagnostics = diagnostics
        self._contracts: List[Contract] = []
        self._contracts_by_location: Dict[str, Contract] = {}
        self._state = DeploymentState.EMPTY

    @property
    def state(self) -> DeploymentState:
        return self._state

    @property
    def aliases(self) -> Dict[str, Address]:
        return dict(self._aliases)

    def contracts(self) -> List[Contract]:
        """Contracts in registration order, or deployment order once sorted."""
        return list(self._contracts)

    def get(self, location: str) -> Optional[Contract]:
        return self._contracts_by_location.get(location)

    def __len__(self) -> int:
        return len(self._contracts)

    def _check_usable(self, operation: str) -> None:
        if self._state in FAILED_STATES:
            raise RegistryStateError(
                f"cannot {operation}: deployments are in the {self._state.value} state"
            )

    def add(
        self,
        location: str,
        account_address: Union[Address, str],
        account_name: str = '',
        args: Optional[Sequence[Any]] = None,
    ) -> Contract:
        """
        Load the contract at `location` and append it to the registry.

        A failed add leaves the registry unchanged, so it can be retried.

        Raises:
            DuplicateContractError: `location` is already registered
            LoadError: the loader failed
            ParseError, MultipleDeclarationsError: the source is not a
                single deployable contract
        """
        self._check_usable('add a contract')
        if self._state not in (DeploymentState.EMPTY, DeploymentState.POPULATED):
            raise RegistryStateError(
                f"cannot add a contract: imports are already resolved ({self._state.value})"
            )
        if location in self._contracts_by_location:
            raise DuplicateContractError(location)

        code = self._load(location)

        contract = Contract(
            index=len(self._contracts),
            location=location,
            code=code,
            account_address=account_address,
            account_name=account_name,
            args=args,
        )

        self._contracts.append(contract)
        self._contracts_by_location[contract.location] = contract
        self._state = DeploymentState.POPULATED
        return contract

    def _load(self, location: str) -> str:
        try:
            source = self._loader.load(location)
        except LoadError:
            raise
        except Exception as e:
            raise LoadError(location, str(e)) from e

        if isinstance(source, bytes):
            try:
                return source.decode('utf-8')
            except UnicodeDecodeError as e:
                raise LoadError(location, f"source is not valid UTF-8: {e}") from e
        return source

    def resolve_imports(self) -> None:
        """
        Resolve every string import of every contract.

        Contracts are visited in registration order and imports in
        declaration order; the first import that matches neither a
        registered contract nor an alias is reported. A registered contract
        takes precedence over an alias with the same location. Running it
        again resolves every import to the same target.

        Raises:
            UnresolvedImportError: an import could not be resolved
        """
        self._check_usable('resolve imports')

        # Findings are reported by the first resolution only
        diagnostics = None
        if self._state in (DeploymentState.EMPTY, DeploymentState.POPULATED):
            diagnostics = self._diagnostics

        used_aliases: Set[str] = set()
        for contract in sorted(self._contracts, key=lambda c: c.index):
            self._resolve_contract(contract, used_aliases, diagnostics)

        if diagnostics is not None:
            for location in self._aliases:
                if location not in used_aliases:
                    diagnostics.info_unused_alias(location)

        if self._state in (DeploymentState.EMPTY, DeploymentState.POPULATED):
            self._state = DeploymentState.RESOLVED

    def _resolve_contract(
        self,
        contract: Contract,
        used_aliases: Set[str],
        diagnostics: Optional[ResolverDiagnostics],
    ) -> None:
        seen: Set[str] = set()
        for declaration in contract.import_declarations():
            if declaration.location_kind != STRING_LOCATION:
                if diagnostics is not None:
                    diagnostics.info_import_skipped(
                        declaration.location, declaration.location_kind, contract.location
                    )
                continue

            location = declaration.location
            if location in seen:
                if diagnostics is not None:
                    diagnostics.warn_duplicate_import(location, contract.location)
                continue
            seen.add(location)

            dependency = self._contracts_by_location.get(location)
            if dependency is not None:
                contract.add_dependency(location, dependency)
                if location in self._aliases and diagnostics is not None:
                    diagnostics.warn_alias_shadowed(location, contract.location)
            elif location in self._aliases:
                contract.add_alias(location, self._aliases[location])
                used_aliases.add(location)
            else:
                self._state = DeploymentState.UNRESOLVED
                raise UnresolvedImportError(contract.name, location)

    def sort(self) -> None:
        """
        Resolve imports and reorder the contracts into deployment order.

        Raises:
            UnresolvedImportError: an import could not be resolved
            CyclicImportError: contracts import each other in a cycle
        """
        self.resolve_imports()

        try:
            ordered = sort_by_deployment_order(self._contracts)
        except CyclicImportError:
            self._state = DeploymentState.CYCLE_DETECTED
            raise

        self._contracts = ordered
        self._state = DeploymentState.SORTED
