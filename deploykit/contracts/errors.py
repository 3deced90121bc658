"""
Error types raised while loading, resolving and ordering contracts.

Every error carries the structured values it reports as attributes so
callers can render them without parsing the message.
"""

from typing import List, TYPE_CHECKING

if TYPE_CHECKING:
    from .contract import Contract


class ContractError(Exception):
    """Base class for all contract resolution errors."""


class ParseError(ContractError):
    """The contract source could not be parsed."""

    def __init__(self, location: str, reason: str):
        super().__init__(f"failed to parse {location or '<source>'}: {reason}")
        self.location = location
        self.reason = reason


class MultipleDeclarationsError(ContractError):
    """The source does not declare exactly one contract or contract interface."""

    def __init__(self, location: str, count: int):
        super().__init__(
            f"the code must declare exactly one contract or contract interface "
            f"({location or '<source>'} declares {count})"
        )
        self.location = location
        self.count = count


class LoadError(ContractError):
    """The loader failed to provide source for a location."""

    def __init__(self, location: str, reason: str = ''):
        message = f"failed to load contract from {location}"
        if reason:
            message += f": {reason}"
        super().__init__(message)
        self.location = location
        self.reason = reason


class DuplicateContractError(ContractError):
    """A contract with the same location is already registered."""

    def __init__(self, location: str):
        super().__init__(f"contract at {location} is already added to deployments")
        self.location = location


class UnresolvedImportError(ContractError):
    """An import matches neither a registered contract nor an alias."""

    def __init__(self, contract_name: str, import_location: str):
        super().__init__(
            f"import from {contract_name} could not be found: {import_location}, "
            f"make sure import path is correct"
        )
        self.contract_name = contract_name
        self.import_location = import_location


class CyclicImportError(ContractError):
    """
    Contracts import each other in one or more cycles, so no deployment
    order exists.

    `cycles` holds, for each cycle, the contracts taking part in it.
    """

    def __init__(self, cycles: List[List['Contract']]):
        self.cycles = cycles
        super().__init__(self._message())

    def contract_names(self) -> List[List[str]]:
        return [[contract.name for contract in cycle] for cycle in self.cycles]

    def _message(self) -> str:
        groups = ' '.join(f"[{' '.join(names)}]" for names in self.contract_names())
        return f"contracts: import cycle(s) detected: [{groups}]"


class InvalidAddressError(ContractError, ValueError):
    """A value could not be read as an account address."""

    def __init__(self, value: str, reason: str):
        super().__init__(f"invalid address {value!r}: {reason}")
        self.value = value


class ConfigError(ContractError):
    """The alias configuration file is malformed."""


class RegistryStateError(ContractError):
    """An operation is not allowed in the registry's current state."""
