"""
Contract deployment ordering.

This module resolves contract imports and orders contracts for deployment:
- source.py: extracts the declared name and imports from contract source
- contract.py: a single deployable contract and its transpiled code
- deployments.py: the registry that loads, resolves and sorts contracts
- sorting.py: topological ordering and import cycle detection
"""

from .address import Address
from .config import load_aliases
from .contract import Contract
from .deployments import Deployments, DeploymentState
from .diagnostics import Diagnostic, DiagnosticSeverity, ResolverDiagnostics
from .errors import (
    ConfigError,
    ContractError,
    CyclicImportError,
    DuplicateContractError,
    InvalidAddressError,
    LoadError,
    MultipleDeclarationsError,
    ParseError,
    RegistryStateError,
    UnresolvedImportError,
)
from .loader import FileLoader, Loader, MemoryLoader
from .sorting import sort_by_deployment_order
from .source import ParsedSource, parse_source

__all__ = [
    'Address',
    'load_aliases',
    'Contract',
    'Deployments',
    'DeploymentState',
    'Diagnostic',
    'DiagnosticSeverity',
    'ResolverDiagnostics',
    'ConfigError',
    'ContractError',
    'CyclicImportError',
    'DuplicateContractError',
    'InvalidAddressError',
    'LoadError',
    'MultipleDeclarationsError',
    'ParseError',
    'RegistryStateError',
    'UnresolvedImportError',
    'FileLoader',
    'Loader',
    'MemoryLoader',
    'sort_by_deployment_order',
    'ParsedSource',
    'parse_source',
]
