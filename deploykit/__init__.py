"""
Cadence contract deployment planner

Resolves the imports between a set of Cadence contracts, orders them so
every contract is deployed after the contracts it imports, and rewrites
import locations into the addresses they are deployed to.

Module Structure:
- lexer/: Tokenization (TokenType, Token, Lexer)
- parser/: Top-level AST nodes and parsing (Parser, Program, ImportDeclaration)
- contracts/: Contracts, the Deployments registry, ordering and errors

Usage:
    from deploykit import Deployments, FileLoader

    deployments = Deployments(FileLoader('cadence/'), aliases={'./FungibleToken.cdc': '0xee82856bf20e2aa6'})
    deployments.add('./Token.cdc', '0x01', 'emulator-account')
    deployments.add('./Market.cdc', '0x01', 'emulator-account')
    deployments.sort()
    for contract in deployments.contracts():
        print(contract.name, contract.transpiled_code())
"""

from .contracts import (
    Address,
    Contract,
    Deployments,
    FileLoader,
    MemoryLoader,
    ContractError,
    CyclicImportError,
    UnresolvedImportError,
)

__all__ = [
    'Address',
    'Contract',
    'Deployments',
    'FileLoader',
    'MemoryLoader',
    'ContractError',
    'CyclicImportError',
    'UnresolvedImportError',
]
