"""
Diagnostic/warning system for import resolution.

Collects non-fatal findings made while resolving imports: duplicated
imports, aliases shadowed by registered contracts, imports that are not
resolved by this package and aliases nobody uses.
"""

import sys
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List


class DiagnosticSeverity(Enum):
    """Severity levels for resolver diagnostics."""
    WARNING = 'warning'
    INFO = 'info'


@dataclass
class Diagnostic:
    """A single diagnostic message."""
    severity: DiagnosticSeverity
    code: str
    message: str
    file_path: str = ''
    construct: str = ''  # e.g., 'import', 'alias'

    def __str__(self) -> str:
        if self.file_path:
            return f'[{self.severity.value}] {self.file_path}: {self.message} ({self.code})'
        return f'[{self.severity.value}] {self.message} ({self.code})'


class ResolverDiagnostics:
    """
    Collects resolver warnings/diagnostics during import resolution.

    Usage:
        diag = ResolverDiagnostics()
        deployments = Deployments(loader, aliases, diagnostics=diag)
        # ... add contracts, sort ...
        diag.print_summary()
    """

    def __init__(self, verbose: bool = False):
        self._diagnostics: List[Diagnostic] = []
        self._verbose = verbose

    @property
    def diagnostics(self) -> List[Diagnostic]:
        """Get all collected diagnostics."""
        return list(self._diagnostics)

    @property
    def warnings(self) -> List[Diagnostic]:
        """Get only warning-level diagnostics."""
        return [d for d in self._diagnostics if d.severity == DiagnosticSeverity.WARNING]

    @property
    def count(self) -> int:
        return len(self._diagnostics)

    def clear(self) -> None:
        self._diagnostics.clear()

    # =========================================================================
    # SPECIFIC WARNING METHODS
    # =========================================================================

    def warn_duplicate_import(self, location: str, file_path: str = '') -> None:
        """Warn that a contract imports the same location more than once."""
        self._diagnostics.append(Diagnostic(
            severity=DiagnosticSeverity.WARNING,
            code='W001',
            message=f'"{location}" is imported more than once.',
            file_path=file_path,
            construct='import',
        ))

    def warn_alias_shadowed(self, location: str, file_path: str = '') -> None:
        """Warn that an alias is ignored because a registered contract has its location."""
        self._diagnostics.append(Diagnostic(
            severity=DiagnosticSeverity.WARNING,
            code='W002',
            message=f'Alias for "{location}" is shadowed by a contract in this deployment.',
            file_path=file_path,
            construct='alias',
        ))

    def info_import_skipped(self, location: str, kind: str, file_path: str = '') -> None:
        """Info that an address or identifier import is left as written."""
        self._diagnostics.append(Diagnostic(
            severity=DiagnosticSeverity.INFO,
            code='I001',
            message=f'{kind} import {location} is not resolved.',
            file_path=file_path,
            construct='import',
        ))

    def info_unused_alias(self, location: str) -> None:
        """Info that a configured alias is never imported."""
        self._diagnostics.append(Diagnostic(
            severity=DiagnosticSeverity.INFO,
            code='I002',
            message=f'Alias for "{location}" is not imported by any contract.',
            construct='alias',
        ))

    # =========================================================================
    # REPORTING
    # =========================================================================

    def print_summary(self, file=None) -> None:
        """Print a summary of all diagnostics to stderr (or specified file)."""
        if file is None:
            file = sys.stderr

        if not self._diagnostics:
            return

        warnings = self.warnings
        infos = [d for d in self._diagnostics if d.severity == DiagnosticSeverity.INFO]

        if warnings:
            print(f'\nResolver warnings ({len(warnings)}):', file=file)
            by_construct: Dict[str, List[Diagnostic]] = {}
            for w in warnings:
                by_construct.setdefault(w.construct or 'other', []).append(w)

            for construct, diags in sorted(by_construct.items()):
                print(f'  {construct}: {len(diags)} occurrence(s)', file=file)
                if self._verbose:
                    for d in diags:
                        print(f'    {d}', file=file)

        if infos and self._verbose:
            print(f'\nResolver info ({len(infos)}):', file=file)
            for d in infos:
                print(f'  {d}', file=file)

    def get_summary(self) -> str:
        """Get a summary string of all warnings."""
        warnings = self.warnings
        if not warnings:
            return 'No resolver warnings.'

        by_construct: Dict[str, int] = {}
        for w in warnings:
            key = w.construct or 'other'
            by_construct[key] = by_construct.get(key, 0) + 1

        parts = [f'{count} {construct}' for construct, count in sorted(by_construct.items())]
        return f'Resolver warnings: {", ".join(parts)}'
