"""
xref — rozwiązywanie odsyłaczy dokumentacyjnych do symboli pakietów.

Publiczne API:
  resolve(link, current, packages, module_root)  → Resolution
  resolve_kind(link, current, packages)          → SymbolKind
  identifier_kind(recv, name, pkg)               → SymbolKind
  canonical_path / canonical_anchor              składanie path i anchor
  Resolution, UNRESOLVED                         typy wyniku
"""

from .resolver import (
    Resolution,
    UNRESOLVED,
    identifier_kind,
    resolve_kind,
    canonical_path,
    canonical_anchor,
    resolve,
)

__all__ = [
    "Resolution",
    "UNRESOLVED",
    "identifier_kind",
    "resolve_kind",
    "canonical_path",
    "canonical_anchor",
    "resolve",
]
