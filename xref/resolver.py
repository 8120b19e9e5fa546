"""
xref/resolver.py — rozwiązywanie odsyłaczy dokumentacyjnych.

Dla odsyłacza {import_path, recv, name} ustala rodzaj symbolu oraz parę
(path, anchor) używaną przez renderer do zbudowania hiperlinku.

Logika:
  1. import_path == ""  → szukamy tylko w bieżącym pakiecie
  2. inaczej            → pierwszy pakiet o tej ścieżce importu, który
                          faktycznie ma symbol (recv, name); sama zgodność
                          ścieżki nie wystarcza (nieaktualne metadane)
  3. w pakiecie kolejność: const → var → func → type, pierwsze trafienie wygrywa
  4. path   = ścieżka importu bez pierwszego wystąpienia prefiksu modułu,
              "" dla odsyłaczy do bieżącego pakietu
  5. anchor = "kind [recv] name" (puste pola pomijane)

Nierozwiązany odsyłacz nie jest błędem: Resolution(NONE, "", "").
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from comment_syntax.nodes import DocLinkRun
from doc_model.packages import Package
from doc_model.text import SymbolKind


@dataclass(frozen=True, slots=True)
class Resolution:
    kind: SymbolKind
    path: str
    anchor: str

    @property
    def resolved(self) -> bool:
        return self.kind is not SymbolKind.NONE


UNRESOLVED = Resolution(kind=SymbolKind.NONE, path="", anchor="")


# ---------------------------------------------------------------------------
# Rodzaj symbolu
# ---------------------------------------------------------------------------

def identifier_kind(recv: str, name: str, pkg: Package) -> SymbolKind:
    """Rodzaj symbolu (recv, name) w pakiecie; SymbolKind.NONE gdy brak."""
    for decl in pkg.consts:
        if name in decl.names:
            return SymbolKind.CONST
    for decl in pkg.vars:
        if name in decl.names:
            return SymbolKind.VAR
    for fn in pkg.funcs:
        if fn.recv == recv and fn.name == name:
            return SymbolKind.FUNC
    for typ in pkg.types:
        if typ.name == name:
            return SymbolKind.TYPE
    return SymbolKind.NONE


def resolve_kind(link: DocLinkRun, current: Package, packages: Iterable[Package]) -> SymbolKind:
    if not link.import_path:
        # Brak ścieżki importu: odsyłacz do bieżącego pakietu
        return identifier_kind(link.recv, link.name, current)
    for pkg in packages:
        if pkg.import_path == link.import_path and pkg.lookup_sym(link.recv, link.name):
            return identifier_kind(link.recv, link.name, pkg)
    return SymbolKind.NONE


# ---------------------------------------------------------------------------
# path / anchor
# ---------------------------------------------------------------------------

def canonical_path(import_path: str, module_root: str) -> str:
    if not import_path:
        return ""
    if not module_root:
        return import_path
    return import_path.replace(module_root, "", 1)


def canonical_anchor(kind: SymbolKind, recv: str, name: str) -> str:
    return " ".join(part for part in (str(kind), recv, name) if part)


def resolve(
    link: DocLinkRun,
    current: Package,
    packages: Iterable[Package],
    module_root: str = "",
) -> Resolution:
    """Rozwiązuje odsyłacz; nigdy nie rzuca wyjątku dla nieznanych symboli."""
    kind = resolve_kind(link, current, packages)
    if kind is SymbolKind.NONE:
        return UNRESOLVED
    return Resolution(
        kind=kind,
        path=canonical_path(link.import_path, module_root),
        anchor=canonical_anchor(kind, link.recv, link.name),
    )
