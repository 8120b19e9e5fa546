"""
doc_model — struktury danych modelu DocSpan.

Użycie:
  from doc_model import Document, Block, BlockKind, Plain, CrossRef, PackageSet, ...

Moduły:
  text     — TextKind, SymbolKind, Plain, Italic, Link, CrossRef, InlineSpan
  blocks   — BlockKind, Block, Document
  packages — ValueDecl, FuncDecl, TypeDecl, Package, PackageSet

Wszystkie typy są niemutowalne (frozen dataclasses) — Document i PackageSet
można bezpiecznie współdzielić między równoległymi renderami.
"""

from .text import (
    TextKind,
    SymbolKind,
    Plain,
    Italic,
    Link,
    CrossRef,
    InlineSpan,
    plain_text,
)
from .blocks import (
    BlockKind,
    Block,
    Document,
)
from .packages import (
    ValueDecl,
    FuncDecl,
    TypeDecl,
    Package,
    PackageSet,
)

__all__ = [
    # text
    "TextKind",
    "SymbolKind",
    "Plain",
    "Italic",
    "Link",
    "CrossRef",
    "InlineSpan",
    "plain_text",
    # blocks
    "BlockKind",
    "Block",
    "Document",
    # packages
    "ValueDecl",
    "FuncDecl",
    "TypeDecl",
    "Package",
    "PackageSet",
]
