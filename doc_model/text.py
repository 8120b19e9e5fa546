"""
doc_model/text.py — model spanów inline (tekst wewnątrz bloku).

InlineSpan to suma czterech wariantów:
  Plain    — zwykły tekst
  Italic   — tekst pochylony
  Link     — zewnętrzny hiperlink (url) z zagnieżdżonym tekstem
  CrossRef — odsyłacz do symbolu (kind, path, anchor) z zagnieżdżonym tekstem

Zagnieżdżone sekwencje są krotkami, więc całe drzewo spanów jest niemutowalne
i może być współdzielone między wątkami renderera.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import ClassVar, Iterable


# ---------------------------------------------------------------------------
# Rodzaje
# ---------------------------------------------------------------------------

class TextKind(StrEnum):
    """Rodzaj spanu inline — po nim renderer wybiera formatowanie."""
    PLAIN    = "plain"
    ITALIC   = "italic"
    LINK     = "link"
    DOC_LINK = "docLink"


class SymbolKind(StrEnum):
    """Rodzaj symbolu wskazywanego przez odsyłacz; NONE = nierozwiązany."""
    NONE  = ""
    CONST = "const"
    VAR   = "var"
    FUNC  = "func"
    TYPE  = "type"


# ---------------------------------------------------------------------------
# Warianty spanu
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Plain:
    text: str
    kind: ClassVar[TextKind] = TextKind.PLAIN


@dataclass(frozen=True, slots=True)
class Italic:
    text: str
    kind: ClassVar[TextKind] = TextKind.ITALIC


@dataclass(frozen=True, slots=True)
class Link:
    """Hiperlink zewnętrzny; url przechodzi dosłownie, bez rozwiązywania."""
    inner: tuple[InlineSpan, ...]
    url: str
    kind: ClassVar[TextKind] = TextKind.LINK


@dataclass(frozen=True, slots=True)
class CrossRef:
    """
    Odsyłacz do udokumentowanego symbolu.

    - inner:  widoczny tekst (sam może zawierać formatowanie)
    - symbol: rodzaj symbolu (SymbolKind.NONE gdy nierozwiązany)
    - path:   ścieżka importu bez prefiksu modułu; "" dla bieżącego pakietu
    - anchor: "kind [recv] name" — nieprzezroczysty token dla renderera
    """
    inner: tuple[InlineSpan, ...]
    symbol: SymbolKind
    path: str
    anchor: str
    kind: ClassVar[TextKind] = TextKind.DOC_LINK

    @property
    def resolved(self) -> bool:
        return self.symbol is not SymbolKind.NONE


InlineSpan = Plain | Italic | Link | CrossRef


# ---------------------------------------------------------------------------
# Pomocnicze
# ---------------------------------------------------------------------------

def plain_text(spans: Iterable[InlineSpan]) -> str:
    """Spłaszcza spany do widocznego tekstu (bez url/anchorów)."""
    parts: list[str] = []
    for span in spans:
        match span:
            case Plain(text=text) | Italic(text=text):
                parts.append(text)
            case Link(inner=inner) | CrossRef(inner=inner):
                parts.append(plain_text(inner))
    return "".join(parts)
