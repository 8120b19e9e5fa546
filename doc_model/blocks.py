"""
doc_model/blocks.py — model bloków dokumentu.

Block odpowiada jednemu elementowi blokowemu komentarza (akapit, nagłówek,
element listy, blok kodu); Document to uporządkowana sekwencja bloków wraz
z domyślnym poziomem nagłówków.

Pole `key` jest nadawane rosnąco przez builder i wyznacza kolejność
dokumentu. Dla listy builder emituje blok na każdy element, a po nich jeden
blok zbiorczy (`aggregate=True`) z treścią całej listy.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from .text import InlineSpan, plain_text


class BlockKind(StrEnum):
    CODE      = "code"
    HEADER    = "header"
    LIST      = "list"
    PARAGRAPH = "paragraph"


@dataclass(frozen=True, slots=True)
class Block:
    key: int                          # klucz porządkowy (ściśle rosnący)
    kind: BlockKind
    text: tuple[InlineSpan, ...]
    aggregate: bool = False           # True tylko dla zbiorczego bloku listy

    def plain(self) -> str:
        return plain_text(self.text)


@dataclass(frozen=True, slots=True)
class Document:
    """
    Dokumentacja jednego komentarza w postaci strukturalnej.

    - level:  poziom, na którym renderer ma rysować nagłówki
    - blocks: bloki w kolejności dokumentu
    """
    level: int
    blocks: tuple[Block, ...]

    def __iter__(self):
        return iter(self.blocks)

    def __len__(self) -> int:
        return len(self.blocks)
