"""
comment_syntax/nodes.py — drzewo węzłów komentarza dokumentacyjnego.

To jest wejście buildera: parser (lub dowolne inne źródło) zwraca skończone,
acykliczne drzewo bloków (CodeNode, HeadingNode, ListNode, ParagraphNode)
z przebiegami inline (PlainRun, ItalicRun, LinkRun, DocLinkRun).
"""

from __future__ import annotations

from dataclasses import dataclass, field


# ---------------------------------------------------------------------------
# Inline
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class PlainRun:
    text: str


@dataclass(frozen=True, slots=True)
class ItalicRun:
    text: str


@dataclass(frozen=True, slots=True)
class LinkRun:
    text: tuple[TextRun, ...]
    url: str


@dataclass(frozen=True, slots=True)
class DocLinkRun:
    """
    Odsyłacz dokumentacyjny [pkg.Recv.Name].

    - import_path: "" gdy odsyłacz dotyczy bieżącego pakietu
    - recv:        typ receivera dla metod, inaczej ""
    - name:        nazwa symbolu ("" dla odsyłacza do samego pakietu)
    """
    text: tuple[TextRun, ...]
    import_path: str = ""
    recv: str = ""
    name: str = ""


TextRun = PlainRun | ItalicRun | LinkRun | DocLinkRun


# ---------------------------------------------------------------------------
# Bloki
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class CodeNode:
    text: str             # dosłowny kod, łącznie z końcowym \n


@dataclass(frozen=True, slots=True)
class HeadingNode:
    text: tuple[TextRun, ...]


@dataclass(frozen=True, slots=True)
class ParagraphNode:
    text: tuple[TextRun, ...]


@dataclass(frozen=True, slots=True)
class ListItem:
    number: str                               # "" dla punktorów, np. "2" dla list numerowanych
    content: tuple[ParagraphNode, ...]


@dataclass(frozen=True, slots=True)
class ListNode:
    items: tuple[ListItem, ...]
    force_blank_before: bool = False          # w źródle lista poprzedzona pustą linią
    force_blank_between: bool = False         # w źródle puste linie między elementami

    def blank_between(self) -> bool:
        if self.force_blank_between:
            return True
        return any(len(item.content) > 1 for item in self.items)

    def blank_before(self) -> bool:
        """Czy przy przeformatowaniu lista ma być poprzedzona pustą linią."""
        return self.force_blank_before or self.blank_between()


BlockNode = CodeNode | HeadingNode | ListNode | ParagraphNode


@dataclass(frozen=True, slots=True)
class LinkDef:
    """Definicja linku: linia `[Text]: URL`."""
    text: str
    url: str


@dataclass(frozen=True, slots=True)
class CommentDoc:
    content: tuple[BlockNode, ...] = ()
    links: tuple[LinkDef, ...] = field(default_factory=tuple)
