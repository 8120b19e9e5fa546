"""
doc_builder/builder.py — budowa Document z drzewa komentarza.

Architektura:
  CommentDoc (z parsera) → build_document() → jedno przejście od góry do dołu
  → bloki: code | header | list (element + blok zbiorczy) | paragraph
  → inline: _convert_text() rekurencyjnie; DocLinkRun → xref.resolve()
  → Document(level, blocks)

Nieznane węzły (blokowe i inline) są pomijane — builder nie rzuca wyjątków
z powodu treści komentarza. Licznik kluczy porządkowych jest lokalny
dla wywołania, więc równoległe buildy różnych dokumentów są niezależne.

Kluczowe funkcje publiczne:
  build_document(tree, current, packages, config) -> Document
  new_document(text, current, packages, config)   -> Document
"""

from __future__ import annotations

import itertools
from typing import Iterable, Iterator

from comment_syntax.nodes import (
    CodeNode,
    CommentDoc,
    DocLinkRun,
    HeadingNode,
    ItalicRun,
    LinkRun,
    ListNode,
    ParagraphNode,
    PlainRun,
    TextRun,
)
from comment_syntax.parser import parser_for
from doc_model.blocks import Block, BlockKind, Document
from doc_model.packages import Package, PackageSet
from doc_model.text import CrossRef, InlineSpan, Italic, Link, Plain
from xref.resolver import resolve

from .config import Config

_PARAGRAPH_BREAK = "\n\n"


# ---------------------------------------------------------------------------
# Publiczne API
# ---------------------------------------------------------------------------

def new_document(
    text: str,
    current: Package,
    packages: PackageSet,
    config: Config | None = None,
) -> Document:
    """Parsuje surowy komentarz parserem bieżącego pakietu i buduje Document."""
    tree = parser_for(current, packages).parse(text)
    return build_document(tree, current, packages, config)


def build_document(
    tree: CommentDoc,
    current: Package,
    packages: Iterable[Package],
    config: Config | None = None,
) -> Document:
    cfg = config or Config()
    builder = _Builder(current, tuple(packages), cfg.module_root)
    return Document(level=cfg.level, blocks=tuple(builder.blocks(tree)))


# ---------------------------------------------------------------------------
# Wewnętrzna implementacja
# ---------------------------------------------------------------------------

class _Builder:
    __slots__ = ("current", "packages", "module_root", "_keys")

    def __init__(self, current: Package, packages: tuple[Package, ...], module_root: str) -> None:
        self.current = current
        self.packages = packages
        self.module_root = module_root
        self._keys = itertools.count()

    def _block(self, kind: BlockKind, text: list[InlineSpan], aggregate: bool = False) -> Block:
        return Block(key=next(self._keys), kind=kind, text=tuple(text), aggregate=aggregate)

    def blocks(self, tree: CommentDoc) -> Iterator[Block]:
        for node in tree.content:
            match node:
                case CodeNode(text=code):
                    yield self._block(BlockKind.CODE, [Plain(code)])
                case HeadingNode(text=runs):
                    yield self._block(BlockKind.HEADER, self._convert_text(runs))
                case ListNode():
                    yield from self._list_blocks(node)
                case ParagraphNode(text=runs):
                    yield self._block(BlockKind.PARAGRAPH, self._convert_text(runs))
                # inne rodzaje węzłów pomijamy

    def _list_blocks(self, node: ListNode) -> Iterator[Block]:
        # Blok zbiorczy: opcjonalny marker pustej linii + treść wszystkich elementów
        aggregate: list[InlineSpan] = []
        if node.blank_before():
            aggregate.append(Plain("\n"))

        for item in node.items:
            text: list[InlineSpan] = [Plain(item.number)]
            paras = [p for p in item.content if isinstance(p, ParagraphNode)]
            for i, para in enumerate(paras):
                if i:
                    # akapity elementu rozdziela pusta linia
                    text.append(Plain(_PARAGRAPH_BREAK))
                text.extend(self._convert_text(para.text))
            aggregate.extend(text)
            yield self._block(BlockKind.LIST, text)

        yield self._block(BlockKind.LIST, aggregate, aggregate=True)

    def _convert_text(self, runs: Iterable[TextRun]) -> list[InlineSpan]:
        spans: list[InlineSpan] = []
        for run in runs:
            match run:
                case PlainRun(text=text):
                    spans.append(Plain(text))
                case ItalicRun(text=text):
                    spans.append(Italic(text))
                case LinkRun(text=inner, url=url):
                    spans.append(Link(inner=tuple(self._convert_text(inner)), url=url))
                case DocLinkRun(text=inner):
                    res = resolve(run, self.current, self.packages, self.module_root)
                    spans.append(CrossRef(
                        inner=tuple(self._convert_text(inner)),
                        symbol=res.kind,
                        path=res.path,
                        anchor=res.anchor,
                    ))
        return spans
