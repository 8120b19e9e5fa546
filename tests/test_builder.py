from __future__ import annotations

from dataclasses import dataclass

from comment_syntax.nodes import (
    CodeNode,
    CommentDoc,
    DocLinkRun,
    HeadingNode,
    ItalicRun,
    LinkRun,
    ListItem,
    ListNode,
    ParagraphNode,
    PlainRun,
)
from doc_builder import Config, build_document, new_document
from doc_model.blocks import BlockKind
from doc_model.text import CrossRef, Italic, Link, Plain, SymbolKind

from tests.conftest import MODULE_ROOT


@dataclass(frozen=True)
class _TableNode:
    """Rodzaj bloku, którego builder nie zna."""
    rows: int


@dataclass(frozen=True)
class _StrikeRun:
    text: str


def _para(*runs) -> ParagraphNode:
    return ParagraphNode(text=tuple(runs))


def _two_item_list(blank_before: bool = False) -> ListNode:
    return ListNode(
        items=(
            ListItem(number="1", content=(_para(PlainRun("first")),)),
            ListItem(number="2", content=(_para(PlainRun("second")),)),
        ),
        force_blank_before=blank_before,
    )


def test_blocks_follow_document_order(current, packages):
    tree = CommentDoc(content=(
        _para(PlainRun("intro")),
        HeadingNode(text=(PlainRun("Usage"),)),
        CodeNode(text="x := 1\n"),
        _two_item_list(),
        _para(PlainRun("outro")),
    ))
    doc = build_document(tree, current, packages)

    assert [b.kind for b in doc.blocks] == [
        BlockKind.PARAGRAPH,
        BlockKind.HEADER,
        BlockKind.CODE,
        BlockKind.LIST,
        BlockKind.LIST,
        BlockKind.LIST,
        BlockKind.PARAGRAPH,
    ]
    assert [b.key for b in doc.blocks] == list(range(7))
    assert [b.aggregate for b in doc.blocks] == [False, False, False, False, False, True, False]
    assert doc.blocks[0].plain() == "intro"
    assert doc.blocks[-1].plain() == "outro"


def test_code_block_is_verbatim(current, packages):
    code = "  x := 1\n\n\ty()\n"
    doc = build_document(CommentDoc(content=(CodeNode(text=code),)), current, packages)
    assert doc.blocks[0].text == (Plain(code),)


def test_list_items_and_aggregate(current, packages):
    doc = build_document(CommentDoc(content=(_two_item_list(),)), current, packages)
    first, second, aggregate = doc.blocks

    assert first.text == (Plain("1"), Plain("first"))
    assert second.text == (Plain("2"), Plain("second"))
    assert aggregate.aggregate
    assert aggregate.text == (Plain("1"), Plain("first"), Plain("2"), Plain("second"))


def test_aggregate_blank_line_marker_only_when_blank_before(current, packages):
    doc = build_document(CommentDoc(content=(_two_item_list(blank_before=True),)), current, packages)
    assert doc.blocks[-1].text[0] == Plain("\n")
    # bloki elementów nie dostają markera
    assert doc.blocks[0].text[0] == Plain("1")


def test_loose_list_gets_blank_line_marker(current, packages):
    node = ListNode(items=(
        ListItem(number="", content=(_para(PlainRun("a")), _para(PlainRun("b")))),
    ))
    doc = build_document(CommentDoc(content=(node,)), current, packages)
    assert doc.blocks[0].text == (Plain(""), Plain("a"), Plain("\n\n"), Plain("b"))
    assert doc.blocks[1].text == (Plain("\n"), Plain(""), Plain("a"), Plain("\n\n"), Plain("b"))


def test_unknown_nodes_are_skipped(current, packages):
    tree = CommentDoc(content=(
        _TableNode(rows=3),
        _para(PlainRun("kept"), _StrikeRun("dropped"), PlainRun("!")),
    ))
    doc = build_document(tree, current, packages)
    assert len(doc) == 1
    assert doc.blocks[0].key == 0
    assert doc.blocks[0].text == (Plain("kept"), Plain("!"))


def test_link_keeps_nested_italic(current, packages):
    tree = CommentDoc(content=(
        _para(LinkRun(text=(PlainRun("see "), ItalicRun("the docs")), url="https://go.dev/doc")),
    ))
    doc = build_document(tree, current, packages)
    assert doc.blocks[0].text == (
        Link(inner=(Plain("see "), Italic("the docs")), url="https://go.dev/doc"),
    )


def test_cross_reference_is_resolved(current, packages):
    tree = CommentDoc(content=(
        _para(
            PlainRun("Use "),
            DocLinkRun(
                text=(PlainRun("Name"),),
                import_path="example.com/mod/pkg",
                recv="Recv",
                name="Name",
            ),
        ),
    ))
    doc = build_document(tree, current, packages, Config(module_root=MODULE_ROOT))
    assert doc.blocks[0].text == (
        Plain("Use "),
        CrossRef(inner=(Plain("Name"),), symbol=SymbolKind.FUNC, path="pkg", anchor="func Recv Name"),
    )


def test_unresolved_cross_reference_keeps_display_text(current, packages):
    tree = CommentDoc(content=(
        HeadingNode(text=(DocLinkRun(text=(ItalicRun("Missing"),), name="Missing"),)),
    ))
    doc = build_document(tree, current, packages)
    (span,) = doc.blocks[0].text
    assert span == CrossRef(inner=(Italic("Missing"),), symbol=SymbolKind.NONE, path="", anchor="")
    assert not span.resolved


def test_rebuild_is_identical(current, packages):
    tree = CommentDoc(content=(
        _para(DocLinkRun(text=(PlainRun("T"),), name="T")),
        _two_item_list(blank_before=True),
        CodeNode(text="x\n"),
    ))
    assert build_document(tree, current, packages) == build_document(tree, current, packages)


def test_level_comes_from_config(current, packages):
    doc = build_document(CommentDoc(), current, packages, Config(level=3))
    assert doc.level == 3
    assert doc.blocks == ()


def test_new_document_parses_and_resolves(current, packages):
    text = "# Overview\n\nCall [New] or [pkg.Recv.Name].\n"
    doc = new_document(text, current, packages, Config(level=2, module_root=MODULE_ROOT))

    assert [b.kind for b in doc.blocks] == [BlockKind.HEADER, BlockKind.PARAGRAPH]
    assert doc.blocks[1].text == (
        Plain("Call "),
        CrossRef(inner=(Plain("New"),), symbol=SymbolKind.FUNC, path="", anchor="func New"),
        Plain(" or "),
        CrossRef(
            inner=(Plain("pkg.Recv.Name"),),
            symbol=SymbolKind.FUNC,
            path="pkg",
            anchor="func Recv Name",
        ),
        Plain("."),
    )
