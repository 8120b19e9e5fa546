from __future__ import annotations

import pytest

from comment_syntax import (
    CodeNode,
    DocLinkRun,
    HeadingNode,
    LinkDef,
    LinkRun,
    ListItem,
    ListNode,
    ParagraphNode,
    Parser,
    PlainRun,
    parser_for,
)

COMMENT = """\
Package doc renders comments.

# Usage

Call [New] to get a [Renderer], then [Renderer.Render] or [pkg.Open].

\tr := New()
\tr.Render()

Steps:

  - parse the comment
  - resolve [T]

See https://go.dev/doc/comment for details and [the spec].

[the spec]: https://go.dev/ref/spec
"""


@pytest.fixture
def parser(current, packages) -> Parser:
    return parser_for(current, packages)


def _doc(text: str) -> DocLinkRun:
    return DocLinkRun(text=(PlainRun(text),))


def test_full_comment(parser):
    doc = parser.parse(COMMENT)
    content = doc.content

    assert len(content) == 7
    assert content[0] == ParagraphNode(text=(PlainRun("Package doc renders comments."),))
    assert content[1] == HeadingNode(text=(PlainRun("Usage"),))
    assert content[2] == ParagraphNode(text=(
        PlainRun("Call "),
        DocLinkRun(text=(PlainRun("New"),), name="New"),
        PlainRun(" to get a "),
        DocLinkRun(text=(PlainRun("Renderer"),), name="Renderer"),
        PlainRun(", then "),
        DocLinkRun(text=(PlainRun("Renderer.Render"),), recv="Renderer", name="Render"),
        PlainRun(" or "),
        DocLinkRun(text=(PlainRun("pkg.Open"),), import_path="example.com/mod/pkg", name="Open"),
        PlainRun("."),
    ))
    assert content[3] == CodeNode(text="r := New()\nr.Render()\n")
    assert content[4] == ParagraphNode(text=(PlainRun("Steps:"),))
    assert content[5] == ListNode(
        items=(
            ListItem(number="", content=(ParagraphNode(text=(PlainRun("parse the comment"),)),)),
            ListItem(number="", content=(ParagraphNode(text=(
                PlainRun("resolve "),
                DocLinkRun(text=(PlainRun("T"),), name="T"),
            )),)),
        ),
        force_blank_before=True,
        force_blank_between=False,
    )
    assert content[6] == ParagraphNode(text=(
        PlainRun("See "),
        LinkRun(text=(PlainRun("https://go.dev/doc/comment"),), url="https://go.dev/doc/comment"),
        PlainRun(" for details and "),
        LinkRun(text=(PlainRun("the spec"),), url="https://go.dev/ref/spec"),
        PlainRun("."),
    ))
    assert doc.links == (LinkDef(text="the spec", url="https://go.dev/ref/spec"),)


def test_old_style_heading(parser):
    doc = parser.parse("Intro paragraph.\n\nOverview\n\nBody text.\n")
    assert [type(n) for n in doc.content] == [ParagraphNode, HeadingNode, ParagraphNode]
    assert doc.content[1] == HeadingNode(text=(PlainRun("Overview"),))


def test_old_style_heading_after_code_block(parser):
    doc = parser.parse("Example:\n\n\tx := 1\n\nDetails\n\nBody text.\n")
    assert [type(n) for n in doc.content] == [ParagraphNode, CodeNode, HeadingNode, ParagraphNode]
    assert doc.content[2] == HeadingNode(text=(PlainRun("Details"),))


@pytest.mark.parametrize(
    "text",
    [
        "Intro paragraph.\n\nOverview\n",             # ostatni akapit
        "Overview\n\nBody text.\n",                   # pierwszy akapit
        "Intro.\n\nNot a heading.\n\nBody.\n",        # kropka
        "Intro.\n\nNote: this\n\nBody.\n",            # dwukropek
        "Intro.\n\nlowercase start\n\nBody.\n",
    ],
)
def test_not_an_old_style_heading(parser, text):
    doc = parser.parse(text)
    assert all(isinstance(n, ParagraphNode) for n in doc.content)


def test_common_indent_is_removed(parser):
    doc = parser.parse("  Text here.\n\n      code\n        more\n")
    assert doc.content == (
        ParagraphNode(text=(PlainRun("Text here."),)),
        CodeNode(text="code\n  more\n"),
    )


def test_code_keeps_inner_blank_lines(parser):
    doc = parser.parse("Example:\n\n\tx := 1\n\n\ty := 2\n\nDone.\n")
    assert doc.content[1] == CodeNode(text="x := 1\n\ny := 2\n")
    assert doc.content[2] == ParagraphNode(text=(PlainRun("Done."),))


def test_numbered_list(parser):
    doc = parser.parse("Items:\n\n 1. one\n 2) two\n")
    (_, lst) = doc.content
    assert [item.number for item in lst.items] == ["1", "2"]
    assert lst.force_blank_before
    assert lst.blank_before()


def test_list_with_blank_lines_between_items(parser):
    doc = parser.parse("Items:\n - a\n\n - b\n")
    lst = doc.content[1]
    assert isinstance(lst, ListNode)
    assert not lst.force_blank_before
    assert lst.force_blank_between
    assert lst.blank_before()


def test_list_item_continuation_and_paragraphs(parser):
    doc = parser.parse("Items:\n\n - a\n   cont\n\n   more\n - b\n")
    lst = doc.content[1]
    first, second = lst.items
    assert first.content == (
        ParagraphNode(text=(PlainRun("a\ncont"),)),
        ParagraphNode(text=(PlainRun("more"),)),
    )
    assert second.content == (ParagraphNode(text=(PlainRun("b"),)),)
    assert lst.blank_between()


def test_unknown_brackets_stay_literal(parser):
    doc = parser.parse("a [b c] d [Unknown] e\n")
    assert doc.content == (ParagraphNode(text=(PlainRun("a [b c] d [Unknown] e"),)),)


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("T", DocLinkRun(text=(PlainRun("T"),), name="T")),
        ("*Renderer", DocLinkRun(text=(PlainRun("*Renderer"),), name="Renderer")),
        ("MaxLevel", DocLinkRun(text=(PlainRun("MaxLevel"),), name="MaxLevel")),
        ("pkg", DocLinkRun(text=(PlainRun("pkg"),), import_path="example.com/mod/pkg")),
        (
            "pkg.Recv.Name",
            DocLinkRun(text=(PlainRun("pkg.Recv.Name"),), import_path="example.com/mod/pkg",
                       recv="Recv", name="Name"),
        ),
        (
            "example.com/mod/pkg.Recv.Name",
            DocLinkRun(text=(PlainRun("example.com/mod/pkg.Recv.Name"),),
                       import_path="example.com/mod/pkg", recv="Recv", name="Name"),
        ),
        (
            "example.com/other/x.Thing",
            DocLinkRun(text=(PlainRun("example.com/other/x.Thing"),),
                       import_path="example.com/other/x", name="Thing"),
        ),
        (
            "example.com/mod/pkg",
            DocLinkRun(text=(PlainRun("example.com/mod/pkg"),), import_path="example.com/mod/pkg"),
        ),
    ],
)
def test_doc_link_syntax(parser, text, expected):
    assert parser.doc_link(text) == expected


@pytest.mark.parametrize("text", ["Unknown", "not a link", "a.b.c.d", "nopkg.Name", "1abc"])
def test_not_a_doc_link(parser, text):
    assert parser.doc_link(text) is None


def test_parser_without_lookups_only_links_paths():
    parser = Parser()
    doc = parser.parse("See [T] and [example.com/x.Y].\n")
    assert doc.content == (ParagraphNode(text=(
        PlainRun("See [T] and "),
        DocLinkRun(text=(PlainRun("example.com/x.Y"),), import_path="example.com/x", name="Y"),
        PlainRun("."),
    )),)


def test_empty_comment():
    assert Parser().parse("\n  \n").content == ()
