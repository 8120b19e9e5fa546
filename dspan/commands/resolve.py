"""Komenda: dspan resolve — rozwiązuje pojedynczy odsyłacz dokumentacyjny."""

from __future__ import annotations

import argparse

from rich.console import Console
from rich.markup import escape

from comment_syntax.parser import parser_for
from dspan._context import (
    add_common_arguments,
    build_config,
    current_package,
    load_packages,
)
from xref.resolver import resolve

console = Console()


def run(args: argparse.Namespace) -> None:
    packages = load_packages(args.packages)
    current  = current_package(packages, args.package)
    cfg      = build_config(args)

    text = args.link.strip()
    if text.startswith("[") and text.endswith("]"):
        text = text[1:-1]

    link = parser_for(current, packages).doc_link(text)
    if link is None:
        console.print(f"[red]To nie jest odsyłacz dokumentacyjny:[/red] {escape(args.link)}")
        raise SystemExit(1)

    res = resolve(link, current, packages, cfg.module_root)

    console.print(f"Odsyłacz: [bold cyan]{text}[/bold cyan]", highlight=False)
    console.print(f"  import_path = {link.import_path or '(bieżący pakiet)'}", highlight=False)
    console.print(f"  recv        = {link.recv or '-'}", highlight=False)
    console.print(f"  name        = {link.name or '-'}", highlight=False)
    if not res.resolved:
        console.print("  [yellow]NIEROZWIĄZANY[/yellow] — symbol nie występuje w żadnym pakiecie")
        return
    console.print(f"  kind        = [green]{res.kind}[/green]", highlight=False)
    console.print(f"  path        = {res.path or '(bieżący pakiet)'}", highlight=False)
    console.print(f"  anchor      = {res.anchor}", highlight=False)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "resolve",
        help="Rozwiązuje odsyłacz [pkg.Recv.Name] do kind / path / anchor.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Rozwiązuje odsyłacz dokumentacyjny względem metadanych pakietów.

Przykłady:
  dspan resolve T --packages packages.json
  dspan resolve "[pkg.Recv.Name]" --packages packages.json --module-root example.com/mod/
        """,
    )
    p.add_argument(
        "link",
        metavar="ODSYŁACZ",
        help="Odsyłacz w składni komentarza, z nawiasami lub bez.",
    )
    add_common_arguments(p)
    p.set_defaults(func=run)
