"""Wspólny kontekst komend: metadane pakietów, bieżący pakiet, konfiguracja."""

from __future__ import annotations

import argparse
import dataclasses

import requests
from rich.console import Console
from rich.markup import escape

from doc_builder.config import Config
from doc_model.packages import Package, PackageSet

console = Console(stderr=True)


def load_packages(source: str) -> PackageSet:
    try:
        packages = PackageSet.load(source)
    except FileNotFoundError as e:
        console.print(f"[red]{e}[/red]")
        raise SystemExit(1)
    except ValueError as e:
        console.print(f"[red]Błąd metadanych pakietów:[/red] {e}")
        raise SystemExit(1)
    except requests.RequestException as e:
        console.print(f"[red]Błąd pobierania metadanych:[/red] {e}")
        raise SystemExit(1)

    if not packages:
        console.print("[red]Metadane nie zawierają żadnego pakietu.[/red]")
        raise SystemExit(1)
    return packages


def current_package(packages: PackageSet, import_path: str | None) -> Package:
    """Pakiet, do którego należy komentarz (domyślnie: pierwszy z metadanych)."""
    if import_path is None:
        return packages.packages[0]
    pkg = packages.by_import_path(import_path)
    if pkg is None:
        console.print(f"[red]Nieznany pakiet:[/red] {import_path}")
        raise SystemExit(1)
    return pkg


def build_config(args: argparse.Namespace) -> Config:
    """Config.from_env() nadpisany opcjami z linii komend."""
    try:
        cfg = Config.from_env()
    except ValueError as e:
        console.print(f"[red]Błąd konfiguracji:[/red] {escape(str(e))}")
        raise SystemExit(1)
    if args.level is not None:
        cfg = dataclasses.replace(cfg, level=args.level)
    if args.module_root is not None:
        cfg = dataclasses.replace(cfg, module_root=args.module_root)
    return cfg


def add_common_arguments(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "--packages",
        metavar="ŹRÓDŁO",
        required=True,
        help="Plik JSON z metadanymi pakietów albo URL http(s).",
    )
    p.add_argument(
        "--package",
        metavar="IMPORT_PATH",
        default=None,
        help="Ścieżka importu bieżącego pakietu (domyślnie: pierwszy pakiet).",
    )
    p.add_argument(
        "--module-root",
        metavar="PREFIKS",
        default=None,
        help="Prefiks usuwany ze ścieżek odsyłaczy (domyślnie: DSPAN_MODULE_ROOT lub go.mod).",
    )
    p.add_argument(
        "--level",
        type=int,
        default=None,
        help="Poziom nagłówków (domyślnie: DSPAN_LEVEL lub 1).",
    )
