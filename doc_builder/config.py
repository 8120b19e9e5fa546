"""Konfiguracja buildera — przez zmienne środowiskowe i go.mod."""

from __future__ import annotations

import os
import pathlib
import re
from dataclasses import dataclass

_MODULE_LINE_RE = re.compile(r"^\s*module\s+\"?(?P<path>[^\s\"]+)\"?\s*$", re.MULTILINE)


@dataclass(frozen=True, slots=True)
class Config:
    level: int = 1               # domyślny poziom nagłówków w renderze
    module_root: str = ""        # prefiks usuwany ze ścieżek odsyłaczy
    work_dir: str = "."

    @classmethod
    def from_env(cls) -> "Config":
        work_dir    = os.getenv("DSPAN_WORKDIR", ".")
        module_root = os.getenv("DSPAN_MODULE_ROOT")
        if module_root is None:
            module_root = detect_module_root(work_dir)
        raw_level = os.getenv("DSPAN_LEVEL", "1")
        try:
            level = int(raw_level)
        except ValueError as e:
            raise ValueError(f"DSPAN_LEVEL musi być liczbą całkowitą, otrzymano: {raw_level!r}") from e
        return cls(
            level       = level,
            module_root = module_root,
            work_dir    = work_dir,
        )


def detect_module_root(work_dir: str | pathlib.Path) -> str:
    """
    Szuka go.mod w work_dir i katalogach nadrzędnych; zwraca "<moduł>/".

    Brak pliku lub dyrektywy module → "".
    """
    directory = pathlib.Path(work_dir).resolve()
    for candidate in (directory, *directory.parents):
        go_mod = candidate / "go.mod"
        if go_mod.is_file():
            m = _MODULE_LINE_RE.search(go_mod.read_text(encoding="utf-8"))
            return m["path"].rstrip("/") + "/" if m else ""
    return ""
