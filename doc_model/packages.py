"""
doc_model/packages.py — metadane pakietów (tablice symboli) tylko do odczytu.

Package zawiera ścieżkę importu i cztery tablice symboli:
  consts — ValueDecl (jedna deklaracja może mieć kilka nazw)
  vars   — ValueDecl
  funcs  — FuncDecl (nazwa + opcjonalny receiver)
  types  — TypeDecl

PackageSet to zbiór wszystkich znanych pakietów w danym przebiegu
generowania dokumentacji. Ładowany raz, potem współdzielony bez mutacji.

Format JSON (lista pakietów albo {"packages": [...]}):
  {"name": "pkg", "import_path": "example.com/mod/pkg",
   "consts": [{"names": ["A", "B"]}], "vars": ["V"],
   "funcs": [{"name": "New"}, {"name": "Name", "recv": "Recv"}],
   "types": ["Recv"]}
"""

from __future__ import annotations

import json
import pathlib
from dataclasses import dataclass, field
from typing import Any, Iterator

import requests


# ---------------------------------------------------------------------------
# Deklaracje
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ValueDecl:
    """Deklaracja stałych lub zmiennych (np. blok const z kilkoma nazwami)."""
    names: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class FuncDecl:
    name: str
    recv: str = ""        # "" dla zwykłej funkcji, nazwa typu dla metody


@dataclass(frozen=True, slots=True)
class TypeDecl:
    name: str


# ---------------------------------------------------------------------------
# Package
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Package:
    name: str
    import_path: str
    consts: tuple[ValueDecl, ...] = ()
    vars:   tuple[ValueDecl, ...] = ()
    funcs:  tuple[FuncDecl, ...]  = ()
    types:  tuple[TypeDecl, ...]  = ()

    def lookup_sym(self, recv: str, name: str) -> bool:
        """
        Czy pakiet deklaruje symbol (recv, name)?

        Bez receivera: stała, zmienna, funkcja bez receivera lub typ.
        Z receiverem: tylko metoda recv.name.
        """
        if not name:
            return False
        if recv:
            return any(f.recv == recv and f.name == name for f in self.funcs)
        return (
            any(name in d.names for d in self.consts)
            or any(name in d.names for d in self.vars)
            or any(not f.recv and f.name == name for f in self.funcs)
            or any(t.name == name for t in self.types)
        )

    # ------------------------------------------------------------------
    # Konstruktory fabryczne
    # ------------------------------------------------------------------

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Package":
        """Buduje pakiet ze słownika (format JSON opisany w nagłówku modułu)."""
        if not isinstance(data, dict):
            raise ValueError(f"Oczekiwano obiektu pakietu, otrzymano: {type(data).__name__}")
        import_path = data.get("import_path")
        if not import_path or not isinstance(import_path, str):
            raise ValueError(f"Pakiet bez pola 'import_path': {data!r}")
        name = data.get("name") or import_path.rstrip("/").rsplit("/", 1)[-1]

        return cls(
            name=name,
            import_path=import_path,
            consts=tuple(_value_decl(d) for d in _table(data, "consts")),
            vars=tuple(_value_decl(d) for d in _table(data, "vars")),
            funcs=tuple(_func_decl(d) for d in _table(data, "funcs")),
            types=tuple(_type_decl(d) for d in _table(data, "types")),
        )


def _table(data: dict[str, Any], key: str) -> list[Any]:
    """Tablica symboli; brak klucza lub null (pusty slice z Go) → []."""
    raw = data.get(key)
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise ValueError(f"Pole '{key}' musi być listą, otrzymano: {type(raw).__name__}")
    return raw


def _value_decl(raw: Any) -> ValueDecl:
    if isinstance(raw, str):
        return ValueDecl(names=(raw,))
    if isinstance(raw, dict) and isinstance(raw.get("names"), list):
        return ValueDecl(names=tuple(str(n) for n in raw["names"]))
    raise ValueError(f"Nieprawidłowa deklaracja const/var: {raw!r}")


def _func_decl(raw: Any) -> FuncDecl:
    if isinstance(raw, str):
        return FuncDecl(name=raw)
    if isinstance(raw, dict) and raw.get("name"):
        return FuncDecl(name=str(raw["name"]), recv=str(raw.get("recv") or ""))
    raise ValueError(f"Nieprawidłowa deklaracja funkcji: {raw!r}")


def _type_decl(raw: Any) -> TypeDecl:
    if isinstance(raw, str):
        return TypeDecl(name=raw)
    if isinstance(raw, dict) and raw.get("name"):
        return TypeDecl(name=str(raw["name"]))
    raise ValueError(f"Nieprawidłowa deklaracja typu: {raw!r}")


# ---------------------------------------------------------------------------
# PackageSet
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class PackageSet:
    """Uporządkowany zbiór znanych pakietów (kolejność = kolejność wczytania)."""
    packages: tuple[Package, ...] = field(default_factory=tuple)

    def __iter__(self) -> Iterator[Package]:
        return iter(self.packages)

    def __len__(self) -> int:
        return len(self.packages)

    def by_import_path(self, import_path: str) -> Package | None:
        """Pierwszy pakiet o danej ścieżce importu."""
        return next((p for p in self.packages if p.import_path == import_path), None)

    def lookup_package(self, name: str) -> str | None:
        """Ścieżka importu pierwszego pakietu o krótkiej nazwie `name`."""
        pkg = next((p for p in self.packages if p.name == name), None)
        return pkg.import_path if pkg else None

    # ------------------------------------------------------------------
    # Konstruktory fabryczne
    # ------------------------------------------------------------------

    @classmethod
    def from_dict(cls, data: Any) -> "PackageSet":
        """Przyjmuje listę pakietów albo obiekt z kluczem 'packages'."""
        if isinstance(data, dict):
            data = data.get("packages")
        if not isinstance(data, list):
            raise ValueError("Metadane pakietów: oczekiwano listy lub {'packages': [...]}")
        return cls(packages=tuple(Package.from_dict(p) for p in data))

    @classmethod
    def from_file(cls, path: str | pathlib.Path) -> "PackageSet":
        """Ładuje metadane z pliku JSON."""
        path = pathlib.Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Brak pliku metadanych: {path}")
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise ValueError(f"Nieprawidłowy JSON w {path}: {e}") from e
        return cls.from_dict(data)

    @classmethod
    def from_url(cls, url: str, timeout: float = 30) -> "PackageSet":
        """Pobiera metadane JSON przez HTTP(S)."""
        resp = requests.get(url, timeout=timeout, headers={"Accept": "application/json"})
        resp.raise_for_status()
        try:
            data = resp.json()
        except ValueError as e:
            raise ValueError(f"Odpowiedź spod {url} nie jest poprawnym JSON: {e}") from e
        return cls.from_dict(data)

    @classmethod
    def load(cls, source: str) -> "PackageSet":
        """Ścieżka pliku albo URL http(s)."""
        if source.startswith(("http://", "https://")):
            return cls.from_url(source)
        return cls.from_file(source)
