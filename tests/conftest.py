from __future__ import annotations

import json

import pytest

from doc_model.packages import FuncDecl, Package, PackageSet, TypeDecl, ValueDecl

MODULE_ROOT = "example.com/mod/"


@pytest.fixture
def current() -> Package:
    """Pakiet, do którego należy komentarz."""
    return Package(
        name="doc",
        import_path="example.com/mod/doc",
        consts=(ValueDecl(names=("MaxLevel", "MinLevel")),),
        vars=(ValueDecl(names=("Default",)),),
        funcs=(FuncDecl(name="New"), FuncDecl(name="Render", recv="Renderer")),
        types=(TypeDecl(name="Renderer"), TypeDecl(name="T")),
    )


@pytest.fixture
def other() -> Package:
    return Package(
        name="pkg",
        import_path="example.com/mod/pkg",
        funcs=(FuncDecl(name="Name", recv="Recv"), FuncDecl(name="Open")),
        types=(TypeDecl(name="Recv"),),
    )


@pytest.fixture
def stale() -> Package:
    """Ta sama ścieżka importu co `other`, ale bez symboli (nieaktualne metadane)."""
    return Package(name="pkg", import_path="example.com/mod/pkg")


@pytest.fixture
def packages(current: Package, stale: Package, other: Package) -> PackageSet:
    return PackageSet(packages=(current, stale, other))


@pytest.fixture
def packages_json(tmp_path):
    data = {
        "packages": [
            {
                "name": "doc",
                "import_path": "example.com/mod/doc",
                "consts": [{"names": ["MaxLevel", "MinLevel"]}],
                "vars": ["Default"],
                "funcs": ["New", {"name": "Render", "recv": "Renderer"}],
                "types": ["Renderer", "T"],
            },
            {
                "name": "pkg",
                "import_path": "example.com/mod/pkg",
                "funcs": [{"name": "Name", "recv": "Recv"}, {"name": "Open"}],
                "types": [{"name": "Recv"}],
            },
        ]
    }
    path = tmp_path / "packages.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path
