from __future__ import annotations

import sys
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from themeforge.core.models import ThemeDocument
from themeforge.core.regions import Region
from themeforge.core.storage import (
    load_document,
    read_theme,
    save_document,
    write_text,
    write_theme,
)
from themeforge.errors import ThemeFileError


def _document() -> ThemeDocument:
    return ThemeDocument(
        global_vars={"--color-bg": "#ffffff", "--border": "2px solid #000000"},
        region_overrides={Region.BUTTON: {"--color-bg": "#007bff"}},
        layout_classes=["main-boxed"],
    )


def test_write_and_read_theme(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "theme.scss"
    write_theme(path, _document())
    assert path.read_text(encoding="utf-8").startswith(":root {\n")
    assert read_theme(path) == _document()


def test_save_and_load_document(tmp_path: Path) -> None:
    path = tmp_path / "theme.json"
    save_document(path, _document())
    assert load_document(path) == _document()


def test_read_missing_theme_raises(tmp_path: Path) -> None:
    with pytest.raises(ThemeFileError) as excinfo:
        read_theme(tmp_path / "missing.scss")
    assert excinfo.value.path == tmp_path / "missing.scss"


def test_load_document_rejects_bad_json(tmp_path: Path) -> None:
    path = tmp_path / "theme.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(ThemeFileError):
        load_document(path)
    path.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(ThemeFileError):
        load_document(path)


def test_write_text_into_directory_raises(tmp_path: Path) -> None:
    with pytest.raises(ThemeFileError) as excinfo:
        write_text(tmp_path, "x")
    assert excinfo.value.path == tmp_path
