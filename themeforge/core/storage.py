import json
import logging
from pathlib import Path

from ..errors import ThemeFileError
from .generator import generate
from .models import ThemeDocument
from .parser import parse

logger = logging.getLogger(__name__)


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ThemeFileError(f"Unable to read file: {exc}", path) from exc


def write_text(path: str | Path, text: str) -> None:
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
    except OSError as exc:
        raise ThemeFileError(f"Unable to write file: {exc}", path) from exc
    logger.info("Wrote %s", path)


def read_theme(path: str | Path) -> ThemeDocument:
    return parse(_read_text(Path(path)))


def write_theme(path: str | Path, document: ThemeDocument) -> None:
    text = generate(document.global_vars, document.region_overrides, document.layout_classes)
    write_text(path, text)


def save_document(path: str | Path, document: ThemeDocument) -> None:
    write_text(path, json.dumps(document.to_dict(), indent=2, ensure_ascii=False))


def load_document(path: str | Path) -> ThemeDocument:
    path = Path(path)
    try:
        data = json.loads(_read_text(path))
    except json.JSONDecodeError as exc:
        raise ThemeFileError(f"Invalid JSON: {exc}", path) from exc
    if not isinstance(data, dict):
        raise ThemeFileError("Expected a JSON object", path)
    return ThemeDocument.from_dict(data)
