import argparse
import json
import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import List, Optional

from .core.generator import generate
from .core.storage import load_document, read_theme, write_text, write_theme
from .errors import ThemeFileError, ThemeforgeError
from .settings import Settings, load_settings, validate_log_level
from .site import render_preview
from .switcher import compile_theme_switcher

logger = logging.getLogger("themeforge")

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(settings: Settings, level: Optional[str] = None) -> None:
    log_level = validate_log_level(level or settings.log_level or "INFO")
    if logger.handlers:
        return
    file_handler = None
    if settings.log_file:
        log_path = Path(settings.log_file)
        try:
            log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = RotatingFileHandler(
                log_path, maxBytes=1_000_000, backupCount=3, encoding="utf-8"
            )
        except OSError as exc:
            raise ThemeFileError(f"Unable to open log file: {exc}", log_path) from exc
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.setLevel(log_level)
    stream = logging.StreamHandler(sys.stderr)
    stream.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(stream)
    if file_handler is not None:
        logger.addHandler(file_handler)


def _emit(text: str, output: Optional[str]) -> None:
    if output:
        write_text(output, text)
    else:
        sys.stdout.write(text)
        if not text.endswith("\n"):
            sys.stdout.write("\n")


def _cmd_parse(args: argparse.Namespace, settings: Settings) -> int:
    document = read_theme(args.theme or settings.theme_file)
    _emit(json.dumps(document.to_dict(), indent=2, ensure_ascii=False), args.output)
    return 0


def _cmd_generate(args: argparse.Namespace, settings: Settings) -> int:
    document = load_document(args.document)
    if args.output:
        write_theme(args.output, document)
        return 0
    _emit(generate(document.global_vars, document.region_overrides, document.layout_classes), None)
    return 0


def _cmd_switcher(args: argparse.Namespace, settings: Settings) -> int:
    _emit(compile_theme_switcher(args.themes_dir or settings.themes_dir), args.output)
    return 0


def _cmd_preview(args: argparse.Namespace, settings: Settings) -> int:
    document = read_theme(args.theme or settings.theme_file)
    themes_dir = args.themes_dir or settings.themes_dir
    switcher_css = compile_theme_switcher(themes_dir) if Path(themes_dir).is_dir() else ""
    index = render_preview(
        document,
        args.output_dir or settings.output_dir,
        site_name=args.name or settings.site_name,
        switcher_css=switcher_css,
    )
    print(index)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="themeforge", description="Theme override compiler")
    parser.add_argument("--config", help="settings JSON file")
    parser.add_argument("--log-level", help="DEBUG, INFO, WARNING or ERROR")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("parse", help="theme text to JSON")
    p.add_argument("theme", nargs="?")
    p.add_argument("--output", "-o")
    p.set_defaults(func=_cmd_parse)

    p = sub.add_parser("generate", help="JSON to theme text")
    p.add_argument("document")
    p.add_argument("--output", "-o")
    p.set_defaults(func=_cmd_generate)

    p = sub.add_parser("switcher", help="compile the theme switcher stylesheet")
    p.add_argument("themes_dir", nargs="?")
    p.add_argument("--output", "-o")
    p.set_defaults(func=_cmd_switcher)

    p = sub.add_parser("preview", help="render a preview site for a theme")
    p.add_argument("theme", nargs="?")
    p.add_argument("output_dir", nargs="?")
    p.add_argument("--themes-dir")
    p.add_argument("--name")
    p.set_defaults(func=_cmd_preview)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        settings = load_settings(args.config)
        configure_logging(settings, args.log_level)
        return args.func(args, settings)
    except ThemeforgeError as exc:
        logger.error("%s", exc)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
