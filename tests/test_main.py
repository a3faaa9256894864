from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from themeforge import main as cli
from themeforge import switcher
from themeforge.errors import ThemeFileError
from themeforge.main import main
from themeforge.settings import Settings

THEME = """:root {
  --color-bg: #ffffff;
}

nav {
  --color-bg: #000000;
}

/* body_classes: main-boxed */"""


def test_parse_then_generate(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    theme = tmp_path / "theme.scss"
    theme.write_text(THEME, encoding="utf-8")
    snapshot = tmp_path / "theme.json"

    assert main(["parse", str(theme), "--output", str(snapshot)]) == 0
    data = json.loads(snapshot.read_text(encoding="utf-8"))
    assert data["regions"] == {"nav": {"--color-bg": "#000000"}}

    assert main(["generate", str(snapshot)]) == 0
    assert capsys.readouterr().out == THEME + "\n"

    out = tmp_path / "regenerated.scss"
    assert main(["generate", str(snapshot), "-o", str(out)]) == 0
    assert out.read_text(encoding="utf-8") == THEME


def test_switcher_command(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    switcher.clear_cache()
    themes = tmp_path / "themes"
    themes.mkdir()
    (themes / "theme-ocean.scss").write_text(":root { --color-bg: #001f3f; }", encoding="utf-8")
    assert main(["switcher", str(themes)]) == 0
    assert 'html[data-theme="ocean"]' in capsys.readouterr().out


def test_preview_command(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    theme = tmp_path / "theme.scss"
    theme.write_text(THEME, encoding="utf-8")
    out = tmp_path / "site"
    assert main(["preview", str(theme), str(out), "--themes-dir", str(tmp_path / "none")]) == 0
    assert (out / "index.html").exists()
    assert str(out / "index.html") in capsys.readouterr().out


def test_missing_file_returns_error(tmp_path: Path) -> None:
    assert main(["parse", str(tmp_path / "missing.scss")]) == 1


def test_invalid_log_level_returns_error(tmp_path: Path) -> None:
    theme = tmp_path / "theme.scss"
    theme.write_text(THEME, encoding="utf-8")
    assert main(["--log-level", "verbose", "parse", str(theme)]) == 1


def test_invalid_log_level_in_settings_returns_error(tmp_path: Path) -> None:
    theme = tmp_path / "theme.scss"
    theme.write_text(THEME, encoding="utf-8")
    config = tmp_path / "themeforge.json"
    config.write_text(json.dumps({"log_level": "loud"}), encoding="utf-8")
    assert main(["--config", str(config), "parse", str(theme)]) == 1


def test_unwritable_output_returns_error(tmp_path: Path) -> None:
    theme = tmp_path / "theme.scss"
    theme.write_text(THEME, encoding="utf-8")
    assert main(["parse", str(theme), "--output", str(tmp_path)]) == 1


def test_unopenable_log_file_raises(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(cli.logger, "handlers", [])
    settings = Settings(log_file=str(tmp_path))
    with pytest.raises(ThemeFileError):
        cli.configure_logging(settings)
    assert cli.logger.handlers == []


def test_generate_to_file_logs_once(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    snapshot = tmp_path / "theme.json"
    snapshot.write_text(json.dumps({"globals": {"--color-bg": "#fff"}}), encoding="utf-8")
    out = tmp_path / "theme.scss"
    with caplog.at_level(logging.INFO, logger="themeforge"):
        assert main(["generate", str(snapshot), "-o", str(out)]) == 0
    wrote = [r for r in caplog.records if r.getMessage().startswith("Wrote")]
    assert len(wrote) == 1
