"""Preview site export for a theme."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from jinja2 import DictLoader, Environment, FileSystemLoader, select_autoescape

from .core.generator import generate
from .core.models import ThemeDocument
from .errors import ThemeFileError
from .fields import REGION_DEFINITIONS

logger = logging.getLogger(__name__)

PREVIEW_TEMPLATE = """\
<!doctype html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <meta name="viewport" content="width=device-width, initial-scale=1">
  <title>{{ site_name }}</title>
  {% if switcher_href %}<link rel="stylesheet" href="{{ switcher_href }}">{% endif %}
  <link rel="stylesheet" href="{{ stylesheet_path }}">
</head>
<body{% if body_classes %} class="{{ body_classes | join(' ') }}"{% endif %}>
  <header>
    <h1>{{ site_name }}</h1>
    <nav>
      <ul>
      {% for region in regions %}
        <li><a href="#{{ region.tab }}">{{ region.label }}</a></li>
      {% endfor %}
      </ul>
    </nav>
  </header>
  <main>
    <article>
      <h2>Article</h2>
      <p>Body text with <a href="#">a link</a> in the article region.</p>
    </article>
    <form>
      <label for="email">Email</label>
      <input id="email" type="email" placeholder="you@example.com">
      <input type="submit" value="Subscribe">
    </form>
    <p><button type="button">Button</button> <a class="button" href="#">Link button</a></p>
  </main>
</body>
</html>
"""

TEMPLATE_NAME = "preview.html.j2"


def _env(templates_dir: Optional[Path] = None) -> Environment:
    if templates_dir is not None:
        loader = FileSystemLoader(str(templates_dir))
    else:
        loader = DictLoader({TEMPLATE_NAME: PREVIEW_TEMPLATE})
    return Environment(loader=loader, autoescape=select_autoescape(["html", "xml", "html.j2"]))


def render_preview(
    document: ThemeDocument,
    output_dir: str | Path,
    *,
    site_name: str = "Theme preview",
    switcher_css: str = "",
    templates_dir: Optional[str | Path] = None,
) -> Path:
    """Write the theme CSS and a preview page; return the page path."""

    output_dir = Path(output_dir)
    css_dir = output_dir / "assets" / "css"
    theme_css = generate(document.global_vars, document.region_overrides, document.layout_classes)

    switcher_href = ""
    try:
        css_dir.mkdir(parents=True, exist_ok=True)
        (css_dir / "theme.css").write_text(theme_css, encoding="utf-8")
        if switcher_css:
            (css_dir / "theme-switcher.css").write_text(switcher_css, encoding="utf-8")
            switcher_href = "assets/css/theme-switcher.css"

        env = _env(Path(templates_dir) if templates_dir is not None else None)
        tpl = env.get_template(TEMPLATE_NAME)
        html = tpl.render(
            site_name=site_name,
            stylesheet_path="assets/css/theme.css",
            switcher_href=switcher_href,
            body_classes=list(document.layout_classes),
            regions=list(REGION_DEFINITIONS.values()),
        )
        index = output_dir / "index.html"
        index.write_text(html, encoding="utf-8")
    except OSError as exc:
        raise ThemeFileError(f"Unable to write preview: {exc}", output_dir) from exc

    logger.info("Rendered theme preview to %s", index)
    return index
