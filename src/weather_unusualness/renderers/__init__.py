"""Pure rendering functions: structured data -> HTML or text.

All renderers follow the same pattern:
  - Input: AnalysisResult (from analysis/) plus display options
  - Output: str (HTML fragment, full page, or plain text)
  - No side effects, no I/O, no Prefect decorators

Used by flows/analyze.py (site output) and cli.py (terminal report).

Public API:
  - unusualness: build_summary_html, build_distribution_chart_html,
    build_page_html, format_text_report
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import jinja2

# Shared Jinja2 environment for all renderers
_TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"
_jinja_env = jinja2.Environment(
    loader=jinja2.FileSystemLoader(str(_TEMPLATE_DIR)),
    autoescape=True,
)


def render_template(template_name: str, **kwargs: Any) -> str:
    """Render a Jinja2 template by name."""
    return _jinja_env.get_template(template_name).render(**kwargs)
