# ui/markdown_renderer.py
# -*- coding: utf-8 -*-

from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from markdown import markdown

from domain.models import DevLink, Theme
from domain.themes import DEFAULT_THEME, get_theme

SHORTCUTS: Sequence[Tuple[str, str]] = (
    ("Space", "Start / pause"),
    ("R", "Reset"),
    ("+ / -", "Add / remove 5 minutes"),
    ("F11", "Toggle fullscreen"),
    ("Esc", "Leave fullscreen"),
)


def links_markdown(
    links: Iterable[DevLink], shortcuts: Sequence[Tuple[str, str]] = SHORTCUTS
) -> str:
    lines: List[str] = ["## Developer Links", ""]
    for link in links:
        lines.append(f"- [{link.name}]({link.url})")
    if shortcuts:
        lines += ["", "## Keyboard", "", "| Key | Action |", "|---|---|"]
        for key, action in shortcuts:
            lines.append(f"| `{key}` | {action} |")
    return "\n".join(lines)


class MarkdownRenderer:
    """
    Single responsibility:
    - Convert MD -> HTML for the tkinterweb panel
    - Provide CSS in the active theme's colors

    tkinterweb (tkhtml) only understands a limited subset of HTML/CSS,
    so extensions stay on the plain-HTML side (no JS, no form controls).
    """

    def __init__(self, theme: Optional[Theme] = None):
        self.theme = theme or get_theme(DEFAULT_THEME)

    def set_theme(self, theme: Theme) -> None:
        self.theme = theme

    # ---------- extensions ----------
    def extensions(self) -> Tuple[List[str], Dict]:
        exts: List[str] = [
            "extra",
            "sane_lists",
            "tables",
        ]
        cfg: Dict = {}
        return exts, cfg

    # ---------- CSS ----------
    def css(self) -> str:
        t = self.theme
        return f"""
        :root {{
          --text: #ffffff;
          --muted: #c7c9d3;
          --primary: {t.primary};
          --accent: {t.accent};
          --bg: {t.background};
          --track: {t.track};
        }}

        body {{
          font-family: "Poppins", "Segoe UI", sans-serif;
          color: var(--text);
          background: var(--bg);
          margin: 0;
          padding: 12px 16px;
          font-size: 13px;
          line-height: 1.5;
        }}

        h2 {{
          font-size: 1.1em;
          margin: 0.4em 0 0.6em;
          color: var(--primary);
        }}

        a {{ color: var(--accent); text-decoration: none; }}

        ul {{ padding-left: 1.2em; margin: 0.4em 0; }}
        li {{ margin: 0.3em 0; }}

        table {{
          border-collapse: collapse;
          width: 100%;
          margin: 0.6em 0;
        }}
        th, td {{
          border: 1px solid var(--track);
          padding: 4px 8px;
        }}
        th {{ color: var(--muted); }}

        code {{
          font-family: ui-monospace, Menlo, Consolas, monospace;
          background: var(--track);
          padding: 1px 5px;
          border-radius: 4px;
        }}
        """

    # ---------- render ----------
    def to_html(self, md_text: str) -> str:
        exts, cfg = self.extensions()
        body = markdown(
            md_text or "",
            extensions=exts,
            extension_configs=cfg,
            output_format="html5",
        )
        return f"""
        <html>
          <head>
            <meta charset="utf-8"/>
            <style>{self.css()}</style>
          </head>
          <body>{body}</body>
        </html>
        """
