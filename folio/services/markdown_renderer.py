import logging
import re

import markdown
from markdown.extensions.toc import slugify_unicode
from pygments.formatters import HtmlFormatter

from folio.settings import settings

logger = logging.getLogger(__name__)

CODE_CSS_CLASS = "highlight"
ANCHOR_CSS_CLASS = "anchor"
# Keeps blank code lines at full height when lines are laid out as a grid
BLANK_LINE_PLACEHOLDER = "\u200b"

_TAG_RE = re.compile(r"<[^>]+>")


class LineFormatter(HtmlFormatter):
    """HtmlFormatter that wraps every code line in <span class="line">."""

    def wrap(self, source):
        return super().wrap(self._wrap_lines(source))

    def _wrap_lines(self, source):
        for is_code, line in source:
            if not is_code:
                yield is_code, line
                continue
            content = line.rstrip("\n")
            if not _TAG_RE.sub("", content):
                content += BLANK_LINE_PLACEHOLDER
            yield is_code, f'<span class="line">{content}</span>\n'


def render_markdown(text: str, *, theme: str | None = None) -> str:
    """Render a post body to HTML with heading anchors and highlighted code."""
    html = markdown.markdown(
        text,
        extensions=["fenced_code", "codehilite", "tables", "sane_lists", "toc"],
        extension_configs={
            "codehilite": {
                "guess_lang": False,
                "css_class": CODE_CSS_CLASS,
                "pygments_style": theme or settings.CODE_THEME,
                "pygments_formatter": LineFormatter,
            },
            "toc": {
                "slugify": slugify_unicode,
                "permalink": True,
                "permalink_class": ANCHOR_CSS_CLASS,
            },
        },
        output_format="html",
    )
    logger.debug(f"Rendered {len(text)} chars of markdown to {len(html)} chars")
    return html


def highlight_stylesheet(theme: str | None = None) -> str:
    """CSS for the code theme, scoped to rendered code blocks."""
    formatter = HtmlFormatter(style=theme or settings.CODE_THEME)
    return formatter.get_style_defs(f".{CODE_CSS_CLASS}")
