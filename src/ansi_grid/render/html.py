"""Render styled output to HTML."""

from __future__ import annotations

from ansi_grid.core.color import PALETTE_16, Color


class HtmlSink:
    """
    Sink that builds an HTML ``<pre>`` block with inline color styles.

    Consecutive characters of the same color share a span. The finished
    document is available as :attr:`html` after ``present``.
    """

    def __init__(
        self,
        css_class: str = "ansi-grid",
        font_family: str = "monospace",
    ):
        self.css_class = css_class
        self.font_family = font_family
        self.html = ""
        self._lines: list[str] = []
        self._line_spans: list[str] = []
        self._span: list[str] = []
        self._span_color: Color | None = None
        self._color: Color | None = None

    def set_color(self, color: Color | None) -> None:
        self._color = color

    def write(self, text: str) -> None:
        for char in text:
            if char == '\n':
                self._end_line()
                continue
            if self._span and self._color != self._span_color:
                self._close_span()
            self._span_color = self._color
            self._span.append(self._escape_html(char))

    def present(self) -> None:
        self._end_line()
        body = '<br>\n'.join(self._lines)
        self.html = f'''<pre class="{self.css_class}" style="font-family: {self.font_family}; background: #000; padding: 1em;">
{body}
</pre>'''

    def reset(self) -> None:
        self._lines = []
        self._line_spans = []
        self._span = []
        self._span_color = None
        self._color = None

    def flush(self) -> None:
        pass

    def _end_line(self) -> None:
        self._close_span()
        self._lines.append(''.join(self._line_spans))
        self._line_spans = []

    def _close_span(self) -> None:
        if not self._span:
            return
        self._line_spans.append(self._make_span(''.join(self._span), self._span_color))
        self._span = []

    def _make_span(self, text: str, color: Color | None) -> str:
        """Create an HTML span with styling."""
        css = color.to_css() if color is not None else PALETTE_16[7]
        return f'<span style="color: {css}">{text}</span>'

    def _escape_html(self, char: str) -> str:
        """Escape special HTML characters."""
        return (char
            .replace('&', '&amp;')
            .replace('<', '&lt;')
            .replace('>', '&gt;')
            .replace(' ', '&nbsp;')
        )
