"""Sinks for outputting styled text."""

from ansi_grid.render.sink import AnsiSink, RichSink, Sink
from ansi_grid.render.html import HtmlSink

__all__ = ["Sink", "AnsiSink", "RichSink", "HtmlSink"]
