"""Backends for rendering aggregate results (SVG stream, HTML agreement table)."""

from .svg_generator import (
    ViewMode,
    generate_agreement_html,
    generate_html,
    generate_stream_svg,
    save_html_file,
)

__all__ = [
    "ViewMode",
    "generate_agreement_html",
    "generate_html",
    "generate_stream_svg",
    "save_html_file",
]
