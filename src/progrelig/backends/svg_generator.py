"""
SVG / HTML generator for survey result views.

Converts aggregate results into markup appended to a "viz-area" container:
    - STREAM: stacked area of responses per hour (one <path> per layer)
    - AGREEMENT: one row per language, three proportional spans + a label
    - ALL: both views on one page
"""

from enum import Enum
from html import escape
from typing import List, Optional, Sequence, Tuple

from progrelig import config
from progrelig.aggregators import x_scale, y_scale
from progrelig.model import AgreementTable, ResponseStream, StreamPoint


class ViewMode(Enum):
    """Which views to put on the page."""
    STREAM = "stream"
    AGREEMENT = "agreement"
    ALL = "all"


def _hex_to_rgb(color: str) -> Tuple[int, int, int]:
    color = color.lstrip("#")
    if len(color) == 3:
        color = "".join(c * 2 for c in color)
    return int(color[0:2], 16), int(color[2:4], 16), int(color[4:6], 16)


def layer_color(index: int, count: int, colors: Sequence[str] = config.LAYER_COLORS) -> str:
    """Shade for a layer, interpolated between the light and dark ends."""
    start, end = _hex_to_rgb(colors[0]), _hex_to_rgb(colors[1])
    t = index / (count - 1) if count > 1 else 0.0
    rgb = [round(a + (b - a) * t) for a, b in zip(start, end)]
    return "#{:02x}{:02x}{:02x}".format(*rgb)


def _fmt(value: float) -> str:
    """Compact coordinate: integers without a trailing .0, else 2 decimals."""
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.2f}"


def _area_path(points: Sequence[StreamPoint], stream: ResponseStream) -> str:
    """Linear area: along the tops left to right, back along the floors."""
    if not points:
        return ""
    x = x_scale(stream)
    y = y_scale(stream)

    top = [f"{_fmt(x(p.hour))},{_fmt(y(p.y1))}" for p in points]
    bottom = [f"{_fmt(x(p.hour))},{_fmt(y(p.y0))}" for p in reversed(points)]
    return "M" + "L".join(top) + "L" + "L".join(bottom) + "Z"


def generate_stream_svg(stream: ResponseStream) -> str:
    """
    Generate the stacked response stream as an <svg> element.

    Args:
        stream: ResponseStream from aggregators.response_stream

    Returns:
        String containing the SVG markup
    """
    lines = [f'<svg width="{stream.width}" height="{stream.height}">']

    if stream.x_domain is not None:
        for i, layer in enumerate(stream.layers):
            label = "religious" if layer.religious else "non-religious"
            color = layer_color(i, len(stream.layers))
            path = _area_path(layer.points, stream)
            lines.append(
                f'  <path class="{label}" d="{path}" style="fill: {color};"></path>'
            )

    lines.append("</svg>")
    return "\n".join(lines)


def generate_agreement_html(table: AgreementTable) -> str:
    """
    Generate the agreement table as a <section> element.

    Each language gets a <div> with three spans (classes i0, i1, i2 for
    disagree, neutral, agree) sized fraction * 100 px, then its label.
    Rows keep the table's order (descending agreement).
    """
    lines = [f'<section data-belief="{escape(table.belief)}">']
    for row in table.rows:
        lines.append("  <div>")
        for i, fraction in enumerate(row.fractions):
            lines.append(
                f'    <span class="i{i}" style="width: {_fmt(fraction * 100)}px;"></span>'
            )
        lines.append(f"    <span>{escape(row.language)}</span>")
        lines.append("  </div>")
    lines.append("</section>")
    return "\n".join(lines)


_STYLE = """\
    #viz-area section div { display: flex; align-items: center; height: 1.4em; }
    #viz-area section span { display: inline-block; height: 1em; }
    #viz-area section span.i0 { background: #c55; }
    #viz-area section span.i1 { background: #bbb; }
    #viz-area section span.i2 { background: #5a5; }
    #viz-area section span:last-child { margin-left: 0.5em; }"""


def generate_html(
    stream: Optional[ResponseStream] = None,
    table: Optional[AgreementTable] = None,
    mode: ViewMode = ViewMode.ALL,
    title: str = config.APP_NAME,
) -> str:
    """
    Generate a standalone HTML page with the requested views.

    Args:
        stream: Response stream (needed for STREAM and ALL)
        table: Agreement table (needed for AGREEMENT and ALL)
        mode: Which views to render
        title: Page title

    Returns:
        String containing the HTML document

    Raises:
        ValueError: If a requested view has no data
    """
    parts: List[str] = []

    if mode in (ViewMode.STREAM, ViewMode.ALL):
        if stream is None:
            raise ValueError(f"{mode.value} view needs a response stream")
        parts.append(generate_stream_svg(stream))

    if mode in (ViewMode.AGREEMENT, ViewMode.ALL):
        if table is None:
            raise ValueError(f"{mode.value} view needs an agreement table")
        parts.append(generate_agreement_html(table))

    lines = [
        "<!DOCTYPE html>",
        "<html>",
        "<head>",
        '  <meta charset="utf-8">',
        f"  <title>{escape(title)}</title>",
        "  <style>",
        _STYLE,
        "  </style>",
        "</head>",
        "<body>",
        '<div id="viz-area">',
    ]
    lines.extend(parts)
    lines.extend(["</div>", "</body>", "</html>"])

    return "\n".join(lines)


def save_html_file(
    filename: str,
    stream: Optional[ResponseStream] = None,
    table: Optional[AgreementTable] = None,
    mode: ViewMode = ViewMode.ALL,
) -> None:
    """
    Generate the HTML page and save it to file.

    Args:
        filename: Output file path (.html extension recommended)
        stream: Response stream
        table: Agreement table
        mode: Which views to render
    """
    page = generate_html(stream, table, mode=mode)
    with open(filename, "w", encoding="utf-8") as f:
        f.write(page)


__all__ = [
    "ViewMode",
    "layer_color",
    "generate_stream_svg",
    "generate_agreement_html",
    "generate_html",
    "save_html_file",
]
