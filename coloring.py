"""Number-to-color SVG grid for the coloring-book demo."""

from typing import Optional
from urllib.parse import quote

from config import ColoringConfig as Config

# Characters encodeURIComponent leaves untouched
_URI_SAFE = "-_.!~*'()"


def color_index(x: int, y: int, palette_size: int) -> int:
    return ((x + 1) * (y + 2)) % palette_size


def number_to_color_svg(grid_size: Optional[int] = None, palette=None) -> str:
    """
    Build a square SVG grid, one cell per unit of the viewBox.

    Args:
        grid_size: Cells per side; defaults to ColoringConfig.DEFAULT_GRID
        palette: Fill colors; defaults to ColoringConfig.PALETTE

    Returns:
        str: SVG document
    """
    if grid_size is None:
        grid_size = Config.DEFAULT_GRID
    if palette is None:
        palette = Config.PALETTE
    if grid_size < 1:
        raise ValueError(f"grid_size must be >= 1, got {grid_size}")
    if not palette:
        raise ValueError("palette must not be empty")

    parts = [
        f"<svg xmlns='http://www.w3.org/2000/svg' width='{Config.CANVAS_PX}' height='{Config.CANVAS_PX}' "
        f"viewBox='0 0 {grid_size} {grid_size}'>"
    ]
    for y in range(grid_size):
        for x in range(grid_size):
            fill = palette[color_index(x, y, len(palette))]
            parts.append(
                f"<rect x='{x}' y='{y}' width='1' height='1' fill='{fill}' "
                f"stroke='{Config.STROKE}' stroke-width='{Config.STROKE_WIDTH}'/>"
            )
    parts.append("</svg>")
    return "".join(parts)


def svg_data_uri(svg: str) -> str:
    return "data:image/svg+xml;utf8," + quote(svg, safe=_URI_SAFE)
