# molcraft/elements.py
"""
ELEMENT STYLES: CPK Colors and Display Radii
============================================

A constant lookup from element symbol to display color and relative radius.
Both the Lewis diagram and the 3D structure read from this table; nothing
here makes a geometric decision.

Unknown elements fall back to DEFAULT (hot pink) so they stand out instead of
silently looking like carbon.
"""

from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class ElementStyle:
    """
    Display properties of one element.

    Parameters:
    -----------
    color : str
        Hex fill color ("#RRGGBB")

    radius : float
        Relative display radius (3D spheres are drawn at a fraction of this)
    """
    color: str
    radius: float


CPK_STYLES: Dict[str, ElementStyle] = {
    'H': ElementStyle('#FFFFFF', 0.3),
    'C': ElementStyle('#909090', 0.7),
    'N': ElementStyle('#3050F8', 0.7),
    'O': ElementStyle('#FF0D0D', 0.6),
    'F': ElementStyle('#90E050', 0.5),
    'CL': ElementStyle('#1FF01F', 0.9),
    'BR': ElementStyle('#A62929', 1.1),
    'I': ElementStyle('#940094', 1.3),
    'HE': ElementStyle('#D9FFFF', 1.0),
    'NE': ElementStyle('#B3E3F5', 1.0),
    'AR': ElementStyle('#80D1E3', 1.0),
    'S': ElementStyle('#FFFF30', 1.0),
    'P': ElementStyle('#FF8000', 1.0),
}

DEFAULT_STYLE = ElementStyle('#FF69B4', 0.8)


def element_style(symbol: str) -> ElementStyle:
    """Look up the style for `symbol` (case-insensitive), DEFAULT if unknown."""
    return CPK_STYLES.get(symbol.strip().upper(), DEFAULT_STYLE)


def text_color_for(fill: str) -> str:
    """Dark text on light fills, white text on dark fills."""
    hex_value = fill.lstrip('#')
    r, g, b = (int(hex_value[i:i + 2], 16) for i in (0, 2, 4))
    # Perceived luminance (ITU-R BT.601)
    luminance = 0.299 * r + 0.587 * g + 0.114 * b
    return '#0f172a' if luminance > 140 else '#ffffff'
