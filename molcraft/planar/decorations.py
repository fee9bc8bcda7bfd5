# molcraft/planar/decorations.py
"""
LEWIS DIAGRAM DECORATIONS
=========================

PURPOSE:
--------
Per-bond and per-atom drawing geometry for the 2D diagram, computed at draw
time from normalized positions (never cached):

- Bond strands: 1, 2 or 3 parallel segments depending on bond order
- Lone pairs: k dot-pairs spread evenly on a small ring above the atom
- Charge badge: a sign-colored disc at the atom's upper-right corner

COORDINATE CONVENTION:
----------------------
Output coordinates are y-down (SVG convention). "Up" is negative y.
Atom decorations are expressed in ATOM-LOCAL coordinates (origin at the atom
center); the planar scene builder places them with a group translation.

SIZES (output units, TARGET_BOND_LENGTH = 60):
----------------------------------------------
    atom circle           14 (hydrogen 10)
    lone-pair ring        radius 6, centered 4 above the circle
    lone-pair dots        radius 1.8, 2.5 either side of the ring radius
    charge badge          radius 6, centered at (r - 4, -(r - 4))
"""

import logging
import math
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

import numpy as np

from ..geometry import as_vector, perpendicular_2d
from ..scene import Circle, Point, Segment, Text, as_point

logger = logging.getLogger(__name__)

# Bond strands
BOND_OFFSET = 3.0
TRIPLE_OFFSET_MULTIPLIER = 2.5
MIN_SEGMENT_LENGTH = 1.0
BOND_COLOR = '#334155'
BOND_WIDTH = 2.5

# Atom circle
ATOM_RADIUS = 14.0
HYDROGEN_RADIUS = 10.0

# Lone pairs
LONE_PAIR_GAP = 4.0
LONE_PAIR_RING_RADIUS = 6.0
LONE_PAIR_DOT_SPREAD = 2.5
LONE_PAIR_DOT_RADIUS = 1.8
LONE_PAIR_COLOR = '#64748b'

# Charge badge
CHARGE_BADGE_INSET = 4.0
CHARGE_BADGE_RADIUS = 6.0
POSITIVE_COLOR = '#ef4444'
NEGATIVE_COLOR = '#3b82f6'


def atom_radius(element: str) -> float:
    """Radius of the atom's background circle."""
    return HYDROGEN_RADIUS if element.strip().upper() == 'H' else ATOM_RADIUS


def _max_decoration_radius() -> float:
    lone_pair_reach = (
        ATOM_RADIUS + LONE_PAIR_GAP
        + math.hypot(LONE_PAIR_RING_RADIUS, LONE_PAIR_DOT_SPREAD)
        + LONE_PAIR_DOT_RADIUS
    )
    badge_reach = (
        math.hypot(ATOM_RADIUS - CHARGE_BADGE_INSET, ATOM_RADIUS - CHARGE_BADGE_INSET)
        + CHARGE_BADGE_RADIUS
    )
    return max(ATOM_RADIUS, lone_pair_reach, badge_reach)


# Farthest any decoration reaches from an atom center
MAX_DECORATION_RADIUS = _max_decoration_radius()


# =============================================================================
# BONDS
# =============================================================================

def bond_segments(
    start: Sequence[float],
    end: Sequence[float],
    order: int,
    key: Optional[str] = None,
) -> List[Segment]:
    """
    Line segments for one bond between two normalized atom centers.

    Parameters:
    -----------
    start, end : Sequence[float]
        Endpoint centers (x, y) in output units

    order : int
        Bond order:
        - 1: one center segment
        - 2: two segments offset by +/- BOND_OFFSET along the unit normal
        - 3: center segment plus two at +/- BOND_OFFSET * TRIPLE_OFFSET_MULTIPLIER

    key : str
        Optional key copied onto every segment (for renderers)

    Returns:
    --------
    List[Segment]
        `order` segments, or [] if the bond is shorter than
        MIN_SEGMENT_LENGTH or the order is unsupported
    """
    p0 = as_vector(start)
    p1 = as_vector(end)
    normal = perpendicular_2d(p1 - p0)

    if normal is None or np.linalg.norm(p1 - p0) < MIN_SEGMENT_LENGTH:
        logger.debug("Bond %s shorter than %.1f units, not drawn", key, MIN_SEGMENT_LENGTH)
        return []

    if order == 1:
        offsets = [0.0]
    elif order == 2:
        offsets = [BOND_OFFSET, -BOND_OFFSET]
    elif order == 3:
        wide = BOND_OFFSET * TRIPLE_OFFSET_MULTIPLIER
        offsets = [0.0, wide, -wide]
    else:
        logger.debug("Bond %s has unsupported order %r, not drawn", key, order)
        return []

    return [
        Segment(
            start=as_point(p0 + normal * offset),
            end=as_point(p1 + normal * offset),
            color=BOND_COLOR,
            width=BOND_WIDTH,
            key=key,
        )
        for offset in offsets
    ]


# =============================================================================
# LONE PAIRS
# =============================================================================

@dataclass(frozen=True)
class LonePairMarker:
    """
    One lone pair: two dots placed symmetrically about a point on the ring.

    `angle` is the marker's direction from the ring center, in radians,
    measured in y-down output coordinates (-pi/2 points straight up).
    """
    angle: float
    center: Point
    dots: Tuple[Point, Point]


def lone_pair_markers(count: int, radius: float = ATOM_RADIUS) -> List[LonePairMarker]:
    """
    Distribute `count` lone-pair markers around a ring above the atom.

    Markers are spaced 2*pi/count apart, starting straight up. Each marker's
    two dots sit on the tangent at that angle (perpendicular to the radial
    direction). Coordinates are atom-local.
    """
    if count <= 0:
        return []

    ring_center = np.array([0.0, -(radius + LONE_PAIR_GAP)])
    step = 2.0 * math.pi / count
    markers = []
    for i in range(count):
        angle = -math.pi / 2 + i * step
        radial = np.array([math.cos(angle), math.sin(angle)])
        tangent = np.array([-radial[1], radial[0]])
        center = ring_center + radial * LONE_PAIR_RING_RADIUS
        dots = (
            as_point(center - tangent * LONE_PAIR_DOT_SPREAD),
            as_point(center + tangent * LONE_PAIR_DOT_SPREAD),
        )
        markers.append(LonePairMarker(angle=angle, center=as_point(center), dots=dots))
    return markers


def lone_pair_dots(count: int, radius: float = ATOM_RADIUS, key: Optional[str] = None) -> List[Circle]:
    """Lone-pair markers as drawable dots (two per pair)."""
    return [
        Circle(center=dot, radius=LONE_PAIR_DOT_RADIUS, fill=LONE_PAIR_COLOR, role='lone_pair', key=key)
        for marker in lone_pair_markers(count, radius)
        for dot in marker.dots
    ]


# =============================================================================
# CHARGE BADGE
# =============================================================================

@dataclass(frozen=True)
class ChargeBadge:
    """Sign indicator for a non-zero formal charge (magnitude is not shown)."""
    center: Point
    radius: float
    color: str
    label: str

    def primitives(self, key: Optional[str] = None) -> list:
        return [
            Circle(center=self.center, radius=self.radius, fill=self.color,
                   stroke='#ffffff', stroke_width=1.0, role='charge', key=key),
            Text(position=self.center, text=self.label, color='#ffffff', size=8.0, key=key),
        ]


def charge_badge(charge: int, radius: float = ATOM_RADIUS):
    """
    Badge for a formal charge, or None when the atom is neutral.

    Positive charges get a red "+" badge, negative ones a blue "-" badge.
    The badge sits at a fixed diagonal offset toward the upper-right corner.
    """
    if charge == 0:
        return None
    corner = radius - CHARGE_BADGE_INSET
    if charge > 0:
        color, label = POSITIVE_COLOR, '+'
    else:
        color, label = NEGATIVE_COLOR, '-'
    return ChargeBadge(center=(corner, -corner), radius=CHARGE_BADGE_RADIUS, color=color, label=label)
