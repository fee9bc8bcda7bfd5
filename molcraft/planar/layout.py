# molcraft/planar/layout.py
"""
PLANAR LAYOUT ENGINE: Normalize, Bound and Pad a Lewis Diagram
==============================================================

PURPOSE:
--------
Raw 2D coordinates from the data provider can be on any scale: one record
places bonded atoms 1.2 units apart, the next 150. This module turns them
into a diagram that always reads the same way:

    raw atoms ──► mean bond length ──► uniform scale ──► bounding box ──► padded frame

ALGORITHM:
----------
1. Mean Euclidean length of all resolvable bonds (1 if none resolve)
2. scale = TARGET_BOND_LENGTH / mean   (DEFAULT_SCALE if mean ~ 0)
3. Every atom position is multiplied by the SAME scale. Per-axis scaling
   would distort bond angles, which is exactly what a Lewis diagram is for.
4. Axis-aligned bounding box of the scaled positions
5. Box grown by FRAME_PADDING on every side so no atom circle, lone pair
   or charge badge is ever clipped
6. The padded box is the view frame (used directly as an SVG viewBox)

The engine is a pure function: same input, same output, no state kept
between calls.
"""

import logging
from dataclasses import dataclass
from typing import Sequence, Tuple

import numpy as np

from ..model import Atom, Bond, ResolvedBond, finite_atoms, resolve_bonds

logger = logging.getLogger(__name__)

TARGET_BOND_LENGTH = 60.0
DEFAULT_SCALE = 60.0
MIN_MEAN_LENGTH = 0.001
FRAME_PADDING = 40.0


@dataclass(frozen=True)
class ViewFrame:
    """
    Rectangle enclosing the diagram, in output units (y-down).

    Parameters:
    -----------
    x, y : float
        Top-left corner

    width, height : float
        Extent of the frame (always > 0 for a laid-out molecule)
    """
    x: float
    y: float
    width: float
    height: float

    @property
    def x_max(self) -> float:
        return self.x + self.width

    @property
    def y_max(self) -> float:
        return self.y + self.height

    @property
    def center(self) -> Tuple[float, float]:
        return (self.x + self.width / 2, self.y + self.height / 2)

    @property
    def viewbox(self) -> str:
        """SVG viewBox attribute value: "x y width height"."""
        return f"{self.x:g} {self.y:g} {self.width:g} {self.height:g}"

    def contains(self, px: float, py: float, inset: float = 0.0) -> bool:
        """True if a disc of radius `inset` at (px, py) lies strictly inside."""
        return (
            self.x < px - inset and px + inset < self.x_max
            and self.y < py - inset and py + inset < self.y_max
        )


DEFAULT_FRAME = ViewFrame(0.0, 0.0, 100.0, 100.0)


@dataclass(frozen=True)
class NormalizedAtom:
    """An input atom plus its rescaled diagram position."""
    atom: Atom
    x: float
    y: float

    @property
    def id(self) -> int:
        return self.atom.id

    @property
    def element(self) -> str:
        return self.atom.element


@dataclass(frozen=True)
class PlanarLayout:
    """Output of `layout()`: normalized atoms, drawable bonds, frame and scale."""
    atoms: Tuple[NormalizedAtom, ...]
    bonds: Tuple[ResolvedBond, ...]
    frame: ViewFrame
    scale: float

    def position(self, atom_id: int) -> Tuple[float, float]:
        for normalized in self.atoms:
            if normalized.id == atom_id:
                return (normalized.x, normalized.y)
        raise KeyError(atom_id)


def mean_bond_length(bonds: Sequence[ResolvedBond]) -> float:
    """Mean raw 2D length over resolved bonds; 1.0 if there are none."""
    if not bonds:
        return 1.0
    total = 0.0
    for resolved in bonds:
        total += float(np.linalg.norm(resolved.start.position_2d - resolved.end.position_2d))
    return total / len(bonds)


def compute_scale(mean_length: float) -> float:
    """
    Uniform scale that maps `mean_length` onto TARGET_BOND_LENGTH.

    Falls back to DEFAULT_SCALE when the mean is (near) zero, e.g. when every
    bonded pair sits on the same point.
    """
    if not np.isfinite(mean_length) or mean_length <= MIN_MEAN_LENGTH:
        return DEFAULT_SCALE
    return TARGET_BOND_LENGTH / mean_length


def layout(atoms: Sequence[Atom], bonds: Sequence[Bond]) -> PlanarLayout:
    """
    Normalize raw diagram coordinates into a padded view frame.

    Parameters:
    -----------
    atoms : Sequence[Atom]
        Atoms with raw (x2d, y2d) positions

    bonds : Sequence[Bond]
        Bonds referencing atom ids. Unresolvable bonds (unknown id,
        unsupported order) are skipped and excluded from the mean.

    Returns:
    --------
    PlanarLayout
        - atoms: NormalizedAtom per finite input atom, input order preserved
        - bonds: resolved bonds only
        - frame: bounding box of normalized atoms grown by FRAME_PADDING
        - scale: the uniform factor applied

    Edge cases:
    -----------
    - No atoms: DEFAULT_FRAME, no atoms, no bonds, scale 1.0
    - Atoms with a NaN or infinite 2D position are skipped (WARNING), and
      so are their bonds; if none remain, same as no atoms
    - No resolvable bonds: mean length defaults to 1
    - Bonds with an order outside {1, 2, 3} are not drawn and do not count
      toward the mean, even when both endpoints exist
    - Mean length ~ 0: DEFAULT_SCALE

    Example:
    --------
    >>> result = layout(molecule.atoms, molecule.bonds)
    >>> result.frame.viewbox     # paste into <svg viewBox="...">
    """
    atoms = finite_atoms(atoms, '2d')
    if not atoms:
        return PlanarLayout(atoms=(), bonds=(), frame=DEFAULT_FRAME, scale=1.0)

    resolved, _skipped = resolve_bonds(atoms, bonds)
    scale = compute_scale(mean_bond_length(resolved))

    normalized = tuple(
        NormalizedAtom(atom=atom, x=float(atom.x2d * scale), y=float(atom.y2d * scale))
        for atom in atoms
    )

    xs = np.array([a.x for a in normalized])
    ys = np.array([a.y for a in normalized])
    min_x, max_x = float(xs.min()), float(xs.max())
    min_y, max_y = float(ys.min()), float(ys.max())

    frame = ViewFrame(
        x=min_x - FRAME_PADDING,
        y=min_y - FRAME_PADDING,
        width=(max_x - min_x) + 2 * FRAME_PADDING,
        height=(max_y - min_y) + 2 * FRAME_PADDING,
    )

    logger.debug(
        "Planar layout: %d atoms, %d bonds, scale=%.4g, frame=%s",
        len(normalized), len(resolved), scale, frame.viewbox,
    )
    return PlanarLayout(atoms=normalized, bonds=tuple(resolved), frame=frame, scale=scale)
