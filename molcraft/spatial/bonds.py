# molcraft/spatial/bonds.py
"""
3D BOND MESHES: Oriented Cylinders from Two Endpoints
=====================================================

PURPOSE:
--------
Turn one bond (two atom centers plus a bond order) into the cylinders a
ball-and-stick renderer draws. This is the 3D counterpart of the planar
bond strands.

GEOMETRY:
---------
A renderer's unit cylinder stands along a fixed CANONICAL_AXIS (+Y), centered
on the origin. To place it on a bond from S to E:

    d        = E - S                 (bond vector)
    L        = |d|                   (cylinder length)
    mid      = (S + E) / 2           (cylinder center)
    q        = rotation taking +Y onto d / L

Every strand of the same bond shares q and L; strands differ only by a
LATERAL offset from the midpoint. The lateral axis is q applied to a fixed
REFERENCE_AXIS (+X). Because +X is perpendicular to +Y, the rotated axis is
always perpendicular to the bond, whatever direction the bond points:

    lateral  = q · (1, 0, 0)
    order 1:  mid
    order 2:  mid + lateral·OFFSET,  mid - lateral·OFFSET
    order 3:  mid,  mid + lateral·OFFSET,  mid - lateral·OFFSET

DEGENERATE BONDS:
-----------------
Two atoms on the same point have no direction; no rotation can be derived
without dividing by ~0. Such bonds produce no cylinders instead of NaN.
"""

import logging
from dataclasses import dataclass, replace
from typing import List, Optional, Sequence, Tuple

import numpy as np

from ..geometry import as_vector, quaternion_from_unit_vectors, rotate_vector
from ..scene import Point, Transform, as_point

logger = logging.getLogger(__name__)

CANONICAL_AXIS = (0.0, 1.0, 0.0)
REFERENCE_AXIS = (1.0, 0.0, 0.0)

BOND_RADIUS = 0.08
BOND_LATERAL_OFFSET = 0.15
BOND_COLOR = '#cbd5e1'
DEGENERATE_LENGTH = 1e-6


@dataclass(frozen=True)
class CylinderDescriptor:
    """
    Everything a renderer needs to instantiate one bond strand.

    Parameters:
    -----------
    position : Point
        Cylinder center (x, y, z)

    orientation : Point
        Quaternion (x, y, z, w) rotating CANONICAL_AXIS onto the bond direction

    length : float
        Cylinder height, equal to the endpoint distance

    radius : float
        Cylinder radius

    color : str
        Fill color

    key : Optional[str]
        Bond identifier for renderers
    """
    position: Point
    orientation: Point
    length: float
    radius: float = BOND_RADIUS
    color: str = BOND_COLOR
    key: Optional[str] = None

    @property
    def axis(self) -> np.ndarray:
        """Unit direction of the cylinder's long axis."""
        return rotate_vector(self.orientation, CANONICAL_AXIS)

    @property
    def endpoints(self) -> Tuple[np.ndarray, np.ndarray]:
        center = as_vector(self.position)
        half = self.axis * (self.length / 2)
        return center - half, center + half

    def transformed(self, transform: Transform) -> 'CylinderDescriptor':
        return replace(
            self,
            position=as_point(transform.apply(self.position)),
            orientation=transform.apply_rotation(self.orientation),
        )


@dataclass(frozen=True)
class OrientedBondGeometry:
    """All cylinders of one bond; `len(cylinders) == order` unless degenerate."""
    bond_index: int
    order: int
    cylinders: Tuple[CylinderDescriptor, ...]


def lateral_axis(orientation: Sequence[float]) -> np.ndarray:
    """Offset direction for multi-strand bonds (perpendicular to the bond)."""
    return rotate_vector(orientation, REFERENCE_AXIS)


def bond_geometry(
    start: Sequence[float],
    end: Sequence[float],
    order: int,
    radius: float = BOND_RADIUS,
    offset: float = BOND_LATERAL_OFFSET,
    color: str = BOND_COLOR,
    key: Optional[str] = None,
) -> List[CylinderDescriptor]:
    """
    Cylinder descriptors for one bond.

    Parameters:
    -----------
    start, end : Sequence[float]
        Endpoint atom centers (x, y, z)

    order : int
        Bond order 1, 2 or 3

    radius : float
        Radius of every strand

    offset : float
        Lateral distance of the outer strands from the bond axis

    Returns:
    --------
    List[CylinderDescriptor]
        `order` cylinders sharing orientation and length, or [] for a
        degenerate (zero-length) bond or an unsupported order

    Example:
    --------
    >>> cylinders = bond_geometry((0, 0, 0), (1.5, 0, 0), order=3)
    >>> [tuple(round(v, 3) + 0.0 for v in c.position) for c in cylinders]
    [(0.75, 0.0, 0.0), (0.75, -0.15, 0.0), (0.75, 0.15, 0.0)]
    """
    p0 = as_vector(start)
    p1 = as_vector(end)
    diff = p1 - p0
    length = float(np.linalg.norm(diff))

    if not np.isfinite(length) or length <= DEGENERATE_LENGTH:
        logger.debug("Bond %s is degenerate (length %.3g), no cylinders", key, length)
        return []

    if order not in (1, 2, 3):
        logger.debug("Bond %s has unsupported order %r, no cylinders", key, order)
        return []

    midpoint = (p0 + p1) / 2
    orientation = quaternion_from_unit_vectors(CANONICAL_AXIS, diff / length)
    side = lateral_axis(orientation) * offset

    if order == 1:
        centers = [midpoint]
    elif order == 2:
        centers = [midpoint + side, midpoint - side]
    else:
        centers = [midpoint, midpoint + side, midpoint - side]

    q = as_point(orientation)
    return [
        CylinderDescriptor(
            position=as_point(center),
            orientation=q,
            length=length,
            radius=radius,
            color=color,
            key=key,
        )
        for center in centers
    ]
