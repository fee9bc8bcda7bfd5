# molcraft/spatial - 3D ball-and-stick geometry
"""
SPATIAL: Oriented Bond Cylinders and Atom Spheres
=================================================

    from molcraft.spatial import bond_geometry, build_spatial_scene

    cylinders = bond_geometry(start, end, order=2)
    scene = build_spatial_scene(molecule.atoms, molecule.bonds)
"""

from .bonds import (
    bond_geometry,
    lateral_axis,
    CylinderDescriptor,
    OrientedBondGeometry,
    CANONICAL_AXIS,
    REFERENCE_AXIS,
    BOND_RADIUS,
    BOND_LATERAL_OFFSET,
)
from .scene import build_spatial_scene, SpherePlacement, SpatialScene, ATOM_SCALE

__all__ = [
    'bond_geometry',
    'lateral_axis',
    'CylinderDescriptor',
    'OrientedBondGeometry',
    'CANONICAL_AXIS',
    'REFERENCE_AXIS',
    'BOND_RADIUS',
    'BOND_LATERAL_OFFSET',
    'build_spatial_scene',
    'SpherePlacement',
    'SpatialScene',
    'ATOM_SCALE',
]
