# molcraft/planar - 2D Lewis diagram geometry
"""
PLANAR: Lewis Structure Layout
==============================

    from molcraft.planar import layout, build_planar_scene
    from molcraft.scene import flatten

    result = layout(molecule.atoms, molecule.bonds)
    primitives = flatten(build_planar_scene(result))
"""

from .layout import (
    layout,
    compute_scale,
    mean_bond_length,
    NormalizedAtom,
    PlanarLayout,
    ViewFrame,
    DEFAULT_FRAME,
    TARGET_BOND_LENGTH,
    DEFAULT_SCALE,
    FRAME_PADDING,
)
from .decorations import (
    bond_segments,
    lone_pair_markers,
    lone_pair_dots,
    charge_badge,
    atom_radius,
    LonePairMarker,
    ChargeBadge,
    MAX_DECORATION_RADIUS,
)
from .scene import build_planar_scene

__all__ = [
    'layout',
    'compute_scale',
    'mean_bond_length',
    'NormalizedAtom',
    'PlanarLayout',
    'ViewFrame',
    'DEFAULT_FRAME',
    'TARGET_BOND_LENGTH',
    'DEFAULT_SCALE',
    'FRAME_PADDING',
    'bond_segments',
    'lone_pair_markers',
    'lone_pair_dots',
    'charge_badge',
    'atom_radius',
    'LonePairMarker',
    'ChargeBadge',
    'MAX_DECORATION_RADIUS',
    'build_planar_scene',
]
