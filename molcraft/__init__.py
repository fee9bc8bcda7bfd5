# molcraft - Molecule geometry for Lewis diagrams and VSEPR structures
"""
MOLCRAFT: Molecule Visualization Geometry
=========================================

This package turns a molecule record (atoms with raw 2D/3D positions, bonds
with order) into renderable scene descriptions:
- a Lewis diagram: normalized, framed, with lone pairs and charge badges
- a ball-and-stick structure: spheres plus oriented bond cylinders

ARCHITECTURE:
-------------
    model.py        Atom, Bond, MoleculeRecord, id-based bond resolution
    elements.py     CPK color/radius lookup
    geometry.py     Vector and quaternion primitives
    scene.py        Scene-description tree (groups, transforms, primitives)
    planar/         2D layout engine and decorations
    spatial/        3D bond cylinders and sphere placement
    animation.py    Spin state for the rotating 3D view
    schema.py       Wire-format validation (pydantic)
    samples.py      Built-in sample molecules
    viz/            plotly and matplotlib renderers
"""

from .model import Atom, Bond, MoleculeRecord, ResolvedBond, atom_index, finite_atoms, resolve_bonds
from .planar import layout, build_planar_scene
from .spatial import bond_geometry, build_spatial_scene
from .schema import parse_molecule, molecule_to_payload, MoleculeFormatError

__version__ = "0.1.0"

__all__ = [
    'Atom',
    'Bond',
    'MoleculeRecord',
    'ResolvedBond',
    'atom_index',
    'finite_atoms',
    'resolve_bonds',
    'layout',
    'build_planar_scene',
    'bond_geometry',
    'build_spatial_scene',
    'parse_molecule',
    'molecule_to_payload',
    'MoleculeFormatError',
]
