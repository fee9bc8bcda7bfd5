# molcraft/model.py
"""
MOLECULE MODEL: Atom, Bond and MoleculeRecord
=============================================

PURPOSE:
--------
This module defines the immutable input records consumed by both geometry
engines:
- Atom: an element with a raw 2D position, a raw 3D position, a lone-pair
  count and a formal charge
- Bond: an ordered pair of atom ids with a bond order (1, 2 or 3)
- MoleculeRecord: the full record returned by the data provider

The raw coordinates come from an external generator and can be on any scale.
Nothing here rescales them; that is the job of the planar layout engine.

ID RESOLUTION:
--------------
Bond endpoints reference atoms by id. Instead of trusting that an id equals
the atom's position in the list, bonds are resolved through an explicit
id -> Atom index. Bonds that cannot be resolved (unknown id, unsupported
order) are skipped and reported as data-quality warnings, never raised.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Sequence, Tuple

import numpy as np

logger = logging.getLogger(__name__)

SUPPORTED_BOND_ORDERS = (1, 2, 3)


@dataclass(frozen=True)
class Atom:
    """
    An atom as delivered by the data provider.

    Parameters:
    -----------
    id : int
        Identifier, unique within a molecule and shared by the 2D and 3D views
        (used for hover/selection correlation)

    element : str
        Element symbol ("H", "C", "Cl", ...)

    x2d, y2d : float
        Raw diagram coordinates (arbitrary scale)

    x3d, y3d, z3d : float
        Raw spatial coordinates (bond lengths roughly 1.5 units)

    lone_pairs : int
        Number of non-bonding electron pairs (>= 0)

    charge : int
        Formal charge (negative, zero or positive)
    """
    id: int
    element: str
    x2d: float = 0.0
    y2d: float = 0.0
    x3d: float = 0.0
    y3d: float = 0.0
    z3d: float = 0.0
    lone_pairs: int = 0
    charge: int = 0

    @property
    def position_2d(self) -> np.ndarray:
        return np.array([self.x2d, self.y2d], dtype=float)

    @property
    def position_3d(self) -> np.ndarray:
        return np.array([self.x3d, self.y3d, self.z3d], dtype=float)

    @property
    def is_hydrogen(self) -> bool:
        return self.element.upper() == 'H'


@dataclass(frozen=True)
class Bond:
    """A bond between atoms `source` and `target` with order 1, 2 or 3."""
    source: int
    target: int
    order: int = 1


@dataclass(frozen=True)
class ResolvedBond:
    """
    A bond whose endpoints were found in the atom index.

    `index` is the bond's position in the record's bond list and serves as a
    stable key for renderers.
    """
    index: int
    bond: Bond
    start: Atom
    end: Atom

    @property
    def order(self) -> int:
        return self.bond.order


@dataclass(frozen=True)
class MoleculeRecord:
    """
    Complete molecule description (the data provider's output shape).

    Only `atoms` and `bonds` feed the geometry engines. The descriptive
    fields are shown in the presentation shell as-is.
    """
    formula: str
    name: str
    atoms: Tuple[Atom, ...] = field(default_factory=tuple)
    bonds: Tuple[Bond, ...] = field(default_factory=tuple)
    molecular_geometry: str = ""
    description: str = ""
    hybridization: str = ""
    resonance_info: str = ""

    @property
    def n_atoms(self) -> int:
        return len(self.atoms)

    @property
    def n_bonds(self) -> int:
        return len(self.bonds)

    @property
    def total_lone_pairs(self) -> int:
        return sum(atom.lone_pairs for atom in self.atoms)

    @property
    def net_charge(self) -> int:
        return sum(atom.charge for atom in self.atoms)


def atom_index(atoms: Sequence[Atom]) -> Dict[int, Atom]:
    """
    Build the id -> Atom lookup used to resolve bond endpoints.

    If two atoms share an id, the first one wins and the duplicate is logged.
    """
    index: Dict[int, Atom] = {}
    for atom in atoms:
        if atom.id in index:
            logger.warning(
                "Duplicate atom id %d (%s); keeping the first occurrence",
                atom.id, atom.element,
            )
            continue
        index[atom.id] = atom
    return index


def resolve_bonds(
    atoms: Sequence[Atom],
    bonds: Sequence[Bond],
) -> Tuple[List[ResolvedBond], List[Bond]]:
    """
    Resolve bond endpoints against the atom ids.

    Parameters:
    -----------
    atoms : Sequence[Atom]
        Atoms of the molecule

    bonds : Sequence[Bond]
        Bonds referencing atom ids

    Returns:
    --------
    resolved : List[ResolvedBond]
        Bonds with both endpoints found and a supported order, in input order

    skipped : List[Bond]
        Bonds that were dropped (unknown endpoint id or unsupported order)

    Notes:
    ------
    Skipping is the whole error policy: a malformed bond never aborts a
    render. Each skipped bond is logged at WARNING level.
    """
    index = atom_index(atoms)
    resolved: List[ResolvedBond] = []
    skipped: List[Bond] = []

    for i, bond in enumerate(bonds):
        start = index.get(bond.source)
        end = index.get(bond.target)
        if start is None or end is None:
            logger.warning(
                "Skipping bond %d (%d-%d): endpoint id not found among %d atoms",
                i, bond.source, bond.target, len(index),
            )
            skipped.append(bond)
            continue
        if bond.order not in SUPPORTED_BOND_ORDERS:
            logger.warning(
                "Skipping bond %d (%d-%d): unsupported bond order %r",
                i, bond.source, bond.target, bond.order,
            )
            skipped.append(bond)
            continue
        resolved.append(ResolvedBond(index=i, bond=bond, start=start, end=end))

    return resolved, skipped


def finite_atoms(atoms: Sequence[Atom], view: str = '2d') -> List[Atom]:
    """
    Atoms whose `view` position ('2d' or '3d') is free of NaN and Infinity.

    Any other atom is skipped with a WARNING; bonds to it then fail to
    resolve and are skipped too.
    """
    kept: List[Atom] = []
    for atom in atoms:
        position = atom.position_2d if view == '2d' else atom.position_3d
        if not np.all(np.isfinite(position)):
            logger.warning(
                "Skipping atom %d (%s): non-finite %s position %s",
                atom.id, atom.element, view, position.tolist(),
            )
            continue
        kept.append(atom)
    return kept
