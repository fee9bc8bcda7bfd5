# molcraft/spatial/scene.py
"""
Build the 3D ball-and-stick scene for a molecule.

Spheres sit at the raw 3D atom positions (the provider already scales bonds
to roughly 1.5 units); cylinders come from `bond_geometry`. The root group
carries the spin rotation, so turning the molecule never touches the
per-bond geometry.
"""

import logging
from dataclasses import dataclass, replace
from typing import List, Optional, Sequence, Tuple

from ..animation import SpinState
from ..elements import element_style
from ..model import Atom, Bond, finite_atoms, resolve_bonds
from ..scene import SceneGroup, Point, Transform, as_point, flatten
from .bonds import CylinderDescriptor, OrientedBondGeometry, bond_geometry

logger = logging.getLogger(__name__)

ATOM_SCALE = 0.4


@dataclass(frozen=True)
class SpherePlacement:
    """One atom sphere: where, how big, what color."""
    atom_id: int
    element: str
    position: Point
    radius: float
    color: str
    label: Optional[str] = None

    def transformed(self, transform: Transform) -> 'SpherePlacement':
        return replace(self, position=as_point(transform.apply(self.position)))


@dataclass(frozen=True)
class SpatialScene:
    """Spheres, per-bond cylinder sets and the scene tree built from them."""
    spheres: Tuple[SpherePlacement, ...]
    bonds: Tuple[OrientedBondGeometry, ...]
    root: SceneGroup
    spin: Optional[SpinState] = None

    @property
    def cylinders(self) -> List[CylinderDescriptor]:
        return [c for geometry in self.bonds for c in geometry.cylinders]

    def primitives(self) -> list:
        """World-space spheres and cylinders (spin applied)."""
        return flatten(self.root)


def sphere_for(atom: Atom, show_label: bool = True) -> SpherePlacement:
    style = element_style(atom.element)
    return SpherePlacement(
        atom_id=atom.id,
        element=atom.element,
        position=as_point(atom.position_3d),
        radius=style.radius * ATOM_SCALE,
        color=style.color,
        label=atom.element if show_label else None,
    )


def build_spatial_scene(
    atoms: Sequence[Atom],
    bonds: Sequence[Bond],
    spin: Optional[SpinState] = None,
    show_labels: bool = True,
) -> SpatialScene:
    """
    Compose the 3D structure.

    Parameters:
    -----------
    atoms : Sequence[Atom]
        Atoms with raw (x3d, y3d, z3d) positions; atoms with a NaN or
        infinite position are skipped (WARNING) along with their bonds

    bonds : Sequence[Bond]
        Bonds referencing atom ids; unresolvable bonds are skipped

    spin : Optional[SpinState]
        Current spin; its rotation is put on the root group

    show_labels : bool
        Attach element labels to spheres

    Returns:
    --------
    SpatialScene
    """
    atoms = finite_atoms(atoms, '3d')
    spheres = tuple(sphere_for(atom, show_labels) for atom in atoms)

    resolved, _skipped = resolve_bonds(atoms, bonds)
    geometries = []
    for item in resolved:
        key = f"bond-{item.index}"
        cylinders = bond_geometry(item.start.position_3d, item.end.position_3d, item.order, key=key)
        geometries.append(OrientedBondGeometry(
            bond_index=item.index,
            order=item.order,
            cylinders=tuple(cylinders),
        ))

    transform = Transform()
    if spin is not None:
        transform = Transform(rotation=as_point(spin.orientation()))

    root = SceneGroup(
        key='molecule',
        transform=transform,
        children=(
            SceneGroup(key='atoms', children=spheres),
            SceneGroup(key='bonds', children=tuple(c for g in geometries for c in g.cylinders)),
        ),
    )

    logger.debug(
        "Spatial scene: %d spheres, %d cylinders",
        len(spheres), sum(len(g.cylinders) for g in geometries),
    )
    return SpatialScene(spheres=spheres, bonds=tuple(geometries), root=root, spin=spin)
