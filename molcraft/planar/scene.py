# molcraft/planar/scene.py
"""
Build the 2D scene tree for a laid-out molecule.

Tree shape:

    lewis
      ├── bonds            (segments, world coordinates)
      ├── atom-0           (translated to atom 0)
      │     ├── Circle     background disc, hides bond ends
      │     ├── Text       element symbol
      │     ├── Circle*    lone-pair dots        (if shown)
      │     └── Circle+Text charge badge         (if shown, charge != 0)
      └── atom-1 ...

Bonds are drawn first so atom discs sit on top of them.
"""

from typing import List, Optional

from ..elements import element_style
from ..scene import Circle, SceneGroup, Text, Transform
from .decorations import atom_radius, bond_segments, charge_badge, lone_pair_dots
from .layout import NormalizedAtom, PlanarLayout

ATOM_FILL = '#ffffff'
LABEL_COLOR = '#0f172a'


def atom_group_key(atom_id: int) -> str:
    return f"atom-{atom_id}"


def _atom_children(
    normalized: NormalizedAtom,
    show_lone_pairs: bool,
    show_charges: bool,
    highlight: bool,
) -> List:
    atom = normalized.atom
    key = atom_group_key(atom.id)
    radius = atom_radius(atom.element)
    style = element_style(atom.element)

    children = [
        Circle(
            center=(0.0, 0.0),
            radius=radius,
            fill=ATOM_FILL,
            stroke='#6366f1' if highlight else style.color,
            stroke_width=2.0,
            role='atom',
            key=key,
        ),
        Text(
            position=(0.0, 0.0),
            text=atom.element,
            color=LABEL_COLOR,
            size=12.0 if atom.is_hydrogen else 14.0,
            key=key,
        ),
    ]

    if show_lone_pairs:
        children.extend(lone_pair_dots(atom.lone_pairs, radius, key=key))

    if show_charges:
        badge = charge_badge(atom.charge, radius)
        if badge is not None:
            children.extend(badge.primitives(key=key))

    return children


def build_planar_scene(
    result: PlanarLayout,
    show_lone_pairs: bool = True,
    show_charges: bool = True,
    highlight_atom: Optional[int] = None,
) -> SceneGroup:
    """
    Compose the Lewis diagram as a scene tree.

    Parameters:
    -----------
    result : PlanarLayout
        Output of `layout()`

    show_lone_pairs : bool
        Emit lone-pair dots

    show_charges : bool
        Emit charge badges

    highlight_atom : int
        Atom id drawn with a highlighted outline (hover/selection), or None

    Returns:
    --------
    SceneGroup
        Root group keyed "lewis"
    """
    # First atom wins on duplicate ids, as in model.atom_index
    positions = {}
    for normalized in result.atoms:
        positions.setdefault(normalized.id, (normalized.x, normalized.y))

    segments = []
    for resolved in result.bonds:
        segments.extend(bond_segments(
            positions[resolved.start.id],
            positions[resolved.end.id],
            resolved.order,
            key=f"bond-{resolved.index}",
        ))

    atom_groups = [
        SceneGroup(
            key=atom_group_key(normalized.id),
            transform=Transform(translation=(normalized.x, normalized.y)),
            children=tuple(_atom_children(
                normalized, show_lone_pairs, show_charges, normalized.id == highlight_atom,
            )),
        )
        for normalized in result.atoms
    ]

    return SceneGroup(
        key='lewis',
        children=(SceneGroup(key='bonds', children=tuple(segments)), *atom_groups),
    )
