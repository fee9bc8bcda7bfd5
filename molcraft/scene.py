# molcraft/scene.py
"""
SCENE DESCRIPTION TREE
======================

PURPOSE:
--------
Both engines describe what to draw as a small tree:

    SceneGroup (local transform)
      ├── SceneGroup (local transform)
      │     ├── primitive
      │     └── primitive
      └── primitive

A renderer never walks atoms or bonds directly. It calls `flatten(root)`,
which composes the group transforms and returns every primitive already
placed in world space, in draw order (parents before children, siblings in
insertion order).

2D trees only use translations. 3D trees may also carry a rotation (the
spin applied to the whole molecule sits on the root group).

Primitives implement `transformed(transform)` and return a world-space copy.
The 2D primitives live here; the 3D ones (spheres, cylinders) live beside
the spatial engine.
"""

from dataclasses import dataclass, field, replace
from typing import Any, Iterator, List, Optional, Tuple

import numpy as np

from .geometry import as_vector, quaternion_multiply, rotate_vector

Point = Tuple[float, ...]


def as_point(values) -> Point:
    return tuple(float(v) for v in values)


@dataclass(frozen=True)
class Transform:
    """
    Rigid transform: rotate (3D only), then translate.

    Parameters:
    -----------
    translation : Optional[Point]
        Offset added after rotation. None means no offset.

    rotation : Optional[Point]
        Quaternion (x, y, z, w). None means no rotation.
    """
    translation: Optional[Point] = None
    rotation: Optional[Point] = None

    def apply(self, point) -> np.ndarray:
        p = as_vector(point)
        if self.rotation is not None:
            p = rotate_vector(self.rotation, p)
        if self.translation is not None:
            p = p + as_vector(self.translation)
        return p

    def apply_rotation(self, orientation) -> Optional[Point]:
        """Compose this transform's rotation with a child orientation."""
        if self.rotation is None:
            return orientation
        if orientation is None:
            return self.rotation
        return as_point(quaternion_multiply(self.rotation, orientation))

    def compose(self, child: 'Transform') -> 'Transform':
        """Transform equivalent to applying `child` first, then `self`."""
        if child.translation is None:
            translation = self.translation
        else:
            translation = as_point(self.apply(child.translation))
        return Transform(translation=translation, rotation=self.apply_rotation(child.rotation))


IDENTITY = Transform()


@dataclass(frozen=True)
class SceneGroup:
    """A node of the scene tree: local transform plus ordered children."""
    key: str
    transform: Transform = IDENTITY
    children: Tuple[Any, ...] = field(default_factory=tuple)

    def find(self, key: str) -> Optional['SceneGroup']:
        """Depth-first search for a descendant group (or self) by key."""
        if self.key == key:
            return self
        for child in self.children:
            if isinstance(child, SceneGroup):
                found = child.find(key)
                if found is not None:
                    return found
        return None


# =============================================================================
# 2D primitives
# =============================================================================

@dataclass(frozen=True)
class Circle:
    """Filled circle (atom background, lone-pair dot, charge badge)."""
    center: Point
    radius: float
    fill: str
    stroke: Optional[str] = None
    stroke_width: float = 0.0
    role: str = 'atom'
    key: Optional[str] = None

    def transformed(self, transform: Transform) -> 'Circle':
        return replace(self, center=as_point(transform.apply(self.center)))


@dataclass(frozen=True)
class Segment:
    """Straight line (one bond strand)."""
    start: Point
    end: Point
    color: str = '#334155'
    width: float = 2.5
    key: Optional[str] = None

    def transformed(self, transform: Transform) -> 'Segment':
        return replace(
            self,
            start=as_point(transform.apply(self.start)),
            end=as_point(transform.apply(self.end)),
        )

    @property
    def length(self) -> float:
        return float(np.linalg.norm(as_vector(self.end) - as_vector(self.start)))


@dataclass(frozen=True)
class Text:
    """Centered text label (element symbol, charge sign)."""
    position: Point
    text: str
    color: str = '#0f172a'
    size: float = 14.0
    bold: bool = True
    key: Optional[str] = None

    def transformed(self, transform: Transform) -> 'Text':
        return replace(self, position=as_point(transform.apply(self.position)))


# =============================================================================
# Tree walking
# =============================================================================

def iter_primitives(group: SceneGroup, parent: Transform = IDENTITY) -> Iterator[Tuple[Transform, Any]]:
    """Yield (world transform, local primitive) pairs depth-first."""
    world = parent.compose(group.transform)
    for child in group.children:
        if isinstance(child, SceneGroup):
            yield from iter_primitives(child, world)
        else:
            yield world, child


def flatten(root: SceneGroup) -> List[Any]:
    """All primitives of the tree placed in world space, in draw order."""
    return [primitive.transformed(world) for world, primitive in iter_primitives(root)]
