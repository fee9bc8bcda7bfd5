# tests/test_spatial.py
"""
SPATIAL ENGINE TESTS: Bond Cylinders and the 3D Scene
=====================================================

Properties checked:
1. COUNT: one cylinder per bond order
2. SHARED POSE: all strands share orientation and length; their axis is
   the bond direction
3. OFFSETS: outer strands sit at +/- the lateral offset, perpendicular to
   the bond
4. DEGENERATE: coincident endpoints give no cylinders and never NaN
"""

import logging

import numpy as np
import pytest

from molcraft.animation import SpinState
from molcraft.elements import element_style
from molcraft.geometry import is_finite
from molcraft.model import Atom, Bond
from molcraft.spatial import (
    ATOM_SCALE,
    BOND_LATERAL_OFFSET,
    bond_geometry,
    build_spatial_scene,
)

DIRECTIONS = [
    (1.5, 0.0, 0.0),
    (0.0, 1.5, 0.0),
    (0.0, -1.5, 0.0),
    (0.0, 0.0, -1.5),
    (0.866, 0.866, 0.866),
]


class TestBondGeometry:

    def test_triple_bond_scenario(self):
        cylinders = bond_geometry((0.0, 0.0, 0.0), (1.5, 0.0, 0.0), order=3)

        assert len(cylinders) == 3
        mid = np.array([0.75, 0.0, 0.0])
        np.testing.assert_allclose(cylinders[0].position, mid, atol=1e-12)

        outer = [np.array(c.position) - mid for c in cylinders[1:]]
        for d in outer:
            assert np.isclose(np.linalg.norm(d), BOND_LATERAL_OFFSET)
            assert np.isclose(np.dot(d, (1.0, 0.0, 0.0)), 0.0)
        np.testing.assert_allclose(outer[0], -outer[1], atol=1e-12)

        for c in cylinders:
            assert c.length == pytest.approx(1.5)
            np.testing.assert_allclose(c.orientation, cylinders[0].orientation)

    @pytest.mark.parametrize("order", [1, 2, 3])
    @pytest.mark.parametrize("end", DIRECTIONS)
    def test_axis_follows_bond(self, order, end):
        start = np.array([0.2, -0.1, 0.3])
        end = start + np.array(end)
        cylinders = bond_geometry(start, end, order)

        assert len(cylinders) == order
        direction = (end - start) / np.linalg.norm(end - start)
        for c in cylinders:
            assert is_finite(c.position, c.orientation, c.length)
            np.testing.assert_allclose(c.axis, direction, atol=1e-9)
            a, b = c.endpoints
            assert np.isclose(np.linalg.norm(b - a), np.linalg.norm(end - start))

    def test_double_bond_has_no_center_strand(self):
        cylinders = bond_geometry((0, 0, 0), (0, 0, 1.5), order=2)
        mid = np.array([0.0, 0.0, 0.75])
        offsets = [np.linalg.norm(np.array(c.position) - mid) for c in cylinders]
        np.testing.assert_allclose(offsets, [BOND_LATERAL_OFFSET, BOND_LATERAL_OFFSET])

    def test_degenerate_bond_emits_nothing(self):
        assert bond_geometry((1.0, 1.0, 1.0), (1.0, 1.0, 1.0), order=2) == []

    def test_unsupported_order_emits_nothing(self):
        assert bond_geometry((0, 0, 0), (1.5, 0, 0), order=0) == []


class TestSpatialScene:

    def test_spheres_follow_cpk_styles(self, water):
        scene = build_spatial_scene(water.atoms, water.bonds)

        assert len(scene.spheres) == 3
        oxygen = scene.spheres[0]
        assert oxygen.color == element_style('O').color
        assert oxygen.radius == pytest.approx(element_style('O').radius * ATOM_SCALE)
        assert oxygen.label == 'O'

    def test_cylinder_count_matches_bond_orders(self, all_samples):
        for record in all_samples:
            scene = build_spatial_scene(record.atoms, record.bonds)
            assert len(scene.cylinders) == sum(b.order for b in record.bonds), record.formula

    def test_labels_can_be_hidden(self, water):
        scene = build_spatial_scene(water.atoms, water.bonds, show_labels=False)
        assert all(s.label is None for s in scene.spheres)

    def test_unresolved_bond_is_skipped(self):
        atoms = [Atom(id=0, element='C'), Atom(id=1, element='O', x3d=1.2)]
        scene = build_spatial_scene(atoms, [Bond(0, 1, 2), Bond(1, 5, 1)])
        assert [g.bond_index for g in scene.bonds] == [0]

    def test_degenerate_bond_in_scene(self):
        atoms = [Atom(id=0, element='C'), Atom(id=1, element='C')]
        scene = build_spatial_scene(atoms, [Bond(0, 1, 1)])

        assert scene.cylinders == []
        for primitive in scene.primitives():
            assert is_finite(primitive.position)

    def test_spin_rotates_world_positions(self, hcn):
        still = build_spatial_scene(hcn.atoms, hcn.bonds)
        turned = build_spatial_scene(hcn.atoms, hcn.bonds, spin=SpinState(angle=np.pi / 2))

        hydrogen_still = still.primitives()[0].position
        hydrogen_turned = turned.primitives()[0].position
        np.testing.assert_allclose(hydrogen_still, [-1.5, 0.0, 0.0])
        # Quarter turn about +Y takes -X to +Z
        np.testing.assert_allclose(hydrogen_turned, [0.0, 0.0, 1.5], atol=1e-12)

    def test_spin_keeps_bond_axes_on_bonds(self, ammonium):
        scene = build_spatial_scene(ammonium.atoms, ammonium.bonds, spin=SpinState(angle=1.0))
        primitives = scene.primitives()
        nitrogen = np.array(primitives[0].position)
        cylinders = primitives[len(ammonium.atoms):]

        for cylinder, hydrogen in zip(cylinders, primitives[1:len(ammonium.atoms)]):
            direction = np.array(hydrogen.position) - nitrogen
            direction /= np.linalg.norm(direction)
            np.testing.assert_allclose(cylinder.axis, direction, atol=1e-9)


class TestNonFiniteAtoms:

    def test_atom_with_nan_position_is_skipped(self, caplog):
        atoms = [
            Atom(id=0, element='C'),
            Atom(id=1, element='O', x3d=1.2),
            Atom(id=2, element='H', z3d=float('nan')),
        ]

        with caplog.at_level(logging.WARNING, logger='molcraft'):
            scene = build_spatial_scene(atoms, [Bond(0, 1, 2), Bond(0, 2, 1)])

        assert [s.atom_id for s in scene.spheres] == [0, 1]
        assert [g.bond_index for g in scene.bonds] == [0]
        for primitive in scene.primitives():
            assert is_finite(primitive.position)
        assert any('Skipping atom 2' in r.getMessage() for r in caplog.records)

    def test_infinite_position_with_spin(self):
        atoms = [Atom(id=0, element='N'), Atom(id=1, element='H', y3d=float('inf'))]
        scene = build_spatial_scene(atoms, [Bond(0, 1)], spin=SpinState(angle=0.7))

        assert len(scene.spheres) == 1
        assert scene.cylinders == []
        assert all(is_finite(p.position) for p in scene.primitives())
