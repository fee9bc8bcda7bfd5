# tests/test_model.py
"""
MODEL TESTS: Bond Resolution Through the Atom Index
===================================================

Bonds reference atoms by id. Unresolvable bonds (unknown id, unsupported
order) must be skipped with a warning, never raised, and the remaining
bonds keep their input position as index.
"""

import logging

import numpy as np

from molcraft.model import Atom, Bond, MoleculeRecord, atom_index, finite_atoms, resolve_bonds


def make_atoms():
    return [
        Atom(id=0, element='C', x2d=0.0, y2d=0.0, x3d=0.0, y3d=0.0, z3d=0.0, lone_pairs=0, charge=0),
        Atom(id=1, element='O', x2d=1.0, y2d=0.0, x3d=1.2, y3d=0.0, z3d=0.0, lone_pairs=2, charge=-1),
        Atom(id=2, element='H', x2d=-1.0, y2d=0.0, x3d=-1.0, y3d=0.0, z3d=0.0, lone_pairs=0, charge=1),
    ]


class TestAtom:

    def test_positions_are_float_arrays(self):
        atom = Atom(id=3, element='N', x2d=1, y2d=2, x3d=3, y3d=4, z3d=5)
        np.testing.assert_allclose(atom.position_2d, [1.0, 2.0])
        np.testing.assert_allclose(atom.position_3d, [3.0, 4.0, 5.0])
        assert atom.position_3d.dtype == float

    def test_is_hydrogen(self):
        assert Atom(id=0, element='H').is_hydrogen
        assert Atom(id=0, element='h').is_hydrogen
        assert not Atom(id=0, element='He').is_hydrogen


class TestResolveBonds:

    def test_all_valid_bonds_resolve_in_order(self):
        atoms = make_atoms()
        bonds = [Bond(0, 1, 2), Bond(0, 2, 1)]

        resolved, skipped = resolve_bonds(atoms, bonds)

        assert skipped == []
        assert [r.index for r in resolved] == [0, 1]
        assert resolved[0].start.element == 'C'
        assert resolved[0].end.element == 'O'
        assert resolved[0].order == 2

    def test_unknown_endpoint_is_skipped_and_logged(self, caplog):
        atoms = make_atoms()
        bonds = [Bond(0, 1, 1), Bond(0, 7, 1), Bond(2, 0, 1)]

        with caplog.at_level(logging.WARNING, logger='molcraft'):
            resolved, skipped = resolve_bonds(atoms, bonds)

        assert [r.index for r in resolved] == [0, 2], "Index must track input position"
        assert skipped == [Bond(0, 7, 1)]
        assert any(record.levelno == logging.WARNING for record in caplog.records)

    def test_unsupported_order_is_skipped(self, caplog):
        atoms = make_atoms()
        bonds = [Bond(0, 1, 4), Bond(0, 2, 0)]

        with caplog.at_level(logging.WARNING, logger='molcraft'):
            resolved, skipped = resolve_bonds(atoms, bonds)

        assert resolved == []
        assert len(skipped) == 2
        assert len([r for r in caplog.records if r.levelno == logging.WARNING]) == 2

    def test_ids_need_not_match_positions(self):
        atoms = [Atom(id=10, element='C'), Atom(id=20, element='N', x2d=1.0)]

        resolved, skipped = resolve_bonds(atoms, [Bond(10, 20, 3)])

        assert skipped == []
        assert resolved[0].start.id == 10
        assert resolved[0].end.id == 20

    def test_duplicate_ids_keep_first(self, caplog):
        atoms = [Atom(id=0, element='C'), Atom(id=0, element='N')]

        with caplog.at_level(logging.WARNING, logger='molcraft'):
            index = atom_index(atoms)

        assert index[0].element == 'C'
        assert caplog.records, "Duplicate id should be reported"


class TestFiniteAtoms:

    def test_views_are_checked_separately(self, caplog):
        atoms = [
            Atom(id=0, element='C'),
            Atom(id=1, element='H', x2d=float('nan')),
            Atom(id=2, element='H', z3d=float('inf')),
        ]

        with caplog.at_level(logging.WARNING, logger='molcraft'):
            planar = finite_atoms(atoms, '2d')
            spatial = finite_atoms(atoms, '3d')

        assert [a.id for a in planar] == [0, 2]
        assert [a.id for a in spatial] == [0, 1]
        assert len([r for r in caplog.records if r.levelno == logging.WARNING]) == 2

    def test_finite_atoms_pass_through(self):
        atoms = make_atoms()
        assert finite_atoms(atoms, '3d') == list(atoms)


class TestMoleculeRecord:

    def test_summary_properties(self):
        record = MoleculeRecord(
            formula='COH',
            name='test',
            atoms=tuple(make_atoms()),
            bonds=(Bond(0, 1, 2), Bond(0, 2, 1)),
        )

        assert record.n_atoms == 3
        assert record.n_bonds == 2
        assert record.total_lone_pairs == 2
        assert record.net_charge == 0

    def test_empty_record(self):
        record = MoleculeRecord(formula='', name='')
        assert record.n_atoms == 0
        assert record.total_lone_pairs == 0
        assert record.net_charge == 0
