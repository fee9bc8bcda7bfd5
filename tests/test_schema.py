# tests/test_schema.py
"""
SCHEMA TESTS: Wire Payload <-> MoleculeRecord
"""

import json

import pytest

from molcraft.model import Atom, Bond
from molcraft.schema import (
    MoleculeFormatError,
    dump_molecule,
    load_molecule,
    molecule_to_payload,
    parse_molecule,
)


class TestParse:

    def test_parse_sample_payload(self, water_payload):
        record = parse_molecule(water_payload)

        assert record.formula == 'H2O'
        assert record.molecular_geometry == 'Bent'
        assert record.atoms[0] == Atom(
            id=0, element='O', x2d=0.0, y2d=0.0, x3d=0.0, y3d=0.0, z3d=0.0, lone_pairs=2, charge=0,
        )
        assert record.bonds == (Bond(0, 1, 1), Bond(0, 2, 1))

    def test_parse_json_text(self, water_payload):
        record = parse_molecule(json.dumps(water_payload))
        assert record.n_atoms == 3

    def test_optional_strings_default_empty(self, water_payload):
        for key in ('description', 'hybridization', 'resonanceInfo'):
            del water_payload[key]

        record = parse_molecule(water_payload)

        assert record.description == ""
        assert record.hybridization == ""
        assert record.resonance_info == ""

    @pytest.mark.parametrize("missing", ['formula', 'name', 'atoms', 'bonds', 'molecularGeometry'])
    def test_missing_required_field(self, water_payload, missing):
        del water_payload[missing]
        with pytest.raises(MoleculeFormatError):
            parse_molecule(water_payload)

    def test_missing_atom_field(self, water_payload):
        del water_payload['atoms'][1]['lonePairs']
        with pytest.raises(MoleculeFormatError):
            parse_molecule(water_payload)

    def test_invalid_json(self):
        with pytest.raises(MoleculeFormatError):
            parse_molecule('{"formula": "H2O", ')

    def test_format_error_is_value_error(self):
        assert issubclass(MoleculeFormatError, ValueError)

    @pytest.mark.parametrize("field", ['x2d', 'y2d', 'x3d', 'z3d'])
    @pytest.mark.parametrize("value", [float('nan'), float('inf'), float('-inf')])
    def test_non_finite_coordinate_rejected(self, water_payload, field, value):
        water_payload['atoms'][1][field] = value
        with pytest.raises(MoleculeFormatError):
            parse_molecule(water_payload)

    def test_non_finite_literal_in_json_text_rejected(self, water_payload):
        text = json.dumps(water_payload).replace('"y3d": 0.0', '"y3d": Infinity', 1)
        assert 'Infinity' in text
        with pytest.raises(MoleculeFormatError):
            parse_molecule(text)

    def test_out_of_range_bond_is_accepted(self, water_payload):
        # Dangling bonds are a rendering concern (skipped there), not a schema one
        water_payload['bonds'].append({'source': 0, 'target': 9, 'order': 1})
        assert parse_molecule(water_payload).n_bonds == 3


class TestSerialize:

    def test_payload_uses_camel_case(self, water):
        payload = molecule_to_payload(water)

        assert 'molecularGeometry' in payload
        assert 'resonanceInfo' in payload
        assert 'lonePairs' in payload['atoms'][0]

    def test_payload_parses_back(self, all_samples):
        for record in all_samples:
            assert parse_molecule(molecule_to_payload(record)) == record

    def test_load_from_file(self, tmp_path, hcn):
        path = tmp_path / 'hcn.json'
        path.write_text(dump_molecule(hcn), encoding='utf-8')

        assert load_molecule(path) == hcn
