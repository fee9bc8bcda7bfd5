# molcraft/samples.py
"""
Built-in sample molecules.

Hand-made records in the provider's wire shape. They back the offline
provider, the demos and the tests. 3D bond lengths are about 1.5 units,
matching what the generative provider is asked for.
"""

from typing import Dict, List

from .model import MoleculeRecord
from .schema import parse_molecule

_T = 0.866  # 1.5 / sqrt(3), tetrahedral vertex component


SAMPLE_PAYLOADS: Dict[str, dict] = {
    'H2O': {
        'formula': 'H2O',
        'name': 'Water',
        'description': 'A bent molecule with two lone pairs on oxygen.',
        'molecularGeometry': 'Bent',
        'hybridization': 'sp3',
        'resonanceInfo': '',
        'atoms': [
            {'id': 0, 'element': 'O', 'x2d': 0.0, 'y2d': 0.0,
             'x3d': 0.0, 'y3d': 0.0, 'z3d': 0.0, 'lonePairs': 2, 'charge': 0},
            {'id': 1, 'element': 'H', 'x2d': -0.8, 'y2d': 0.6,
             'x3d': -1.186, 'y3d': -0.918, 'z3d': 0.0, 'lonePairs': 0, 'charge': 0},
            {'id': 2, 'element': 'H', 'x2d': 0.8, 'y2d': 0.6,
             'x3d': 1.186, 'y3d': -0.918, 'z3d': 0.0, 'lonePairs': 0, 'charge': 0},
        ],
        'bonds': [
            {'source': 0, 'target': 1, 'order': 1},
            {'source': 0, 'target': 2, 'order': 1},
        ],
    },
    'CO2': {
        'formula': 'CO2',
        'name': 'Carbon dioxide',
        'description': 'A linear molecule with two C=O double bonds.',
        'molecularGeometry': 'Linear',
        'hybridization': 'sp',
        'resonanceInfo': 'Minor resonance forms place a triple bond on one oxygen.',
        'atoms': [
            {'id': 0, 'element': 'C', 'x2d': 0.0, 'y2d': 0.0,
             'x3d': 0.0, 'y3d': 0.0, 'z3d': 0.0, 'lonePairs': 0, 'charge': 0},
            {'id': 1, 'element': 'O', 'x2d': -1.0, 'y2d': 0.0,
             'x3d': -1.5, 'y3d': 0.0, 'z3d': 0.0, 'lonePairs': 2, 'charge': 0},
            {'id': 2, 'element': 'O', 'x2d': 1.0, 'y2d': 0.0,
             'x3d': 1.5, 'y3d': 0.0, 'z3d': 0.0, 'lonePairs': 2, 'charge': 0},
        ],
        'bonds': [
            {'source': 0, 'target': 1, 'order': 2},
            {'source': 0, 'target': 2, 'order': 2},
        ],
    },
    'HCN': {
        'formula': 'HCN',
        'name': 'Hydrogen cyanide',
        'description': 'A linear molecule with a C-N triple bond.',
        'molecularGeometry': 'Linear',
        'hybridization': 'sp',
        'resonanceInfo': '',
        'atoms': [
            {'id': 0, 'element': 'H', 'x2d': -1.0, 'y2d': 0.0,
             'x3d': -1.5, 'y3d': 0.0, 'z3d': 0.0, 'lonePairs': 0, 'charge': 0},
            {'id': 1, 'element': 'C', 'x2d': 0.0, 'y2d': 0.0,
             'x3d': 0.0, 'y3d': 0.0, 'z3d': 0.0, 'lonePairs': 0, 'charge': 0},
            {'id': 2, 'element': 'N', 'x2d': 1.0, 'y2d': 0.0,
             'x3d': 1.5, 'y3d': 0.0, 'z3d': 0.0, 'lonePairs': 1, 'charge': 0},
        ],
        'bonds': [
            {'source': 0, 'target': 1, 'order': 1},
            {'source': 1, 'target': 2, 'order': 3},
        ],
    },
    'NH4+': {
        'formula': 'NH4+',
        'name': 'Ammonium',
        'description': 'A tetrahedral cation; the positive charge sits on nitrogen.',
        'molecularGeometry': 'Tetrahedral',
        'hybridization': 'sp3',
        'resonanceInfo': '',
        'atoms': [
            {'id': 0, 'element': 'N', 'x2d': 0.0, 'y2d': 0.0,
             'x3d': 0.0, 'y3d': 0.0, 'z3d': 0.0, 'lonePairs': 0, 'charge': 1},
            {'id': 1, 'element': 'H', 'x2d': 0.0, 'y2d': -1.0,
             'x3d': _T, 'y3d': _T, 'z3d': _T, 'lonePairs': 0, 'charge': 0},
            {'id': 2, 'element': 'H', 'x2d': 1.0, 'y2d': 0.0,
             'x3d': -_T, 'y3d': -_T, 'z3d': _T, 'lonePairs': 0, 'charge': 0},
            {'id': 3, 'element': 'H', 'x2d': 0.0, 'y2d': 1.0,
             'x3d': -_T, 'y3d': _T, 'z3d': -_T, 'lonePairs': 0, 'charge': 0},
            {'id': 4, 'element': 'H', 'x2d': -1.0, 'y2d': 0.0,
             'x3d': _T, 'y3d': -_T, 'z3d': -_T, 'lonePairs': 0, 'charge': 0},
        ],
        'bonds': [
            {'source': 0, 'target': 1, 'order': 1},
            {'source': 0, 'target': 2, 'order': 1},
            {'source': 0, 'target': 3, 'order': 1},
            {'source': 0, 'target': 4, 'order': 1},
        ],
    },
    'C2H4': {
        'formula': 'C2H4',
        'name': 'Ethylene',
        'description': 'A planar molecule with a C=C double bond.',
        'molecularGeometry': 'Trigonal planar',
        'hybridization': 'sp2',
        'resonanceInfo': '',
        'atoms': [
            {'id': 0, 'element': 'C', 'x2d': -0.5, 'y2d': 0.0,
             'x3d': -0.75, 'y3d': 0.0, 'z3d': 0.0, 'lonePairs': 0, 'charge': 0},
            {'id': 1, 'element': 'C', 'x2d': 0.5, 'y2d': 0.0,
             'x3d': 0.75, 'y3d': 0.0, 'z3d': 0.0, 'lonePairs': 0, 'charge': 0},
            {'id': 2, 'element': 'H', 'x2d': -1.0, 'y2d': -0.85,
             'x3d': -1.5, 'y3d': 1.3, 'z3d': 0.0, 'lonePairs': 0, 'charge': 0},
            {'id': 3, 'element': 'H', 'x2d': -1.0, 'y2d': 0.85,
             'x3d': -1.5, 'y3d': -1.3, 'z3d': 0.0, 'lonePairs': 0, 'charge': 0},
            {'id': 4, 'element': 'H', 'x2d': 1.0, 'y2d': -0.85,
             'x3d': 1.5, 'y3d': 1.3, 'z3d': 0.0, 'lonePairs': 0, 'charge': 0},
            {'id': 5, 'element': 'H', 'x2d': 1.0, 'y2d': 0.85,
             'x3d': 1.5, 'y3d': -1.3, 'z3d': 0.0, 'lonePairs': 0, 'charge': 0},
        ],
        'bonds': [
            {'source': 0, 'target': 1, 'order': 2},
            {'source': 0, 'target': 2, 'order': 1},
            {'source': 0, 'target': 3, 'order': 1},
            {'source': 1, 'target': 4, 'order': 1},
            {'source': 1, 'target': 5, 'order': 1},
        ],
    },
}


def sample_formulas() -> List[str]:
    return list(SAMPLE_PAYLOADS)


def get_sample(formula: str) -> MoleculeRecord:
    """
    Sample record by formula (case-insensitive).

    Raises:
    -------
    KeyError
        If no sample exists for `formula`
    """
    for key, payload in SAMPLE_PAYLOADS.items():
        if key.upper() == formula.strip().upper():
            return parse_molecule(payload)
    raise KeyError(formula)
