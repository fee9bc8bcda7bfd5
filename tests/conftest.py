# tests/conftest.py
"""
Shared fixtures: sample molecules, atom/bond factories and a fake
google-genai client.
"""

import json
import sys
from pathlib import Path
from types import SimpleNamespace

import matplotlib
import pytest

matplotlib.use('Agg')

# Project root (molcraft, api) and app directory (config, services)
ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(ROOT))
sys.path.insert(0, str(ROOT / 'app'))

from molcraft.model import Atom, Bond
from molcraft.samples import SAMPLE_PAYLOADS, get_sample, sample_formulas


def make_planar_atoms(points, element='C'):
    """Atoms with ids 0..n-1 at the given raw 2D points."""
    return [Atom(id=i, element=element, x2d=x, y2d=y) for i, (x, y) in enumerate(points)]


def make_chain_bonds(n, order=1):
    """Bonds 0-1, 1-2, ..., (n-2)-(n-1)."""
    return [Bond(source=i, target=i + 1, order=order) for i in range(n - 1)]


@pytest.fixture
def water_scenario():
    """O at the origin, H at (1, 0) and (-0.5, 0.8); two single bonds."""
    atoms = [
        Atom(id=0, element='O', x2d=0.0, y2d=0.0),
        Atom(id=1, element='H', x2d=1.0, y2d=0.0),
        Atom(id=2, element='H', x2d=-0.5, y2d=0.8),
    ]
    bonds = [Bond(0, 1, 1), Bond(0, 2, 1)]
    return atoms, bonds


@pytest.fixture
def water():
    return get_sample('H2O')


@pytest.fixture
def hcn():
    return get_sample('HCN')


@pytest.fixture
def ammonium():
    return get_sample('NH4+')


@pytest.fixture
def all_samples():
    return [get_sample(formula) for formula in sample_formulas()]


@pytest.fixture
def water_payload():
    return json.loads(json.dumps(SAMPLE_PAYLOADS['H2O']))


class FakeModels:
    """Stands in for `genai.Client().models`."""

    def __init__(self, text=None, error=None):
        self.text = text
        self.error = error
        self.calls = []

    def generate_content(self, model, contents, config=None):
        self.calls.append(dict(model=model, contents=contents, config=config))
        if self.error is not None:
            raise self.error
        return SimpleNamespace(text=self.text)


class FakeGenaiClient:
    def __init__(self, text=None, error=None):
        self.models = FakeModels(text=text, error=error)


@pytest.fixture
def fake_client_factory():
    """Build a fake client answering with `text` (or raising `error`)."""
    return FakeGenaiClient
