# app/services/provider.py
"""
Molecule data providers.

A provider turns a chemical formula into a MoleculeRecord:

- GeminiMoleculeProvider: asks the Gemini model for a structured JSON answer
  (Lewis coordinates, VSEPR coordinates, lone pairs, charges, bond orders)
- SampleMoleculeProvider: serves the bundled sample molecules, no network
"""

import logging
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

from google import genai
from google.genai import types

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from molcraft.model import MoleculeRecord
from molcraft.samples import get_sample
from molcraft.schema import MoleculeFormatError, parse_molecule

from config import CONFIG

logger = logging.getLogger('molcraft.app.provider')


class ProviderError(RuntimeError):
    """The external provider failed or returned unusable data."""
    pass


PROMPT_TEMPLATE = """
Analyze the molecule with the chemical formula "{formula}".
Return JSON describing its Lewis structure (2D) and VSEPR geometry (3D).

1. List every atom and how the atoms are connected.
2. Give 2D coordinates (x2d, y2d) for a clean Lewis diagram. Spread the atoms
   out so that nothing overlaps and every bond is distinct.
3. Give 3D coordinates (x3d, y3d, z3d) following VSEPR theory (e.g. 109.5
   degrees for tetrahedral). Scale them so bond lengths are about 1.5 units.
4. Give the number of lone pairs and the formal charge of each atom.
5. Give each bond order (1 = single, 2 = double, 3 = triple).
6. Give the molecular geometry name, the hybridization of the central atom
   and a short note on resonance.

Bond "source" and "target" must be the "id" of an atom in the "atoms" array
(ids are 0-based indices).
"""

_INT = {'type': 'INTEGER'}
_NUM = {'type': 'NUMBER'}
_STR = {'type': 'STRING'}

RESPONSE_SCHEMA: Dict[str, Any] = {
    'type': 'OBJECT',
    'properties': {
        'formula': _STR,
        'name': _STR,
        'description': _STR,
        'molecularGeometry': _STR,
        'hybridization': _STR,
        'resonanceInfo': _STR,
        'atoms': {
            'type': 'ARRAY',
            'items': {
                'type': 'OBJECT',
                'properties': {
                    'id': _INT,
                    'element': _STR,
                    'x2d': _NUM,
                    'y2d': _NUM,
                    'x3d': _NUM,
                    'y3d': _NUM,
                    'z3d': _NUM,
                    'lonePairs': _INT,
                    'charge': _INT,
                },
                'required': ['id', 'element', 'x2d', 'y2d', 'x3d', 'y3d', 'z3d', 'lonePairs', 'charge'],
            },
        },
        'bonds': {
            'type': 'ARRAY',
            'items': {
                'type': 'OBJECT',
                'properties': {
                    'source': {'type': 'INTEGER', 'description': 'Index of source atom'},
                    'target': {'type': 'INTEGER', 'description': 'Index of target atom'},
                    'order': {'type': 'INTEGER', 'description': '1, 2, or 3'},
                },
                'required': ['source', 'target', 'order'],
            },
        },
    },
    'required': ['formula', 'name', 'atoms', 'bonds', 'molecularGeometry'],
}


def build_prompt(formula: str) -> str:
    return PROMPT_TEMPLATE.format(formula=formula)


def read_api_key(environ: Optional[Dict[str, str]] = None) -> Optional[str]:
    """First non-empty key among CONFIG.api_key_env_vars."""
    environ = os.environ if environ is None else environ
    for name in CONFIG.api_key_env_vars:
        value = environ.get(name)
        if value:
            return value
    return None


class GeminiMoleculeProvider:
    """
    Generate molecule records with a Gemini model.

    Parameters:
    -----------
    client : Optional[genai.Client]
        Anything exposing `models.generate_content(model=, contents=, config=)`.
        Built from the environment API key when omitted.

    model : str
        Model name sent with every request
    """

    def __init__(self, client=None, model: str = CONFIG.model_name):
        if client is None:
            api_key = read_api_key()
            if api_key is None:
                raise ProviderError(
                    "No API key found. Set one of: " + ", ".join(CONFIG.api_key_env_vars)
                )
            client = genai.Client(api_key=api_key)
        self.client = client
        self.model = model

    def generate(self, formula: str) -> MoleculeRecord:
        """
        Request and validate a record for `formula`.

        Raises:
        -------
        ProviderError
            Request failed, empty answer, or answer not matching the schema
        """
        config = types.GenerateContentConfig(
            response_mime_type='application/json',
            response_schema=RESPONSE_SCHEMA,
        )
        logger.info("Requesting structure for %s from %s", formula, self.model)
        try:
            response = self.client.models.generate_content(
                model=self.model,
                contents=build_prompt(formula),
                config=config,
            )
        except Exception as e:
            raise ProviderError(f"Provider request failed: {e}") from e

        text = getattr(response, 'text', None)
        if not text:
            raise ProviderError("No data returned from provider")

        try:
            record = parse_molecule(text)
        except MoleculeFormatError as e:
            raise ProviderError(str(e)) from e

        logger.info("Received %s: %d atoms, %d bonds", record.formula, record.n_atoms, record.n_bonds)
        return record


class SampleMoleculeProvider:
    """Offline provider backed by molcraft.samples."""

    def generate(self, formula: str) -> MoleculeRecord:
        try:
            return get_sample(formula)
        except KeyError as e:
            raise ProviderError(f"No bundled sample for {formula!r}") from e


def default_provider():
    """
    Gemini when an API key is configured, bundled samples otherwise
    (or when the offline environment variable is set).
    """
    if os.environ.get(CONFIG.offline_env_var) or read_api_key() is None:
        logger.warning("No API key configured or offline mode set; using bundled samples")
        return SampleMoleculeProvider()
    return GeminiMoleculeProvider()
