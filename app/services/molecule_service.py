# app/services/molecule_service.py
"""
Molecule service: formula in, validated record out.

Wraps a provider with the UI-facing rules:
- blank formulas never reach the provider
- provider failures become one generic, retryable message (details are logged)
- at most one generation request is outstanding at a time (RequestGate)
"""

import itertools
import logging
import sys
import threading
from pathlib import Path
from typing import Optional, Tuple

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from molcraft.model import MoleculeRecord

from services.provider import ProviderError, default_provider

logger = logging.getLogger('molcraft.app.molecule_service')

GENERIC_ERROR = "Failed to generate molecule. Please check the formula or try again."
BLANK_FORMULA_ERROR = "Please enter a chemical formula."
BUSY_ERROR = "A molecule is already being generated. Please wait."


class RequestGate:
    """
    Single in-flight request rule.

    `try_begin()` hands out a token, or None while another request is
    outstanding. `finish(token)` releases the gate, and only the token that
    opened it can do so.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._counter = itertools.count(1)
        self._active: Optional[int] = None

    @property
    def in_flight(self) -> bool:
        return self._active is not None

    def try_begin(self) -> Optional[int]:
        with self._lock:
            if self._active is not None:
                return None
            token = next(self._counter)
            self._active = token
            return token

    def finish(self, token: int) -> None:
        with self._lock:
            if self._active == token:
                self._active = None


class MoleculeService:
    """Service for generating molecule records from formulas."""

    def __init__(self, provider=None):
        self.provider = provider if provider is not None else default_provider()

    def generate(self, formula: str) -> Tuple[bool, Optional[MoleculeRecord], str]:
        """
        Generate a record for `formula`.

        Returns:
        --------
        (success, record, error)
            record is None and error is a user-facing message on failure
        """
        formula = (formula or '').strip()
        if not formula:
            return False, None, BLANK_FORMULA_ERROR

        try:
            record = self.provider.generate(formula)
        except ProviderError:
            logger.error("Generation failed for %s", formula, exc_info=True)
            return False, None, GENERIC_ERROR

        return True, record, ""

    def generate_gated(
        self, formula: str, gate: RequestGate
    ) -> Tuple[bool, Optional[MoleculeRecord], str]:
        """
        `generate()` under the single in-flight rule.

        Rejected with BUSY_ERROR while another request holds the gate.
        """
        token = gate.try_begin()
        if token is None:
            return False, None, BUSY_ERROR
        try:
            return self.generate(formula)
        finally:
            gate.finish(token)
