# app/state/session.py
"""
Session state management for Streamlit.

Provides typed accessors for session state to avoid
scattered st.session_state['key'] calls throughout the app.
"""

import streamlit as st
from typing import Optional
from dataclasses import dataclass

from molcraft.model import MoleculeRecord

from config import CONFIG
from services.molecule_service import RequestGate


@dataclass
class ViewOptions:
    """Toggles shared by the 2D and 3D viewers."""
    show_lone_pairs: bool = CONFIG.default_show_lone_pairs
    show_charges: bool = CONFIG.default_show_charges
    show_labels_3d: bool = CONFIG.default_show_labels_3d
    spin: bool = CONFIG.default_spin


# ============================================================================
# Formula / Molecule State
# ============================================================================

def get_formula() -> str:
    """Current text of the formula input."""
    return st.session_state.get('formula', '')


def set_formula(formula: str) -> None:
    """Set the formula input (e.g. from an example button)."""
    st.session_state.formula = formula


def get_molecule() -> Optional[MoleculeRecord]:
    """Most recently generated molecule, if any."""
    return st.session_state.get('molecule', None)


def set_molecule(record: MoleculeRecord) -> None:
    """Store a freshly generated molecule and reset per-molecule UI state."""
    st.session_state.molecule = record
    clear_hovered_atom()


def clear_molecule() -> None:
    """Drop the current molecule (a new submission starts)."""
    if 'molecule' in st.session_state:
        del st.session_state.molecule
    clear_hovered_atom()


# ============================================================================
# Error State
# ============================================================================

def get_error() -> Optional[str]:
    return st.session_state.get('error', None)


def set_error(message: Optional[str]) -> None:
    st.session_state.error = message


# ============================================================================
# View Options
# ============================================================================

def get_view_options() -> ViewOptions:
    """Get the current view toggles from session state."""
    if 'view_options' not in st.session_state:
        st.session_state.view_options = ViewOptions()
    return st.session_state.view_options


def update_view_options(**kwargs) -> ViewOptions:
    """Update specific toggles."""
    options = get_view_options()
    for key, value in kwargs.items():
        if hasattr(options, key):
            setattr(options, key, value)
    st.session_state.view_options = options
    return options


# ============================================================================
# Hover / Selection
# ============================================================================

def get_hovered_atom() -> Optional[int]:
    """Atom id picked in the Lewis diagram."""
    return st.session_state.get('hovered_atom', None)


def set_hovered_atom(atom_id: Optional[int]) -> None:
    st.session_state.hovered_atom = atom_id


def clear_hovered_atom() -> None:
    if 'hovered_atom' in st.session_state:
        del st.session_state.hovered_atom


# ============================================================================
# In-flight Request
# ============================================================================

def get_request_gate() -> RequestGate:
    """Per-session gate enforcing one outstanding generation request."""
    if 'request_gate' not in st.session_state:
        st.session_state.request_gate = RequestGate()
    return st.session_state.request_gate


# ============================================================================
# Utility
# ============================================================================

def clear_all() -> None:
    """Clear all session state."""
    for key in list(st.session_state.keys()):
        del st.session_state[key]
