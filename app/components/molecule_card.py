# app/components/molecule_card.py
"""
Molecule header and description components.
"""

import streamlit as st
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from molcraft.model import MoleculeRecord


def render_molecule_header(record: MoleculeRecord) -> None:
    """Formula, name and badges (geometry, hybridization, bond count)."""
    col1, col2 = st.columns([2, 3])
    with col1:
        st.markdown(f"## `{record.formula}`")
        st.markdown(f"**{record.name}**")
    with col2:
        badges = []
        if record.molecular_geometry:
            badges.append(f":violet-background[{record.molecular_geometry}]")
        if record.hybridization:
            badges.append(f":green-background[{record.hybridization} Hybridization]")
        badges.append(f":orange-background[{record.n_bonds} Bonds]")
        st.markdown(" ".join(badges))


def render_description(record: MoleculeRecord) -> None:
    """Description text plus the resonance note when there is one."""
    st.markdown("#### ℹ️ Description")
    st.write(record.description or "No description available.")
    if record.resonance_info:
        st.info(f"**Resonance Structures**\n\n{record.resonance_info}")
