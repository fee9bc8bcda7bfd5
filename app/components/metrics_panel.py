# app/components/metrics_panel.py
"""
Molecule properties panel component.
"""

import pandas as pd
import streamlit as st
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from molcraft.model import MoleculeRecord


def atoms_table(record: MoleculeRecord) -> pd.DataFrame:
    """One row per atom: id, element, lone pairs, charge and bonded neighbours."""
    degree = {atom.id: 0 for atom in record.atoms}
    for bond in record.bonds:
        for end in (bond.source, bond.target):
            if end in degree:
                degree[end] += bond.order
    rows = [
        {
            'id': atom.id,
            'element': atom.element,
            'lone_pairs': atom.lone_pairs,
            'charge': atom.charge,
            'bond_order_sum': degree[atom.id],
        }
        for atom in record.atoms
    ]
    return pd.DataFrame(rows, columns=['id', 'element', 'lone_pairs', 'charge', 'bond_order_sum'])


def render_properties_panel(record: MoleculeRecord) -> None:
    """
    Render the properties panel (total atoms, lone pairs, net charge).
    
    Parameters:
    -----------
    record : MoleculeRecord
        Molecule being shown
    """
    st.markdown("#### Properties")
    cols = st.columns(3)
    with cols[0]:
        st.metric("Total Atoms", record.n_atoms)
    with cols[1]:
        st.metric("Lone Pairs", record.total_lone_pairs)
    with cols[2]:
        st.metric("Charge", record.net_charge)
    
    with st.expander("Atoms", expanded=False):
        st.dataframe(atoms_table(record), hide_index=True, use_container_width=True)
