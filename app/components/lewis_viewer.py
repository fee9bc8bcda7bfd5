# app/components/lewis_viewer.py
"""
2D Lewis structure viewer component.
"""

import streamlit as st
from typing import Optional
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from molcraft.model import MoleculeRecord
from molcraft.planar import layout
from molcraft.viz.viz2d import create_lewis_figure


def selected_atom_id(event) -> Optional[int]:
    """Atom id from a plotly selection event, if an atom marker was picked."""
    if not event:
        return None
    points = event.get('selection', {}).get('points', [])
    for point in points:
        atom_id = point.get('customdata')
        if isinstance(atom_id, list):
            atom_id = atom_id[0] if atom_id else None
        if atom_id is not None:
            return int(atom_id)
    return None


def render_lewis_viewer(
    record: MoleculeRecord,
    show_lone_pairs: bool = True,
    show_charges: bool = True,
    highlight_atom: Optional[int] = None,
    height: int = 480,
) -> Optional[int]:
    """
    Render the Lewis diagram and return the atom the user picked.
    
    Hovering an atom shows element, charge and lone pairs; clicking it
    highlights the atom on the next run.
    
    Parameters:
    -----------
    record : MoleculeRecord
        Molecule to draw
    show_lone_pairs, show_charges : bool
        Decoration toggles
    highlight_atom : Optional[int]
        Atom id drawn with the highlight outline
    height : int
        Figure height in pixels
    
    Returns:
    --------
    Optional[int]
        Picked atom id, or None
    """
    result = layout(record.atoms, record.bonds)
    fig = create_lewis_figure(
        result,
        show_lone_pairs=show_lone_pairs,
        show_charges=show_charges,
        highlight_atom=highlight_atom,
        height=height,
    )
    event = st.plotly_chart(
        fig,
        use_container_width=True,
        on_select='rerun',
        selection_mode='points',
        key=f"lewis-{record.formula}",
        config={'displayModeBar': False},
    )
    return selected_atom_id(event)
