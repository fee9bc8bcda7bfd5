# app/components/model_viewer.py
"""
3D model viewer component using Plotly.
"""

import plotly.graph_objects as go
import streamlit as st
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from molcraft.animation import SpinState
from molcraft.model import MoleculeRecord
from molcraft.spatial import build_spatial_scene
from molcraft.viz.viz3d import create_molecule_figure

from config import CONFIG


def create_3d_model(
    record: MoleculeRecord,
    show_labels: bool = True,
    spin: bool = True,
    height: int = 480,
) -> go.Figure:
    """
    Create the ball-and-stick figure for a molecule.
    
    Parameters:
    -----------
    record : MoleculeRecord
        Molecule to draw
    show_labels : bool
        Element labels next to the spheres
    spin : bool
        Add the slow vertical-axis spin (Play/Pause controls)
    height : int
        Figure height in pixels
    
    Returns:
    --------
    go.Figure
        Plotly figure
    """
    scene = build_spatial_scene(
        record.atoms, record.bonds,
        spin=SpinState(rate=CONFIG.spin_rate),
        show_labels=show_labels,
    )
    return create_molecule_figure(
        scene,
        show_labels=show_labels,
        height=height,
        animate=spin,
        n_frames=CONFIG.n_spin_frames,
        fps=CONFIG.spin_fps,
    )


def render_3d_model(
    record: MoleculeRecord,
    show_labels: bool = True,
    spin: bool = True,
    height: int = 480,
) -> None:
    """Render the 3D viewer into the current Streamlit container."""
    fig = create_3d_model(record, show_labels=show_labels, spin=spin, height=height)
    st.plotly_chart(fig, use_container_width=True, config={'displaylogo': False})
