# app/components - Reusable UI components
from .lewis_viewer import render_lewis_viewer, selected_atom_id
from .model_viewer import create_3d_model, render_3d_model
from .metrics_panel import render_properties_panel, atoms_table
from .molecule_card import render_molecule_header, render_description

__all__ = [
    'render_lewis_viewer',
    'selected_atom_id',
    'create_3d_model',
    'render_3d_model',
    'render_properties_panel',
    'atoms_table',
    'render_molecule_header',
    'render_description',
]
