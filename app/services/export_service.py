# app/services/export_service.py
"""
Export service: handles file exports (JSON, SVG, HTML, text).
"""

import sys
from pathlib import Path
from typing import Optional

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from molcraft.animation import SpinState
from molcraft.model import MoleculeRecord
from molcraft.planar import layout
from molcraft.schema import dump_molecule
from molcraft.spatial import build_spatial_scene
from molcraft.viz.viz2d import lewis_svg
from molcraft.viz.viz3d import create_molecule_figure

from config import CONFIG


class ExportService:
    """Service for exporting molecule data to various formats."""
    
    @staticmethod
    def generate_molecule_json(record: MoleculeRecord) -> str:
        """
        Molecule record in the provider's wire shape (camelCase keys).
        
        Returns JSON content as a string.
        """
        return dump_molecule(record, indent=2)
    
    @staticmethod
    def generate_lewis_svg(
        record: MoleculeRecord,
        show_lone_pairs: bool = True,
        show_charges: bool = True,
    ) -> str:
        """Lewis diagram as standalone SVG text."""
        return lewis_svg(layout(record.atoms, record.bonds), show_lone_pairs, show_charges)
    
    @staticmethod
    def generate_structure_html(
        record: MoleculeRecord,
        show_labels: bool = True,
        animate: bool = True,
    ) -> str:
        """
        Interactive 3D structure as a self-contained HTML page.
        
        Plotly.js is loaded from the CDN to keep the file small.
        """
        scene = build_spatial_scene(
            record.atoms, record.bonds,
            spin=SpinState(rate=CONFIG.spin_rate),
            show_labels=show_labels,
        )
        fig = create_molecule_figure(
            scene,
            show_labels=show_labels,
            height=CONFIG.model_height,
            animate=animate,
            n_frames=CONFIG.n_spin_frames,
            fps=CONFIG.spin_fps,
        )
        fig.update_layout(title=dict(text=f"{record.formula} - {record.molecular_geometry}", font=dict(color='white')))
        return fig.to_html(include_plotlyjs='cdn', full_html=True)
    
    @staticmethod
    def generate_summary_text(record: MoleculeRecord, title: Optional[str] = None) -> str:
        """Generate a text summary of the molecule."""
        lines = [
            title or "MOLECULE SUMMARY",
            "=" * 40,
            "",
            "IDENTITY",
            f"  Formula:        {record.formula}",
            f"  Name:           {record.name}",
            f"  Geometry:       {record.molecular_geometry or 'N/A'}",
            f"  Hybridization:  {record.hybridization or 'N/A'}",
            "",
            "PROPERTIES",
            f"  Total atoms:    {record.n_atoms}",
            f"  Bonds:          {record.n_bonds}",
            f"  Lone pairs:     {record.total_lone_pairs}",
            f"  Net charge:     {record.net_charge:+d}",
        ]
        
        if record.description:
            lines += ["", "DESCRIPTION", f"  {record.description}"]
        if record.resonance_info:
            lines += ["", "RESONANCE", f"  {record.resonance_info}"]
        
        lines += ["", "ATOMS"]
        for atom in record.atoms:
            lines.append(
                f"  {atom.id:>3}  {atom.element:<3} "
                f"lone pairs {atom.lone_pairs}  charge {atom.charge:+d}"
            )
        
        return "\n".join(lines)
