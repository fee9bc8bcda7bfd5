# molcraft/viz - Visualization Tools
"""
VIZ: Renderers for Planar and Spatial Scenes
============================================

- viz2d: Lewis diagram (Plotly interactive, Matplotlib static export)
- viz3d: Ball-and-stick structure (Plotly Mesh3d)
"""

from .viz2d import create_lewis_figure, draw_lewis_structure, plot_lewis_structure, lewis_svg
from .viz3d import create_molecule_figure, plot_molecule_3d

__all__ = [
    'create_lewis_figure',
    'draw_lewis_structure',
    'plot_lewis_structure',
    'lewis_svg',
    'create_molecule_figure',
    'plot_molecule_3d',
]
