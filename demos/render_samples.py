#!/usr/bin/env python3
"""
RENDER_SAMPLES: Lewis Diagrams and 3D Models for the Bundled Molecules
======================================================================

For every sample molecule:
1. Lay out the 2D Lewis structure (normalize, bound, pad)
2. Save it as PNG and SVG
3. Build the 3D ball-and-stick scene
4. Save it as an interactive HTML page with spin animation
5. Print a short report

No network access needed.

Run with:
    python demos/render_samples.py
"""

import numpy as np
import sys
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from molcraft.animation import SpinState
from molcraft.logging_config import setup_logging
from molcraft.planar import TARGET_BOND_LENGTH, layout
from molcraft.samples import get_sample, sample_formulas
from molcraft.spatial import build_spatial_scene
from molcraft.viz.viz2d import plot_lewis_structure, lewis_svg
from molcraft.viz.viz3d import plot_molecule_3d

OUTPUT_DIR = Path(__file__).parent.parent / 'artifacts' / 'samples'


def print_header(text: str):
    """Print a formatted section header."""
    print("\n" + "=" * 60)
    print(f"  {text}")
    print("=" * 60)


def main():
    setup_logging()
    print_header("MOLECULECRAFT SAMPLE RENDERS")
    print(f"\nOutput directory: {OUTPUT_DIR}")
    
    OUTPUT_DIR.mkdir(parents=True, exist_ok=True)
    
    for formula in sample_formulas():
        record = get_sample(formula)
        print_header(f"{record.formula}: {record.name}")
        
        # =====================================================================
        # 2D LEWIS STRUCTURE
        # =====================================================================
        result = layout(record.atoms, record.bonds)
        lengths = [
            np.hypot(*np.subtract(result.position(b.start.id), result.position(b.end.id)))
            for b in result.bonds
        ]
        mean_length = float(np.mean(lengths)) if lengths else 0.0
        
        slug = formula.replace('+', 'plus')
        png_path = OUTPUT_DIR / f"{slug}_lewis.png"
        svg_path = OUTPUT_DIR / f"{slug}_lewis.svg"
        plot_lewis_structure(result, str(png_path), title=record.name)
        svg_path.write_text(lewis_svg(result), encoding='utf-8')
        
        print(f"  Scale:           {result.scale:.3f}")
        print(f"  Mean bond:       {mean_length:.2f} (target {TARGET_BOND_LENGTH:.0f})")
        print(f"  viewBox:         {result.frame.viewbox}")
        print(f"  Saved:           {png_path.name}, {svg_path.name}")
        
        # =====================================================================
        # 3D STRUCTURE
        # =====================================================================
        scene = build_spatial_scene(record.atoms, record.bonds, spin=SpinState())
        html_path = OUTPUT_DIR / f"{slug}_3d.html"
        plot_molecule_3d(scene, outpath=str(html_path), show=False, animate=True)
        
        print(f"  Spheres:         {len(scene.spheres)}")
        print(f"  Cylinders:       {len(scene.cylinders)}")
        print(f"  Saved:           {html_path.name}")
    
    print_header("DONE")


if __name__ == "__main__":
    main()
