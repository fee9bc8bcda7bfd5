# app/main.py
"""
MoleculeCraft - Lewis Structure & VSEPR Geometry Explorer

Type a chemical formula, get its 2D Lewis diagram and an interactive 3D
ball-and-stick model side by side.

Run with:
    streamlit run app/main.py

Set GEMINI_API_KEY (or API_KEY) to use the Gemini provider; without a key
the bundled sample molecules are served.
"""

import logging
import streamlit as st
import sys
from pathlib import Path

# Add app directory to path
sys.path.insert(0, str(Path(__file__).parent))
sys.path.insert(0, str(Path(__file__).parent.parent))

from molcraft.logging_config import setup_logging

from config import CONFIG
from services import ExportService, MoleculeService
from state import (
    get_error,
    get_hovered_atom,
    get_molecule,
    get_request_gate,
    get_view_options,
    clear_molecule,
    set_error,
    set_formula,
    set_hovered_atom,
    set_molecule,
    update_view_options,
)
from components import (
    render_3d_model,
    render_description,
    render_lewis_viewer,
    render_molecule_header,
    render_properties_panel,
)

# Page configuration - must be first Streamlit command
st.set_page_config(
    page_title=CONFIG.app_name,
    page_icon="⚛️",
    layout="wide",
    initial_sidebar_state="collapsed",
)

setup_logging(getattr(logging, CONFIG.log_level, logging.INFO))

# Custom CSS for better styling
st.markdown("""
<style>
    /* Tighter spacing */
    .block-container {
        padding-top: 1rem;
        padding-bottom: 1rem;
    }
    
    /* Metrics styling */
    [data-testid="stMetricValue"] {
        font-size: 1.1rem;
        font-family: monospace;
    }
    
    /* Panel header */
    .panel-header {
        font-size: 0.9rem;
        font-weight: 600;
        color: #94a3b8;
        text-transform: uppercase;
        letter-spacing: 0.05em;
        margin-bottom: 0.5rem;
    }
</style>
""", unsafe_allow_html=True)


@st.cache_resource
def get_service() -> MoleculeService:
    """One service (and provider client) per server process."""
    return MoleculeService()


# =============================================================================
# HEADER & FORMULA INPUT
# =============================================================================

st.title(f"⚛️ {CONFIG.app_name}")
st.caption(f"{CONFIG.app_subtitle} • {CONFIG.model_name}")

st.markdown(
    "Enter a chemical formula to generate its Lewis structure and interactive 3D geometry. "
    "Try one of the examples:"
)

gate = get_request_gate()

example_cols = st.columns(len(CONFIG.example_formulas) + 3)
for col, example in zip(example_cols, CONFIG.example_formulas):
    with col:
        st.button(
            example,
            key=f"example-{example}",
            on_click=set_formula,
            args=(example,),
            use_container_width=True,
        )

with st.form("formula_form"):
    col1, col2 = st.columns([5, 1])
    with col1:
        formula = st.text_input(
            "Formula",
            key="formula",
            placeholder="Enter formula (e.g. CO2)",
            label_visibility="collapsed",
        )
    with col2:
        submitted = st.form_submit_button(
            "Visualize",
            type="primary",
            disabled=gate.in_flight,
            use_container_width=True,
        )

if submitted and formula.strip():
    clear_molecule()
    set_error(None)
    with st.spinner(f"Generating {formula.strip()}..."):
        success, record, error = get_service().generate_gated(formula, gate)
    if success:
        set_molecule(record)
    else:
        set_error(error)

error = get_error()
if error:
    st.error(error)


# =============================================================================
# RESULTS
# =============================================================================

record = get_molecule()

if record is not None:
    options = get_view_options()
    
    st.divider()
    render_molecule_header(record)
    
    col_desc, col_props = st.columns([2, 1])
    with col_desc:
        render_description(record)
    with col_props:
        render_properties_panel(record)
    
    st.divider()
    
    # -------------------------------------------------------------------------
    # VIEWERS
    # -------------------------------------------------------------------------
    col_2d, col_3d = st.columns(2)
    
    with col_2d:
        st.markdown('<p class="panel-header">Lewis Structure (2D)</p>', unsafe_allow_html=True)
        t1, t2 = st.columns(2)
        with t1:
            show_lone_pairs = st.toggle("Lone Pairs", value=options.show_lone_pairs, key="toggle_lone_pairs")
        with t2:
            show_charges = st.toggle("Charges", value=options.show_charges, key="toggle_charges")
        update_view_options(show_lone_pairs=show_lone_pairs, show_charges=show_charges)
        
        picked = render_lewis_viewer(
            record,
            show_lone_pairs=show_lone_pairs,
            show_charges=show_charges,
            highlight_atom=get_hovered_atom(),
            height=CONFIG.lewis_height,
        )
        if picked != get_hovered_atom():
            set_hovered_atom(picked)
            st.rerun()
    
    with col_3d:
        st.markdown('<p class="panel-header">VSEPR Geometry (3D)</p>', unsafe_allow_html=True)
        t1, t2 = st.columns(2)
        with t1:
            show_labels = st.toggle("Labels", value=options.show_labels_3d, key="toggle_labels")
        with t2:
            spin = st.toggle("Spin", value=options.spin, key="toggle_spin")
        update_view_options(show_labels_3d=show_labels, spin=spin)
        
        render_3d_model(record, show_labels=show_labels, spin=spin, height=CONFIG.model_height)
    
    st.divider()
    
    # -------------------------------------------------------------------------
    # EXPORT
    # -------------------------------------------------------------------------
    st.subheader("📥 Export")
    slug = record.formula.replace('+', 'plus').replace('-', 'minus')
    e1, e2, e3, e4 = st.columns(4)
    
    with e1:
        st.download_button(
            label="📦 Molecule (JSON)",
            data=ExportService.generate_molecule_json(record),
            file_name=f"{slug}.json",
            mime="application/json",
            use_container_width=True,
        )
    with e2:
        st.download_button(
            label="🖼️ Lewis Structure (SVG)",
            data=ExportService.generate_lewis_svg(record, show_lone_pairs, show_charges),
            file_name=f"{slug}_lewis.svg",
            mime="image/svg+xml",
            use_container_width=True,
        )
    with e3:
        st.download_button(
            label="🌐 3D Model (HTML)",
            data=ExportService.generate_structure_html(record, show_labels=show_labels),
            file_name=f"{slug}_3d.html",
            mime="text/html",
            use_container_width=True,
        )
    with e4:
        st.download_button(
            label="📄 Summary (TXT)",
            data=ExportService.generate_summary_text(record),
            file_name=f"{slug}_summary.txt",
            mime="text/plain",
            use_container_width=True,
        )


# =============================================================================
# FOOTER
# =============================================================================
st.divider()
st.caption(f"{CONFIG.app_name} v{CONFIG.version} • Lewis structures and VSEPR geometry")
