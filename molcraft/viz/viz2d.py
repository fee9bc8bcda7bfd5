# molcraft/viz/viz2d.py
"""
2D VISUALIZATION: Lewis Structure Renderers
===========================================

PURPOSE:
--------
Draw a planar scene tree two ways:
- create_lewis_figure(): interactive Plotly figure (hover shows element,
  charge and lone pairs per atom)
- plot_lewis_structure(): static Matplotlib export (.png, .svg, .pdf)

Both renderers only read `flatten(scene)` output and the view frame; all
geometry decisions were already made by the layout engine.

UNITS:
------
Output units are treated as typographic points (1 unit = 1/72 inch), so a
14-unit atom circle and a 14 pt element label line up in both renderers.
The y axis points down, as in SVG.
"""

import io
import os
from typing import Dict, Optional

import matplotlib.pyplot as plt
from matplotlib.patches import Circle as CirclePatch
import plotly.graph_objects as go

from ..planar import PlanarLayout, build_planar_scene
from ..scene import Circle, Segment, Text, flatten

UNITS_PER_INCH = 72.0
BACKGROUND = '#ffffff'


def _hover_text(result: PlanarLayout) -> Dict[int, str]:
    texts = {}
    for normalized in result.atoms:
        atom = normalized.atom
        texts.setdefault(
            atom.id,
            f"<b>{atom.element}</b> | Charge: {atom.charge} | Lone Pairs: {atom.lone_pairs}",
        )
    return texts


def create_lewis_figure(
    result: PlanarLayout,
    show_lone_pairs: bool = True,
    show_charges: bool = True,
    highlight_atom: Optional[int] = None,
    height: int = 500,
) -> go.Figure:
    """
    Create a Plotly figure of the Lewis diagram.

    Parameters:
    -----------
    result : PlanarLayout
        Output of `layout()`

    show_lone_pairs, show_charges : bool
        Decoration toggles

    highlight_atom : Optional[int]
        Atom id drawn with a highlighted outline

    height : int
        Figure height in pixels

    Returns:
    --------
    go.Figure
        Bonds and atom discs as layout shapes, labels as a text trace, and an
        invisible marker trace per atom carrying hover text and the atom id
        (customdata) for selection callbacks.
    """
    scene = build_planar_scene(result, show_lone_pairs, show_charges, highlight_atom)
    frame = result.frame

    shapes = []
    text_x, text_y, text_labels, text_colors, text_sizes = [], [], [], [], []

    for primitive in flatten(scene):
        if isinstance(primitive, Segment):
            shapes.append(dict(
                type='line',
                x0=primitive.start[0], y0=primitive.start[1],
                x1=primitive.end[0], y1=primitive.end[1],
                line=dict(color=primitive.color, width=primitive.width),
                layer='below',
            ))
        elif isinstance(primitive, Circle):
            cx, cy = primitive.center
            r = primitive.radius
            shapes.append(dict(
                type='circle',
                x0=cx - r, y0=cy - r, x1=cx + r, y1=cy + r,
                fillcolor=primitive.fill,
                line=dict(color=primitive.stroke or primitive.fill, width=primitive.stroke_width),
                layer='above',
            ))
        elif isinstance(primitive, Text):
            text_x.append(primitive.position[0])
            text_y.append(primitive.position[1])
            text_labels.append(f"<b>{primitive.text}</b>" if primitive.bold else primitive.text)
            text_colors.append(primitive.color)
            text_sizes.append(primitive.size)

    fig = go.Figure()

    fig.add_trace(go.Scatter(
        x=text_x, y=text_y,
        mode='text',
        text=text_labels,
        textfont=dict(color=text_colors, size=text_sizes, family='Inter, sans-serif'),
        hoverinfo='skip',
        showlegend=False,
    ))

    hover = _hover_text(result)
    fig.add_trace(go.Scatter(
        x=[a.x for a in result.atoms],
        y=[a.y for a in result.atoms],
        mode='markers',
        marker=dict(size=24, color='rgba(0,0,0,0)'),
        customdata=[a.id for a in result.atoms],
        hovertext=[hover[a.id] for a in result.atoms],
        hoverinfo='text',
        name='Atoms',
        showlegend=False,
    ))

    fig.update_layout(
        shapes=shapes,
        xaxis=dict(range=[frame.x, frame.x_max], visible=False),
        # Reversed range: y grows downward like the SVG frame
        yaxis=dict(range=[frame.y_max, frame.y], visible=False, scaleanchor='x', scaleratio=1),
        plot_bgcolor=BACKGROUND,
        paper_bgcolor=BACKGROUND,
        margin=dict(l=0, r=0, t=0, b=0),
        height=height,
        hovermode='closest',
        showlegend=False,
    )
    return fig


def draw_lewis_structure(
    result: PlanarLayout,
    show_lone_pairs: bool = True,
    show_charges: bool = True,
    title: Optional[str] = None,
):
    """
    Draw the diagram on a new Matplotlib figure sized to the view frame.

    Returns:
    --------
    (fig, ax)
        Caller is responsible for saving/closing the figure
    """
    scene = build_planar_scene(result, show_lone_pairs, show_charges)
    frame = result.frame

    fig, ax = plt.subplots(figsize=(frame.width / UNITS_PER_INCH, frame.height / UNITS_PER_INCH))
    fig.patch.set_facecolor(BACKGROUND)

    for primitive in flatten(scene):
        if isinstance(primitive, Segment):
            ax.plot(
                [primitive.start[0], primitive.end[0]],
                [primitive.start[1], primitive.end[1]],
                color=primitive.color,
                linewidth=primitive.width,
                solid_capstyle='round',
                zorder=1,
            )
        elif isinstance(primitive, Circle):
            ax.add_patch(CirclePatch(
                primitive.center,
                primitive.radius,
                facecolor=primitive.fill,
                edgecolor=primitive.stroke or primitive.fill,
                linewidth=primitive.stroke_width,
                zorder=2,
            ))
        elif isinstance(primitive, Text):
            ax.text(
                primitive.position[0], primitive.position[1], primitive.text,
                ha='center', va='center',
                color=primitive.color,
                fontsize=primitive.size,
                fontweight='bold' if primitive.bold else 'normal',
                zorder=3,
            )

    ax.set_xlim(frame.x, frame.x_max)
    ax.set_ylim(frame.y_max, frame.y)
    ax.set_aspect('equal')
    ax.axis('off')
    if title:
        ax.set_title(title)
    fig.subplots_adjust(left=0, right=1, bottom=0, top=1)
    return fig, ax


def plot_lewis_structure(
    result: PlanarLayout,
    outpath: str,
    show_lone_pairs: bool = True,
    show_charges: bool = True,
    title: Optional[str] = None,
) -> None:
    """
    Save the Lewis diagram to `outpath` (.png, .svg or .pdf by extension).

    The directory is created if needed.
    """
    fig, _ax = draw_lewis_structure(result, show_lone_pairs, show_charges, title)
    os.makedirs(os.path.dirname(outpath) if os.path.dirname(outpath) else '.', exist_ok=True)
    fig.savefig(outpath, dpi=150, facecolor=BACKGROUND)
    plt.close(fig)


def lewis_svg(
    result: PlanarLayout,
    show_lone_pairs: bool = True,
    show_charges: bool = True,
) -> str:
    """The diagram as SVG text (for downloads and the REST API)."""
    fig, _ax = draw_lewis_structure(result, show_lone_pairs, show_charges)
    buffer = io.StringIO()
    fig.savefig(buffer, format='svg', facecolor=BACKGROUND)
    plt.close(fig)
    return buffer.getvalue()

