# molcraft/viz/viz3d.py
"""
3D VISUALIZATION: Interactive Ball-and-Stick Viewer
===================================================

PURPOSE:
--------
Render a SpatialScene with Plotly:
- Spheres and bond cylinders are tessellated into Mesh3d traces from the
  placements computed by the spatial engine
- Optional element labels
- Optional spin animation: the camera orbits the vertical axis, which looks
  the same as the molecule turning at the spin rate

WHY MESH3D?
-----------
Scatter3d lines cannot show double/triple bonds as separate solid strands
with a real radius. Tessellating each cylinder keeps the offsets computed by
`bond_geometry` visible at every zoom level.
"""

import os
from typing import List, Optional, Tuple

import numpy as np
import plotly.graph_objects as go

from ..animation import SpinState, spin_frames
from ..elements import text_color_for
from ..geometry import quaternion_about_axis, rotate_vector
from ..scene import flatten
from ..spatial import CylinderDescriptor, SpatialScene, SpherePlacement

BACKGROUND = '#0f172a'
BASE_EYE = (0.0, 0.0, 2.2)

Mesh = Tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray, np.ndarray, np.ndarray]


def sphere_mesh(sphere: SpherePlacement, n_lat: int = 12, n_lon: int = 24) -> Mesh:
    """Latitude/longitude triangle mesh (x, y, z, i, j, k) for one sphere."""
    theta = np.linspace(0.0, np.pi, n_lat + 1)
    phi = np.linspace(0.0, 2 * np.pi, n_lon, endpoint=False)
    t, p = np.meshgrid(theta, phi, indexing='ij')

    cx, cy, cz = sphere.position
    x = (cx + sphere.radius * np.sin(t) * np.cos(p)).ravel()
    y = (cy + sphere.radius * np.cos(t)).ravel()
    z = (cz + sphere.radius * np.sin(t) * np.sin(p)).ravel()

    i, j, k = [], [], []
    for a in range(n_lat):
        for b in range(n_lon):
            p00 = a * n_lon + b
            p01 = a * n_lon + (b + 1) % n_lon
            p10 = (a + 1) * n_lon + b
            p11 = (a + 1) * n_lon + (b + 1) % n_lon
            i.extend([p00, p01])
            j.extend([p10, p10])
            k.extend([p01, p11])
    return x, y, z, np.array(i), np.array(j), np.array(k)


def cylinder_mesh(cylinder: CylinderDescriptor, segments: int = 16) -> Mesh:
    """Open-ended triangle mesh (x, y, z, i, j, k) for one bond strand."""
    u = rotate_vector(cylinder.orientation, (1.0, 0.0, 0.0))
    w = rotate_vector(cylinder.orientation, (0.0, 0.0, 1.0))
    bottom, top = cylinder.endpoints

    angles = np.linspace(0.0, 2 * np.pi, segments, endpoint=False)
    ring = cylinder.radius * (np.outer(np.cos(angles), u) + np.outer(np.sin(angles), w))
    points = np.vstack([bottom + ring, top + ring])

    i, j, k = [], [], []
    for s in range(segments):
        n = (s + 1) % segments
        i.extend([s, n])
        j.extend([n, segments + n])
        k.extend([segments + s, segments + s])
    return points[:, 0], points[:, 1], points[:, 2], np.array(i), np.array(j), np.array(k)


def merge_meshes(meshes: List[Mesh]) -> Mesh:
    """Concatenate meshes into one (indices shifted per mesh)."""
    xs, ys, zs, is_, js, ks = [], [], [], [], [], []
    offset = 0
    for x, y, z, i, j, k in meshes:
        xs.append(x)
        ys.append(y)
        zs.append(z)
        is_.append(i + offset)
        js.append(j + offset)
        ks.append(k + offset)
        offset += len(x)
    if not meshes:
        empty = np.array([])
        return empty, empty, empty, empty.astype(int), empty.astype(int), empty.astype(int)
    return tuple(np.concatenate(part) for part in (xs, ys, zs, is_, js, ks))


def camera_eye(state: SpinState) -> dict:
    """Camera eye that shows the molecule turned by `state.angle`."""
    # Turning the molecule by +a looks the same as orbiting the camera by -a
    q = quaternion_about_axis((0.0, 1.0, 0.0), -state.angle)
    x, y, z = rotate_vector(q, BASE_EYE)
    return dict(x=float(x), y=float(y), z=float(z))


def create_molecule_figure(
    scene: SpatialScene,
    show_labels: bool = True,
    height: int = 500,
    animate: bool = False,
    n_frames: int = 120,
    fps: float = 30.0,
) -> go.Figure:
    """
    Create a Plotly figure for a 3D ball-and-stick scene.

    Parameters:
    -----------
    scene : SpatialScene
        Output of `build_spatial_scene()` (its spin, if any, is already
        applied to the geometry)

    show_labels : bool
        Draw element symbols next to the spheres

    height : int
        Figure height in pixels

    animate : bool
        Add camera-orbit frames and Play/Pause buttons

    n_frames, fps : int, float
        Length and rate of the spin animation

    Returns:
    --------
    go.Figure
    """
    fig = go.Figure()
    primitives = flatten(scene.root)
    spheres = [p for p in primitives if isinstance(p, SpherePlacement)]
    cylinders = [p for p in primitives if isinstance(p, CylinderDescriptor)]

    # =========================================================================
    # BONDS
    # =========================================================================

    if cylinders:
        x, y, z, i, j, k = merge_meshes([cylinder_mesh(c) for c in cylinders])
        fig.add_trace(go.Mesh3d(
            x=x, y=y, z=z, i=i, j=j, k=k,
            color=cylinders[0].color,
            flatshading=False,
            lighting=dict(ambient=0.6, diffuse=0.8, specular=0.3, roughness=0.4),
            name='Bonds',
            hoverinfo='skip',
        ))

    # =========================================================================
    # ATOMS
    # =========================================================================

    for sphere in spheres:
        x, y, z, i, j, k = sphere_mesh(sphere)
        fig.add_trace(go.Mesh3d(
            x=x, y=y, z=z, i=i, j=j, k=k,
            color=sphere.color,
            lighting=dict(ambient=0.6, diffuse=0.8, specular=0.4, roughness=0.3),
            name=f"{sphere.element} {sphere.atom_id}",
            hovertext=f"{sphere.element} (atom {sphere.atom_id})",
            hoverinfo='text',
            hoverlabel=dict(bgcolor=sphere.color, font=dict(color=text_color_for(sphere.color))),
        ))

    if show_labels:
        labelled = [s for s in spheres if s.label]
        fig.add_trace(go.Scatter3d(
            x=[s.position[0] for s in labelled],
            y=[s.position[1] + s.radius * 1.6 for s in labelled],
            z=[s.position[2] for s in labelled],
            mode='text',
            text=[s.label for s in labelled],
            textfont=dict(color='white', size=12),
            hoverinfo='skip',
            name='Labels',
        ))

    # =========================================================================
    # LAYOUT
    # =========================================================================

    positions = np.array([s.position for s in spheres]) if spheres else np.zeros((1, 3))
    reach = max(float(np.abs(positions).max()) + 1.0, 2.0)
    axis = dict(range=[-reach, reach], visible=False)
    start = scene.spin if scene.spin is not None else SpinState()

    fig.update_layout(
        scene=dict(
            xaxis=axis, yaxis=axis, zaxis=axis,
            aspectmode='cube',
            bgcolor=BACKGROUND,
            camera=dict(up=dict(x=0, y=1, z=0), eye=camera_eye(SpinState(rate=start.rate))),
        ),
        paper_bgcolor=BACKGROUND,
        margin=dict(l=0, r=0, t=0, b=0),
        height=height,
        showlegend=False,
    )

    if animate:
        frames = []
        # Geometry already carries the starting spin; frames add the rest
        for n, state in enumerate(spin_frames(SpinState(rate=start.rate), n_frames, fps)):
            frames.append(go.Frame(name=str(n), layout=dict(scene_camera=dict(eye=camera_eye(state)))))
        fig.frames = frames
        duration = 1000.0 / fps
        fig.update_layout(updatemenus=[dict(
            type='buttons',
            showactive=False,
            x=0.02, y=0.02, xanchor='left', yanchor='bottom',
            buttons=[
                dict(label='Play', method='animate',
                     args=[None, dict(frame=dict(duration=duration, redraw=True),
                                      transition=dict(duration=0), fromcurrent=True, mode='immediate')]),
                dict(label='Pause', method='animate',
                     args=[[None], dict(frame=dict(duration=0, redraw=False), mode='immediate')]),
            ],
        )])

    return fig


def plot_molecule_3d(
    scene: SpatialScene,
    outpath: Optional[str] = None,
    show: bool = True,
    **kwargs
) -> go.Figure:
    """
    Create and optionally display/save the 3D structure.

    Parameters:
    -----------
    scene : SpatialScene
        See create_molecule_figure()

    outpath : Optional[str]
        If provided, save as HTML file

    show : bool
        Whether to display the figure

    **kwargs:
        Passed to create_molecule_figure()
    """
    fig = create_molecule_figure(scene, **kwargs)

    if outpath:
        os.makedirs(os.path.dirname(outpath) if os.path.dirname(outpath) else '.', exist_ok=True)
        fig.write_html(outpath)

    if show:
        fig.show()

    return fig
