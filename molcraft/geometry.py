# molcraft/geometry.py
"""
Vector and orientation primitives shared by the 2D and 3D engines.

Quaternions are numpy arrays ordered (x, y, z, w), matching the convention of
most scene renderers. All functions are pure and never return NaN for
degenerate input: `normalize` returns None instead of dividing by ~0.
"""

from typing import Optional, Sequence

import numpy as np

EPSILON = 1e-9

IDENTITY_QUATERNION = np.array([0.0, 0.0, 0.0, 1.0])


def as_vector(values: Sequence[float]) -> np.ndarray:
    return np.asarray(values, dtype=float)


def norm(v: Sequence[float]) -> float:
    return float(np.linalg.norm(as_vector(v)))


def normalize(v: Sequence[float], eps: float = EPSILON) -> Optional[np.ndarray]:
    """Unit vector along `v`, or None if `v` is (near) zero."""
    v = as_vector(v)
    length = np.linalg.norm(v)
    if not np.isfinite(length) or length <= eps:
        return None
    return v / length


def perpendicular_2d(direction: Sequence[float]) -> Optional[np.ndarray]:
    """
    Left-hand unit normal (-dy, dx) of a 2D direction.

    Returns None for a zero-length direction.
    """
    unit = normalize(direction)
    if unit is None:
        return None
    return np.array([-unit[1], unit[0]])


def quaternion_multiply(q1: Sequence[float], q2: Sequence[float]) -> np.ndarray:
    """Hamilton product q1 * q2 (apply q2 first, then q1)."""
    x1, y1, z1, w1 = q1
    x2, y2, z2, w2 = q2
    return np.array([
        w1 * x2 + x1 * w2 + y1 * z2 - z1 * y2,
        w1 * y2 - x1 * z2 + y1 * w2 + z1 * x2,
        w1 * z2 + x1 * y2 - y1 * x2 + z1 * w2,
        w1 * w2 - x1 * x2 - y1 * y2 - z1 * z2,
    ])


def quaternion_about_axis(axis: Sequence[float], angle: float) -> np.ndarray:
    """Rotation of `angle` radians about `axis` (right-hand rule)."""
    unit = normalize(axis)
    if unit is None:
        return IDENTITY_QUATERNION.copy()
    half = 0.5 * angle
    s = np.sin(half)
    return np.array([unit[0] * s, unit[1] * s, unit[2] * s, np.cos(half)])


def quaternion_from_unit_vectors(u: Sequence[float], v: Sequence[float]) -> np.ndarray:
    """
    Shortest-arc rotation taking unit vector `u` onto unit vector `v`.

    Parameters:
    -----------
    u : Sequence[float]
        Source direction (unit length)

    v : Sequence[float]
        Target direction (unit length)

    Returns:
    --------
    np.ndarray
        Unit quaternion (x, y, z, w)

    Notes:
    ------
    When u and v are antiparallel every axis perpendicular to u gives a valid
    180 degree rotation. We pick one deterministically (from u's components)
    so the same bond always gets the same orientation.
    """
    u = as_vector(u)
    v = as_vector(v)
    r = float(np.dot(u, v)) + 1.0

    if r < EPSILON:
        # Antiparallel: rotate 180 degrees about an axis orthogonal to u
        r = 0.0
        if abs(u[0]) > abs(u[2]):
            q = np.array([-u[1], u[0], 0.0, r])
        else:
            q = np.array([0.0, -u[2], u[1], r])
    else:
        c = np.cross(u, v)
        q = np.array([c[0], c[1], c[2], r])

    return q / np.linalg.norm(q)


def rotate_vector(q: Sequence[float], v: Sequence[float]) -> np.ndarray:
    """Apply quaternion `q` to vector `v`."""
    qv = np.asarray(q[:3], dtype=float)
    w = float(q[3])
    v = as_vector(v)
    t = 2.0 * np.cross(qv, v)
    return v + w * t + np.cross(qv, t)


def is_finite(*values) -> bool:
    """True if every scalar/array argument is free of NaN and Infinity."""
    return all(np.all(np.isfinite(np.asarray(value, dtype=float))) for value in values)
