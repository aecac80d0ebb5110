"""
Quaternion and vector interpolation utilities for keyframe animation.

Provides:
- SLERP for rotations (shortest path, unit result)
- Linear and cubic Hermite interpolation for vector channels
- Conversion between glTF-style [x, y, z, w] arrays and quaternion objects
"""

import numpy as np
from typing import Union
from numpy.typing import NDArray
import quaternion

# Below this cosine the slerp weights are computed from the angle; above it
# plain normalized lerp is used since sin(theta) approaches zero.
SLERP_DOT_THRESHOLD = 0.9995

# Norm below which a quaternion is considered zero and cannot be normalized.
MIN_QUATERNION_NORM = 1e-12


def quaternion_from_xyzw(values: Union[NDArray[np.float64], list]) -> quaternion.quaternion:
    """
    Build a quaternion object from an [x, y, z, w] sequence.

    Keyframe rotation data is stored in glTF order (scalar last) while
    numpy-quaternion uses scalar-first construction.
    """
    x, y, z, w = (float(v) for v in values[:4])
    return quaternion.quaternion(w, x, y, z)


def quaternion_to_xyzw(q: quaternion.quaternion) -> NDArray[np.float64]:
    """Return [x, y, z, w] components of a quaternion object."""
    return np.array([q.x, q.y, q.z, q.w], dtype=np.float64)


def normalize_quaternion(q: quaternion.quaternion) -> quaternion.quaternion:
    """
    Return the unit quaternion pointing in the same direction as q.

    Raises:
        ValueError: If q has (near) zero norm
    """
    norm = q.abs()  # norm() in numpy-quaternion is the squared magnitude
    if not np.isfinite(norm) or norm < MIN_QUATERNION_NORM:
        raise ValueError(f"Cannot normalize zero quaternion {q}")
    return q / norm


def slerp(q1: Union[NDArray[np.float64], quaternion.quaternion],
          q2: Union[NDArray[np.float64], quaternion.quaternion],
          t: float) -> NDArray[np.float64]:
    """
    Perform Spherical Linear Interpolation (SLERP) between two quaternions.

    Parameters:
    -----------
    q1, q2 : array-like or quaternion
        Input quaternions in scalar-first format [w, x, y, z] or quaternion objects
    t : float
        Interpolation parameter between 0 and 1
        t = 0 returns q1, t = 1 returns q2 (or -q2 if that is the shorter arc)

    Returns:
    --------
    array
        Interpolated unit quaternion in scalar-first format [w, x, y, z]

    Raises:
    -------
    ValueError
        If either input (or the interpolated result) has zero or non-finite norm
    """
    if isinstance(q1, quaternion.quaternion):
        q1 = quaternion.as_float_array(q1)
    if isinstance(q2, quaternion.quaternion):
        q2 = quaternion.as_float_array(q2)

    q1 = np.asarray(q1, dtype=np.float64)
    q2 = np.asarray(q2, dtype=np.float64)

    # Ensure unit quaternions
    q1 = _unit(q1)
    q2 = _unit(q2)

    dot_product = np.sum(q1 * q2)

    # Take the shorter path around the hypersphere
    if dot_product < 0:
        q2 = -q2
        dot_product = -dot_product

    if dot_product > SLERP_DOT_THRESHOLD:
        return _unit((1 - t) * q1 + t * q2)

    theta = np.arccos(np.clip(dot_product, -1.0, 1.0))
    sin_theta = np.sin(theta)

    ratio1 = np.sin((1 - t) * theta) / sin_theta
    ratio2 = np.sin(t * theta) / sin_theta

    return _unit(ratio1 * q1 + ratio2 * q2)


def _unit(q: NDArray[np.float64]) -> NDArray[np.float64]:
    norm = np.linalg.norm(q)
    if not np.isfinite(norm) or norm < MIN_QUATERNION_NORM:
        raise ValueError(f"Cannot normalize zero quaternion {q}")
    return q / norm


def slerp_xyzw(v1: NDArray[np.float64], v2: NDArray[np.float64], t: float) -> quaternion.quaternion:
    """SLERP between two [x, y, z, w] rotations, returning a unit quaternion object."""
    q1 = quaternion_from_xyzw(v1)
    q2 = quaternion_from_xyzw(v2)
    w, x, y, z = slerp(q1, q2, t)
    return quaternion.quaternion(w, x, y, z)


def linear_interpolate(val1: NDArray[np.float64], val2: NDArray[np.float64], t: float) -> NDArray[np.float64]:
    """
    Component-wise linear interpolation between two vectors.

    Parameters:
    -----------
    val1, val2 : array
        Values to interpolate between
    t : float
        Interpolation parameter between 0 and 1

    Returns:
    --------
    array
        (1 - t) * val1 + t * val2
    """
    return (1 - t) * val1 + t * val2


def hermite_interpolate(p0: NDArray[np.float64],
                        m0: NDArray[np.float64],
                        p1: NDArray[np.float64],
                        m1: NDArray[np.float64],
                        t: float) -> NDArray[np.float64]:
    """
    Evaluate a cubic Hermite curve.

    Parameters:
    -----------
    p0, p1 : array
        Start and end points
    m0, m1 : array
        Start and end tangents, already scaled by the segment duration
    t : float
        Normalized position within the segment, 0 to 1

    Returns:
    --------
    array
        (2t^3 - 3t^2 + 1) p0 + (t^3 - 2t^2 + t) m0 + (-2t^3 + 3t^2) p1 + (t^3 - t^2) m1
    """
    t2 = t * t
    t3 = t2 * t
    return ((2.0 * t3 - 3.0 * t2 + 1.0) * p0
            + (t3 - 2.0 * t2 + t) * m0
            + (-2.0 * t3 + 3.0 * t2) * p1
            + (t3 - t2) * m1)
