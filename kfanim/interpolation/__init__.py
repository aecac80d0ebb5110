"""
Interpolation module for kfanim.

Provides interpolation utilities for:
- Rotations (quaternion SLERP, normalization, xyzw conversion)
- Vector channels (linear, cubic Hermite)
"""

from .quaternion_interpolator import (
    slerp,
    slerp_xyzw,
    normalize_quaternion,
    quaternion_from_xyzw,
    quaternion_to_xyzw,
    linear_interpolate,
    hermite_interpolate,
)

__all__ = [
    # Quaternion interpolation
    'slerp',
    'slerp_xyzw',
    'normalize_quaternion',
    'quaternion_from_xyzw',
    'quaternion_to_xyzw',
    # Vector interpolation
    'linear_interpolate',
    'hermite_interpolate',
]
