"""Geometry helpers shared by the scene and animation modules."""

from .geometry_utils import build_trs_matrix, is_unit_quaternion

__all__ = ['build_trs_matrix', 'is_unit_quaternion']
