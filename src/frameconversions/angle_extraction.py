"""Closed-form Euler angle extraction from rotation matrices.

Each extractor assumes the matrix was composed as R = R(a0, u) @ R(a1, v) @ R(a2, w) for its rotation order a0-a1-a2
(right-handed elementary rotations) and returns the angles [u, v, w] in radians together with an `EulerResult`:

| result         | middle angle (Tait-Bryan / proper) | determined from the outer angles |
|----------------+------------------------------------+----------------------------------|
| UNIQUE         | inside (-90, 90) / (0, 180)        | both                             |
| NOT_UNIQUE_DIF | one of +-90 / 180                  | their difference                 |
| NOT_UNIQUE_SUM | the other of +-90 / 0              | their sum                        |

When the decomposition is not unique the third angle is set to 0 and the determined combination is folded into the
first. Matrix entries within `tolerance` of +-1 are treated as gimbal lock, and `asin`/`acos` arguments are clipped,
so drifted matrices never produce NaN.

Formulas follow D. Eberly, "Euler Angle Formulas", Geometric Tools.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

import numpy as np

from .metaclasses import FrozenNamespaceMeta

if TYPE_CHECKING:
    from numpy.typing import ArrayLike, NDArray

GIMBAL_LOCK_TOLERANCE = 1e-10

HALF_PI = np.pi / 2.0


class EulerResult(Enum):
    """Whether the extracted angles are the only decomposition of the matrix."""

    UNIQUE = "unique"
    NOT_UNIQUE_DIF = "not_unique_dif"
    NOT_UNIQUE_SUM = "not_unique_sum"


def _as_rotation_matrix(matrix: ArrayLike) -> NDArray[np.float64]:
    r = np.asarray(matrix, dtype=np.float64)
    if r.shape != (3, 3):
        msg = f"Expected 3x3 matrix, got shape {r.shape}"
        raise ValueError(msg)
    return r


def _angles(first: float, second: float, third: float) -> NDArray[np.float64]:
    return np.array([first, second, third], dtype=np.float64)


def _asin(value: float) -> float:
    return float(np.arcsin(np.clip(value, -1.0, 1.0)))


def _acos(value: float) -> float:
    return float(np.arccos(np.clip(value, -1.0, 1.0)))


# Tait-Bryan orders


def extract_euler_xyz(
    matrix: ArrayLike, tolerance: float = GIMBAL_LOCK_TOLERANCE
) -> tuple[NDArray[np.float64], EulerResult]:
    """Extract [x, y, z] angles for R = Rx @ Ry @ Rz."""
    # +-           -+   +-                                        -+
    # | r00 r01 r02 |   |  cy*cz           -cy*sz            sy    |
    # | r10 r11 r12 | = |  cz*sx*sy+cx*sz   cx*cz-sx*sy*sz  -cy*sx |
    # | r20 r21 r22 |   | -cx*cz*sy+sx*sz   cz*sx+cx*sy*sz   cx*cy |
    # +-           -+   +-                                        -+
    r = _as_rotation_matrix(matrix)
    if r[0, 2] < 1.0 - tolerance:
        if r[0, 2] > -1.0 + tolerance:
            x = np.arctan2(-r[1, 2], r[2, 2])
            z = np.arctan2(-r[0, 1], r[0, 0])
            return _angles(x, _asin(r[0, 2]), z), EulerResult.UNIQUE
        # y = -pi/2, z - x = atan2(r10, r11)
        return _angles(-np.arctan2(r[1, 0], r[1, 1]), -HALF_PI, 0.0), EulerResult.NOT_UNIQUE_DIF
    # y = +pi/2, z + x = atan2(r10, r11)
    return _angles(np.arctan2(r[1, 0], r[1, 1]), HALF_PI, 0.0), EulerResult.NOT_UNIQUE_SUM


def extract_euler_xzy(
    matrix: ArrayLike, tolerance: float = GIMBAL_LOCK_TOLERANCE
) -> tuple[NDArray[np.float64], EulerResult]:
    """Extract [x, z, y] angles for R = Rx @ Rz @ Ry."""
    # +-           -+   +-                                        -+
    # | r00 r01 r02 |   |  cy*cz           -sz      cz*sy          |
    # | r10 r11 r12 | = |  sx*sy+cx*cy*sz   cx*cz  -cy*sx+cx*sy*sz |
    # | r20 r21 r22 |   | -cx*sy+cy*sx*sz   cz*sx   cx*cy+sx*sy*sz |
    # +-           -+   +-                                        -+
    r = _as_rotation_matrix(matrix)
    if r[0, 1] < 1.0 - tolerance:
        if r[0, 1] > -1.0 + tolerance:
            x = np.arctan2(r[2, 1], r[1, 1])
            y = np.arctan2(r[0, 2], r[0, 0])
            return _angles(x, _asin(-r[0, 1]), y), EulerResult.UNIQUE
        # z = +pi/2, y - x = atan2(-r20, r22)
        return _angles(-np.arctan2(-r[2, 0], r[2, 2]), HALF_PI, 0.0), EulerResult.NOT_UNIQUE_DIF
    # z = -pi/2, y + x = atan2(-r20, r22)
    return _angles(np.arctan2(-r[2, 0], r[2, 2]), -HALF_PI, 0.0), EulerResult.NOT_UNIQUE_SUM


def extract_euler_yxz(
    matrix: ArrayLike, tolerance: float = GIMBAL_LOCK_TOLERANCE
) -> tuple[NDArray[np.float64], EulerResult]:
    """Extract [y, x, z] angles for R = Ry @ Rx @ Rz."""
    # +-           -+   +-                                       -+
    # | r00 r01 r02 |   |  cy*cz+sx*sy*sz  cz*sx*sy-cy*sz   cx*sy |
    # | r10 r11 r12 | = |  cx*sz           cx*cz           -sx    |
    # | r20 r21 r22 |   | -cz*sy+cy*sx*sz  cy*cz*sx+sy*sz   cx*cy |
    # +-           -+   +-                                       -+
    r = _as_rotation_matrix(matrix)
    if r[1, 2] < 1.0 - tolerance:
        if r[1, 2] > -1.0 + tolerance:
            y = np.arctan2(r[0, 2], r[2, 2])
            z = np.arctan2(r[1, 0], r[1, 1])
            return _angles(y, _asin(-r[1, 2]), z), EulerResult.UNIQUE
        # x = +pi/2, z - y = atan2(-r01, r00)
        return _angles(-np.arctan2(-r[0, 1], r[0, 0]), HALF_PI, 0.0), EulerResult.NOT_UNIQUE_DIF
    # x = -pi/2, z + y = atan2(-r01, r00)
    return _angles(np.arctan2(-r[0, 1], r[0, 0]), -HALF_PI, 0.0), EulerResult.NOT_UNIQUE_SUM


def extract_euler_yzx(
    matrix: ArrayLike, tolerance: float = GIMBAL_LOCK_TOLERANCE
) -> tuple[NDArray[np.float64], EulerResult]:
    """Extract [y, z, x] angles for R = Ry @ Rz @ Rx."""
    # +-           -+   +-                                       -+
    # | r00 r01 r02 |   |  cy*cz  sx*sy-cx*cy*sz   cx*sy+cy*sx*sz |
    # | r10 r11 r12 | = |  sz     cx*cz           -cz*sx          |
    # | r20 r21 r22 |   | -cz*sy  cy*sx+cx*sy*sz   cx*cy-sx*sy*sz |
    # +-           -+   +-                                       -+
    r = _as_rotation_matrix(matrix)
    if r[1, 0] < 1.0 - tolerance:
        if r[1, 0] > -1.0 + tolerance:
            y = np.arctan2(-r[2, 0], r[0, 0])
            x = np.arctan2(-r[1, 2], r[1, 1])
            return _angles(y, _asin(r[1, 0]), x), EulerResult.UNIQUE
        # z = -pi/2, x - y = atan2(r21, r22)
        return _angles(-np.arctan2(r[2, 1], r[2, 2]), -HALF_PI, 0.0), EulerResult.NOT_UNIQUE_DIF
    # z = +pi/2, x + y = atan2(r21, r22)
    return _angles(np.arctan2(r[2, 1], r[2, 2]), HALF_PI, 0.0), EulerResult.NOT_UNIQUE_SUM


def extract_euler_zxy(
    matrix: ArrayLike, tolerance: float = GIMBAL_LOCK_TOLERANCE
) -> tuple[NDArray[np.float64], EulerResult]:
    """Extract [z, x, y] angles for R = Rz @ Rx @ Ry."""
    # +-           -+   +-                                        -+
    # | r00 r01 r02 |   |  cy*cz-sx*sy*sz  -cx*sz   cz*sy+cy*sx*sz |
    # | r10 r11 r12 | = |  cz*sx*sy+cy*sz   cx*cz  -cy*cz*sx+sy*sz |
    # | r20 r21 r22 |   | -cx*sy            sx      cx*cy          |
    # +-           -+   +-                                        -+
    r = _as_rotation_matrix(matrix)
    if r[2, 1] < 1.0 - tolerance:
        if r[2, 1] > -1.0 + tolerance:
            z = np.arctan2(-r[0, 1], r[1, 1])
            y = np.arctan2(-r[2, 0], r[2, 2])
            return _angles(z, _asin(r[2, 1]), y), EulerResult.UNIQUE
        # x = -pi/2, y - z = atan2(r02, r00)
        return _angles(-np.arctan2(r[0, 2], r[0, 0]), -HALF_PI, 0.0), EulerResult.NOT_UNIQUE_DIF
    # x = +pi/2, y + z = atan2(r02, r00)
    return _angles(np.arctan2(r[0, 2], r[0, 0]), HALF_PI, 0.0), EulerResult.NOT_UNIQUE_SUM


def extract_euler_zyx(
    matrix: ArrayLike, tolerance: float = GIMBAL_LOCK_TOLERANCE
) -> tuple[NDArray[np.float64], EulerResult]:
    """Extract [z, y, x] angles for R = Rz @ Ry @ Rx."""
    # +-           -+   +-                                      -+
    # | r00 r01 r02 |   |  cy*cz  cz*sx*sy-cx*sz  cx*cz*sy+sx*sz |
    # | r10 r11 r12 | = |  cy*sz  cx*cz+sx*sy*sz -cz*sx+cx*sy*sz |
    # | r20 r21 r22 |   | -sy     cy*sx           cx*cy          |
    # +-           -+   +-                                      -+
    r = _as_rotation_matrix(matrix)
    if r[2, 0] < 1.0 - tolerance:
        if r[2, 0] > -1.0 + tolerance:
            z = np.arctan2(r[1, 0], r[0, 0])
            x = np.arctan2(r[2, 1], r[2, 2])
            return _angles(z, _asin(-r[2, 0]), x), EulerResult.UNIQUE
        # y = +pi/2, x - z = atan2(r01, r02)
        return _angles(-np.arctan2(r[0, 1], r[0, 2]), HALF_PI, 0.0), EulerResult.NOT_UNIQUE_DIF
    # y = -pi/2, x + z = atan2(-r01, -r02)
    return _angles(np.arctan2(-r[0, 1], -r[0, 2]), -HALF_PI, 0.0), EulerResult.NOT_UNIQUE_SUM


# Proper Euler orders


def extract_euler_xyx(
    matrix: ArrayLike, tolerance: float = GIMBAL_LOCK_TOLERANCE
) -> tuple[NDArray[np.float64], EulerResult]:
    """Extract [x0, y, x1] angles for R = Rx @ Ry @ Rx."""
    # +-           -+   +-                                                -+
    # | r00 r01 r02 |   |  cy      sy*sx1               sy*cx1             |
    # | r10 r11 r12 | = |  sy*sx0  cx0*cx1-cy*sx0*sx1  -cy*cx1*sx0-cx0*sx1 |
    # | r20 r21 r22 |   | -sy*cx0  cx1*sx0+cy*cx0*sx1   cy*cx0*cx1-sx0*sx1 |
    # +-           -+   +-                                                -+
    r = _as_rotation_matrix(matrix)
    if r[0, 0] < 1.0 - tolerance:
        if r[0, 0] > -1.0 + tolerance:
            x0 = np.arctan2(r[1, 0], -r[2, 0])
            x1 = np.arctan2(r[0, 1], r[0, 2])
            return _angles(x0, _acos(r[0, 0]), x1), EulerResult.UNIQUE
        # y = pi, x1 - x0 = atan2(-r12, r11)
        return _angles(-np.arctan2(-r[1, 2], r[1, 1]), np.pi, 0.0), EulerResult.NOT_UNIQUE_DIF
    # y = 0, x1 + x0 = atan2(-r12, r11)
    return _angles(np.arctan2(-r[1, 2], r[1, 1]), 0.0, 0.0), EulerResult.NOT_UNIQUE_SUM


def extract_euler_xzx(
    matrix: ArrayLike, tolerance: float = GIMBAL_LOCK_TOLERANCE
) -> tuple[NDArray[np.float64], EulerResult]:
    """Extract [x0, z, x1] angles for R = Rx @ Rz @ Rx."""
    # +-           -+   +-                                                -+
    # | r00 r01 r02 |   | cz      -sz*cx1               sz*sx1             |
    # | r10 r11 r12 | = | sz*cx0   cz*cx0*cx1-sx0*sx1  -cx1*sx0-cz*cx0*sx1 |
    # | r20 r21 r22 |   | sz*sx0   cz*cx1*sx0+cx0*sx1   cx0*cx1-cz*sx0*sx1 |
    # +-           -+   +-                                                -+
    r = _as_rotation_matrix(matrix)
    if r[0, 0] < 1.0 - tolerance:
        if r[0, 0] > -1.0 + tolerance:
            x0 = np.arctan2(r[2, 0], r[1, 0])
            x1 = np.arctan2(r[0, 2], -r[0, 1])
            return _angles(x0, _acos(r[0, 0]), x1), EulerResult.UNIQUE
        # z = pi, x1 - x0 = atan2(r21, r22)
        return _angles(-np.arctan2(r[2, 1], r[2, 2]), np.pi, 0.0), EulerResult.NOT_UNIQUE_DIF
    # z = 0, x1 + x0 = atan2(r21, r22)
    return _angles(np.arctan2(r[2, 1], r[2, 2]), 0.0, 0.0), EulerResult.NOT_UNIQUE_SUM


def extract_euler_yxy(
    matrix: ArrayLike, tolerance: float = GIMBAL_LOCK_TOLERANCE
) -> tuple[NDArray[np.float64], EulerResult]:
    """Extract [y0, x, y1] angles for R = Ry @ Rx @ Ry."""
    # +-           -+   +-                                                -+
    # | r00 r01 r02 |   |  cy0*cy1-cx*sy0*sy1  sx*sy0   cx*cy1*sy0+cy0*sy1 |
    # | r10 r11 r12 | = |  sx*sy1              cx      -sx*cy1             |
    # | r20 r21 r22 |   | -cy1*sy0-cx*cy0*sy1  sx*cy0   cx*cy0*cy1-sy0*sy1 |
    # +-           -+   +-                                                -+
    r = _as_rotation_matrix(matrix)
    if r[1, 1] < 1.0 - tolerance:
        if r[1, 1] > -1.0 + tolerance:
            y0 = np.arctan2(r[0, 1], r[2, 1])
            y1 = np.arctan2(r[1, 0], -r[1, 2])
            return _angles(y0, _acos(r[1, 1]), y1), EulerResult.UNIQUE
        # x = pi, y1 - y0 = atan2(r02, r00)
        return _angles(-np.arctan2(r[0, 2], r[0, 0]), np.pi, 0.0), EulerResult.NOT_UNIQUE_DIF
    # x = 0, y1 + y0 = atan2(r02, r00)
    return _angles(np.arctan2(r[0, 2], r[0, 0]), 0.0, 0.0), EulerResult.NOT_UNIQUE_SUM


def extract_euler_yzy(
    matrix: ArrayLike, tolerance: float = GIMBAL_LOCK_TOLERANCE
) -> tuple[NDArray[np.float64], EulerResult]:
    """Extract [y0, z, y1] angles for R = Ry @ Rz @ Ry."""
    # +-           -+   +-                                                -+
    # | r00 r01 r02 |   |  cz*cy0*cy1-sy0*sy1  -sz*cy0  cy1*sy0+cz*cy0*sy1 |
    # | r10 r11 r12 | = |  sz*cy1               cz      sz*sy1             |
    # | r20 r21 r22 |   | -cz*cy1*sy0-cy0*sy1   sz*sy0  cy0*cy1-cz*sy0*sy1 |
    # +-           -+   +-                                                -+
    r = _as_rotation_matrix(matrix)
    if r[1, 1] < 1.0 - tolerance:
        if r[1, 1] > -1.0 + tolerance:
            y0 = np.arctan2(r[2, 1], -r[0, 1])
            y1 = np.arctan2(r[1, 2], r[1, 0])
            return _angles(y0, _acos(r[1, 1]), y1), EulerResult.UNIQUE
        # z = pi, y1 - y0 = atan2(-r20, r22)
        return _angles(-np.arctan2(-r[2, 0], r[2, 2]), np.pi, 0.0), EulerResult.NOT_UNIQUE_DIF
    # z = 0, y1 + y0 = atan2(-r20, r22)
    return _angles(np.arctan2(-r[2, 0], r[2, 2]), 0.0, 0.0), EulerResult.NOT_UNIQUE_SUM


def extract_euler_zxz(
    matrix: ArrayLike, tolerance: float = GIMBAL_LOCK_TOLERANCE
) -> tuple[NDArray[np.float64], EulerResult]:
    """Extract [z0, x, z1] angles for R = Rz @ Rx @ Rz."""
    # +-           -+   +-                                                -+
    # | r00 r01 r02 |   | cz0*cz1-cx*sz0*sz1  -cx*cz1*sz0-cz0*sz1   sx*sz0 |
    # | r10 r11 r12 | = | cz1*sz0+cx*cz0*sz1   cx*cz0*cz1-sz0*sz1  -sx*cz0 |
    # | r20 r21 r22 |   | sx*sz1               sx*cz1               cx     |
    # +-           -+   +-                                                -+
    r = _as_rotation_matrix(matrix)
    if r[2, 2] < 1.0 - tolerance:
        if r[2, 2] > -1.0 + tolerance:
            z0 = np.arctan2(r[0, 2], -r[1, 2])
            z1 = np.arctan2(r[2, 0], r[2, 1])
            return _angles(z0, _acos(r[2, 2]), z1), EulerResult.UNIQUE
        # x = pi, z1 - z0 = atan2(-r01, r00)
        return _angles(-np.arctan2(-r[0, 1], r[0, 0]), np.pi, 0.0), EulerResult.NOT_UNIQUE_DIF
    # x = 0, z1 + z0 = atan2(-r01, r00)
    return _angles(np.arctan2(-r[0, 1], r[0, 0]), 0.0, 0.0), EulerResult.NOT_UNIQUE_SUM


def extract_euler_zyz(
    matrix: ArrayLike, tolerance: float = GIMBAL_LOCK_TOLERANCE
) -> tuple[NDArray[np.float64], EulerResult]:
    """Extract [z0, y, z1] angles for R = Rz @ Ry @ Rz."""
    # +-           -+   +-                                                -+
    # | r00 r01 r02 |   |  cy*cz0*cz1-sz0*sz1  -cz1*sz0-cy*cz0*sz1  sy*cz0 |
    # | r10 r11 r12 | = |  cy*cz1*sz0+cz0*sz1   cz0*cz1-cy*sz0*sz1  sy*sz0 |
    # | r20 r21 r22 |   | -sy*cz1               sy*sz1              cy     |
    # +-           -+   +-                                                -+
    r = _as_rotation_matrix(matrix)
    if r[2, 2] < 1.0 - tolerance:
        if r[2, 2] > -1.0 + tolerance:
            z0 = np.arctan2(r[1, 2], r[0, 2])
            z1 = np.arctan2(r[2, 1], -r[2, 0])
            return _angles(z0, _acos(r[2, 2]), z1), EulerResult.UNIQUE
        # y = pi, z1 - z0 = atan2(r10, r11)
        return _angles(-np.arctan2(r[1, 0], r[1, 1]), np.pi, 0.0), EulerResult.NOT_UNIQUE_DIF
    # y = 0, z1 + z0 = atan2(r10, r11)
    return _angles(np.arctan2(r[1, 0], r[1, 1]), 0.0, 0.0), EulerResult.NOT_UNIQUE_SUM


class EulerExtractors(metaclass=FrozenNamespaceMeta):
    """Extractor for each of the twelve unsigned rotation orders.

    Supports dot access, dict-style access (`EulerExtractors["ZXY"]`), membership tests and iteration over the names.
    """

    XYZ = staticmethod(extract_euler_xyz)
    XZY = staticmethod(extract_euler_xzy)
    YXZ = staticmethod(extract_euler_yxz)
    YZX = staticmethod(extract_euler_yzx)
    ZXY = staticmethod(extract_euler_zxy)
    ZYX = staticmethod(extract_euler_zyx)
    XYX = staticmethod(extract_euler_xyx)
    XZX = staticmethod(extract_euler_xzx)
    YXY = staticmethod(extract_euler_yxy)
    YZY = staticmethod(extract_euler_yzy)
    ZXZ = staticmethod(extract_euler_zxz)
    ZYZ = staticmethod(extract_euler_zyz)
