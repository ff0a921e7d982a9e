"""Minimal quaternion helpers.

Conventions:
- Quaternions: [qw, qx, qy, qz] where qw is the scalar part
- Rotation matrices: 3x3 numpy arrays acting on column vectors, v' = R @ v
- Angles: radians
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray

IDENTITY_QUAT = np.array([1.0, 0.0, 0.0, 0.0], dtype=np.float64)


def axis_angle_to_quat(xyz_index: int, angle: float) -> NDArray[np.float64]:
    """Quaternion of a right-handed rotation by `angle` radians about the canonical axis `xyz_index` (0, 1, 2)."""
    q = np.zeros(4, dtype=np.float64)
    q[0] = np.cos(angle / 2.0)
    q[1 + xyz_index] = np.sin(angle / 2.0)
    return q


def quat_multiply(q: ArrayLike, r: ArrayLike) -> NDArray[np.float64]:
    """Hamilton product q * r, i.e. the rotation r followed by q."""
    qw, qx, qy, qz = np.asarray(q, dtype=np.float64)
    rw, rx, ry, rz = np.asarray(r, dtype=np.float64)
    return np.array(
        [
            qw * rw - qx * rx - qy * ry - qz * rz,
            qw * rx + qx * rw + qy * rz - qz * ry,
            qw * ry - qx * rz + qy * rw + qz * rx,
            qw * rz + qx * ry - qy * rx + qz * rw,
        ],
        dtype=np.float64,
    )


def quat_to_rotation_matrix(q: ArrayLike) -> NDArray[np.float64]:
    """Convert a quaternion to a 3x3 rotation matrix.

    The quaternion is normalized first, so accumulated drift from repeated products does not leak into the matrix.

    Raises:
        ValueError: If q is not a non-zero 4-element array.

    """
    q = np.asarray(q, dtype=np.float64)
    if q.shape != (4,):
        msg = f"Expected 4-element quaternion, got shape {q.shape}"
        raise ValueError(msg)
    norm = np.linalg.norm(q)
    if norm == 0.0:
        msg = "Cannot build a rotation from a zero quaternion"
        raise ValueError(msg)

    qw, qx, qy, qz = q / norm

    return np.array(
        [
            [
                1.0 - 2.0 * (qy * qy + qz * qz),
                2.0 * (qx * qy - qw * qz),
                2.0 * (qx * qz + qw * qy),
            ],
            [
                2.0 * (qx * qy + qw * qz),
                1.0 - 2.0 * (qx * qx + qz * qz),
                2.0 * (qy * qz - qw * qx),
            ],
            [
                2.0 * (qx * qz - qw * qy),
                2.0 * (qy * qz + qw * qx),
                1.0 - 2.0 * (qx * qx + qy * qy),
            ],
        ],
        dtype=np.float64,
    )


def rotations_equivalent(q1: ArrayLike, q2: ArrayLike, atol: float = 1e-4) -> bool:
    """Check whether two quaternions move the canonical basis vectors to the same place.

    This compares orientations rather than quaternion components, so q and -q are equivalent.
    """
    # The columns of the rotation matrix are the rotated basis vectors
    return bool(np.allclose(quat_to_rotation_matrix(q1), quat_to_rotation_matrix(q2), rtol=0.0, atol=atol))
