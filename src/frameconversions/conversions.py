"""Conversions of positions and Euler angles between axis conventions.

Rotation sense: `to_quaternion` negates every angle before building its elementary rotation, so a positive angle
turns clockwise when looking down the positive axis. `extract_euler_angles` works on the transposed (inverse)
rotation matrix, which undoes that negation for every rotation order at once.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from .angle_extraction import GIMBAL_LOCK_TOLERANCE, EulerExtractors, EulerResult
from .axes import Axis, AxisSet, parse_axis_set
from .euler_angles import EulerAngles, as_euler_angles
from .logger import get_logger
from .quaternions import IDENTITY_QUAT, axis_angle_to_quat, quat_multiply, quat_to_rotation_matrix

if TYPE_CHECKING:
    from collections.abc import Sequence

    from numpy.typing import ArrayLike, NDArray

    from .coordinate_frame import CoordinateFrame

logger = get_logger(__name__)

# Shared frame in which rotations from different conventions are composed and extracted
REFERENCE_AXES = AxisSet("XYZ")


def convert_position(from_axes: AxisSet | str, to_axes: AxisSet | str, v: ArrayLike) -> NDArray[np.float64]:
    """Convert a position between two spatial axis conventions.

    The value stored along the axis assigned to a logical direction (right, up or forward) in `from_axes` is moved to
    the axis assigned to the same direction in `to_axes`, flipping its sign when the two assignments disagree.

    Args:
        from_axes: Spatial axis set (or descriptor) the position is expressed in.
        to_axes: Spatial axis set (or descriptor) to express the position in.
        v: Position (x, y, z).

    Returns:
        NDArray[np.float64]: The position in `to_axes`.

    Raises:
        ValueError: If `v` does not have exactly three components.

    Example:
        >>> convert_position("+X+Y-Z", "+Y-Z+X", (1, 2, 3))
        array([-3.,  1., -2.])

    """
    from_axes = parse_axis_set(from_axes)
    to_axes = parse_axis_set(to_axes)
    v = np.asarray(v, dtype=np.float64)
    if v.shape != (3,):
        msg = f"Positions must have shape (3,), but got {v.shape}"
        raise ValueError(msg)

    res = np.zeros(3, dtype=np.float64)
    for from_axis, to_axis in zip(from_axes, to_axes, strict=True):
        value = v[from_axis.xyz_index]
        res[to_axis.xyz_index] = value if from_axis.negative == to_axis.negative else -value
    return res


def to_quaternion(order: AxisSet | str, euler: EulerAngles | Sequence[float]) -> NDArray[np.float64]:
    """Compose Euler angles into a quaternion.

    The rotation about `order[0]` is applied first, then `order[1]`, then `order[2]`. Each angle is negated when its
    axis is negative, and then negated again because rotations turn in the negative sense by default.

    Args:
        order: Rotation order (or descriptor), e.g. "-Z-X-Y".
        euler: Angles in degrees, aligned with `order`.

    Returns:
        NDArray[np.float64]: Unit quaternion [qw, qx, qy, qz].

    """
    order = parse_axis_set(order, rotation_order=True)
    euler = as_euler_angles(euler)

    res = IDENTITY_QUAT.copy()
    for axis, angle in zip(order, euler, strict=True):
        effective_angle = -1.0 * (-angle if axis.negative else angle)
        res = quat_multiply(axis_angle_to_quat(axis.xyz_index, np.radians(effective_angle)), res)
    return res


def extract_euler_angles(
    order: AxisSet | str, quat: ArrayLike, tolerance: float = GIMBAL_LOCK_TOLERANCE
) -> EulerAngles:
    """Extract Euler angles in degrees for the given rotation order.

    Inverse of `to_quaternion`: for angles away from gimbal lock, `extract_euler_angles(o, to_quaternion(o, e))`
    returns `e`. At gimbal lock the third angle is zeroed and the result is an equivalent orientation.

    Args:
        order: Rotation order (or descriptor) to extract the angles in.
        quat: Quaternion [qw, qx, qy, qz].
        tolerance: Distance from +-1 below which the middle-angle matrix entry is treated as gimbal lock.

    Returns:
        EulerAngles: Angles in degrees, aligned with `order`.

    """
    order = parse_axis_set(order, rotation_order=True)
    # The inverse rotation carries the negative default rotation sense
    matrix = quat_to_rotation_matrix(quat).T
    angles, result = EulerExtractors[order.name](matrix, tolerance)
    if result is not EulerResult.UNIQUE:
        logger.debug("Non-unique %s decomposition (%s), third angle set to 0", order, result.name)

    angles = np.degrees(angles)
    for i, axis in enumerate(order):
        if axis.negative:
            angles[i] *= -1
    return EulerAngles.from_array(angles)


def convert_euler_order(
    from_order: AxisSet | str,
    to_order: AxisSet | str,
    euler: EulerAngles | Sequence[float],
    tolerance: float = GIMBAL_LOCK_TOLERANCE,
) -> EulerAngles:
    """Re-express angles given in one rotation order as angles in another, within the same axis convention."""
    return extract_euler_angles(to_order, to_quaternion(from_order, euler), tolerance)


def to_equivalent_rotation_order(axes_from: AxisSet | str, axes_to: AxisSet | str, order: AxisSet | str) -> AxisSet:
    """Convert a rotation order given in one spatial convention into the order that yields the same rotation in another.

    Each entry of `order` names an axis of `axes_from`. The entry is moved to the axis that `axes_to` assigns to the
    same logical direction, and its rotation sense flips once for each of the two assignments that is negative.

    Args:
        axes_from: Spatial axis set the rotation order is expressed in.
        axes_to: Spatial axis set to express the rotation order in.
        order: Rotation order to convert.

    Returns:
        AxisSet: The equivalent rotation order in `axes_to`.

    Example:
        >>> to_equivalent_rotation_order("+X+Y-Z", "XYZ", "-Z-X-Y")
        AxisSet('+Z-X-Y')

    """
    axes_from = parse_axis_set(axes_from)
    axes_to = parse_axis_set(axes_to)
    order = parse_axis_set(order, rotation_order=True)

    remapped = []
    for axis in order:
        direction = axes_from.by_name(axis.name)
        negative = (axis.negative != axes_from[direction].negative) != axes_to[direction].negative
        remapped.append(Axis(axes_to[direction].name, negative))

    res = AxisSet.from_axes(*remapped, rotation_order=True)
    logger.debug("Rotation order %s in %s is %s in %s", order, axes_from, res, axes_to)
    return res


def convert_euler_angles(
    frame1: CoordinateFrame,
    frame2: CoordinateFrame,
    euler: EulerAngles | Sequence[float],
    tolerance: float = GIMBAL_LOCK_TOLERANCE,
) -> EulerAngles:
    """Convert Euler angles given in the conventions of `frame1` into the conventions of `frame2`.

    Both rotation orders are first re-expressed in the reference axes "XYZ". The rotation is composed with the
    reference order of `frame1` and extracted with the reference order of `frame2`, so the result has the same
    physical effect and follows the rotation order of `frame2`.

    Args:
        frame1: Frame the angles are expressed in.
        frame2: Frame to express the angles in.
        euler: Angles in degrees, aligned with `frame1.rotation_order`.
        tolerance: Gimbal lock tolerance used during extraction.

    Returns:
        EulerAngles: Angles in degrees, aligned with `frame2.rotation_order`.

    """
    quat = to_quaternion(frame1.reference_order, euler)
    return extract_euler_angles(frame2.reference_order, quat, tolerance)
