from .angle_extraction import GIMBAL_LOCK_TOLERANCE, EulerExtractors, EulerResult
from .axes import Axis, AxisSet, all_axis_sets, parse_axis_set
from .conversions import (
    convert_euler_angles,
    convert_euler_order,
    convert_position,
    extract_euler_angles,
    to_equivalent_rotation_order,
    to_quaternion,
)
from .coordinate_frame import CoordinateFrame, CoordinateFrameConverter
from .errors import AxisSetError, FormatError, RedundancyError
from .euler_angles import EulerAngles
from .logger import get_logger, setup_prettier_logger
from .metaclasses import FrozenNamespaceMeta

__all__ = [
    "GIMBAL_LOCK_TOLERANCE",
    "Axis",
    "AxisSet",
    "AxisSetError",
    "CoordinateFrame",
    "CoordinateFrameConverter",
    "EulerAngles",
    "EulerExtractors",
    "EulerResult",
    "FormatError",
    "FrozenNamespaceMeta",
    "RedundancyError",
    "all_axis_sets",
    "convert_euler_angles",
    "convert_euler_order",
    "convert_position",
    "extract_euler_angles",
    "get_logger",
    "parse_axis_set",
    "setup_prettier_logger",
    "to_equivalent_rotation_order",
    "to_quaternion",
]
