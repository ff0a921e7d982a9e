"""Signed axes and axis sets.

An `AxisSet` is an ordered triple of signed axes. It describes either a spatial convention, where the three entries
are the physical axes assigned to the logical (right, up, forward) directions, or a rotation order, where the entries
are the axes rotated about first, second and third.

| descriptor | spatial meaning                      | rotation-order meaning                   |
|------------+--------------------------------------+------------------------------------------|
| "+X+Y-Z"   | right=+X, up=+Y, forward=-Z          | about +X, then +Y, then -Z               |
| "-Y+Z+X"   | right=-Y, up=+Z, forward=+X          | about -Y, then +Z, then +X               |
| "XYX"      | invalid (X assigned twice)           | proper Euler order, about X, Y, X        |
"""

from __future__ import annotations

import itertools
import re
from collections.abc import Iterator
from dataclasses import dataclass

from .errors import FormatError, RedundancyError

AXIS_NAMES = ("X", "Y", "Z")

_DESCRIPTOR_PATTERN = re.compile(r"([+-]?[XYZ])([+-]?[XYZ])([+-]?[XYZ])")


@dataclass(frozen=True)
class Axis:
    """One of the canonical axes X, Y or Z, with a sign."""

    name: str
    negative: bool = False

    def __post_init__(self) -> None:
        """Normalize the axis name and reject anything but X, Y and Z."""
        name = str(self.name).upper()
        if name not in AXIS_NAMES:
            msg = f"Axis name must be one of {', '.join(AXIS_NAMES)}, but got '{self.name}'"
            raise FormatError(msg)
        object.__setattr__(self, "name", name)
        object.__setattr__(self, "negative", bool(self.negative))

    @property
    def xyz_index(self) -> int:
        """Index of the axis in an (x, y, z) vector."""
        return AXIS_NAMES.index(self.name)

    def __neg__(self) -> Axis:
        return Axis(self.name, not self.negative)

    def to_string(self, include_sign: bool = False) -> str:
        """Render the axis as "X", or "+X" / "-X" when `include_sign` is set."""
        if not include_sign:
            return self.name
        return ("-" if self.negative else "+") + self.name

    def __str__(self) -> str:
        return self.to_string(include_sign=True)


class AxisSet:
    """Ordered triple of signed axes.

    The middle axis name never matches either outer name. Spatial axis sets additionally require all three names to
    be distinct, while rotation orders may repeat the first name as the third (proper Euler orders).

    Instances are immutable and compare equal when their three axes are equal positionally.
    """

    __slots__ = ("_axes", "_index_by_name", "_rotation_order")

    def __init__(self, descriptor: str, rotation_order: bool = False) -> None:
        """Parse an axis set from a descriptor such as "+X+Y-Z", "XY-Z" or "-z-x-y".

        Args:
            descriptor: Three concatenated `[+-]?[XYZ]` tokens, case-insensitive. The sign defaults to positive.
            rotation_order: Whether the set describes a rotation order, which allows the first and third axis to
                share a name.

        Raises:
            FormatError: If the descriptor is not made of exactly three signed axis tokens.
            RedundancyError: If an axis name repeats where the mode does not allow it.

        """
        self._init(_parse_descriptor(descriptor), rotation_order)

    @classmethod
    def from_axes(cls, first: Axis, second: Axis, third: Axis, rotation_order: bool = True) -> AxisSet:
        """Build an axis set from three axes, validating the same invariants as the parser."""
        axis_set = cls.__new__(cls)
        axis_set._init((first, second, third), rotation_order)
        return axis_set

    def _init(self, axes: tuple[Axis, Axis, Axis], rotation_order: bool) -> None:
        _validate(axes, rotation_order)
        self._axes = axes
        self._rotation_order = rotation_order
        # A repeated outer name resolves to its last position
        self._index_by_name = {axis.name: i for i, axis in enumerate(axes)}

    @property
    def is_rotation_order(self) -> bool:
        """Whether the set was validated as a rotation order."""
        return self._rotation_order

    @property
    def is_proper_euler(self) -> bool:
        """Whether the first and third axes share a name, e.g. X-Y-X."""
        return self._axes[0].name == self._axes[2].name

    @property
    def name(self) -> str:
        """Unsigned axis letters, e.g. "ZXY"."""
        return self.to_string(include_sign=False)

    def by_index(self, index: int) -> Axis:
        """Axis at position `index` (0, 1 or 2)."""
        return self._axes[index]

    def by_name(self, axis_name: str) -> int:
        """Position of the axis named `axis_name`, case-insensitive.

        Raises:
            KeyError: If no axis of the set has that name, which can only happen for proper Euler rotation orders.

        """
        try:
            return self._index_by_name[axis_name.upper()]
        except KeyError:
            msg = f"Axis '{axis_name}' is not part of {self!r}"
            raise KeyError(msg) from None

    index_of = by_name

    def __getitem__(self, index: int) -> Axis:
        return self._axes[index]

    def __iter__(self) -> Iterator[Axis]:
        return iter(self._axes)

    def __len__(self) -> int:
        return 3

    def to_string(self, include_sign: bool = False) -> str:
        """Concatenate the three axes, e.g. "XYZ" or "+X+Y-Z"."""
        return "".join(axis.to_string(include_sign) for axis in self._axes)

    def __str__(self) -> str:
        return self.to_string(include_sign=True)

    def __repr__(self) -> str:
        return f"{type(self).__name__}('{self.to_string(include_sign=True)}')"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AxisSet):
            return NotImplemented
        return self._axes == other._axes

    def __hash__(self) -> int:
        return hash(self._axes)


def _parse_descriptor(descriptor: str) -> tuple[Axis, Axis, Axis]:
    match = _DESCRIPTOR_PATTERN.fullmatch(descriptor.upper()) if isinstance(descriptor, str) else None
    if match is None:
        msg = f"AxisSet '{descriptor}' must be formed of three axis descriptions: '[+-][XYZ]'"
        raise FormatError(msg)
    return tuple(Axis(token[-1], token.startswith("-")) for token in match.groups())  # type: ignore[return-value]


def _validate(axes: tuple[Axis, ...], rotation_order: bool) -> None:
    if len(axes) != 3 or not all(isinstance(axis, Axis) for axis in axes):
        msg = f"An AxisSet is made of exactly three Axis values, but got {axes}"
        raise FormatError(msg)
    first, second, third = (axis.name for axis in axes)
    descriptor = "".join(axis.to_string(include_sign=True) for axis in axes)
    if second in (first, third):
        msg = f"The second axis in AxisSet '{descriptor}' cannot be redundant"
        raise RedundancyError(msg)
    if not rotation_order and first == third:
        msg = f"AxisSet '{descriptor}' must not have redundant axis names"
        raise RedundancyError(msg)


def parse_axis_set(descriptor: str | AxisSet, rotation_order: bool = False) -> AxisSet:
    """Get an `AxisSet` from a descriptor string, or check an existing one against the requested mode.

    Args:
        descriptor: A descriptor string such as "+X+Y-Z", or an `AxisSet`.
        rotation_order: Whether a rotation order is expected.

    Returns:
        AxisSet: The parsed (or given) axis set.

    Raises:
        FormatError: If the descriptor is malformed.
        RedundancyError: If the axis names violate the uniqueness rules of the mode.

    """
    if isinstance(descriptor, AxisSet):
        if descriptor.is_rotation_order == rotation_order:
            return descriptor
        return AxisSet.from_axes(*descriptor, rotation_order=rotation_order)
    return AxisSet(descriptor, rotation_order=rotation_order)


def all_axis_sets(rotation_order: bool = False) -> list[AxisSet]:
    """Enumerate every valid signed axis set.

    Args:
        rotation_order: Enumerate rotation orders (12 orders x 8 sign patterns) instead of spatial conventions
            (6 permutations x 8 sign patterns).

    Returns:
        list[AxisSet]: 96 rotation orders or 48 spatial conventions.

    """
    axis_sets = []
    for names in itertools.product(AXIS_NAMES, repeat=3):
        if names[1] in (names[0], names[2]) or (not rotation_order and names[0] == names[2]):
            continue
        for signs in itertools.product((False, True), repeat=3):
            axes = tuple(Axis(name, negative) for name, negative in zip(names, signs, strict=True))
            axis_sets.append(AxisSet.from_axes(*axes, rotation_order=rotation_order))
    return axis_sets
