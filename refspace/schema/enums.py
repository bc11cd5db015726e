# Copyright (c) 2026 Refspace Developers
# SPDX-License-Identifier: MIT

"""
Enumerations shared by color spaces and transforms.

Every enum has string values so it can be parsed from (and rendered to)
config text. Parsing accepts the member itself, its value, or its name,
case-insensitively. Anything else raises InvalidArgumentError.

Direction vocabulary:
- ColorSpaceDirection: which way a color space's transform points
  relative to the reference space (to it or from it).
- TransformDirection: how a single transform is applied (forward or
  inverse of its authored parameters).
"""

from __future__ import annotations

from enum import Enum
from typing import TypeVar, Union

from refspace.exceptions import InvalidArgumentError


_E = TypeVar("_E", bound=Enum)


def _parse_member(enum_cls: type[_E], value: Union[_E, str], what: str) -> _E:
    """Resolve a member, value string or name string to an enum member."""
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        text = value.strip().lower()
        for member in enum_cls:
            if text == member.value or text == member.name.lower():
                return member
    raise InvalidArgumentError(f"Unrecognized {what}: {value!r}")


# =============================================================================
# Directions
# =============================================================================


class ColorSpaceDirection(Enum):
    """Orientation of a color space transform relative to the reference space."""
    TO_REFERENCE = "to_reference"
    FROM_REFERENCE = "from_reference"

    @property
    def opposite(self) -> ColorSpaceDirection:
        """The other orientation."""
        if self is ColorSpaceDirection.TO_REFERENCE:
            return ColorSpaceDirection.FROM_REFERENCE
        return ColorSpaceDirection.TO_REFERENCE

    @classmethod
    def coerce(cls, value: Union[ColorSpaceDirection, str]) -> ColorSpaceDirection:
        """Validate a direction coming from a caller or from parsed text."""
        return _parse_member(cls, value, "ColorSpaceDirection")


class TransformDirection(Enum):
    """How a transform's parameters are applied."""
    FORWARD = "forward"
    INVERSE = "inverse"
    UNKNOWN = "unknown"

    @classmethod
    def coerce(cls, value: Union[TransformDirection, str]) -> TransformDirection:
        """Validate a transform direction coming from a caller or text."""
        return _parse_member(cls, value, "TransformDirection")


def inverse_transform_direction(
    direction: Union[TransformDirection, str],
) -> TransformDirection:
    """
    Flip a transform direction.

    FORWARD and INVERSE swap; UNKNOWN stays UNKNOWN since there is
    nothing to flip.
    """
    direction = TransformDirection.coerce(direction)
    if direction is TransformDirection.FORWARD:
        return TransformDirection.INVERSE
    if direction is TransformDirection.INVERSE:
        return TransformDirection.FORWARD
    return TransformDirection.UNKNOWN


# =============================================================================
# Color space metadata
# =============================================================================


class BitDepth(Enum):
    """Nominal sample precision of a color space's data."""
    UNKNOWN = "unknown"
    UINT8 = "8ui"
    UINT10 = "10ui"
    UINT12 = "12ui"
    UINT14 = "14ui"
    UINT16 = "16ui"
    UINT32 = "32ui"
    F16 = "16f"
    F32 = "32f"


class Allocation(Enum):
    """
    Normalization hint for limited-range processing (e.g. GPU textures).

    UNIFORM: values are scaled linearly between the allocation variables
    LG2: values are log2 encoded before scaling
    """
    UNKNOWN = "unknown"
    UNIFORM = "uniform"
    LG2 = "lg2"


# =============================================================================
# Text helpers
# =============================================================================


def bit_depth_to_string(bit_depth: BitDepth) -> str:
    """Render a bit depth as its config token (e.g. '16f')."""
    return BitDepth(bit_depth).value


def bit_depth_from_string(text: Union[BitDepth, str]) -> BitDepth:
    """Parse a bit depth token. Raises InvalidArgumentError if unknown."""
    return _parse_member(BitDepth, text, "BitDepth")


def allocation_to_string(allocation: Allocation) -> str:
    """Render an allocation as its config token (e.g. 'lg2')."""
    return Allocation(allocation).value


def allocation_from_string(text: Union[Allocation, str]) -> Allocation:
    """Parse an allocation token. Raises InvalidArgumentError if unknown."""
    return _parse_member(Allocation, text, "Allocation")


def bool_to_string(value: bool) -> str:
    return "true" if value else "false"
