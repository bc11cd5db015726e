# Copyright (c) 2026 Refspace Developers
# SPDX-License-Identifier: MIT

"""
Schema enumerations for color spaces and transforms.

All enums carry string values that double as config tokens.
"""

from refspace.schema.enums import (
    Allocation,
    BitDepth,
    ColorSpaceDirection,
    TransformDirection,
    allocation_from_string,
    allocation_to_string,
    bit_depth_from_string,
    bit_depth_to_string,
    bool_to_string,
    inverse_transform_direction,
)

__all__ = [
    # Directions
    "ColorSpaceDirection",
    "TransformDirection",
    "inverse_transform_direction",
    # Metadata
    "BitDepth",
    "Allocation",
    # Text helpers
    "bit_depth_to_string",
    "bit_depth_from_string",
    "allocation_to_string",
    "allocation_from_string",
    "bool_to_string",
]
