# Copyright (c) 2026 Refspace Developers
# SPDX-License-Identifier: MIT

"""
Refspace -- color spaces linked to a shared reference space.

A ColorSpace holds a transform to the reference space and one from it.
Specify either direction and the other is inferred by inversion until it
is specified explicitly.

Quick start::

    from refspace import ColorSpace, ColorSpaceDirection, LogTransform

    cs = ColorSpace.create()
    cs.name = "lg2"
    cs.set_transform(ColorSpaceDirection.TO_REFERENCE, LogTransform(base=2.0))
    cs.get_transform(ColorSpaceDirection.FROM_REFERENCE)  # inferred inverse
    print(cs)
"""

from __future__ import annotations

__version__ = "1.0.0"

from refspace.colorspace import ColorSpace
from refspace.describe import DescribeConfig, describe_colorspace, describe_transform
from refspace.exceptions import InvalidArgumentError, RefSpaceError
from refspace.schema import (
    Allocation,
    BitDepth,
    ColorSpaceDirection,
    TransformDirection,
    inverse_transform_direction,
)
from refspace.transforms import (
    ExponentTransform,
    GroupTransform,
    LogTransform,
    MatrixTransform,
    Transform,
)

__all__ = [
    # Core API
    "ColorSpace",
    # Enums
    "ColorSpaceDirection",
    "TransformDirection",
    "BitDepth",
    "Allocation",
    "inverse_transform_direction",
    # Transforms
    "Transform",
    "MatrixTransform",
    "ExponentTransform",
    "LogTransform",
    "GroupTransform",
    # Rendering
    "DescribeConfig",
    "describe_colorspace",
    "describe_transform",
    # Errors
    "RefSpaceError",
    "InvalidArgumentError",
    # Version
    "__version__",
]
