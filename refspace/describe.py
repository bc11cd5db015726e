# Copyright (c) 2026 Refspace Developers
# SPDX-License-Identifier: MIT

"""
Diagnostic text rendering for color spaces and transforms.

Output is for humans and logs, not a config format: it is not parsed back.

Example::

    <ColorSpace name=lnf, family=log, bitDepth=16f, isData=false, allocation=lg2>
    	lnf --> Reference
    <LogTransform direction=forward, base=2>
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

import numpy as np

from refspace.schema import (
    ColorSpaceDirection,
    allocation_to_string,
    bit_depth_to_string,
    bool_to_string,
)
from refspace.transforms import (
    ExponentTransform,
    GroupTransform,
    LogTransform,
    MatrixTransform,
    Transform,
)

if TYPE_CHECKING:
    from refspace.colorspace import ColorSpace


@dataclass(frozen=True)
class DescribeConfig:
    """Configuration for color space rendering."""

    # Prefix for the direction label lines
    indent: str = "\t"

    # Also list transforms that were inferred rather than specified
    include_inferred: bool = False


def _format_array(values: np.ndarray) -> str:
    return " ".join(f"{v:g}" for v in np.ravel(values))


def describe_transform(transform: Transform) -> str:
    """Render a transform as a single line."""
    parts = [f"direction={transform.direction.value}"]
    if isinstance(transform, MatrixTransform):
        parts.append(f"matrix={_format_array(transform.matrix)}")
        parts.append(f"offset={_format_array(transform.offset)}")
    elif isinstance(transform, ExponentTransform):
        parts.append(f"value={_format_array(transform.value)}")
    elif isinstance(transform, LogTransform):
        parts.append(f"base={transform.base:g}")
    elif isinstance(transform, GroupTransform):
        children = ", ".join(describe_transform(t) for t in transform.transforms)
        parts.append(f"transforms=[{children}]")
    return f"<{type(transform).__name__} " + ", ".join(parts) + ">"


def describe_colorspace(
    colorspace: ColorSpace,
    config: Optional[DescribeConfig] = None,
) -> str:
    """
    Render a color space header plus its specified transforms.

    Only directions flagged as specified are listed by default, so a
    color space with no specified transform renders as the header alone
    even if inferred transforms exist internally.

    Args:
        colorspace: The color space to render
        config: Rendering settings (uses defaults if None)

    Returns:
        Multi-line string
    """
    cfg = config or DescribeConfig()
    name = colorspace.name

    lines = [
        f"<ColorSpace name={name}, "
        f"family={colorspace.family}, "
        f"bitDepth={bit_depth_to_string(colorspace.bit_depth)}, "
        f"isData={bool_to_string(colorspace.is_data)}, "
        f"allocation={allocation_to_string(colorspace.allocation)}>"
    ]

    labels = {
        ColorSpaceDirection.TO_REFERENCE: f"{name} --> Reference",
        ColorSpaceDirection.FROM_REFERENCE: f"Reference --> {name}",
    }
    for direction, label in labels.items():
        transform = colorspace.get_transform(direction)
        if colorspace.is_transform_specified(direction):
            lines.append(f"{cfg.indent}{label}")
        elif cfg.include_inferred and transform is not None:
            lines.append(f"{cfg.indent}{label} (inferred)")
        else:
            continue
        lines.append(describe_transform(transform))

    return "\n".join(lines)
