# Copyright (c) 2026 Refspace Developers
# SPDX-License-Identifier: MIT

"""
Directional transform parameter holders.

These are the collaborators a ColorSpace stores in its two reference
slots. They carry parameters and a TransformDirection, can produce an
independent editable copy, compare by value, and render as text.

They never evaluate pixels: applying a transform is the job of the
processing layer that consumes a color space.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Union

import numpy as np
from numpy.typing import ArrayLike, NDArray

from refspace.exceptions import InvalidArgumentError
from refspace.schema import TransformDirection


def _as_float_array(values: ArrayLike, shape: tuple[int, ...], what: str) -> NDArray[np.float64]:
    """Convert to a float64 array of an exact shape (flat input is reshaped)."""
    try:
        arr = np.array(values, dtype=np.float64)
    except (TypeError, ValueError) as exc:
        raise InvalidArgumentError(f"{what} must be numeric: {exc}") from exc
    if arr.size != int(np.prod(shape)):
        raise InvalidArgumentError(
            f"{what} requires {int(np.prod(shape))} values, got {arr.size}"
        )
    return arr.reshape(shape)


class Transform:
    """
    Base class for directional transforms.

    Subclasses are dataclasses with a ``direction`` field.
    """

    direction: TransformDirection

    def create_editable_copy(self) -> Transform:
        """Return an independent copy; no parameter storage is shared."""
        return copy.deepcopy(self)

    def __str__(self) -> str:
        # Import here to avoid circular imports
        from refspace.describe import describe_transform
        return describe_transform(self)


@dataclass(eq=False)
class MatrixTransform(Transform):
    """
    Affine 4x4 matrix plus offset (RGBA).

    Attributes:
        matrix: 4x4 float64 matrix, identity by default
        offset: 4 float64 offsets, zero by default
        direction: FORWARD applies the matrix, INVERSE its inverse
    """
    matrix: NDArray[np.float64] = field(default_factory=lambda: np.eye(4))
    offset: NDArray[np.float64] = field(default_factory=lambda: np.zeros(4))
    direction: Union[TransformDirection, str] = TransformDirection.FORWARD

    def __post_init__(self) -> None:
        self.matrix = _as_float_array(self.matrix, (4, 4), "matrix")
        self.offset = _as_float_array(self.offset, (4,), "offset")
        self.direction = TransformDirection.coerce(self.direction)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MatrixTransform):
            return NotImplemented
        return (
            self.direction is other.direction
            and np.array_equal(self.matrix, other.matrix)
            and np.array_equal(self.offset, other.offset)
        )

    __hash__ = None  # type: ignore[assignment]


@dataclass(eq=False)
class ExponentTransform(Transform):
    """Per-channel power function (RGBA exponents, ones by default)."""
    value: NDArray[np.float64] = field(default_factory=lambda: np.ones(4))
    direction: Union[TransformDirection, str] = TransformDirection.FORWARD

    def __post_init__(self) -> None:
        self.value = _as_float_array(self.value, (4,), "exponent")
        self.direction = TransformDirection.coerce(self.direction)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ExponentTransform):
            return NotImplemented
        return self.direction is other.direction and np.array_equal(self.value, other.value)

    __hash__ = None  # type: ignore[assignment]


@dataclass
class LogTransform(Transform):
    """Logarithm of a fixed base; the inverse direction is the antilog."""
    base: float = 2.0
    direction: Union[TransformDirection, str] = TransformDirection.FORWARD

    def __post_init__(self) -> None:
        try:
            base = float(self.base)
        except (TypeError, ValueError) as exc:
            raise InvalidArgumentError(f"Log base must be numeric: {exc}") from exc
        if not base > 0.0:
            raise InvalidArgumentError(f"Log base must be > 0, got {self.base}")
        self.base = base
        self.direction = TransformDirection.coerce(self.direction)


@dataclass
class GroupTransform(Transform):
    """
    Ordered sequence of child transforms.

    An INVERSE group applies the inverse of each child in reverse order;
    children keep their own directions.
    """
    transforms: list[Transform] = field(default_factory=list)
    direction: Union[TransformDirection, str] = TransformDirection.FORWARD

    def __post_init__(self) -> None:
        children = list(self.transforms)
        for child in children:
            if not isinstance(child, Transform):
                raise InvalidArgumentError(
                    f"GroupTransform children must be Transforms, got {type(child).__name__}"
                )
        self.transforms = [child.create_editable_copy() for child in children]
        self.direction = TransformDirection.coerce(self.direction)

    def __len__(self) -> int:
        return len(self.transforms)

    def append(self, transform: Transform) -> None:
        """Add a child; the group owns an independent copy of it."""
        if not isinstance(transform, Transform):
            raise InvalidArgumentError(
                f"GroupTransform children must be Transforms, got {type(transform).__name__}"
            )
        self.transforms.append(transform.create_editable_copy())
