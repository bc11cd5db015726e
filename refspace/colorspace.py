# Copyright (c) 2026 Refspace Developers
# SPDX-License-Identifier: MIT

"""
ColorSpace — a named color space linked to the reference space.

A color space owns two optional directional transforms:

    to_reference:    this space --> reference
    from_reference:  reference  --> this space

Most spaces are authored with a single direction. When only one direction
is specified, the other slot holds an inferred copy of it with the
transform direction flipped, so consumers always find both directions.

Slot rules:
- Specifying a direction stores an independent copy of the transform and
  marks that direction as specified.
- The opposite slot is (re)inferred only while it is not itself specified.
- Clearing a direction also clears the opposite slot if that slot was only
  an inferred echo; an explicitly specified opposite stands on its own.
- Transforms are never aliased with objects outside the color space,
  except through get_editable_transform().

Color spaces are plain mutable objects without locking. Use
create_editable_copy() to hand a private copy to another thread.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional, Union

from refspace.exceptions import InvalidArgumentError
from refspace.schema import (
    Allocation,
    BitDepth,
    ColorSpaceDirection,
    TransformDirection,
    allocation_from_string,
    bit_depth_from_string,
    inverse_transform_direction,
)
from refspace.transforms import Transform

logger = logging.getLogger(__name__)

DirectionLike = Union[ColorSpaceDirection, str]


class ColorSpace:
    """
    A named color space and its transforms to/from the reference space.

    Attributes:
        name: Identifier, unique within a containing config (not enforced here)
        family: Free-form grouping label
        description: Free-form text
        bit_depth: Nominal sample precision (default UNKNOWN)
        is_data: True if the space carries non-color data (masks, normals)
            that must bypass color transforms
        allocation: Normalization hint for limited-range processing
            (default UNIFORM)
        allocation_vars: Parameters for the allocation, order-significant
    """

    __slots__ = (
        "_name",
        "_family",
        "_description",
        "_bit_depth",
        "_is_data",
        "_allocation",
        "_allocation_vars",
        "_to_reference",
        "_from_reference",
        "_to_reference_specified",
        "_from_reference_specified",
    )

    def __init__(self) -> None:
        self._name = ""
        self._family = ""
        self._description = ""
        self._bit_depth = BitDepth.UNKNOWN
        self._is_data = False
        self._allocation = Allocation.UNIFORM
        self._allocation_vars: tuple[float, ...] = ()
        self._to_reference: Optional[Transform] = None
        self._from_reference: Optional[Transform] = None
        self._to_reference_specified = False
        self._from_reference_specified = False

    @classmethod
    def create(cls) -> ColorSpace:
        """Create an empty color space."""
        return cls()

    def create_editable_copy(self) -> ColorSpace:
        """
        Return an independent copy of this color space.

        Scalars are copied by value, allocation variables element-wise and
        each transform slot through the transform's own
        create_editable_copy(). Specified flags are preserved as-is; the
        slots are mirrored exactly, so nothing is re-inferred.
        """
        cs = type(self)()
        cs._name = self._name
        cs._family = self._family
        cs._description = self._description
        cs._bit_depth = self._bit_depth
        cs._is_data = self._is_data
        cs._allocation = self._allocation
        cs._allocation_vars = tuple(self._allocation_vars)
        if self._to_reference is not None:
            cs._to_reference = self._to_reference.create_editable_copy()
        if self._from_reference is not None:
            cs._from_reference = self._from_reference.create_editable_copy()
        cs._to_reference_specified = self._to_reference_specified
        cs._from_reference_specified = self._from_reference_specified
        return cs

    # -------------------------------------------------------------------------
    # Scalar fields
    # -------------------------------------------------------------------------

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        self._name = str(value)

    @property
    def family(self) -> str:
        return self._family

    @family.setter
    def family(self, value: str) -> None:
        self._family = str(value)

    @property
    def description(self) -> str:
        return self._description

    @description.setter
    def description(self, value: str) -> None:
        self._description = str(value)

    @property
    def bit_depth(self) -> BitDepth:
        return self._bit_depth

    @bit_depth.setter
    def bit_depth(self, value: Union[BitDepth, str]) -> None:
        self._bit_depth = bit_depth_from_string(value)

    @property
    def is_data(self) -> bool:
        """True if values are non-color data and must not be color transformed."""
        return self._is_data

    @is_data.setter
    def is_data(self, value: bool) -> None:
        self._is_data = bool(value)

    @property
    def allocation(self) -> Allocation:
        return self._allocation

    @allocation.setter
    def allocation(self, value: Union[Allocation, str]) -> None:
        self._allocation = allocation_from_string(value)

    # -------------------------------------------------------------------------
    # Allocation variables
    # -------------------------------------------------------------------------

    @property
    def allocation_num_vars(self) -> int:
        return len(self._allocation_vars)

    @property
    def allocation_vars(self) -> tuple[float, ...]:
        """Allocation parameters; count and meaning depend on the allocation."""
        return self._allocation_vars

    @allocation_vars.setter
    def allocation_vars(self, values: Iterable[float]) -> None:
        self.set_allocation_vars(values)

    def set_allocation_vars(
        self,
        values: Iterable[float],
        count: Optional[int] = None,
    ) -> None:
        """
        Replace the allocation variables.

        Args:
            values: Source values, in order
            count: Number of leading values to keep (default: all of them)

        Raises:
            InvalidArgumentError: if count is negative or larger than the
                number of values supplied, or a value is not numeric.
                The stored variables are left unchanged.
        """
        if isinstance(values, (str, bytes)):
            raise InvalidArgumentError(
                f"Allocation variables must be a sequence of numbers, got {type(values).__name__}"
            )
        try:
            source = [float(v) for v in values]
        except (TypeError, ValueError) as exc:
            raise InvalidArgumentError(f"Allocation variables must be numeric: {exc}") from exc

        if count is None:
            count = len(source)
        if isinstance(count, bool) or not isinstance(count, int):
            raise InvalidArgumentError(f"Allocation variable count must be an int, got {count!r}")
        if count < 0:
            raise InvalidArgumentError(f"Allocation variable count must be >= 0, got {count}")
        if count > len(source):
            raise InvalidArgumentError(
                f"Requested {count} allocation variables, only {len(source)} supplied"
            )
        self._allocation_vars = tuple(source[:count])

    # -------------------------------------------------------------------------
    # Transforms
    # -------------------------------------------------------------------------

    def get_transform(self, direction: DirectionLike) -> Optional[Transform]:
        """
        Transform stored for a direction, specified or inferred.

        The returned object is owned by this color space and must be
        treated as read-only. Use get_editable_transform() to edit in place.

        Raises:
            InvalidArgumentError: for an unrecognized direction
        """
        if ColorSpaceDirection.coerce(direction) is ColorSpaceDirection.TO_REFERENCE:
            return self._to_reference
        return self._from_reference

    def get_editable_transform(self, direction: DirectionLike) -> Optional[Transform]:
        """
        The stored transform itself, for in-place edits.

        No inference runs afterwards: keeping the opposite slot consistent
        with in-place edits is up to the caller.
        """
        return self.get_transform(direction)

    def is_transform_specified(self, direction: DirectionLike) -> bool:
        """True if the direction was set explicitly rather than inferred."""
        if ColorSpaceDirection.coerce(direction) is ColorSpaceDirection.TO_REFERENCE:
            return self._to_reference_specified
        return self._from_reference_specified

    def set_transform(
        self,
        direction: DirectionLike,
        transform: Optional[Transform],
    ) -> None:
        """
        Specify (or clear) the transform for one direction.

        Args:
            direction: Direction being specified (the major direction)
            transform: Transform to store a copy of, or None to clear

        Raises:
            InvalidArgumentError: for an unrecognized direction or a
                non-Transform argument, or a transform copy without a valid
                direction. Nothing is modified, including when the
                transform's own create_editable_copy() raises.
        """
        major = ColorSpaceDirection.coerce(direction)
        if transform is not None and not isinstance(transform, Transform):
            raise InvalidArgumentError(
                f"Expected a Transform or None, got {type(transform).__name__}"
            )
        minor = major.opposite
        minor_specified = self.is_transform_specified(minor)

        if transform is None:
            self._store(major, None, specified=False)
            if not minor_specified:
                self._store(minor, None, specified=False)
            logger.debug(
                "ColorSpace %r: cleared %s (%s kept: %s)",
                self._name, major.value, minor.value, minor_specified,
            )
            return

        major_transform = transform.create_editable_copy()
        major_direction = self._transform_direction(major_transform)
        minor_transform = None
        if not minor_specified:
            minor_transform = transform.create_editable_copy()
            minor_transform.direction = inverse_transform_direction(major_direction)

        self._store(major, major_transform, specified=True)
        if minor_transform is not None:
            self._store(minor, minor_transform, specified=False)
            logger.debug(
                "ColorSpace %r: set %s, inferred %s as %s",
                self._name, major.value, minor.value, minor_transform.direction.value,
            )
        else:
            logger.debug(
                "ColorSpace %r: set %s, %s already specified",
                self._name, major.value, minor.value,
            )

    @staticmethod
    def _transform_direction(transform: Transform) -> TransformDirection:
        """Validated direction of a transform copy."""
        try:
            return TransformDirection.coerce(getattr(transform, "direction", None))
        except InvalidArgumentError as exc:
            raise InvalidArgumentError(
                f"{type(transform).__name__} has no valid direction: {exc}"
            ) from exc

    def _store(
        self,
        direction: ColorSpaceDirection,
        transform: Optional[Transform],
        specified: bool,
    ) -> None:
        if direction is ColorSpaceDirection.TO_REFERENCE:
            self._to_reference = transform
            self._to_reference_specified = specified
        else:
            self._from_reference = transform
            self._from_reference_specified = specified

    # -------------------------------------------------------------------------
    # Comparison and rendering
    # -------------------------------------------------------------------------

    def _key(self) -> tuple:
        return (
            self._name,
            self._family,
            self._description,
            self._bit_depth,
            self._is_data,
            self._allocation,
            self._allocation_vars,
            self._to_reference_specified,
            self._from_reference_specified,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorSpace):
            return NotImplemented
        return (
            self._key() == other._key()
            and self._to_reference == other._to_reference
            and self._from_reference == other._from_reference
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"ColorSpace(name={self._name!r}, family={self._family!r}, "
            f"bit_depth={self._bit_depth.value}, allocation={self._allocation.value})"
        )

    def __str__(self) -> str:
        # Import here to avoid circular imports
        from refspace.describe import describe_colorspace
        return describe_colorspace(self)
