# Copyright (c) 2026 Refspace Developers
# SPDX-License-Identifier: MIT

"""Tests for schema enums and their text helpers."""

import pytest

from refspace.exceptions import InvalidArgumentError, RefSpaceError
from refspace.schema import (
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


class TestColorSpaceDirection:

    def test_opposite(self):
        assert ColorSpaceDirection.TO_REFERENCE.opposite is ColorSpaceDirection.FROM_REFERENCE
        assert ColorSpaceDirection.FROM_REFERENCE.opposite is ColorSpaceDirection.TO_REFERENCE

    def test_coerce_member(self):
        d = ColorSpaceDirection.TO_REFERENCE
        assert ColorSpaceDirection.coerce(d) is d

    @pytest.mark.parametrize("text", ["to_reference", "TO_REFERENCE", "  To_Reference "])
    def test_coerce_text(self, text):
        assert ColorSpaceDirection.coerce(text) is ColorSpaceDirection.TO_REFERENCE

    @pytest.mark.parametrize("bad", ["sideways", "", 0, 1, None, TransformDirection.FORWARD])
    def test_coerce_invalid(self, bad):
        with pytest.raises(InvalidArgumentError, match="ColorSpaceDirection"):
            ColorSpaceDirection.coerce(bad)


class TestTransformDirection:

    def test_inverse_swaps(self):
        assert inverse_transform_direction(TransformDirection.FORWARD) is TransformDirection.INVERSE
        assert inverse_transform_direction(TransformDirection.INVERSE) is TransformDirection.FORWARD

    def test_inverse_of_unknown_is_unknown(self):
        assert inverse_transform_direction(TransformDirection.UNKNOWN) is TransformDirection.UNKNOWN

    def test_inverse_accepts_text(self):
        assert inverse_transform_direction("forward") is TransformDirection.INVERSE

    def test_inverse_invalid(self):
        with pytest.raises(InvalidArgumentError):
            inverse_transform_direction("backward")


class TestTextHelpers:

    @pytest.mark.parametrize("bit_depth", list(BitDepth))
    def test_bit_depth_text_roundtrip(self, bit_depth):
        assert bit_depth_from_string(bit_depth_to_string(bit_depth)) is bit_depth

    @pytest.mark.parametrize("allocation", list(Allocation))
    def test_allocation_text_roundtrip(self, allocation):
        assert allocation_from_string(allocation_to_string(allocation)) is allocation

    def test_bit_depth_tokens(self):
        assert bit_depth_to_string(BitDepth.F16) == "16f"
        assert bit_depth_to_string(BitDepth.UINT10) == "10ui"
        assert bit_depth_from_string("F32") is BitDepth.F32

    def test_unknown_bit_depth(self):
        with pytest.raises(InvalidArgumentError, match="BitDepth"):
            bit_depth_from_string("17f")

    def test_unknown_allocation(self):
        with pytest.raises(InvalidArgumentError, match="Allocation"):
            allocation_from_string("log10")

    def test_bool_to_string(self):
        assert bool_to_string(True) == "true"
        assert bool_to_string(False) == "false"


class TestErrors:

    def test_invalid_argument_hierarchy(self):
        err = InvalidArgumentError("bad")
        assert isinstance(err, RefSpaceError)
        assert isinstance(err, ValueError)
