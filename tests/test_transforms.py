# Copyright (c) 2026 Refspace Developers
# SPDX-License-Identifier: MIT

"""Tests for transform parameter holders."""

import numpy as np
import pytest

from refspace.exceptions import InvalidArgumentError
from refspace.schema import TransformDirection
from refspace.transforms import (
    ExponentTransform,
    GroupTransform,
    LogTransform,
    MatrixTransform,
)


class TestMatrixTransform:

    def test_defaults(self):
        t = MatrixTransform()
        np.testing.assert_array_equal(t.matrix, np.eye(4))
        np.testing.assert_array_equal(t.offset, np.zeros(4))
        assert t.direction is TransformDirection.FORWARD

    def test_flat_matrix_reshaped(self):
        t = MatrixTransform(matrix=list(range(16)))
        assert t.matrix.shape == (4, 4)
        assert t.matrix[1, 0] == 4.0

    def test_wrong_size_raises(self):
        with pytest.raises(InvalidArgumentError, match="requires 16 values"):
            MatrixTransform(matrix=np.eye(3))

    def test_non_numeric_raises(self):
        with pytest.raises(InvalidArgumentError, match="numeric"):
            MatrixTransform(offset=["a", "b", "c", "d"])

    def test_direction_from_text(self):
        t = MatrixTransform(direction="inverse")
        assert t.direction is TransformDirection.INVERSE

    def test_invalid_direction(self):
        with pytest.raises(InvalidArgumentError):
            MatrixTransform(direction="sideways")

    def test_equality(self):
        a = MatrixTransform(matrix=np.diag([2.0, 2.0, 2.0, 1.0]))
        b = MatrixTransform(matrix=np.diag([2.0, 2.0, 2.0, 1.0]))
        assert a == b
        b.direction = TransformDirection.INVERSE
        assert a != b

    def test_input_array_not_aliased(self):
        m = np.eye(4)
        t = MatrixTransform(matrix=m)
        m[0, 0] = 7.0
        assert t.matrix[0, 0] == 1.0

    def test_editable_copy_is_independent(self):
        a = MatrixTransform(offset=[0.1, 0.2, 0.3, 0.0])
        b = a.create_editable_copy()
        assert b == a
        assert b is not a
        assert b.offset is not a.offset
        b.offset[0] = 0.5
        assert a.offset[0] == 0.1

    def test_unhashable(self):
        with pytest.raises(TypeError):
            hash(MatrixTransform())


class TestExponentTransform:

    def test_defaults(self):
        np.testing.assert_array_equal(ExponentTransform().value, np.ones(4))

    def test_wrong_size_raises(self):
        with pytest.raises(InvalidArgumentError, match="exponent"):
            ExponentTransform(value=[2.2, 2.2, 2.2])

    def test_not_equal_to_other_kind(self):
        assert ExponentTransform() != MatrixTransform()


class TestLogTransform:

    def test_base_coerced_to_float(self):
        t = LogTransform(base=10)
        assert t.base == 10.0
        assert isinstance(t.base, float)

    @pytest.mark.parametrize("base", [0.0, -2.0])
    def test_non_positive_base_raises(self, base):
        with pytest.raises(InvalidArgumentError, match="> 0"):
            LogTransform(base=base)

    def test_non_numeric_base_raises(self):
        with pytest.raises(InvalidArgumentError, match="numeric"):
            LogTransform(base="two")

    def test_equality(self):
        assert LogTransform(base=2.0) == LogTransform(base=2.0)
        assert LogTransform(base=2.0) != LogTransform(base=2.0, direction="inverse")

    def test_str(self):
        assert str(LogTransform(base=10.0)) == "<LogTransform direction=forward, base=10>"


class TestGroupTransform:

    def test_children_copied_on_construction(self):
        child = MatrixTransform()
        group = GroupTransform([child])
        child.matrix[0, 0] = 3.0
        assert group.transforms[0].matrix[0, 0] == 1.0

    def test_append_copies(self):
        group = GroupTransform()
        child = LogTransform()
        group.append(child)
        assert len(group) == 1
        assert group.transforms[0] == child
        assert group.transforms[0] is not child

    def test_non_transform_child_raises(self):
        with pytest.raises(InvalidArgumentError, match="children"):
            GroupTransform([LogTransform(), "gamma"])
        with pytest.raises(InvalidArgumentError):
            GroupTransform().append(2.2)

    def test_editable_copy_is_deep(self):
        group = GroupTransform([MatrixTransform(), ExponentTransform()])
        copy = group.create_editable_copy()
        assert copy == group
        copy.transforms[0].matrix[0, 0] = 5.0
        assert group.transforms[0].matrix[0, 0] == 1.0
        assert copy != group
