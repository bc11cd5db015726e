# Copyright (c) 2026 Refspace Developers
# SPDX-License-Identifier: MIT

"""Custom exceptions for refspace."""


class RefSpaceError(Exception):
    """Base exception for all refspace errors."""


class InvalidArgumentError(RefSpaceError, ValueError):
    """An argument is outside the accepted set (direction, enum text, sizes)."""
