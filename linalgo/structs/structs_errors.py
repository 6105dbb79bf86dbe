################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of linalgo
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Error types raised by the fixed-size containers."""

from __future__ import annotations


class StructsError(Exception):
    """Base class for container errors."""


class ContainerSizeError(StructsError, ValueError):
    """Raised when a container is constructed with an invalid size.

    Zero-dimensional containers aren't allowed. The constructor raises instead
    of returning an empty object.

    Attributes:
        kind: Human-readable container kind, e.g. "Vector" or "Matrix"
        size: The rejected size value
    """

    def __init__(self, kind: str, size: object) -> None:
        self.kind: str = kind
        self.size: object = size
        super().__init__(f"{kind} size must be at least 1, got {size!r}")
