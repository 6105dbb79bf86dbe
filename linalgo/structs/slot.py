################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of linalgo
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Element-slot semantics shared by the fixed-size containers.

A slot holds either a value or nothing. Nothing is represented by the
EMPTY_SLOT sentinel so that None, zero and every other value of the element
type remain storable.
"""

from __future__ import annotations

import copy
import numbers
from typing import Any
from typing import TypeVar

from linalgo.structs.structs_errors import ContainerSizeError


T = TypeVar("T")


class _EmptySlot:
    """Sentinel type marking a slot that holds no value."""

    _instance: _EmptySlot | None = None

    def __new__(cls) -> _EmptySlot:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "EMPTY_SLOT"

    def __copy__(self) -> _EmptySlot:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> _EmptySlot:
        return self


EMPTY_SLOT: _EmptySlot = _EmptySlot()


def is_empty(entry: Any) -> bool:
    """Return True if the slot entry holds no value."""
    return entry is EMPTY_SLOT


def validate_size(kind: str, size: Any) -> int:
    """Return the size as an int, raising ContainerSizeError if it is invalid.

    Accepts any integral type except bool. Sizes below 1 are rejected.
    """
    if isinstance(size, bool) or not isinstance(size, numbers.Integral):
        raise ContainerSizeError(kind, size)
    size_int: int = int(size)
    if size_int < 1:
        raise ContainerSizeError(kind, size)
    return size_int


def index_in_range(index: Any, size: int) -> bool:
    """Return True if index addresses a slot in [0, size).

    Negative indices never wrap around, and non-integral indices are never in
    range.
    """
    if isinstance(index, bool) or not isinstance(index, numbers.Integral):
        return False
    return 0 <= int(index) < size


def duplicate(value: T) -> T:
    """Return an independent copy of value, nested contents included."""
    return copy.deepcopy(value)
