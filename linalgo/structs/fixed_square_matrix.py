################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of linalgo
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

from __future__ import annotations

import logging
from typing import Any
from typing import Generic
from typing import List
from typing import Optional
from typing import TypeVar
from typing import Union

from linalgo.structs.config.structs_params import StructsParams
from linalgo.structs.slot import EMPTY_SLOT
from linalgo.structs.slot import duplicate
from linalgo.structs.slot import index_in_range
from linalgo.structs.slot import is_empty
from linalgo.structs.slot import validate_size


LOGGER: logging.Logger = logging.getLogger(__name__)

T = TypeVar("T")
D = TypeVar("D")


class FixedSquareMatrix(Generic[T]):
    """A square matrix with a fixed size.

    Responsibility:
        Own a fixed size x size grid of element slots indexed by
        (row, column). Every slot starts empty.

    Public API:
        - size()
        - get(row, column, default=None)
        - set(row, column, value)
        - set_all_to(value)

    Data contract:
        - size is an int >= 1 and is both the row and column count.
        - Storage is a list of size rows, each its own list of size slots.

    Edge cases:
        - The row is checked first, then the column within that row. Either
          index out of range reads as absent, the same as an empty slot.
        - A write with any index out of range is silently ignored. There are
          no partial writes.
        - Constructing with size 0 raises ContainerSizeError.
    """

    def __init__(self, size: int, params: Optional[StructsParams] = None) -> None:
        """Create an empty size x size matrix.

        Raises:
            ContainerSizeError: if size is less than 1
            StructsParamsError: if params are invalid
        """
        self._size: int = validate_size("Matrix", size)

        self._params: StructsParams = (
            params if params is not None else StructsParams.defaults()
        )
        self._params.validate()

        # Each row is a distinct list
        self._data: List[List[Any]] = [
            [EMPTY_SLOT] * self._size for _ in range(self._size)
        ]

        LOGGER.debug("Created %dx%d matrix", self._size, self._size)

    def size(self) -> int:
        """Return the size of the matrix."""
        return self._size

    def get(
        self, row: int, column: int, default: Optional[D] = None
    ) -> Union[T, D, None]:
        """Return the value at the given position.

        Returns default if nothing is stored there or if the position is not
        valid.
        """
        if not index_in_range(row, self._size):
            return default

        row_data: List[Any] = self._data[int(row)]
        if not index_in_range(column, len(row_data)):
            return default

        entry: Any = row_data[int(column)]
        if is_empty(entry):
            return default

        return entry

    def set(self, row: int, column: int, value: T) -> None:
        """Store value at the given position. Invalid positions are ignored."""
        if not index_in_range(row, self._size) or not index_in_range(
            column, self._size
        ):
            LOGGER.debug(
                "Ignoring write to (%r, %r) of %dx%d matrix",
                row,
                column,
                self._size,
                self._size,
            )
            return

        if self._params.copy.copy_on_set:
            value = duplicate(value)

        self._data[int(row)][int(column)] = value

    def set_all_to(self, value: T) -> None:
        """Store an independent copy of value in every position."""
        # Copy before assigning so a failing copy leaves every slot untouched
        rows: List[List[Any]] = [
            [duplicate(value) for _ in range(self._size)] for _ in range(self._size)
        ]
        for row_data, entries in zip(self._data, rows):
            row_data[:] = entries

        LOGGER.debug("Filled all %d matrix slots", self._size * self._size)

    def __repr__(self) -> str:
        rows: str = "; ".join(
            " ".join("_" if is_empty(entry) else repr(entry) for entry in row_data)
            for row_data in self._data
        )
        return f"FixedSquareMatrix(size={self._size}, [{rows}])"
