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


class FixedVector(Generic[T]):
    """A vector with a fixed size.

    Responsibility:
        Own a fixed-length run of element slots indexed by a non-negative
        integer. Every slot starts empty.

    Public API:
        - size()
        - get(position, default=None)
        - set(position, value)
        - set_all_to(value)

    Data contract:
        - size is an int >= 1 and never changes.
        - The backing list always holds exactly size slots.

    Edge cases:
        - Reading an out-of-range position returns the same absent result as
          reading an empty slot.
        - Writing an out-of-range position is silently ignored.
        - Constructing with size 0 raises ContainerSizeError.

    Example:
        >>> vector: FixedVector[int] = FixedVector(5)
        >>> vector.set_all_to(0)
        >>> vector.get(4)
        0
        >>> vector.get(5) is None
        True
    """

    def __init__(self, size: int, params: Optional[StructsParams] = None) -> None:
        """Create an empty vector of the given size.

        Raises:
            ContainerSizeError: if size is less than 1
            StructsParamsError: if params are invalid
        """
        self._size: int = validate_size("Vector", size)

        self._params: StructsParams = (
            params if params is not None else StructsParams.defaults()
        )
        self._params.validate()

        self._data: List[Any] = [EMPTY_SLOT] * self._size

        LOGGER.debug("Created vector of size %d", self._size)

    def size(self) -> int:
        """Return the size of the vector."""
        return self._size

    def get(
        self, position: int, default: Optional[D] = None
    ) -> Union[T, D, None]:
        """Return the value at the given position.

        Returns default if nothing is stored there or if the position is not
        valid.
        """
        if not index_in_range(position, self._size):
            return default

        entry: Any = self._data[int(position)]
        if is_empty(entry):
            return default

        return entry

    def set(self, position: int, value: T) -> None:
        """Store value at the given position. Invalid positions are ignored."""
        if not index_in_range(position, self._size):
            LOGGER.debug(
                "Ignoring write to position %r of vector of size %d",
                position,
                self._size,
            )
            return

        if self._params.copy.copy_on_set:
            value = duplicate(value)

        self._data[int(position)] = value

    def set_all_to(self, value: T) -> None:
        """Store an independent copy of value in every position."""
        # Copy before assigning so a failing copy leaves every slot untouched
        entries: List[Any] = [duplicate(value) for _ in range(self._size)]
        self._data[:] = entries

        LOGGER.debug("Filled all %d vector slots", self._size)

    def __repr__(self) -> str:
        entries: str = ", ".join(
            "_" if is_empty(entry) else repr(entry) for entry in self._data
        )
        return f"FixedVector(size={self._size}, [{entries}])"
