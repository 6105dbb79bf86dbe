################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of linalgo
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Structured configuration for fixed-size container value handling."""

from __future__ import annotations

from dataclasses import dataclass
from dataclasses import field
from dataclasses import fields
from dataclasses import replace
from typing import Any


# Duplicate values passed to set() instead of storing them directly
COPY_ON_SET: bool = False


class StructsParamsError(Exception):
    """Raised when container parameters are invalid."""


def _require_bool(value: Any, name: str) -> None:
    """Raise if the value is not a bool."""
    if not isinstance(value, bool):
        raise StructsParamsError(f"{name} must be a bool")


@dataclass(frozen=True)
class CopyParams:
    """Value duplication parameters."""

    # Duplicate values passed to set()
    copy_on_set: bool = COPY_ON_SET


@dataclass(frozen=True)
class StructsParams:
    """Complete configuration tree for the containers."""

    copy: CopyParams = field(default_factory=CopyParams)

    @classmethod
    def defaults(cls) -> StructsParams:
        """Return the default parameter tree."""
        return cls(copy=CopyParams())

    def validate(self) -> None:
        """Validate parameter invariants."""
        _require_bool(self.copy.copy_on_set, "copy.copy_on_set")

    def replace(self, **namespace_overrides: Any) -> StructsParams:
        """Return a modified copy of the parameters."""
        return replace(self, **namespace_overrides)

    def as_nested_dict(self) -> dict[str, Any]:
        """Return a nested dict representation for debugging."""
        return _dataclass_to_dict(self)


def _dataclass_to_dict(value: Any) -> Any:
    """Convert dataclasses into plain Python values."""
    if hasattr(value, "__dataclass_fields__"):
        return {
            item.name: _dataclass_to_dict(getattr(value, item.name))
            for item in fields(value)
        }
    return value
