################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of linalgo
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Tests for container parameters."""

from __future__ import annotations

import dataclasses

import pytest

from linalgo.structs.config.structs_params import COPY_ON_SET
from linalgo.structs.config.structs_params import CopyParams
from linalgo.structs.config.structs_params import StructsParams
from linalgo.structs.config.structs_params import StructsParamsError


def test_defaults_validate() -> None:
    """Default parameters should pass validation."""
    params: StructsParams = StructsParams.defaults()
    params.validate()

    assert params.copy.copy_on_set is COPY_ON_SET is False


def test_default_constructor_matches_defaults() -> None:
    """StructsParams() should equal StructsParams.defaults()."""
    assert StructsParams() == StructsParams.defaults()


def test_replace_copy_on_set() -> None:
    """replace() should swap the copy namespace."""
    params: StructsParams = StructsParams.defaults().replace(
        copy=dataclasses.replace(StructsParams.defaults().copy, copy_on_set=True)
    )
    params.validate()

    assert params.copy.copy_on_set is True


def test_invalid_copy_on_set() -> None:
    """Non-bool copy.copy_on_set should raise an error."""
    copy_params: CopyParams = CopyParams(copy_on_set=1)  # type: ignore[arg-type]
    params: StructsParams = StructsParams(copy=copy_params)
    with pytest.raises(StructsParamsError, match="copy.copy_on_set"):
        params.validate()


def test_params_are_frozen() -> None:
    """Parameters should be immutable."""
    params: StructsParams = StructsParams.defaults()
    with pytest.raises(dataclasses.FrozenInstanceError):
        params.copy.copy_on_set = True  # type: ignore[misc]


def test_as_nested_dict() -> None:
    """as_nested_dict() should flatten nested dataclasses."""
    params: StructsParams = StructsParams(copy=CopyParams(copy_on_set=True))

    assert params.as_nested_dict() == {
        "copy": {"copy_on_set": True},
    }
